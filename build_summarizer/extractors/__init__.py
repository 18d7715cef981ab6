"""Name-based extraction utilities for trace nodes."""

from .addon_extractor import AddonExtractor

__all__ = ["AddonExtractor"]
