#!/usr/bin/env python3
"""
Build Summarizer - Command Line Entry Point
"""

import json
import sys

import ijson

from build_summarizer import BuildSummarizer, MalformedTraceError, SummaryConfig

SUMMARY_FILE = 'summary.json'


def write_summary(summary, file_path=SUMMARY_FILE):
    """Persist the summary as indented JSON and echo it to the console."""
    text = json.dumps(summary, indent=2)
    with open(file_path, 'w') as f:
        f.write(text)
    print(text)


def main(argv=None):
    import argparse
    parser = argparse.ArgumentParser(
        description='Summarize a broccoli-viz build trace into the most expensive plugins.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  python summarize_build.py broccoli-viz.0.json
  python summarize_build.py broccoli-viz.0.json --cutoff 0.1

The summary is written to {SUMMARY_FILE} in the current directory.
        """
    )
    parser.add_argument('input_file', help='Path to the trace JSON file')
    parser.add_argument('--cutoff', type=float, default=SummaryConfig.DEFAULT_CUTOFF,
                        help='Minimum fraction of total time a plugin needs to be listed (default: %(default)s)')
    args = parser.parse_args(argv)

    try:
        summarizer = BuildSummarizer(cutoff=args.cutoff)
        summary = summarizer.process_trace_file(args.input_file)
    except FileNotFoundError:
        print(f"Error: File '{args.input_file}' not found.")
        return 1
    except (MalformedTraceError, ijson.JSONError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    write_summary(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
