"""
Pytest configuration and shared fixtures for build summarizer tests.
"""
import json
import pytest


def _node(_id, name, boundary=False, stats=None, children=()):
    return {
        "_id": _id,
        "id": {"name": name, "broccoliNode": boundary},
        "stats": stats or {},
        "children": list(children),
    }


@pytest.fixture
def make_node():
    """Return a helper that builds one raw trace node."""
    return _node


@pytest.fixture
def build_metadata():
    """Sample summary.build object from the host build tool."""
    return {
        "type": "rebuild",
        "count": 3,
        "outputChangedFiles": ["assets/app.js"],
        "primaryFile": "app/router.js",
        "changedFiles": ["app/router.js", "app/app.js"],
        "changedFileCount": 2,
    }


@pytest.fixture
def single_plugin_trace():
    """A lone plugin node with 10ms of self time and no children."""
    return {
        "nodes": [
            _node(1, "TreeMerger", boundary=True, stats={"time": {"self": 10_000_000}}),
        ]
    }


@pytest.fixture
def nested_trace(build_metadata):
    """Non-plugin root, one plugin child and a grandchild doing file reads."""
    return {
        "nodes": [
            _node(1, "Builder", stats={"time": {"self": 0}}, children=[2]),
            _node(2, "PluginA", boundary=True, stats={"time": {"self": 5_000_000}}, children=[3]),
            _node(3, "readTree", stats={
                "time": {"self": 2_000_000},
                "fs": {"readFileSync": {"count": 3, "time": 1_000_000}},
            }),
        ],
        "summary": {"build": build_metadata},
    }


@pytest.fixture
def funnel_trace():
    """Two plugin instances sharing the name Funnel."""
    return {
        "nodes": [
            _node(1, "Builder", stats={"time": {"self": 1_000_000}}, children=[2, 3]),
            _node(2, "Funnel", boundary=True, stats={"time": {"self": 3_000_000}}),
            _node(3, "Funnel", boundary=True, stats={"time": {"self": 4_000_000}}),
        ]
    }


@pytest.fixture
def plugin_tree_trace():
    """
    Plugins nested inside each other, with I/O and addon ancestors.

        1 Builder
        |-- 2 BroccoliMergeTrees (plugin)                    1ms
        |   |-- 3 Addon#treeFor (ember-cli-babel - addon)    0.5ms
        |   |   `-- 4 Babel (plugin)                         20ms, read 4ms x2, write 1ms x1
        |   |       `-- 5 transpile                          6ms, close 0.5ms x4
        |   `-- 6 /app/node_modules/ember-power-select/addon 0.5ms
        |       `-- 7 Funnel (plugin)                        2ms, stat 0.25ms x10
        `-- 8 Funnel (plugin)                                3ms
    """
    return {
        "nodes": [
            _node(1, "Builder", children=[2, 8]),
            _node(2, "BroccoliMergeTrees", boundary=True, stats={"time": {"self": 1_000_000}}, children=[3, 6]),
            _node(3, "Addon#treeFor (ember-cli-babel - addon)", stats={"time": {"self": 500_000}}, children=[4]),
            _node(4, "Babel", boundary=True, stats={
                "time": {"self": 20_000_000},
                "fs": {
                    "readFileSync": {"count": 2, "time": 4_000_000},
                    "writeFileSync": {"count": 1, "time": 1_000_000},
                },
            }, children=[5]),
            _node(5, "transpile", stats={
                "time": {"self": 6_000_000},
                "fs": {"closeSync": {"count": 4, "time": 500_000}},
            }),
            _node(6, "/app/node_modules/ember-power-select/addon", stats={"time": {"self": 500_000}}, children=[7]),
            _node(7, "Funnel", boundary=True, stats={
                "time": {"self": 2_000_000},
                "fs": {"statSync": {"count": 10, "time": 250_000}},
            }),
            _node(8, "Funnel", boundary=True, stats={"time": {"self": 3_000_000}}),
        ],
        "summary": {"build": {"type": "initial", "count": 1}},
    }


@pytest.fixture
def temp_json_file(tmp_path):
    """Create a temporary JSON file and return a helper function."""
    def _create_file(data, name=None):
        file_path = tmp_path / (name or f"trace_{id(data)}.json")
        with open(file_path, "w") as f:
            json.dump(data, f)
        return str(file_path)

    return _create_file
