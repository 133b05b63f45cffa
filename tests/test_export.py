"""
Graph Export Tests

Tests the graph hand-off payload written for an external viewer.
"""

import sys
import json
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from algorithms.need import compute_need
from algorithms.allocation_graph import build_allocation_graph
from algorithms.wait_for_graph import build_wait_for_graph
from analysis.export import graph_payload, save_graph, load_graph, GraphExportError


ALLOCATION = [[2], [2]]
NEED, _ = compute_need(ALLOCATION, [[4], [4]])


def test_payload_carries_type_tag():
    graph = build_wait_for_graph(ALLOCATION, NEED, [0])

    payload = graph_payload(graph, "wait")

    assert payload["graphType"] == "wait"
    assert [n["id"] for n in payload["graphData"]["nodes"]] == ["P0", "P1"]
    assert payload["graphData"]["edges"][0]["kind"] == "waitFor"


def test_unknown_type_rejected():
    with pytest.raises(GraphExportError, match="Unknown graph type"):
        graph_payload(build_wait_for_graph(ALLOCATION, NEED, [0]), "cycle")


def test_save_and_load(tmp_path):
    """A saved graph reads back as the same graph."""
    graph = build_allocation_graph(ALLOCATION, NEED, [0])
    path = tmp_path / "graph.json"

    save_graph(graph, "resource", str(path))
    graph_type, loaded = load_graph(str(path))

    assert graph_type == "resource"
    assert loaded == graph
    assert json.loads(path.read_text(encoding="utf-8"))["graphType"] == "resource"


def test_load_missing_file(tmp_path):
    with pytest.raises(GraphExportError, match="not found"):
        load_graph(str(tmp_path / "nope.json"))


def test_load_malformed_payload(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({
        "graphType": "resource",
        "graphData": {"nodes": [{"id": "P0", "label": "Process 0", "role": "thread"}], "edges": []}
    }), encoding="utf-8")

    with pytest.raises(GraphExportError, match="Malformed"):
        load_graph(str(path))


def test_load_unknown_type(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"graphType": "other", "graphData": {}}), encoding="utf-8")

    with pytest.raises(GraphExportError, match="Unknown graph type"):
        load_graph(str(path))


def test_load_directory_path(tmp_path):
    with pytest.raises(GraphExportError, match="Cannot read graph file"):
        load_graph(str(tmp_path))


def test_load_non_utf8_file(tmp_path):
    path = tmp_path / "graph.json"
    path.write_bytes(b'\xff\xfe{"graphType": "wait"}')

    with pytest.raises(GraphExportError, match="not UTF-8"):
        load_graph(str(path))
