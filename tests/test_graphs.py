"""
Graph Builder Tests

Tests the resource-allocation and wait-for graph projections.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from algorithms.need import compute_need
from algorithms.allocation_graph import build_allocation_graph, request_reveal_order
from algorithms.wait_for_graph import build_wait_for_graph
from models.graph import EdgeKind, NodeRole, Graph


CLASSIC_ALLOCATION = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
CLASSIC_MAX = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
CLASSIC_AVAILABLE = [3, 3, 2]
CLASSIC_NEED, _ = compute_need(CLASSIC_ALLOCATION, CLASSIC_MAX)


def test_allocation_graph_nodes():
    """Resource nodes first, then process nodes: P + R in total."""
    graph = build_allocation_graph(CLASSIC_ALLOCATION, CLASSIC_NEED, CLASSIC_AVAILABLE)

    assert len(graph.nodes) == 8
    assert graph.node_ids() == ["R0", "R1", "R2", "P0", "P1", "P2", "P3", "P4"]
    assert graph.nodes[0].role == NodeRole.RESOURCE
    assert graph.nodes[0].label == "Resource 0\n(Available: 3)"
    assert graph.nodes[3].role == NodeRole.PROCESS
    assert graph.nodes[3].label == "Process 0"


def test_allocation_graph_edges():
    """One allocation edge per held cell, one request edge per needed cell."""
    graph = build_allocation_graph(CLASSIC_ALLOCATION, CLASSIC_NEED, CLASSIC_AVAILABLE)

    allocations = graph.edges_of_kind(EdgeKind.ALLOCATION)
    requests = graph.edges_of_kind(EdgeKind.REQUEST)

    assert len(allocations) == 8
    assert len(requests) == 12
    assert len(graph.edges) == 20

    first = allocations[0]
    assert (first.source, first.target, first.label) == ("P0", "R1", "1")

    p2_holds = [(e.target, e.label) for e in allocations if e.source == "P2"]
    assert p2_holds == [("R0", "3"), ("R2", "2")]

    first_request = requests[0]
    assert (first_request.source, first_request.target) == ("R0", "P0")
    assert first_request.label == "Request: 7"


def test_allocation_graph_without_need():
    """Without a need matrix, request edges are omitted."""
    graph = build_allocation_graph(CLASSIC_ALLOCATION, None, CLASSIC_AVAILABLE)

    assert len(graph.nodes) == 8
    assert graph.edges_of_kind(EdgeKind.REQUEST) == []
    assert len(graph.edges) == 8


def test_allocation_graph_missing_input():
    """Empty allocation or available yields an empty graph."""
    assert build_allocation_graph([], None, [1, 2]).is_empty()
    assert build_allocation_graph(CLASSIC_ALLOCATION, CLASSIC_NEED, []).is_empty()
    assert build_allocation_graph(None, None, None) == Graph()


def test_request_reveal_order():
    """Reveal order lists request edges in construction order."""
    graph = build_allocation_graph(CLASSIC_ALLOCATION, CLASSIC_NEED, CLASSIC_AVAILABLE)

    order = request_reveal_order(graph)

    assert all(e.kind == EdgeKind.REQUEST for e in order)
    assert [(e.source, e.target) for e in order[:4]] == [
        ("R0", "P0"), ("R1", "P0"), ("R2", "P0"), ("R0", "P1")
    ]
    assert request_reveal_order(Graph()) == []


def test_wait_for_graph_classic():
    """Heuristic edges: every holder of a scarce resource is waited on."""
    graph = build_wait_for_graph(CLASSIC_ALLOCATION, CLASSIC_NEED, CLASSIC_AVAILABLE)

    assert graph.node_ids() == ["P0", "P1", "P2", "P3", "P4"]
    assert all(n.role == NodeRole.PROCESS for n in graph.nodes)

    pairs = [(e.source, e.target) for e in graph.edges]
    assert pairs == [
        ("P0", "P1"), ("P0", "P2"), ("P0", "P3"), ("P0", "P4"),
        ("P2", "P1"), ("P2", "P3"),
        ("P4", "P1"), ("P4", "P2"), ("P4", "P3"),
    ]
    assert all(e.kind == EdgeKind.WAIT_FOR and e.label == "waits for" for e in graph.edges)


def test_wait_for_graph_two_process_deadlock():
    """Two processes blocking each other point at each other."""
    need, _ = compute_need([[2], [2]], [[4], [4]])

    graph = build_wait_for_graph([[2], [2]], need, [0])

    assert [(e.source, e.target) for e in graph.edges] == [("P0", "P1"), ("P1", "P0")]


def test_wait_for_graph_circular():
    """Each process waits only on the holder of what it needs."""
    allocation = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    need, _ = compute_need(allocation, [[1, 1, 0], [0, 1, 1], [1, 0, 1]])

    graph = build_wait_for_graph(allocation, need, [0, 0, 0])

    assert [(e.source, e.target) for e in graph.edges] == [
        ("P0", "P1"), ("P1", "P2"), ("P2", "P0")
    ]


def test_wait_for_graph_no_edge_when_available_covers_need():
    """Holding a needed resource does not create an edge if free units suffice."""
    allocation = [[0], [3]]
    need, _ = compute_need(allocation, [[2], [3]])

    graph = build_wait_for_graph(allocation, need, [2])

    assert len(graph.nodes) == 2
    assert graph.edges == ()


def test_wait_for_graph_missing_input():
    """Missing need yields an empty graph."""
    assert build_wait_for_graph(CLASSIC_ALLOCATION, None, CLASSIC_AVAILABLE).is_empty()
    assert build_wait_for_graph([], [], []).is_empty()


def test_graph_to_dict_shape():
    """Plain record shape for a renderer."""
    need, _ = compute_need([[1]], [[2]])
    graph = build_allocation_graph([[1]], need, [0])

    assert graph.to_dict() == {
        'nodes': [
            {'id': 'R0', 'label': 'Resource 0\n(Available: 0)', 'role': 'resource'},
            {'id': 'P0', 'label': 'Process 0', 'role': 'process'},
        ],
        'edges': [
            {'from': 'P0', 'to': 'R0', 'kind': 'allocation', 'label': '1'},
            {'from': 'R0', 'to': 'P0', 'kind': 'request', 'label': 'Request: 1'},
        ]
    }


def test_graphs_are_deterministic():
    """Repeated builds give identical graphs."""
    first = build_allocation_graph(CLASSIC_ALLOCATION, CLASSIC_NEED, CLASSIC_AVAILABLE)
    second = build_allocation_graph(CLASSIC_ALLOCATION, CLASSIC_NEED, CLASSIC_AVAILABLE)
    assert first == second

    first = build_wait_for_graph(CLASSIC_ALLOCATION, CLASSIC_NEED, CLASSIC_AVAILABLE)
    second = build_wait_for_graph(CLASSIC_ALLOCATION, CLASSIC_NEED, CLASSIC_AVAILABLE)
    assert first == second


def test_graph_collections_are_immutable():
    """Node and edge sets are tuples; a built graph cannot grow."""
    graph = build_allocation_graph(CLASSIC_ALLOCATION, CLASSIC_NEED, CLASSIC_AVAILABLE)

    assert isinstance(graph.nodes, tuple)
    assert isinstance(graph.edges, tuple)
    assert not hasattr(graph.edges, "append")

    rebuilt = Graph(nodes=list(graph.nodes), edges=list(graph.edges))
    assert isinstance(rebuilt.edges, tuple)
    assert rebuilt == graph
