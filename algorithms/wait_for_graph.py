"""
Wait-For Graph builder for the Banker's Algorithm Visualizer.

Projects an allocation state into a process-only directed graph that
approximates which processes block which.
"""

import numpy as np

from models.graph import Graph, GraphNode, GraphEdge, EdgeKind


def build_wait_for_graph(allocation, need, available) -> Graph:
    """
    Build the wait-for graph.

    Draws P{i} -> P{j} ("Pi waits for Pj") for every ordered pair i != j where
    some resource k satisfies all of:
    - Need[i][k] > 0          (Pi still needs k)
    - Allocation[j][k] > 0    (Pj holds some of k)
    - Available[k] < Need[i][k]  (free units cannot cover Pi's need)

    This is a heuristic, not an exact blocking relation: every holder of a
    scarce resource gets an edge, not only the one whose release would
    unblock Pi. No cycle detection is performed on the result.

    Args:
        allocation: [P][R] current allocation
        need: [P][R] remaining need
        available: [R] unallocated units

    Returns:
        Graph with P process nodes, or an empty graph if any input is missing
    """
    if any(values is None or np.size(values) == 0 for values in (allocation, need, available)):
        return Graph()

    available = np.asarray(available, dtype=np.int64)
    num_resources = len(available)
    allocation = np.asarray(allocation, dtype=np.int64).reshape(-1, num_resources)
    need = np.asarray(need, dtype=np.int64).reshape(-1, num_resources)
    num_processes = allocation.shape[0]

    nodes = [GraphNode.process(i) for i in range(num_processes)]

    # scarce[i][k]: Pi needs k and free units of k cannot cover it
    scarce = (need > 0) & (available < need)

    edges = []
    for i in range(num_processes):
        for j in range(num_processes):
            if i == j:
                continue
            if np.any(scarce[i] & (allocation[j] > 0)):
                edges.append(GraphEdge(
                    source=f"P{i}",
                    target=f"P{j}",
                    kind=EdgeKind.WAIT_FOR,
                    label="waits for"
                ))

    return Graph(nodes=nodes, edges=edges)
