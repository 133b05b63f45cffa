"""
Resource-Allocation Graph builder for the Banker's Algorithm Visualizer.

Projects an allocation state into a bipartite process/resource graph:
allocation edges for units held, request edges for units still needed.
"""

import numpy as np
from typing import List, Optional

from models.graph import Graph, GraphNode, GraphEdge, EdgeKind


def build_allocation_graph(allocation, need: Optional[object], available) -> Graph:
    """
    Build the resource-allocation graph.

    Nodes: one per resource (R0..R{R-1}, labeled with its available count),
    then one per process (P0..P{P-1}).

    Edges:
    - P{i} -> R{j} for every Allocation[i][j] > 0, labeled with the quantity held
    - R{j} -> P{i} for every Need[i][j] > 0, labeled "Request: n"
      (omitted entirely when need is not supplied)

    Args:
        allocation: [P][R] current allocation
        need: [P][R] remaining need, or None
        available: [R] unallocated units

    Returns:
        Graph with P + R nodes, or an empty graph if allocation or
        available is missing
    """
    if _missing(allocation) or _missing(available):
        return Graph()

    available = np.asarray(available, dtype=np.int64)
    num_resources = len(available)
    allocation = np.asarray(allocation, dtype=np.int64).reshape(-1, num_resources)
    num_processes = allocation.shape[0]

    nodes = [GraphNode.resource(j, int(available[j])) for j in range(num_resources)]
    nodes.extend(GraphNode.process(i) for i in range(num_processes))

    edges = []
    for i in range(num_processes):
        for j in range(num_resources):
            if allocation[i][j] > 0:
                edges.append(GraphEdge(
                    source=f"P{i}",
                    target=f"R{j}",
                    kind=EdgeKind.ALLOCATION,
                    label=str(allocation[i][j])
                ))

    if not _missing(need):
        need = np.asarray(need, dtype=np.int64).reshape(-1, num_resources)
        for i in range(num_processes):
            for j in range(num_resources):
                if need[i][j] > 0:
                    edges.append(GraphEdge(
                        source=f"R{j}",
                        target=f"P{i}",
                        kind=EdgeKind.REQUEST,
                        label=f"Request: {need[i][j]}"
                    ))

    return Graph(nodes=nodes, edges=edges)


def request_reveal_order(graph: Graph) -> List[GraphEdge]:
    """
    Order in which pending requests are revealed one at a time.

    Request edges in construction order (process-major, then resource).
    A renderer steps through this list at its own pace.
    """
    return graph.edges_of_kind(EdgeKind.REQUEST)


def _missing(values) -> bool:
    return values is None or np.size(values) == 0
