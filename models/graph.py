"""
Graph view-models for the Banker's Algorithm Visualizer.

Nodes and edges produced by the resource-allocation and wait-for graph
builders. These are plain records handed to a renderer; they hold no
reference to the matrices they were derived from.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from enum import Enum


class NodeRole(Enum):
    """Role of a node in a graph."""
    PROCESS = "process"
    RESOURCE = "resource"


class EdgeKind(Enum):
    """Kind of relationship an edge represents."""
    ALLOCATION = "allocation"
    REQUEST = "request"
    WAIT_FOR = "waitFor"


@dataclass(frozen=True)
class GraphNode:
    """
    A process or resource node.

    Attributes:
        id: Node identity ("P<i>" or "R<j>")
        label: Display label
        role: Process or resource
    """
    id: str
    label: str
    role: NodeRole

    @classmethod
    def process(cls, index: int) -> "GraphNode":
        """Build the node for process `index`."""
        return cls(id=f"P{index}", label=f"Process {index}", role=NodeRole.PROCESS)

    @classmethod
    def resource(cls, index: int, available: int) -> "GraphNode":
        """Build the node for resource `index`, labeled with its available count."""
        return cls(
            id=f"R{index}",
            label=f"Resource {index}\n(Available: {available})",
            role=NodeRole.RESOURCE
        )

    def to_dict(self) -> Dict:
        return {'id': self.id, 'label': self.label, 'role': self.role.value}


@dataclass(frozen=True)
class GraphEdge:
    """
    A directed edge between two nodes.

    Attributes:
        source: Id of the node the edge leaves
        target: Id of the node the edge enters
        kind: Allocation, request or wait-for
        label: Optional display label (quantity or relation text)
    """
    source: str
    target: str
    kind: EdgeKind
    label: Optional[str] = None

    def to_dict(self) -> Dict:
        data = {'from': self.source, 'to': self.target, 'kind': self.kind.value}
        if self.label is not None:
            data['label'] = self.label
        return data

    def __str__(self) -> str:
        suffix = f" ({self.label})" if self.label else ""
        return f"{self.source} -> {self.target} [{self.kind.value}]{suffix}"


@dataclass(frozen=True)
class Graph:
    """Node and edge sets of one graph, in construction order."""
    nodes: Tuple[GraphNode, ...] = ()
    edges: Tuple[GraphEdge, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'nodes', tuple(self.nodes))
        object.__setattr__(self, 'edges', tuple(self.edges))

    def is_empty(self) -> bool:
        """True when the graph has no nodes (built from missing input)."""
        return not self.nodes

    def node_ids(self) -> List[str]:
        return [node.id for node in self.nodes]

    def edges_of_kind(self, kind: EdgeKind) -> List[GraphEdge]:
        """Get all edges of a specific kind."""
        return [edge for edge in self.edges if edge.kind == kind]

    def to_dict(self) -> Dict:
        """Plain record shape consumed by a renderer."""
        return {
            'nodes': [node.to_dict() for node in self.nodes],
            'edges': [edge.to_dict() for edge in self.edges]
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Graph":
        """
        Rebuild a graph from its plain record shape.

        Raises:
            KeyError / ValueError: If a record is missing fields or carries an
            unknown role or kind
        """
        nodes = [
            GraphNode(id=n['id'], label=n['label'], role=NodeRole(n['role']))
            for n in data['nodes']
        ]
        edges = [
            GraphEdge(
                source=e['from'],
                target=e['to'],
                kind=EdgeKind(e['kind']),
                label=e.get('label')
            )
            for e in data['edges']
        ]
        return cls(nodes=nodes, edges=edges)

    def display(self) -> str:
        """Format nodes and edges for display."""
        output = [f"Nodes ({len(self.nodes)}): " + ", ".join(self.node_ids())]
        output.append(f"Edges ({len(self.edges)}):")
        for edge in self.edges:
            output.append(f"  {edge}")
        return "\n".join(output)
