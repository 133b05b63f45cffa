"""
Graph hand-off for the Banker's Algorithm Visualizer.

Packages one graph with a type tag ("resource" or "wait") so a separate
viewer can render it, and reads that payload back.
"""

import json
from pathlib import Path
from typing import Dict, Tuple

from models.graph import Graph


GRAPH_TYPES = ("resource", "wait")


class GraphExportError(Exception):
    """Exception raised when a graph payload cannot be written or read."""
    pass


def graph_payload(graph: Graph, graph_type: str) -> Dict:
    """
    Wrap a graph with its type tag.

    Args:
        graph: Graph to hand off
        graph_type: "resource" for the allocation graph, "wait" for wait-for

    Returns:
        {"graphType": ..., "graphData": {"nodes": [...], "edges": [...]}}

    Raises:
        GraphExportError: If graph_type is unknown
    """
    if graph_type not in GRAPH_TYPES:
        raise GraphExportError(
            f"Unknown graph type '{graph_type}' (expected one of {', '.join(GRAPH_TYPES)})"
        )
    return {'graphType': graph_type, 'graphData': graph.to_dict()}


def save_graph(graph: Graph, graph_type: str, file_path: str) -> Path:
    """
    Write a graph payload to a JSON file.

    Returns:
        Path written
    """
    payload = graph_payload(graph, graph_type)
    path = Path(file_path)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(payload, f, indent=2)
    except OSError as e:
        raise GraphExportError(f"Cannot write graph file {path}: {e}")
    return path


def load_graph(file_path: str) -> Tuple[str, Graph]:
    """
    Read a graph payload written by save_graph().

    Returns:
        Tuple of (graph_type, Graph)

    Raises:
        GraphExportError: If the file is missing, unreadable, not JSON, or malformed
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            payload = json.load(f)
    except FileNotFoundError:
        raise GraphExportError(f"Graph file not found: {file_path}")
    except json.JSONDecodeError as e:
        raise GraphExportError(f"Invalid JSON in graph file: {e}")
    except UnicodeDecodeError as e:
        raise GraphExportError(f"Graph file is not UTF-8 text: {e}")
    except OSError as e:
        raise GraphExportError(f"Cannot read graph file {file_path}: {e}")

    if not isinstance(payload, dict):
        raise GraphExportError("Graph payload must be a JSON object")

    graph_type = payload.get('graphType')
    if graph_type not in GRAPH_TYPES:
        raise GraphExportError(f"Unknown graph type '{graph_type}'")

    try:
        graph = Graph.from_dict(payload['graphData'])
    except (KeyError, TypeError, ValueError) as e:
        raise GraphExportError(f"Malformed graph data: {e}")

    return graph_type, graph
