"""
Graph serializer — converts a compiled Graph into JSON-safe dicts.

Wire shape:
    {
      "nodes": [{"id", "label", "color"}],
      "edges": [{"id", "source", "target", "label", "color"}],
      "propositions": ["barks(dog, dog)", ...]
    }

`source` / `target` are node labels, which are unique within a graph.
"""
from __future__ import annotations

from typing import Any, Dict, List

from textnet.core.GraphPrimitives import Graph, GraphEdge, GraphNode


def _serialize_node(node: GraphNode) -> Dict[str, Any]:
    return {"id": node.id, "label": node.label, "color": node.color.to_hex()}


def _serialize_edge(edge: GraphEdge) -> Dict[str, Any]:
    return {
        "id": edge.id,
        "source": edge.source.label,
        "target": edge.target.label,
        "label": edge.label,
        "color": edge.color.to_hex(),
    }


def serialize_graph(graph: Graph) -> Dict[str, Any]:
    nodes: List[Dict[str, Any]] = [_serialize_node(n) for n in graph.nodes.values()]
    edges: List[Dict[str, Any]] = [_serialize_edge(e) for e in graph.edges]
    return {
        "nodes": nodes,
        "edges": edges,
        "propositions": [str(e) for e in graph.edges],
    }
