"""
TextNet Compiler — Graph Exporter
=================================
Converts a compiled Graph into a networkx MultiDiGraph and writes it out as
GEXF, the interchange format read by Gephi.

Parallel edges survive the conversion: every GraphEdge becomes its own
multigraph edge keyed by the edge id.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import networkx as nx

from textnet.core.GraphPrimitives import Graph
from textnet.core.Types import Color

logger = logging.getLogger(__name__)


def _viz_color(color: Color) -> dict:
    return {"r": int(round(color.r * 255)), "g": int(round(color.g * 255)), "b": int(round(color.b * 255))}


def to_networkx(graph: Graph) -> nx.MultiDiGraph:
    """
    Build a MultiDiGraph keyed by node label.

    Node attributes: label, viz (GEXF colour). Edge attributes: label, color (hex).
    """
    G = nx.MultiDiGraph()

    for label, node in graph.nodes.items():
        G.add_node(label, label=label, viz={"color": _viz_color(node.color)})

    for edge in graph.edges:
        G.add_edge(
            edge.source.label,
            edge.target.label,
            key=edge.id,
            label=edge.label,
            color=edge.color.to_hex(),
        )

    return G


def write_gexf(graph: Graph, path: Union[str, Path]) -> Path:
    path = Path(path)
    G = to_networkx(graph)
    nx.write_gexf(G, path, encoding="utf-8")
    logger.info(f"wrote {G.number_of_nodes()} nodes and {G.number_of_edges()} edges to {path}")
    return path
