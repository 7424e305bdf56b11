"""
TextNet — compiles constituency trees into text networks.
"""

from textnet.compiler import Compiler, CompilationResult, compile_trees, parse_tree, read_trees
from textnet.core.GraphPrimitives import Graph, GraphEdge, GraphNode
from textnet.core.LinguisticTree import LinguisticTree

__version__ = "0.1.0"

__all__ = [
    "CompilationResult",
    "Compiler",
    "Graph",
    "GraphEdge",
    "GraphNode",
    "LinguisticTree",
    "compile_trees",
    "parse_tree",
    "read_trees",
]
