"""
TextNet Compiler
================
Converts constituency trees into a text network of topics (nodes) joined by
predicate-argument relations (edges).

Pipeline:
    bracketed text  →  [reader]     →  LinguisticTree
    LinguisticTree  →  [extractors] →  Match
    Match           →  [compiler]   →  nodes / edges on a Graph
    Graph           →  [exporter]   →  GEXF

Public API
----------
    from textnet.compiler import compile_trees, read_trees

    graph = compile_trees(read_trees("(S (NP (NN dog)) (VP (VBZ barks)))"))
    for edge in graph.edges:
        print(edge)         # barks(dog, dog)
"""

from __future__ import annotations

from typing import Iterable, Optional

from textnet.core.GraphPrimitives import Graph
from textnet.core.LinguisticTree import LinguisticTree

from .compiler import CompilationResult, Compiler
from .extractors import Match, match
from .reader import TreeSyntaxError, parse_tree, read_tree_file, read_trees


def compile_trees(
    trees: Iterable[LinguisticTree],
    graph: Optional[Graph] = None,
    verbose: bool = False,
) -> Graph:
    """
    Compile sentence trees, in order, into one graph.

    Args:
        trees:   One tree per sentence.
        graph:   Graph to compile into. A fresh Graph when omitted.
        verbose: Log the propositions of every sentence.

    Returns:
        The graph holding every node and edge produced.
    """
    compiler = Compiler(graph if graph is not None else Graph(), verbose=verbose)
    return compiler.apply_all(trees)


__all__ = [
    "CompilationResult",
    "Compiler",
    "Match",
    "TreeSyntaxError",
    "compile_trees",
    "match",
    "parse_tree",
    "read_tree_file",
    "read_trees",
]
