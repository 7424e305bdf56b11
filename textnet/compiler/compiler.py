"""
TextNet Compiler — Tree to Graph
================================
Compiles constituency trees into predicate-argument edges on a Graph.

The compiler is a one-state pushdown automaton: the only state carried
between compile steps is the CompilationResult accumulator, threaded
explicitly through `compile`. Nothing is kept on the instance between
sentences, so one Compiler can be reused for a whole document.

    tree  →  [extractors.match]  →  Match(construction, left, right)
    Match →  [Compiler._compile_*]  →  CompilationResult(nodes, edges)

`nodes` are the open arguments still available to an enclosing construct;
`edges` are every edge produced by the subtree.
"""

from __future__ import annotations

import logging
import types
from typing import Any, Generator, Iterable, List, NamedTuple, Tuple, Union

from textnet.core.GraphPrimitives import Graph, GraphEdge, GraphNode
from textnet.core.LinguisticTree import LinguisticTree
from textnet.core.Types import Construction

from . import rules
from .extractors import Match, match

logger = logging.getLogger(__name__)


class CompilationResult(NamedTuple):
    nodes: Tuple[GraphNode, ...] = ()
    edges: Tuple[GraphEdge, ...] = ()

    def __add__(self, other: "CompilationResult") -> "CompilationResult":
        return CompilationResult(self.nodes + other.nodes, self.edges + other.edges)

    @classmethod
    def concat(cls, results: Iterable["CompilationResult"]) -> "CompilationResult":
        nodes: List[GraphNode] = []
        edges: List[GraphEdge] = []
        for result in results:
            nodes.extend(result.nodes)
            edges.extend(result.edges)
        return cls(tuple(nodes), tuple(edges))


EMPTY = CompilationResult()

# A construction waiting on its subtrees: yields sub-steps, receives their results
Step = Generator[Any, "CompilationResult", "CompilationResult"]


class Compiler:
    """
    Builds nodes and edges on `graph` from linguistic trees.

    Args:
        graph:   The node/edge store. Nodes are deduplicated by label,
                 edges never are.
        verbose: When True, `apply` logs the propositions of each sentence.
    """

    def __init__(self, graph: Graph, verbose: bool = False):
        self.graph = graph
        self.verbose = verbose

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------

    def apply(self, tree: LinguisticTree) -> Graph:
        """Compile one sentence tree into the graph and return the graph."""
        _, edges = self.compile(tree)

        if self.verbose:
            logger.info("Propositions:\n\t" + "\n\t".join(self.propositions(edges)))

        return self.graph

    def apply_all(self, trees: Iterable[LinguisticTree]) -> Graph:
        for tree in trees:
            self.apply(tree)
        return self.graph

    # ------------------------------------------------------------------
    # Compile
    # ------------------------------------------------------------------

    def compile(self, tree: LinguisticTree, seed: CompilationResult = EMPTY) -> CompilationResult:
        """
        Compile `tree` against the open nodes in `seed`.

        Runs as a trampoline over an explicit stack: constructions that need
        their subtrees compiled are generators yielding the sub-steps and
        receiving the results, so tree depth never grows the Python stack.
        """
        stack: List[Step] = []
        result = self._dispatch(tree, seed)
        while True:
            if isinstance(result, types.GeneratorType):
                stack.append(result)
                result = None
            elif stack:
                try:
                    result = stack[-1].send(result)
                except StopIteration as stop:
                    stack.pop()
                    result = stop.value
            else:
                return result

    def _dispatch(self, tree: LinguisticTree, seed: CompilationResult) -> Union[CompilationResult, Step]:
        found = match(tree)
        # auxiliaries, modals and "to" are transparent
        while found.construction is Construction.NONFINITE_VERB_PHRASE:
            tree = found.right
            found = match(tree)
        logger.debug(f"compile {tree.label!r} as {found.construction.name} with {len(seed.nodes)} open node(s)")

        construction = found.construction
        if construction is Construction.TRIVALENT_PREDICATE:
            return self._compile_trivalent(found, seed)
        if construction is Construction.DIVALENT_PREDICATE:
            return self._compile_divalent(found, seed)
        if construction is Construction.MONOVALENT_PREDICATE:
            return self._compile_monovalent(tree, seed)
        if construction is Construction.PREDICATE_ARGUMENT:
            return self._compile_argument(tree)
        if construction is Construction.NOUN_VERB_DECLARATIVE_CLAUSE:
            return self._compile_clause(found, seed)
        if construction is Construction.NOUN_PHRASE_WITH_PREPOSITION:
            return self._compile_noun_phrase_with_preposition(found, seed)
        if construction is Construction.IGNORED_CONSTITUENT:
            return EMPTY
        return self._compile_children(tree, seed)

    # ── Constructions with subtrees (generators) ─────────────────────────────

    def _compile_children(self, tree: LinguisticTree, seed: CompilationResult) -> Step:
        results = []
        for child in tree.children:
            results.append((yield self._dispatch(child, seed)))
        return CompilationResult.concat(results)

    def _compile_trivalent(self, found: Match, seed: CompilationResult) -> Step:
        # left, then right against left's result, then left again against that
        first = yield self._dispatch(found.left, seed)
        second = yield self._dispatch(found.right, first)
        third = yield self._dispatch(found.left, second)
        return CompilationResult(third.nodes, third.edges + second.edges + first.edges)

    def _compile_divalent(self, found: Match, seed: CompilationResult) -> Step:
        targets, right_edges = yield self._dispatch(found.right, seed)
        label = found.left.terminal_value

        new_edges = tuple(
            self.graph.connect(source, target, label)
            for source in seed.nodes
            for target in targets
        )
        return CompilationResult(targets, new_edges + right_edges)

    def _compile_clause(self, found: Match, seed: CompilationResult) -> Step:
        subjects = yield self._dispatch(found.left, EMPTY)

        # each subject gets its own pass over the predicate
        predicates = []
        for subject in subjects.nodes:
            predicates.append((yield self._dispatch(found.right, CompilationResult((subject,), seed.edges))))
        return CompilationResult.concat(predicates) + subjects

    def _compile_noun_phrase_with_preposition(self, found: Match, seed: CompilationResult) -> Step:
        targets, left_edges = yield self._dispatch(found.left, seed)
        sources, right_edges = yield self._dispatch(found.right, seed)

        new_edges = tuple(
            self.graph.connect(source, target, rules.HAS_LABEL)
            for source in sources
            for target in targets
        )
        return CompilationResult(sources, new_edges + right_edges + left_edges)

    # ── Leaf constructions ───────────────────────────────────────────────────

    def _compile_monovalent(self, tree: LinguisticTree, seed: CompilationResult) -> CompilationResult:
        label = tree.terminal_value
        new_edges = tuple(self.graph.connect(source, source, label) for source in seed.nodes)
        return CompilationResult((), new_edges)

    def _compile_argument(self, tree: LinguisticTree) -> CompilationResult:
        node = self.graph.find_or_create_node(tree.terminal_value)
        if node is None:
            return EMPTY
        return CompilationResult((node,), ())
