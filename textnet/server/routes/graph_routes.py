"""
Graph REST routes.

All routes are mounted under /api by main.py. Every request compiles into
its own Graph, so requests share no state.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from textnet.compiler import Compiler, TreeSyntaxError, parse_tree
from textnet.compiler import rules
from textnet.compiler.extractors import priority_order
from textnet.core.GraphPrimitives import Graph
from textnet.server.serializers.graph_serializer import serialize_graph

logger = logging.getLogger(__name__)

router = APIRouter()


# ── POST /compile ─────────────────────────────────────────────────────────────

class CompileBody(BaseModel):
    trees: List[str]
    verbose: bool = False


@router.post("/compile")
async def compile_trees(body: CompileBody) -> Dict[str, Any]:
    try:
        trees = [parse_tree(text) for text in body.trees]
    except TreeSyntaxError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    graph = Compiler(Graph(), verbose=body.verbose).apply_all(trees)
    logger.debug(f"compiled {len(trees)} tree(s) into {graph!r}")
    return serialize_graph(graph)


# ── GET /rules ────────────────────────────────────────────────────────────────

def _pairs(pairs) -> List[List[str]]:
    return sorted([list(p) for p in pairs])


@router.get("/rules")
async def get_rules() -> Dict[str, Any]:
    return {
        "priority": priority_order(),
        "trivalent": _pairs(rules.TRIVALENT_RULES),
        "divalent": _pairs(rules.DIVALENT_RULES),
        "nounAdjunct": _pairs(rules.NOUN_ADJUNCT_RULES),
        "nonfiniteVerb": _pairs(rules.NONFINITE_VERB_RULES),
        "nounPhraseWithPreposition": _pairs(rules.NOUN_PHRASE_WITH_PREPOSITION_RULES),
        "nounVerb": _pairs(rules.NOUN_VERB_RULES),
        "verbTags": sorted(rules.VERB_TAGS),
        "nounTags": sorted(rules.NOUN_TAGS),
        "ignored": sorted(rules.IGNORED_LABELS),
    }
