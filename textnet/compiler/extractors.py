"""
TextNet Compiler — Extractors
=============================
Structural pattern matchers over LinguisticTree shapes.

Each extractor inspects a node's label and, for binary constructions, the
labels of its two children. Extractors are tried in a fixed priority order
and the first one that matches decides how the node is compiled:

  ┌───┬──────────────────────────────┬──────────────────────────────────────┐
  │ # │ construction                 │ structural signal                    │
  ├───┼──────────────────────────────┼──────────────────────────────────────┤
  │ 1 │ TRIVALENT_PREDICATE          │ VP/@VP over (@VP, NP)                │
  │ 2 │ DIVALENT_PREDICATE           │ VP/@VP/PP over (verb, complement)    │
  │ 3 │ MONOVALENT_PREDICATE         │ bare verb tag                        │
  │ 4 │ PREDICATE_ARGUMENT           │ noun tag, or NP/@NP noun adjunct     │
  │ 5 │ NOUN_VERB_DECLARATIVE_CLAUSE │ S/@S/NP over (NP|@S, VP)             │
  │ 6 │ NOUN_PHRASE_WITH_PREPOSITION │ NP/@NP over (NP|@NP, PP)             │
  │ 7 │ NONFINITE_VERB_PHRASE        │ VP/@VP over (aux|modal|TO, VP)       │
  │ 8 │ IGNORED_CONSTITUENT          │ ADVP, DT, JJ, PRN, brackets, ...     │
  │ 9 │ DEFAULT                      │ anything else                        │
  └───┴──────────────────────────────┴──────────────────────────────────────┘

Clause- and valency-level constructions come first so that a verb phrase
holding a nested noun phrase is never taken for a plain argument.
"""

from __future__ import annotations

from typing import Callable, List, NamedTuple, Optional, Tuple

from textnet.core.LinguisticTree import LinguisticTree
from textnet.core.Types import Construction

from . import rules


class Match(NamedTuple):
    construction: Construction
    left: Optional[LinguisticTree] = None
    right: Optional[LinguisticTree] = None


Extractor = Callable[[LinguisticTree], Optional[Match]]


# ── Binary extractors ────────────────────────────────────────────────────────

def _binary(construction: Construction, parent_labels, pair_rules) -> Extractor:
    def extract(tree: LinguisticTree) -> Optional[Match]:
        if tree.label not in parent_labels:
            return None
        pair = tree.match_binary_rule(pair_rules)
        if pair is None:
            return None
        return Match(construction, *pair)

    extract.__name__ = construction.name.lower()
    return extract


trivalent_predicate = _binary(
    Construction.TRIVALENT_PREDICATE, rules.VERB_PHRASE_LABELS, rules.TRIVALENT_RULES
)
divalent_predicate = _binary(
    Construction.DIVALENT_PREDICATE, rules.DIVALENT_LABELS, rules.DIVALENT_RULES
)
noun_verb_declarative_clause = _binary(
    Construction.NOUN_VERB_DECLARATIVE_CLAUSE, rules.CLAUSE_LABELS, rules.NOUN_VERB_RULES
)
noun_phrase_with_preposition = _binary(
    Construction.NOUN_PHRASE_WITH_PREPOSITION,
    rules.NOUN_PHRASE_LABELS,
    rules.NOUN_PHRASE_WITH_PREPOSITION_RULES,
)
nonfinite_verb_phrase = _binary(
    Construction.NONFINITE_VERB_PHRASE, rules.VERB_PHRASE_LABELS, rules.NONFINITE_VERB_RULES
)


# ── Label-only extractors ────────────────────────────────────────────────────

def monovalent_predicate(tree: LinguisticTree) -> Optional[Match]:
    if tree.label in rules.VERB_TAGS:
        return Match(Construction.MONOVALENT_PREDICATE)
    return None


def predicate_argument(tree: LinguisticTree) -> Optional[Match]:
    if tree.label in rules.NOUN_TAGS:
        return Match(Construction.PREDICATE_ARGUMENT)
    if tree.label in rules.NOUN_PHRASE_LABELS and tree.has_binary_rule(rules.NOUN_ADJUNCT_RULES):
        return Match(Construction.PREDICATE_ARGUMENT)
    return None


def ignored_constituent(tree: LinguisticTree) -> Optional[Match]:
    if tree.label in rules.IGNORED_LABELS:
        return Match(Construction.IGNORED_CONSTITUENT)
    return None


# ── Dispatch ─────────────────────────────────────────────────────────────────

EXTRACTORS: Tuple[Extractor, ...] = (
    trivalent_predicate,
    divalent_predicate,
    monovalent_predicate,
    predicate_argument,
    noun_verb_declarative_clause,
    noun_phrase_with_preposition,
    nonfinite_verb_phrase,
    ignored_constituent,
)

DEFAULT_MATCH = Match(Construction.DEFAULT)


def match(tree: LinguisticTree) -> Match:
    """Return the first matching construction for `tree`, or DEFAULT."""
    for extractor in EXTRACTORS:
        found = extractor(tree)
        if found is not None:
            return found
    return DEFAULT_MATCH


def priority_order() -> List[str]:
    return [extractor.__name__ for extractor in EXTRACTORS] + [Construction.DEFAULT.name.lower()]
