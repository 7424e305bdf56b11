"""
Grammar constants for the extractors.

Pairs are (left child label, right child label) for binary constituents;
the single-label sets match on the node's own label. Tags follow the Penn
Treebank; an `@` prefix marks an intermediate node from binarisation.
"""

from typing import FrozenSet, Tuple

LabelPair = Tuple[str, str]


# ── Noun adjuncts: "coffee beans", "New York cabs" ───────────────────────────

NOUN_ADJUNCT_RULES: FrozenSet[LabelPair] = frozenset({
    ("NN", "NNS"), ("NN", "NN"), ("NN", "NNPS"),
    ("NNP", "NNS"), ("NNP", "NN"), ("NNP", "NNPS"),
    ("@NP", "NNS"), ("@NP", "NN"), ("@NP", "NNPS"),
})

# ── Verb + complement: "chases (NP the cat)", "went (PP to town)" ────────────

DIVALENT_RULES: FrozenSet[LabelPair] = frozenset({
    ("VB", "S"), ("VB", "NP"), ("VB", "PP"), ("VB", "SBAR"),
    ("VBD", "S"), ("VBD", "NP"), ("VBD", "PP"), ("VBD", "SBAR"),
    ("VBP", "S"), ("VBP", "NP"), ("VBP", "PP"), ("VBP", "SBAR"),
    ("VBG", "S"), ("VBG", "NP"), ("VBG", "PP"), ("VBG", "SBAR"),
    ("VBN", "S"), ("VBN", "NP"), ("VBN", "PP"), ("VBN", "SBAR"),
    ("@VP", "PP"),
})

# ── Ditransitive: "(@VP gave her) (NP a book)" ──────────────────────────────

TRIVALENT_RULES: FrozenSet[LabelPair] = frozenset({
    ("@VP", "NP"),
})

# ── Auxiliaries, modals and infinitival "to" ahead of a verb phrase ──────────

NONFINITE_VERB_RULES: FrozenSet[LabelPair] = frozenset({
    ("VBZ", "VP"), ("VB", "VP"),
    ("VBD", "VP"), ("VBP", "VP"),
    ("VBG", "VP"), ("VBN", "VP"),
    ("TO", "VP"), ("MD", "VP"),
})

NOUN_PHRASE_WITH_PREPOSITION_RULES: FrozenSet[LabelPair] = frozenset({
    ("NP", "PP"), ("@NP", "PP"),
})

NOUN_VERB_RULES: FrozenSet[LabelPair] = frozenset({
    ("NP", "VP"), ("@S", "VP"),
})


# ── Single-label sets ────────────────────────────────────────────────────────

VERB_TAGS: FrozenSet[str] = frozenset({"VB", "VBD", "VBZ", "VBP", "VBG", "VBN"})

NOUN_TAGS: FrozenSet[str] = frozenset({"NN", "NNS", "NNP", "NNPS"})

IGNORED_LABELS: FrozenSet[str] = frozenset({
    "ADVP", "X", "@X", "NX", "@NX", "DT", "JJ", "JJS", "JJR", "-LRB-", "-RRB-", "PRN",
})


# ── Parent labels each binary extractor accepts ──────────────────────────────

VERB_PHRASE_LABELS: FrozenSet[str] = frozenset({"VP", "@VP"})
DIVALENT_LABELS: FrozenSet[str] = frozenset({"VP", "@VP", "PP"})
NOUN_PHRASE_LABELS: FrozenSet[str] = frozenset({"NP", "@NP"})
CLAUSE_LABELS: FrozenSet[str] = frozenset({"S", "@S", "NP"})

# Edge label for NounPhraseWithPreposition: "(NP the house) (PP on the hill)"
HAS_LABEL = "has"
