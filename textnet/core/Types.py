from enum import Enum, auto
from typing import NamedTuple


class Color(NamedTuple):
    r: float
    g: float
    b: float

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*(int(round(c * 255)) for c in self))


# Nodes and edges are grey until an exporter decides otherwise
DEFAULT_COLOR = Color(0.5, 0.5, 0.5)


class Construction(Enum):
    """
    Structural constructions recognised by the extractors, in priority order.
    The enum order is the dispatch order: first match wins.
    """
    TRIVALENT_PREDICATE = auto()
    DIVALENT_PREDICATE = auto()
    MONOVALENT_PREDICATE = auto()
    PREDICATE_ARGUMENT = auto()
    NOUN_VERB_DECLARATIVE_CLAUSE = auto()
    NOUN_PHRASE_WITH_PREPOSITION = auto()
    NONFINITE_VERB_PHRASE = auto()
    IGNORED_CONSTITUENT = auto()
    DEFAULT = auto()
