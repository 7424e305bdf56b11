from typing import Iterable, List, Optional, Tuple, AbstractSet

# (left label, right label) pairs; see compiler/rules.py
BinaryRules = AbstractSet[Tuple[str, str]]


class LinguisticTree:
    """
    Immutable constituency tree node.

    Leaves carry the word text as their label. Internal nodes carry a
    Penn-Treebank category (NP, VP, @VP, ...) and an ordered tuple of children.
    """

    __slots__ = ("_label", "_children")

    def __init__(self, label: str, children: Optional[Iterable["LinguisticTree"]] = None):
        self._label = label
        self._children: Tuple["LinguisticTree", ...] = tuple(children or ())

    @property
    def label(self) -> str:
        return self._label

    @property
    def children(self) -> Tuple["LinguisticTree", ...]:
        return self._children

    def is_leaf(self) -> bool:
        return not self._children

    def is_preterminal(self) -> bool:
        return len(self._children) == 1 and self._children[0].is_leaf()

    def terminal_yield(self) -> List[str]:
        """Leaf labels beneath this node, left to right."""
        if self.is_leaf():
            return [self._label]
        words: List[str] = []
        stack = list(reversed(self._children))
        while stack:
            node = stack.pop()
            if node.is_leaf():
                words.append(node.label)
            else:
                stack.extend(reversed(node.children))
        return words

    @property
    def terminal_value(self) -> str:
        """The surface string dominated by this subtree."""
        return " ".join(word for word in self.terminal_yield() if word)

    def has_binary_rule(self, rules: BinaryRules) -> bool:
        return self.match_binary_rule(rules) is not None

    def match_binary_rule(self, rules: BinaryRules) -> Optional[Tuple["LinguisticTree", "LinguisticTree"]]:
        if len(self._children) != 2:
            return None
        left, right = self._children
        if (left.label, right.label) in rules:
            return left, right
        return None

    def to_bracketed(self) -> str:
        if self.is_leaf():
            return self._label
        inner = " ".join(child.to_bracketed() for child in self._children)
        return f"({self._label} {inner})"

    def __eq__(self, other):
        if not isinstance(other, LinguisticTree):
            return NotImplemented
        return self._label == other._label and self._children == other._children

    def __hash__(self):
        return hash((self._label, self._children))

    def __repr__(self):
        return f"LinguisticTree({self.to_bracketed()})"


def leaf(word: str) -> LinguisticTree:
    return LinguisticTree(word)


def preterminal(tag: str, word: str) -> LinguisticTree:
    """Shorthand for a part-of-speech node over a single word, e.g. (NN dog)."""
    return LinguisticTree(tag, [LinguisticTree(word)])
