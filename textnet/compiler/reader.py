"""
TextNet Compiler — Bracketed Tree Reader
========================================
Reads Penn-Treebank bracketed trees into LinguisticTree objects. This is the
input side of the pipeline; producing the brackets from raw text is the
parser's job and happens elsewhere.

Format
------
    (ROOT
      (S
        (NP (NN dog))
        (VP (VBZ barks))))

Any amount of whitespace separates tokens, and several trees may follow one
another in a single string or file. Treebank files wrap each sentence in an
unlabeled pair of brackets, `( (S ...) )`; that wrapper is dropped.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from textnet.core.LinguisticTree import LinguisticTree

_TOKEN_RE = re.compile(r"\(|\)|[^\s()]+")


class TreeSyntaxError(ValueError):
    """Raised when bracketed tree text is malformed."""

    def __init__(self, message: str, offset: int):
        super().__init__(f"{message} at offset {offset}")
        self.offset = offset


def _tokenize(text: str) -> Iterator[Tuple[str, int]]:
    for m in _TOKEN_RE.finditer(text):
        yield m.group(0), m.start()


class _Reader:
    def __init__(self, text: str):
        self.tokens: List[Tuple[str, int]] = list(_tokenize(text))
        self.end = len(text)
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def _peek(self) -> Tuple[str, int]:
        if self.at_end():
            return "", self.end
        return self.tokens[self.pos]

    def _next(self) -> Tuple[str, int]:
        token = self._peek()
        self.pos += 1
        return token

    def read_tree(self) -> LinguisticTree:
        token, offset = self._next()
        if token != "(":
            raise TreeSyntaxError(f"expected '(' but found {token or 'end of input'!r}", offset)

        # open brackets as (label, children); label None for an unlabeled wrapper
        stack: List[Tuple[Optional[str], List[LinguisticTree]]] = [self._open()]
        while True:
            label, children = stack[-1]
            token, offset = self._peek()
            if token == ")":
                self.pos += 1
                stack.pop()
                tree = children[0] if label is None else LinguisticTree(label, children)
                if not stack:
                    return tree
                stack[-1][1].append(tree)
            elif label is None and children:
                raise TreeSyntaxError(f"expected ')' but found {token or 'end of input'!r}", offset)
            elif token == "(":
                self.pos += 1
                stack.append(self._open())
            elif token:
                self.pos += 1
                children.append(LinguisticTree(token))
            else:
                raise TreeSyntaxError(f"unclosed bracket for {label!r}", offset)

    def _open(self) -> Tuple[Optional[str], List[LinguisticTree]]:
        """Read the label after a consumed '('."""
        label, offset = self._peek()
        if label == ")":
            raise TreeSyntaxError("empty brackets", offset)
        if label == "(":
            # unlabeled treebank wrapper: ( (S ...) )
            return None, []
        if not label:
            raise TreeSyntaxError("unexpected end of input", offset)
        self.pos += 1
        return label, []


def read_trees(text: str) -> List[LinguisticTree]:
    """Parse every top-level bracketed tree in `text`, in order."""
    reader = _Reader(text)
    trees = []
    while not reader.at_end():
        trees.append(reader.read_tree())
    return trees


def parse_tree(text: str) -> LinguisticTree:
    """Parse exactly one bracketed tree."""
    reader = _Reader(text)
    tree = reader.read_tree()
    if not reader.at_end():
        token, offset = reader.tokens[reader.pos]
        raise TreeSyntaxError(f"unexpected {token!r} after tree", offset)
    return tree


def read_tree_file(path: Union[str, Path]) -> List[LinguisticTree]:
    return read_trees(Path(path).read_text(encoding="utf-8"))
