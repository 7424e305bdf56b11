import os
import sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))

import pytest

from textnet.core.LinguisticTree import LinguisticTree, leaf, preterminal
from textnet.compiler import rules


class TestLinguisticTree:

    @pytest.fixture
    def compound(self):
        """(NP (NN coffee) (NNS beans))"""
        return LinguisticTree("NP", [preterminal("NN", "coffee"), preterminal("NNS", "beans")])

    def test_leaf(self):
        word = leaf("dog")
        assert word.is_leaf() is True
        assert word.children == ()
        assert word.terminal_value == "dog"

    def test_preterminal_terminal_value(self):
        tag = preterminal("NN", "dog")
        assert tag.is_leaf() is False
        assert tag.is_preterminal() is True
        assert tag.terminal_value == "dog"

    def test_compound_terminal_value_joins_yield(self, compound):
        assert compound.terminal_yield() == ["coffee", "beans"]
        assert compound.terminal_value == "coffee beans"

    def test_empty_word_has_empty_terminal_value(self):
        assert LinguisticTree("NN", [LinguisticTree("")]).terminal_value == ""

    def test_has_binary_rule(self, compound):
        assert compound.has_binary_rule(rules.NOUN_ADJUNCT_RULES) is True
        assert compound.has_binary_rule(rules.NOUN_VERB_RULES) is False

    def test_match_binary_rule_returns_children(self, compound):
        left, right = compound.match_binary_rule(rules.NOUN_ADJUNCT_RULES)
        assert left.label == "NN"
        assert right.label == "NNS"

    def test_binary_rule_requires_exactly_two_children(self):
        three = LinguisticTree("NP", [preterminal("NN", "a"), preterminal("NNS", "b"), preterminal("NN", "c")])
        assert three.match_binary_rule(rules.NOUN_ADJUNCT_RULES) is None
        one = LinguisticTree("NP", [preterminal("NN", "a")])
        assert one.has_binary_rule(rules.NOUN_ADJUNCT_RULES) is False

    def test_to_bracketed(self, compound):
        assert compound.to_bracketed() == "(NP (NN coffee) (NNS beans))"

    def test_structural_equality(self, compound):
        other = LinguisticTree("NP", [preterminal("NN", "coffee"), preterminal("NNS", "beans")])
        assert compound == other
        assert hash(compound) == hash(other)
