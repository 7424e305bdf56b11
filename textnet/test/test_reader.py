import os
import sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))

import pytest

from textnet.compiler.reader import TreeSyntaxError, parse_tree, read_tree_file, read_trees
from textnet.core.LinguisticTree import LinguisticTree, preterminal


class TestReader:

    def test_parse_simple_tree(self):
        tree = parse_tree("(S (NP (NN dog)) (VP (VBZ barks)))")
        assert tree == LinguisticTree("S", [
            LinguisticTree("NP", [preterminal("NN", "dog")]),
            LinguisticTree("VP", [preterminal("VBZ", "barks")]),
        ])

    def test_whitespace_and_newlines(self):
        tree = parse_tree("""
            (ROOT
              (S
                (NP (NN dog))
                (VP (VBZ barks))))
        """)
        assert tree.to_bracketed() == "(ROOT (S (NP (NN dog)) (VP (VBZ barks))))"

    def test_unlabeled_wrapper_is_dropped(self):
        tree = parse_tree("( (S (NP (NN dog)) (VP (VBZ barks))) )")
        assert tree.label == "S"

    def test_special_labels(self):
        tree = parse_tree("(PRN (-LRB- -LRB-) (@NP (NN x)) (-RRB- -RRB-))")
        assert [c.label for c in tree.children] == ["-LRB-", "@NP", "-RRB-"]

    def test_read_multiple_trees(self):
        trees = read_trees("(NN dog) (NN cat)\n(VBZ barks)")
        assert [t.terminal_value for t in trees] == ["dog", "cat", "barks"]

    def test_read_empty_text(self):
        assert read_trees("   \n") == []

    def test_read_tree_file(self, tmp_path):
        path = tmp_path / "trees.txt"
        path.write_text("(S (NP (NN dog)) (VP (VBZ barks)))\n", encoding="utf-8")
        assert len(read_tree_file(path)) == 1

    @pytest.mark.parametrize("text, fragment", [
        ("(NN dog", "unclosed bracket for 'NN'"),
        ("dog", "expected '('"),
        ("()", "empty brackets"),
        ("", "end of input"),
        ("(NN dog))", "unexpected ')' after tree"),
        ("( (NN dog) (NN cat) )", "expected ')'"),
    ])
    def test_malformed_input(self, text, fragment):
        with pytest.raises(TreeSyntaxError) as excinfo:
            parse_tree(text)
        assert fragment in str(excinfo.value)

    def test_error_offset(self):
        with pytest.raises(TreeSyntaxError) as excinfo:
            parse_tree("(NN dog")
        assert excinfo.value.offset == 7
        assert isinstance(excinfo.value, ValueError)

    def test_deeply_nested_tree(self):
        depth = 5000
        tree = parse_tree("(S " * depth + "(NN dog)" + ")" * depth)
        assert tree.label == "S"
        assert tree.terminal_yield() == ["dog"]

    def test_nested_unlabeled_wrapper(self):
        tree = parse_tree("(S ( (NP (NN dog)) ) (VP (VBZ barks)))")
        assert [c.label for c in tree.children] == ["NP", "VP"]
