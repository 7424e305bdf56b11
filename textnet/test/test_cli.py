import os
import sys
import json
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))

import io

import pytest

from textnet.compile_from_trees import main


TREES = """
(ROOT (S (NP (NN dog)) (VP (VBZ barks))))
(ROOT (S (NP (NN dog)) (VP (VB chases) (NP (NN cat)))))
"""


class TestCompileFromTrees:

    @pytest.fixture
    def trees_file(self, tmp_path):
        path = tmp_path / "trees.txt"
        path.write_text(TREES, encoding="utf-8")
        return path

    def test_json_output(self, trees_file, capsys):
        assert main([str(trees_file), "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["propositions"] == ["barks(dog, dog)", "chases(dog, cat)"]

    def test_gexf_output(self, trees_file, tmp_path):
        out = tmp_path / "network.gexf"
        assert main([str(trees_file), "-f", str(out)]) == 0
        assert out.read_text(encoding="utf-8").count("<edge ") == 2

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("(S (NP (NN dog)) (VP (VBZ barks)))"))
        assert main(["--json"]) == 0
        assert json.loads(capsys.readouterr().out)["propositions"] == ["barks(dog, dog)"]

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.txt")]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_malformed_tree(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("(S (NP (NN dog))", encoding="utf-8")
        assert main([str(path)]) == 1
        assert "Malformed tree" in capsys.readouterr().err

    def test_deeply_nested_tree(self, tmp_path, capsys):
        depth = 2000
        path = tmp_path / "deep.txt"
        path.write_text(
            "(S (NP (NN dog)) (VP (VBZ barks) " + "(@VP (CC and) " * depth + "(VBZ bites)" + ")" * depth + "))",
            encoding="utf-8",
        )
        assert main([str(path), "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["propositions"] == ["barks(dog, dog)", "bites(dog, dog)"]

    def test_unknown_log_level_option(self, trees_file, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([str(trees_file), "--log-level", "loud"])
        assert excinfo.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_log_level_option_is_case_insensitive(self, trees_file):
        assert main([str(trees_file), "--log-level", "debug"]) == 0

    def test_unknown_log_level_from_environment(self, trees_file, monkeypatch, capsys):
        monkeypatch.setenv("TEXTNET_LOG_LEVEL", "loud")
        assert main([str(trees_file)]) == 1
        assert "Unknown log level: LOUD" in capsys.readouterr().err
