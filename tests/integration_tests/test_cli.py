# tests/integration_tests/test_cli.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# End-to-end tests of the command-line interface

"""Integration tests for run_truth_table.main.

Each test runs the CLI in-process with an argument list and checks the exit
code and the table printed to stdout.
"""

import pytest

import run_truth_table
from run_truth_table import main


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    from utils.logger import configure_logging

    configure_logging()


class TestExitCodes:
    """Exit codes for well-formed, rejected and missing input."""

    def test_single_formula(self, capsys):
        assert main(["A -> B"]) == 0

        out = capsys.readouterr().out
        assert "A B | A → B" in out
        assert "⊥ ⊥ | ⊥ ⊤ ⊥" in out

    def test_rejected_formula(self, capsys):
        assert main(["A & B & C"]) == 2
        assert "|" not in capsys.readouterr().out

    def test_partial_batch_still_prints_table(self, capsys):
        assert main(["A & B & C", "~A"]) == 2
        assert "A | ~ A" in capsys.readouterr().out

    def test_no_formulas(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_missing_batch_file(self, tmp_path):
        assert main(["-i", str(tmp_path / "missing.txt")]) == 3

    def test_unexpected_error(self, monkeypatch):
        def broken(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(run_truth_table, "build_truth_table", broken)
        assert main(["A"]) == 5

    def test_interrupted(self, monkeypatch):
        def interrupted(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr(run_truth_table, "build_truth_table", interrupted)
        assert main(["A"]) == 4


class TestOutputOptions:
    """Batch files and output formats."""

    def test_batch_file(self, tmp_path, capsys):
        batch = tmp_path / "formulas.txt"
        batch.write_text("A & B\n\n(A v B) -> C\n", encoding="utf-8")

        assert main(["-i", str(batch)]) == 0
        out = capsys.readouterr().out
        assert "A B C | A & B | ( A ∨ B ) → C" in out

    def test_command_line_and_batch_formulas_are_combined(self, tmp_path, capsys):
        batch = tmp_path / "formulas.txt"
        batch.write_text("B\n", encoding="utf-8")

        assert main(["A", "-i", str(batch), "--format", "compact"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "⊤ ⊤ : ⊤ ⊤",
            "⊤ ⊥ : ⊤ ⊥",
            "⊥ ⊤ : ⊥ ⊤",
            "⊥ ⊥ : ⊥ ⊥",
        ]

    def test_no_quasi(self, capsys):
        assert main(["(A & B) v C", "--no-quasi"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "A B C | ( A & B ) ∨ C"
        assert lines[2] == "⊤ ⊤ ⊤ |" + " " * 11 + "⊤"

    def test_connectives(self, capsys):
        assert main(["--connectives"]) == 0

        out = capsys.readouterr().out
        assert "Negation (~)" in out
        assert "NAND (|)" in out
        assert "P Q | P | Q" in out

    def test_visualize(self, tmp_path, monkeypatch):
        import utils.tree_visualizer as tree_visualizer

        rendered = []

        def fake_render(formula_layout, base_filename, output_dir, fmt="png"):
            rendered.append((str(formula_layout.sentence), base_filename, output_dir))
            return None

        monkeypatch.setattr(tree_visualizer, "render_dependency_graph", fake_render)

        assert main(["A -> B", "~A", "--visualize", str(tmp_path)]) == 0
        assert rendered == [
            ("A → B", "formula_1", str(tmp_path)),
            ("~A", "formula_2", str(tmp_path)),
        ]
