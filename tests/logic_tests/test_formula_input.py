# tests/logic_tests/test_formula_input.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Test suite for formula validation and batch handling

"""Test suite for user formula input.

Each formula is validated on its own; a batch produces a truth table over
the formulas that parsed.
"""

import pytest
from parser.ast_nodes import Letter, Conjunction
from parser.exceptions import WFF_DIAGNOSTIC
from logic import FormulaInput, validate_formula, load_batch, can_generate, build_truth_table
from logic.formula_input import OUTER_PARENS_WARNING, split_batch


class TestValidateFormula:
    """Validation outcome of a single formula."""

    def test_valid_formula(self):
        result = validate_formula("A & B")

        assert result.is_valid
        assert result.parsed == Conjunction(Letter("A"), Letter("B"))
        assert result.error is None
        assert result.warning is None

    @pytest.mark.parametrize("blank", ["", "  ", "\t"])
    def test_blank_is_neither_valid_nor_error(self, blank):
        result = validate_formula(blank)

        assert result.is_blank
        assert not result.is_valid
        assert result.error is None

    @pytest.mark.parametrize("bad_formula", ["A & B & C", "(A)", "A &", "a"])
    def test_invalid_formula_records_error(self, bad_formula):
        result = validate_formula(bad_formula)

        assert not result.is_valid
        assert result.error.startswith(WFF_DIAGNOSTIC)

    @pytest.mark.parametrize("formula", ["(A & B)", "[A -> B]", " {A v ~B} ", "((A & B))"])
    def test_outer_parentheses_warning(self, formula):
        """Test that a bracket pair around the whole formula is accepted with a warning.

        Args:
            formula: Formula fully enclosed in one bracket pair
        """
        result = validate_formula(formula)

        assert result.is_valid
        assert result.warning == OUTER_PARENS_WARNING

    @pytest.mark.parametrize("formula", ["(A & B) v (C & D)", "~(A & B)", "A", "(A & B) v C"])
    def test_no_warning_without_enclosing_pair(self, formula):
        assert validate_formula(formula).warning is None


class TestBatches:
    """Multi-line input and table construction."""

    def test_split_batch_skips_blank_lines(self):
        assert split_batch("A & B\n\n  \n~C\n") == ["A & B", "~C"]

    def test_load_batch_validates_each_line(self):
        inputs = load_batch("A & B\nA & B & C\n(A v C)")

        assert [i.is_valid for i in inputs] == [True, False, True]
        assert inputs[2].warning == OUTER_PARENS_WARNING

    def test_can_generate_requires_all_valid(self):
        assert can_generate(load_batch("A\nB -> C"))
        assert not can_generate(load_batch("A\nB -> "))
        assert not can_generate([])
        assert not can_generate([FormulaInput("  ")])

    def test_can_generate_ignores_blank_inputs(self):
        assert can_generate([validate_formula("A"), validate_formula("")])

    def test_build_truth_table_uses_valid_inputs(self):
        result = build_truth_table(load_batch("A & B\n(A)\n~C"))

        assert len(result.formulas) == 2
        assert [l.name for l in result.letters] == ["A", "B", "C"]
        assert len(result.rows) == 8

    def test_build_truth_table_without_valid_inputs(self):
        assert build_truth_table(load_batch("(A)\nA B")) is None
