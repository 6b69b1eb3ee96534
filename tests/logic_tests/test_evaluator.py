# tests/logic_tests/test_evaluator.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Test suite for sentence evaluation under an assignment

"""Test suite for the evaluator.

Checks every connective against its truth function, the accepted assignment
shapes, the error raised for letters without a value, and that binary
connectives never short-circuit.
"""

import pytest
from parser import parse
from parser.ast_nodes import Value, Letter, Negation, Conjunction
from logic import evaluate, UnboundLetterError
from utils.logger import get_logger

T, F = True, False


class TestConnectiveSemantics:
    """Each binary connective over the four assignments of A and B."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    # (formula, values for AB = TT, TF, FT, FF)
    CONNECTIVE_CASES = [
        ("A & B", [T, F, F, F]),
        ("A v B", [T, T, T, F]),
        ("A -> B", [T, F, T, T]),
        ("A <-> B", [T, F, F, T]),
        ("A + B", [F, T, T, F]),
        ("A | B", [F, T, T, T]),
    ]

    @pytest.mark.parametrize("formula, expected", CONNECTIVE_CASES)
    def test_truth_function(self, formula, expected):
        """Test a connective against its defining truth function.

        Args:
            formula: Binary formula over A and B
            expected: Values for AB = TT, TF, FT, FF
        """
        sentence = parse(formula)
        actual = [
            evaluate({"A": a, "B": b}, sentence)
            for a, b in [(T, T), (T, F), (F, T), (F, F)]
        ]
        self.logger.debug(f"{formula}: {actual}")
        assert actual == expected

    def test_negation(self):
        assert evaluate({"A": True}, parse("~A")) is False
        assert evaluate({"A": False}, parse("~A")) is True
        assert evaluate({"A": True}, parse("~~A")) is True

    def test_constants(self):
        assert evaluate({}, Value(True)) is True
        assert evaluate({}, Negation(Value(True))) is False
        assert evaluate({"A": False}, Conjunction(Value(True), Letter("A"))) is False

    def test_nested_formula(self):
        sentence = parse("[(A & B) -> C] <-> {A -> (B -> C)}")
        for a in (T, F):
            for b in (T, F):
                for c in (T, F):
                    assert evaluate({"A": a, "B": b, "C": c}, sentence) is True


class TestAssignments:
    """Assignment shapes and unbound letters."""

    def test_mapping_keyed_by_letter(self):
        assignment = {Letter("A"): True, Letter("A", 1): False}
        assert evaluate(assignment, Conjunction(Letter("A"), Letter("A", 1))) is False

    def test_mapping_keyed_by_name(self):
        assert evaluate({"B1": True}, Letter("B", 1)) is True

    def test_callable_assignment(self):
        assert evaluate(lambda letter: letter.id == "A", parse("A & ~B")) is True

    def test_missing_letter_in_mapping(self):
        with pytest.raises(UnboundLetterError) as exc_info:
            evaluate({"A": True}, parse("A & B"))

        assert exc_info.value.letter == Letter("B")
        assert "Letter B not found" in str(exc_info.value)

    def test_callable_raising_key_error(self):
        def lookup(letter):
            return {"A": True}[letter.name]

        with pytest.raises(UnboundLetterError):
            evaluate(lookup, parse("A v B"))

    def test_callable_returning_none(self):
        with pytest.raises(UnboundLetterError):
            evaluate(lambda letter: None, Letter("C"))

    def test_unbound_letter_is_lookup_error(self):
        assert issubclass(UnboundLetterError, LookupError)


class TestNoShortCircuit:
    """Both operands are always evaluated."""

    # (formula, a value of A that alone decides the result)
    @pytest.mark.parametrize(
        "formula, decisive", [("A & B", F), ("A v B", T), ("A -> B", F), ("A | B", F)]
    )
    def test_right_operand_is_evaluated(self, formula, decisive):
        """Test that the right operand is read even when the left decides.

        Args:
            formula: Binary formula over A and B
            decisive: Value of A fixing the result
        """
        queried = []

        def lookup(letter):
            queried.append(letter.name)
            return decisive

        evaluate(lookup, parse(formula))
        assert queried == ["A", "B"]
