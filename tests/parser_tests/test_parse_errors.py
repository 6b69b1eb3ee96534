# tests/parser_tests/test_parse_errors.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Test suite for parser syntax validation and error handling

"""Test suite for parser rejection of ill-formed formulas.

Every rejection is a ParseError whose message starts with the generic
"not a wff" diagnostic. The intentional rejections of the precedence-free
grammar are GroupingErrors with their own detail.
"""

import pytest
from parser import parse, ParseError, GroupingError
from parser.exceptions import WFF_DIAGNOSTIC
from utils.logger import get_logger


class TestParseErrors:
    """Test cases for parser syntax validation and error handling."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    INVALID_SYNTAX_CASES = [
        # Chained connectives
        "A & B & C",
        "A v B v C",
        "A & B v C",
        "A -> B -> C",
        "(A & B & C)",
        # Brackets around atoms and negations
        "(A)",
        "(~A)",
        "[A]",
        "{~~A}",
        "~(A)",
        "(((A)))",
        # Incomplete expressions
        "A &",
        "& A",
        "~",
        "A v",
        "()",
        # Juxtaposition
        "A B",
        "AB",
        "A ~B",
        # Doubled connectives
        "A && B",
        "A v v B",
        # Bracket mismatches
        "A & (B",
        "(A & B]",
        "[A & B)",
        "{A & B]",
        "A & B)",
        "(A & B))",
        # Illegal characters
        "a & b",
        "A => B",
        "A ^ B",
        "A1 & B",
        "A * B",
    ]

    @pytest.mark.parametrize("bad_formula", INVALID_SYNTAX_CASES)
    def test_invalid_syntax_raises_parse_error(self, bad_formula):
        """Test that ill-formed formulas raise ParseError.

        Args:
            bad_formula: Formula string with syntax errors
        """
        self.logger.debug(f"Testing invalid formula: '{bad_formula}'")

        with pytest.raises(ParseError) as exc_info:
            parse(bad_formula)

        assert str(exc_info.value).startswith(WFF_DIAGNOSTIC)

    CHAINED_CASES = [
        "A & B & C",
        "A v B v C",
        "A -> B <-> C",
        "A + B | C",
        "~A & B v C",
        "[A & B v C]",
    ]

    @pytest.mark.parametrize("bad_formula", CHAINED_CASES)
    def test_chained_connectives_need_grouping(self, bad_formula):
        """Three operands joined without brackets are a GroupingError.

        Args:
            bad_formula: Formula chaining two binary connectives
        """
        with pytest.raises(GroupingError, match="Explicit grouping required"):
            parse(bad_formula)

    BRACKETED_FACTOR_CASES = ["(A)", "(~A)", "[B]", "{~~C}", "~(A)", "A & (B)", "((~A))"]

    @pytest.mark.parametrize("bad_formula", BRACKETED_FACTOR_CASES)
    def test_brackets_only_around_binary(self, bad_formula):
        """Brackets around a letter or a negation are a GroupingError.

        Args:
            bad_formula: Formula bracketing a non-binary sub-formula
        """
        with pytest.raises(GroupingError, match="only allowed around binary"):
            parse(bad_formula)

    @pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
    def test_empty_input(self, blank):
        """Blank input is rejected with its own message."""
        with pytest.raises(ParseError, match="empty"):
            parse(blank)

    def test_unexpected_token_reports_position(self):
        """Syntax errors name the offending token and its position."""
        with pytest.raises(ParseError) as exc_info:
            parse("A & )")

        assert exc_info.value.detail == "unexpected ')' at position 4"

    def test_unexpected_end_of_input(self):
        with pytest.raises(ParseError) as exc_info:
            parse("A &")

        assert "unexpected end of formula" in str(exc_info.value)

    def test_grouping_error_is_parse_error(self):
        assert issubclass(GroupingError, ParseError)

    def test_message_without_detail(self):
        assert str(ParseError()) == f"{WFF_DIAGNOSTIC}."

    def test_stack_exhaustion_is_not_a_parse_error(self, monkeypatch):
        """Running out of interpreter stack is not reported as an ill-formed formula."""
        from sly import Parser

        def exhausted(self, tokens):
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr(Parser, "parse", exhausted)

        with pytest.raises(RecursionError):
            parse("A & B")
