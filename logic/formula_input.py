# logic/formula_input.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Validation of user-entered formulas and batch table construction

"""Formula input handling.

Each formula the user types is validated independently: a rejection affects
only that formula, and the truth table of a batch is built from the formulas
that parsed. Blank inputs are neither valid nor errors; they are ignored.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence

from parser import parse, ParseError
from parser.ast_nodes import Sentence, Binary
from utils.logger import get_logger
from .truth_table import TruthTableResult, generate_truth_table

OUTER_PARENS_WARNING = "Outer parentheses not required."

_BRACKET_PAIRS = (("(", ")"), ("[", "]"), ("{", "}"))


@dataclass(frozen=True)
class FormulaInput:
    """One formula as typed, with its validation outcome.

    Attributes:
        text: Raw input text
        parsed: Parsed sentence, or None if blank or invalid
        error: Parse diagnostic, or None
        warning: Non-fatal remark about the input, or None
    """

    text: str
    parsed: Optional[Sentence] = None
    error: Optional[str] = None
    warning: Optional[str] = None

    @property
    def is_blank(self) -> bool:
        return self.text.strip() == ""

    @property
    def is_valid(self) -> bool:
        return self.parsed is not None


def has_unnecessary_outer_parens(text: str, parsed: Sentence) -> bool:
    """True if one bracket pair encloses the whole of a binary formula."""
    trimmed = text.strip()
    for open_char, close_char in _BRACKET_PAIRS:
        if trimmed.startswith(open_char) and trimmed.endswith(close_char):
            depth = 0
            for ch in trimmed[:-1]:
                if ch == open_char:
                    depth += 1
                elif ch == close_char:
                    depth -= 1
                if depth == 0:
                    # closed before the end, e.g. "(A & B) v (C & D)"
                    return False
            return isinstance(parsed, Binary)
    return False


def validate_formula(text: str) -> FormulaInput:
    """Parse one formula and record the outcome."""
    if text.strip() == "":
        return FormulaInput(text)

    try:
        parsed = parse(text)
    except ParseError as e:
        get_logger().debug(f"Rejected formula {text!r}: {e}")
        return FormulaInput(text, error=str(e))

    warning = OUTER_PARENS_WARNING if has_unnecessary_outer_parens(text, parsed) else None
    return FormulaInput(text, parsed=parsed, warning=warning)


def split_batch(text: str) -> List[str]:
    """One formula per non-blank line."""
    return [line for line in text.splitlines() if line.strip()]


def load_batch(text: str) -> List[FormulaInput]:
    """Validate every formula of a multi-line batch."""
    return [validate_formula(line) for line in split_batch(text)]


def can_generate(inputs: Sequence[FormulaInput]) -> bool:
    """True if there is at least one formula and every non-blank one is valid."""
    non_blank = [i for i in inputs if not i.is_blank]
    return bool(non_blank) and all(i.is_valid for i in non_blank)


def build_truth_table(inputs: Sequence[FormulaInput]) -> Optional[TruthTableResult]:
    """Truth table over the valid inputs, or None if there are none."""
    formulas = [i.parsed for i in inputs if i.parsed is not None]
    if not formulas:
        return None
    return generate_truth_table(formulas)
