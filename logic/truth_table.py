# logic/truth_table.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Truth table generation over every assignment of a formula batch

"""Truth table generation.

The generator enumerates every assignment to the sorted union of the letters
in a batch of formulas and evaluates each formula against it. Row ``state``
is written as an n-bit binary number with the first letter as the most
significant bit; a 0 bit means true and a 1 bit means false, so the first
row is all true, the last row all false, and the first letter's column runs
⊤…⊤⊥…⊥ as in a conventional hand-written table.
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple

from parser.ast_nodes import (
    Sentence,
    Letter,
    Negation,
    Conjunction,
    Disjunction,
    Conditional,
    Biconditional,
    Xor,
    Nand,
)
from utils.logger import get_logger
from .evaluator import evaluate
from .exceptions import UnboundLetterError
from .letters import collect_batch_letters


@dataclass(frozen=True)
class TruthTableRow:
    """One assignment and the value of every formula under it.

    Attributes:
        assignment: Letter display name -> value, in column order
        values: Value of each formula, in caller order
    """

    assignment: Mapping[str, bool]
    values: Tuple[bool, ...]

    def __post_init__(self):
        # Read-only copy of the caller's mapping
        object.__setattr__(self, "assignment", MappingProxyType(dict(self.assignment)))

    def __hash__(self) -> int:
        return hash((tuple(self.assignment.items()), self.values))

    def lookup(self, letter: Letter) -> bool:
        """Assignment function for this row.

        Raises:
            UnboundLetterError: The letter is not a column of the table
        """
        try:
            return self.assignment[letter.name]
        except KeyError:
            raise UnboundLetterError(letter) from None


@dataclass(frozen=True)
class TruthTableResult:
    """Complete truth table for a batch of formulas.

    Attributes:
        letters: Sorted union of the letters in the batch
        formulas: Input formulas in caller order
        rows: One row per assignment, in enumeration order
    """

    letters: Tuple[Letter, ...]
    formulas: Tuple[Sentence, ...]
    rows: Tuple[TruthTableRow, ...]

    def column(self, formula_index: int) -> List[bool]:
        """Values of one formula down the table."""
        return [row.values[formula_index] for row in self.rows]


def _to_bits(state: int, width: int) -> str:
    """Binary representation of ``state`` zero-padded to ``width`` digits."""
    if width == 0:
        return ""
    return format(state, "b").zfill(width)


def generate_truth_table(formulas: Sequence[Sentence]) -> TruthTableResult:
    """Evaluate a batch of formulas under every assignment of their letters.

    No limit is imposed on the number of letters; callers must bound it,
    since the table has 2^n rows.

    Args:
        formulas: Formulas to tabulate, in display order

    Returns:
        TruthTableResult with max(1, 2^n) rows for n distinct letters

    Raises:
        UnboundLetterError: Internal invariant violation (should not happen)
    """
    logger = get_logger()
    formulas = tuple(formulas)

    letters = tuple(collect_batch_letters(formulas))
    n_states = 1 if not letters else 2 ** len(letters)
    logger.table_generated([l.name for l in letters], len(formulas), n_states)

    rows: List[TruthTableRow] = []
    for state in range(n_states):
        bits = _to_bits(state, len(letters))

        # 0 = true, 1 = false
        assignment = {
            letter.name: bit == "0" for letter, bit in zip(letters, bits)
        }
        row = TruthTableRow(assignment=assignment, values=())

        try:
            values = tuple(evaluate(row.lookup, f) for f in formulas)
        except UnboundLetterError as e:
            logger.error(f"Internal error: assignment for row {state} misses {e.letter.name}")
            raise

        logger.row_evaluated(state, bits, values)
        rows.append(TruthTableRow(assignment=assignment, values=values))

    return TruthTableResult(letters=letters, formulas=formulas, rows=tuple(rows))


_P = Letter("P")
_Q = Letter("Q")

# Reference definitions, titled with the symbols users type
CONNECTIVE_EXAMPLES: Tuple[Tuple[str, Sentence], ...] = (
    ("Negation (~)", Negation(_P)),
    ("Conjunction (&)", Conjunction(_P, _Q)),
    ("Disjunction (v)", Disjunction(_P, _Q)),
    ("Conditional (->)", Conditional(_P, _Q)),
    ("Biconditional (<->)", Biconditional(_P, _Q)),
    ("XOR (+)", Xor(_P, _Q)),
    ("NAND (|)", Nand(_P, _Q)),
)


def connective_definitions() -> List[Tuple[str, TruthTableResult]]:
    """Truth tables defining each connective over P (and Q)."""
    return [(title, generate_truth_table([s])) for title, s in CONNECTIVE_EXAMPLES]
