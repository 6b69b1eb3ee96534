# logic/quiz.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Quiz mode: user-supplied quasi-column values gated by dependencies

"""Quiz session state for a generated truth table.

In quiz mode every value token whose sub-formula is non-atomic becomes a cell
the user must fill in, for every row. Letters and constants are filled in
automatically. A cell unlocks once every cell it depends on (same row, same
formula) holds an answer.

All quiz state lives in one QuizSession object; the truth table, layouts and
dependency graphs it reads are immutable.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Iterator, List, NamedTuple, Optional

from utils.logger import get_logger
from .dependencies import DependencyGraph
from .exceptions import QuizError
from .layout import FormulaLayout, layout
from .evaluator import evaluate
from .truth_table import TruthTableResult


class CellId(NamedTuple):
    """Quiz cell address."""

    row: int
    formula: int
    position: int

    def __str__(self) -> str:
        return f"{self.row}-{self.formula}-{self.position}"


class CellStatus(Enum):
    """Outcome of checking one answered cell."""

    CORRECT = auto()
    INCORRECT = auto()


@dataclass(frozen=True)
class QuizStats:
    total: int
    filled: int
    correct: int
    incorrect: int


@dataclass(frozen=True)
class _Snapshot:
    answers: Dict[CellId, bool]
    statuses: Dict[CellId, CellStatus]
    checked: bool


class QuizSession:
    """Answers, check results and reveal state for one truth table.

    Attributes:
        result: The truth table being quizzed
        layouts: One layout per formula of the table
        graphs: One dependency graph per layout
    """

    def __init__(self, result: TruthTableResult):
        self.result = result
        self.layouts: List[FormulaLayout] = [layout(f) for f in result.formulas]
        self.graphs: List[DependencyGraph] = [
            DependencyGraph.from_layout(l) for l in self.layouts
        ]
        self._answers: Dict[CellId, bool] = {}
        self._statuses: Dict[CellId, CellStatus] = {}
        self.checked = False
        self.revealed = False
        self._saved: Optional[_Snapshot] = None

    # Cells
    def cells(self) -> Iterator[CellId]:
        """Every quiz cell, row by row, formula by formula, left to right."""
        for row in range(len(self.result.rows)):
            for formula, graph in enumerate(self.graphs):
                for position in graph.nodes():
                    yield CellId(row, formula, position)

    def is_cell(self, cell: CellId) -> bool:
        if not 0 <= cell.row < len(self.result.rows):
            return False
        if not 0 <= cell.formula < len(self.graphs):
            return False
        return cell.position in self.graphs[cell.formula].edges

    def _require_cell(self, cell: CellId) -> None:
        if not self.is_cell(cell):
            raise QuizError(f"Cell {cell} is not a quiz cell")

    def expected(self, cell: CellId) -> bool:
        """Correct value of a cell."""
        self._require_cell(cell)
        token = self.layouts[cell.formula].value_token(cell.position)
        return evaluate(self.result.rows[cell.row].lookup, token.subformula)

    def is_unlocked(self, cell: CellId) -> bool:
        """True once every cell this one depends on has an answer."""
        self._require_cell(cell)
        deps = self.graphs[cell.formula].dependencies(cell.position)
        return all(CellId(cell.row, cell.formula, p) in self._answers for p in deps)

    # Answers
    def answer_for(self, cell: CellId) -> Optional[bool]:
        return self._answers.get(cell)

    def status_for(self, cell: CellId) -> Optional[CellStatus]:
        return self._statuses.get(cell)

    def answer(self, cell: CellId, value: Optional[bool]) -> None:
        """Record (or, with None, clear) the answer for a cell.

        Raises:
            QuizError: The cell is not a quiz cell or is still locked
        """
        self._require_cell(cell)
        if not self.is_unlocked(cell):
            raise QuizError(f"Cell {cell} is locked until its dependencies are answered")

        if value is None:
            self._answers.pop(cell, None)
        else:
            self._answers[cell] = bool(value)

        # A changed answer is no longer checked
        if self.checked:
            self._statuses.pop(cell, None)

        get_logger().quiz_event("answer", cell=cell, value=value)

    def check(self) -> Dict[CellId, CellStatus]:
        """Mark every answered cell correct or incorrect."""
        self._statuses = {
            cell: CellStatus.CORRECT if value == self.expected(cell) else CellStatus.INCORRECT
            for cell, value in self._answers.items()
        }
        self.checked = True
        get_logger().quiz_event("check", answered=len(self._answers))
        return dict(self._statuses)

    def toggle_reveal(self) -> None:
        """Reveal every answer, or restore the answers saved by the last reveal."""
        if self.revealed:
            saved = self._saved
            self._answers = dict(saved.answers)
            self._statuses = dict(saved.statuses)
            self.checked = saved.checked
            self._saved = None
            self.revealed = False
            get_logger().quiz_event("hide")
            return

        self._saved = _Snapshot(dict(self._answers), dict(self._statuses), self.checked)
        for cell in self.cells():
            self._answers[cell] = self.expected(cell)
            self._statuses[cell] = CellStatus.CORRECT
        self.revealed = True
        self.checked = True
        get_logger().quiz_event("reveal", cells=len(self._answers))

    def reset(self) -> None:
        self._answers.clear()
        self._statuses.clear()
        self.checked = False
        self.revealed = False
        self._saved = None
        get_logger().quiz_event("reset")

    def stats(self) -> QuizStats:
        total = filled = correct = incorrect = 0
        for cell in self.cells():
            total += 1
            if cell in self._answers:
                filled += 1
            status = self._statuses.get(cell)
            if status is CellStatus.CORRECT:
                correct += 1
            elif status is CellStatus.INCORRECT:
                incorrect += 1
        return QuizStats(total, filled, correct, incorrect)
