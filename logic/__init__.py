# logic/__init__.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Logic engine exports

"""Truth-table logic engine.

This package provides:
  • evaluate: truth value of a sentence under an assignment
  • collect_letters / LetterSet: the letters occurring in formulas
  • generate_truth_table: every assignment of a batch of formulas
  • layout: display tokens exposing every sub-formula evaluation point
  • DependencyGraph: which evaluation points each one depends on
  • QuizSession: quiz-mode answers gated by the dependency graph
"""

from .dependencies import DependencyGraph, direct_dependencies, subformula_positions
from .evaluator import Evaluator, evaluate
from .exceptions import QuizError, UnboundLetterError
from .formula_input import FormulaInput, build_truth_table, can_generate, load_batch, validate_formula
from .layout import FormulaLayout, TextToken, ValueToken, evaluate_layout, layout
from .letters import LetterSet, collect_batch_letters, collect_letters
from .quiz import CellId, CellStatus, QuizSession
from .truth_table import TruthTableResult, TruthTableRow, connective_definitions, generate_truth_table

__all__ = [
    "DependencyGraph",
    "direct_dependencies",
    "subformula_positions",
    "Evaluator",
    "evaluate",
    "QuizError",
    "UnboundLetterError",
    "FormulaInput",
    "build_truth_table",
    "can_generate",
    "load_batch",
    "validate_formula",
    "FormulaLayout",
    "TextToken",
    "ValueToken",
    "evaluate_layout",
    "layout",
    "LetterSet",
    "collect_batch_letters",
    "collect_letters",
    "CellId",
    "CellStatus",
    "QuizSession",
    "TruthTableResult",
    "TruthTableRow",
    "connective_definitions",
    "generate_truth_table",
]
