# logic/evaluator.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Structural evaluation of sentences under a variable assignment

"""Evaluates propositional sentences.

The evaluator is a visitor over the Sentence tree. Both operands of a binary
connective are always evaluated, never short-circuited, which keeps the
evaluation order identical to the one used for quasi-column values.
"""

from __future__ import annotations
from typing import Callable, Mapping, Union

from parser import ast_nodes as ast
from .exceptions import UnboundLetterError

Assignment = Union[Callable[[ast.Letter], bool], Mapping]


def _as_lookup(assignment: Assignment) -> Callable[[ast.Letter], bool]:
    """Normalise an assignment into a ``Letter -> bool`` function.

    Mappings may be keyed either by Letter or by the letter's display name.
    """
    if not isinstance(assignment, Mapping):
        return assignment

    def lookup(letter: ast.Letter) -> bool:
        if letter in assignment:
            return assignment[letter]
        if letter.name in assignment:
            return assignment[letter.name]
        raise UnboundLetterError(letter)

    return lookup


class Evaluator(ast.Visitor):
    """Computes the truth value of a sentence for one assignment.

    Attributes:
        _lookup: Function returning the value of a letter
    """

    def __init__(self, assignment: Assignment):
        self._lookup = _as_lookup(assignment)

    def evaluate(self, s: ast.Sentence) -> bool:
        return s.accept(self)

    def visit_value(self, n: ast.Value) -> bool:
        return n.value

    def visit_letter(self, n: ast.Letter) -> bool:
        try:
            value = self._lookup(n)
        except KeyError as e:
            raise UnboundLetterError(n) from e
        if value is None:
            raise UnboundLetterError(n)
        return bool(value)

    def visit_negation(self, n: ast.Negation) -> bool:
        return not self.evaluate(n.operand)

    def visit_conjunction(self, n: ast.Conjunction) -> bool:
        left, right = self.evaluate(n.left), self.evaluate(n.right)
        return left and right

    def visit_disjunction(self, n: ast.Disjunction) -> bool:
        left, right = self.evaluate(n.left), self.evaluate(n.right)
        return left or right

    def visit_conditional(self, n: ast.Conditional) -> bool:
        left, right = self.evaluate(n.left), self.evaluate(n.right)
        return (not left) or right

    def visit_biconditional(self, n: ast.Biconditional) -> bool:
        return self.evaluate(n.left) == self.evaluate(n.right)

    def visit_xor(self, n: ast.Xor) -> bool:
        return self.evaluate(n.left) != self.evaluate(n.right)

    def visit_nand(self, n: ast.Nand) -> bool:
        left, right = self.evaluate(n.left), self.evaluate(n.right)
        return not (left and right)


def evaluate(assignment: Assignment, s: ast.Sentence) -> bool:
    """Evaluate a sentence under an assignment.

    Args:
        assignment: ``Letter -> bool`` function, or a mapping keyed by Letter
            or by letter display name
        s: Sentence to evaluate

    Returns:
        Truth value of the sentence

    Raises:
        UnboundLetterError: The assignment has no value for a letter of ``s``
    """
    return Evaluator(assignment).evaluate(s)
