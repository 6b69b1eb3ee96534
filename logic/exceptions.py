# logic/exceptions.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Exceptions raised by evaluation, table generation and quiz state

"""Exceptions for the logic engine.

UnboundLetterError signals a broken internal invariant: an assignment built
by the truth-table generator always covers every letter of its batch, so
seeing this error means a caller bypassed the generator. QuizError is the
only user-facing condition in this package.
"""

from parser.ast_nodes import Letter


class UnboundLetterError(LookupError):
    """Raised when an assignment has no value for a letter.

    Attributes:
        letter: The letter that could not be resolved
    """

    def __init__(self, letter: Letter):
        self.letter = letter
        super().__init__(f"Letter {letter.name} not found in assignment")


class QuizError(ValueError):
    """Raised when a quiz answer targets an unknown or locked cell."""

    pass
