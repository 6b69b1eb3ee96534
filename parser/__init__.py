# parser/__init__.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Formula parsing components for propositional logic

"""Propositional formula parsing.

This package turns formula text into Sentence trees under a strict,
ambiguity-free grammar. There is no operator precedence: every formula with
two or more binary connectives must be fully bracketed, and brackets are only
allowed around binary connectives.

Core Functions:
    parse: Converts formula strings into Sentence trees

Supported Syntax:
    - Letters: A, B, C, ... (one uppercase character)
    - Negation: ~
    - Conjunction: &      Disjunction: v      Conditional: ->
    - Biconditional: <->  Exclusive or: +     Nand: |
    - Grouping: (), [] or {}

Example:
    >>> from parser import parse
    >>> s = parse("(A & B) v ~C")
    >>> str(s)
    '(A & B) ∨ ~C'
"""

from .exceptions import ParseError, GroupingError
from .grammar import _SentenceParser
from .ast_nodes import Sentence
from utils.logger import get_logger


def parse(source: str) -> Sentence:
    """Parse formula text into a Sentence tree.

    Uses a fresh parser instance for each invocation, so parsing is a pure
    function of the input text.

    Args:
        source: Formula string to parse

    Returns:
        Root node of the parsed formula

    Raises:
        ParseError: Formula is not well-formed
        GroupingError: Formula relies on implicit grouping (a ParseError)
        RecursionError: Formula is nested too deeply for the interpreter stack

    Example:
        >>> parse("A -> B")
        Conditional(left=Letter(id='A', index=0), right=Letter(id='B', index=0))
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source!r}")

    parser = _SentenceParser()

    try:
        result = parser.parse(source)
        logger.debug(f"Formula parsed successfully into: {type(result).__name__}")
        return result

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except RecursionError:
        logger.error("Formula is nested too deeply to process")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = ["parse", "ParseError", "GroupingError"]

__version__ = "1.0.0"
__description__ = "Precedence-free propositional formula parser"
