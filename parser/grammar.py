# parser/grammar.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Precedence-free propositional grammar implemented with SLY.

The grammar deliberately has no precedence or associativity. A binary
connective takes exactly two factors, and anything larger must be grouped
with brackets:

    sentence : binary | factor
    binary   : factor OP factor
    factor   : NOT factor
             | '(' binary ')' | '[' binary ']' | '{' binary '}'
             | LETTER

Two extra productions exist only to reject input with a specific message:
``binary OP factor`` (three operands chained without grouping) and a bracket
pair around a letter or a negation (``(A)`` or ``(~A)``). Both raise
GroupingError. Redundant brackets around a bracketed binary, as in
``((A & B))``, are accepted.
"""

from sly import Parser
from .lexer import SentenceLexer
from .ast_nodes import (
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
from .exceptions import ParseError, GroupingError
from utils.logger import get_logger


class _SentenceParser(Parser):
    """SLY-based LALR(1) parser for propositional formulas.

    Builds Sentence nodes from the token stream of SentenceLexer. The
    productions are conflict-free without a precedence table because every
    binary rule is flat.

    Attributes:
        tokens: Token types from SentenceLexer
    """

    tokens = SentenceLexer.tokens

    @_("binary", "factor")
    def sentence(self, p) -> Sentence:
        """Start rule: a complete formula is one binary or one factor."""
        return p[0]

    # Binary connectives: exactly two operands
    @_("factor AND factor")
    def binary(self, p) -> Sentence:
        return Conjunction(p.factor0, p.factor1)

    @_("factor OR factor")
    def binary(self, p) -> Sentence:
        return Disjunction(p.factor0, p.factor1)

    @_("factor IMP factor")
    def binary(self, p) -> Sentence:
        return Conditional(p.factor0, p.factor1)

    @_("factor IFF factor")
    def binary(self, p) -> Sentence:
        return Biconditional(p.factor0, p.factor1)

    @_("factor XOR factor")
    def binary(self, p) -> Sentence:
        return Xor(p.factor0, p.factor1)

    @_("factor NAND factor")
    def binary(self, p) -> Sentence:
        return Nand(p.factor0, p.factor1)

    @_(
        "binary AND factor",
        "binary OR factor",
        "binary IMP factor",
        "binary IFF factor",
        "binary XOR factor",
        "binary NAND factor",
    )
    def binary(self, p) -> Sentence:
        """Three or more operands without brackets."""
        raise GroupingError("Explicit grouping required (use parentheses)")

    # Factors
    @_("NOT factor")
    def factor(self, p) -> Sentence:
        return Negation(p.factor)

    @_(
        "LPAREN binary RPAREN",
        "LBRACKET binary RBRACKET",
        "LBRACE binary RBRACE",
    )
    def factor(self, p) -> Sentence:
        """Bracketed binary formula; the bracket kinds must match."""
        return p.binary

    @_(
        "LPAREN factor RPAREN",
        "LBRACKET factor RBRACKET",
        "LBRACE factor RBRACE",
    )
    def factor(self, p) -> Sentence:
        """Brackets around an already bracketed binary, a letter or a negation."""
        if isinstance(p.factor, (Letter, Negation)):
            raise GroupingError("Parentheses only allowed around binary connectives")
        return p.factor

    @_("LETTER")
    def factor(self, p) -> Sentence:
        return Letter(p.LETTER)

    def parse(self, text: str) -> Sentence:
        """Parse formula text into a Sentence.

        Leading and trailing whitespace is trimmed before tokenizing.

        Args:
            text: Formula string to parse

        Returns:
            Root node of the parsed formula

        Raises:
            ParseError: If the formula is empty or not well-formed
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text!r}")

        trimmed = text.strip()
        if not trimmed:
            raise ParseError("Input formula is empty.")

        try:
            result = super().parse(SentenceLexer().tokenize(trimmed))

            if result is None:
                raise ParseError("Failed to parse formula.")

            logger.debug(f"Successfully parsed formula into {type(result).__name__}")
            return result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except RecursionError:
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(str(e)) from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for end-of-input errors

        Raises:
            ParseError: Always raised with the offending token and position
        """
        if token:
            error_msg = f"unexpected '{token.value}' at position {token.index}"
        else:
            error_msg = "unexpected end of formula"

        raise ParseError(error_msg)
