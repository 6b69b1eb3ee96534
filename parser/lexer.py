# parser/lexer.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module implements tokenization of propositional-logic formulas, breaking
input strings into tokens for parser consumption. Connective symbols are the
typed ASCII forms; the display symbols used by the spaced rendering are
accepted as aliases so that rendered formulas can be read back.

Supported Tokens:
- Letters: a single uppercase ASCII character (A-Z)
- Negation: ~
- Conjunction: & (alias ∧)
- Disjunction: v (alias ∨)
- Conditional: -> (alias →)
- Biconditional: <-> (alias ↔)
- Exclusive or: + (alias ⊕)
- Nand: |
- Brackets: ( ), [ ], { }
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from utils.logger import get_logger


class SentenceLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Letters are single characters, so ``AB`` is two LETTER tokens and is
    rejected by the grammar rather than read as one identifier. Lowercase
    ``v`` is reserved for disjunction.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    # Valid token types for parser recognition
    tokens = {
        "LETTER",
        "NOT",
        "AND",
        "OR",
        "IFF",
        "IMP",
        "XOR",
        "NAND",
        "LPAREN",
        "RPAREN",
        "LBRACKET",
        "RBRACKET",
        "LBRACE",
        "RBRACE",
    }

    # Whitespace characters to ignore
    ignore = " \t\r\n"

    # Connectives (biconditional before conditional so '<->' is never split)
    NOT = r"~"
    AND = r"&|∧"
    OR = r"v|∨"
    IFF = r"<->|↔"
    IMP = r"->|→"
    XOR = r"\+|⊕"
    NAND = r"\|"

    # Brackets
    LPAREN = r"\("
    RPAREN = r"\)"
    LBRACKET = r"\["
    RBRACKET = r"\]"
    LBRACE = r"\{"
    RBRACE = r"\}"

    LETTER = r"[A-Z]"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        # Skip the illegal character
        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
