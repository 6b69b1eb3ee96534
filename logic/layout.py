# logic/layout.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Linearization of a sentence into display tokens with evaluation points

"""Formula layout: the token sequence behind quasi-columns.

A layout writes a sentence left to right as it is displayed: the outermost
node is never bracketed, every binary node below the top level is wrapped in
``(`` … ``)``, and negation is written directly before its operand. Each node
emits exactly one value token (the letter, constant or connective symbol that
carries its truth value); brackets are text tokens without a value.

Every value token also records the token positions of its direct operands,
which gives each sub-formula occurrence a stable identity for the dependency
graph (see ``logic.dependencies``).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from parser import ast_nodes as ast
from .evaluator import Assignment, Evaluator


@dataclass(frozen=True)
class TextToken:
    """Literal display fragment (a bracket); carries no value."""

    text: str


@dataclass(frozen=True)
class ValueToken:
    """Evaluation point of one sentence node.

    Attributes:
        text: Display text of the node (letter, constant or connective)
        subformula: The exact sentence node this token stands for
        is_main: True for the outermost node of the layout's sentence
        operand_positions: Token positions of the node's direct operands
    """

    text: str
    subformula: ast.Sentence
    is_main: bool
    operand_positions: Tuple[int, ...] = ()


FormulaToken = Union[TextToken, ValueToken]


@dataclass(frozen=True)
class TokenValue:
    """Value of one value token under one assignment."""

    position: int
    text: str
    value: bool
    is_main: bool


@dataclass(frozen=True)
class FormulaLayout:
    """Ordered display tokens for one sentence.

    Attributes:
        sentence: The sentence laid out
        tokens: Tokens in left-to-right display order
    """

    sentence: ast.Sentence
    tokens: Tuple[FormulaToken, ...] = field(default=())

    def value_positions(self) -> List[int]:
        """Positions of the value tokens, in display order."""
        return [i for i, t in enumerate(self.tokens) if isinstance(t, ValueToken)]

    def main_position(self) -> int:
        """Position of the token holding the main connective."""
        for i, token in enumerate(self.tokens):
            if isinstance(token, ValueToken) and token.is_main:
                return i
        raise ValueError("Layout has no main connective")

    def value_token(self, position: int) -> ValueToken:
        token = self.tokens[position]
        if not isinstance(token, ValueToken):
            raise ValueError(f"Token {position} ({token.text!r}) carries no value")
        return token

    def column_numbers(self) -> List[Optional[int]]:
        """Quasi-column numbers: 1..k for value tokens, None for text tokens."""
        numbers: List[Optional[int]] = []
        counter = 0
        for token in self.tokens:
            if isinstance(token, ValueToken):
                counter += 1
                numbers.append(counter)
            else:
                numbers.append(None)
        return numbers

    def __str__(self) -> str:
        return "".join(token.text for token in self.tokens)


# Value-token text per connective; conditional and biconditional are padded
_TOKEN_TEXT = {
    ast.Conjunction: "&",
    ast.Disjunction: "∨",
    ast.Conditional: " → ",
    ast.Biconditional: " ↔ ",
    ast.Xor: "⊕",
    ast.Nand: "|",
}


class _LayoutBuilder:
    """Recursive traversal emitting tokens for one sentence."""

    def __init__(self):
        self.tokens: List[FormulaToken] = []

    def _emit(self, token: FormulaToken) -> int:
        self.tokens.append(token)
        return len(self.tokens) - 1

    def layout(self, s: ast.Sentence, is_main: bool, top_level: bool) -> int:
        """Emit the tokens of ``s``; returns the position of its value token."""
        if isinstance(s, ast.Value):
            return self._emit(ValueToken(str(s), s, is_main))

        if isinstance(s, ast.Letter):
            return self._emit(ValueToken(s.name, s, is_main))

        if isinstance(s, ast.Negation):
            position = self._emit(ValueToken(s.symbol, s, is_main))
            operand = self.layout(s.operand, False, False)
            self.tokens[position] = ValueToken(s.symbol, s, is_main, (operand,))
            return position

        if isinstance(s, ast.Binary):
            if not top_level:
                self._emit(TextToken("("))
            left = self.layout(s.left, False, False)
            position = self._emit(ValueToken(_TOKEN_TEXT[type(s)], s, is_main))
            right = self.layout(s.right, False, False)
            self.tokens[position] = ValueToken(_TOKEN_TEXT[type(s)], s, is_main, (left, right))
            if not top_level:
                self._emit(TextToken(")"))
            return position

        raise TypeError(f"Unknown sentence node: {type(s).__name__}")


def layout(s: ast.Sentence) -> FormulaLayout:
    """Linearize a sentence into display tokens.

    Args:
        s: Sentence to lay out

    Returns:
        FormulaLayout whose single main value token is the outermost node
    """
    builder = _LayoutBuilder()
    builder.layout(s, True, True)
    return FormulaLayout(sentence=s, tokens=tuple(builder.tokens))


def evaluate_layout(formula_layout: FormulaLayout, assignment: Assignment) -> List[TokenValue]:
    """Evaluate every value token of a layout under one assignment.

    Args:
        formula_layout: Layout to evaluate
        assignment: ``Letter -> bool`` function or mapping (see ``evaluate``)

    Returns:
        One TokenValue per value token, in display order
    """
    evaluator = Evaluator(assignment)
    return [
        TokenValue(
            position=i,
            text=token.text,
            value=evaluator.evaluate(token.subformula),
            is_main=token.is_main,
        )
        for i, token in enumerate(formula_layout.tokens)
        if isinstance(token, ValueToken)
    ]
