# parser/ast_nodes.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional-logic sentences. Equality is structural, so
two independently parsed occurrences of the same formula compare equal and
can be used interchangeably as dictionary keys.

Node Types:
    Value: Boolean constants (⊤, ⊥)
    Letter: Atomic propositions, identified by (id, index)
    Negation: Unary connective
    Conjunction, Disjunction, Conditional, Biconditional, Xor, Nand:
        Binary connectives, each with its own truth function

Every node has two renderings: the spaced form (``str(node)``) used for
display, and the compact form (``node.to_compact()``) used as a stable
textual key. All nodes support the visitor design pattern for traversal.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Tuple


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement one visit method per sentence variant,
    which keeps every consumer exhaustive over the closed set of connectives.
    """

    def visit_value(self, n: Value): ...

    def visit_letter(self, n: Letter): ...

    def visit_negation(self, n: Negation): ...

    def visit_conjunction(self, n: Conjunction): ...

    def visit_disjunction(self, n: Disjunction): ...

    def visit_conditional(self, n: Conditional): ...

    def visit_biconditional(self, n: Biconditional): ...

    def visit_xor(self, n: Xor): ...

    def visit_nand(self, n: Nand): ...


@dataclass(frozen=True, slots=True)
class Sentence:
    """Base class for all AST nodes in propositional formulas.

    Provides the foundation for immutable expression trees with visitor pattern
    support. Concrete node types implement ``accept`` for visitor dispatch,
    ``__str__`` for the spaced form and ``to_compact`` for the compact form.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    @property
    def is_atomic(self) -> bool:
        """True for constants and letters, whose values are always known."""
        return False

    @property
    def operands(self) -> Tuple[Sentence, ...]:
        """Immediate sub-sentences, left to right."""
        return ()

    def to_compact(self, top_level: bool = True) -> str:
        """Return the compact rendering (no spaces, constants as T/F).

        Args:
            top_level: Whether this node is the outermost one; nested binary
                nodes are wrapped in parentheses

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


def _wrap(s: Sentence) -> str:
    """Spaced form of an operand, parenthesized unless atomic or a negation."""
    if s.is_atomic or isinstance(s, Negation):
        return str(s)
    return f"({s})"


@dataclass(frozen=True, slots=True)
class Value(Sentence):
    """Boolean constant.

    Attributes:
        value: The truth value represented by this constant
    """

    value: bool

    def accept(self, v: Visitor):
        return v.visit_value(self)

    @property
    def is_atomic(self) -> bool:
        return True

    def to_compact(self, top_level: bool = True) -> str:
        return "T" if self.value else "F"

    def __str__(self) -> str:
        return "⊤" if self.value else "⊥"


@dataclass(frozen=True, slots=True, order=True)
class Letter(Sentence):
    """Atomic proposition.

    Identity is the pair (id, index). Letters order by id first, then by
    index, which is the canonical column order of a truth table.

    Attributes:
        id: A single uppercase ASCII character
        index: Non-negative subscript, shown only when non-zero
    """

    id: str
    index: int = 0

    def __post_init__(self):
        if len(self.id) != 1 or not ("A" <= self.id <= "Z"):
            raise ValueError(f"Letter id must be one uppercase character, got {self.id!r}")
        if self.index < 0:
            raise ValueError(f"Letter index must be non-negative, got {self.index}")

    def accept(self, v: Visitor):
        return v.visit_letter(self)

    @property
    def is_atomic(self) -> bool:
        return True

    @property
    def name(self) -> str:
        """Display string, e.g. ``A`` or ``B1``."""
        return f"{self.id}{self.index}" if self.index > 0 else self.id

    def to_compact(self, top_level: bool = True) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Negation(Sentence):
    """Logical negation.

    Attributes:
        operand: The sentence being negated
    """

    operand: Sentence

    symbol = "~"

    def accept(self, v: Visitor):
        return v.visit_negation(self)

    @property
    def operands(self) -> Tuple[Sentence, ...]:
        return (self.operand,)

    def to_compact(self, top_level: bool = True) -> str:
        return f"~{self.operand.to_compact(False)}"

    def __str__(self) -> str:
        return f"~{_wrap(self.operand)}"


@dataclass(frozen=True, slots=True)
class Binary(Sentence):
    """Common shape of the six binary connectives.

    Subclasses only differ in their display symbol and visitor hook, so the
    renderings live here. Two binary nodes are equal only if they are of the
    same connective and their operands are equal.

    Attributes:
        left: Left operand
        right: Right operand
    """

    left: Sentence
    right: Sentence

    symbol = ""

    @property
    def operands(self) -> Tuple[Sentence, ...]:
        return (self.left, self.right)

    def to_compact(self, top_level: bool = True) -> str:
        inner = f"{self.left.to_compact(False)}{self.symbol}{self.right.to_compact(False)}"
        return inner if top_level else f"({inner})"

    def __str__(self) -> str:
        return f"{_wrap(self.left)} {self.symbol} {_wrap(self.right)}"


@dataclass(frozen=True, slots=True)
class Conjunction(Binary):
    """True when both operands are true."""

    symbol = "&"

    def accept(self, v: Visitor):
        return v.visit_conjunction(self)


@dataclass(frozen=True, slots=True)
class Disjunction(Binary):
    """True when at least one operand is true."""

    symbol = "∨"

    def accept(self, v: Visitor):
        return v.visit_disjunction(self)


@dataclass(frozen=True, slots=True)
class Conditional(Binary):
    """False only when the left operand is true and the right one false."""

    symbol = "→"

    def accept(self, v: Visitor):
        return v.visit_conditional(self)


@dataclass(frozen=True, slots=True)
class Biconditional(Binary):
    """True when both operands have the same value."""

    symbol = "↔"

    def accept(self, v: Visitor):
        return v.visit_biconditional(self)


@dataclass(frozen=True, slots=True)
class Xor(Binary):
    """True when the operands have different values."""

    symbol = "⊕"

    def accept(self, v: Visitor):
        return v.visit_xor(self)


@dataclass(frozen=True, slots=True)
class Nand(Binary):
    """False only when both operands are true."""

    symbol = "|"

    def accept(self, v: Visitor):
        return v.visit_nand(self)
