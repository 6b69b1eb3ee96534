# logic/dependencies.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Dependency relation between the evaluation points of a formula layout

"""Dependency graph over the value tokens of a formula layout.

A non-atomic sub-formula depends directly on those of its immediate operands
that are themselves non-atomic; letters and constants are always known and
never impose a dependency. Quiz mode uses the relation to keep a cell locked
until the cells it depends on have been answered.

Sub-formula occurrences are identified by their token positions, as recorded
by the layout, rather than by rendered strings. Two occurrences of the same
sub-formula (``(A & B) v (A & B)``) are therefore two distinct nodes, each a
dependency of the outer connective.
"""

from __future__ import annotations
from collections import defaultdict
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from parser.ast_nodes import Sentence
from .layout import FormulaLayout, ValueToken


def direct_dependencies(s: Sentence) -> List[Sentence]:
    """Immediate non-atomic operands of a sentence."""
    return [operand for operand in s.operands if not operand.is_atomic]


def subformula_positions(formula_layout: FormulaLayout) -> Dict[Sentence, List[int]]:
    """Map each sub-formula (by structural equality) to its value-token positions."""
    positions: Dict[Sentence, List[int]] = defaultdict(list)
    for i, token in enumerate(formula_layout.tokens):
        if isinstance(token, ValueToken):
            positions[token.subformula].append(i)
    return dict(positions)


@dataclass(frozen=True)
class DependencyGraph:
    """Direct dependencies of every non-atomic value token of a layout.

    Attributes:
        edges: Token position -> positions of the tokens it depends on
    """

    edges: Mapping[int, Tuple[int, ...]]

    def __post_init__(self):
        object.__setattr__(self, "edges", MappingProxyType(dict(self.edges)))

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.edges.items())))

    @classmethod
    def from_layout(cls, formula_layout: FormulaLayout) -> DependencyGraph:
        edges: Dict[int, Tuple[int, ...]] = {}
        for i, token in enumerate(formula_layout.tokens):
            if not isinstance(token, ValueToken) or token.subformula.is_atomic:
                continue
            edges[i] = tuple(
                p
                for p in token.operand_positions
                if not formula_layout.value_token(p).subformula.is_atomic
            )
        return cls(edges)

    def dependencies(self, position: int) -> Tuple[int, ...]:
        """Positions a token depends on; empty for atomic or text tokens."""
        return self.edges.get(position, ())

    def nodes(self) -> List[int]:
        """Positions of the non-atomic value tokens, in display order."""
        return sorted(self.edges)
