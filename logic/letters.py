# logic/letters.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Letter registry: deduplicated, ordered propositional variables

"""Collection of the propositional letters occurring in formulas.

LetterSet keeps letters in insertion order and deduplicates them on their
(id, index) identity. The truth-table generator folds the letters of every
formula of a batch into one LetterSet and sorts it (id, then index) to obtain
the canonical column order.
"""

from __future__ import annotations
from typing import Iterable, Iterator, List, Set, Tuple

from parser.ast_nodes import Sentence, Letter, Value, Negation, Binary


class LetterSet:
    """Deduplicating, insertion-ordered collection of letters."""

    def __init__(self, letters: Iterable[Letter] = ()):
        self._seen: Set[Tuple[str, int]] = set()
        self._letters: List[Letter] = []
        for letter in letters:
            self.add(letter)

    def add(self, letter: Letter) -> bool:
        """Add a letter; returns False if an equal letter is already present."""
        key = (letter.id, letter.index)
        if key in self._seen:
            return False
        self._seen.add(key)
        self._letters.append(letter)
        return True

    def update(self, letters: Iterable[Letter]) -> None:
        for letter in letters:
            self.add(letter)

    def sorted(self) -> List[Letter]:
        """Letters ordered by id, then index."""
        return sorted(self._letters)

    def __contains__(self, letter: object) -> bool:
        if not isinstance(letter, Letter):
            return False
        return (letter.id, letter.index) in self._seen

    def __iter__(self) -> Iterator[Letter]:
        return iter(self._letters)

    def __len__(self) -> int:
        return len(self._letters)

    def __repr__(self) -> str:
        return f"LetterSet([{', '.join(l.name for l in self._letters)}])"


def collect_letters(s: Sentence) -> LetterSet:
    """Collect every letter reached in a sentence, in first-occurrence order."""
    letters = LetterSet()

    def rec(node: Sentence) -> None:
        if isinstance(node, Letter):
            letters.add(node)
        elif isinstance(node, Value):
            return
        elif isinstance(node, (Negation, Binary)):
            for operand in node.operands:
                rec(operand)
        else:
            raise TypeError(f"Unknown sentence node: {type(node).__name__}")

    rec(s)
    return letters


def collect_batch_letters(formulas: Iterable[Sentence]) -> List[Letter]:
    """Sorted union of the letters of every formula in a batch."""
    union = LetterSet()
    for formula in formulas:
        union.update(collect_letters(formula))
    return union.sorted()
