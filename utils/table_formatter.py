# utils/table_formatter.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Plain-text rendering of truth tables for the command line

"""Plain-text truth tables.

Columns: one per letter, a ``|`` separator, then one column per layout token
of each formula (separated from the next formula by ``|``). With quasi-columns
on, every value token shows its value and a number row above the header
numbers them; with quasi-columns off only the main connective shows a value.
"""

from typing import List, Optional

from logic.layout import FormulaLayout, evaluate_layout, layout
from logic.truth_table import TruthTableResult

TRUE_MARK = "⊤"
FALSE_MARK = "⊥"


def _mark(value: bool) -> str:
    return TRUE_MARK if value else FALSE_MARK


def _join(groups: List[List[str]], widths: List[List[int]]) -> str:
    parts = []
    for cells, cell_widths in zip(groups, widths):
        parts.append(" ".join(c.center(w) for c, w in zip(cells, cell_widths)))
    return " | ".join(parts).rstrip()


def format_truth_table(
    result: TruthTableResult,
    show_quasi: bool = True,
    layouts: Optional[List[FormulaLayout]] = None,
) -> str:
    """Render a truth table as aligned text.

    Args:
        result: Table to render
        show_quasi: Show every sub-formula value, not only main connectives
        layouts: Precomputed layouts of ``result.formulas``

    Returns:
        Multi-line string, one line per header row and table row
    """
    if layouts is None:
        layouts = [layout(f) for f in result.formulas]

    header: List[List[str]] = [[l.name for l in result.letters]]
    numbers: List[List[str]] = [["" for _ in result.letters]]
    for formula_layout in layouts:
        header.append([t.text.strip() for t in formula_layout.tokens])
        numbers.append(
            ["" if n is None else str(n) for n in formula_layout.column_numbers()]
        )

    body: List[List[List[str]]] = []
    for row in result.rows:
        groups = [[_mark(row.assignment[l.name]) for l in result.letters]]
        for formula_layout in layouts:
            values = {v.position: v for v in evaluate_layout(formula_layout, row.lookup)}
            cells = []
            for i, token in enumerate(formula_layout.tokens):
                value = values.get(i)
                if value is None or not (show_quasi or value.is_main):
                    cells.append("")
                else:
                    cells.append(_mark(value.value))
            groups.append(cells)
        body.append(groups)

    # Letter-free batches have no letter group
    if not result.letters:
        header, numbers = header[1:], numbers[1:]
        body = [groups[1:] for groups in body]

    widths = [
        [max(len(cell) for cell in column) for column in zip(*cells_by_row)]
        for cells_by_row in zip(header, *body, numbers)
    ]

    lines = []
    if show_quasi:
        lines.append(_join(numbers, widths))
    lines.append(_join(header, widths))
    lines.append("-" * len(_join(header, widths)))
    lines.extend(_join(groups, widths) for groups in body)
    return "\n".join(lines)


def format_main_values(result: TruthTableResult) -> List[str]:
    """One compact line per row: letter values, then each formula's value."""
    lines = []
    for row in result.rows:
        letters = " ".join(_mark(row.assignment[l.name]) for l in result.letters)
        values = " ".join(_mark(v) for v in row.values)
        lines.append(f"{letters} : {values}" if letters else values)
    return lines
