# utils/tree_visualizer.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Graphviz rendering of a formula's evaluation points and their dependencies

import os
from typing import Optional

from graphviz import Digraph

from logic.dependencies import DependencyGraph
from logic.layout import FormulaLayout, ValueToken
from utils.logger import get_logger

logger = get_logger()

VISUALIZATION_OUTPUT_FOLDER = "dependency_graphs"


def build_dependency_digraph(
    formula_layout: FormulaLayout,
    graph: Optional[DependencyGraph] = None,
    fmt: str = "png",
) -> Digraph:
    """
    Builds a Digraph with one node per value token of the layout. Each
    sub-formula points to the sub-formulas it depends on; letters and
    constants hang off their connective with dashed, grey edges. The main
    connective is highlighted.
    """
    if graph is None:
        graph = DependencyGraph.from_layout(formula_layout)

    dot = Digraph(comment=f"Dependencies of {formula_layout.sentence}", format=fmt)
    dot.attr(rankdir="TB", nodesep="0.4", ranksep="0.5")

    for i, token in enumerate(formula_layout.tokens):
        if not isinstance(token, ValueToken):
            continue
        sub = token.subformula
        label = f"{token.text.strip()}\n{sub.to_compact()}" if not sub.is_atomic else str(sub)
        if token.is_main:
            fillcolor = "palegreen"
        elif sub.is_atomic:
            fillcolor = "lightgrey"
        else:
            fillcolor = "lightskyblue"
        dot.node(f"t{i}", label, shape="box", style="filled", fillcolor=fillcolor)

    for position in graph.nodes():
        token = formula_layout.value_token(position)
        deps = graph.dependencies(position)
        for operand in token.operand_positions:
            if operand in deps:
                dot.edge(f"t{position}", f"t{operand}")
            else:
                dot.edge(f"t{position}", f"t{operand}", style="dashed", color="grey")

    return dot


def render_dependency_graph(
    formula_layout: FormulaLayout,
    base_filename: str,
    output_dir: str = VISUALIZATION_OUTPUT_FOLDER,
    fmt: str = "png",
) -> Optional[str]:
    """
    Renders the dependency graph of a layout into output_dir.
    Returns the path of the written file, or None if rendering failed (for
    instance when the Graphviz 'dot' executable is not on the PATH).
    """
    if not os.path.exists(output_dir):
        os.makedirs(output_dir)
        logger.info(f"Created directory for dependency graphs: {output_dir}")
    output_path = os.path.join(output_dir, base_filename)

    dot = build_dependency_digraph(formula_layout, fmt=fmt)
    try:
        written = dot.render(output_path, view=False, cleanup=True)
    except Exception as e:
        logger.warning(f"Failed to render dependency graph to {output_path}.{fmt}: {e}. "
                       "Ensure Graphviz executables (dot) are in your system's PATH.")
        return None

    logger.info(f"Dependency graph saved to {written}")
    return written
