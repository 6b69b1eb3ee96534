#!/usr/bin/env python3
# run_truth_table.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Command-line interface for truth table generation with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from logic.formula_input import FormulaInput, build_truth_table, load_batch, validate_formula
from logic.layout import layout
from logic.truth_table import connective_definitions
from utils.logger import get_logger, configure_logging
from utils.table_formatter import format_truth_table, format_main_values

# Tables grow as 2^n; beyond this many letters the CLI warns before printing
LETTER_WARNING_THRESHOLD = 10


def read_batch_file(filepath: Path) -> str:
    """Read a batch of formulas (one per line) from a file.

    Args:
        filepath: Path to the batch file

    Returns:
        File contents

    Raises:
        FileNotFoundError: If the batch file doesn't exist
        ValueError: If the batch file cannot be read
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Batch file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading batch file: {e}")


def collect_inputs(formulas: List[str], batch_file: Optional[Path]) -> List[FormulaInput]:
    """Validate formulas given on the command line and in a batch file."""
    inputs = [validate_formula(text) for text in formulas]
    if batch_file is not None:
        inputs.extend(load_batch(read_batch_file(batch_file)))
    return [i for i in inputs if not i.is_blank]


def report_inputs(inputs: List[FormulaInput]) -> int:
    """Log each formula's validation outcome; returns the number rejected."""
    logger = get_logger()
    rejected = 0
    for formula in inputs:
        if formula.error:
            rejected += 1
            logger.formula_rejected(formula.text, formula.error)
        else:
            logger.formula_parsed(formula.text, str(formula.parsed))
            if formula.warning:
                logger.formula_warning(formula.text, formula.warning)
    return rejected


def print_connective_definitions() -> None:
    """Print the defining truth table of every connective."""
    for title, result in connective_definitions():
        print(title)
        print(format_truth_table(result, show_quasi=False))
        print()


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Tabula truth table generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_truth_table.py "A -> B" "~A v B"
  python run_truth_table.py -i formulas.txt --no-quasi
  python run_truth_table.py "(A & B) v C" --visualize graphs
  python run_truth_table.py --connectives

Syntax:
  Atoms: A, B, C, ...   Not: ~   And: &   Or: v   If: ->   Iff: <->
  XOR: +   NAND: |   Grouping: (), [] or {}
  Formulas with two or more binary connectives must be fully bracketed.
        """,
    )

    parser.add_argument("formulas", nargs="*", help="Formulas to tabulate")

    parser.add_argument(
        "-i", "--input", type=Path, help="Batch file with one formula per line"
    )

    parser.add_argument(
        "--no-quasi",
        action="store_true",
        help="Only show the value of each formula's main connective",
    )

    parser.add_argument(
        "--format",
        choices=("table", "compact"),
        default="table",
        help="Output layout (default: table)",
    )

    parser.add_argument(
        "--connectives",
        action="store_true",
        help="Print the truth table defining each connective and exit",
    )

    parser.add_argument(
        "--visualize",
        metavar="DIR",
        help="Render each formula's dependency graph into DIR (requires Graphviz)",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the truth table generator.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.connectives:
            print_connective_definitions()
            return 0

        inputs = collect_inputs(args.formulas, args.input)
        if not inputs:
            parser.error("no formulas given")

        rejected = report_inputs(inputs)
        result = build_truth_table(inputs)

        if result is None:
            logger.error("No well-formed formulas to tabulate")
            return 2

        if len(result.letters) > LETTER_WARNING_THRESHOLD:
            logger.warning(
                f"⚠️  {len(result.letters)} letters: the table has {len(result.rows)} rows"
            )

        layouts = [layout(f) for f in result.formulas]
        if args.format == "compact":
            print("\n".join(format_main_values(result)))
        else:
            print(format_truth_table(result, show_quasi=not args.no_quasi, layouts=layouts))

        if args.visualize:
            from utils.tree_visualizer import render_dependency_graph

            for i, formula_layout in enumerate(layouts, start=1):
                render_dependency_graph(formula_layout, f"formula_{i}", output_dir=args.visualize)

        return 2 if rejected else 0

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Batch file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
