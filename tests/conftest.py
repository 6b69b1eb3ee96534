# tests/conftest.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Tabula tests.

This module ensures the project packages are importable from the repository
root and provides formula fixtures shared across the test packages.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify the project packages are importable before any test runs.

    The global logger is created here so that its stream handler is bound
    to the session-wide output rather than to a single test's capture.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import parser
        import logic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    utils.get_logger()

    yield


@pytest.fixture
def basic_formula():
    """Provide a two-letter formula with a single connective.

    Returns:
        str: Conditional over A and B
    """
    return "A -> B"


@pytest.fixture
def nested_formula():
    """Provide a formula with one nested binary connective.

    Returns:
        str: Disjunction whose left operand is a bracketed conjunction
    """
    return "(A & B) v C"


@pytest.fixture
def basic_table(basic_formula):
    """Truth table of the basic formula."""
    from parser import parse
    from logic import generate_truth_table

    return generate_truth_table([parse(basic_formula)])


@pytest.fixture
def nested_table(nested_formula):
    """Truth table of the nested formula."""
    from parser import parse
    from logic import generate_truth_table

    return generate_truth_table([parse(nested_formula)])
