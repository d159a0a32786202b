"""Shared test utilities for helpdoc/lib tests."""

import ast
from pathlib import Path

from ..parsing import get_ast_tree

TEST_DATA_DIR = Path(__file__).parent / "test_data"


def fixture_tree(fixture_name: str) -> ast.Module:
    """Parse a fixture module from the test data directory."""
    return get_ast_tree(TEST_DATA_DIR / fixture_name)
