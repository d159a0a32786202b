"""Tests for parsing module."""

import ast
from pathlib import Path

import pytest

from ..parsing import (
    NodeKind,
    find_definitions,
    find_function,
    find_function_definitions,
    get_ast_tree,
    parse_source,
    read_module_dunders,
)
from . import TEST_DATA_DIR, fixture_tree

SCRIPT_INFO_FIELDS = ("__author__", "__version__", "__description__")


class TestGetAstTree:
    """Tests for get_ast_tree and parse_source."""

    def test_parses_file(self):
        """Test that a file is parsed into a module tree."""
        tree = get_ast_tree(TEST_DATA_DIR / "module_with_definitions.py")

        assert isinstance(tree, ast.Module)

    def test_raises_on_invalid_source(self, tmp_path: Path):
        """Test that SyntaxError propagates for invalid Python."""
        file_path = tmp_path / "broken.py"
        file_path.write_text("def broken(:\n    pass\n")

        with pytest.raises(SyntaxError):
            get_ast_tree(file_path)

    def test_parse_source_reports_filename(self):
        """Test that syntax errors carry the given file name."""
        with pytest.raises(SyntaxError) as exc_info:
            parse_source("def (", "example.py")

        assert exc_info.value.filename == "example.py"


class TestFindDefinitions:
    """Tests for find_definitions and find_function_definitions."""

    @pytest.fixture
    def tree(self) -> ast.Module:
        return fixture_tree("module_with_definitions.py")

    def test_classifies_every_definition(self, tree):
        """Test that functions are tagged by their enclosing scope."""
        kinds = [(definition.name, definition.kind) for definition in find_definitions(tree)]

        assert kinds == [
            ("first", NodeKind.FUNCTION),
            ("inner", NodeKind.NESTED),
            ("Greeter", NodeKind.CLASS),
            ("greet", NodeKind.MEMBER),
            ("Inner", NodeKind.CLASS),
            ("deep", NodeKind.MEMBER),
            ("fetch", NodeKind.FUNCTION),
            ("platform_name", NodeKind.FUNCTION),
            ("platform_name", NodeKind.FUNCTION),
        ]

    def test_free_functions_skip_members_and_nested(self, tree):
        """Test that class members and nested functions are not free functions."""
        names = [definition.name for definition in find_function_definitions(tree)]

        assert names == ["first", "fetch", "platform_name", "platform_name"]

    def test_async_functions_are_included(self, tree):
        """Test that async functions are found like regular ones."""
        definition = find_function(tree, "fetch")

        assert definition is not None
        assert isinstance(definition.node, ast.AsyncFunctionDef)

    def test_find_function_returns_last_definition(self, tree):
        """Test that a redefinition shadows the earlier one."""
        definition = find_function(tree, "platform_name")

        assert definition is not None
        assert ast.unparse(definition.node).endswith("return 'posix'")

    def test_find_function_ignores_members(self, tree):
        """Test that methods are not returned as free functions."""
        assert find_function(tree, "greet") is None
        assert find_function(tree, "missing") is None

    def test_empty_module_has_no_definitions(self):
        """Test that a module without definitions yields an empty list."""
        assert find_definitions(parse_source("x = 1\n")) == []


class TestReadModuleDunders:
    """Tests for read_module_dunders function."""

    def test_reads_literal_dunders(self):
        """Test that literal assignments, annotated or not, are read."""
        values = read_module_dunders(fixture_tree("module_with_dunders.py"), SCRIPT_INFO_FIELDS)

        assert values == {
            "__author__": "Data Team",
            "__version__": (1, 2, 0),
            "__description__": "Nightly export of the sales tables.",
        }

    def test_returns_empty_without_dunders(self):
        """Test that a module without the requested names yields an empty dict."""
        assert read_module_dunders(fixture_tree("module_without_dunders.py"), SCRIPT_INFO_FIELDS) == {}

    def test_raises_on_computed_value(self):
        """Test that ValueError is raised when a dunder is not a literal."""
        tree = fixture_tree("module_with_computed_dunder.py")

        with pytest.raises(ValueError, match="__version__ must be assigned a literal value"):
            read_module_dunders(tree, SCRIPT_INFO_FIELDS)
