"""Syntax tree access and definition discovery for Python source artifacts."""

from __future__ import annotations

import ast
import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Any


class NodeKind(enum.Enum):
    """Kinds of definition nodes found while walking a module."""

    FUNCTION = "function"
    MEMBER = "member"
    NESTED = "nested"
    CLASS = "class"


@dataclass(frozen=True)
class DefinitionNode:
    """A definition found in a syntax tree, tagged with its kind."""

    kind: NodeKind
    name: str
    node: ast.AST


def get_ast_tree(file_path: Path) -> ast.Module:
    """Get the parsed AST tree for a Python file.

    Args:
        file_path: Path to the Python file to parse.

    Returns:
        The parsed AST tree.

    Raises:
        SyntaxError: If the file is not valid Python.
    """
    with open(file_path, "r", encoding="utf-8") as f:
        source = f.read()
    return parse_source(source, str(file_path))


def parse_source(source: str, filename: str = "<unknown>") -> ast.Module:
    """Parse Python source text into an AST tree.

    Args:
        source: The source text.
        filename: Name reported in syntax errors.

    Returns:
        The parsed AST tree.
    """
    return ast.parse(source, filename=filename)


def _classify_function(scope: ast.AST | None) -> NodeKind:
    if scope is None:
        return NodeKind.FUNCTION
    if isinstance(scope, ast.ClassDef):
        return NodeKind.MEMBER
    return NodeKind.NESTED


def find_definitions(tree: ast.AST) -> list[DefinitionNode]:
    """Find every function and class definition in source order.

    A function is tagged ``MEMBER`` when its enclosing scope is a class and
    ``NESTED`` when it is defined inside another function. Definitions inside
    ``if``/``try`` blocks at module level keep the module as their scope.

    Args:
        tree: The parsed AST tree.

    Returns:
        List of tagged definition nodes.
    """
    definitions: list[DefinitionNode] = []

    def visit(node: ast.AST, scope: ast.AST | None) -> None:
        for child in ast.iter_child_nodes(node):
            if isinstance(child, (ast.FunctionDef, ast.AsyncFunctionDef)):
                definitions.append(DefinitionNode(_classify_function(scope), child.name, child))
                visit(child, child)
            elif isinstance(child, ast.ClassDef):
                definitions.append(DefinitionNode(NodeKind.CLASS, child.name, child))
                visit(child, child)
            else:
                visit(child, scope)

    visit(tree, None)
    return definitions


def find_function_definitions(tree: ast.AST) -> list[DefinitionNode]:
    """Find the free functions of a module, skipping class members and nested functions.

    Args:
        tree: The parsed AST tree.

    Returns:
        List of ``FUNCTION`` definition nodes in source order.
    """
    return [definition for definition in find_definitions(tree) if definition.kind is NodeKind.FUNCTION]


def find_function(tree: ast.AST, name: str) -> DefinitionNode | None:
    """Find a free function by name.

    Args:
        tree: The parsed AST tree.
        name: Function name to look for.

    Returns:
        The last matching definition (later definitions shadow earlier ones), or None.
    """
    found = None
    for definition in find_function_definitions(tree):
        if definition.name == name:
            found = definition
    return found


def read_module_dunders(tree: ast.Module, names: tuple[str, ...]) -> dict[str, Any]:
    """Read literal module-level dunder assignments such as ``__version__``.

    Args:
        tree: The parsed module.
        names: Dunder names to collect.

    Returns:
        Mapping of found names to their literal values.

    Raises:
        ValueError: If one of the requested names is assigned a non-literal value.
    """
    values: dict[str, Any] = {}
    for node in tree.body:
        if isinstance(node, ast.Assign):
            targets = node.targets
        elif isinstance(node, ast.AnnAssign) and node.value is not None:
            targets = [node.target]
        else:
            continue

        for target in targets:
            if isinstance(target, ast.Name) and target.id in names:
                try:
                    values[target.id] = ast.literal_eval(node.value)
                except ValueError as e:
                    raise ValueError(f"{target.id} must be assigned a literal value (line {node.lineno})") from e
    return values
