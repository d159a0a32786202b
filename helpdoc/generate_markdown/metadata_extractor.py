"""Shared machinery for turning function definitions into documentation records."""

import ast
import inspect
from abc import ABC
from typing import Any, List, Optional, Sequence, Tuple

from docstring_parser import Docstring, DocstringParam, DocstringStyle

from .constants import logger
from .help_resolver import notes_of, resolve_help, split_example
from .models import (
    DiagnosticKind,
    DocumentationRecord,
    ExampleRecord,
    ExtractionResult,
    ParameterRecord,
    ScriptInfo,
)
from .utils import short_filename, trim_title_markers

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)
_VARIADIC_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


class _SourceExpression:
    """Stands in for an annotation or default value; its repr is the original source text."""

    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    def __repr__(self) -> str:
        return self.text


def normalize_syntax(text: str) -> str:
    """Drop carriage returns and blank lines from a syntax string."""
    segments = [segment.rstrip() for segment in text.replace("\r", "").split("\n")]
    return "\n".join(segment for segment in segments if segment.strip())


def escape_brackets(text: str) -> str:
    """Escape '[' and ']' the way they appear in Markdown-escaped text."""
    return text.replace("[", r"\[").replace("]", r"\]")


def restates_syntax(synopsis: str, syntax: str) -> bool:
    """Check whether a synopsis is only the generated syntax repeated.

    Args:
        synopsis: The synopsis text.
        syntax: The generated syntax string.

    Returns:
        True if the synopsis contains the syntax, verbatim or with escaped brackets.
    """
    if not synopsis or not syntax:
        return False
    return syntax in synopsis or escape_brackets(syntax) in synopsis


class MetadataExtractor(ABC):
    """Base class for extractors with shared introspection and record-building utilities."""

    def __init__(self, style: DocstringStyle = DocstringStyle.AUTO):
        """Initialize the extractor.

        Args:
            style: Docstring style for docstrings that are not tagged help blocks.
        """
        self.style = style

    @staticmethod
    def _placeholder(expression: Optional[ast.expr], empty: Any = inspect.Parameter.empty) -> Any:
        if expression is None:
            return empty
        return _SourceExpression(ast.unparse(expression))

    def _signature_of(self, node: ast.AST) -> inspect.Signature:
        """Build the signature of a definition from its syntax tree.

        Annotations and default values are kept as source text, so no code
        from the artifact is evaluated.

        Args:
            node: A FunctionDef or AsyncFunctionDef node.

        Returns:
            The definition's signature.

        Raises:
            ValueError: If the parameters do not form a valid signature.
        """
        arguments = node.args
        parameters: List[inspect.Parameter] = []

        positional = [(arg, inspect.Parameter.POSITIONAL_ONLY) for arg in arguments.posonlyargs]
        positional += [(arg, inspect.Parameter.POSITIONAL_OR_KEYWORD) for arg in arguments.args]
        # Defaults belong to the trailing positional parameters
        defaults = [None] * (len(positional) - len(arguments.defaults)) + list(arguments.defaults)
        for (arg, kind), default in zip(positional, defaults):
            parameters.append(
                inspect.Parameter(
                    arg.arg, kind, default=self._placeholder(default), annotation=self._placeholder(arg.annotation)
                )
            )

        if arguments.vararg is not None:
            parameters.append(
                inspect.Parameter(
                    arguments.vararg.arg,
                    inspect.Parameter.VAR_POSITIONAL,
                    annotation=self._placeholder(arguments.vararg.annotation),
                )
            )

        for arg, default in zip(arguments.kwonlyargs, arguments.kw_defaults):
            parameters.append(
                inspect.Parameter(
                    arg.arg,
                    inspect.Parameter.KEYWORD_ONLY,
                    default=self._placeholder(default),
                    annotation=self._placeholder(arg.annotation),
                )
            )

        if arguments.kwarg is not None:
            parameters.append(
                inspect.Parameter(
                    arguments.kwarg.arg,
                    inspect.Parameter.VAR_KEYWORD,
                    annotation=self._placeholder(arguments.kwarg.annotation),
                )
            )

        return inspect.Signature(
            parameters, return_annotation=self._placeholder(node.returns, inspect.Signature.empty)
        )

    def _introspect(self, node: ast.AST, filename: str) -> Tuple[inspect.Signature, Optional[str]]:
        """Resolve a definition's signature and docstring without executing it.

        Args:
            node: A FunctionDef or AsyncFunctionDef node.
            filename: File holding the definition.

        Returns:
            Tuple of (signature, cleaned docstring or None).

        Raises:
            ValueError: If the parameters do not form a valid signature.
        """
        logger.debug(f"Reading signature of {node.name} from {filename}")
        return self._signature_of(node), ast.get_docstring(node)

    def _resolve_help(self, docstring: Optional[str], syntax: str) -> Docstring:
        return resolve_help(docstring, self.style, fallback_synopsis=syntax)

    def _parameters_from_signature(
        self,
        signature: inspect.Signature,
        help_params: Sequence[DocstringParam],
        result: ExtractionResult,
        file: str,
        definition: str,
    ) -> Tuple[ParameterRecord, ...]:
        """Build parameter records from a signature, described by the help block."""
        documented = {param.arg_name.lstrip("*"): param for param in help_params}
        records: List[ParameterRecord] = []
        position = 0

        for parameter in signature.parameters.values():
            doc = documented.get(parameter.name)
            description = (doc.description or "").strip() if doc else ""
            if not description:
                result.warn(
                    DiagnosticKind.MISSING_FIELD,
                    file,
                    f"No description for parameter '{parameter.name}'",
                    definition,
                    "parameters",
                )

            if parameter.kind in _POSITIONAL_KINDS:
                parameter_position = str(position)
                position += 1
            else:
                parameter_position = "named"

            if parameter.annotation is not inspect.Parameter.empty:
                type_name = repr(parameter.annotation)
            elif doc and doc.type_name:
                type_name = doc.type_name
            else:
                type_name = ""

            has_default = parameter.default is not inspect.Parameter.empty
            records.append(
                ParameterRecord(
                    name=parameter.name,
                    description=description,
                    default_value=repr(parameter.default) if has_default else "",
                    required=not has_default and parameter.kind not in _VARIADIC_KINDS,
                    parameter_value=type_name,
                    position=parameter_position,
                    pipeline_input=parameter.kind is inspect.Parameter.VAR_POSITIONAL,
                )
            )
        return tuple(records)

    def _parameters_from_help(
        self,
        help_params: Sequence[DocstringParam],
        result: ExtractionResult,
        file: str,
        definition: str,
    ) -> Tuple[ParameterRecord, ...]:
        """Build parameter records from the help block alone."""
        records = []
        for position, param in enumerate(help_params):
            description = (param.description or "").strip()
            if not description:
                result.warn(
                    DiagnosticKind.MISSING_FIELD,
                    file,
                    f"No description for parameter '{param.arg_name}'",
                    definition,
                    "parameters",
                )
            records.append(
                ParameterRecord(
                    name=param.arg_name.lstrip("*"),
                    description=description,
                    default_value=param.default or "",
                    required=param.is_optional is False and param.default is None,
                    parameter_value=param.type_name or "",
                    position=str(position),
                )
            )
        return tuple(records)

    @staticmethod
    def _examples_from_help(help_object: Docstring) -> Tuple[ExampleRecord, ...]:
        examples = []
        for number, example in enumerate(help_object.examples, start=1):
            title = trim_title_markers(example.args[1]) if len(example.args) > 1 else ""
            if example.snippet:
                code, remarks = example.snippet, example.description or ""
            else:
                code, remarks = split_example(example.description or "")

            body = code.strip("\n")
            if remarks.strip():
                body = f"{body}\n{remarks.strip()}" if body else remarks.strip()
            if body:
                examples.append(ExampleRecord(title=title or f"Example {number}", body=body))
        return tuple(examples)

    def _build_record(
        self,
        name: str,
        source_file: str,
        syntax: str,
        help_object: Docstring,
        parameters: Tuple[ParameterRecord, ...],
        result: ExtractionResult,
        script_info: Optional[ScriptInfo] = None,
    ) -> DocumentationRecord:
        """Normalize a resolved help object into a documentation record.

        Every missing field is reported as a diagnostic and replaced with its
        fallback value.
        """
        file = short_filename(source_file)

        synopsis = (help_object.short_description or "").strip()
        if restates_syntax(synopsis, syntax):
            logger.debug(f"Synopsis of {name} only restates its syntax, dropping it")
            synopsis = ""
        if not synopsis:
            result.warn(DiagnosticKind.MISSING_FIELD, file, "No synopsis found", name, "synopsis")

        description = (help_object.long_description or "").strip()
        if not description:
            result.warn(
                DiagnosticKind.MISSING_FIELD, file, "No description found, using the synopsis", name, "description"
            )
            description = synopsis

        if not parameters:
            result.warn(DiagnosticKind.MISSING_FIELD, file, "No parameters found", name, "parameters")

        examples = self._examples_from_help(help_object)
        if not examples:
            result.warn(DiagnosticKind.MISSING_FIELD, file, "No examples found", name, "examples")

        notes = notes_of(help_object)
        if not notes:
            result.warn(DiagnosticKind.MISSING_FIELD, file, "No notes found", name, "notes")

        return DocumentationRecord(
            name=name,
            source_file=source_file,
            syntax=syntax,
            synopsis=synopsis,
            description=description,
            parameters=parameters,
            examples=examples,
            notes=notes,
            script_info=script_info,
        )
