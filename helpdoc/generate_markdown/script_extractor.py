"""Extract the script-level documentation record of a Python script."""

import ast
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from docstring_parser import Docstring, DocstringStyle, ParseError

from ..lib.parsing import find_function, parse_source, read_module_dunders
from .artifacts import ArtifactResolutionError
from .constants import SCRIPT_ENTRY_POINTS, SCRIPT_EXTENSIONS, SCRIPT_INFO_FIELDS, logger
from .metadata_extractor import MetadataExtractor, normalize_syntax
from .models import DiagnosticKind, ExtractionResult, ParameterRecord, ScriptInfo


class ScriptExtractor(MetadataExtractor):
    """Extracts documentation for a script as a whole.

    The module docstring is the script's help block, module dunders
    (``__author__``, ``__version__``, ``__description__``) are its script
    info, and the entry point function stands for its invocation syntax.
    """

    def __init__(
        self,
        style: DocstringStyle = DocstringStyle.AUTO,
        entry_points: Sequence[str] = SCRIPT_ENTRY_POINTS,
        extensions: Sequence[str] = SCRIPT_EXTENSIONS,
    ):
        """Initialize the extractor.

        Args:
            style: Docstring style for docstrings that are not tagged help blocks.
            entry_points: Function names tried, in order, as the script entry point.
            extensions: File suffixes accepted as scripts.
        """
        super().__init__(style)
        self.entry_points = tuple(entry_points)
        self.extensions = tuple(extension.lower() for extension in extensions)

    def extract_script(self, path: Union[str, Path]) -> ExtractionResult:
        """Extract the documentation record of a script.

        Args:
            path: Path to the script.

        Returns:
            A result holding one record, or none when the file is not a
            supported script or its help cannot be resolved.

        Raises:
            ArtifactResolutionError: If the file cannot be read.
        """
        path = Path(path)
        result = ExtractionResult()
        file = path.name

        if path.suffix.lower() not in self.extensions:
            result.warn(DiagnosticKind.UNSUPPORTED_ARTIFACT, file, f"Unsupported file type '{path.suffix}'")
            return result

        try:
            with open(path, "r", encoding="utf-8") as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ArtifactResolutionError(f"Cannot read {path}: {e}") from e

        try:
            tree = parse_source(source, str(path))
        except SyntaxError as e:
            result.warn(DiagnosticKind.RESOLUTION_FAILURE, file, f"Could not parse source: {e}")
            return result

        script_info = self._read_script_info(tree, file, result)

        entry = self._find_entry_point(tree)
        entry_help = Docstring()
        signature = None
        if entry is not None:
            try:
                signature, entry_docstring = self._introspect(entry.node, str(path))
                entry_help = self._resolve_help(entry_docstring, "")
            except (SyntaxError, ValueError, ParseError) as e:
                result.warn(
                    DiagnosticKind.RESOLUTION_FAILURE,
                    file,
                    f"Could not resolve entry point help: {e}",
                    entry.name,
                )
        syntax = normalize_syntax(f"{file}{signature}") if signature is not None else file

        try:
            help_object = self._resolve_help(ast.get_docstring(tree, clean=True), syntax)
        except ParseError as e:
            result.warn(DiagnosticKind.RESOLUTION_FAILURE, file, f"Could not resolve help, skipping script: {e}")
            return result

        if signature is not None:
            # Module docstring descriptions win over the entry point's own
            documented = {param.arg_name.lstrip("*") for param in help_object.params}
            help_params = list(help_object.params) + [
                param for param in entry_help.params if param.arg_name.lstrip("*") not in documented
            ]
            parameters: Tuple[ParameterRecord, ...] = self._parameters_from_signature(
                signature, help_params, result, file, file
            )
        else:
            parameters = self._parameters_from_help(help_object.params, result, file, file)

        record = self._build_record(
            name=file,
            source_file=str(path),
            syntax=syntax,
            help_object=help_object,
            parameters=parameters,
            result=result,
            script_info=script_info,
        )
        result.records.append(record)
        return result

    def _find_entry_point(self, tree: ast.Module):
        for name in self.entry_points:
            definition = find_function(tree, name)
            if definition is not None:
                logger.debug(f"Using '{name}' as the script entry point")
                return definition
        return None

    @staticmethod
    def _read_script_info(tree: ast.Module, file: str, result: ExtractionResult) -> Optional[ScriptInfo]:
        try:
            dunders = read_module_dunders(tree, SCRIPT_INFO_FIELDS)
        except ValueError as e:
            result.warn(DiagnosticKind.MISSING_FIELD, file, f"Could not read script info: {e}", field="script_info")
            return None

        if not dunders:
            result.warn(DiagnosticKind.MISSING_FIELD, file, "No script info found", field="script_info")
            return None

        def text(key: str) -> Optional[str]:
            value = dunders.get(key)
            if value is None:
                return None
            if isinstance(value, tuple):
                return ".".join(str(part) for part in value)
            return str(value)

        return ScriptInfo(
            author=text("__author__"),
            version=text("__version__"),
            description=text("__description__"),
        )


def extract_script(path: Union[str, Path], style: DocstringStyle = DocstringStyle.AUTO) -> ExtractionResult:
    """Extract the documentation record of a script."""
    return ScriptExtractor(style).extract_script(path)
