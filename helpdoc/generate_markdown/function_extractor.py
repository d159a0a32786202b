"""Extract documentation records for the functions defined in an artifact."""

import ast
from pathlib import Path
from typing import Any, Iterable, Optional

from docstring_parser import DocstringStyle, ParseError

from ..lib.parsing import find_function_definitions, parse_source
from .artifacts import ArtifactResolutionError, CallableRef, DefinitionNameRef, FilePathRef, resolve_artifact
from .constants import SCRIPT_EXTENSIONS, logger
from .metadata_extractor import MetadataExtractor, normalize_syntax
from .models import DiagnosticKind, DocumentationRecord, ExtractionResult
from .utils import short_filename


class FunctionExtractor(MetadataExtractor):
    """Extracts one documentation record per free function of an artifact."""

    def extract_functions(self, source: Any) -> ExtractionResult:
        """Extract documentation for every free function of an artifact.

        Class members and functions nested in other functions are skipped. A
        function whose help cannot be resolved is reported and left out; the
        remaining functions are still extracted.

        Args:
            source: An ArtifactRef, a path, a definition name, or a function object.

        Returns:
            The records in source order and the diagnostics collected.

        Raises:
            ArtifactResolutionError: If the source resolves to neither a file nor a function.
        """
        ref = resolve_artifact(source)
        result = ExtractionResult()
        file = short_filename(ref.source_file)

        if isinstance(ref, FilePathRef) and ref.path.suffix.lower() not in SCRIPT_EXTENSIONS:
            result.warn(DiagnosticKind.UNSUPPORTED_ARTIFACT, file, f"Unsupported file type '{ref.path.suffix}'")
            return result

        if isinstance(ref, (CallableRef, DefinitionNameRef)) and not ref.is_routine:
            result.warn(DiagnosticKind.UNSUPPORTED_ARTIFACT, file, f"'{ref.name}' is not a function")
            return result

        text = ref.load_source()
        try:
            tree = parse_source(text, ref.source_file)
        except SyntaxError as e:
            result.warn(DiagnosticKind.RESOLUTION_FAILURE, file, f"Could not parse source: {e}")
            return result

        definitions = find_function_definitions(tree)
        logger.debug(f"Found {len(definitions)} function definitions in {file}")

        for definition in definitions:
            record = self._extract_definition(definition.node, ref.source_file, result)
            if record is not None:
                result.records.append(record)
        return result

    def _extract_definition(
        self, node: ast.AST, source_file: str, result: ExtractionResult
    ) -> Optional[DocumentationRecord]:
        file = short_filename(source_file)
        try:
            signature, docstring = self._introspect(node, source_file)
            syntax = normalize_syntax(f"{node.name}{signature}")
            help_object = self._resolve_help(docstring, syntax)
        except (SyntaxError, ValueError, ParseError) as e:
            result.warn(
                DiagnosticKind.RESOLUTION_FAILURE,
                file,
                f"Could not resolve help, skipping definition: {e}",
                node.name,
            )
            return None

        parameters = self._parameters_from_signature(signature, help_object.params, result, file, node.name)
        return self._build_record(node.name, source_file, syntax, help_object, parameters, result)

    def extract_many(self, sources: Iterable[Any]) -> ExtractionResult:
        """Extract documentation from several artifacts, continuing past failures.

        A source that resolves to nothing is reported as a diagnostic instead
        of raising.

        Args:
            sources: Artifacts accepted by ``extract_functions``.

        Returns:
            The combined records and diagnostics.
        """
        combined = ExtractionResult()
        for source in sources:
            try:
                combined.extend(self.extract_functions(source))
            except ArtifactResolutionError as e:
                name = short_filename(str(source)) if isinstance(source, (str, Path)) else repr(source)
                combined.warn(DiagnosticKind.PATH_RESOLUTION, name, str(e))
        return combined


def extract_functions(source: Any, style: DocstringStyle = DocstringStyle.AUTO) -> ExtractionResult:
    """Extract documentation for every free function of an artifact."""
    return FunctionExtractor(style).extract_functions(source)


def extract_many(sources: Iterable[Any], style: DocstringStyle = DocstringStyle.AUTO) -> ExtractionResult:
    """Extract documentation from several artifacts, continuing past failures."""
    return FunctionExtractor(style).extract_many(sources)
