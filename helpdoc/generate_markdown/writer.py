"""Markdown writers for documented scripts and functions."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

from docstring_parser import DocstringStyle

from ..lib.discovery import discover_scripts
from .artifacts import ArtifactResolutionError
from .constants import CUSTOM_CONTENT_MARKER, INDEX_FILENAME, SCRIPT_EXTENSIONS
from .content_generator import MarkdownRenderer
from .function_extractor import FunctionExtractor
from .index_generator import IndexGenerator
from .models import Diagnostic, DiagnosticKind, DocumentationRecord
from .script_extractor import ScriptExtractor

logger = logging.getLogger(__name__)


class MarkdownWriter:
    """Sends Markdown to the console or to a file.

    Existing files are only replaced with ``force`` or extended with
    ``append``. Text after the custom-content marker of a replaced file is
    kept. In check mode nothing is written; files are only compared.
    """

    def __init__(self, force: bool = False, append: bool = False, passthru: bool = False, check: bool = False):
        """Initialize the writer.

        Args:
            force: Overwrite existing files.
            append: Append to existing files.
            passthru: Also print content that is written to a file.
            check: Only report whether files are out of sync.
        """
        if force and append:
            logger.error("Cannot specify both force and append")
            raise ValueError("Cannot specify both force and append")

        self.force = force
        self.append = append
        self.passthru = passthru
        self.check = check

    def _extract_custom_content(self, output_file: Path) -> Optional[str]:
        """Extract custom content from an existing file if it has a custom-content marker.

        Args:
            output_file: The file about to be replaced.

        Returns:
            The custom content (including marker) if found, None otherwise.
        """
        content = self._read_file_content(output_file)
        if content is None or CUSTOM_CONTENT_MARKER not in content:
            return None

        custom_content = content[content.find(CUSTOM_CONTENT_MARKER):]
        logger.debug(f"Found custom content marker, preserving {len(custom_content)} characters")
        return custom_content

    def _read_file_content(self, file_path: Path) -> Optional[str]:
        """Read content from a file if it exists.

        Args:
            file_path: Path to the file to read.

        Returns:
            File content as string, or None if file doesn't exist.
        """
        if not file_path.exists():
            return None
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            logger.warning(f"Error reading {file_path}: {e}")
            return None

    def _expected_content(self, content: str, output_file: Path) -> str:
        custom_content = self._extract_custom_content(output_file)
        if custom_content:
            content = f"{content}\n\n{custom_content}"
        if not content.endswith("\n"):
            content += "\n"
        return content

    def _check_file(self, content: str, output_file: Path) -> bool:
        """Check if a file matches the content that would be written.

        Returns:
            True if there's a diff, False if content matches.
        """
        expected = self._expected_content(content, output_file)
        has_diff = expected != self._read_file_content(output_file)
        if has_diff:
            logger.warning(f"Out of sync: {output_file}")
        return has_diff

    def _write_file(self, content: str, output_file: Path) -> None:
        if output_file.exists():
            if self.append:
                with open(output_file, "a", encoding="utf-8") as f:
                    f.write(f"\n{content}\n")
                logger.info(f"Markdown appended to {output_file}")
                return
            if not self.force:
                raise FileExistsError(f"{output_file} already exists; use force to overwrite or append to extend it")

        content = self._expected_content(content, output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w", encoding="utf-8") as f:
            logger.debug(f"Writing Markdown to {output_file}")
            f.write(content)
        logger.info(f"Markdown generated successfully at {output_file}")

    def emit(self, content: str, output_file: Optional[Path] = None) -> bool:
        """Print content or write it to a file.

        Args:
            content: The Markdown to emit.
            output_file: Destination file; the console when None.

        Returns:
            True if the file was written, or in check mode, is out of sync.

        Raises:
            FileExistsError: If the file exists and neither force nor append was requested.
        """
        if output_file is None:
            print(content)
            return False

        if self.check:
            return self._check_file(content, output_file)

        self._write_file(content, output_file)
        if self.passthru:
            print(content)
        return True


@dataclass
class WriteReport:
    """Outcome of a documentation run."""

    diagnostics: List[Diagnostic] = field(default_factory=list)
    changed: List[Path] = field(default_factory=list)
    failures: List[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.failures)


class DocumentationWriter:
    """Extracts, renders and writes documentation for scripts and functions."""

    def __init__(
        self,
        renderer: MarkdownRenderer,
        sink: MarkdownWriter,
        include_nested_functions: bool = False,
        style: DocstringStyle = DocstringStyle.AUTO,
    ):
        """Initialize the documentation writer.

        Args:
            renderer: Renderer used for every record.
            sink: Where the Markdown goes.
            include_nested_functions: Document the functions of each script in a Functions section.
            style: Docstring style for docstrings that are not tagged help blocks.
        """
        self.renderer = renderer
        self.sink = sink
        self.include_nested_functions = include_nested_functions
        self.script_extractor = ScriptExtractor(style)
        self.function_extractor = FunctionExtractor(style)

    def _render_script(self, script: Path, report: WriteReport) -> Optional[Tuple[DocumentationRecord, str]]:
        """Extract and render one script; None when it yields no record."""
        try:
            result = self.script_extractor.extract_script(script)
            report.diagnostics.extend(result.diagnostics)
            if not result.records:
                return None
            record = result.records[0]

            if not self.include_nested_functions:
                return record, self.renderer.render(record)

            functions = self.function_extractor.extract_functions(script)
            report.diagnostics.extend(functions.diagnostics)
            return record, self.renderer.render_with_nested(record, functions.records)
        except ArtifactResolutionError as e:
            logger.error(str(e))
            report.failures.append(str(script))
            return None

    def _emit(self, content: str, output_file: Optional[Path], report: WriteReport) -> None:
        try:
            if self.sink.emit(content, output_file) and output_file is not None:
                report.changed.append(output_file)
        except FileExistsError as e:
            logger.error(str(e))
            report.failures.append(str(output_file))

    def document_scripts(self, targets: Sequence[Path], output: Optional[Path] = None) -> WriteReport:
        """Document scripts and directories of scripts.

        With an output ending in ``.md`` every document is concatenated into
        that file. With any other output, it is a directory receiving one
        ``<stem>.md`` per script and an index README. Without output the
        documents are printed.

        Args:
            targets: Script files or directories containing scripts.
            output: Output file or directory.

        Returns:
            The report of the run.
        """
        report = WriteReport()
        scripts: List[Path] = []
        for target in targets:
            if target.is_dir():
                found = discover_scripts(target, SCRIPT_EXTENSIONS)
                logger.debug(f"Found {len(found)} scripts in {target}")
                scripts.extend(found)
            else:
                scripts.append(target)

        rendered = [item for item in (self._render_script(script, report) for script in scripts) if item]

        if output is None or output.suffix.lower() == ".md":
            if rendered:
                self._emit("\n\n".join(content for _, content in rendered), output, report)
            return report

        entries = []
        for record, content in rendered:
            doc_file = output / f"{Path(record.source_file).stem}.md"
            self._emit(content, doc_file, report)
            entries.append((record, doc_file))

        if entries:
            index_content = IndexGenerator(output).generate(entries)
            self._emit(index_content, output / INDEX_FILENAME, report)
        return report

    def document_functions(self, sources: Sequence[Any], output: Optional[Path] = None) -> WriteReport:
        """Document the functions of files, named definitions, or function objects.

        Args:
            sources: Artifacts accepted by ``FunctionExtractor.extract_functions``.
            output: Output file; the documents are printed when None.

        Returns:
            The report of the run.
        """
        report = WriteReport()
        result = self.function_extractor.extract_many(sources)
        report.diagnostics.extend(result.diagnostics)
        report.failures.extend(
            diagnostic.file
            for diagnostic in result.diagnostics
            if diagnostic.kind is DiagnosticKind.PATH_RESOLUTION
        )

        if result.records:
            content = "\n\n".join(self.renderer.render(record) for record in result.records)
            self._emit(content, output, report)
        return report
