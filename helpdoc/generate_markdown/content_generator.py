"""Markdown content generator for documentation records."""

import datetime
from typing import Optional, Sequence, Union

import yaml

from .constants import (
    DATE_FORMAT,
    DEFAULT_GRANULARITY,
    DEFAULT_HEADING_LEVEL,
    METADATA_LANGUAGE,
    SOURCE_LANGUAGE,
)
from .markdown import bold, code_block, header, inline_code, table
from .models import DocumentationRecord, HeaderGranularity
from .utils import short_filename, title_case

PARAMETER_TABLE_HEADERS = ("Name", "DefaultValue", "Required", "ParameterValue", "Position", "PipelineInput")


class MarkdownRenderer:
    """Renders documentation records as Markdown.

    Every section is produced by its own ``_generate_*`` method and the
    non-empty ones are joined with blank lines. Records are never modified.
    """

    def __init__(
        self,
        granularity: Union[HeaderGranularity, str] = DEFAULT_GRANULARITY,
        heading_level: int = DEFAULT_HEADING_LEVEL,
        generated_on: Optional[datetime.date] = None,
    ):
        """Initialize the renderer.

        Args:
            granularity: Fine renders parameter names and example titles as
                headings, Coarse as bold text.
            heading_level: Heading level of the document title.
            generated_on: Date written to the metadata block; today when omitted.
        """
        self.granularity = HeaderGranularity(granularity)
        self.heading_level = heading_level
        self.generated_on = generated_on

    def render(self, record: DocumentationRecord) -> str:
        """Render one record as a Markdown document.

        Args:
            record: The record to render.

        Returns:
            Markdown text.
        """
        return self._render_at(record, self.heading_level, include_metadata=True)

    def render_with_nested(
        self, script_record: DocumentationRecord, function_records: Sequence[DocumentationRecord]
    ) -> str:
        """Render a script followed by a Functions section documenting its functions.

        Each function is rendered one level below the script's sections and
        without its own metadata block.

        Args:
            script_record: The script-level record.
            function_records: Records of the functions defined in the script.

        Returns:
            Markdown text.
        """
        parts = [self._render_at(script_record, self.heading_level, include_metadata=True)]
        if function_records:
            parts.append(header("Functions", self.heading_level + 1))
            parts.extend(
                self._render_at(record, self.heading_level + 2, include_metadata=False) for record in function_records
            )
        return "\n\n".join(parts)

    def _render_at(self, record: DocumentationRecord, level: int, include_metadata: bool) -> str:
        sections = [
            self._generate_title(record, level),
            self._generate_metadata(record) if include_metadata else "",
            self._generate_syntax(record, level),
            self._generate_text_section("Synopsis", record.synopsis, record, level),
            self._generate_text_section("Description", record.description, record, level),
            self._generate_parameters(record, level),
            self._generate_examples(record, level),
            self._generate_notes(record, level),
        ]
        return "\n\n".join(filter(None, sections))

    def _sub_title(self, text: str, level: int) -> str:
        """Title of a parameter or example: a heading when Fine, bold text when Coarse."""
        if self.granularity is HeaderGranularity.FINE:
            return header(text, level)
        return bold(text)

    def _generate_title(self, record: DocumentationRecord, level: int) -> str:
        """Generate the title section."""
        return header(record.name, level)

    def _generate_metadata(self, record: DocumentationRecord) -> str:
        """Generate the YAML metadata block.

        Returns:
            Fenced block with the file name, the script version if known, and the generation date.
        """
        metadata = {"FileName": short_filename(record.source_file)}
        if record.script_info and record.script_info.version:
            metadata["Version"] = record.script_info.version
        generated_on = self.generated_on or datetime.date.today()
        metadata["Generated"] = generated_on.strftime(DATE_FORMAT)

        yaml_content = yaml.dump(metadata, default_flow_style=False, sort_keys=False)
        return code_block(yaml_content.strip(), METADATA_LANGUAGE)

    def _generate_syntax(self, record: DocumentationRecord, level: int) -> str:
        """Generate the syntax section."""
        return f"{header('Syntax', level + 1)}\n\n{code_block(record.syntax.strip(), SOURCE_LANGUAGE)}"

    @staticmethod
    def _is_meaningful(text: str, record: DocumentationRecord) -> bool:
        # Text naming the source file is a placeholder, not documentation
        text = text.strip()
        return bool(text) and short_filename(record.source_file) not in text

    def _generate_text_section(self, title: str, text: str, record: DocumentationRecord, level: int) -> str:
        """Generate the synopsis or description section."""
        if not self._is_meaningful(text, record):
            return ""
        return f"{header(title, level + 1)}\n\n{text.strip()}"

    def _generate_parameters(self, record: DocumentationRecord, level: int) -> str:
        """Generate the parameters section, one block and one details table per parameter."""
        if not record.parameters:
            return ""

        blocks = [header("Parameters", level + 1)]
        for parameter in record.parameters:
            blocks.append(self._sub_title(inline_code(parameter.name), level + 2))
            if parameter.description:
                blocks.append(parameter.description)
            blocks.append(bold("Parameter Details"))
            row = [
                parameter.name,
                parameter.default_value,
                str(parameter.required),
                parameter.parameter_value,
                parameter.position,
                str(parameter.pipeline_input),
            ]
            blocks.append(table(PARAMETER_TABLE_HEADERS, [row]))
        return "\n\n".join(blocks)

    def _generate_examples(self, record: DocumentationRecord, level: int) -> str:
        """Generate the examples section."""
        if not record.examples:
            return ""

        blocks = [header("Examples", level + 1)]
        for example in record.examples:
            blocks.append(self._sub_title(title_case(example.title), level + 2))
            blocks.append(code_block(example.body, SOURCE_LANGUAGE))
        return "\n\n".join(blocks)

    def _generate_notes(self, record: DocumentationRecord, level: int) -> str:
        """Generate the notes section."""
        if not record.notes.strip():
            return ""
        return f"{header('Notes', level + 1)}\n\n{record.notes.strip()}"


def render(
    record: DocumentationRecord,
    granularity: Union[HeaderGranularity, str] = DEFAULT_GRANULARITY,
    heading_level: int = DEFAULT_HEADING_LEVEL,
    generated_on: Optional[datetime.date] = None,
) -> str:
    """Render one record as a Markdown document."""
    return MarkdownRenderer(granularity, heading_level, generated_on).render(record)


def render_with_nested(
    script_record: DocumentationRecord,
    function_records: Sequence[DocumentationRecord],
    granularity: Union[HeaderGranularity, str] = DEFAULT_GRANULARITY,
    heading_level: int = DEFAULT_HEADING_LEVEL,
    generated_on: Optional[datetime.date] = None,
) -> str:
    """Render a script with a Functions section documenting its functions."""
    return MarkdownRenderer(granularity, heading_level, generated_on).render_with_nested(
        script_record, function_records
    )
