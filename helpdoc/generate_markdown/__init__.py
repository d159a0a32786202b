"""Generate Markdown documentation from the help of Python scripts and functions.

This package resolves the help of each function (or of a script as a whole)
into a documentation record, reporting missing help as diagnostics, and
renders the records as Markdown with configurable heading granularity.
"""

from .artifacts import ArtifactResolutionError, CallableRef, DefinitionNameRef, FilePathRef, resolve_artifact
from .content_generator import MarkdownRenderer, render, render_with_nested
from .function_extractor import FunctionExtractor, extract_functions, extract_many
from .heading_converter import convert_headings, help_block_to_markdown
from .models import (
    Diagnostic,
    DiagnosticKind,
    DocumentationRecord,
    ExampleRecord,
    ExtractionResult,
    HeaderGranularity,
    ParameterRecord,
    ScriptInfo,
)
from .script_extractor import ScriptExtractor, extract_script
from .writer import DocumentationWriter, MarkdownWriter

__all__ = [
    'ArtifactResolutionError',
    'CallableRef',
    'DefinitionNameRef',
    'Diagnostic',
    'DiagnosticKind',
    'DocumentationRecord',
    'DocumentationWriter',
    'ExampleRecord',
    'ExtractionResult',
    'FilePathRef',
    'FunctionExtractor',
    'HeaderGranularity',
    'MarkdownRenderer',
    'MarkdownWriter',
    'ParameterRecord',
    'ScriptExtractor',
    'ScriptInfo',
    'convert_headings',
    'extract_functions',
    'extract_many',
    'extract_script',
    'help_block_to_markdown',
    'render',
    'render_with_nested',
    'resolve_artifact',
]
