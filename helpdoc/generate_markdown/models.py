"""Data models for documentation extraction."""

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import logger


class HeaderGranularity(str, enum.Enum):
    """Whether parameter names and example titles render as headings or bold text."""

    COARSE = "Coarse"
    FINE = "Fine"


@dataclass(frozen=True)
class ParameterRecord:
    """One documented parameter of a function or script."""

    name: str
    description: str = ""
    default_value: str = ""
    required: bool = False
    parameter_value: str = ""  # type name
    position: str = "named"
    pipeline_input: bool = False


@dataclass(frozen=True)
class ExampleRecord:
    """One example from a help block."""

    title: str
    body: str


@dataclass(frozen=True)
class ScriptInfo:
    """Artifact-level metadata read from module dunders."""

    author: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class DocumentationRecord:
    """Extracted and normalized help for one function or script."""

    name: str
    source_file: str
    syntax: str
    synopsis: str = ""
    description: str = ""
    parameters: Tuple[ParameterRecord, ...] = ()
    examples: Tuple[ExampleRecord, ...] = ()
    notes: str = ""
    script_info: Optional[ScriptInfo] = None


class DiagnosticKind(enum.Enum):
    """Categories of non-fatal extraction problems."""

    MISSING_FIELD = "missing-field"
    RESOLUTION_FAILURE = "resolution-failure"
    UNSUPPORTED_ARTIFACT = "unsupported-artifact"
    PATH_RESOLUTION = "path-resolution"


@dataclass(frozen=True)
class Diagnostic:
    """A problem found while extracting documentation."""

    kind: DiagnosticKind
    file: str
    message: str
    definition: Optional[str] = None
    field: Optional[str] = None

    def __str__(self) -> str:
        location = f"{self.file}:{self.definition}" if self.definition else self.file
        return f"[{location}] {self.message}"


@dataclass
class ExtractionResult:
    """Records produced by an extraction call, with the diagnostics collected on the way."""

    records: List[DocumentationRecord] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def warn(
        self,
        kind: DiagnosticKind,
        file: str,
        message: str,
        definition: Optional[str] = None,
        field: Optional[str] = None,
    ) -> Diagnostic:
        """Record a diagnostic and log it at warning level."""
        diagnostic = Diagnostic(kind, file, message, definition, field)
        self.diagnostics.append(diagnostic)
        logger.warning(str(diagnostic))
        return diagnostic

    def extend(self, other: "ExtractionResult") -> None:
        """Append the records and diagnostics of another result."""
        self.records.extend(other.records)
        self.diagnostics.extend(other.diagnostics)
