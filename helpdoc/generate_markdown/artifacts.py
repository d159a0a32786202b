"""References to the artifacts documentation is extracted from.

An artifact is either a Python file, the dotted name of a loaded function, or
a function object. Each variant knows how to produce the source text that the
extractors parse.
"""

import inspect
import pkgutil
import textwrap
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable


class ArtifactResolutionError(ValueError):
    """Raised when a reference resolves to neither a readable file nor a loaded function."""


class ArtifactRef(ABC):
    """Base class for artifact references."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the artifact."""

    @property
    @abstractmethod
    def source_file(self) -> str:
        """Path of the file the artifact comes from."""

    @abstractmethod
    def load_source(self) -> str:
        """Return the source text to parse.

        Raises:
            ArtifactResolutionError: If the source cannot be obtained.
        """


@dataclass(frozen=True)
class FilePathRef(ArtifactRef):
    """A Python file on disk."""

    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def source_file(self) -> str:
        return str(self.path)

    def load_source(self) -> str:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ArtifactResolutionError(f"Cannot read {self.path}: {e}") from e


@dataclass(frozen=True)
class CallableRef(ArtifactRef):
    """A function object whose definition is reconstructed from its source."""

    func: Callable[..., Any]

    @property
    def name(self) -> str:
        return getattr(self.func, "__name__", repr(self.func))

    @property
    def is_routine(self) -> bool:
        """False for classes and other callable objects that are not functions or methods."""
        return inspect.isroutine(inspect.unwrap(self.func))

    @property
    def source_file(self) -> str:
        try:
            return inspect.getsourcefile(self.func) or "<unknown>"
        except TypeError:
            return "<unknown>"

    def load_source(self) -> str:
        try:
            return textwrap.dedent(inspect.getsource(inspect.unwrap(self.func)))
        except (OSError, TypeError) as e:
            raise ArtifactResolutionError(f"Cannot retrieve the source of {self.name}: {e}") from e


@dataclass(frozen=True)
class DefinitionNameRef(ArtifactRef):
    """A function named by its import path, e.g. ``package.module.func`` or ``package.module:func``."""

    qualified_name: str

    def resolve(self) -> CallableRef:
        """Import the named function.

        Raises:
            ArtifactResolutionError: If the name cannot be imported or is not callable.
        """
        try:
            obj = pkgutil.resolve_name(self.qualified_name)
        except (ImportError, AttributeError, ValueError) as e:
            raise ArtifactResolutionError(f"Cannot resolve '{self.qualified_name}': {e}") from e
        if not callable(obj):
            raise ArtifactResolutionError(f"'{self.qualified_name}' is not callable")
        return CallableRef(obj)

    @property
    def is_routine(self) -> bool:
        return self.resolve().is_routine

    @property
    def name(self) -> str:
        return self.qualified_name.replace(":", ".").rsplit(".", 1)[-1]

    @property
    def source_file(self) -> str:
        return self.resolve().source_file

    def load_source(self) -> str:
        return self.resolve().load_source()


def resolve_artifact(source: Any) -> ArtifactRef:
    """Turn a path, a name or a function object into an artifact reference.

    Strings are tried as file paths first and as definition names second.

    Args:
        source: An ArtifactRef, a Path, a string, or a callable.

    Returns:
        The matching artifact reference.

    Raises:
        ArtifactResolutionError: If the source matches no variant.
    """
    if isinstance(source, ArtifactRef):
        return source
    if isinstance(source, Path):
        return FilePathRef(source)
    if isinstance(source, str):
        path = Path(source)
        if path.is_file():
            return FilePathRef(path)
        ref = DefinitionNameRef(source)
        ref.resolve()
        return ref
    if callable(source):
        return CallableRef(source)
    raise ArtifactResolutionError(f"Unsupported artifact reference: {source!r}")
