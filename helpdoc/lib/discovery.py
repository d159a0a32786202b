"""Script discovery utilities."""

from collections.abc import Sequence
from pathlib import Path


def normalize_targets(raw_paths: Sequence[str], base_dir: Path | None = None) -> list[Path]:
    """Normalize target paths to absolute Path objects.

    Args:
        raw_paths: Sequence of path strings (can be relative or absolute).
        base_dir: Directory relative paths are resolved against; defaults to the
            current working directory.

    Returns:
        List of normalized absolute Path objects.

    Raises:
        FileNotFoundError: If any specified path does not exist.
    """
    base_dir = base_dir or Path.cwd()

    normalized: list[Path] = []
    for raw in raw_paths:
        candidate = Path(raw)
        if not candidate.is_absolute():
            candidate = (base_dir / candidate).resolve()
        else:
            candidate = candidate.resolve()
        if not candidate.exists():
            raise FileNotFoundError(f"Specified path does not exist: {raw}")
        normalized.append(candidate)
    return normalized


def discover_scripts(base_dir: Path, extensions: Sequence[str] = (".py",)) -> list[Path]:
    """Discover all scripts directly inside a directory.

    Skips hidden and private files (leading '.' or '_') so that package
    ``__init__.py`` files are not documented as scripts.

    Args:
        base_dir: Directory to search.
        extensions: File suffixes that count as scripts.

    Returns:
        Sorted list of script paths.
    """
    if not base_dir.is_dir():
        return []

    scripts = []
    for path in base_dir.iterdir():
        if not path.is_file() or path.name.startswith(("_", ".")):
            continue
        if path.suffix.lower() in extensions:
            scripts.append(path)
    return sorted(scripts)

