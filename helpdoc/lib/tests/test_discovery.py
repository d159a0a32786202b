"""Tests for discovery module."""

from pathlib import Path

import pytest

from ..discovery import discover_scripts, normalize_targets


def _make_script(base: Path, name: str) -> Path:
    """Create a minimal script file and return its path."""
    base.mkdir(parents=True, exist_ok=True)
    script = base / name
    script.write_text('"""Script."""\n')
    return script


class TestDiscoverScripts:
    """Tests for discover_scripts()."""

    def test_returns_empty_for_nonexistent_dir(self, tmp_path: Path):
        """Return empty list when base_dir does not exist."""
        assert discover_scripts(tmp_path / "nonexistent") == []

    def test_discovers_scripts_sorted(self, tmp_path: Path):
        """Discover scripts in name order."""
        _make_script(tmp_path, "zeta.py")
        _make_script(tmp_path, "alpha.py")

        result = discover_scripts(tmp_path)

        assert [path.name for path in result] == ["alpha.py", "zeta.py"]

    def test_skips_private_and_hidden_files(self, tmp_path: Path):
        """Skip __init__.py, _private.py and dotfiles."""
        _make_script(tmp_path, "__init__.py")
        _make_script(tmp_path, "_private.py")
        _make_script(tmp_path, ".hidden.py")
        _make_script(tmp_path, "public.py")

        result = discover_scripts(tmp_path)

        assert [path.name for path in result] == ["public.py"]

    def test_filters_by_extension(self, tmp_path: Path):
        """Only files with a listed suffix are scripts."""
        _make_script(tmp_path, "tool.py")
        _make_script(tmp_path, "gui.pyw")
        _make_script(tmp_path, "notes.txt")

        result = discover_scripts(tmp_path, (".py", ".pyw"))

        assert [path.name for path in result] == ["gui.pyw", "tool.py"]

    def test_does_not_recurse(self, tmp_path: Path):
        """Scripts in subdirectories are not discovered."""
        _make_script(tmp_path / "nested", "deep.py")
        _make_script(tmp_path, "top.py")

        result = discover_scripts(tmp_path)

        assert [path.name for path in result] == ["top.py"]


class TestNormalizeTargets:
    """Tests for normalize_targets()."""

    def test_resolves_relative_paths(self, tmp_path: Path):
        """Relative paths are resolved against base_dir."""
        script = _make_script(tmp_path, "tool.py")

        result = normalize_targets(["tool.py"], base_dir=tmp_path)

        assert result == [script.resolve()]

    def test_keeps_absolute_paths(self, tmp_path: Path):
        """Absolute paths are resolved as-is."""
        script = _make_script(tmp_path, "tool.py")

        result = normalize_targets([str(script)])

        assert result == [script.resolve()]

    def test_raises_for_missing_path(self, tmp_path: Path):
        """Raise FileNotFoundError naming the missing path."""
        with pytest.raises(FileNotFoundError, match="missing.py"):
            normalize_targets(["missing.py"], base_dir=tmp_path)
