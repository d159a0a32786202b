"""Shared pytest fixtures for generate_markdown tests."""

import datetime
import textwrap
from pathlib import Path

import pytest

from ..models import DocumentationRecord, ExampleRecord, ParameterRecord, ScriptInfo


@pytest.fixture
def generated_on():
    """Fixed generation date so rendered output is reproducible."""
    return datetime.date(2024, 3, 5)


@pytest.fixture
def write_script(tmp_path):
    """Return a factory writing dedented Python source to a file in tmp_path."""

    def _write(name: str, source: str) -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(source).lstrip("\n"))
        return path

    return _write


@pytest.fixture
def sample_record():
    """A record with two parameters and one example."""
    return DocumentationRecord(
        name="resize_image",
        source_file="/tmp/tools/images.py",
        syntax="resize_image(path: str, width: int = 800)",
        synopsis="Resize an image file.",
        description="Scales the image so that it is at most width pixels wide.",
        parameters=(
            ParameterRecord(
                name="path",
                description="Image to resize.",
                required=True,
                parameter_value="str",
                position="0",
            ),
            ParameterRecord(
                name="width",
                description="Maximum width in pixels.",
                default_value="800",
                parameter_value="int",
                position="1",
            ),
        ),
        examples=(ExampleRecord(title="shrink a photo", body='resize_image("photo.jpg", 640)'),),
        notes="The aspect ratio is kept.",
    )


@pytest.fixture
def script_record():
    """A script-level record carrying script info."""
    return DocumentationRecord(
        name="sync_users.py",
        source_file="/opt/scripts/sync_users.py",
        syntax="sync_users.py(directory: str)",
        synopsis="Synchronize users from the directory service.",
        description="Creates missing accounts and disables removed ones.",
        parameters=(
            ParameterRecord(
                name="directory",
                description="LDAP URL of the directory.",
                required=True,
                parameter_value="str",
                position="0",
            ),
        ),
        script_info=ScriptInfo(author="IT", version="1.4", description="User synchronization."),
    )
