"""Tests for heading_converter.py module."""

from ..heading_converter import convert_headings, help_block_to_markdown


class TestConvertHeadings:
    """Tests for convert_headings function."""

    def test_single_occurrence_becomes_top_level_heading(self):
        """Test that one .PARAMETER line becomes a single first-level heading."""
        lines = [".PARAMETER Name", "    The user name."]

        result = convert_headings("PARAMETER", "", "Parameters", lines)

        assert result == ["# Name", "The user name."]
        assert "# Parameters" not in result

    def test_repeated_tag_gets_section_heading(self):
        """Test that N occurrences give N subheadings and one section heading."""
        lines = [
            ".EXAMPLE first run",
            "    run()",
            ".EXAMPLE",
            "    run(1)",
            ".example dry run",
            "    run(dry=True)",
        ]

        result = convert_headings("EXAMPLE", "Example", "Examples", lines)

        assert result == [
            "# Examples",
            "",
            "## Example first run",
            "run()",
            "## Example",
            "run(1)",
            "## Example dry run",
            "run(dry=True)",
        ]
        assert sum(1 for line in result if line.startswith("## ")) == 3
        assert sum(1 for line in result if line.startswith("# ")) == 1

    def test_no_occurrence_returns_input_unchanged(self):
        """Test that lines are returned untouched when the tag is absent."""
        lines = ["  .SYNOPSIS", "\tIndented text"]

        assert convert_headings("NOTES", "Notes", "Notes", lines) == lines

    def test_empty_label_has_no_double_space(self):
        """Test that an empty replacement label does not leave a double space."""
        result = convert_headings("LINK", "", "Links", [".LINK https://example.com", ".LINK https://example.org"])

        assert result[2] == "## https://example.com"
        assert not any("  " in line for line in result)

    def test_empty_label_without_text(self):
        """Test that a bare tag with an empty label keeps the space after the marker."""
        result = convert_headings("PARAMETER", "", "Parameters", [".PARAMETER", "\t.PARAMETER "])

        assert result == ["# Parameters", "", "## ", "## "]

    def test_string_input_is_split(self):
        """Test that a single blob is split on newlines."""
        result = convert_headings("NOTES", "Notes", "Notes", ".NOTES\n    Keep backups.")

        assert result == ["# Notes", "Keep backups."]

    def test_leading_whitespace_is_stripped(self):
        """Test that tabs and spaces before the tag are ignored."""
        result = convert_headings("SYNOPSIS", "Synopsis", "Synopsis", ["\t  .SYNOPSIS  ", "  text  "])

        assert result == ["# Synopsis", "text  "]

    def test_other_lines_keep_their_order(self):
        """Test that non-matching lines are kept in order."""
        lines = ["intro", ".NOTES", "body", "outro"]

        result = convert_headings("NOTES", "Notes", "Notes", lines)

        assert result == ["intro", "# Notes", "body", "outro"]


class TestHelpBlockToMarkdown:
    """Tests for help_block_to_markdown function."""

    def test_converts_every_keyword(self):
        """Test conversion of a complete help block."""
        text = """
.SYNOPSIS
    Rotate logs.
.PARAMETER days
    Days to keep.
.PARAMETER path
    Log folder.
.NOTES
    Runs nightly.
"""
        result = help_block_to_markdown(text)

        assert result.splitlines() == [
            "# Synopsis",
            "Rotate logs.",
            "# Parameters",
            "",
            "## days",
            "Days to keep.",
            "## path",
            "Log folder.",
            "# Notes",
            "Runs nightly.",
        ]
