"""Rewrite the keyword lines of a tagged help block as Markdown headings."""

import re
from typing import List, Sequence, Tuple, Union

# (tag, replacement label, section heading) for every keyword of the help block vocabulary
HELP_BLOCK_HEADINGS: Tuple[Tuple[str, str, str], ...] = (
    ("SYNOPSIS", "Synopsis", "Synopsis"),
    ("DESCRIPTION", "Description", "Description"),
    ("PARAMETER", "", "Parameters"),
    ("EXAMPLE", "Example", "Examples"),
    ("INPUTS", "Inputs", "Inputs"),
    ("OUTPUTS", "Outputs", "Outputs"),
    ("NOTES", "Notes", "Notes"),
    ("LINK", "", "Links"),
    ("COMPONENT", "Component", "Components"),
    ("ROLE", "Role", "Roles"),
    ("FUNCTIONALITY", "Functionality", "Functionality"),
)


def _heading(level: int, label: str, rest: str) -> str:
    text = " ".join(part for part in (label, rest) if part)
    return f"{'#' * level} {text}"


def convert_headings(
    tag: str,
    replacement_label: str,
    section_heading: str,
    lines: Union[str, Sequence[str]],
) -> List[str]:
    """Turn ``.TAG`` lines of a help block into Markdown headings.

    Leading spaces and tabs are stripped from every line. When the tag occurs
    more than once, each occurrence becomes a second-level heading and the
    first one is preceded by a first-level ``section_heading`` and a blank
    line. A single occurrence becomes a first-level heading. Text following
    the tag on the same line (a parameter name, an example title) is kept
    after the label.

    Args:
        tag: Keyword without the leading dot, matched case-insensitively.
        replacement_label: Text replacing the keyword; may be empty.
        section_heading: Heading grouping repeated occurrences.
        lines: Help block lines, or the whole block as one string.

    Returns:
        The rewritten lines. Without any occurrence the input lines are
        returned unchanged.
    """
    if isinstance(lines, str):
        lines = lines.split("\n")

    stripped = [line.lstrip(" \t") for line in lines]
    pattern = re.compile(r"^\." + re.escape(tag), re.IGNORECASE)
    count = sum(1 for line in stripped if pattern.match(line))
    if count == 0:
        return list(lines)

    level = 2 if count > 1 else 1
    converted: List[str] = []
    first = True
    for line in stripped:
        match = pattern.match(line)
        if not match:
            converted.append(line)
            continue
        if count > 1 and first:
            converted.extend([_heading(1, section_heading, ""), ""])
        first = False
        converted.append(_heading(level, replacement_label, line[match.end():].lstrip(" \t")))
    return converted


def help_block_to_markdown(text: str) -> str:
    """Convert every keyword line of a tagged help block to Markdown headings.

    Args:
        text: The raw help block.

    Returns:
        Markdown text.
    """
    lines: List[str] = text.strip("\n").split("\n")
    for tag, label, section in HELP_BLOCK_HEADINGS:
        lines = convert_headings(tag, label, section, lines)
    return "\n".join(lines)
