"""Markdown building blocks."""

from typing import List, Sequence

from .constants import MAX_HEADING_LEVEL


def header(text: str, level: int) -> str:
    """Return a Markdown heading, clamping the level to 1..6."""
    level = max(1, min(level, MAX_HEADING_LEVEL))
    return f"{'#' * level} {text}"


def bold(text: str) -> str:
    """Return bold text."""
    return f"**{text}**"


def inline_code(text: str) -> str:
    """Return inline code, widening the delimiter when the text holds backticks."""
    if "`" in text:
        return f"`` {text} ``"
    return f"`{text}`"


def code_block(code: str, language: str = "") -> str:
    """Return a fenced code block.

    Args:
        code: Block content.
        language: Info string after the opening fence.

    Returns:
        The fenced block; the fence is lengthened when the code contains one.
    """
    fence = "````" if "```" in code else "```"
    return f"{fence}{language}\n{code}\n{fence}"


def _table_cell(value: str) -> str:
    return value.replace("|", r"\|").replace("\n", "<br>")


def table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Return a Markdown table.

    Args:
        headers: Column titles.
        rows: Cell values, one sequence per row.

    Returns:
        The table text.
    """
    lines: List[str] = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("---" for _ in headers) + "|",
    ]
    for row in rows:
        lines.append("| " + " | ".join(_table_cell(cell) for cell in row) + " |")
    return "\n".join(lines)
