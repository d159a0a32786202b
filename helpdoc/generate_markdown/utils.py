"""Utility functions for Markdown generation."""

import re

_ACRONYMS = {"API", "CLI", "CSV", "HTTP", "ID", "JSON", "SQL", "UI", "URL", "YAML"}

_WORD_REGEX = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)?")


def title_case(text: str) -> str:
    """Capitalize every word of a title.

    Words are runs of letters (an apostrophe inside a word does not start a
    new one). Each word gets an upper-case first letter and lower-case rest,
    except known acronyms, which stay upper-case.

    Args:
        text: The title to format.

    Returns:
        The title-cased text. Digits, punctuation and spacing are unchanged.
    """

    def capitalize(match: re.Match) -> str:
        word = match.group(0)
        if word.upper() in _ACRONYMS:
            return word.upper()
        return word[0].upper() + word[1:].lower()

    return _WORD_REGEX.sub(capitalize, text)


def format_title(title: str) -> str:
    """Format a title from snake_case, kebab-case, or camelCase to Title Case.

    Args:
        title: The title to format.

    Returns:
        Formatted title in Title Case with spaces.
    """
    # First, handle camelCase by inserting spaces before capitals
    title = re.sub(r"([a-z])([A-Z])", r"\1 \2", title)

    # Replace underscores and hyphens with spaces
    title = title.replace("_", " ").replace("-", " ")

    return title_case(" ".join(title.split()))


def trim_title_markers(title: str) -> str:
    """Remove decoration such as '--- Example 1 ---' from both ends of a title."""
    return title.strip().strip("-=#*").strip()


def short_filename(path: str) -> str:
    """Return the last component of a path, accepting both separators."""
    return re.split(r"[\\/]", path)[-1]
