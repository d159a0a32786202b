"""Resolve docstrings into structured help objects.

Two docstring families are understood:

* tagged help blocks, where every section starts with a dot keyword::

      .SYNOPSIS
          Copy files between hosts.
      .PARAMETER source
          File to copy.
      .EXAMPLE Copy a single file
          copy_files("a.txt")

* everything else, which is handed to ``docstring_parser`` (REST, Google,
  Numpydoc and Epydoc styles).

Both produce a ``docstring_parser.Docstring`` so the extractors only deal with
one structure.
"""

import re
import textwrap
from typing import List, Optional, Tuple

from docstring_parser import (
    Docstring,
    DocstringMeta,
    DocstringParam,
    DocstringStyle,
    ParseError,
    parse,
)
from docstring_parser.common import DocstringExample

TAGGED_HELP_KEYWORDS = (
    "SYNOPSIS",
    "DESCRIPTION",
    "PARAMETER",
    "EXAMPLE",
    "INPUTS",
    "OUTPUTS",
    "NOTES",
    "LINK",
    "COMPONENT",
    "ROLE",
    "FUNCTIONALITY",
)

# Keywords allowed only once per help block
_SINGLE_KEYWORDS = {"SYNOPSIS", "DESCRIPTION", "NOTES"}

NOTES_KEYWORDS = {"notes", "note"}

_KEYWORD_LINE_REGEX = re.compile(r"^\s*\.([A-Za-z]+)(?:[ \t]+(.*?))?[ \t]*$")
_BLANK_LINE_REGEX = re.compile(r"\n[ \t]*\n")


class HelpResolutionError(ParseError):
    """Raised when a tagged help block is malformed."""


def _keyword_of(line: str) -> Tuple[Optional[str], str]:
    match = _KEYWORD_LINE_REGEX.match(line)
    if not match:
        return None, ""
    return match.group(1), match.group(2) or ""


def is_tagged_help(text: Optional[str]) -> bool:
    """Check whether a docstring is written as a tagged help block.

    Args:
        text: The docstring.

    Returns:
        True if the first non-blank line is a keyword of the vocabulary.
    """
    for line in (text or "").splitlines():
        if line.strip():
            keyword, _ = _keyword_of(line)
            return keyword is not None and keyword.upper() in TAGGED_HELP_KEYWORDS
    return False


def split_example(text: str) -> Tuple[str, str]:
    """Split an example body into its code and its remarks.

    The code is the leading block up to the first blank line; everything after
    it is remarks.

    Args:
        text: Example body.

    Returns:
        Tuple of (code, remarks).
    """
    parts = _BLANK_LINE_REGEX.split(text.strip("\n"), maxsplit=1)
    code = parts[0].rstrip()
    remarks = parts[1].strip() if len(parts) > 1 else ""
    return code, remarks


def _section_text(argument: str, body: List[str]) -> str:
    text = textwrap.dedent("\n".join(body)).strip()
    if argument:
        return f"{argument}\n{text}".strip()
    return text


def parse_tagged_help(text: str) -> Docstring:
    """Parse a tagged help block.

    Args:
        text: The help block.

    Returns:
        The structured help object.

    Raises:
        HelpResolutionError: If the block is malformed.
    """
    sections: List[Tuple[str, str, List[str]]] = []
    for number, line in enumerate(text.expandtabs().splitlines(), start=1):
        keyword, argument = _keyword_of(line)
        if keyword is not None and keyword.upper() in TAGGED_HELP_KEYWORDS:
            sections.append((keyword.upper(), argument, []))
            continue
        # An upper-case dot word is a keyword we do not know
        if keyword is not None and keyword.isupper():
            raise HelpResolutionError(f"Unknown help keyword '.{keyword}' on line {number}")
        if sections:
            sections[-1][2].append(line)
        elif line.strip():
            raise HelpResolutionError(f"Help text found before the first keyword on line {number}")

    docstring = Docstring()
    seen = set()
    for keyword, argument, body in sections:
        if keyword in _SINGLE_KEYWORDS:
            if keyword in seen:
                raise HelpResolutionError(f"'.{keyword}' appears more than once")
            seen.add(keyword)

        if keyword == "SYNOPSIS":
            docstring.short_description = _section_text(argument, body) or None
        elif keyword == "DESCRIPTION":
            docstring.long_description = _section_text(argument, body) or None
        elif keyword == "PARAMETER":
            if not argument:
                raise HelpResolutionError("'.PARAMETER' requires a parameter name")
            docstring.meta.append(
                DocstringParam(
                    args=["param", argument],
                    description=_section_text("", body) or None,
                    arg_name=argument,
                    type_name=None,
                    is_optional=None,
                    default=None,
                )
            )
        elif keyword == "EXAMPLE":
            code, remarks = split_example(_section_text("", body))
            docstring.meta.append(
                DocstringExample(
                    args=["examples", argument] if argument else ["examples"],
                    snippet=code or None,
                    description=remarks or None,
                )
            )
        else:
            docstring.meta.append(DocstringMeta(args=[keyword.lower()], description=_section_text(argument, body) or None))

    return docstring


def resolve_help(
    text: Optional[str],
    style: DocstringStyle = DocstringStyle.AUTO,
    fallback_synopsis: str = "",
) -> Docstring:
    """Resolve a docstring into a structured help object.

    An undocumented definition resolves to help whose synopsis is
    ``fallback_synopsis`` (usually the generated syntax), the way a runtime
    help system fills in missing help.

    Args:
        text: The docstring, or None.
        style: Style used for docstrings that are not tagged help blocks.
        fallback_synopsis: Synopsis reported when there is no docstring.

    Returns:
        The structured help object.

    Raises:
        ParseError: If the docstring cannot be parsed.
    """
    if not text or not text.strip():
        docstring = Docstring()
        docstring.short_description = fallback_synopsis or None
        return docstring

    if is_tagged_help(text):
        return parse_tagged_help(text)
    return parse(text, style=style)


def notes_of(help_object: Docstring) -> str:
    """Collect the notes sections of a help object."""
    notes = [
        meta.description.strip()
        for meta in help_object.meta
        if meta.args and meta.args[0].lower() in NOTES_KEYWORDS and meta.description
    ]
    return "\n\n".join(note for note in notes if note)
