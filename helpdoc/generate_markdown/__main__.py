"""Command-line interface for generating Markdown documentation from Python help.

Examples:
  # Print the documentation of a script
  python -m helpdoc.generate_markdown script tools/backup.py

  # Document every script of a directory into docs/, with an index README
  python -m helpdoc.generate_markdown script tools/ -o docs/ --force

  # Document the functions of a module, with bold parameter titles
  python -m helpdoc.generate_markdown functions mypkg.helpers --granularity Coarse

  # Fail when committed documentation is out of date
  python -m helpdoc.generate_markdown script tools/ -o docs/ --check
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from docstring_parser import DocstringStyle

from ..lib.discovery import normalize_targets
from .constants import DEFAULT_GRANULARITY, DEFAULT_HEADING_LEVEL, EXIT_ERROR, EXIT_SUCCESS, MAX_HEADING_LEVEL, logger
from .content_generator import MarkdownRenderer
from .heading_converter import help_block_to_markdown
from .models import HeaderGranularity
from .writer import DocumentationWriter, MarkdownWriter, WriteReport

_STYLES = {
    "auto": DocstringStyle.AUTO,
    "google": DocstringStyle.GOOGLE,
    "rest": DocstringStyle.REST,
    "numpydoc": DocstringStyle.NUMPYDOC,
    "epydoc": DocstringStyle.EPYDOC,
}


def _heading_level(value: str) -> int:
    level = int(value)
    if not 1 <= level <= MAX_HEADING_LEVEL:
        raise argparse.ArgumentTypeError(f"heading level must be between 1 and {MAX_HEADING_LEVEL}")
    return level


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by the script and functions commands."""
    parser.add_argument(
        "--granularity",
        choices=[granularity.value for granularity in HeaderGranularity],
        default=DEFAULT_GRANULARITY,
        help="Render parameter names and example titles as headings (Fine) or bold text (Coarse)",
    )
    parser.add_argument(
        "--heading-level",
        type=_heading_level,
        default=DEFAULT_HEADING_LEVEL,
        help=f"Heading level of the document title (default: {DEFAULT_HEADING_LEVEL})",
    )
    parser.add_argument(
        "--style",
        choices=sorted(_STYLES),
        default="auto",
        help="Docstring style of help that is not a tagged help block (default: auto)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file, or for scripts a directory receiving one file per script (default: stdout)",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--force", action="store_true", help="Overwrite existing output files")
    mode.add_argument("--append", action="store_true", help="Append to existing output files")

    parser.add_argument("--passthru", action="store_true", help="Also print content written to files")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only check whether output files are up to date; exit 1 if any would change",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse; sys.argv when None.

    Returns:
        The parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="helpdoc",
        description="Generate Markdown documentation from the help of Python scripts and functions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("\n\n", 1)[1],
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    script_parser = subparsers.add_parser("script", help="Document scripts or directories of scripts")
    script_parser.add_argument("paths", nargs="+", help="Script files or directories containing scripts")
    script_parser.add_argument(
        "--include-nested-functions",
        action="store_true",
        help="Also document the functions defined in each script",
    )
    _add_output_arguments(script_parser)

    functions_parser = subparsers.add_parser("functions", help="Document the functions of files or definitions")
    functions_parser.add_argument(
        "sources",
        nargs="+",
        help="Python files or dotted definition names (e.g. package.module:function)",
    )
    _add_output_arguments(functions_parser)

    headings_parser = subparsers.add_parser("headings", help="Convert a raw tagged help block to Markdown")
    headings_parser.add_argument("file", nargs="?", type=Path, help="File holding the help block (default: stdin)")
    headings_parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")

    return parser.parse_args(argv)


def _build_writer(args: argparse.Namespace) -> DocumentationWriter:
    renderer = MarkdownRenderer(args.granularity, args.heading_level)
    sink = MarkdownWriter(force=args.force, append=args.append, passthru=args.passthru, check=args.check)
    return DocumentationWriter(
        renderer,
        sink,
        include_nested_functions=getattr(args, "include_nested_functions", False),
        style=_STYLES[args.style],
    )


def _exit_code(report: WriteReport, check: bool) -> int:
    if report.has_errors:
        logger.error(f"Failed to document: {', '.join(report.failures)}")
        return EXIT_ERROR

    if check:
        if report.changed:
            logger.error(f"{len(report.changed)} file(s) out of sync; regenerate them without --check")
            return EXIT_ERROR
        logger.info("All documentation is up to date")

    logger.debug(f"Collected {len(report.diagnostics)} diagnostics")
    return EXIT_SUCCESS


def _run_headings(args: argparse.Namespace) -> int:
    if args.file is None:
        text = sys.stdin.read()
    else:
        try:
            text = args.file.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Cannot read {args.file}: {e}")
            return EXIT_ERROR
    print(help_block_to_markdown(text))
    return EXIT_SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.command == "headings":
        return _run_headings(args)

    writer = _build_writer(args)
    if args.command == "script":
        try:
            targets = normalize_targets(args.paths)
        except FileNotFoundError as e:
            logger.error(str(e))
            return EXIT_ERROR
        report = writer.document_scripts(targets, args.output)
    else:
        report = writer.document_functions(args.sources, args.output)

    return _exit_code(report, args.check)


if __name__ == "__main__":
    sys.exit(main())
