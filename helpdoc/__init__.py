"""Generate Markdown documentation from the help blocks of Python scripts and functions."""

__version__ = "0.1.0"
