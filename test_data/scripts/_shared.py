"""Helpers shared by the scripts in this directory."""

DEFAULT_ENCODING = "utf-8"
