"""Tests for constants.py module."""

import logging

from ..constants import (
    CUSTOM_CONTENT_MARKER,
    DATE_FORMAT,
    DEFAULT_GRANULARITY,
    DEFAULT_HEADING_LEVEL,
    EXIT_ERROR,
    EXIT_SUCCESS,
    MAX_HEADING_LEVEL,
    SCRIPT_EXTENSIONS,
    logger,
)
from ..models import HeaderGranularity


class TestConstants:
    """Tests for module constants."""

    def test_custom_content_marker_format(self):
        """Test that custom content marker is in HTML comment format."""
        assert CUSTOM_CONTENT_MARKER.startswith('<!--')
        assert CUSTOM_CONTENT_MARKER.endswith('-->')
        assert 'custom-content' in CUSTOM_CONTENT_MARKER

    def test_logger_exists(self):
        """Test that logger is configured."""
        assert isinstance(logger, logging.Logger)
        assert 'constants' in logger.name

    def test_default_granularity_is_valid(self):
        """Test that the default granularity names a HeaderGranularity."""
        assert HeaderGranularity(DEFAULT_GRANULARITY) is HeaderGranularity.FINE

    def test_heading_levels(self):
        """Test that the default heading level is within Markdown's range."""
        assert 1 <= DEFAULT_HEADING_LEVEL <= MAX_HEADING_LEVEL == 6

    def test_script_extensions_are_lowercase_suffixes(self):
        """Test that script extensions can be compared with Path.suffix."""
        assert all(extension.startswith('.') and extension == extension.lower() for extension in SCRIPT_EXTENSIONS)

    def test_date_format(self):
        """Test that dates render as month.day.year."""
        import datetime

        assert datetime.date(2024, 3, 5).strftime(DATE_FORMAT) == '03.05.2024'

    def test_exit_codes(self):
        """Test that success and error exit codes differ."""
        assert EXIT_SUCCESS == 0
        assert EXIT_ERROR != EXIT_SUCCESS
