"""Tests for the generate_markdown package."""

from pathlib import Path

# Test data directory at repository root
TEST_DATA_DIR = Path(__file__).parent.parent.parent.parent / "test_data"
