"""Constants and shared configuration for the generate_markdown package."""

import logging

logger = logging.getLogger(__name__)

# Heading level of the document title
DEFAULT_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

# Granularity used when none is requested (see models.HeaderGranularity)
DEFAULT_GRANULARITY = "Fine"

# Script artifacts
SCRIPT_EXTENSIONS = (".py", ".pyw")
SCRIPT_ENTRY_POINTS = ("main",)
SCRIPT_INFO_FIELDS = ("__author__", "__version__", "__description__")

# Rendering
DATE_FORMAT = "%m.%d.%Y"
SOURCE_LANGUAGE = "python"
METADATA_LANGUAGE = "YAML"

# Custom content marker for preserving user-added content
CUSTOM_CONTENT_MARKER = "<!-- custom-content -->"

# Index page template
INDEX_TEMPLATE = "INDEX.md.j2"
INDEX_FILENAME = "README.md"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
