"""Index page generator for a directory of documented scripts."""

import logging
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from jinja2 import Environment, FileSystemLoader

from .constants import INDEX_TEMPLATE
from .models import DocumentationRecord
from .utils import format_title

logger = logging.getLogger(__name__)

MAX_SYNOPSIS_LENGTH = 120


class IndexGenerator:
    """Generates a README.md that links every documented script of a directory."""

    def __init__(self, directory: Path, template_name: str = INDEX_TEMPLATE):
        """Initialize the index generator.

        Args:
            directory: The output directory; its name becomes the index title.
            template_name: Name of the Jinja2 template to use.
        """
        self.directory = directory

        template_dir = Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.template = self.env.get_template(template_name)

    @staticmethod
    def _extract_item_info(record: DocumentationRecord, doc_file: Path) -> Dict[str, str]:
        """Extract the display name, first synopsis line and link of a documented script.

        Args:
            record: The script's documentation record.
            doc_file: The Markdown file written for it.

        Returns:
            Dictionary with 'name', 'synopsis', and 'link' keys.
        """
        synopsis = record.synopsis or record.description
        synopsis = synopsis.split("\n")[0].strip().replace("|", r"\|")
        return {
            "name": record.name,
            "synopsis": synopsis[:MAX_SYNOPSIS_LENGTH],
            "link": f"./{doc_file.name}",
        }

    def generate(self, entries: Sequence[Tuple[DocumentationRecord, Path]]) -> str:
        """Generate the index README content.

        Args:
            entries: Pairs of (record, Markdown file written for it).

        Returns:
            Complete README.md content for the index.
        """
        items: List[Dict[str, str]] = [self._extract_item_info(record, doc_file) for record, doc_file in entries]
        items.sort(key=lambda x: x["name"])
        logger.debug(f"Indexing {len(items)} documented scripts in {self.directory}")

        return self.template.render(title=format_title(self.directory.name), items=items)
