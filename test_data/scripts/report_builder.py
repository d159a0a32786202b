"""Build an HTML report from a CSV export.

Args:
    path: CSV file to read.
"""

import csv
import html

__description__ = "Renders the export as a single HTML table."


def main(path, title=None):
    with open(path, newline="") as f:
        rows = list(csv.reader(f))
    print(render(rows, title or path))


def render(rows, title):
    cells = "".join(
        "<tr>" + "".join(f"<td>{html.escape(cell)}</td>" for cell in row) + "</tr>" for row in rows
    )
    return f"<h1>{html.escape(title)}</h1><table>{cells}</table>"
