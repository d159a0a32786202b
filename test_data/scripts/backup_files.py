"""
.SYNOPSIS
    Back up files to a destination directory.

.DESCRIPTION
    Copies every file matching the given patterns into a dated folder
    below the destination.

.PARAMETER source
    Directory to back up.

.PARAMETER destination
    Folder receiving the dated backup folders.

.EXAMPLE copy a whole folder
    backup_files.py /srv/data

    Backs up /srv/data into ./backups.

.EXAMPLE --- json only ---
    backup_files.py /srv/data /mnt/backups *.json

.NOTES
    Existing backups are never overwritten.
"""

import shutil
import sys
from datetime import date
from pathlib import Path

__author__ = "Ops Team"
__version__ = "2.1.0"


def copy_tree(source, destination, overwrite=False):
    """Copy a directory tree.

    Args:
        source: Directory to copy.
        destination: Target directory.
        overwrite: Replace files that already exist.

    Examples:
        copy_tree("data", "backups/data")
    """
    shutil.copytree(source, destination, dirs_exist_ok=overwrite)


class BackupPlan:
    """Files selected for one backup run."""

    def run(self, destination):
        """Copy the selected files."""
        return destination


def main(source: str, destination: str = "backups", *patterns: str, verbose: bool = False) -> int:
    """Run a backup.

    Args:
        patterns: Glob patterns of files to include.
        verbose: Log every copied file.
    """

    def log(message):
        if verbose:
            print(message)

    target = Path(destination) / date.today().isoformat()
    target.mkdir(parents=True, exist_ok=True)
    for pattern in patterns or ("*",):
        for path in Path(source).glob(pattern):
            log(f"Copying {path}")
            shutil.copy2(path, target)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:]))
