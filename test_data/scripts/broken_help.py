"""
.SYNOPSIS
    Rotate log files.

.SYNOPSIS
    Rotate them again.
"""


def main(days=7):
    return days
