"""CLI layer for searchmind.

Usage:
    searchmind search needle -p ./src --type fileContents --pattern
    searchmind multi alpha beta -p ./docs --format json
"""

from searchmind.cli.app import app, main
from searchmind.cli.options import FormatChoice

__all__ = ["app", "main", "FormatChoice"]
