#!/usr/bin/env python3
# ABOUTME: File input utilities for the license translator.
# ABOUTME: Checks for and reads the source license text.

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


class FileHandler:
    """File input utilities for the license translator."""

    @staticmethod
    def source_exists(file_path: str) -> bool:
        """Check that the source file exists and is a regular file."""
        return Path(file_path).is_file()

    @staticmethod
    def read_file(file_path: str) -> str:
        """Read content from a file.

        Trailing newlines are dropped so the payload matches what the
        shell-based predecessor of this tool sent.

        Args:
            file_path: The path to the file to read

        Returns:
            The content of the file as a string

        Raises:
            SystemExit: If the file cannot be read
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as file:
                return file.read().rstrip("\n")
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[bold red]Error:[/] Failed to read file: {escape(str(e))}")
            sys.exit(1)
