#!/usr/bin/env python3
"""
Console UI Module using Rich

Writes styled lines to standard output and standard error, asks one-line
questions, and provides the log handler used for trace output. Paths are
passed as rich Text so characters like "[" are never read as markup.
"""

import logging
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text


class ConsoleUI:
    """Console handler for Aphairesis output"""

    def __init__(self, force_terminal: Optional[bool] = None):
        """Initialize stdout and stderr consoles with optional terminal forcing"""
        # soft_wrap keeps each message on one physical line regardless of width
        self.console = Console(force_terminal=force_terminal, highlight=False, soft_wrap=True)
        self.err_console = Console(stderr=True, force_terminal=force_terminal, highlight=False, soft_wrap=True)

    @staticmethod
    def styled(*parts: tuple[str, str]) -> Text:
        """Build a Text from (content, style) pairs"""
        return Text.assemble(*parts)

    # Basic styled output methods
    def print_success(self, message: Text):
        """Print a completed action"""
        self.console.print(message, style="green")

    def print_plain(self, message: Text):
        """Print message without extra styling"""
        self.console.print(message)

    def print_skipped(self, message: Text):
        """Print a skipped entry in dim white"""
        self.console.print(message, style="white dim")

    def print_error(self, message: Text):
        """Print error message in red to standard error"""
        self.err_console.print(message, style="red")

    # Interactive prompts
    def ask(self, question: str, stream: Optional[TextIO] = None) -> str:
        """Write *question* to standard error and read one raw line

        Returns the line including its newline, or "" at end-of-file. A process
        started without standard input reads as end-of-file.
        """
        stream = stream or sys.stdin
        if stream is None:
            return ""
        return self.err_console.input(Text(question, style="bold"), markup=False, emoji=False, stream=stream)

    # Logging
    def create_log_handler(self, level: int = logging.DEBUG) -> logging.Handler:
        """Create a handler that renders log records on the stderr console"""
        handler = RichHandler(
            console=self.err_console,
            level=level,
            show_time=False,
            show_path=False,
            markup=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        return handler
