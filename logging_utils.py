#!/usr/bin/env python3
"""Logging utilities for github2mr."""

import os
import sys

import colorama

from config import PROCESS_NAME
from security import SecurityValidator

# Initialize colorama for cross-platform colored output
colorama.init(autoreset=True)


class Logger:
    """Formatted, credential-redacting console output.

    Everything goes to stderr: stdout carries the generated manifest.
    """

    PROCESS_NAME = PROCESS_NAME
    verbose = False

    @classmethod
    def set_verbose(cls, verbose: bool) -> None:
        cls.verbose = verbose

    @classmethod
    def debug(cls, *messages: str) -> None:
        if not cls.verbose:
            return
        cls._write(colorama.Fore.LIGHTBLACK_EX, *messages)

    @classmethod
    def info(cls, *messages: str) -> None:
        cls._write(colorama.Fore.CYAN, *messages)

    @classmethod
    def warn(cls, *messages: str) -> None:
        cls._write(colorama.Fore.YELLOW, *messages)

    @classmethod
    def error(cls, *messages: str) -> None:
        cls._write(colorama.Fore.RED, *messages)

    @classmethod
    def _write(cls, color: str, *messages: str) -> None:
        sanitized_messages = [
            SecurityValidator.sanitize_for_logging(str(msg)) for msg in messages
        ]
        sys.stderr.write(cls._format_line(color, *sanitized_messages) + "\n")

    @classmethod
    def _get_header(cls) -> str:
        return f"[{cls.PROCESS_NAME}:{os.getpid()}]"

    @classmethod
    def _format_line(cls, color: str, *messages: str) -> str:
        header = cls._get_header()
        message = " ".join(str(m) for m in messages)
        return f"{color}{header}{colorama.Style.RESET_ALL} {message}"
