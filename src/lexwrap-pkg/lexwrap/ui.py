"""ANSI terminal output utilities for lexwrap.

Wrapped text goes to stdout; everything printed from here goes to stderr.
"""

import sys

ANSI_RESET  = "\033[0m"
ANSI_BOLD   = "\033[1m"
ANSI_RED    = "\033[31m"


def ansi(text: str, *codes: str) -> str:
    """Wrap text in ANSI escape codes when stderr is a TTY (no-op otherwise)."""
    if not sys.stderr.isatty():
        return text
    return "".join(codes) + text + ANSI_RESET


def log(msg: str) -> None:
    """Print a progress line to stderr."""
    print(msg, file=sys.stderr)


def log_error(msg: str) -> None:
    log(ansi(f"error: {msg}", ANSI_RED, ANSI_BOLD))
