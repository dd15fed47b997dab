"""Resolve the column count that wrapped text should fit into."""

import os
import sys
from typing import Callable

from .config import WrapConfig


def terminal_columns() -> int:
    """Column count of the terminal attached to stdout.

    Raises OSError when stdout is not a terminal.
    """
    return os.get_terminal_size(sys.stdout.fileno()).columns


def resolve_width(query: Callable[[], int] = terminal_columns,
                  config: WrapConfig | None = None,
                  log_fn: Callable[[str], None] | None = None) -> int:
    """Ask ``query`` for the display width, falling back to a fixed constant.

    The query runs exactly once per call and is never retried. Editors that
    host a pseudo console (e.g. a debug terminal) may report zero columns,
    which counts as a failed query.
    """
    config = config or WrapConfig()
    try:
        columns = query()
    except Exception as e:
        if log_fn:
            log_fn(f"terminal width unavailable ({e}); using {config.fallback_width}")
        return config.fallback_width

    if columns <= 0:
        if log_fn:
            log_fn(f"terminal reported {columns} columns; using {config.fallback_width}")
        return config.fallback_width
    return max(1, columns - config.right_margin)
