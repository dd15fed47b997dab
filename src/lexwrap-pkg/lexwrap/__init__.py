"""lexwrap — directive-aware lexical line wrapping.

Public API re-exports for convenient single-import usage.
"""

__version__ = "0.1.0"

from .composer import compute_limits, format_lines, format_text, to_console_lines
from .config import WrapConfig
from .directives import (
    DIRECTIVE_PREFIX,
    HARD_BREAK_TOKEN,
    Piece,
    parse_directive,
    parse_paragraph,
    split_on_hard_break,
    split_paragraphs,
)
from .terminal import resolve_width, terminal_columns
from .types import Directive, DirectiveKind, Paragraph, WrapLimits
from .wrapper import wrap

__all__ = [
    # composer
    "compute_limits",
    "format_lines",
    "format_text",
    "to_console_lines",
    # config
    "WrapConfig",
    # directives
    "DIRECTIVE_PREFIX",
    "HARD_BREAK_TOKEN",
    "Piece",
    "parse_directive",
    "parse_paragraph",
    "split_on_hard_break",
    "split_paragraphs",
    # terminal
    "resolve_width",
    "terminal_columns",
    # types
    "Directive",
    "DirectiveKind",
    "Paragraph",
    "WrapLimits",
    # wrapper
    "wrap",
]
