"""Compose wrapped, indented output from multi-paragraph text."""

from typing import Callable

from .config import WrapConfig
from .directives import split_paragraphs
from .terminal import resolve_width, terminal_columns
from .types import Paragraph, WrapLimits
from .wrapper import clamp, wrap


def compute_limits(paragraph: Paragraph, width: int,
                   last_line: str | None) -> tuple[WrapLimits, bool]:
    """Column budgets for ``paragraph`` and whether it merges onto ``last_line``.

    ``width`` is the usable width after the caller's left indent. A merge needs
    a previous line with room left on it; otherwise the paragraph is laid out
    as a plain indent.
    """
    continuation = max(0, width - paragraph.directive.magnitude)
    if not paragraph.merging or last_line is None:
        return WrapLimits(continuation, continuation), False

    remaining = clamp(width - len(last_line), 0, max(0, width))
    if remaining == 0:
        return WrapLimits(continuation, continuation), False
    return WrapLimits(remaining, continuation), True


def _compose(paragraphs: list[Paragraph], width: int) -> list[str]:
    lines: list[str] = []
    for paragraph in paragraphs:
        last_line = lines[-1] if lines else None
        limits, merge = compute_limits(paragraph, width, last_line)
        chunks = wrap(paragraph.text, limits.first_line_width, limits.continuation_width)

        pad = " " * paragraph.directive.magnitude
        if merge:
            lines[-1] = last_line + chunks[0]
            lines.extend(pad + chunk for chunk in chunks[1:])
        else:
            lines.extend(pad + chunk for chunk in chunks)
    return lines


def format_lines(text: str, base_width: int, left_indent: int = 0) -> list[str]:
    """Wrap ``text`` to ``base_width`` columns, each line indented by ``left_indent``."""
    left_indent = max(0, left_indent)
    lines = _compose(split_paragraphs(text), base_width - left_indent)
    prefix = " " * left_indent
    return [prefix + line for line in lines]


def format_text(text: str, base_width: int | None = None, left_indent: int = 0,
                width_fn: Callable[[], int] | None = None,
                config: WrapConfig | None = None) -> str:
    """Wrap ``text`` into a newline-joined block.

    When ``base_width`` is not given, ``width_fn`` (the attached terminal by
    default) is queried once per call, with the same fallback and right margin
    as ``resolve_width``.
    """
    if base_width is None:
        base_width = resolve_width(query=width_fn or terminal_columns, config=config)
    return "\n".join(format_lines(text, base_width, left_indent))


def to_console_lines(text: str, indent: int | None = None,
                     config: WrapConfig | None = None,
                     log_fn: Callable[[str], None] | None = None) -> str:
    """Wrap ``text`` for the current terminal (or the fallback width)."""
    config = config or WrapConfig()
    if indent is None:
        indent = config.default_indent
    width = resolve_width(config=config, log_fn=log_fn)
    return format_text(text, width, indent)
