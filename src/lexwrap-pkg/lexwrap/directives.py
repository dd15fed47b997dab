"""Parsing of the inline indent/merge directives embedded in text.

A paragraph may start with ``${<=N}`` (indent the paragraph by N extra columns)
or ``${<=-N}`` (indent by N and continue on the previously emitted line). The
token ``${<==}`` anywhere in the text splits it into a head and a tail, and the
tail is re-wrapped as a continuation of the head with a hanging indent equal to
the head's length.
"""

import re
from typing import NamedTuple

from .types import Directive, Paragraph

DIRECTIVE_PREFIX = "${<="
DIRECTIVE_SUFFIX = "}"
HARD_BREAK_TOKEN = "${<==}"

_NEWLINE_RE = re.compile(r"\r\n|\n|\r")
_BODY_RE = re.compile(r"-?\d{1,10}")
# Bodies outside a 32-bit signed integer are malformed.
_MIN_BODY = -2**31
_MAX_BODY = 2**31 - 1


class Piece(NamedTuple):
    """Part of the input on one side of a hard-break token.

    ``directive`` is set only when it was synthesized for this piece. It then
    overrides any directive token the piece starts with.
    """
    text: str
    directive: Directive | None = None


def parse_directive(paragraph: str) -> tuple[Directive, str]:
    """Strip a leading directive token, returning it and the remaining text.

    A body that is not a 32-bit integer still strips the token but yields no
    indent. Text without a closing brace after the prefix carries no directive.
    """
    if not paragraph.startswith(DIRECTIVE_PREFIX):
        return Directive.none(), paragraph

    end = paragraph.find(DIRECTIVE_SUFFIX, len(DIRECTIVE_PREFIX))
    if end < 0:
        return Directive.none(), paragraph

    body = paragraph[len(DIRECTIVE_PREFIX):end]
    rest = paragraph[end + len(DIRECTIVE_SUFFIX):]
    if not _BODY_RE.fullmatch(body):
        return Directive.none(), rest

    value = int(body)
    if not _MIN_BODY <= value <= _MAX_BODY:
        return Directive.none(), rest
    if value < 0:
        return Directive.merge(-value), rest
    return Directive.indent(value), rest


def parse_paragraph(text: str) -> Paragraph:
    directive, clean = parse_directive(text)
    return Paragraph(clean, directive)


def split_on_hard_break(text: str) -> list[Piece]:
    """Split on the first hard-break token into at most two pieces.

    The second piece gets a merge directive as wide as the first piece, so the
    two are re-wrapped as one line whose overflow hangs under the tail.
    """
    head, sep, tail = text.partition(HARD_BREAK_TOKEN)
    if not sep:
        return [Piece(text)]
    # Later hard-break tokens have no effect and are dropped.
    tail = tail.replace(HARD_BREAK_TOKEN, "")
    return [Piece(head), Piece(tail, Directive.merge(len(head)))]


def split_lines(text: str) -> list[str]:
    """Split on any newline convention, keeping empty segments."""
    return _NEWLINE_RE.split(text)


def split_paragraphs(text: str) -> list[Paragraph]:
    """Turn raw input into paragraphs with their directives already parsed."""
    paragraphs = []
    for piece in split_on_hard_break(text):
        for i, line in enumerate(split_lines(piece.text)):
            if i == 0 and piece.directive is not None:
                _, clean = parse_directive(line)
                paragraphs.append(Paragraph(clean, piece.directive))
            else:
                paragraphs.append(parse_paragraph(line))
    return paragraphs
