"""Core data types for the lexwrap line-wrapping engine."""

from dataclasses import dataclass
from enum import Enum


class DirectiveKind(Enum):
    INDENT = "indent"
    MERGE_INDENT = "merge_indent"


@dataclass(frozen=True)
class Directive:
    """Extra indentation for one paragraph, optionally merged onto the previous line."""
    kind: DirectiveKind = DirectiveKind.INDENT
    magnitude: int = 0

    @classmethod
    def none(cls) -> "Directive":
        return cls()

    @classmethod
    def indent(cls, magnitude: int) -> "Directive":
        return cls(DirectiveKind.INDENT, abs(magnitude))

    @classmethod
    def merge(cls, magnitude: int) -> "Directive":
        """Merge directive; a zero magnitude carries no request and becomes the default."""
        if magnitude == 0:
            return cls.none()
        return cls(DirectiveKind.MERGE_INDENT, abs(magnitude))

    @property
    def merging(self) -> bool:
        return self.kind is DirectiveKind.MERGE_INDENT


@dataclass(frozen=True)
class Paragraph:
    """A newline-delimited segment of input with its directive already stripped."""
    text: str
    directive: Directive = Directive()

    @property
    def merging(self) -> bool:
        return self.directive.merging


@dataclass(frozen=True)
class WrapLimits:
    """Column budgets for the first and every following line of a paragraph."""
    first_line_width: int
    continuation_width: int
