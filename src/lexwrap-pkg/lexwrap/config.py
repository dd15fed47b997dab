"""Configuration dataclasses for the lexwrap line-wrapping engine."""

from dataclasses import dataclass


@dataclass
class WrapConfig:
    """Tuning constants for width resolution and indentation.

    All values have sensible defaults. Applications can override individual
    fields as needed.
    """
    # Used for free-form text when no terminal is attached, so make it big.
    fallback_width: int = 500
    # Columns kept free at the right edge so the cursor never auto-wraps.
    right_margin: int = 1
    default_indent: int = 0
