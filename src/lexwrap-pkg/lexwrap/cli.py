"""Command-line entry point: wrap files or stdin to the terminal width.

Usage:
    lexwrap [FILE ...] [--width N] [--indent N] [--fallback-width N] [--verbose]
"""

import argparse
import sys
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .composer import format_text
from .config import WrapConfig
from .terminal import resolve_width
from .ui import log, log_error


class FormatOptions(BaseModel):
    """Validated command-line options."""
    files: list[str] = Field(default_factory=list)
    width: int | None = Field(default=None, ge=1,
                              description="Wrap width; the terminal width when unset")
    indent: int = Field(default=0, ge=0, description="Left indent applied to every line")
    fallback_width: int = Field(default=WrapConfig.fallback_width, ge=1,
                                description="Width used when no terminal is attached")
    verbose: bool = False

    def to_config(self) -> WrapConfig:
        return WrapConfig(fallback_width=self.fallback_width, default_indent=self.indent)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexwrap",
        description="Word-wrap text honoring ${<=N} indent and ${<=-N} merge directives.",
    )
    parser.add_argument("files", nargs="*", metavar="FILE",
                        help="Files to wrap ('-' or none reads stdin)")
    parser.add_argument("-w", "--width", type=int, default=None,
                        help="Wrap width (default: terminal width)")
    parser.add_argument("-i", "--indent", type=int, default=0,
                        help="Left indent for every line (default: 0)")
    parser.add_argument("--fallback-width", type=int, default=WrapConfig.fallback_width,
                        help="Width when no terminal is attached (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Report width resolution on stderr")
    return parser


def _read_inputs(files: list[str]) -> list[str]:
    if not files:
        return [sys.stdin.read()]
    texts = []
    for name in files:
        if name == "-":
            texts.append(sys.stdin.read())
        else:
            texts.append(Path(name).read_text(encoding="utf-8"))
    return texts


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        opts = FormatOptions(**vars(args))
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(p) for p in err["loc"])
            log_error(f"--{field.replace('_', '-')}: {err['msg']}")
        return 2

    log_fn = log if opts.verbose else None
    config = opts.to_config()
    width = opts.width
    if width is None:
        width = resolve_width(config=config, log_fn=log_fn)
    if log_fn:
        log_fn(f"wrapping to {width} columns, indent {config.default_indent}")

    try:
        texts = _read_inputs(opts.files)
    except (OSError, UnicodeDecodeError) as e:
        log_error(str(e))
        return 1

    for text in texts:
        sys.stdout.write(format_text(_strip_final_newline(text), width, config.default_indent) + "\n")
    return 0


def _strip_final_newline(text: str) -> str:
    """A file's final newline ends its last line; it does not open a blank paragraph."""
    for sep in ("\r\n", "\n", "\r"):
        if text.endswith(sep):
            return text[:-len(sep)]
    return text


if __name__ == "__main__":
    sys.exit(main())
