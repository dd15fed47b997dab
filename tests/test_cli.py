import io

import pytest
from pydantic import ValidationError

from lexwrap import cli, terminal
from lexwrap.cli import FormatOptions, main


def test_wraps_file_to_requested_width(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("alpha beta gamma delta\n", encoding="utf-8")

    assert main(["-w", "20", str(src)]) == 0
    assert capsys.readouterr().out == "alpha beta gamma\ndelta\n"


def test_reads_stdin_when_no_files(monkeypatch, capsys):
    monkeypatch.setattr(cli.sys, "stdin", io.StringIO("head\n${<=-5}tail\n"))

    assert main(["--width", "10"]) == 0
    assert capsys.readouterr().out == "headtail\n"


def test_indent_flag(monkeypatch, capsys):
    monkeypatch.setattr(cli.sys, "stdin", io.StringIO("alpha beta gamma delta"))

    assert main(["-w", "20", "-i", "4", "-"]) == 0
    assert capsys.readouterr().out == "    alpha beta gamma\n    delta\n"


def test_fallback_width_used_without_terminal(monkeypatch, capsys):
    def no_terminal(*args):
        raise OSError("not a terminal")

    monkeypatch.setattr(terminal.os, "get_terminal_size", no_terminal)
    monkeypatch.setattr(cli.sys, "stdin", io.StringIO("alpha beta gamma delta"))

    assert main(["--fallback-width", "11", "--verbose"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "alpha beta\ngamma delta\n"
    assert "11 columns" in captured.err


def test_negative_indent_is_rejected(capsys):
    assert main(["-w", "20", "-i", "-1"]) == 2
    assert "--indent" in capsys.readouterr().err


def test_missing_file_reports_error(tmp_path, capsys):
    assert main(["-w", "20", str(tmp_path / "missing.txt")]) == 1
    assert "error" in capsys.readouterr().err


def test_format_options_validation():
    assert FormatOptions(width=None).width is None
    with pytest.raises(ValidationError):
        FormatOptions(width=0)
    with pytest.raises(ValidationError):
        FormatOptions(fallback_width=0)


def test_indent_flag_becomes_configured_indent():
    opts = FormatOptions(indent=3, fallback_width=40)
    config = opts.to_config()
    assert config.default_indent == 3
    assert config.fallback_width == 40
