"""Tests for the emailmask command line interface."""

import io
import logging
import runpy

import pytest

from emailmask import __version__
from emailmask.cli import build_parser, main


class TestCLI:
    """Test cases for the CLI entry point."""

    def test_mask_arguments(self, capsys):
        """Test masking addresses given as arguments."""
        exit_code = main(["ekaone3033@gmail.com", "a@test.com"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert out.splitlines() == ["ek********@gmail.com", "a@test.com"]

    def test_options(self, capsys):
        """Test the masking options."""
        exit_code = main(
            ["-n", "1", "-c", "•", "--mask-domain", "admin@mail.company.com"]
        )

        assert exit_code == 0
        assert capsys.readouterr().out == "a••••@m•••.c••••••.com\n"

    def test_viewable(self, capsys):
        """Test printing addresses unmasked."""
        assert main(["--viewable", "-d", "secret@company.com"]) == 0
        assert capsys.readouterr().out == "secret@company.com\n"

    def test_read_stdin(self, capsys, monkeypatch):
        """Test reading one address per line from stdin."""
        monkeypatch.setattr(
            "sys.stdin", io.StringIO("user@gmail.com\n\nnotanemail\r\ntest@example.com")
        )

        assert main(["-d"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "us**@g****.com",
            "",
            "notanemail",
            "te**@e******.com",
        ]

    def test_text_mode(self, capsys, monkeypatch):
        """Test masking addresses inside free text."""
        monkeypatch.setattr(
            "sys.stdin",
            io.StringIO("login failed for john@example.com from 10.0.0.1\nok\n"),
        )

        assert main(["--text"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "login failed for jo**@example.com from 10.0.0.1",
            "ok",
        ]

    def test_invalid_options(self, capsys):
        """Test that invalid options exit with status 1 and a hint."""
        exit_code = main(["-n", "-1", "user@example.com"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "Invalid mask options" in captured.err
        assert "visible_chars" in captured.err

    def test_empty_mask_char(self, capsys):
        """Test rejecting an empty filler."""
        assert main(["-c", "", "user@example.com"]) == 1
        assert "mask_char" in capsys.readouterr().err

    def test_bad_argument_type(self, capsys):
        """Test that argparse errors exit with status 2."""
        with pytest.raises(SystemExit) as exc_info:
            main(["-n", "two", "user@example.com"])

        assert exc_info.value.code == 2

    def test_version(self, capsys):
        """Test the version flag."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_verbose_enables_debug_logging(self, capsys):
        """Test that --verbose lowers the package log level."""
        package_logger = logging.getLogger("emailmask")
        previous = package_logger.level
        try:
            assert main(["-v", "user@example.com"]) == 0
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(previous)

    def test_parser_defaults(self):
        """Test parser default values."""
        args = build_parser().parse_args([])

        assert args.addresses == []
        assert args.mask_char == "*"
        assert args.visible_chars == 2
        assert args.mask_domain is False
        assert args.viewable is False
        assert args.text is False

    def test_run_as_module(self, capsys, monkeypatch):
        """Test ``python -m emailmask``."""
        monkeypatch.setattr("sys.argv", ["emailmask", "-d", "user@gmail.com"])

        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("emailmask", run_name="__main__", alter_sys=True)

        assert exc_info.value.code == 0
        assert capsys.readouterr().out == "us**@g****.com\n"
