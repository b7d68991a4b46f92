"""
Unit tests for help and version output.
"""

import io

import pytest

from wordle_engine import __version__
from wordle_engine.cli.commands import generate_version_output, write_help, write_version


class TestVersion:
    """Tests for the version output."""

    def test_generate_version_output(self):
        assert generate_version_output("exec name", "1.0 alpha") == "exec name version 1.0 alpha"

    def test_empty_executable_name(self):
        with pytest.raises(ValueError):
            generate_version_output("", "0.1.0")

    def test_empty_version(self):
        with pytest.raises(ValueError):
            generate_version_output("wordle", "")

    def test_write_version_uses_package_version(self):
        stream = io.StringIO()
        write_version(stream, "wordle")
        assert stream.getvalue() == f"wordle version {__version__}\n"


class TestHelp:
    """Tests for the help output."""

    def test_mentions_every_command(self):
        stream = io.StringIO()
        write_help(stream, "wordle")
        text = stream.getvalue()
        for line in ["wordle version", "wordle --version", "wordle -v",
                     "wordle help", "wordle --help", "wordle -h", "wordle [file path]"]:
            assert line in text
        assert "Empty lines are discarded." in text
