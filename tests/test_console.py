"""Tests for logkeeper.console."""

import io

import click

from logkeeper.console import ConsoleTheme, ConsoleWriter
from logkeeper.levels import Level


class TestConsoleTheme:
    def test_level_colors(self):
        theme = ConsoleTheme()
        assert theme.colors_for(Level.SUCCESS) == ("green", None)
        assert theme.colors_for(Level.WARN) == ("yellow", None)
        assert theme.colors_for(Level.ERROR) == ("red", None)
        assert theme.colors_for(Level.FATAL) == (None, "red")
        assert theme.colors_for(Level.INFO) == (None, None)

    def test_defaults_fill_gaps(self):
        theme = ConsoleTheme(foreground="white", background="black")
        assert theme.colors_for(Level.INFO) == ("white", "black")
        assert theme.colors_for(Level.FATAL) == ("white", "red")

    def test_themes_are_independent(self):
        a, b = ConsoleTheme(), ConsoleTheme()
        a.styles[Level.INFO] = ("blue", None)
        assert b.colors_for(Level.INFO) == (None, None)


class TestConsoleWriter:
    def test_plain_output(self):
        stream = io.StringIO()
        ConsoleWriter(stream=stream, color=False).write_line("hello", Level.ERROR)
        assert stream.getvalue() == "hello\n"

    def test_colored_output_resets(self):
        stream = io.StringIO()
        ConsoleWriter(stream=stream, color=True).write_line("boom", Level.FATAL)
        assert stream.getvalue() == click.style("boom", bg="red") + "\n"
        assert stream.getvalue().rstrip("\n").endswith("\x1b[0m")

    def test_uncolored_level_written_as_is(self):
        stream = io.StringIO()
        ConsoleWriter(stream=stream, color=True).write_line("note", Level.INFO)
        assert stream.getvalue() == "note\n"
