"""Tests for logkeeper.formatting."""

from datetime import datetime, timezone

from logkeeper.formatting import CallerInfo, LineFormatter, capture_caller, flatten
from logkeeper.levels import Level

CALLER = CallerInfo(path="/srv/app/jobs.py", member="run", line=42)


def _clock():
    return datetime(2026, 10, 19, 14, 3, 59, tzinfo=timezone.utc)


class TestLineFormatter:
    def test_all_segments(self):
        line = LineFormatter(clock=_clock).format("disk nearly full", Level.WARN, CALLER)
        assert line == "[2026-10-19 14:03 UTC][WARN][/srv/app/jobs.py run:42] disk nearly full"

    def test_without_timestamp(self):
        line = LineFormatter(include_timestamp=False).format("x", Level.INFO, CALLER)
        assert line == "[INFO][/srv/app/jobs.py run:42] x"

    def test_member_only(self):
        line = LineFormatter(include_timestamp=False, include_caller_path=False).format("x", Level.INFO, CALLER)
        assert line == "[INFO][run:42] x"

    def test_path_only(self):
        line = LineFormatter(include_timestamp=False, include_caller_member=False).format("x", Level.INFO, CALLER)
        assert line == "[INFO][/srv/app/jobs.py] x"

    def test_level_and_message_only(self):
        fmt = LineFormatter(include_timestamp=False, include_caller_path=False, include_caller_member=False)
        assert fmt.format("x", Level.FATAL, CALLER) == "[FATAL] x"

    def test_output_has_no_line_breaks(self):
        line = LineFormatter().format("a\nb\r\nc\rd", Level.ERROR, CALLER)
        assert "\n" not in line
        assert "\r" not in line


class TestCaptureCaller:
    def test_direct(self):
        def helper():
            return capture_caller()

        caller = helper()
        assert caller.member == "test_direct"
        assert caller.path == __file__

    def test_stacklevel_skips_wrappers(self):
        def inner():
            return capture_caller(2)

        def outer():
            return inner()

        assert outer().member == "test_stacklevel_skips_wrappers"


def test_flatten():
    assert flatten("one\ntwo") == "one\\ntwo"
    assert flatten("no breaks") == "no breaks"
