"""Tests for debug and progress lines."""

import io

import pytest

from transnet.errors import OutOfRangeError
from transnet.transform.signals import emit_debug, emit_progress


class TestEmitDebug:
    def test_writes_debug_line(self, transformation):
        out = io.StringIO()
        transformation.emit_debug("Debug message.", file=out)
        assert out.getvalue() == "D:Debug message.\n"

    def test_writes_to_stderr_by_default(self, capsys):
        emit_debug("to stderr")

        captured = capsys.readouterr()
        assert captured.err == "D:to stderr\n"
        assert captured.out == ""


class TestEmitProgress:
    def test_writes_percentage(self, transformation):
        out = io.StringIO()
        transformation.emit_progress(50, file=out)
        assert out.getvalue().rstrip() == "% 50"

    @pytest.mark.parametrize("percent", [0, 100])
    def test_bounds_are_allowed(self, percent):
        out = io.StringIO()
        emit_progress(percent, file=out)
        assert out.getvalue() == f"% {percent}\n"

    @pytest.mark.parametrize("percent", [-1, 101])
    def test_out_of_range(self, transformation, percent):
        out = io.StringIO()
        with pytest.raises(OutOfRangeError) as exc_info:
            transformation.emit_progress(percent, file=out)

        assert exc_info.value.value == percent
        assert out.getvalue() == ""

    def test_writes_to_stderr_by_default(self, capsys):
        emit_progress(10)
        assert capsys.readouterr().err == "% 10\n"


class TestEscapeSequences:
    def test_debug_message_is_not_stripped(self):
        out = io.StringIO()
        emit_debug("a\x1b[1mb", file=out)
        assert out.getvalue() == "D:a\x1b[1mb\n"

    def test_debug_to_stderr_is_not_stripped(self, capsys):
        emit_debug("\x1b[32mok\x1b[0m")
        assert capsys.readouterr().err == "D:\x1b[32mok\x1b[0m\n"
