"""Tests for pexlog.trace — function tracing through the default log."""

import pytest

from pexlog.default_log import create_screen_default_log
from pexlog.levels import Level
from pexlog.trace import trace


@trace
def add(a, b):
    return a + b


@trace
def explode():
    raise RuntimeError("boom")


@trace
def nothing():
    return None


class TestTraceDisabled:

    def test_no_output_by_default(self, buf):
        create_screen_default_log(stream=buf)
        assert add(1, 2) == 3
        assert buf.getvalue() == ""

    def test_baseline_default_is_silent(self, capsys):
        assert add(2, 2) == 4
        captured = capsys.readouterr()
        assert captured.err == ""


class TestTraceEnabled:

    @pytest.fixture(autouse=True)
    def _enable(self, buf):
        log = create_screen_default_log(stream=buf)
        log.set_threshold_for('trace', Level.DEBUG)

    def test_entry_and_return(self, buf):
        assert add(1, b=2) == 3
        lines = buf.getvalue().splitlines()
        assert lines[0] == f"trace DEBUG: >> {__name__}.add(1, b=2)"
        assert lines[1] == f"trace DEBUG: << {__name__}.add returned: 3"

    def test_none_result_not_logged(self, buf):
        nothing()
        assert "returned" not in buf.getvalue()

    def test_exception_logged_and_reraised(self, buf):
        with pytest.raises(RuntimeError):
            explode()
        assert "raised: RuntimeError: boom" in buf.getvalue()

    def test_long_arguments_shortened(self, buf):
        add("x" * 60, "y")
        assert "..." in buf.getvalue().splitlines()[0]

    def test_wraps_preserves_name(self):
        assert add.__name__ == "add"
