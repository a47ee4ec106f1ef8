"""Tests for output sinks."""

import io
import logging

import pytest

from limit_logger.models import Severity
from limit_logger.sinks import NOTICE, ConsoleSink, LoggingSink
from limit_logger.throttle import ThrottledEmitter


@pytest.mark.parametrize(
    ("severity", "level"),
    [
        (Severity.DEBUG, logging.DEBUG),
        (Severity.INFO, logging.INFO),
        (Severity.LOG, NOTICE),
        (Severity.WARN, logging.WARNING),
        (Severity.ERROR, logging.ERROR),
    ],
)
def test_logging_sink_levels(caplog, severity, level):
    sink = LoggingSink(logging.getLogger("test.sink"))
    with caplog.at_level(logging.DEBUG, logger="test.sink"):
        sink.write("msg", severity)
    assert [(r.name, r.levelno, r.getMessage()) for r in caplog.records] == [
        ("test.sink", level, "msg")
    ]


def test_notice_level_name():
    assert logging.getLevelName(NOTICE) == "NOTICE"


def test_logging_sink_default_logger():
    assert LoggingSink().logger.name == "limit_logger"


def test_logging_sink_does_not_interpolate(caplog):
    sink = LoggingSink(logging.getLogger("test.sink"))
    with caplog.at_level(logging.INFO, logger="test.sink"):
        sink.write("100% done %s", Severity.INFO)
    assert caplog.records[0].getMessage() == "100% done %s"


def test_logging_sink_passes_objects(caplog):
    payload = {"a": 1}
    sink = LoggingSink(logging.getLogger("test.sink"))
    with caplog.at_level(logging.INFO, logger="test.sink"):
        sink.write(payload, Severity.INFO)
    assert caplog.records[0].msg is payload


def test_console_sink_routes_streams():
    out, err = io.StringIO(), io.StringIO()
    sink = ConsoleSink(stdout=out, stderr=err)
    sink.write("d", Severity.DEBUG)
    sink.write("i", Severity.INFO)
    sink.write("l", Severity.LOG)
    sink.write("w", Severity.WARN)
    sink.write("e", Severity.ERROR)
    assert out.getvalue() == "d\ni\nl\n"
    assert err.getvalue() == "w\ne\n"


def test_console_sink_uses_current_sys_streams(capsys):
    sink = ConsoleSink()
    sink.write("to stdout", Severity.INFO)
    sink.write("to stderr", Severity.ERROR)
    captured = capsys.readouterr()
    assert captured.out == "to stdout\n"
    assert captured.err == "to stderr\n"


def test_emitter_with_logging_sink(caplog):
    clock_ms = [0.0]
    emitter = ThrottledEmitter(
        LoggingSink(logging.getLogger("test.emitter")), clock=lambda: clock_ms[0]
    )
    with caplog.at_level(logging.DEBUG, logger="test.emitter"):
        emitter.warn("disk almost full", "disk", 30)
        clock_ms[0] = 10_000
        emitter.warn("disk almost full", "disk", 30)
        clock_ms[0] = 30_000
        emitter.warn("disk full", "disk", 30)
    messages = [r.getMessage() for r in caplog.records if r.name == "test.emitter"]
    assert messages == ["disk almost full", "disk full"]
