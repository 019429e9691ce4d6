"""Tests for the reporter abstraction."""

import logging

from peaksynth.core.shared.reporter import (
    CompositeReporter,
    LoggingReporter,
    NullReporter,
    Reporter,
)


class Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def action(self, message: str) -> None:
        self.calls.append(("action", message))

    def info(self, message: str) -> None:
        self.calls.append(("info", message))

    def warning(self, message: str) -> None:
        self.calls.append(("warning", message))

    def error(self, message: str) -> None:
        self.calls.append(("error", message))

    def success(self, message: str) -> None:
        self.calls.append(("success", message))


def test_implementations_satisfy_protocol():
    for reporter in (NullReporter(), LoggingReporter(), CompositeReporter([]), Recorder()):
        assert isinstance(reporter, Reporter)


def test_logging_reporter_levels(caplog):
    reporter = LoggingReporter("peaksynth.test")
    with caplog.at_level(logging.INFO, logger="peaksynth.test"):
        reporter.action("synthesizing")
        reporter.warning("spectrum 3 truncated")
        reporter.error("spectrum 4 failed")
        reporter.success("done")

    records = [(r.levelname, r.getMessage()) for r in caplog.records]
    assert records == [
        ("INFO", "[ACTION] synthesizing"),
        ("WARNING", "spectrum 3 truncated"),
        ("ERROR", "spectrum 4 failed"),
        ("INFO", "[SUCCESS] done"),
    ]


def test_composite_forwards_to_all():
    first, second = Recorder(), Recorder()
    reporter = CompositeReporter([first, NullReporter(), second])
    reporter.info("hello")
    reporter.error("oops")
    assert first.calls == second.calls == [("info", "hello"), ("error", "oops")]
