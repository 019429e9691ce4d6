"""Progress and status reporting abstraction.

Core and service layers report through the ``Reporter`` protocol so they
never depend on a particular UI. ``NullReporter`` is silent,
``LoggingReporter`` forwards to the ``peaksynth`` logger and the CLI plugs a
Rich-backed reporter in on top.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable


@runtime_checkable
class Reporter(Protocol):
    """Protocol for progress and status reporting."""

    def action(self, message: str) -> None:
        """Report an action being performed."""
        ...

    def info(self, message: str) -> None:
        """Report informational message."""
        ...

    def warning(self, message: str) -> None:
        """Report a non-fatal issue."""
        ...

    def error(self, message: str) -> None:
        """Report an error that did not stop the run."""
        ...

    def success(self, message: str) -> None:
        """Report successful completion."""
        ...


class NullReporter:
    """Reporter used when nobody is listening; every call is a no-op."""

    def action(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass


class LoggingReporter:
    """Forward every message to a stdlib logger.

    Example:
        >>> reporter = LoggingReporter("peaksynth.generate")
        >>> reporter.warning("Spectrum 3 truncated")  # WARNING level
    """

    def __init__(self, logger_name: str = "peaksynth") -> None:
        self._logger = logging.getLogger(logger_name)

    def action(self, message: str) -> None:
        self._logger.info("[ACTION] %s", message)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def success(self, message: str) -> None:
        self._logger.info("[SUCCESS] %s", message)


class CompositeReporter:
    """Fan each message out to several reporters, in order."""

    def __init__(self, reporters: list[Reporter]) -> None:
        self._reporters = reporters

    def action(self, message: str) -> None:
        for reporter in self._reporters:
            reporter.action(message)

    def info(self, message: str) -> None:
        for reporter in self._reporters:
            reporter.info(message)

    def warning(self, message: str) -> None:
        for reporter in self._reporters:
            reporter.warning(message)

    def error(self, message: str) -> None:
        for reporter in self._reporters:
            reporter.error(message)

    def success(self, message: str) -> None:
        for reporter in self._reporters:
            reporter.success(message)
