"""Output sinks that throttled messages are forwarded to.

A ``Sink`` is the write target behind a ``ThrottledEmitter``. It receives
every message that passes the throttle, together with the severity it
was emitted at, and performs the actual write.

Two implementations ship with the package:

- ``LoggingSink`` forwards to a stdlib ``logging.Logger``.
- ``ConsoleSink`` prints to stdout/stderr, the way a browser or Node
  console splits ``log``/``warn``.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any, Protocol

from limit_logger.models import Severity

NOTICE = 25
"""Log level used for ``Severity.LOG``, between INFO and WARNING."""

logging.addLevelName(NOTICE, "NOTICE")

_DEFAULT_LOGGER_NAME = "limit_logger"


class Sink(Protocol):
    """Write target for messages that passed the throttle."""

    def write(self, message: Any, severity: Severity) -> None:
        """Write ``message`` at ``severity``.

        Args:
            message: The caller's message, unmodified. May be any object.
            severity: Level the caller emitted at.
        """
        ...


class LoggingSink:
    """Forwards messages to a stdlib logger.

    The message object becomes the record's ``msg`` with no arguments, so
    ``%`` sequences in it are never interpolated.

    Args:
        logger: Target logger. Defaults to the ``limit_logger`` logger.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(_DEFAULT_LOGGER_NAME)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def write(self, message: Any, severity: Severity) -> None:
        severity = Severity(severity)
        if severity is Severity.DEBUG:
            self._logger.debug(message)
        elif severity is Severity.INFO:
            self._logger.info(message)
        elif severity is Severity.LOG:
            self._logger.log(NOTICE, message)
        elif severity is Severity.WARN:
            self._logger.warning(message)
        else:
            self._logger.error(message)


class ConsoleSink:
    """Prints messages to the console.

    ``debug``, ``info`` and ``log`` go to stdout; ``warn`` and ``error``
    go to stderr. Unset streams resolve to the current ``sys.stdout`` /
    ``sys.stderr`` on every write, so redirection after construction is
    honoured.
    """

    def __init__(self, *, stdout: IO[str] | None = None, stderr: IO[str] | None = None) -> None:
        self._stdout = stdout
        self._stderr = stderr

    def write(self, message: Any, severity: Severity) -> None:
        if Severity(severity) in (Severity.WARN, Severity.ERROR):
            stream = self._stderr or sys.stderr
        else:
            stream = self._stdout or sys.stdout
        print(message, file=stream, flush=True)
