"""Throttled log emission.

Prevents flooding a log with a message that fires in a tight loop
by enforcing a minimum interval between emissions that share an
identifier.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from limit_logger.models import Clock, EmissionRecord, Severity, wall_clock_ms
from limit_logger.sinks import LoggingSink, Sink

logger = logging.getLogger("limit_logger.throttle")

_DEFAULT_INTERVAL_S = 0.0


class ThrottledEmitter:
    """Emits log messages no more often than a per-call minimum interval.

    Calls are grouped into buckets by ``identifier``. A call passes when its
    bucket has never emitted, or when at least ``min_interval_s`` seconds
    have elapsed since the bucket last emitted; otherwise it is dropped.
    An empty or ``None`` identifier selects one shared anonymous bucket.

    Create one emitter and share it with every call site that should
    throttle against the same history.

    Example::

        emitter = ThrottledEmitter()
        for frame in frames:
            emitter.warn(f"dropped frame {frame.id}", "decoder.drop", 5)

    Args:
        sink: Where passing messages are written. Defaults to a
            ``LoggingSink`` over the ``limit_logger`` logger.
        clock: Zero-argument callable returning milliseconds.
        default_interval_s: Interval used when a call omits
            ``min_interval_s``. 0 means no throttling.
    """

    def __init__(
        self,
        sink: Sink | None = None,
        *,
        clock: Clock | None = None,
        default_interval_s: float = _DEFAULT_INTERVAL_S,
    ) -> None:
        self._sink: Sink = sink if sink is not None else LoggingSink()
        self._clock: Clock = clock or wall_clock_ms
        self._default_interval_s = default_interval_s
        self._last_emit: dict[str, float] = {}  # identifier → ms
        self._lock = threading.RLock()
        logger.debug(
            "Throttled emitter created (sink=%s, default_interval_s=%s)",
            type(self._sink).__name__,
            default_interval_s,
        )

    @property
    def sink(self) -> Sink:
        return self._sink

    # ------------------------------------------------------------------
    # Emit
    # ------------------------------------------------------------------

    def emit(
        self,
        severity: Severity | str,
        message: Any,
        identifier: str | None = None,
        min_interval_s: float | None = None,
    ) -> None:
        """Forward ``message`` to the sink unless its bucket is throttled.

        The bucket's timestamp is only updated after the sink accepts the
        message. Sink exceptions propagate and leave the bucket untouched.
        """
        severity = Severity(severity)
        key = identifier or ""
        if min_interval_s is None:
            min_interval_s = self._default_interval_s

        with self._lock:
            now = self._clock()
            last = self._last_emit.get(key)
            if last is not None and (now - last) < min_interval_s * 1000:
                return

            self._sink.write(message, severity)
            self._last_emit[key] = now

    def debug(
        self, message: Any, identifier: str | None = None, min_interval_s: float | None = None
    ) -> None:
        self.emit(Severity.DEBUG, message, identifier, min_interval_s)

    def info(
        self, message: Any, identifier: str | None = None, min_interval_s: float | None = None
    ) -> None:
        self.emit(Severity.INFO, message, identifier, min_interval_s)

    def log(
        self, message: Any, identifier: str | None = None, min_interval_s: float | None = None
    ) -> None:
        self.emit(Severity.LOG, message, identifier, min_interval_s)

    def warn(
        self, message: Any, identifier: str | None = None, min_interval_s: float | None = None
    ) -> None:
        self.emit(Severity.WARN, message, identifier, min_interval_s)

    warning = warn

    def error(
        self, message: Any, identifier: str | None = None, min_interval_s: float | None = None
    ) -> None:
        self.emit(Severity.ERROR, message, identifier, min_interval_s)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def last_emit(self, identifier: str | None = None) -> float | None:
        """Clock time of the bucket's last emission, or None if it never emitted."""
        with self._lock:
            return self._last_emit.get(identifier or "")

    def records(self) -> list[EmissionRecord]:
        """Snapshot of every tracked bucket, sorted by identifier."""
        with self._lock:
            items = sorted(self._last_emit.items())
        return [EmissionRecord(identifier=k, last_emit_ms=v) for k, v in items]

    def __len__(self) -> int:
        return len(self._last_emit)

    # ------------------------------------------------------------------
    # Cleanup
    # ------------------------------------------------------------------

    def forget(self, identifier: str | None = None) -> None:
        """Drop a bucket so its next call passes."""
        with self._lock:
            removed = self._last_emit.pop(identifier or "", None)
        if removed is not None:
            logger.debug("Forgot throttle bucket %r", identifier or "")

    def clear(self) -> None:
        """Drop every bucket."""
        with self._lock:
            count = len(self._last_emit)
            self._last_emit.clear()
        logger.debug("Cleared %d throttle buckets", count)
