"""limit-logger: Keep repeated log statements from flooding your output."""

from limit_logger.models import Clock, EmissionRecord, Severity, wall_clock_ms
from limit_logger.sinks import NOTICE, ConsoleSink, LoggingSink, Sink
from limit_logger.throttle import ThrottledEmitter

__all__ = [
    # Core emitter
    "ThrottledEmitter",
    # Models
    "Clock",
    "EmissionRecord",
    "Severity",
    "wall_clock_ms",
    # Sinks
    "Sink",
    "LoggingSink",
    "ConsoleSink",
    "NOTICE",
]
