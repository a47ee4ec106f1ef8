"""Core data models for limit-logger."""

from __future__ import annotations

import time
from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel

# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

Clock = Callable[[], float]
"""() → current time in milliseconds since the epoch"""


def wall_clock_ms() -> float:
    """Current wall-clock time in milliseconds."""
    return time.time() * 1000


# ---------------------------------------------------------------------------
# Severity
# ---------------------------------------------------------------------------


class Severity(str, Enum):
    """Severity level a message is forwarded at.

    Each level maps to its own sink method. ``LOG`` is the general,
    console.log-style level and sits between ``INFO`` and ``WARN``.
    """

    DEBUG = "debug"
    INFO = "info"
    LOG = "log"
    WARN = "warn"
    ERROR = "error"


# ---------------------------------------------------------------------------
# Emission records
# ---------------------------------------------------------------------------


class EmissionRecord(BaseModel):
    """Snapshot of one throttle bucket.

    Attributes:
        identifier: Throttle key. ``""`` is the shared anonymous bucket.
        last_emit_ms: Clock time of the last emission that passed.
    """

    identifier: str
    last_emit_ms: float
