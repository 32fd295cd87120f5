"""Export event model.

Defines the event types recorded while a batch runs: one per job start,
completion and failure, plus one per requested page that does not exist.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class JobStarted:
    """A render job left its stagger delay and began rendering.

    Attributes:
        path: Page path being rendered.
        index: Ordinal position of the job in the batch.
        delay_ms: Stagger delay the job waited before starting.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    index: int
    delay_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class JobCompleted:
    """A PDF was written to disk.

    Attributes:
        path: Page path that was rendered.
        target: Absolute path of the written PDF.
        duration_ms: Time spent rendering, excluding the stagger delay.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    target: str
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class JobFailed:
    """A render job raised instead of writing its PDF.

    Attributes:
        path: Page path that failed.
        error: Human-readable failure reason.
        duration_ms: Time spent before the failure.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    error: str
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class PathSkipped:
    """A requested page path is not part of the built site."""

    path: str
    timestamp_ns: int


type ExportEvent = JobStarted | JobCompleted | JobFailed | PathSkipped


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
