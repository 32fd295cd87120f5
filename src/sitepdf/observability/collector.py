"""Export collector — records batch progress into an EventLog.

The scheduler calls one ``record_*`` method per state change of a job.
Each call also emits a line on the ``sitepdf`` logger so the same
information is available to standard logging handlers.

Thread Safety:
    The collector delegates to ``EventLog`` which is internally locked.

"""

from __future__ import annotations

import logging

from sitepdf.observability.events import (
    JobCompleted,
    JobFailed,
    JobStarted,
    PathSkipped,
    now_ns,
)
from sitepdf.observability.log import EventLog

logger = logging.getLogger("sitepdf")


class ExportCollector:
    """Event collector for a PDF export batch.

    Args:
        log: The EventLog to store events in.

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    def record_started(self, path: str, *, index: int, delay_ms: float = 0.0) -> None:
        logger.debug("Rendering %s (job %d, waited %.0fms)", path, index, delay_ms)
        self._log.append(
            JobStarted(path=path, index=index, delay_ms=delay_ms, timestamp_ns=now_ns())
        )

    def record_completed(self, path: str, target: str, *, duration_ms: float) -> None:
        logger.info("Exported %s -> %s", path, target)
        self._log.append(
            JobCompleted(
                path=path,
                target=target,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_failed(self, path: str, error: str, *, duration_ms: float) -> None:
        logger.error("Failed to export %s: %s", path, error)
        self._log.append(
            JobFailed(path=path, error=error, duration_ms=duration_ms, timestamp_ns=now_ns())
        )

    def record_skipped(self, path: str) -> None:
        """Record a requested page path that the site does not contain."""
        logger.warning(
            "Page path %s for which you want to generate a PDF does not exist. "
            "Check the sitepdf paths configuration.",
            path,
        )
        self._log.append(PathSkipped(path=path, timestamp_ns=now_ns()))
