"""Export observability — per-job events for a PDF export batch.

Quick Start:
    >>> from sitepdf.observability import ExportCollector, EventLog, JobFailed
    >>> collector = ExportCollector(EventLog())
    >>> # pass collector to run_batch(...), then:
    >>> failures = collector.log.query(event_type=JobFailed)

"""

from sitepdf.observability.collector import ExportCollector
from sitepdf.observability.events import (
    ExportEvent,
    JobCompleted,
    JobFailed,
    JobStarted,
    PathSkipped,
    now_ns,
)
from sitepdf.observability.log import EventLog

__all__ = [
    "EventLog",
    "ExportCollector",
    "ExportEvent",
    "JobCompleted",
    "JobFailed",
    "JobStarted",
    "PathSkipped",
    "now_ns",
]
