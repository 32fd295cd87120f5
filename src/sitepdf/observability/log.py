"""Export event log — what happened to each page during a batch.

Render jobs report from the event loop while the static server runs in a
worker thread, so every access goes through one lock.  Old events fall
off the front once ``max_events`` is reached.
"""

import threading
from collections import Counter, deque
from typing import Any

from sitepdf.observability.events import ExportEvent, JobCompleted, JobFailed


class EventLog:
    """Ring buffer of ``ExportEvent`` records, newest last.

    Args:
        max_events: Retention limit; the oldest events are dropped first.

    """

    __slots__ = ("_buffer", "_guard", "_max_events")

    def __init__(self, max_events: int = 10_000) -> None:
        self._max_events = max_events
        self._buffer: deque[ExportEvent] = deque(maxlen=max_events)
        self._guard = threading.Lock()

    def append(self, event: ExportEvent) -> None:
        with self._guard:
            self._buffer.append(event)

    def _snapshot(self) -> list[ExportEvent]:
        with self._guard:
            return list(self._buffer)

    def query(
        self,
        *,
        event_type: type | None = None,
        since_ns: int = 0,
        path: str | None = None,
        limit: int = 100,
    ) -> list[ExportEvent]:
        """Return matching events, newest first.

        Args:
            event_type: Keep only instances of this event class.
            since_ns: Drop events stamped before this ``now_ns()`` value.
            path: Keep only events for this page path (exact match).
            limit: Cap on the number of events returned.

        """
        matches: list[ExportEvent] = []
        for event in reversed(self._snapshot()):
            if event_type is not None and not isinstance(event, event_type):
                continue
            if event.timestamp_ns < since_ns:
                continue
            if path is not None and event.path != path:
                continue
            matches.append(event)
            if len(matches) == limit:
                break
        return matches

    def recent(self, n: int = 20) -> list[ExportEvent]:
        """The last *n* events in arrival order."""
        return self._snapshot()[-n:]

    def timeline(self, path: str) -> list[ExportEvent]:
        """Every retained event for one page, oldest first."""
        return [event for event in self._snapshot() if event.path == path]

    def clear(self) -> int:
        """Drop all events; returns how many were dropped."""
        with self._guard:
            dropped = len(self._buffer)
            self._buffer.clear()
        return dropped

    def __len__(self) -> int:
        with self._guard:
            return len(self._buffer)

    def stats(self) -> dict[str, Any]:
        """Event counts per type plus total render time of settled jobs."""
        events = self._snapshot()
        render_ms = sum(
            event.duration_ms
            for event in events
            if isinstance(event, (JobCompleted, JobFailed))
        )
        return {
            "total": len(events),
            "max_events": self._max_events,
            "by_type": dict(Counter(type(event).__name__ for event in events)),
            "render_ms": render_ms,
        }
