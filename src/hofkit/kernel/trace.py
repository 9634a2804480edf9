"""Runtime trace infrastructure for observing combinator invocations.

Trace is an in-memory event log a caller may hand to a stateful combinator.
It never changes what the combinator returns or raises; it only records
what happened. Tree relationships are reconstructed via as_tree().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single recorded event.

    Attributes:
        action: What happened (e.g. "call_begin", "switch").
        id: Sequential event id, unique within one Trace.
        parent_id: Id of the enclosing event, if any.
        timestamp: When the event was recorded.
        info: Additional context such as the callable name.
        duration_ms: Duration of the enclosing call, set on end events.
    """

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Runtime trace context for capturing invocation events.

    Performance guarantees:
    - Trace disabled → single None check overhead
    - Evidence append is O(1)
    - No recursive tree construction during execution
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._next_id: int = 0

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Record an evidence event.

        Args:
            action: What happened (e.g., "call_begin", "switch")
            info: Additional context
            parent_id: Explicit parent event ID for tree relationships
            duration_ms: Execution duration

        Returns:
            Event ID for linking child events, or None if tracing disabled
        """
        if not self.enabled:
            return None

        event_id = self._next_id
        self._next_id += 1

        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=parent_id,
                timestamp=datetime.now(UTC),
                info=info or {},
                duration_ms=duration_ms,
            )
        )

        return event_id

    def get_events(self) -> list[Evidence]:
        """Get all recorded events."""
        return list(self._events)

    def find_all(self, **kwargs: Any) -> list[Evidence]:
        """Find events matching every given criterion.

        A criterion matches either an Evidence attribute or a key in its info,
        e.g. find_all(action="switch") or find_all(callable="squeak").
        """
        return [
            e
            for e in self._events
            if all(getattr(e, k, None) == v or e.info.get(k) == v for k, v in kwargs.items())
        ]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Reconstruct parent-child relationships for visualization.

        Returns:
            Dict mapping parent_id to list of child_ids
        """
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        """Clear all events (for reuse)."""
        self._events.clear()
        self._next_id = 0
