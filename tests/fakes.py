from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RecordingCallable:
    """Callable that records its arguments and returns a tagged result."""

    name: str
    calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = field(default_factory=list)

    def __call__(self, *args: Any, **kwargs: Any) -> tuple[str, tuple[Any, ...]]:
        self.calls.append((args, kwargs))
        return (self.name, args)


@dataclass
class FailingCallable:
    """Callable that raises for the first `failures` calls, then returns `value`."""

    error: Exception
    failures: int = 1
    value: Any = None
    calls: int = 0

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error
        return self.value
