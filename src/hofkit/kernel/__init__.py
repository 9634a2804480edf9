"""Kernel layer - runtime infrastructure shared by combinators."""

from hofkit.kernel.trace import Evidence, Trace

__all__ = [
    "Evidence",
    "Trace",
]
