from .combinators import (
    CallState,
    NotCallableError,
    OnceAndAfter,
    OnceAndAfterConfig,
    OnceAndAfterSnapshot,
    invert,
    not_,
    once_and_after,
)
from .kernel import Evidence, Trace

__all__ = [
    # Combinators
    "once_and_after",
    "not_",
    "invert",
    # Types
    "OnceAndAfter",
    "CallState",
    "OnceAndAfterConfig",
    "OnceAndAfterSnapshot",
    # Errors
    "NotCallableError",
    # Tracing
    "Trace",
    "Evidence",
]
