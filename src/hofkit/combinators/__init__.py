from .errors import NotCallableError
from .ops import OnceAndAfter, invert, not_, once_and_after
from .types import CallState, OnceAndAfterConfig, OnceAndAfterSnapshot

__all__ = [
    "once_and_after",
    "not_",
    "invert",
    "OnceAndAfter",
    "CallState",
    "OnceAndAfterConfig",
    "OnceAndAfterSnapshot",
    "NotCallableError",
]
