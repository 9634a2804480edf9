"""Error types for combinator construction."""

from __future__ import annotations


class NotCallableError(TypeError):
    """Error raised when a combinator is built from a non-callable value.

    This error preserves the offending value for debugging purposes.
    Failures of the wrapped callables themselves are never translated
    into this type.
    """

    def __init__(self, message: str, raw_value: object) -> None:
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"NotCallableError({super().__repr__()}, raw_value={self.raw_value!r})"


def ensure_callable(name: str, value: object) -> None:
    """Raise NotCallableError unless value can be invoked."""
    if not callable(value):
        raise NotCallableError(
            f"{name} must be callable, got {type(value).__name__}",
            raw_value=value,
        )
