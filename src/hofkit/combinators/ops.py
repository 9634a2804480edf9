"""Combinator primitives: once_and_after, not_, invert."""

# Combinators satisfy the following algebraic laws:
#
# 1. First-then-rest: h = once_and_after(f, g); [h(a1), h(a2), h(a3)] == [f(a1), g(a2), g(a3)]
#    Only the first successful call reaches f
#
# 2. Absorption: once h has switched, every further call is g(*args, **kwargs)
#
# 3. Double negation: not_(not_(fn))(x) == bool(fn(x))
#
# 4. Involution: invert(invert(fn))(x) == fn(x) for finite numeric results
#
# 5. Negation commutes with arguments: not_(fn)(*a, **kw) == (not fn(*a, **kw))


from __future__ import annotations

import functools
import logging
import time
from collections.abc import Callable
from typing import Any, Generic, ParamSpec, TypeVar

from hofkit.kernel.trace import Trace

from .errors import ensure_callable
from .types import CallState, OnceAndAfterConfig, OnceAndAfterSnapshot

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def _name_of(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


class OnceAndAfter(Generic[P, R]):
    """Callable that runs ``f`` on its first call and ``g`` on every later one.

    The callable to use lives in a single private slot. It starts out as ``f``
    and is rebound to ``g`` exactly once. By default the rebinding happens
    after ``f`` returns normally, so a raising first call leaves the instance
    in the ``using_f`` state. With ``advance_on_error`` the slot is rebound
    before ``f`` runs.

    Not safe for concurrent use: callers sharing an instance across threads
    must serialize calls themselves.
    """

    def __init__(
        self,
        f: Callable[P, R],
        g: Callable[P, R],
        config: OnceAndAfterConfig | None = None,
        trace: Trace | None = None,
    ) -> None:
        ensure_callable("f", f)
        ensure_callable("g", g)
        self._g = g
        self._to_call: Callable[P, R] = f
        self._state: CallState = "using_f"
        self._calls = 0
        self.config = config or OnceAndAfterConfig()
        self.trace = trace

    @property
    def state(self) -> CallState:
        return self._state

    @property
    def calls(self) -> int:
        """Number of invocations so far, counting ones that raised."""
        return self._calls

    def snapshot(self) -> OnceAndAfterSnapshot:
        return OnceAndAfterSnapshot(state=self._state, calls=self._calls)

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> R:
        to_call = self._to_call
        name = _name_of(to_call)
        trace = self.trace

        call_id: int | None = None
        if trace is not None:
            call_id = trace.record("call_begin", info={"callable": name, "state": self._state})

        if self.config.advance_on_error:
            self._advance(parent_id=call_id)

        start_time = time.perf_counter()
        try:
            result = to_call(*args, **kwargs)
        except Exception as exc:
            if trace is not None:
                trace.record(
                    "call_error",
                    info={"callable": name, "error": str(exc)},
                    parent_id=call_id,
                )
            raise
        finally:
            self._calls += 1
        duration_ms = (time.perf_counter() - start_time) * 1000

        if trace is not None:
            trace.record(
                "call_end",
                info={"callable": name},
                parent_id=call_id,
                duration_ms=duration_ms,
            )

        self._advance(parent_id=call_id)
        return result

    def _advance(self, parent_id: int | None = None) -> None:
        """Rebind the slot to g. Later calls are no-ops."""
        if self._state == "using_g":
            return
        self._to_call = self._g
        self._state = "using_g"
        logger.debug("once_and_after switched to %s", _name_of(self._g))
        if self.trace is not None:
            self.trace.record(
                "switch",
                info={"callable": _name_of(self._g)},
                parent_id=parent_id,
            )

    def __repr__(self) -> str:
        return f"OnceAndAfter(state={self._state!r}, calls={self._calls})"


def once_and_after(
    f: Callable[P, R],
    g: Callable[P, R],
    *,
    advance_on_error: bool = False,
    trace: Trace | None = None,
) -> OnceAndAfter[P, R]:
    """Call ``f`` the first time and ``g`` every time after that.

    Semantics:
        - First call: result of f(*args, **kwargs), then switch to g
        - Later calls: result of g(*args, **kwargs)
        - Exceptions from f or g propagate unchanged
        - A raising first call only switches when advance_on_error is set

    Args:
        f: Callable used for the first invocation.
        g: Callable used for every later invocation.
        advance_on_error: Switch to g even if the first call raises.
        trace: Optional trace that records each call and the switch.

    Returns:
        OnceAndAfter[P, R]: A new callable with the same signature as f and g.

    Raises:
        NotCallableError: If f or g is not callable.
    """
    config = OnceAndAfterConfig(advance_on_error=advance_on_error)
    return OnceAndAfter(f, g, config=config, trace=trace)


def not_(fn: Callable[P, Any]) -> Callable[P, bool]:
    """Negate a predicate.

    Args:
        fn: Predicate whose result is coerced to bool.

    Returns:
        Callable[P, bool]: Calls fn with the same arguments and returns
            the logical negation of its result.
    """
    ensure_callable("fn", fn)

    @functools.wraps(fn)
    def negated(*args: P.args, **kwargs: P.kwargs) -> bool:
        return not fn(*args, **kwargs)

    return negated


def invert(fn: Callable[P, Any]) -> Callable[P, Any]:
    """Arithmetically negate the result of fn.

    A TypeError from unary minus propagates when the result does not
    support negation.
    """
    ensure_callable("fn", fn)

    @functools.wraps(fn)
    def inverted(*args: P.args, **kwargs: P.kwargs) -> Any:
        return -fn(*args, **kwargs)

    return inverted
