"""Tests for invocation tracing."""

import pytest

from hofkit import Trace, once_and_after
from hofkit.kernel import Evidence

from fakes import FailingCallable, RecordingCallable


def squeak(x: str) -> str:
    return f"{x} squeak!!"


def creak(x: str) -> str:
    return f"{x} creak!!"


def test_trace_record_assigns_sequential_ids() -> None:
    trace = Trace()
    first = trace.record("call_begin")
    second = trace.record("call_end", parent_id=first, duration_ms=1.5)

    assert (first, second) == (0, 1)
    events = trace.get_events()
    assert [e.action for e in events] == ["call_begin", "call_end"]
    assert events[1].parent_id == 0
    assert events[1].duration_ms == 1.5


def test_disabled_trace_records_nothing() -> None:
    trace = Trace(enabled=False)
    assert trace.record("call_begin") is None
    assert len(trace) == 0


def test_once_and_after_records_calls_and_single_switch() -> None:
    trace = Trace()
    make_sound = once_and_after(squeak, creak, trace=trace)
    for _ in range(4):
        make_sound("door")

    assert len(trace.find_all(action="switch")) == 1
    assert len(trace.find_all(action="call_begin")) == 4
    assert len(trace.find_all(action="call_end", callable="squeak")) == 1
    assert len(trace.find_all(action="call_end", callable="creak")) == 3

    actions = [e.action for e in trace.get_events()[:4]]
    assert actions == ["call_begin", "call_end", "switch", "call_begin"]


def test_switch_is_child_of_first_call() -> None:
    trace = Trace()
    h = once_and_after(squeak, creak, trace=trace)
    h("door")

    tree = trace.as_tree()
    assert tree == {None: [0], 0: [1, 2]}
    switch = trace.find_all(action="switch")[0]
    assert switch.info == {"callable": "creak"}


def test_failed_call_records_error() -> None:
    trace = Trace()
    h = once_and_after(FailingCallable(error=ValueError("bad door")), RecordingCallable("g"), trace=trace)

    with pytest.raises(ValueError):
        h()

    errors = trace.find_all(action="call_error")
    assert len(errors) == 1
    assert errors[0].info["error"] == "bad door"
    assert trace.find_all(action="switch") == []


def test_advance_on_error_records_switch_before_error() -> None:
    trace = Trace()
    h = once_and_after(
        FailingCallable(error=ValueError("bad door")),
        RecordingCallable("g"),
        advance_on_error=True,
        trace=trace,
    )

    with pytest.raises(ValueError):
        h()

    assert [e.action for e in trace.get_events()] == ["call_begin", "switch", "call_error"]


def test_clear_resets_ids() -> None:
    trace = Trace()
    trace.record("call_begin")
    trace.clear()

    assert len(trace) == 0
    assert trace.record("call_begin") == 0


def test_evidence_defaults() -> None:
    evidence = Evidence("switch")
    assert evidence.id == 0
    assert evidence.parent_id is None
    assert evidence.info == {}
    assert evidence.duration_ms is None
