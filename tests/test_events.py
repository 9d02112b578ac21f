"""
Tests for EventSystem.
"""
import pytest
from core.events import EventSystem, Event, EventType


def test_subscribe_and_publish():
    """Test subscribing to and publishing window events."""
    system = EventSystem()

    received_events = []

    def handler(event: Event):
        received_events.append(event)

    sub_id = system.subscribe(EventType.WINDOW_ADDED, handler)
    assert sub_id

    event = system.publish(EventType.WINDOW_ADDED, data={"id": 1}, source="store")

    assert received_events == [event]
    assert event.event_type == "window.added"
    assert event.data == {"id": 1}
    assert event.source == "store"


def test_publish_only_reaches_matching_type():
    system = EventSystem()

    added, removed = [], []
    system.subscribe(EventType.WINDOW_ADDED, added.append)
    system.subscribe(EventType.WINDOW_REMOVED, removed.append)

    system.publish(EventType.WINDOW_REMOVED, data={"id": 4, "zone": "left"})

    assert added == []
    assert [e.data for e in removed] == [{"id": 4, "zone": "left"}]


def test_publish_without_subscribers():
    system = EventSystem()

    event = system.publish(EventType.WINDOW_MOVED, data={"id": 1, "x": 0, "y": 0})

    assert event.event_type == EventType.WINDOW_MOVED


def test_unsubscribe():
    """Test unsubscribing from events."""
    system = EventSystem()

    received_events = []
    sub_id = system.subscribe(EventType.WINDOW_REMOVED, received_events.append)

    system.publish(EventType.WINDOW_REMOVED, data={"id": 1, "zone": "none"})
    assert len(received_events) == 1

    assert system.unsubscribe(sub_id) is True

    system.publish(EventType.WINDOW_REMOVED, data={"id": 2, "zone": "none"})
    assert len(received_events) == 1  # Still 1, not 2


def test_unsubscribe_unknown_id():
    system = EventSystem()

    assert system.unsubscribe("missing") is False


def test_unsubscribe_keeps_other_subscribers():
    system = EventSystem()

    first, second = [], []
    first_id = system.subscribe(EventType.DRAG_STARTED, first.append)
    system.subscribe(EventType.DRAG_STARTED, second.append)

    system.unsubscribe(first_id)
    system.publish(EventType.DRAG_STARTED, data={"id": 2})

    assert first == []
    assert len(second) == 1


def test_priority_ordering():
    """Test that higher priority handlers are called first."""
    system = EventSystem()

    call_order = []

    system.subscribe(EventType.WINDOW_SNAPPED, lambda e: call_order.append("low"), priority=10)
    system.subscribe(EventType.WINDOW_SNAPPED, lambda e: call_order.append("high"), priority=90)
    system.subscribe(EventType.WINDOW_SNAPPED, lambda e: call_order.append("normal"), priority=50)

    system.publish(EventType.WINDOW_SNAPPED)

    assert call_order == ["high", "normal", "low"]


def test_handler_error_is_isolated():
    """A failing handler does not stop the others or reach the publisher."""
    system = EventSystem()

    calls = []

    def broken(event: Event):
        raise RuntimeError("boom")

    system.subscribe(EventType.DRAG_FINISHED, broken, priority=90)
    system.subscribe(EventType.DRAG_FINISHED, lambda e: calls.append(e.data), priority=10)

    system.publish(EventType.DRAG_FINISHED, data={"id": 1, "zone": ""})

    assert calls == [{"id": 1, "zone": ""}]


def test_handler_may_unsubscribe_itself():
    system = EventSystem()

    calls = []
    sub_ids = []

    def once(event: Event):
        calls.append(event)
        system.unsubscribe(sub_ids[0])

    sub_ids.append(system.subscribe(EventType.WINDOW_ADDED, once))

    system.publish(EventType.WINDOW_ADDED, data={"id": 1})
    system.publish(EventType.WINDOW_ADDED, data={"id": 2})

    assert len(calls) == 1


@pytest.mark.parametrize("event_type", ["", "   ", None])
def test_invalid_event_type_rejected(event_type):
    """Test that empty event types are refused."""
    system = EventSystem()

    with pytest.raises(ValueError):
        system.publish(event_type)
    with pytest.raises(ValueError):
        system.subscribe(event_type, lambda e: None)


def test_non_callable_rejected():
    system = EventSystem()

    with pytest.raises(ValueError):
        system.subscribe(EventType.WINDOW_MOVED, "not callable")
