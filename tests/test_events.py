"""Tests for the slider event bus."""

from doubleslider.interaction.events import EventBus, EventType


class TestEventBus:
    """Test subscribe/emit behaviour."""

    def test_emit_reaches_subscriber(self):
        """Test a subscriber receives the event data."""
        bus = EventBus("test")
        received = []
        bus.subscribe(EventType.RANGE_CHANGED, received.append)

        bus.emit(EventType.RANGE_CHANGED, source="slider", low=1.0, high=2.0)

        assert len(received) == 1
        assert received[0].data == {"low": 1.0, "high": 2.0}
        assert received[0].source == "slider"

    def test_priority_order(self):
        """Test higher priority handlers run first."""
        bus = EventBus()
        order = []
        bus.subscribe(EventType.SCROLLED, lambda e: order.append("low"), priority=0)
        bus.subscribe(EventType.SCROLLED, lambda e: order.append("high"), priority=10)

        bus.emit(EventType.SCROLLED, delta=1.0)

        assert order == ["high", "low"]

    def test_unsubscribe(self):
        """Test an unsubscribed handler is no longer called."""
        bus = EventBus()
        received = []
        bus.subscribe(EventType.ZOOMED, received.append)

        assert bus.unsubscribe(EventType.ZOOMED, received.append)
        assert not bus.unsubscribe(EventType.ZOOMED, received.append)

        bus.emit(EventType.ZOOMED, zoom_delta=1.1)
        assert received == []
        assert not bus.has_subscribers(EventType.ZOOMED)

    def test_failing_handler_does_not_block_others(self):
        """Test an exception in one handler is logged and the next still runs."""
        bus = EventBus()
        received = []

        def broken(event):
            raise RuntimeError("boom")

        bus.subscribe(EventType.DRAG_STARTED, broken, priority=1)
        bus.subscribe(EventType.DRAG_STARTED, received.append)

        bus.emit(EventType.DRAG_STARTED, target=None)

        assert len(received) == 1

    def test_history(self):
        """Test history is bounded and filterable."""
        bus = EventBus(max_history=3)
        for i in range(5):
            bus.emit(EventType.SCROLLED, delta=float(i))
        bus.emit(EventType.ZOOMED, zoom_delta=2.0)

        history = bus.get_history()
        assert len(history) == 3
        assert [e.type for e in bus.get_history(EventType.ZOOMED)] == [EventType.ZOOMED]
        assert bus.get_history(limit=1)[0].type is EventType.ZOOMED

    def test_clear_subscribers(self):
        """Test clearing all subscribers."""
        bus = EventBus()
        bus.subscribe(EventType.SCROLLED, lambda e: None)
        bus.subscribe(EventType.ZOOMED, lambda e: None)

        bus.clear_subscribers(EventType.SCROLLED)
        assert not bus.has_subscribers(EventType.SCROLLED)
        assert bus.has_subscribers(EventType.ZOOMED)

        bus.clear_subscribers()
        assert not bus.has_subscribers(EventType.ZOOMED)
