"""
Event bus for reporting slider interactions to the host.

This module provides a simple event bus pattern so host code can react to
drags, releases and range changes without polling the response flags.
Each ``DoubleSlider`` owns its own bus; there is no global instance.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


logger = logging.getLogger(__name__)


class EventType(Enum):
    """Events emitted by a slider."""

    DRAG_STARTED = auto()  # {"target": DragTarget}
    DRAG_RELEASED = auto()  # {"target": DragTarget}
    RANGE_CHANGED = auto()  # {"low": value, "high": value, "previous": (low, high)}
    SCROLLED = auto()  # {"delta": float}
    ZOOMED = auto()  # {"zoom_delta": float}


@dataclass
class Event:
    """Event data container."""

    type: EventType | str
    data: dict[str, Any]
    source: str | None = None


class EventBus:
    """
    Simple event bus for pub/sub pattern.

    Handlers run synchronously inside ``emit``, on the caller's (UI) thread.
    """

    def __init__(self, name: str = "default", max_history: int = 100):
        """
        Initialize event bus.

        Parameters
        ----------
        name : str
            Name of this event bus instance
        max_history : int
            Number of recent events kept for inspection
        """
        self.name = name
        self._subscribers: dict[EventType | str, list[tuple[int, Callable[[Event], None]]]] = {}
        self._event_history: list[Event] = []
        self._max_history = max_history
        logger.debug(f"Created EventBus: {name}")

    def subscribe(
        self,
        event_type: EventType | str,
        callback: Callable[[Event], None],
        priority: int = 0,
    ) -> None:
        """
        Subscribe to an event type.

        Parameters
        ----------
        event_type : EventType | str
            Event type to subscribe to
        callback : Callable[[Event], None]
            Function to call when event is emitted
        priority : int
            Priority for callback execution (higher = earlier)
        """
        callbacks = self._subscribers.setdefault(event_type, [])

        # Insert by priority (higher priority first)
        for i, (existing_priority, _) in enumerate(callbacks):
            if priority > existing_priority:
                callbacks.insert(i, (priority, callback))
                break
        else:
            callbacks.append((priority, callback))

        logger.debug(
            f"[{self.name}] Subscribed to {event_type}: "
            f"{getattr(callback, '__name__', callback)} (priority={priority})"
        )

    def unsubscribe(
        self,
        event_type: EventType | str,
        callback: Callable[[Event], None],
    ) -> bool:
        """
        Unsubscribe from an event type.

        Returns
        -------
        bool
            True if callback was found and removed
        """
        callbacks = self._subscribers.get(event_type)
        if not callbacks:
            return False

        for i, (_, cb) in enumerate(callbacks):
            if cb == callback:
                del callbacks[i]
                logger.debug(f"[{self.name}] Unsubscribed from {event_type}")
                return True

        return False

    def emit(
        self,
        event_type: EventType | str,
        source: str | None = None,
        **data,
    ) -> None:
        """
        Emit an event.

        A failing handler is logged and does not stop the remaining handlers,
        so one faulty listener cannot break the frame update.

        Parameters
        ----------
        event_type : EventType | str
            Type of event to emit
        source : str | None
            Component emitting the event
        **data
            Event data as keyword arguments
        """
        event = Event(type=event_type, data=data, source=source)

        self._event_history.append(event)
        if len(self._event_history) > self._max_history:
            self._event_history.pop(0)

        subscribers = self._subscribers.get(event_type)
        if not subscribers:
            return

        logger.debug(
            f"[{self.name}] Emitting {event_type} from {source or 'unknown'} "
            f"to {len(subscribers)} subscribers"
        )
        for _, callback in list(subscribers):
            try:
                callback(event)
            except Exception as e:
                logger.error(
                    f"[{self.name}] Error in event handler "
                    f"{getattr(callback, '__name__', callback)} for {event_type}: {e}",
                    exc_info=True,
                )

    def clear_subscribers(self, event_type: EventType | str | None = None) -> None:
        """Clear subscribers for one event type, or all of them."""
        if event_type is None:
            self._subscribers.clear()
        else:
            self._subscribers.pop(event_type, None)

    def get_history(
        self,
        event_type: EventType | str | None = None,
        limit: int | None = None,
    ) -> list[Event]:
        """
        Get event history.

        Parameters
        ----------
        event_type : EventType | str | None
            If provided, filter by event type
        limit : int | None
            Maximum number of events to return

        Returns
        -------
        list[Event]
            Event history (most recent last)
        """
        history = self._event_history

        if event_type is not None:
            history = [e for e in history if e.type == event_type]

        if limit is not None:
            history = history[-limit:]

        return list(history)

    def has_subscribers(self, event_type: EventType | str) -> bool:
        """Check if an event type has any subscribers."""
        return bool(self._subscribers.get(event_type))


__all__ = [
    "Event",
    "EventBus",
    "EventType",
]
