"""
Event bus for decoupled battle notifications.

The battle engine publishes events without knowing who listens. Delivery is
synchronous: publish() hands the event to every matching subscriber before
it returns, so listeners see round N completely before round N+1 starts.
"""

import threading
from collections import defaultdict
from typing import Any, Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .events import BattleEvent, EventType


EventSubscriber = Callable[["BattleEvent"], None]
ErrorHandler = Callable[[str], None]


class EventManager:
    """Central event bus for battle notifications.

    Subscribers are kept per event type, plus a list of universal
    subscribers that receive everything. A subscriber that raises is
    reported to the error handler and the remaining subscribers still run.
    """

    def __init__(self):
        self._subscribers: dict["EventType", list[tuple[str, EventSubscriber]]] = defaultdict(list)
        self._universal_subscribers: list[tuple[str, EventSubscriber]] = []
        self._error_handler: Optional[ErrorHandler] = None

        # Statistics
        self._events_published = 0
        self._subscriber_errors = 0

        self._lock = threading.RLock()

    def set_error_handler(self, handler: Optional[ErrorHandler]) -> None:
        """Set the callback that receives a message for each failing subscriber."""
        self._error_handler = handler

    @property
    def error_handler(self) -> Optional[ErrorHandler]:
        return self._error_handler

    def subscribe(
        self,
        event_type: "EventType",
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Subscribe to events of a specific type.

        Args:
            event_type: The type of events to subscribe to
            subscriber: Callback function to handle events
            subscriber_name: Name used when reporting subscriber errors
        """
        name = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
        with self._lock:
            self._subscribers[event_type].append((name, subscriber))

    def subscribe_all(self, subscriber: EventSubscriber, subscriber_name: Optional[str] = None) -> None:
        """Subscribe to every event regardless of type."""
        name = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
        with self._lock:
            self._universal_subscribers.append((name, subscriber))

    def unsubscribe(self, event_type: "EventType", subscriber: EventSubscriber) -> bool:
        """Unsubscribe from events of a specific type.

        Returns:
            True if subscriber was found and removed
        """
        with self._lock:
            entries = self._subscribers.get(event_type, [])
            for index, (_, registered) in enumerate(entries):
                if registered == subscriber:
                    del entries[index]
                    return True
        return False

    def publish(self, event: "BattleEvent") -> None:
        """Deliver an event to its type subscribers, then to universal subscribers."""
        with self._lock:
            self._events_published += 1
            recipients = list(self._subscribers.get(event.event_type, [])) + list(self._universal_subscribers)

        for name, subscriber in recipients:
            try:
                subscriber(event)
            except Exception as e:
                self._report_error(f"Subscriber {name} failed on {event.__class__.__name__}: {e}")

    def _report_error(self, message: str) -> None:
        with self._lock:
            self._subscriber_errors += 1
        if self._error_handler is not None:
            self._error_handler(message)

    def get_statistics(self) -> dict[str, Any]:
        """Get event delivery statistics."""
        with self._lock:
            return {
                'events_published': self._events_published,
                'subscriber_errors': self._subscriber_errors,
                'subscribers_count': sum(len(subs) for subs in self._subscribers.values()),
                'universal_subscribers_count': len(self._universal_subscribers),
            }
