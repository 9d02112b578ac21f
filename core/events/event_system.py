"""
Event bus for SnapDeck.

The window store and drag controller publish here; the main window's status
bar listens. Neither side holds a reference to the other.
"""
from typing import Any, Callable, Dict, List
import threading

from core.logging.logger import get_logger
from core.events.event_types import Event, Subscription

logger = get_logger('EventSystem')


class EventSystem:
    """
    Publish-subscribe bus keyed by event type string.

    Subscribers run in priority order (higher first) on the publishing
    thread. A failing subscriber is logged and skipped.
    """

    def __init__(self):
        self._by_type: Dict[str, List[Subscription]] = {}
        self._by_id: Dict[str, Subscription] = {}
        self._lock = threading.RLock()

    def subscribe(
        self,
        event_type: str,
        callback: Callable[[Event], None],
        priority: int = 50,
    ) -> str:
        """
        Subscribe to one event type.

        Args:
            event_type: Type of event to subscribe to
            callback: Called with the Event on every publish
            priority: Higher runs earlier, default 50

        Returns:
            str: Subscription ID for unsubscribe()

        Raises:
            ValueError: If callback is not callable or event_type is empty
        """
        if not callable(callback):
            raise ValueError("Callback must be callable")
        _check_type(event_type)

        subscription = Subscription(callback, event_type, priority)
        with self._lock:
            subs = self._by_type.setdefault(event_type, [])
            subs.append(subscription)
            subs.sort()
            self._by_id[subscription.id] = subscription

        logger.debug(f"Subscribed {subscription.id} to {event_type} (priority={priority})")
        return subscription.id

    def unsubscribe(self, subscription_id: str) -> bool:
        """
        Remove a subscription.

        Returns:
            True if the id was known.
        """
        with self._lock:
            subscription = self._by_id.pop(subscription_id, None)
            if subscription is None:
                logger.warning(f"Unsubscribe called with unknown id: {subscription_id}")
                return False
            remaining = [s for s in self._by_type.get(subscription.event_type, [])
                         if s.id != subscription_id]
            if remaining:
                self._by_type[subscription.event_type] = remaining
            else:
                self._by_type.pop(subscription.event_type, None)
        return True

    def publish(self, event_type: str, data: Any = None, source: Any = None) -> Event:
        """
        Deliver an event to every subscriber of its type.

        Subscribers are called outside the lock, so they may publish or
        (un)subscribe themselves.

        Returns:
            Event: The published event object
        """
        _check_type(event_type)
        event = Event(event_type, data, source)

        with self._lock:
            targets = list(self._by_type.get(event_type, ()))

        for subscription in targets:
            try:
                subscription.callback(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event_type}: {e}", exc_info=True)
        return event


def _check_type(event_type: str) -> None:
    if not isinstance(event_type, str) or not event_type.strip():
        raise ValueError("event_type must be a non-empty string")
