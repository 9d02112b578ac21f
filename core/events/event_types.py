"""
Event type definitions for SnapDeck.
"""
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass(frozen=True)
class Event:
    """A published notification. ``data`` is a plain dict for window/drag events."""
    event_type: str
    data: Any = None
    source: Any = None


@dataclass
class Subscription:
    """Subscription to an event type."""
    callback: Callable[[Event], None]
    event_type: str
    priority: int = 0
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])

    def __lt__(self, other: 'Subscription') -> bool:
        """Sort by priority (higher first)."""
        return self.priority > other.priority


class EventType:
    """Event type constants."""
    # Window collection events
    WINDOW_ADDED = "window.added"        # {"id"}
    WINDOW_REMOVED = "window.removed"    # {"id", "zone"}
    WINDOW_MOVED = "window.moved"        # {"id", "x", "y"}
    WINDOW_SNAPPED = "window.snapped"    # {"id", "zone", "previous"}

    # Drag events
    DRAG_STARTED = "drag.started"        # {"id"}
    DRAG_FINISHED = "drag.finished"      # {"id", "zone"}; zone is "" for a free drop
