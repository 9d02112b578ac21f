"""
Window store - owner of the authoritative window collection.

All mutation goes through the operations here. Each operation builds a new
tuple and swaps it in as a whole, so readers only ever see the collection
before or after an operation. Invalid input (unknown id, unknown zone) is a
logged no-op; nothing is raised to the caller.
"""
from __future__ import annotations

import itertools
import random
import threading
from dataclasses import replace
from typing import Iterator, Optional, Sequence, Tuple

from PySide6.QtCore import QObject, Signal

from core.constants.layout import DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH
from core.events import EventSystem, EventType
from core.logging.logger import get_logger
from core.logging.tags import TAG_STORE
from core.snapping.arrangement import arrange_windows
from core.snapping.geometry import Point, Size
from core.snapping.models import PanelWindow, random_window_color
from core.snapping.zones import SnapPosition, ZoneName, lookup_zone, to_snap_position

logger = get_logger(__name__)


class WindowIdAllocator:
    """Strictly increasing window ids, safe under any call rate."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)


class WindowStore(QObject):
    """
    Owns the ordered window collection.

    Collection order is stacking order (later windows paint on top) and is
    also the order occupants of a zone are laid out in.
    """

    # Emitted after every operation that changed the collection.
    windows_changed = Signal()

    def __init__(
        self,
        viewport_width: float = 1920,
        viewport_height: float = 1080,
        default_size: Optional[Size] = None,
        event_system: Optional[EventSystem] = None,
        rng: Optional[random.Random] = None,
        id_allocator: Optional[WindowIdAllocator] = None,
    ):
        """
        Initialize the store.

        Args:
            viewport_width: Initial viewport width used by add()/remove()
            viewport_height: Initial viewport height used by add()/remove()
            default_size: Size of free windows (200x150 when omitted)
            event_system: Optional bus that receives window.* events
            rng: Random source for positions and colors
            id_allocator: Source of window ids
        """
        super().__init__()
        if default_size is None:
            default_size = Size(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)
        if default_size.width <= 0 or default_size.height <= 0:
            raise ValueError(f"Default window size must be positive: {default_size}")

        self._windows: Tuple[PanelWindow, ...] = ()
        self._viewport = Size(viewport_width, viewport_height)
        self._default_size = default_size
        self._event_system = event_system
        self._rng = rng or random.Random()
        self._ids = id_allocator or WindowIdAllocator()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def windows(self) -> Tuple[PanelWindow, ...]:
        return self._windows

    @property
    def viewport_size(self) -> Tuple[float, float]:
        return self._viewport.width, self._viewport.height

    @property
    def default_size(self) -> Size:
        return self._default_size

    def __len__(self) -> int:
        return len(self._windows)

    def __iter__(self) -> Iterator[PanelWindow]:
        return iter(self._windows)

    def __contains__(self, window_id: object) -> bool:
        return self.get(window_id) is not None

    def get(self, window_id) -> Optional[PanelWindow]:
        for win in self._windows:
            if win.id == window_id:
                return win
        return None

    def index_of(self, window_id) -> int:
        """Position of the window in stacking order, or -1."""
        for i, win in enumerate(self._windows):
            if win.id == window_id:
                return i
        return -1

    def occupants(self, zone_name: ZoneName) -> Tuple[PanelWindow, ...]:
        position = to_snap_position(zone_name)
        if position is SnapPosition.NONE:
            return ()
        return tuple(w for w in self._windows if w.snap_position is position)

    def window_at(self, x: float, y: float) -> Optional[PanelWindow]:
        """Topmost window containing the point."""
        for win in reversed(self._windows):
            if win.rect.contains(x, y):
                return win
        return None

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_viewport_size(self, width: float, height: float) -> None:
        """Record the viewport extent. Snapped windows are not reflowed."""
        self._viewport = Size(width, height)
        logger.debug("%s Viewport set to %sx%s", TAG_STORE, width, height)

    def set_default_size(self, width: float, height: float) -> None:
        """Size used by add() and by windows dragged out of a zone from now on."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Default window size must be positive: {width}x{height}")
        self._default_size = Size(width, height)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add(self) -> PanelWindow:
        """Create a free window at a random position inside the viewport."""
        width, height = self._default_size.width, self._default_size.height
        span_x = max(1, int(self._viewport.width - width))
        span_y = max(1, int(self._viewport.height - height))

        window = PanelWindow(
            id=self._ids.next_id(),
            position=Point(self._rng.randrange(span_x), self._rng.randrange(span_y)),
            size=Size(width, height),
            snap_position=SnapPosition.NONE,
            color=random_window_color(self._rng),
        )
        self._commit(self._windows + (window,))

        logger.info("%s Added window %d at (%d, %d)", TAG_STORE, window.id,
                    window.position.x, window.position.y)
        self._publish(EventType.WINDOW_ADDED, {"id": window.id})
        return window

    def remove(self, window_id) -> bool:
        """
        Remove a window; a snapped window's zone is re-split among the rest.

        Returns:
            True if a window was removed.
        """
        target = self.get(window_id)
        if target is None:
            logger.debug("%s remove: unknown window %r", TAG_STORE, window_id)
            return False

        remaining = [w for w in self._windows if w.id != window_id]
        if target.is_snapped:
            width, height = self.viewport_size
            remaining = arrange_windows(target.snap_position, width, height, remaining)
        self._commit(tuple(remaining))

        logger.info("%s Removed window %d (zone=%s)", TAG_STORE, target.id,
                    target.snap_position.value)
        self._publish(EventType.WINDOW_REMOVED, {
            "id": target.id,
            "zone": target.snap_position.value,
        })
        return True

    def update_position(self, window_id, x: float, y: float) -> bool:
        """
        Move a window freely.

        The window leaves any zone and reverts to the default size at once.
        If it was snapped, the zone it left is re-split among the others.

        Returns:
            True if the window exists.
        """
        target = self.get(window_id)
        if target is None:
            logger.debug("%s update_position: unknown window %r", TAG_STORE, window_id)
            return False

        moved = replace(
            target,
            position=Point(x, y),
            size=self._default_size,
            snap_position=SnapPosition.NONE,
        )
        windows = self._replaced(moved)
        if target.is_snapped:
            width, height = self.viewport_size
            windows = arrange_windows(target.snap_position, width, height, windows)
            logger.debug("%s Window %d left zone %s", TAG_STORE, target.id,
                         target.snap_position.value)
        self._commit(tuple(windows))

        self._publish(EventType.WINDOW_MOVED, {"id": moved.id, "x": x, "y": y})
        return True

    def commit_snap(
        self,
        window_id,
        zone_name: ZoneName,
        viewport_width: Optional[float] = None,
        viewport_height: Optional[float] = None,
    ) -> bool:
        """
        Snap a window into a zone and re-split that zone.

        A window moving straight from one zone into another also triggers a
        re-split of the zone it left.

        Args:
            window_id: Window to snap
            zone_name: Target zone
            viewport_width: Viewport width (store viewport when omitted)
            viewport_height: Viewport height (store viewport when omitted)

        Returns:
            True if the window was snapped.
        """
        target = self.get(window_id)
        if target is None:
            logger.debug("%s commit_snap: unknown window %r", TAG_STORE, window_id)
            return False
        zone = lookup_zone(zone_name)
        if zone is None:
            logger.debug("%s commit_snap: unknown zone %r", TAG_STORE, zone_name)
            return False

        width = self._viewport.width if viewport_width is None else viewport_width
        height = self._viewport.height if viewport_height is None else viewport_height

        windows = self._replaced(replace(target, snap_position=zone.position))
        windows = arrange_windows(zone.position, width, height, windows)
        previous = target.snap_position
        if previous is not SnapPosition.NONE and previous is not zone.position:
            windows = arrange_windows(previous, width, height, windows)
        self._commit(tuple(windows))

        logger.info("%s Snapped window %d to %s (%d occupant(s))", TAG_STORE,
                    target.id, zone.name, len(self.occupants(zone.position)))
        self._publish(EventType.WINDOW_SNAPPED, {
            "id": target.id,
            "zone": zone.name,
            "previous": previous.value,
        })
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _replaced(self, window: PanelWindow) -> list:
        return [window if w.id == window.id else w for w in self._windows]

    def _commit(self, windows: Sequence[PanelWindow]) -> None:
        self._windows = tuple(windows)
        self.windows_changed.emit()

    def _publish(self, event_type: str, data: dict) -> None:
        if self._event_system is not None:
            self._event_system.publish(event_type, data=data, source=self)
