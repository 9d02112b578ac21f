"""
Drag controller - pointer-driven state machine for moving and snapping windows.

States:
    IDLE      no drag in progress, overlay hidden
    DRAGGING  one window follows the pointer, overlay visible

A press on a window's title bar starts a drag. Each move either arms a snap
zone (pointer within the margin of a viewport edge) or moves the window
freely. Release snaps the window into the armed zone, if any, and always
returns to IDLE.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Optional

from PySide6.QtCore import QObject, Signal

from core.constants.layout import SNAP_MARGIN_PX
from core.events import EventSystem, EventType
from core.logging.logger import get_logger, is_verbose_logging
from core.logging.tags import TAG_DRAG
from core.snapping.geometry import Point, Rect
from core.snapping.window_store import WindowStore
from core.snapping.zones import SnapPosition, all_zone_rects

logger = get_logger(__name__)

class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class PointerPhase(Enum):
    PRESS = "press"
    MOVE = "move"
    RELEASE = "release"


@dataclass(frozen=True)
class PointerEvent:
    """Pointer input in viewport coordinates.

    ``target_id`` names the window whose title bar was pressed and is only
    meaningful for PRESS.
    """
    x: float
    y: float
    phase: PointerPhase
    target_id: Optional[int] = None


@dataclass(frozen=True)
class DragSession:
    window_id: int
    offset: Point
    hovered_zone: SnapPosition = SnapPosition.NONE


@dataclass(frozen=True)
class OverlayState:
    """What the rendering layer needs to draw the snap targets."""
    visible: bool
    hovered: SnapPosition
    zones: Dict[SnapPosition, Rect] = field(default_factory=dict)


def detect_snap_zone(
    x: float,
    y: float,
    viewport_width: float,
    viewport_height: float,
    margin: float = SNAP_MARGIN_PX,
) -> SnapPosition:
    """
    Map a pointer position to the zone it arms.

    Corners win when both axes are within the margin of their edges; a
    single edge wins when only one axis is. Otherwise NONE.
    """
    near_left = x < margin
    near_right = x > viewport_width - margin
    near_top = y < margin
    near_bottom = y > viewport_height - margin

    if near_left and near_top:
        return SnapPosition.TOP_LEFT
    if near_right and near_top:
        return SnapPosition.TOP_RIGHT
    if near_left and near_bottom:
        return SnapPosition.BOTTOM_LEFT
    if near_right and near_bottom:
        return SnapPosition.BOTTOM_RIGHT
    if near_left:
        return SnapPosition.LEFT
    if near_right:
        return SnapPosition.RIGHT
    if near_top:
        return SnapPosition.TOP
    if near_bottom:
        return SnapPosition.BOTTOM
    return SnapPosition.NONE


class DragController(QObject):
    """
    Consumes pointer events and drives the window store.

    There is at most one drag session at a time. Events that do not fit the
    current state (move or release while idle, press while dragging, press
    on an unknown window) are ignored. Zone detection, the overlay and every
    layout the store computes all read the store's viewport extent.
    """

    drag_started = Signal(int)                 # window id
    drag_finished = Signal(int, str)           # window id, zone value or ""
    hovered_zone_changed = Signal(str)         # zone value ("none" when cleared)
    overlay_visibility_changed = Signal(bool)

    def __init__(
        self,
        store: WindowStore,
        margin: float = SNAP_MARGIN_PX,
        event_system: Optional[EventSystem] = None,
    ):
        """
        Initialize the controller.

        Args:
            store: Window store that receives moves and snaps
            margin: Edge proximity in pixels that arms a zone
            event_system: Optional bus that receives drag.* events
        """
        super().__init__()
        if margin < 0:
            raise ValueError(f"Snap margin must not be negative: {margin}")
        self._store = store
        self._margin = margin
        self._event_system = event_system
        self._session: Optional[DragSession] = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> DragState:
        return DragState.IDLE if self._session is None else DragState.DRAGGING

    @property
    def is_dragging(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> Optional[DragSession]:
        return self._session

    @property
    def hovered_zone(self) -> SnapPosition:
        if self._session is None:
            return SnapPosition.NONE
        return self._session.hovered_zone

    @property
    def overlay_visible(self) -> bool:
        return self._session is not None

    @property
    def margin(self) -> float:
        return self._margin

    def set_margin(self, margin: float) -> None:
        if margin < 0:
            raise ValueError(f"Snap margin must not be negative: {margin}")
        self._margin = margin
        logger.debug("%s Snap margin set to %s", TAG_DRAG, margin)

    def overlay_state(self) -> OverlayState:
        width, height = self._store.viewport_size
        return OverlayState(
            visible=self.overlay_visible,
            hovered=self.hovered_zone,
            zones=all_zone_rects(width, height),
        )

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_event(self, event: PointerEvent) -> bool:
        """
        Dispatch a pointer event.

        Returns:
            True if the event caused a state transition or store update.
        """
        if event.phase is PointerPhase.PRESS:
            return self.press(event.x, event.y, event.target_id)
        if event.phase is PointerPhase.MOVE:
            return self.move(event.x, event.y)
        return self.release(event.x, event.y)

    def press(self, x: float, y: float, window_id: Optional[int]) -> bool:
        """IDLE -> DRAGGING on a title-bar press."""
        if self._session is not None:
            logger.debug("%s Press ignored, already dragging window %d",
                         TAG_DRAG, self._session.window_id)
            return False
        window = self._store.get(window_id)
        if window is None:
            logger.debug("%s Press ignored, unknown window %r", TAG_DRAG, window_id)
            return False

        offset = Point(x, y) - window.position
        self._session = DragSession(window_id=window.id, offset=offset)

        logger.debug("%s Drag start: window %d offset (%.1f, %.1f)",
                     TAG_DRAG, window.id, offset.x, offset.y)
        self.drag_started.emit(window.id)
        self.overlay_visibility_changed.emit(True)
        self._publish(EventType.DRAG_STARTED, {"id": window.id})
        return True

    def move(self, x: float, y: float) -> bool:
        """Update the armed zone, or move the window freely when none is armed."""
        session = self._session
        if session is None:
            return False

        width, height = self._store.viewport_size
        zone = detect_snap_zone(x, y, width, height, self._margin)

        if zone is not session.hovered_zone:
            self._session = replace(session, hovered_zone=zone)
            logger.debug("%s Hovered zone: %s", TAG_DRAG, zone.value)
            self.hovered_zone_changed.emit(zone.value)

        if zone is not SnapPosition.NONE:
            return True

        new_x = x - session.offset.x
        new_y = y - session.offset.y
        if is_verbose_logging():
            logger.debug("%s Free move window %d to (%.1f, %.1f)",
                         TAG_DRAG, session.window_id, new_x, new_y)
        self._store.update_position(session.window_id, new_x, new_y)
        return True

    def release(self, x: float, y: float) -> bool:
        """DRAGGING -> IDLE, snapping into the armed zone if there is one."""
        session = self._session
        if session is None:
            return False

        zone = session.hovered_zone
        if zone is not SnapPosition.NONE:
            self._store.commit_snap(session.window_id, zone)

        self._session = None
        if zone is not SnapPosition.NONE:
            self.hovered_zone_changed.emit(SnapPosition.NONE.value)
        self.overlay_visibility_changed.emit(False)

        zone_value = "" if zone is SnapPosition.NONE else zone.value
        logger.debug("%s Drag end: window %d zone=%s", TAG_DRAG, session.window_id,
                     zone_value or "-")
        self.drag_finished.emit(session.window_id, zone_value)
        self._publish(EventType.DRAG_FINISHED, {"id": session.window_id, "zone": zone_value})
        return True

    def _publish(self, event_type: str, data: dict) -> None:
        if self._event_system is not None:
            self._event_system.publish(event_type, data=data, source=self)
