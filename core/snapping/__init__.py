"""Snap-zone detection, arrangement and drag handling for SnapDeck."""

from .arrangement import arrange_windows
from .drag_controller import (
    DragController,
    DragSession,
    DragState,
    OverlayState,
    PointerEvent,
    PointerPhase,
    detect_snap_zone,
)
from .geometry import Point, Rect, Size
from .models import PanelWindow
from .window_store import WindowIdAllocator, WindowStore
from .zones import (
    SNAP_ZONES,
    SnapPosition,
    SnapZone,
    ZoneCategory,
    all_zone_rects,
    lookup_zone,
    zone_rect,
)

__all__ = [
    'arrange_windows',
    'DragController',
    'DragSession',
    'DragState',
    'OverlayState',
    'PointerEvent',
    'PointerPhase',
    'detect_snap_zone',
    'Point',
    'Rect',
    'Size',
    'PanelWindow',
    'WindowIdAllocator',
    'WindowStore',
    'SNAP_ZONES',
    'SnapPosition',
    'SnapZone',
    'ZoneCategory',
    'all_zone_rects',
    'lookup_zone',
    'zone_rect',
]
