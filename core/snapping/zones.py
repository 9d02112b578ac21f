"""
Snap zone catalog.

Eight fixed regions expressed as fractions of the viewport extent. The
halves (left/right, top/bottom) and the four quarters each tile the whole
viewport on their own.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

from core.snapping.geometry import Rect


class ZoneCategory(Enum):
    """How a zone is shared among several occupants."""
    VERTICAL_STACK = "vertical_stack"      # bands stacked top to bottom
    HORIZONTAL_STACK = "horizontal_stack"  # columns left to right
    CORNER = "corner"                      # every occupant gets the full rect


class SnapPosition(Enum):
    """Zone a window is snapped to, or NONE for a free window."""
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    TOP_LEFT = "topleft"
    TOP_RIGHT = "topright"
    BOTTOM_LEFT = "bottomleft"
    BOTTOM_RIGHT = "bottomright"

    @property
    def category(self) -> Optional[ZoneCategory]:
        return _CATEGORIES.get(self)


_CATEGORIES: Dict[SnapPosition, ZoneCategory] = {
    SnapPosition.LEFT: ZoneCategory.VERTICAL_STACK,
    SnapPosition.RIGHT: ZoneCategory.VERTICAL_STACK,
    SnapPosition.TOP: ZoneCategory.HORIZONTAL_STACK,
    SnapPosition.BOTTOM: ZoneCategory.HORIZONTAL_STACK,
    SnapPosition.TOP_LEFT: ZoneCategory.CORNER,
    SnapPosition.TOP_RIGHT: ZoneCategory.CORNER,
    SnapPosition.BOTTOM_LEFT: ZoneCategory.CORNER,
    SnapPosition.BOTTOM_RIGHT: ZoneCategory.CORNER,
}


@dataclass(frozen=True)
class SnapZone:
    """A named region as fractions (0..1) of the viewport."""
    position: SnapPosition
    x: float
    y: float
    w: float
    h: float

    @property
    def name(self) -> str:
        return self.position.value

    @property
    def category(self) -> ZoneCategory:
        return _CATEGORIES[self.position]

    def to_rect(self, viewport_width: float, viewport_height: float) -> Rect:
        """Absolute rectangle of this zone for the given viewport extent."""
        return Rect(
            viewport_width * self.x,
            viewport_height * self.y,
            viewport_width * self.w,
            viewport_height * self.h,
        )


SNAP_ZONES: Dict[SnapPosition, SnapZone] = {
    zone.position: zone
    for zone in (
        SnapZone(SnapPosition.LEFT, 0.0, 0.0, 0.5, 1.0),
        SnapZone(SnapPosition.RIGHT, 0.5, 0.0, 0.5, 1.0),
        SnapZone(SnapPosition.TOP, 0.0, 0.0, 1.0, 0.5),
        SnapZone(SnapPosition.BOTTOM, 0.0, 0.5, 1.0, 0.5),
        SnapZone(SnapPosition.TOP_LEFT, 0.0, 0.0, 0.5, 0.5),
        SnapZone(SnapPosition.TOP_RIGHT, 0.5, 0.0, 0.5, 0.5),
        SnapZone(SnapPosition.BOTTOM_LEFT, 0.0, 0.5, 0.5, 0.5),
        SnapZone(SnapPosition.BOTTOM_RIGHT, 0.5, 0.5, 0.5, 0.5),
    )
}


ZoneName = Union[SnapPosition, str, None]


def to_snap_position(name: ZoneName) -> SnapPosition:
    """Coerce a zone name (enum, string value, or None) to SnapPosition.

    Unknown strings map to NONE rather than raising.
    """
    if isinstance(name, SnapPosition):
        return name
    if name is None:
        return SnapPosition.NONE
    try:
        return SnapPosition(str(name).strip().lower())
    except ValueError:
        return SnapPosition.NONE


def lookup_zone(name: ZoneName) -> Optional[SnapZone]:
    """Return the zone for ``name``, or None when it names no zone."""
    return SNAP_ZONES.get(to_snap_position(name))


def zone_rect(name: ZoneName, viewport_width: float, viewport_height: float) -> Optional[Rect]:
    """Absolute rectangle for ``name``, or None when it names no zone."""
    zone = lookup_zone(name)
    if zone is None:
        return None
    return zone.to_rect(viewport_width, viewport_height)


def all_zone_rects(viewport_width: float, viewport_height: float) -> Dict[SnapPosition, Rect]:
    """Absolute rectangles of all eight zones, in catalog order."""
    return {
        position: zone.to_rect(viewport_width, viewport_height)
        for position, zone in SNAP_ZONES.items()
    }
