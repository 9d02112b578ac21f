"""
Window entity for the snapping engine.

The window store replaces PanelWindow values instead of mutating them, so a
collection snapshot handed to a reader never changes underneath it.
"""
from __future__ import annotations

import colorsys
import random
from dataclasses import dataclass, replace

from core.constants.layout import WINDOW_LIGHTNESS, WINDOW_SATURATION
from core.snapping.geometry import Point, Rect, Size
from core.snapping.zones import SnapPosition


@dataclass(frozen=True)
class PanelWindow:
    """A movable panel on the workspace.

    ``snap_position`` is ``SnapPosition.NONE`` for a free window. While it
    names a zone, ``position`` and ``size`` are owned by the arrangement
    engine.
    """
    id: int
    position: Point
    size: Size
    snap_position: SnapPosition = SnapPosition.NONE
    color: str = "#cccccc"

    @property
    def rect(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.size.width, self.size.height)

    @property
    def is_snapped(self) -> bool:
        return self.snap_position is not SnapPosition.NONE

    def title_rect(self, title_height: float) -> Rect:
        """Strip at the top of the window that accepts drag presses."""
        return Rect(self.position.x, self.position.y,
                    self.size.width, min(title_height, self.size.height))

    def with_geometry(self, position: Point, size: Size) -> "PanelWindow":
        return replace(self, position=position, size=size)


def random_window_color(rng: random.Random) -> str:
    """Pastel color with a random hue, as ``#rrggbb``."""
    hue = rng.randrange(360)
    r, g, b = colorsys.hls_to_rgb(hue / 360.0, WINDOW_LIGHTNESS, WINDOW_SATURATION)
    return "#{:02x}{:02x}{:02x}".format(round(r * 255), round(g * 255), round(b * 255))
