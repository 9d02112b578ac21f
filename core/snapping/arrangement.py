"""
Arrangement engine.

Pure function that partitions a zone among the windows snapped to it:

- left/right: equal bands stacked top to bottom, full zone width each
- top/bottom: equal columns left to right, full zone height each
- corners: every occupant receives the whole corner rectangle, so several
  occupants of one corner overlap exactly

Occupants keep their relative order from the collection. Windows outside
the zone pass through untouched.
"""
from __future__ import annotations

from typing import List, Sequence

from core.logging.logger import get_logger
from core.logging.tags import TAG_ARRANGE
from core.snapping.geometry import Point, Size
from core.snapping.models import PanelWindow
from core.snapping.zones import ZoneCategory, ZoneName, lookup_zone

logger = get_logger(__name__)


def arrange_windows(
    zone_name: ZoneName,
    viewport_width: float,
    viewport_height: float,
    windows: Sequence[PanelWindow],
) -> List[PanelWindow]:
    """
    Recompute geometry for every window snapped to ``zone_name``.

    Args:
        zone_name: Target zone (SnapPosition or its string value)
        viewport_width: Current viewport width
        viewport_height: Current viewport height
        windows: Full window collection in stacking order

    Returns:
        New list with the zone's occupants repositioned. An unknown zone or
        an empty occupant set returns the collection unchanged.
    """
    zone = lookup_zone(zone_name)
    if zone is None:
        logger.debug("%s Unknown zone %r, nothing to arrange", TAG_ARRANGE, zone_name)
        return list(windows)

    occupants = [w for w in windows if w.snap_position is zone.position]
    if not occupants:
        logger.debug("%s Zone %s has no occupants", TAG_ARRANGE, zone.name)
        return list(windows)

    area = zone.to_rect(viewport_width, viewport_height)
    count = len(occupants)
    category = zone.category

    arranged = {}
    if category is ZoneCategory.VERTICAL_STACK:
        band_height = area.height / count
        for i, win in enumerate(occupants):
            arranged[win.id] = win.with_geometry(
                Point(area.x, area.y + i * band_height),
                Size(area.width, band_height),
            )
    elif category is ZoneCategory.HORIZONTAL_STACK:
        column_width = area.width / count
        for i, win in enumerate(occupants):
            arranged[win.id] = win.with_geometry(
                Point(area.x + i * column_width, area.y),
                Size(column_width, area.height),
            )
    else:
        for win in occupants:
            arranged[win.id] = win.with_geometry(area.top_left, area.size)

    logger.debug(
        "%s %s split %d way(s) over (%.1f, %.1f, %.1f, %.1f)",
        TAG_ARRANGE, zone.name, count, area.x, area.y, area.width, area.height,
    )
    return [arranged.get(w.id, w) for w in windows]
