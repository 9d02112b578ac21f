"""
Snap-target overlay painting.

Draws all eight zones with a faint fill while a drag is active and
highlights the armed zone. Zones overlap (halves vs. quarters), so the
hovered zone is painted last to keep its border on top.
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QPainter, QPen

from core.snapping.drag_controller import OverlayState
from rendering.panel_painter import to_qrectf
from ui.color_utils import ZONE_HOVER_BORDER, ZONE_HOVER_FILL, ZONE_IDLE_FILL, BODY_TEXT_COLOR

HOVER_BORDER_WIDTH = 2


def paint_snap_overlay(painter: QPainter, overlay: OverlayState, show_labels: bool = False) -> None:
    """Paint the overlay; does nothing when it is not visible."""
    if not overlay.visible:
        return

    painter.save()
    try:
        painter.setPen(Qt.PenStyle.NoPen)
        for position, rect in overlay.zones.items():
            if position is overlay.hovered:
                continue
            painter.fillRect(to_qrectf(rect), ZONE_IDLE_FILL)

        hovered = overlay.zones.get(overlay.hovered)
        if hovered is not None:
            area = to_qrectf(hovered)
            painter.fillRect(area, ZONE_HOVER_FILL)
            pen = QPen(ZONE_HOVER_BORDER)
            pen.setWidth(HOVER_BORDER_WIDTH)
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            inset = HOVER_BORDER_WIDTH / 2
            painter.drawRect(area.adjusted(inset, inset, -inset, -inset))

        if show_labels:
            painter.setPen(BODY_TEXT_COLOR)
            for position, rect in overlay.zones.items():
                painter.drawText(to_qrectf(rect), Qt.AlignmentFlag.AlignCenter, position.value)
    finally:
        painter.restore()
