"""
Panel painting and title-bar hit geometry.

The workspace paints panels itself rather than using one child widget per
window; the hit rectangles used for drag presses and the close glyph live
here so painting and hit-testing can never disagree.
"""
from __future__ import annotations

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QFont, QPainter, QPen

from core.constants.layout import CLOSE_BUTTON_SIZE
from core.snapping.geometry import Rect
from core.snapping.models import PanelWindow
from ui.color_utils import (
    BODY_TEXT_COLOR,
    BORDER_COLOR,
    CLOSE_BUTTON_COLOR,
    TITLE_BAR_COLOR,
    TITLE_TEXT_COLOR,
    hex_to_qcolor,
)

TITLE_PADDING = 8


def to_qrectf(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.width, rect.height)


def close_button_rect(window: PanelWindow, title_height: float) -> Rect:
    """Square close glyph, vertically centered at the right end of the title."""
    title = window.title_rect(title_height)
    size = min(CLOSE_BUTTON_SIZE, title.height, title.width)
    return Rect(
        title.right - size - (title.height - size) / 2,
        title.y + (title.height - size) / 2,
        size,
        size,
    )


def paint_panel(painter: QPainter, window: PanelWindow, index: int, title_height: float) -> None:
    """
    Paint one panel.

    Args:
        painter: Active painter on the workspace
        window: Window to draw
        index: Zero-based stacking index, shown 1-based in the labels
        title_height: Height of the title strip
    """
    body = to_qrectf(window.rect)
    title = to_qrectf(window.title_rect(title_height))
    label = index + 1

    painter.save()
    try:
        painter.fillRect(body, hex_to_qcolor(window.color))
        painter.fillRect(title, TITLE_BAR_COLOR)

        painter.setPen(TITLE_TEXT_COLOR)
        painter.drawText(
            title.adjusted(TITLE_PADDING, 0, -TITLE_PADDING, 0),
            Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter,
            f"Window {label}",
        )

        close = to_qrectf(close_button_rect(window, title_height))
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(CLOSE_BUTTON_COLOR)
        painter.drawRoundedRect(close, 3, 3)
        painter.setPen(TITLE_TEXT_COLOR)
        painter.drawText(close, Qt.AlignmentFlag.AlignCenter, "×")

        content = body.adjusted(TITLE_PADDING, title.height() + TITLE_PADDING,
                                -TITLE_PADDING, -TITLE_PADDING)
        if content.isValid():
            font = QFont(painter.font())
            font.setPointSizeF(font.pointSizeF() * 1.25)
            painter.setFont(font)
            painter.setPen(BODY_TEXT_COLOR)
            painter.drawText(content, Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop,
                             f"Node {label}")

        pen = QPen(BORDER_COLOR)
        pen.setWidth(1)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(body.adjusted(0, 0, -1, -1))
    finally:
        painter.restore()
