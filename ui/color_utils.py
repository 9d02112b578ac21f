"""Centralized color conversion utilities for painting.

Window colors are stored as ``#rrggbb`` strings in the core; everything that
paints converts through these helpers instead of building QColors inline.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtGui import QColor

from core.logging.logger import get_logger

logger = get_logger(__name__)

TITLE_BAR_COLOR = QColor(31, 41, 55)         # dark slate strip
TITLE_TEXT_COLOR = QColor(255, 255, 255)
CLOSE_BUTTON_COLOR = QColor(239, 68, 68)
BODY_TEXT_COLOR = QColor(17, 24, 39)
BORDER_COLOR = QColor(0, 0, 0, 90)
WORKSPACE_BACKGROUND = QColor(243, 244, 246)

ZONE_IDLE_FILL = QColor(0, 0, 0, 13)          # rgba(0,0,0,0.05)
ZONE_HOVER_FILL = QColor(0, 255, 255, 38)     # rgba(0,255,255,0.15)
ZONE_HOVER_BORDER = QColor(0, 255, 255)


def hex_to_qcolor(value: Optional[str], fallback: Optional[QColor] = None) -> QColor:
    """Parse ``#rrggbb`` into a QColor.

    Args:
        value: Color string as stored on a window.
        fallback: Returned for missing or unparsable input. Light grey when
            omitted.

    Returns:
        A valid QColor.
    """
    if fallback is None:
        fallback = QColor(204, 204, 204)
    if not value:
        return QColor(fallback)
    color = QColor(value)
    if not color.isValid():
        logger.debug("[COLOR_UTILS] Invalid color %r, using fallback", value)
        return QColor(fallback)
    return color

