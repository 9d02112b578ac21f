"""
Widget Positioner - anchors floating controls to the workspace edges.

Used for the command buttons that float above the panels (the "+" add
button sits in the bottom-right corner). Panels themselves are positioned
by the snapping engine, never by this module.
"""
from __future__ import annotations

from enum import Enum

from PySide6.QtCore import QPoint, QRect, QSize
from PySide6.QtWidgets import QWidget

from core.logging.logger import get_logger

logger = get_logger(__name__)


class PositionAnchor(Enum):
    """Anchor point for a floating control."""
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


class WidgetPositioner:
    """
    Computes anchored positions inside a container.

    Positions are clamped so a control never leaves the container even when
    the margins exceed the available space.
    """

    DEFAULT_MARGIN = 24

    def __init__(self, container_size: QSize = None):
        """
        Initialize the WidgetPositioner.

        Args:
            container_size: Size of the container (workspace)
        """
        self._container_size = container_size or QSize(1920, 1080)

    def set_container_size(self, size: QSize) -> None:
        """Set the container size for positioning calculations."""
        self._container_size = size

    def calculate_position(
        self,
        widget_size: QSize,
        anchor: PositionAnchor,
        margin_x: int = DEFAULT_MARGIN,
        margin_y: int = DEFAULT_MARGIN,
    ) -> QPoint:
        """
        Calculate widget position based on anchor and margins.

        Args:
            widget_size: Size of the widget
            anchor: Position anchor
            margin_x: Horizontal margin from container edge
            margin_y: Vertical margin from container edge

        Returns:
            Calculated position as QPoint
        """
        container_w = self._container_size.width()
        container_h = self._container_size.height()
        widget_w = widget_size.width()
        widget_h = widget_size.height()

        if anchor in (PositionAnchor.TOP_LEFT, PositionAnchor.BOTTOM_LEFT):
            x = margin_x
        else:
            x = container_w - widget_w - margin_x

        if anchor in (PositionAnchor.TOP_LEFT, PositionAnchor.TOP_RIGHT):
            y = margin_y
        else:
            y = container_h - widget_h - margin_y

        x = max(0, min(x, container_w - widget_w))
        y = max(0, min(y, container_h - widget_h))

        return QPoint(x, y)

    def position_widget(
        self,
        widget: QWidget,
        anchor: PositionAnchor,
        margin_x: int = DEFAULT_MARGIN,
        margin_y: int = DEFAULT_MARGIN,
    ) -> QRect:
        """
        Move a widget to its anchored position.

        Args:
            widget: Widget to position
            anchor: Position anchor
            margin_x: Horizontal margin
            margin_y: Vertical margin

        Returns:
            Final geometry as QRect
        """
        widget_size = widget.sizeHint()
        if not widget_size.isValid() or widget_size.width() <= 0:
            widget_size = widget.size()

        pos = self.calculate_position(widget_size, anchor, margin_x, margin_y)
        geometry = QRect(pos, widget_size)
        widget.setGeometry(geometry)
        return geometry
