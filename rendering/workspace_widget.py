"""
Workspace widget - the viewport that hosts all panels.

Holds no layout state of its own. It paints the window store's collection
and the snap overlay, and translates Qt mouse events into PointerEvents for
the drag controller. Close glyph presses go straight to the store.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QWidget

from core.constants.layout import SNAP_ANIMATION_MS, TITLE_BAR_HEIGHT
from core.logging.logger import get_logger
from core.logging.tags import TAG_RENDER
from core.settings.settings_manager import SettingsManager
from core.snapping.drag_controller import DragController, PointerEvent, PointerPhase
from core.snapping.window_store import WindowStore
from rendering.panel_painter import close_button_rect, paint_panel
from rendering.snap_animator import SnapAnimator
from rendering.snap_overlay import paint_snap_overlay
from ui.color_utils import WORKSPACE_BACKGROUND

logger = get_logger(__name__)


class WorkspaceWidget(QWidget):
    """
    Paints panels and feeds pointer input to the drag controller.

    Responsibilities:
    - Keep the store's viewport extent in sync with the widget size
    - Hit-test presses against title bars and close glyphs
    - Repaint whenever the store or the overlay state changes
    - Glide snapped panels into place through a SnapAnimator
    """

    close_requested = Signal(int)  # window id

    def __init__(
        self,
        store: WindowStore,
        controller: DragController,
        settings_manager: Optional[SettingsManager] = None,
        parent: Optional[QWidget] = None,
    ):
        """
        Initialize the workspace.

        Args:
            store: Window store to paint and hit-test
            controller: Drag controller that receives pointer events
            settings_manager: Optional source for title height, overlay labels
                and snap animation duration
            parent: Parent widget
        """
        super().__init__(parent)
        self._store = store
        self._controller = controller
        self._settings_manager = settings_manager

        self.setMouseTracking(True)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent, True)

        self._animator = SnapAnimator(self.snap_animation_ms(), self)
        self._animator.sync(store.windows)
        self._animator.frame.connect(self.update)
        if settings_manager is not None:
            settings_manager.on_changed('rendering.snap_animation_ms', self._on_animation_setting)

        store.windows_changed.connect(self._on_windows_changed)
        controller.hovered_zone_changed.connect(self.update)
        controller.overlay_visibility_changed.connect(self.update)
        self.close_requested.connect(store.remove)

        logger.debug("%s WorkspaceWidget created", TAG_RENDER)

    # =========================================================================
    # Configuration
    # =========================================================================

    def title_height(self) -> int:
        if self._settings_manager is None:
            return TITLE_BAR_HEIGHT
        return self._settings_manager.get_int('windows.title_height', TITLE_BAR_HEIGHT)

    def show_zone_labels(self) -> bool:
        if self._settings_manager is None:
            return False
        return self._settings_manager.get_bool('rendering.show_zone_labels', False)

    def snap_animation_ms(self) -> int:
        if self._settings_manager is None:
            return SNAP_ANIMATION_MS
        return max(0, self._settings_manager.get_int('rendering.snap_animation_ms', SNAP_ANIMATION_MS))

    @property
    def animator(self) -> SnapAnimator:
        return self._animator

    def _on_animation_setting(self, _value, _old) -> None:
        self._animator.set_duration(self.snap_animation_ms())

    def _on_windows_changed(self) -> None:
        self._animator.sync(self._store.windows)
        self.update()

    # =========================================================================
    # Qt events
    # =========================================================================

    def resizeEvent(self, event: QResizeEvent) -> None:
        size = event.size()
        self._store.set_viewport_size(size.width(), size.height())
        super().resizeEvent(event)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        pos = event.position()
        x, y = pos.x(), pos.y()
        window = self._store.window_at(x, y)
        if window is None:
            event.ignore()
            return

        title_height = self.title_height()
        if close_button_rect(window, title_height).contains(x, y):
            logger.debug("%s Close glyph pressed on window %d", TAG_RENDER, window.id)
            self.close_requested.emit(window.id)
        elif window.title_rect(title_height).contains(x, y):
            self._controller.handle_event(PointerEvent(x, y, PointerPhase.PRESS, window.id))
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if not self._controller.is_dragging:
            super().mouseMoveEvent(event)
            return
        pos = event.position()
        self._controller.handle_event(PointerEvent(pos.x(), pos.y(), PointerPhase.MOVE))
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton or not self._controller.is_dragging:
            super().mouseReleaseEvent(event)
            return
        pos = event.position()
        self._controller.handle_event(PointerEvent(pos.x(), pos.y(), PointerPhase.RELEASE))
        event.accept()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            painter.fillRect(self.rect(), WORKSPACE_BACKGROUND)

            # Zones sit beneath the panels so the dragged window stays visible.
            paint_snap_overlay(painter, self._controller.overlay_state(), self.show_zone_labels())

            title_height = self.title_height()
            for index, window in enumerate(self._store.windows):
                rect = self._animator.display_rect(window)
                if rect != window.rect:
                    window = window.with_geometry(rect.top_left, rect.size)
                paint_panel(painter, window, index, title_height)
        finally:
            painter.end()
