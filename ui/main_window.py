"""Main window for SnapDeck.

Hosts the workspace, the floating "+" add button and a status bar that
follows window store activity through the event system.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QSize
from PySide6.QtGui import QResizeEvent
from PySide6.QtWidgets import QMainWindow, QPushButton, QWidget

from core.events import Event, EventSystem, EventType
from core.logging.logger import get_logger
from core.logging.tags import TAG_UI
from core.settings.settings_manager import SettingsManager
from core.snapping.drag_controller import DragController
from core.snapping.window_store import WindowStore
from rendering.widget_positioner import PositionAnchor, WidgetPositioner
from rendering.workspace_widget import WorkspaceWidget
from versioning import APP_NAME, APP_VERSION

logger = get_logger(__name__)

ADD_BUTTON_STYLE = (
    "QPushButton {"
    " background-color: #9333ea; color: white; border: none;"
    " border-radius: 4px; padding: 8px 16px; font-size: 16px;"
    "}"
    "QPushButton:hover { background-color: #7e22ce; }"
)

_STATUS_TEXT = {
    EventType.WINDOW_ADDED: "Added window {id}",
    EventType.WINDOW_REMOVED: "Closed window {id}",
    EventType.WINDOW_SNAPPED: "Window {id} snapped to {zone}",
}


class MainWindow(QMainWindow):
    """Top-level window wiring the store, controller and workspace together."""

    def __init__(
        self,
        store: WindowStore,
        controller: DragController,
        settings_manager: Optional[SettingsManager] = None,
        event_system: Optional[EventSystem] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._store = store
        self._event_system = event_system
        self._subscriptions: list[str] = []

        self.setWindowTitle(f"{APP_NAME} {APP_VERSION}")

        self.workspace = WorkspaceWidget(store, controller, settings_manager, self)
        self.setCentralWidget(self.workspace)

        self.add_button = QPushButton("+", self.workspace)
        self.add_button.setStyleSheet(ADD_BUTTON_STYLE)
        self.add_button.setToolTip("Add window")
        self.add_button.clicked.connect(self._on_add_clicked)

        self._positioner = WidgetPositioner(self.workspace.size())

        if event_system is not None:
            for event_type in _STATUS_TEXT:
                self._subscriptions.append(
                    event_system.subscribe(event_type, self._on_store_event, priority=10)
                )

        self.statusBar().showMessage("Ready")
        self.resize(QSize(1200, 800))
        logger.info("%s MainWindow created", TAG_UI)

    def _on_add_clicked(self) -> None:
        window = self._store.add()
        logger.debug("%s Add requested -> window %d", TAG_UI, window.id)

    def _on_store_event(self, event: Event) -> None:
        template = _STATUS_TEXT.get(event.event_type)
        if template is None:
            return
        self.statusBar().showMessage(template.format(**(event.data or {})))

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self._positioner.set_container_size(self.workspace.size())
        self._positioner.position_widget(self.add_button, PositionAnchor.BOTTOM_RIGHT)

    def closeEvent(self, event) -> None:
        if self._event_system is not None:
            for sub_id in self._subscriptions:
                self._event_system.unsubscribe(sub_id)
            self._subscriptions.clear()
        super().closeEvent(event)
