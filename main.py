"""
SnapDeck - Main Entry Point

Desktop workspace of draggable panels that snap into the screen edges and
corners, sharing a zone with any panels already snapped there.
"""
import argparse
import sys
from typing import List, Optional, Tuple

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication

from core.constants.layout import DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH, SNAP_MARGIN_PX
from core.events import EventSystem
from core.logging.logger import get_logger, setup_logging
from core.settings.settings_manager import SettingsManager
from core.snapping.drag_controller import DragController
from core.snapping.geometry import Size
from core.snapping.window_store import WindowStore
from ui.main_window import MainWindow
from versioning import APP_NAME, APP_VERSION

logger = get_logger(__name__)


def parse_size(text: str) -> Tuple[int, int]:
    """Parse ``WxH`` (e.g. ``1200x800``) for argparse."""
    try:
        width_text, height_text = text.lower().split("x", 1)
        width, height = int(width_text), int(height_text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}")
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {text!r}")
    return width, height


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME.lower(), description=APP_NAME)
    parser.add_argument("-d", "--debug", action="store_true",
                        help="enable debug logging and console output")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="also log every pointer move (implies --debug)")
    parser.add_argument("--windows", type=int, default=0, metavar="N",
                        help="number of windows to open at start-up")
    parser.add_argument("--size", type=parse_size, default=None, metavar="WxH",
                        help="initial main window size")
    return parser


def build_core(
    settings_manager: SettingsManager,
    event_system: EventSystem,
) -> Tuple[WindowStore, DragController]:
    """Create the window store and drag controller from configuration."""
    default_size = Size(
        settings_manager.get_int('windows.default_width', DEFAULT_WINDOW_WIDTH),
        settings_manager.get_int('windows.default_height', DEFAULT_WINDOW_HEIGHT),
    )
    store = WindowStore(default_size=default_size, event_system=event_system)
    controller = DragController(
        store,
        margin=settings_manager.get_int('snapping.margin_px', SNAP_MARGIN_PX),
        event_system=event_system,
    )
    settings_manager.on_changed(
        'snapping.margin_px',
        lambda value, _old: controller.set_margin(SettingsManager.to_int(value, SNAP_MARGIN_PX)),
    )

    def apply_default_size(_value, _old) -> None:
        store.set_default_size(
            settings_manager.get_int('windows.default_width', DEFAULT_WINDOW_WIDTH),
            settings_manager.get_int('windows.default_height', DEFAULT_WINDOW_HEIGHT),
        )

    for key in ('windows.default_width', 'windows.default_height'):
        settings_manager.on_changed(key, apply_default_size)
    return store, controller


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the SnapDeck application."""
    args = build_arg_parser().parse_args(argv)
    setup_logging(debug=args.debug, verbose=args.verbose)

    logger.info("=" * 60)
    logger.info("%s %s Starting", APP_NAME, APP_VERSION)
    logger.info("=" * 60)

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )
    app = QApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)

    settings_manager = SettingsManager(organization=APP_NAME, application=APP_NAME)
    event_system = EventSystem()
    store, controller = build_core(settings_manager, event_system)

    window = MainWindow(store, controller, settings_manager, event_system)
    if args.size is not None:
        window.resize(*args.size)
    window.show()

    for _ in range(max(0, args.windows)):
        store.add()

    exit_code = app.exec()

    logger.info("=" * 60)
    logger.info("%s Exiting (code=%s)", APP_NAME, exit_code)
    logger.info("=" * 60)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
