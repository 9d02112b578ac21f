"""
Settings manager implementation for SnapDeck.

Uses QSettings for persistent storage of configuration only. Window layout is
never written here; every run starts with an empty workspace.
"""
from typing import Any, Callable, Dict, List
import threading
from PySide6.QtCore import QSettings, QObject, Signal

from core.constants.layout import (
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    SNAP_ANIMATION_MS,
    SNAP_MARGIN_PX,
    TITLE_BAR_HEIGHT,
)
from core.logging.logger import get_logger, is_verbose_logging
from core.logging.tags import TAG_SETTINGS

logger = get_logger('SettingsManager')


def get_default_settings() -> Dict[str, Any]:
    """Return the canonical default value for every known key."""
    return {
        'snapping.margin_px': SNAP_MARGIN_PX,
        'windows.default_width': DEFAULT_WINDOW_WIDTH,
        'windows.default_height': DEFAULT_WINDOW_HEIGHT,
        'windows.title_height': TITLE_BAR_HEIGHT,
        'rendering.show_zone_labels': False,
        'rendering.snap_animation_ms': SNAP_ANIMATION_MS,
    }


class SettingsManager(QObject):
    """
    Centralized settings management.

    Uses QSettings for persistent storage with organization/application name.
    Thread-safe with change notifications.
    """

    # Signal emitted when settings change
    settings_changed = Signal(str, object)  # key, new_value

    def __init__(self, organization: str = "SnapDeck",
                 application: str = "SnapDeck"):
        """
        Initialize the settings manager.

        Args:
            organization: Organization name for QSettings
            application: Application name for QSettings
        """
        super().__init__()

        self._settings = QSettings(organization, application)
        self._lock = threading.RLock()
        self._change_handlers: Dict[str, List[Callable]] = {}

        self._set_defaults()

        logger.info("SettingsManager initialized")

    def _set_defaults(self) -> None:
        """Set default values if not already present."""
        with self._lock:
            for key, value in get_default_settings().items():
                if not self._settings.contains(key):
                    self._settings.setValue(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value.

        Args:
            key: Setting key in dot notation (e.g., 'snapping.margin_px')
            default: Default value if key not found

        Returns:
            Setting value or default
        """
        with self._lock:
            return self._settings.value(key, default)

    @staticmethod
    def to_bool(value: Any, default: bool = False) -> bool:
        """Normalize a stored setting value to bool.

        Accepts common string forms ("true", "1", "yes", "on") as True and
        ("false", "0", "no", "off") as False. Falls back to bool(value) or
        the provided default when the value cannot be interpreted.
        """
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            v = value.strip().lower()
            if v in ("true", "1", "yes", "on"):
                return True
            if v in ("false", "0", "no", "off"):
                return False
            return default
        if value is None:
            return default
        return bool(value)

    @staticmethod
    def to_int(value: Any, default: int = 0) -> int:
        """Normalize a stored setting value to int.

        QSettings backends that store text (INI, some registry paths) hand
        numbers back as strings, so those are parsed here.
        """
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int):
            return value
        try:
            return int(float(str(value).strip()))
        except (TypeError, ValueError):
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Convenience wrapper around get() that normalizes to bool."""
        raw = self.get(key, default)
        return self.to_bool(raw, default)

    def get_int(self, key: str, default: int = 0) -> int:
        """Convenience wrapper around get() that normalizes to int."""
        raw = self.get(key, default)
        return self.to_int(raw, default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a setting value.

        Args:
            key: Setting key in dot notation
            value: Value to set
        """
        with self._lock:
            old_value = self._settings.value(key)
            self._settings.setValue(key, value)

            self.settings_changed.emit(key, value)

            for handler in self._change_handlers.get(key, []):
                try:
                    handler(value, old_value)
                except Exception as e:
                    logger.error(f"Error in change handler for {key}: {e}")

        if is_verbose_logging():
            logger.debug("%s Setting changed: %s: %r -> %r", TAG_SETTINGS, key, old_value, value)
        else:
            logger.debug("%s Setting changed: %s", TAG_SETTINGS, key)

    def on_changed(self, key: str, handler: Callable[[Any, Any], None]) -> None:
        """
        Register a handler for when a specific setting changes.

        Args:
            key: Setting key to watch
            handler: Callback function(new_value, old_value)
        """
        with self._lock:
            self._change_handlers.setdefault(key, []).append(handler)

        logger.debug(f"Registered change handler for {key}")

    def reset_to_defaults(self) -> None:
        """Reset all settings to default values."""
        with self._lock:
            self._settings.clear()
            for key, value in get_default_settings().items():
                self._settings.setValue(key, value)
            self._settings.sync()

        logger.info("Settings reset to defaults")
        self.settings_changed.emit('*', None)  # Signal that all changed

    def contains(self, key: str) -> bool:
        """Check if a setting key exists."""
        with self._lock:
            return self._settings.contains(key)

    def remove(self, key: str) -> None:
        """Remove a setting key."""
        with self._lock:
            self._settings.remove(key)
        logger.debug(f"Removed setting: {key}")

    def clear(self) -> None:
        """Clear all settings (use with caution)."""
        with self._lock:
            self._settings.clear()
        logger.warning("All settings cleared")
