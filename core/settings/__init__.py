"""Settings management for SnapDeck."""

from .settings_manager import SettingsManager, get_default_settings

__all__ = ['SettingsManager', 'get_default_settings']
