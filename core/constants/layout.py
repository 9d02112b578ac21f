"""Layout constants for the snapping engine and workspace.

These are the built-in defaults; SettingsManager seeds its keys from them
and callers that have no settings instance fall back to them directly.
"""

# =============================================================================
# Free windows
# =============================================================================

DEFAULT_WINDOW_WIDTH = 200
"""Width of a window that is not snapped to any zone."""

DEFAULT_WINDOW_HEIGHT = 150
"""Height of a window that is not snapped to any zone."""

TITLE_BAR_HEIGHT = 28
"""Height of the draggable title strip at the top of every window."""

CLOSE_BUTTON_SIZE = 20
"""Edge length of the square close glyph inside the title strip."""

# =============================================================================
# Snapping
# =============================================================================

SNAP_MARGIN_PX = 40
"""Pointer distance from a viewport edge that arms that edge's zone."""

# =============================================================================
# Colors
# =============================================================================

WINDOW_SATURATION = 0.70
"""HSL saturation used for generated window colors."""

WINDOW_LIGHTNESS = 0.80
"""HSL lightness used for generated window colors."""

# =============================================================================
# Animation
# =============================================================================

SNAP_ANIMATION_MS = 200
"""Duration of the glide into a snapped rectangle. Zero disables it."""
