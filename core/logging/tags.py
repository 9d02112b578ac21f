"""Standard logging tags for consistent log filtering.

Usage:
    from core.logging.tags import TAG_DRAG
    logger.debug("%s move to (%d, %d)", TAG_DRAG, x, y)
"""

# =============================================================================
# Core
# =============================================================================

TAG_STORE = "[STORE]"
"""Window collection mutations (add, remove, move, snap)."""

TAG_ARRANGE = "[ARRANGE]"
"""Zone partitioning results."""

TAG_DRAG = "[DRAG]"
"""Drag state machine transitions and pointer traces."""

# =============================================================================
# Presentation
# =============================================================================

TAG_RENDER = "[RENDER]"
"""Workspace painting and hit-testing."""

TAG_UI = "[UI]"
"""Main window and command buttons."""

TAG_SETTINGS = "[SETTINGS]"
"""Configuration reads and writes."""

