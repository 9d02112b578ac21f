"""Rendering modules: workspace widget, panel and overlay painting, snap animation."""

from .snap_animator import SnapAnimator
from .widget_positioner import PositionAnchor, WidgetPositioner
from .workspace_widget import WorkspaceWidget

__all__ = ['PositionAnchor', 'SnapAnimator', 'WidgetPositioner', 'WorkspaceWidget']
