"""
Snap animator - glides snapped panels into their new rectangles.

Presentation only. The window store already holds the final geometry the
moment a snap or re-split commits; this module remembers what was last on
screen and interpolates from there to the committed rectangle while a short
QVariantAnimation runs. Hit-testing keeps using the store's geometry.

Free windows never animate: they follow the pointer and must stay under it.
"""
from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from PySide6.QtCore import QEasingCurve, QObject, QVariantAnimation, Signal

from core.constants.layout import SNAP_ANIMATION_MS
from core.logging.logger import get_logger
from core.logging.tags import TAG_RENDER
from core.snapping.geometry import Rect
from core.snapping.models import PanelWindow

logger = get_logger(__name__)


def _lerp_rect(start: Rect, end: Rect, t: float) -> Rect:
    return Rect(
        start.x + (end.x - start.x) * t,
        start.y + (end.y - start.y) * t,
        start.width + (end.width - start.width) * t,
        start.height + (end.height - start.height) * t,
    )


class SnapAnimator(QObject):
    """Tracks displayed rectangles and tweens snapped windows toward the store's."""

    # Emitted on every animation step and once when the glide completes.
    frame = Signal()

    def __init__(self, duration_ms: int = SNAP_ANIMATION_MS, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._duration_ms = 0
        self.set_duration(duration_ms)
        self._shown: Dict[int, Rect] = {}
        self._tweens: Dict[int, Tuple[Rect, Rect]] = {}
        self._progress = 1.0
        self._anim: Optional[QVariantAnimation] = None

    @property
    def duration_ms(self) -> int:
        return self._duration_ms

    @property
    def is_animating(self) -> bool:
        return bool(self._tweens)

    def set_duration(self, duration_ms: int) -> None:
        if duration_ms < 0:
            raise ValueError(f"Animation duration must not be negative: {duration_ms}")
        self._duration_ms = int(duration_ms)

    def sync(self, windows: Iterable[PanelWindow]) -> None:
        """
        Take in the store's current collection.

        Snapped windows whose displayed rectangle differs from their committed
        one get a tween starting where they are drawn right now, so a re-split
        arriving mid-glide continues smoothly. Windows seen for the first time
        appear in place.
        """
        tweens: Dict[int, Tuple[Rect, Rect]] = {}
        shown: Dict[int, Rect] = {}
        for window in windows:
            target = window.rect
            current = self._current_rect(window.id)
            if (self._duration_ms > 0 and window.is_snapped
                    and current is not None and current != target):
                tweens[window.id] = (current, target)
            shown[window.id] = target

        self._shown = shown
        self._tweens = tweens
        self._progress = 0.0
        if tweens:
            self._start()
        else:
            self._stop()

    def display_rect(self, window: PanelWindow) -> Rect:
        """Rectangle to paint for the window at the current animation step."""
        tween = self._tweens.get(window.id)
        if tween is None or tween[1] != window.rect:
            return window.rect
        return _lerp_rect(tween[0], tween[1], self._progress)

    def _current_rect(self, window_id: int) -> Optional[Rect]:
        tween = self._tweens.get(window_id)
        if tween is not None:
            return _lerp_rect(tween[0], tween[1], self._progress)
        return self._shown.get(window_id)

    def _start(self) -> None:
        self._stop()
        anim = QVariantAnimation(self)
        anim.setDuration(self._duration_ms)
        anim.setStartValue(0.0)
        anim.setEndValue(1.0)
        anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        anim.valueChanged.connect(self._on_tick)
        anim.finished.connect(lambda: self._on_finished(anim))
        self._anim = anim
        anim.start()
        logger.debug("%s Animating %d snapped window(s)", TAG_RENDER, len(self._tweens))

    def _stop(self) -> None:
        anim = self._anim
        if anim is None:
            return
        self._anim = None
        anim.stop()
        anim.deleteLater()

    def _on_tick(self, value) -> None:
        self._progress = float(value)
        self.frame.emit()

    def _on_finished(self, anim: QVariantAnimation) -> None:
        if anim is not self._anim:
            return
        self._anim = None
        anim.deleteLater()
        self._tweens = {}
        self._progress = 1.0
        self.frame.emit()
