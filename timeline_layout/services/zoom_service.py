"""
Zoom service: maps a zoom percentage and view kind to a day width.
"""

from typing import Optional

from timeline_layout.core.config import get_settings
from timeline_layout.models.enums import ViewKind
from timeline_layout.models.view import resolve_view_kind

WHEEL_STEP = 10
BUTTON_STEP = 20


class ZoomController:
    """Computes per-day pixel widths; all inputs are clamped, never rejected."""

    def __init__(
        self,
        zoom_min: Optional[int] = None,
        zoom_max: Optional[int] = None,
        base_widths: Optional[dict[ViewKind, float]] = None,
    ):
        settings = get_settings()
        self.zoom_min = zoom_min if zoom_min is not None else settings.ZOOM_MIN
        self.zoom_max = zoom_max if zoom_max is not None else settings.ZOOM_MAX
        self.base_widths = base_widths or {
            ViewKind.WEEK: settings.DAY_WIDTH_WEEK,
            ViewKind.TWO_WEEKS: settings.DAY_WIDTH_TWO_WEEKS,
            ViewKind.MONTH: settings.DAY_WIDTH_MONTH,
        }

    def clamp_zoom(self, zoom_percent: int) -> int:
        return max(self.zoom_min, min(self.zoom_max, int(zoom_percent)))

    def base_width(self, kind: ViewKind | str) -> float:
        """Day width at 100% zoom."""
        return self.base_widths[resolve_view_kind(kind)]

    def compute_day_width(self, zoom_percent: int, kind: ViewKind | str) -> float:
        """
        Pixel width of one day.

        Args:
            zoom_percent: Zoom level, saturated to [zoom_min, zoom_max]
            kind: View kind (wider days for shorter views)

        Returns:
            base(kind) * zoom / 100
        """
        return self.base_width(kind) * self.clamp_zoom(zoom_percent) / 100

    def step_zoom(self, zoom_percent: int, delta: int) -> int:
        """Apply a zoom step (positive = zoom in) and clamp the result."""
        return self.clamp_zoom(zoom_percent + delta)

    def wheel_zoom(self, zoom_percent: int, delta_y: float) -> int:
        """Ctrl+wheel zoom: scrolling down zooms out, up zooms in."""
        delta = -WHEEL_STEP if delta_y > 0 else WHEEL_STEP
        return self.step_zoom(zoom_percent, delta)

    def zoom_in(self, zoom_percent: int) -> int:
        return self.step_zoom(zoom_percent, BUTTON_STEP)

    def zoom_out(self, zoom_percent: int) -> int:
        return self.step_zoom(zoom_percent, -BUTTON_STEP)
