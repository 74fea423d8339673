# radar_core/series_renderer.py
from __future__ import annotations

from radar_core.model import Series
from radar_core.path_builder import ClosedPolygon
from radar_core.surface import Surface, saved_state


def should_stroke(series: Series) -> bool:
    # an opaque fill already shows the edge
    return not series.draw_filled or series.fill_alpha < 1.0


def _fill(surface: Surface, polygon: ClosedPolygon, series: Series) -> None:
    with saved_state(surface):
        polygon.trace(surface)
        surface.set_alpha(series.fill_alpha)
        if series.fill is not None:
            surface.fill_gradient(series.fill)
        else:
            surface.set_fill_color(series.resolved_fill_color)
            surface.fill_path()


def render_series(surface: Surface, polygon: ClosedPolygon, series: Series) -> bool:
    """Fill and/or stroke one series polygon. Returns True when the outline was stroked."""
    if not series.visible:
        return False

    with saved_state(surface):
        if series.draw_filled:
            _fill(surface, polygon, series)

        if not should_stroke(series):
            return False

        surface.set_stroke_color(series.color)
        surface.set_line_width(series.line_width)
        surface.set_alpha(1.0)
        polygon.trace(surface)
        surface.stroke_path()
    return True
