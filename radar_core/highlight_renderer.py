# radar_core/highlight_renderer.py
from __future__ import annotations

import logging
from typing import Iterable, Optional

from radar_core.geometry import GridLayout
from radar_core.model import ChartData, Color, Highlight, Point, Rect, Series, with_alpha
from radar_core.surface import EVEN_ODD, Surface, saved_state

logger = logging.getLogger(__name__)


def _in_visible_range(index: int, series: Series, phase_x: float) -> bool:
    return index < series.entry_count * phase_x


def draw_highlight_lines(surface: Surface, point: Point, series: Series, bounds: Rect) -> None:
    if series.draw_vertical_highlight_indicator:
        surface.begin_path()
        surface.move_to(Point(point.x, bounds.y))
        surface.line_to(Point(point.x, bounds.max_y))
        surface.stroke_path()

    if series.draw_horizontal_highlight_indicator:
        surface.begin_path()
        surface.move_to(Point(bounds.x, point.y))
        surface.line_to(Point(bounds.max_x, point.y))
        surface.stroke_path()


def draw_highlight_circle(
    surface: Surface,
    point: Point,
    inner_radius: float,
    outer_radius: float,
    fill_color: Optional[Color],
    stroke_color: Optional[Color],
    stroke_width: float,
) -> None:
    """Annulus marker: the inner ellipse punches a hole through the even-odd fill."""
    outer = Rect.centered(point, outer_radius)
    with saved_state(surface):
        if fill_color is not None:
            surface.begin_path()
            surface.add_ellipse(outer)
            if inner_radius > 0.0:
                surface.add_ellipse(Rect.centered(point, inner_radius))
            surface.set_fill_color(fill_color)
            surface.fill_path(EVEN_ODD)

        if stroke_color is not None:
            surface.begin_path()
            surface.add_ellipse(outer)
            surface.set_stroke_color(stroke_color)
            surface.set_line_width(stroke_width)
            surface.stroke_path()


def _ring_stroke_color(series: Series) -> Color:
    color = series.highlight_circle_stroke_color
    if color is None:
        color = series.color
    if series.highlight_circle_stroke_alpha < 1.0:
        color = with_alpha(color, series.highlight_circle_stroke_alpha)
    return color


def draw_highlights(
    surface: Surface,
    highlights: Iterable[Highlight],
    data: ChartData,
    layout: GridLayout,
    bounds: Rect,
) -> None:
    """Emphasize the selected points and record where each one landed."""
    with saved_state(surface):
        for high in highlights:
            series = data.series_at(high.series_index)
            if series is None or not series.highlight_enabled:
                logger.debug(f"No highlightable series at index {high.series_index}")
                continue

            entry = series.entry_at(high.entry_index)
            if entry is None or not _in_visible_range(high.entry_index, series, layout.phase_x):
                logger.debug(f"Highlight entry {high.entry_index} outside series '{series.label}'")
                continue

            surface.set_line_width(data.highlight_line_width)
            if data.highlight_dash_lengths is not None:
                surface.set_line_dash(data.highlight_dash_phase, data.highlight_dash_lengths)
            else:
                surface.set_line_dash(0.0, None)
            surface.set_stroke_color(series.highlight_color)

            point = layout.project(entry.value, high.entry_index)
            high.draw_point = point

            draw_highlight_lines(surface, point, series, bounds)

            if series.draw_highlight_circle and not point.is_nan:
                draw_highlight_circle(
                    surface,
                    point,
                    inner_radius=series.highlight_circle_inner_radius,
                    outer_radius=series.highlight_circle_outer_radius,
                    fill_color=series.highlight_circle_fill_color,
                    stroke_color=_ring_stroke_color(series),
                    stroke_width=series.highlight_circle_stroke_width,
                )
