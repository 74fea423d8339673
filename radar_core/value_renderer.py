# radar_core/value_renderer.py
from __future__ import annotations

import logging

from radar_core.geometry import GridLayout, polar_point
from radar_core.model import ChartData, Point, Series
from radar_core.surface import Surface

logger = logging.getLogger(__name__)

# gap between a plotted point and the bottom of its value label
VALUE_LABEL_MARGIN = 5.0


def _wants_values(series: Series) -> bool:
    return series.visible and (series.draw_values or series.draw_icons)


def draw_values(surface: Surface, data: ChartData, layout: GridLayout) -> None:
    for i, series in enumerate(data.series):
        if not _wants_values(series):
            continue
        if series.value_formatter is None:
            logger.debug(f"Series '{series.label}' has no value formatter, skipping values")
            continue

        font = series.value_font
        offset = series.icons_offset
        for j, entry in enumerate(series.entries):
            p = layout.project(entry.value, j)
            if p.is_nan:
                continue

            if series.draw_values:
                surface.draw_text(
                    series.value_formatter(entry.value, j, i),
                    Point(p.x, p.y - VALUE_LABEL_MARGIN - font.line_height),
                    "center",
                    font,
                    series.value_text_color_at(j),
                )

            if entry.icon is not None and series.draw_icons:
                # icons hang off the raw value, not value - axis min
                anchor = polar_point(
                    layout.center,
                    entry.value * layout.factor * layout.phase_y + offset.y,
                    layout.angular_step * j * layout.phase_x + layout.rotation,
                )
                anchor = Point(anchor.x, anchor.y + offset.x)
                surface.draw_image(entry.icon.image, anchor, (entry.icon.width, entry.icon.height))
