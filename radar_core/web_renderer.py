# radar_core/web_renderer.py
from __future__ import annotations

import logging
import math

from radar_core.geometry import FULL_CIRCLE, GridLayout, polar_point
from radar_core.model import AxisRange, WebStyle
from radar_core.surface import Surface, saved_state

logger = logging.getLogger(__name__)


def draw_web(surface: Surface, layout: GridLayout, axis: AxisRange, style: WebStyle) -> None:
    """Draw the radial spokes and the concentric tick rings."""
    center = layout.center
    with saved_state(surface):
        surface.set_line_width(style.line_width)
        surface.set_stroke_color(style.color)
        surface.set_alpha(style.alpha)

        outer = layout.y_range * layout.factor
        for i in layout.spoke_indices():
            p = polar_point(center, outer, layout.spoke_angle(i))
            if p.is_nan:
                continue
            surface.begin_path()
            surface.move_to(center)
            surface.line_to(p)
            surface.stroke_path()

        surface.set_line_width(style.inner_line_width)
        surface.set_stroke_color(style.inner_color)
        surface.set_alpha(style.alpha)

        for tick in axis.tick_values:
            r = layout.ring_radius(tick)
            if math.isnan(r) or r < 0:
                logger.debug(f"Skipping ring for tick {tick} (radius {r})")
                continue
            surface.begin_path()
            surface.add_arc(center, r, 0.0, FULL_CIRCLE)
            surface.stroke_path()
