# radar_core/path_builder.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from radar_core.geometry import GridLayout
from radar_core.model import Point, Rect, Series
from radar_core.surface import Surface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClosedPolygon:
    vertices: Tuple[Point, ...]
    center: Point
    closes_at_center: bool = False

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def bounding_box(self) -> Rect:
        return Rect.bounding(self.vertices)

    def trace(self, surface: Surface) -> None:
        """Emit the polygon as the surface's current path."""
        surface.begin_path()
        if not self.vertices:
            return
        first, *rest = self.vertices
        surface.move_to(first)
        for p in rest:
            surface.line_to(p)
        surface.close_path()


def build_polygon(series: Series, layout: GridLayout) -> ClosedPolygon:
    """Project the series entries into a closed polygon.

    NaN points are dropped and the next valid point connects straight to the
    previous one. A series shorter than the reference entry count gets an
    explicit edge back to the center before closing.
    """
    vertices = []
    for j, entry in enumerate(series.entries):
        p = layout.project(entry.value, j)
        if p.is_nan:
            logger.debug(f"Skipping NaN point {j} of series '{series.label}'")
            continue
        vertices.append(p)

    short = series.entry_count < layout.reference_entry_count
    if short:
        vertices.append(layout.center)
    return ClosedPolygon(vertices=tuple(vertices), center=layout.center, closes_at_center=short)
