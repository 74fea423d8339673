# radar_core/renderer.py
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from radar_core.accessibility import ACCESSIBILITY_FRAME_HALF_WIDTH, build_series_descriptors
from radar_core.geometry import GridLayout
from radar_core.highlight_renderer import draw_highlights
from radar_core.model import AccessibilityDescriptor, ChartState, Highlight
from radar_core.path_builder import build_polygon
from radar_core.series_renderer import render_series
from radar_core.surface import Surface
from radar_core.value_renderer import draw_values
from radar_core.web_renderer import draw_web

logger = logging.getLogger(__name__)


class RadarChartRenderer:
    """Draws a radar chart snapshot onto a surface.

    The renderer keeps no chart state between calls; the only thing it holds
    is the accessibility descriptor list built by the last data pass.
    """

    def __init__(
        self,
        on_layout_changed: Optional[Callable[[], None]] = None,
        accessibility_frame_half_width: float = ACCESSIBILITY_FRAME_HALF_WIDTH,
    ):
        self.on_layout_changed = on_layout_changed
        self.accessibility_frame_half_width = accessibility_frame_half_width
        self._descriptors: List[AccessibilityDescriptor] = []

    def draw_full_chart(
        self, surface: Surface, state: ChartState, highlights: Iterable[Highlight] = ()
    ) -> None:
        layout = GridLayout.from_state(state)
        if state.web.enabled:
            self._draw_web(surface, state, layout)
        self._draw_data(surface, state, layout)
        self._draw_highlights(surface, state, layout, highlights)
        self._draw_values(surface, state, layout)

    def draw_data(self, surface: Surface, state: ChartState) -> None:
        self._draw_data(surface, state, GridLayout.from_state(state))

    def draw_web(self, surface: Surface, state: ChartState) -> None:
        self._draw_web(surface, state, GridLayout.from_state(state))

    def draw_values(self, surface: Surface, state: ChartState) -> None:
        self._draw_values(surface, state, GridLayout.from_state(state))

    def draw_highlights(self, surface: Surface, state: ChartState, highlights: Iterable[Highlight]) -> None:
        self._draw_highlights(surface, state, GridLayout.from_state(state), highlights)

    def accessibility_descriptors(self) -> List[AccessibilityDescriptor]:
        return list(self._descriptors)

    def _draw_data(self, surface: Surface, state: ChartState, layout: GridLayout) -> None:
        self._descriptors = []
        data = state.data
        if data is None:
            logger.debug("No chart data, nothing to draw")
            return

        labels = state.category_labels()
        descriptors: List[AccessibilityDescriptor] = []
        for i, series in enumerate(data.series):
            if not series.visible:
                continue
            polygon = build_polygon(series, layout)
            render_series(surface, polygon, series)
            descriptors.extend(
                build_series_descriptors(
                    series,
                    i,
                    polygon,
                    layout,
                    labels,
                    data,
                    half_width=self.accessibility_frame_half_width,
                )
            )
        self._descriptors = descriptors

        if self.on_layout_changed is not None:
            self.on_layout_changed()

    def _draw_web(self, surface: Surface, state: ChartState, layout: GridLayout) -> None:
        if state.data is None:
            return
        draw_web(surface, layout, state.axis, state.web)

    def _draw_values(self, surface: Surface, state: ChartState, layout: GridLayout) -> None:
        if state.data is None:
            return
        draw_values(surface, state.data, layout)

    def _draw_highlights(
        self, surface: Surface, state: ChartState, layout: GridLayout, highlights: Iterable[Highlight]
    ) -> None:
        if state.data is None:
            return
        draw_highlights(surface, highlights, state.data, layout, state.viewport.highlight_bounds)
