# radar_utils/viz_radar.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from radar_core.geometry import GridLayout, polar_point
from radar_core.model import (
    AccessibilityDescriptor,
    AxisRange,
    ChartData,
    ChartState,
    Font,
    Highlight,
    Point,
    Series,
    ViewportState,
    WebStyle,
)
from radar_core.renderer import RadarChartRenderer
from radar_utils.mpl_surface import MatplotlibSurface

logger = logging.getLogger(__name__)

DEFAULT_STYLE = dict(
    facecolor="white",
    canvas_size=400.0,
    radius_ratio=0.38,
    rotation=270.0,
    web_color="#7A7A7A",
    web_alpha=0.25,
    web_line_width=1.0,
    inner_web_line_width=0.6,
    label_fontsize=10,
    label_color="#222222",
    label_pad=14.0,
    value_fontsize=7,
    value_fmt="{:.1f}",
    draw_values=False,
    title_fontsize=14,
    line_width=2.0,
    fill_alpha=0.15,
)


def _default_colors() -> List[str]:
    return plt.rcParams["axes.prop_cycle"].by_key()["color"]


def chart_data_from_frame(
    frame: pd.DataFrame,
    *,
    colors: Optional[Sequence[str]] = None,
    **series_style,
) -> ChartData:
    """One series per row, one category per column. Bad cells become NaN."""
    colors = list(colors or _default_colors())
    numeric = frame.apply(pd.to_numeric, errors="coerce")
    series = tuple(
        Series.from_values(
            row.to_numpy(dtype=float),
            label=str(name),
            color=colors[k % len(colors)],
            **series_style,
        )
        for k, (name, row) in enumerate(numeric.iterrows())
    )
    return ChartData(series=series, category_labels=tuple(str(c) for c in frame.columns))


def _auto_axis(data: ChartData, rings: int) -> AxisRange:
    values = np.array([e.value for s in data.series for e in s.entries], dtype=float)
    finite = values[np.isfinite(values)]
    rmax = max(1.0, float(finite.max()) * 1.1) if finite.size else 1.0
    ticks = np.linspace(0.0, rmax, rings + 1)[1:]
    return AxisRange(min=0.0, tick_values=tuple(float(t) for t in ticks), max=rmax)


def _label_align(point: Point, center: Point) -> str:
    dx = point.x - center.x
    if abs(dx) < 1e-6:
        return "center"
    return "left" if dx > 0 else "right"


def _draw_category_labels(surface: MatplotlibSurface, state: ChartState, style: Dict) -> None:
    layout = GridLayout.from_state(state)
    font = Font(size=style["label_fontsize"])
    distance = state.viewport.radius + style["label_pad"]
    for i, label in enumerate(state.category_labels()):
        p = polar_point(layout.center, distance, layout.spoke_angle(i))
        p = Point(p.x, p.y - font.line_height / 2.0)
        surface.draw_text(label, p, _label_align(p, layout.center), font, style["label_color"])


def radar_chart(
    data: Union[pd.DataFrame, Dict[str, float]],
    title: str,
    out_path: Path,
    *,
    axis: Optional[AxisRange] = None,
    rings: int = 5,
    figsize: Tuple[float, float] = (6.5, 6.5),
    dpi: int = 300,
    style: Dict = None,
    colors: Optional[Sequence[str]] = None,
    highlights: Iterable[Highlight] = (),
    show: bool = False,
) -> List[AccessibilityDescriptor]:
    """Render a radar chart to PNG/SVG and return its accessibility descriptors.

    `data` is either a metrics dict (one series named after `title`) or a
    DataFrame with one row per series and one column per category.
    """
    style = {**DEFAULT_STYLE, **(style or {})}
    frame = data if isinstance(data, pd.DataFrame) else pd.DataFrame([data], index=[title])

    if frame.shape[1] < 3:
        raise ValueError("Radar chart needs at least 3 categories.")

    value_fmt = style["value_fmt"]
    chart_data = chart_data_from_frame(
        frame,
        colors=colors,
        line_width=style["line_width"],
        fill_alpha=style["fill_alpha"],
        draw_filled=True,
        draw_values=style["draw_values"],
        value_formatter=lambda v, j, i: value_fmt.format(v),
        value_font=Font(size=style["value_fontsize"]),
    )
    axis = axis or _auto_axis(chart_data, rings)

    size = float(style["canvas_size"])
    state = ChartState(
        axis=axis,
        viewport=ViewportState(
            center=Point(size / 2.0, size / 2.0),
            radius=size * style["radius_ratio"],
            rotation_angle=style["rotation"],
        ),
        data=chart_data,
        web=WebStyle(
            line_width=style["web_line_width"],
            color=style["web_color"],
            inner_line_width=style["inner_web_line_width"],
            inner_color=style["web_color"],
            alpha=style["web_alpha"],
        ),
    )

    fig = plt.figure(figsize=figsize, dpi=dpi, facecolor=style["facecolor"])
    ax = fig.add_subplot(111)
    ax.set_xlim(0.0, size)
    ax.set_ylim(size, 0.0)
    ax.set_aspect("equal")
    ax.axis("off")

    surface = MatplotlibSurface(ax)
    renderer = RadarChartRenderer()
    renderer.draw_full_chart(surface, state, highlights)
    _draw_category_labels(surface, state, style)
    ax.set_title(title, fontsize=style["title_fontsize"], pad=18)

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    if out_path.suffix.lower() == ".svg":
        fig.savefig(out_path, bbox_inches="tight")
    else:
        fig.savefig(out_path, bbox_inches="tight", dpi=dpi)
    logger.info(f"Saved: {out_path}")
    if show: plt.show()
    plt.close(fig)
    return renderer.accessibility_descriptors()
