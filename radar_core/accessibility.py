# radar_core/accessibility.py
"""
Accessibility descriptors for screen readers.

Angular position alone carries no reading order, so entries are narrated from
the largest value to the smallest. Each series contributes a header (its
polygon's bounding box) followed by one 44x44 hit region per entry.
"""
from __future__ import annotations

import math
from typing import List, NamedTuple, Sequence

from radar_core.geometry import GridLayout
from radar_core.model import AccessibilityDescriptor, ChartData, Rect, Series
from radar_core.path_builder import ClosedPolygon

# half of a 44x44 tap target
ACCESSIBILITY_FRAME_HALF_WIDTH = 22.0


class _Narrated(NamedTuple):
    category: str
    value: float
    index: int


def narration_order(series: Series, category_labels: Sequence[str]) -> List[_Narrated]:
    """(category, value, index) tuples sorted by value, largest first.

    Labels are matched to entries by position; extra entries or extra labels
    are dropped. NaN values have no place in the ordering and are left out.
    """
    pairs = [(e.value, j) for j, e in enumerate(series.entries)]
    rows = [_Narrated(label, value, j) for label, (value, j) in zip(category_labels, pairs)]
    rows = [r for r in rows if not math.isnan(r.value)]
    return sorted(rows, key=lambda r: r.value, reverse=True)


def _format_value(series: Series, value: float, index: int, series_index: int) -> str:
    if series.value_formatter is not None:
        return series.value_formatter(value, index, series_index)
    return f"{value:g}"


def series_header_text(series: Series, prefix: str) -> str:
    n = series.entry_count
    return f"{series.label}. {n} {prefix}{'' if n == 1 else 's'}."


def build_series_descriptors(
    series: Series,
    series_index: int,
    polygon: ClosedPolygon,
    layout: GridLayout,
    category_labels: Sequence[str],
    data: ChartData,
    half_width: float = ACCESSIBILITY_FRAME_HALF_WIDTH,
) -> List[AccessibilityDescriptor]:
    out = [
        AccessibilityDescriptor(
            text=series_header_text(series, data.accessibility_entry_label_prefix),
            hit_region=polygon.bounding_box,
            is_header=True,
        )
    ]
    suffix = data.accessibility_entry_label_suffix
    for row in narration_order(series, category_labels):
        p = layout.project(row.value, row.index)
        if p.is_nan:
            continue
        value_text = _format_value(series, row.value, row.index, series_index)
        text = f"{series.label} - {row.category}: {value_text} {suffix}".rstrip()
        out.append(AccessibilityDescriptor(text=text, hit_region=Rect.centered(p, half_width)))
    return out
