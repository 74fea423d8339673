# radar_core/model.py
"""
Snapshot types consumed by the radar renderer.

Everything here is handed over by the host once per draw call and treated as
read-only by the renderer. `Highlight` is the exception: its realized screen
point is written back during the highlight pass.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Sequence, Tuple, Union

import numpy as np
from matplotlib.colors import to_rgba

Color = Union[str, Tuple[float, ...]]
ValueFormatter = Callable[[float, int, int], str]
CategoryFormatter = Callable[[int], str]


def with_alpha(color: Color, alpha: float) -> Tuple[float, float, float, float]:
    """Return `color` as RGBA with its alpha component replaced."""
    return to_rgba(color, alpha)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @property
    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2.0

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @classmethod
    def centered(cls, point: Point, half_width: float) -> "Rect":
        return cls(point.x - half_width, point.y - half_width, 2 * half_width, 2 * half_width)

    @classmethod
    def bounding(cls, points: Iterable[Point]) -> "Rect":
        """Bounding box of the non-NaN points; a zero rect when there are none."""
        xy = np.array([(p.x, p.y) for p in points if not p.is_nan], dtype=float)
        if xy.size == 0:
            return cls(0.0, 0.0, 0.0, 0.0)
        x0, y0 = xy.min(axis=0)
        x1, y1 = xy.max(axis=0)
        return cls(float(x0), float(y0), float(x1 - x0), float(y1 - y0))


@dataclass(frozen=True)
class Font:
    family: str = "sans-serif"
    size: float = 9.0
    leading: Optional[float] = None

    @property
    def line_height(self) -> float:
        return self.leading if self.leading is not None else self.size * 1.2


@dataclass(frozen=True)
class Icon:
    image: Any
    width: float
    height: float


@dataclass(frozen=True)
class LinearGradient:
    colors: Tuple[Color, ...]
    angle: float = 90.0


@dataclass(frozen=True)
class Entry:
    value: float
    icon: Optional[Icon] = None


@dataclass(frozen=True)
class Series:
    """One overlaid polygon of the radar chart plus its drawing style."""

    entries: Tuple[Entry, ...] = ()
    label: str = ""
    color: Color = "#3366CC"
    fill_color: Optional[Color] = None
    fill: Optional[LinearGradient] = None
    fill_alpha: float = 0.33
    line_width: float = 1.0
    draw_filled: bool = False
    draw_values: bool = True
    draw_icons: bool = True
    value_formatter: Optional[ValueFormatter] = None
    value_font: Font = field(default_factory=Font)
    value_text_colors: Tuple[Color, ...] = ("#000000",)
    icons_offset: Point = Point(0.0, 0.0)
    highlight_enabled: bool = True
    highlight_color: Color = "#FFBB73"
    draw_vertical_highlight_indicator: bool = True
    draw_horizontal_highlight_indicator: bool = True
    draw_highlight_circle: bool = False
    highlight_circle_fill_color: Optional[Color] = "#FFFFFF"
    highlight_circle_stroke_color: Optional[Color] = None
    highlight_circle_stroke_alpha: float = 0.3
    highlight_circle_stroke_width: float = 2.0
    highlight_circle_inner_radius: float = 3.0
    highlight_circle_outer_radius: float = 4.0
    visible: bool = True

    @classmethod
    def from_values(cls, values: Sequence[float], **style) -> "Series":
        return cls(entries=tuple(Entry(float(v)) for v in values), **style)

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    @property
    def resolved_fill_color(self) -> Color:
        return self.fill_color if self.fill_color is not None else self.color

    def entry_at(self, index: int) -> Optional[Entry]:
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return None

    def value_text_color_at(self, index: int) -> Color:
        return self.value_text_colors[index % len(self.value_text_colors)]


@dataclass(frozen=True)
class ChartData:
    series: Tuple[Series, ...] = ()
    category_labels: Optional[Tuple[str, ...]] = None
    highlight_line_width: float = 1.0
    highlight_dash_lengths: Optional[Tuple[float, ...]] = None
    highlight_dash_phase: float = 0.0
    accessibility_entry_label_prefix: str = "Item"
    accessibility_entry_label_suffix: str = ""

    @property
    def reference_entry_count(self) -> int:
        return max((s.entry_count for s in self.series), default=0)

    def series_at(self, index: int) -> Optional[Series]:
        if 0 <= index < len(self.series):
            return self.series[index]
        return None


@dataclass(frozen=True)
class AxisRange:
    min: float = 0.0
    tick_values: Tuple[float, ...] = ()
    max: Optional[float] = None

    def __post_init__(self):
        if self.max is not None and self.max < self.min:
            raise ValueError(f"Axis max ({self.max}) is below axis min ({self.min}).")

    @property
    def axis_max(self) -> float:
        if self.max is not None:
            return self.max
        if self.tick_values:
            return max(self.tick_values)
        return self.min

    @property
    def y_range(self) -> float:
        return self.axis_max - self.min


@dataclass(frozen=True)
class ViewportState:
    center: Point
    radius: float
    rotation_angle: float = 0.0
    phase_x: float = 1.0
    phase_y: float = 1.0
    skip_step: int = 0
    content_rect: Optional[Rect] = None

    def __post_init__(self):
        if self.radius < 0:
            raise ValueError(f"Radius must be non-negative, got {self.radius}.")
        if self.skip_step < 0:
            raise ValueError(f"skip_step must be >= 0, got {self.skip_step}.")

    @property
    def highlight_bounds(self) -> Rect:
        if self.content_rect is not None:
            return self.content_rect
        return Rect.centered(self.center, self.radius)


@dataclass(frozen=True)
class WebStyle:
    enabled: bool = True
    line_width: float = 1.5
    color: Color = "#7A7A7A"
    inner_line_width: float = 0.75
    inner_color: Color = "#7A7A7A"
    alpha: float = 150 / 255


@dataclass
class Highlight:
    series_index: int
    entry_index: int
    draw_point: Optional[Point] = None


@dataclass(frozen=True)
class ChartState:
    """Everything one draw pass reads."""

    axis: AxisRange
    viewport: ViewportState
    data: Optional[ChartData] = None
    web: WebStyle = field(default_factory=WebStyle)
    category_formatter: Optional[CategoryFormatter] = None

    def category_labels(self) -> Tuple[str, ...]:
        if self.data is None:
            return ()
        if self.data.category_labels is not None:
            return tuple(self.data.category_labels)
        fmt = self.category_formatter or str
        return tuple(fmt(i) for i in range(self.data.reference_entry_count))


@dataclass(frozen=True)
class AccessibilityDescriptor:
    text: str
    hit_region: Rect
    is_header: bool = False
