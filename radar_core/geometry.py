# radar_core/geometry.py
from __future__ import annotations

import math
from dataclasses import dataclass

from radar_core.model import AxisRange, ChartState, Point

FULL_CIRCLE = 360.0


def polar_point(center: Point, distance: float, angle: float) -> Point:
    """Point `distance` away from `center` at `angle` degrees (clockwise, y down)."""
    rad = math.radians(angle)
    return Point(center.x + distance * math.cos(rad), center.y + distance * math.sin(rad))


def project(
    value: float,
    index: int,
    *,
    center: Point,
    axis_min: float,
    factor: float,
    angular_step: float,
    rotation: float,
    phase_x: float = 1.0,
    phase_y: float = 1.0,
) -> Point:
    """Map an entry value at an angular index to screen space.

    NaN values or a NaN factor come back as a NaN point; callers skip those.
    """
    distance = (value - axis_min) * factor * phase_y
    angle = angular_step * index * phase_x + rotation
    return polar_point(center, distance, angle)


def scale_factor(radius: float, axis: AxisRange) -> float:
    """Pixels per unit value; NaN when the axis range is empty."""
    if axis.y_range == 0:
        return float("nan")
    return radius / axis.y_range


@dataclass(frozen=True)
class GridLayout:
    """Per-frame constants shared by every sub-renderer of one draw pass."""

    center: Point
    angular_step: float
    factor: float
    reference_entry_count: int
    rotation: float
    axis_min: float
    y_range: float
    phase_x: float = 1.0
    phase_y: float = 1.0
    skip_step: int = 0

    @classmethod
    def from_state(cls, state: ChartState) -> "GridLayout":
        count = state.data.reference_entry_count if state.data is not None else 0
        vp = state.viewport
        return cls(
            center=vp.center,
            angular_step=FULL_CIRCLE / count if count else 0.0,
            factor=scale_factor(vp.radius, state.axis),
            reference_entry_count=count,
            rotation=vp.rotation_angle,
            axis_min=state.axis.min,
            y_range=state.axis.y_range,
            phase_x=vp.phase_x,
            phase_y=vp.phase_y,
            skip_step=vp.skip_step,
        )

    def project(self, value: float, index: int) -> Point:
        return project(
            value,
            index,
            center=self.center,
            axis_min=self.axis_min,
            factor=self.factor,
            angular_step=self.angular_step,
            rotation=self.rotation,
            phase_x=self.phase_x,
            phase_y=self.phase_y,
        )

    def spoke_angle(self, index: int) -> float:
        return self.angular_step * index + self.rotation

    def spoke_indices(self) -> range:
        return range(0, self.reference_entry_count, self.skip_step + 1)

    def ring_radius(self, tick: float) -> float:
        return (tick - self.axis_min) * self.factor
