import math

import pytest

from radar_core.geometry import GridLayout, polar_point, project, scale_factor
from radar_core.model import AxisRange, ChartData, ChartState, Point, Series, ViewportState

CENTER = Point(100.0, 100.0)


def test_factor_is_radius_over_axis_span():
    axis = AxisRange(min=0.0, tick_values=(10.0, 20.0))
    assert scale_factor(100.0, axis) == pytest.approx(5.0)


@pytest.mark.parametrize("lo,hi,radius", [(0.0, 1.0, 10.0), (-5.0, 5.0, 250.0), (3.0, 3.5, 0.0)])
def test_factor_finite_and_non_negative(lo, hi, radius):
    f = scale_factor(radius, AxisRange(min=lo, max=hi))
    assert math.isfinite(f) and f >= 0


def test_axis_min_projects_onto_center():
    p = project(7.0, 3, center=CENTER, axis_min=7.0, factor=4.0, angular_step=72.0, rotation=15.0)
    assert p.x == pytest.approx(CENTER.x)
    assert p.y == pytest.approx(CENTER.y)


def test_empty_axis_range_gives_nan_factor_and_point():
    axis = AxisRange(min=2.0, max=2.0)
    f = scale_factor(100.0, axis)
    assert math.isnan(f)
    p = project(5.0, 0, center=CENTER, axis_min=2.0, factor=f, angular_step=90.0, rotation=0.0)
    assert p.is_nan


def test_nan_value_gives_nan_point():
    p = project(float("nan"), 1, center=CENTER, axis_min=0.0, factor=5.0, angular_step=90.0, rotation=0.0)
    assert p.is_nan


def test_angles_run_clockwise_in_screen_space():
    # y grows downward, so +90 degrees points at the bottom of the chart
    right = polar_point(CENTER, 50.0, 0.0)
    down = polar_point(CENTER, 50.0, 90.0)
    assert (right.x, right.y) == pytest.approx((150.0, 100.0))
    assert (down.x, down.y) == pytest.approx((100.0, 150.0))


def test_rotation_is_added_to_angle():
    p = project(10.0, 0, center=CENTER, axis_min=0.0, factor=5.0, angular_step=90.0, rotation=270.0)
    assert (p.x, p.y) == pytest.approx((100.0, 50.0))


def test_phases_scale_angle_and_distance():
    p = project(
        20.0, 2, center=CENTER, axis_min=0.0, factor=5.0, angular_step=90.0, rotation=0.0, phase_x=0.5, phase_y=0.5
    )
    # angle 90 * 2 * 0.5 = 90, distance 20 * 5 * 0.5 = 50
    assert (p.x, p.y) == pytest.approx((100.0, 150.0))


def _state(*lengths, skip_step=0):
    data = ChartData(series=tuple(Series.from_values([1.0] * n) for n in lengths))
    return ChartState(
        axis=AxisRange(min=0.0, tick_values=(10.0, 20.0)),
        viewport=ViewportState(center=CENTER, radius=100.0, skip_step=skip_step),
        data=data,
    )


def test_layout_uses_longest_series_as_reference():
    layout = GridLayout.from_state(_state(3, 5, 4))
    assert layout.reference_entry_count == 5
    assert layout.angular_step == pytest.approx(72.0)
    assert layout.factor == pytest.approx(5.0)


def test_layout_without_entries_has_no_spokes():
    layout = GridLayout.from_state(_state())
    assert layout.angular_step == 0.0
    assert list(layout.spoke_indices()) == []


def test_skip_step_thins_spokes():
    assert list(GridLayout.from_state(_state(6, skip_step=1)).spoke_indices()) == [0, 2, 4]
    assert list(GridLayout.from_state(_state(6, skip_step=2)).spoke_indices()) == [0, 3]


def test_ring_radii_follow_ticks():
    layout = GridLayout.from_state(_state(4))
    assert [layout.ring_radius(t) for t in (10.0, 20.0)] == pytest.approx([50.0, 100.0])


def test_axis_max_falls_back_to_largest_tick():
    assert AxisRange(min=0.0, tick_values=(5.0, 15.0, 10.0)).axis_max == 15.0
    assert AxisRange(min=1.0).axis_max == 1.0
    assert AxisRange(min=0.0, tick_values=(5.0,), max=8.0).axis_max == 8.0


def test_contract_violations_raise():
    with pytest.raises(ValueError):
        AxisRange(min=10.0, max=1.0)
    with pytest.raises(ValueError):
        ViewportState(center=CENTER, radius=-1.0)
    with pytest.raises(ValueError):
        ViewportState(center=CENTER, radius=10.0, skip_step=-1)
