import pytest

from radar_core.geometry import GridLayout
from radar_core.model import AxisRange, Point, Rect, Series
from radar_core.path_builder import build_polygon

CENTER = Point(100.0, 100.0)


def test_full_series_has_no_center_vertex(make_state):
    series = Series.from_values([10.0, 20.0, 5.0, 15.0])
    layout = GridLayout.from_state(make_state(series))
    polygon = build_polygon(series, layout)
    assert len(polygon) == 4
    assert not polygon.closes_at_center
    assert CENTER not in polygon.vertices


def test_short_series_closes_through_center(make_state, three_of_four):
    short, _ = three_of_four
    layout = GridLayout.from_state(make_state(*three_of_four))
    polygon = build_polygon(short, layout)
    assert len(polygon) == 4
    assert polygon.closes_at_center
    assert polygon.vertices[-1] == CENTER
    assert sum(1 for v in polygon.vertices if v == CENTER) == 1

    first, second, third = polygon.vertices[:3]
    assert (first.x, first.y) == pytest.approx((150.0, 100.0))
    assert (second.x, second.y) == pytest.approx((100.0, 200.0))
    assert (third.x, third.y) == pytest.approx((75.0, 100.0))


def test_nan_points_are_dropped_without_gap(make_state):
    series = Series.from_values([10.0, float("nan"), 5.0])
    layout = GridLayout.from_state(make_state(series))
    polygon = build_polygon(series, layout)
    assert len(polygon) == 2
    assert not any(v.is_nan for v in polygon.vertices)


def test_empty_axis_range_builds_no_points(make_state):
    series = Series.from_values([1.0, 2.0, 3.0])
    layout = GridLayout.from_state(make_state(series, axis=AxisRange(min=0.0, max=0.0)))
    assert len(build_polygon(series, layout)) == 0


def test_trace_emits_closed_path(surface, make_state, three_of_four):
    layout = GridLayout.from_state(make_state(*three_of_four))
    build_polygon(three_of_four[0], layout).trace(surface)
    assert surface.names == ["begin_path", "move_to", "line_to", "line_to", "line_to", "close_path"]
    assert surface.calls[-2] == ("line_to", (CENTER,))


def test_bounding_box_covers_vertices(make_state, three_of_four):
    layout = GridLayout.from_state(make_state(*three_of_four))
    box = build_polygon(three_of_four[0], layout).bounding_box
    assert box.x == pytest.approx(75.0)
    assert box.max_x == pytest.approx(150.0)
    assert box.y == pytest.approx(100.0)
    assert box.max_y == pytest.approx(200.0)


def test_bounding_box_of_nothing_is_zero_rect():
    assert Rect.bounding([]) == Rect(0.0, 0.0, 0.0, 0.0)
    assert Rect.bounding([Point(float("nan"), 1.0)]) == Rect(0.0, 0.0, 0.0, 0.0)
