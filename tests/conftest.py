import os
from collections import namedtuple

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest  # noqa: E402

from radar_core.model import AxisRange, ChartData, ChartState, Point, Series, ViewportState  # noqa: E402

Paint = namedtuple("Paint", "path state rule gradient")

SETTERS = {"set_stroke_color", "set_fill_color", "set_alpha", "set_line_width", "set_line_dash"}


class RecordingSurface:
    """Surface double that records every call and the state each paint used."""

    def __init__(self):
        self.calls = []
        self.state = dict(stroke=None, fill=None, alpha=1.0, line_width=1.0, dash=None)
        self.stack = []
        self.path = []
        self.fills = []
        self.strokes = []
        self.texts = []
        self.images = []

    def _rec(self, name, *args):
        self.calls.append((name, args))

    @property
    def names(self):
        return [c[0] for c in self.calls]

    @property
    def drawing_calls(self):
        return [n for n in self.names if n not in SETTERS and n not in ("save_state", "restore_state")]

    def save_state(self):
        self.stack.append(dict(self.state))
        self._rec("save_state")

    def restore_state(self):
        self.state = self.stack.pop()
        self._rec("restore_state")

    def begin_path(self):
        self.path = []
        self._rec("begin_path")

    def move_to(self, point):
        self.path.append(("move", point))
        self._rec("move_to", point)

    def line_to(self, point):
        self.path.append(("line", point))
        self._rec("line_to", point)

    def close_path(self):
        self.path.append(("close",))
        self._rec("close_path")

    def add_ellipse(self, rect):
        self.path.append(("ellipse", rect))
        self._rec("add_ellipse", rect)

    def add_arc(self, center, radius, start_angle, end_angle):
        self.path.append(("arc", center, radius, start_angle, end_angle))
        self._rec("add_arc", center, radius, start_angle, end_angle)

    def fill_path(self, rule="nonzero"):
        self.fills.append(Paint(list(self.path), dict(self.state), rule, None))
        self.path = []
        self._rec("fill_path", rule)

    def fill_gradient(self, gradient, rule="nonzero"):
        self.fills.append(Paint(list(self.path), dict(self.state), rule, gradient))
        self.path = []
        self._rec("fill_gradient", gradient, rule)

    def stroke_path(self):
        self.strokes.append(Paint(list(self.path), dict(self.state), None, None))
        self.path = []
        self._rec("stroke_path")

    def set_stroke_color(self, color):
        self.state["stroke"] = color
        self._rec("set_stroke_color", color)

    def set_fill_color(self, color):
        self.state["fill"] = color
        self._rec("set_fill_color", color)

    def set_alpha(self, alpha):
        self.state["alpha"] = alpha
        self._rec("set_alpha", alpha)

    def set_line_width(self, width):
        self.state["line_width"] = width
        self._rec("set_line_width", width)

    def set_line_dash(self, phase, lengths):
        self.state["dash"] = (phase, tuple(lengths)) if lengths else None
        self._rec("set_line_dash", phase, lengths)

    def draw_text(self, text, point, align, font, color):
        self.texts.append((text, point, align, font, color))
        self._rec("draw_text", text, point)

    def draw_image(self, image, point, size):
        self.images.append((image, point, size))
        self._rec("draw_image", image, point, size)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def make_state():
    """Chart state centered at (100, 100), radius 100, axis 0..20 with ticks 10/20 (factor 5)."""

    def _make(*series, axis=None, **viewport):
        vp = dict(center=Point(100.0, 100.0), radius=100.0)
        vp.update(viewport)
        return ChartState(
            axis=axis or AxisRange(min=0.0, tick_values=(10.0, 20.0)),
            viewport=ViewportState(**vp),
            data=ChartData(series=tuple(series)),
        )

    return _make


@pytest.fixture
def three_of_four():
    """A 3-entry series next to a 4-entry reference series."""
    return (
        Series.from_values([10.0, 20.0, 5.0], label="Short"),
        Series.from_values([1.0, 1.0, 1.0, 1.0], label="Reference"),
    )
