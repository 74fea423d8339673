# radar_utils/mpl_surface.py
"""
Matplotlib implementation of the radar drawing surface.

Coordinates are screen-like: the caller is expected to invert the y axis
(`ax.set_ylim(height, 0)`) so angles grow clockwise as in the renderer.
Every fill or stroke becomes one artist on the axes.

Text is drawn with `fontsize=font.size`, so `Font.size` is in points. The
renderer places value labels `font.line_height` above a point in data units,
which assumes one data unit is about one point. `radar_chart` keeps to that:
its 400-unit canvas spans roughly 360 points on the default 6.5 inch figure.
Other hosts that zoom far in or out should scale `Font.size` to match.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import LinearSegmentedColormap, to_rgba
from matplotlib.image import AxesImage
from matplotlib.patches import PathPatch
from matplotlib.path import Path
from matplotlib.transforms import Affine2D

from radar_core.model import Color, Font, LinearGradient, Point, Rect
from radar_core.surface import EVEN_ODD, NONZERO

_DEFAULT_STATE = dict(
    stroke="#000000",
    fill="#000000",
    alpha=1.0,
    line_width=1.0,
    dash=None,
)

GRADIENT_RESOLUTION = 256


def _signed_area(verts: np.ndarray) -> float:
    x, y = verts[:, 0], verts[:, 1]
    return 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def _split_subpaths(verts: List[Tuple[float, float]], codes: List[int]) -> List[Tuple[list, list]]:
    subpaths: List[Tuple[list, list]] = []
    for v, c in zip(verts, codes):
        if c == Path.MOVETO or not subpaths:
            subpaths.append(([], []))
        subpaths[-1][0].append(v)
        subpaths[-1][1].append(c)
    return subpaths


def _reverse_subpath(verts: list, codes: list) -> Tuple[list, list]:
    closed = codes[-1] == Path.CLOSEPOLY
    body_v = verts[:-1] if closed else verts
    body_c = codes[:-1] if closed else codes
    rv = body_v[::-1]
    rc = [Path.MOVETO] + list(reversed(body_c[1:]))
    if closed:
        rv.append(rv[0])
        rc.append(Path.CLOSEPOLY)
    return rv, rc


def even_odd_path(verts: List[Tuple[float, float]], codes: List[int]) -> Path:
    """Rewind nested subpaths so nonzero rendering leaves even-odd holes.

    Subpaths are assumed to be listed outermost first, each nested in the
    previous one (rings, annuli).
    """
    out_v: list = []
    out_c: list = []
    reference = 0.0
    for k, (v, c) in enumerate(_split_subpaths(verts, codes)):
        body = np.asarray(v[:-1] if c[-1] == Path.CLOSEPOLY else v, dtype=float)
        area = _signed_area(body) if len(body) > 2 else 0.0
        if k == 0:
            reference = area
        elif area and reference and ((area > 0) == (reference > 0)) != (k % 2 == 0):
            v, c = _reverse_subpath(v, c)
        out_v.extend(v)
        out_c.extend(c)
    return Path(np.asarray(out_v, dtype=float), out_c)


class MatplotlibSurface:
    """Draws radar primitives as patches, images and text on a matplotlib Axes."""

    def __init__(self, ax: plt.Axes):
        self.ax = ax
        self._state: Dict[str, Any] = dict(_DEFAULT_STATE)
        self._stack: List[Dict[str, Any]] = []
        self._verts: List[Tuple[float, float]] = []
        self._codes: List[int] = []
        self._start: Optional[Tuple[float, float]] = None

    # ---- graphics state ----
    def save_state(self) -> None:
        self._stack.append(dict(self._state))

    def restore_state(self) -> None:
        if self._stack:
            self._state = self._stack.pop()

    def set_stroke_color(self, color: Color) -> None:
        self._state["stroke"] = color

    def set_fill_color(self, color: Color) -> None:
        self._state["fill"] = color

    def set_alpha(self, alpha: float) -> None:
        self._state["alpha"] = alpha

    def set_line_width(self, width: float) -> None:
        self._state["line_width"] = width

    def set_line_dash(self, phase: float, lengths: Optional[Sequence[float]]) -> None:
        self._state["dash"] = (phase, tuple(lengths)) if lengths else None

    def _rgba(self, color: Color) -> Tuple[float, float, float, float]:
        r, g, b, a = to_rgba(color)
        return (r, g, b, a * self._state["alpha"])

    # ---- path construction ----
    def begin_path(self) -> None:
        self._verts, self._codes, self._start = [], [], None

    def move_to(self, point: Point) -> None:
        self._start = (point.x, point.y)
        self._verts.append(self._start)
        self._codes.append(Path.MOVETO)

    def line_to(self, point: Point) -> None:
        if self._start is None:
            self.move_to(point)
            return
        self._verts.append((point.x, point.y))
        self._codes.append(Path.LINETO)

    def close_path(self) -> None:
        if self._start is None:
            return
        self._verts.append(self._start)
        self._codes.append(Path.CLOSEPOLY)
        self._start = None

    def _append(self, path: Path) -> None:
        self._verts.extend(tuple(v) for v in path.vertices)
        self._codes.extend(int(c) for c in path.codes)
        self._start = None

    def add_ellipse(self, rect: Rect) -> None:
        t = Affine2D().scale(rect.width / 2.0, rect.height / 2.0).translate(rect.mid_x, rect.mid_y)
        self._append(t.transform_path(Path.unit_circle()))

    def add_arc(self, center: Point, radius: float, start_angle: float, end_angle: float) -> None:
        t = Affine2D().scale(radius).translate(center.x, center.y)
        self._append(t.transform_path(Path.arc(start_angle, end_angle)))

    def _take_path(self, rule: str = NONZERO) -> Optional[Path]:
        verts, codes = self._verts, self._codes
        self.begin_path()
        if not verts:
            return None
        if rule == EVEN_ODD:
            return even_odd_path(verts, codes)
        return Path(np.asarray(verts, dtype=float), codes)

    # ---- painting ----
    def fill_path(self, rule: str = NONZERO) -> None:
        path = self._take_path(rule)
        if path is None:
            return
        self.ax.add_patch(
            PathPatch(path, facecolor=self._rgba(self._state["fill"]), edgecolor="none", linewidth=0)
        )

    def fill_gradient(self, gradient: LinearGradient, rule: str = NONZERO) -> None:
        path = self._take_path(rule)
        if path is None:
            return
        box = path.get_extents()
        if box.width == 0 or box.height == 0:
            return

        colors = [to_rgba(c) for c in gradient.colors] or [to_rgba(self._state["fill"])]
        if len(colors) == 1:
            colors = colors * 2
        cmap = LinearSegmentedColormap.from_list("radar_fill", colors)

        yy, xx = np.mgrid[0:1:GRADIENT_RESOLUTION * 1j, 0:1:GRADIENT_RESOLUTION * 1j]
        theta = np.deg2rad(gradient.angle)
        t = xx * np.cos(theta) + yy * np.sin(theta)
        span = float(np.ptp(t)) or 1.0
        t = (t - t.min()) / span

        clip = PathPatch(path, facecolor="none", edgecolor="none", transform=self.ax.transData)
        self.ax.add_patch(clip)
        im = AxesImage(
            self.ax,
            cmap=cmap,
            interpolation="bilinear",
            origin="upper",
            extent=(box.x0, box.x1, box.y1, box.y0),
        )
        im.set_data(t)
        im.set_alpha(self._state["alpha"])
        self.ax.add_image(im)
        im.set_clip_path(clip)

    def stroke_path(self) -> None:
        path = self._take_path()
        if path is None:
            return
        dash = self._state["dash"]
        self.ax.add_patch(
            PathPatch(
                path,
                fill=False,
                edgecolor=self._rgba(self._state["stroke"]),
                linewidth=self._state["line_width"],
                linestyle=dash if dash is not None else "solid",
            )
        )

    def draw_text(self, text: str, point: Point, align: str, font: Font, color: Color) -> None:
        self.ax.text(
            point.x,
            point.y,
            text,
            ha=align,
            va="top",
            fontsize=font.size,
            family=font.family,
            color=self._rgba(color),
        )

    def draw_image(self, image: Any, point: Point, size: Tuple[float, float]) -> None:
        w, h = size
        im = AxesImage(
            self.ax,
            origin="upper",
            extent=(point.x - w / 2.0, point.x + w / 2.0, point.y + h / 2.0, point.y - h / 2.0),
        )
        im.set_data(np.asarray(image))
        im.set_alpha(self._state["alpha"])
        self.ax.add_image(im)
