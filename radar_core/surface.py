# radar_core/surface.py
"""
The 2D drawing surface the renderers draw on.

The model follows a path/graphics-state context: paths are built with
move/line/close/ellipse/arc, then consumed by `fill_path`, `fill_gradient` or
`stroke_path`. Color, alpha, line width and dash live in the graphics state,
which `save_state` / `restore_state` push and pop.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Optional, Protocol, Sequence, Tuple

from radar_core.model import Color, Font, LinearGradient, Point, Rect

NONZERO = "nonzero"
EVEN_ODD = "evenodd"


class Surface(Protocol):  # pragma: no cover - structural only
    def save_state(self) -> None: ...

    def restore_state(self) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, point: Point) -> None: ...

    def line_to(self, point: Point) -> None: ...

    def close_path(self) -> None: ...

    def add_ellipse(self, rect: Rect) -> None: ...

    def add_arc(self, center: Point, radius: float, start_angle: float, end_angle: float) -> None: ...

    def fill_path(self, rule: str = NONZERO) -> None: ...

    def fill_gradient(self, gradient: LinearGradient, rule: str = NONZERO) -> None: ...

    def stroke_path(self) -> None: ...

    def set_stroke_color(self, color: Color) -> None: ...

    def set_fill_color(self, color: Color) -> None: ...

    def set_alpha(self, alpha: float) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def set_line_dash(self, phase: float, lengths: Optional[Sequence[float]]) -> None: ...

    def draw_text(self, text: str, point: Point, align: str, font: Font, color: Color) -> None: ...

    def draw_image(self, image: Any, point: Point, size: Tuple[float, float]) -> None: ...


@contextmanager
def saved_state(surface: Surface) -> Iterator[Surface]:
    """Scope graphics-state changes so they never leak past the block."""
    surface.save_state()
    try:
        yield surface
    finally:
        surface.restore_state()
