"""Compass-rose heading indicator drawn as an arc below the horizon."""

from __future__ import annotations

from .circle import CircleEvaluator
from .component import GaugeComponent
from .drawing import Airframe, Canvas, Primitive

CENTER_X = 60.0
CENTER_Y = -35.0
RADIUS = 70.0
INDICATOR_DEGREES_PER_TRUE_DEGREES = 1.5
BIG_FONT_SIZE = 5.0
LITTLE_FONT_SIZE = 3.5

_GRAY = (51, 51, 76)
_WHITE = (255, 255, 255)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


class HeadingIndicator(GaugeComponent):
    """Heading rose on which each true degree spans 1.5 display degrees."""

    def __init__(self, position: tuple[float, float] = (0.0, 0.0), *, parent=None) -> None:
        super().__init__(position, (130.0, 45.0), parent=parent)
        self._circle = CircleEvaluator()

    def render(self, canvas: Canvas, airframe: Airframe) -> None:
        super().render(canvas, airframe)
        factor = INDICATOR_DEGREES_PER_TRUE_DEGREES

        canvas.translate(CENTER_X, CENTER_Y)

        canvas.color(*_GRAY)
        canvas.line_width(1.5)
        circle = self._circle
        circle.set_radius(RADIUS)
        circle.set_arc(300, 60)
        circle.set_degrees_per_point(2.5)
        circle.set_origin(0.0, 0.0)
        circle.reset_vertices()
        circle.add_vertex(0, 0)
        circle.evaluate()
        circle.render(canvas, Primitive.TRIANGLE_FAN)
        canvas.line_width(1.0)
        circle.render(canvas, Primitive.LINE_STRIP)

        canvas.color(*_WHITE)
        canvas.draw(
            Primitive.LINE_LOOP,
            [(0.0, RADIUS), (-2.8, RADIUS + 3.25), (2.8, RADIUS + 3.25)],
        )

        heading = float(airframe.true_heading)
        whole = int(heading)
        nearest_ten = whole - _trunc_mod(whole, 10)

        canvas.rotate((heading - nearest_ten) * factor)
        canvas.rotate(40 * factor)

        for mark in range(nearest_ten - 40, nearest_ten + 41, 5):
            display = _trunc_mod(mark + 720, 360)
            if _trunc_mod(display, 10) == 0:
                tick = 4.0
                self._draw_label(canvas, display, tick)
            else:
                tick = 2.5
            canvas.draw(Primitive.LINES, [(0, RADIUS), (0, RADIUS - tick)])
            canvas.rotate(-5.0 * factor)

    @staticmethod
    def _draw_label(canvas: Canvas, display: int, tick: float) -> None:
        size = BIG_FONT_SIZE if _trunc_mod(display, 30) == 0 else LITTLE_FONT_SIZE
        font_x = -size if display >= 100 else -size / 2
        canvas.set_font_size(size, size)
        canvas.text(font_x, RADIUS - tick - size, str(_trunc_div(display, 10)))