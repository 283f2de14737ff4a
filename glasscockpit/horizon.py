"""Attitude display: sky and ground, pitch ladder, bank scale and aircraft symbol."""

from __future__ import annotations

from .circle import CircleEvaluator
from .component import GaugeComponent
from .drawing import Airframe, Canvas, Primitive

_GROUND_EDGE = (195, 82, 0)
_GROUND_HORIZON = (253, 88, 0)
_SKY_HORIZON = (68, 195, 255)
_SKY_EDGE = (30, 71, 247)

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)
_MAGENTA = (255, 0, 255)

_GRADIENT_BANDS = 15

_PITCH_LADDER = [
    (-100, 0), (100, 0),
    (-5, 5), (5, 5),
    (-10, 10), (10, 10),
    (-5, 15), (5, 15),
    (-20, 20), (20, 20),
    (-5, 25), (5, 25),
    (-10, 30), (10, 30),
    (-5, 35), (5, 35),
    (-20, 40), (20, 40),
    (-5, -5), (5, -5),
    (-10, -10), (10, -10),
    (-5, -15), (5, -15),
    (-20, -20), (20, -20),
    (-5, -25), (5, -25),
    (-10, -30), (10, -30),
    (-5, -35), (5, -35),
    (-20, -40), (20, -40),
]

_PITCH_LABELS = [
    (-27.5, 18.0, "10"),
    (21.0, 18.0, "10"),
    (-27.5, -22.0, "10"),
    (21.0, -22.0, "10"),
    (-27.5, 38.0, "20"),
    (21.0, 38.0, "20"),
    (-27.5, -42.0, "20"),
    (21.0, -42.0, "20"),
]

# (rotation step in degrees, outer end of the tick) for one side of the bank scale
_BANK_TICKS = [(10.0, 49), (10.0, 49), (10.0, 53), (15.0, 49), (15.0, 51)]

# (origin, arc start, arc end, corner point) for the rounded-off corners
_CORNERS = [
    ((3.77, 3.77), 180, 270, (-1.0, -1.0)),
    ((3.77, 94.23), 270, 360, (-1.0, 99.0)),
    ((90.23, 94.23), 0, 90, (95.0, 99.0)),
    ((90.23, 3.77), 90, 180, (95.0, -1.0)),
]


def _blend(a: tuple[int, int, int], b: tuple[int, int, int], t: float) -> tuple[int, int, int]:
    return tuple(round(x + (y - x) * t) for x, y in zip(a, b))


def _gradient_rect(
    canvas: Canvas,
    x0: float,
    x1: float,
    y0: float,
    y1: float,
    color0: tuple[int, int, int],
    color1: tuple[int, int, int],
) -> None:
    """Fill a rectangle with colour varying linearly from y0 to y1, in bands."""
    band = (y1 - y0) / _GRADIENT_BANDS
    for index in range(_GRADIENT_BANDS):
        lower = y0 + index * band
        upper = lower + band
        canvas.color(*_blend(color0, color1, (index + 0.5) / _GRADIENT_BANDS))
        canvas.draw(Primitive.POLYGON, [(x0, lower), (x0, upper), (x1, upper), (x1, lower)])


class ArtificialHorizon(GaugeComponent):
    """Horizon that rolls and pitches with the aircraft, with a bank scale."""

    def __init__(self, position: tuple[float, float] = (0.0, 0.0), *, parent=None) -> None:
        super().__init__(position, (94.0, 98.0), parent=parent)
        self._circle = CircleEvaluator()

    def render(self, canvas: Canvas, airframe: Airframe) -> None:
        super().render(canvas, airframe)
        canvas.push()

        self._draw_background(canvas, airframe)
        self._draw_bank_scale(canvas)
        self._draw_bank_pointer(canvas, airframe)
        if airframe.director_active:
            self._draw_director(canvas, airframe)
        self._draw_aircraft_symbol(canvas)
        self._draw_rounded_corners(canvas)

        canvas.pop()

    def _reset(self, canvas: Canvas) -> None:
        canvas.pop()
        canvas.push()

    def _draw_background(self, canvas: Canvas, airframe: Airframe) -> None:
        canvas.translate(47, 49)
        canvas.rotate(airframe.roll)
        # One degree of pitch moves the horizon two units.
        canvas.translate(0, airframe.pitch * -2.0)

        _gradient_rect(canvas, -75, 75, -75, 0, _GROUND_EDGE, _GROUND_HORIZON)
        _gradient_rect(canvas, -75, 75, 0, 75, _SKY_HORIZON, _SKY_EDGE)

        canvas.color(*_WHITE)
        canvas.line_width(1.0)
        canvas.draw(Primitive.LINES, _PITCH_LADDER)

        canvas.set_font_size(4.0, 4.0)
        for x, y, label in _PITCH_LABELS:
            canvas.text(x, y, label)

    def _draw_bank_scale(self, canvas: Canvas) -> None:
        self._reset(canvas)
        canvas.color(*_WHITE)
        canvas.translate(47, 49)
        canvas.draw(
            Primitive.POLYGON,
            [(0.0, 46.0), (-2.3, 49.0), (2.3, 49.0), (0.0, 46.0)],
        )
        for step, outer in _BANK_TICKS:
            canvas.rotate(step)
            canvas.draw(Primitive.LINES, [(0, 46), (0, outer)])

        self._reset(canvas)
        canvas.translate(47, 49)
        for step, outer in _BANK_TICKS:
            canvas.rotate(-step)
            canvas.draw(Primitive.LINES, [(0, 46), (0, outer)])

    def _draw_bank_pointer(self, canvas: Canvas, airframe: Airframe) -> None:
        self._reset(canvas)
        canvas.translate(47, 49)
        canvas.rotate(airframe.roll)
        canvas.color(*_WHITE)
        canvas.line_width(2.0)
        canvas.draw(
            Primitive.LINE_LOOP,
            [(-4.5, 39.5), (4.5, 39.5), (4.5, 41.5), (-4.5, 41.5)],
        )
        canvas.draw(Primitive.LINE_STRIP, [(-4.5, 41.5), (0, 46), (4.5, 41.5)])

    def _draw_director(self, canvas: Canvas, airframe: Airframe) -> None:
        self._reset(canvas)
        canvas.translate(47, 49 + airframe.director_pitch * 2.0)
        canvas.rotate(airframe.director_roll)
        canvas.color(*_MAGENTA)
        canvas.line_width(3.0)
        canvas.draw(
            Primitive.LINE_STRIP,
            [
                (-20.0, 0.0), (-8.0, 0.0), (-4.0, -4.0), (0.0, 0.0),
                (4.0, -4.0), (8.0, 0.0), (20.0, 0.0),
            ],
        )

    def _draw_aircraft_symbol(self, canvas: Canvas) -> None:
        self._reset(canvas)
        canvas.translate(47, 49)

        center = [(1.25, 1.25), (1.25, -1.25), (-1.25, -1.25), (-1.25, 1.25)]
        canvas.color(*_BLACK)
        canvas.draw(Primitive.POLYGON, center + [center[0]])
        canvas.color(*_WHITE)
        canvas.line_width(2.0)
        canvas.draw(Primitive.LINE_LOOP, center)

        for side in (-1, 1):
            bar = [(39 * side, 1.25), (19 * side, 1.25), (19 * side, -1.25), (39 * side, -1.25)]
            leg = [(19 * side, 1.25), (19 * side, -5.75), (22 * side, -5.75), (22 * side, 1.25)]
            outline = [
                (39 * side, 1.25), (19 * side, 1.25), (19 * side, -5.75),
                (22 * side, -5.75), (22 * side, -1.25), (39 * side, -1.25),
            ]
            canvas.color(*_BLACK)
            canvas.draw(Primitive.POLYGON, bar + [bar[0]])
            canvas.draw(Primitive.POLYGON, leg + [leg[0]])
            canvas.color(*_WHITE)
            canvas.line_width(2.0)
            canvas.draw(Primitive.LINE_LOOP, outline)

    def _draw_rounded_corners(self, canvas: Canvas) -> None:
        self._reset(canvas)
        circle = self._circle
        circle.set_radius(3.77)
        canvas.color(*_BLACK)
        canvas.line_width(1.0)
        for (ox, oy), start, end, corner in _CORNERS:
            circle.set_origin(ox, oy)
            circle.set_arc(start, end)
            circle.set_degrees_per_point(15)
            circle.reset_vertices()
            circle.add_vertex(*corner)
            circle.evaluate()
            circle.render(canvas, Primitive.TRIANGLE_FAN)
            circle.render(canvas, Primitive.LINE_STRIP)