"""Flight director cues laid over the primary flight display."""

from __future__ import annotations

from .component import GaugeComponent
from .drawing import Airframe, Canvas, Primitive

ALT_X = 149
ALT_Y = 32
ALT_HEIGHT = 135
AIRSPEED_X = 40
AIRSPEED_Y = 32
AIRSPEED_HEIGHT = 135

ALTITUDE_WINDOW_FEET = 400.0
AIRSPEED_WINDOW_KT = 55.0
HEADING_WINDOW_DEGREES = 30.0

HEADING_CENTER = (89.0, -30.0)
HEADING_RADIUS = 70.0
INDICATOR_DEGREES_PER_TRUE_DEGREES = 1.5

_MAGENTA = (255, 0, 255)


def _edge_arrow(x: float, y: float, pointing_up: bool) -> list[tuple[float, float]]:
    """Arrow outline at the edge of a tape; (x, y) is the tape's top or bottom edge."""
    sign = -1.0 if pointing_up else 1.0
    return [
        (x - 4.0, y),
        (x - 1.0, y + sign * 3.0),
        (x - 2.7, y + sign * 3.0),
        (x - 2.7, y + sign * 6.0),
        (x - 5.3, y + sign * 6.0),
        (x - 5.3, y + sign * 3.0),
        (x - 7.0, y + sign * 3.0),
    ]


class FlightDirector(GaugeComponent):
    """Director set-points for altitude, airspeed and heading.

    The layout of the tapes and the heading rose on the PFD is fixed here,
    so this component is meant to cover the whole display.
    """

    def __init__(self, position: tuple[float, float] = (0.0, 0.0), *, parent=None) -> None:
        super().__init__(position, (200.0, 190.0), opaque=False, parent=parent)

    def render(self, canvas: Canvas, airframe: Airframe) -> None:
        super().render(canvas, airframe)
        if not airframe.director_active:
            return

        canvas.color(*_MAGENTA)
        canvas.line_width(1.0)

        self._draw_altitude_marker(canvas, airframe)
        self._draw_airspeed_marker(canvas, airframe)
        self._draw_heading_marker(canvas, airframe)
        self._draw_set_points(canvas, airframe)

    def _draw_altitude_marker(self, canvas: Canvas, airframe: Airframe) -> None:
        delta = airframe.altitude_msl_feet - airframe.director_altitude
        if -ALTITUDE_WINDOW_FEET < delta < ALTITUDE_WINDOW_FEET:
            offset = 61.0 - (delta / 100.0 * 17.0)
            canvas.draw(
                Primitive.LINE_LOOP,
                [
                    (ALT_X - 1, ALT_Y + offset + 7.0),
                    (ALT_X - 4, ALT_Y + offset + 4.0),
                    (ALT_X - 4, ALT_Y + offset + 10.0),
                ],
            )
        elif delta < ALTITUDE_WINDOW_FEET:
            canvas.draw(Primitive.LINE_LOOP, _edge_arrow(ALT_X, ALT_Y + ALT_HEIGHT, True))
        else:
            canvas.draw(Primitive.LINE_LOOP, _edge_arrow(ALT_X, ALT_Y, False))

    def _draw_airspeed_marker(self, canvas: Canvas, airframe: Airframe) -> None:
        delta = airframe.airspeed_kt - airframe.director_airspeed
        if -AIRSPEED_WINDOW_KT < delta < AIRSPEED_WINDOW_KT:
            offset = 62.0 - (delta / 10.0 * 11.3)
            canvas.draw(
                Primitive.LINE_LOOP,
                [
                    (AIRSPEED_X - 7, AIRSPEED_Y + offset + 7.0),
                    (AIRSPEED_X - 4, AIRSPEED_Y + offset + 4.0),
                    (AIRSPEED_X - 4, AIRSPEED_Y + offset + 10.0),
                ],
            )
        elif delta < AIRSPEED_WINDOW_KT:
            canvas.draw(
                Primitive.LINE_LOOP,
                _edge_arrow(AIRSPEED_X, AIRSPEED_Y + AIRSPEED_HEIGHT, True),
            )
        else:
            canvas.draw(Primitive.LINE_LOOP, _edge_arrow(AIRSPEED_X, AIRSPEED_Y, False))

    def _draw_heading_marker(self, canvas: Canvas, airframe: Airframe) -> None:
        canvas.push()
        canvas.translate(*HEADING_CENTER)
        radius = HEADING_RADIUS
        factor = INDICATOR_DEGREES_PER_TRUE_DEGREES

        delta = airframe.true_heading - airframe.director_heading
        if delta < HEADING_WINDOW_DEGREES or delta > 360.0 - HEADING_WINDOW_DEGREES:
            if delta < 180.0:
                canvas.rotate(delta * factor)
            else:
                canvas.rotate(-(360.0 - delta) * factor)
            canvas.draw(
                Primitive.LINE_LOOP,
                [(0, radius + 4.0), (3, radius + 7.0), (-3, radius + 7.0)],
            )
        else:
            side = 1.0 if delta < 180.0 else -1.0
            canvas.rotate(side * HEADING_WINDOW_DEGREES * factor)
            canvas.draw(
                Primitive.LINE_LOOP,
                [
                    (0, radius + 6),
                    (3 * side, radius + 9),
                    (3 * side, radius + 7.3),
                    (6 * side, radius + 7.3),
                    (6 * side, radius + 4.7),
                    (3 * side, radius + 4.7),
                    (3 * side, radius + 3),
                ],
            )
        canvas.pop()

    def _draw_set_points(self, canvas: Canvas, airframe: Airframe) -> None:
        canvas.set_font_size(4, 4)
        canvas.text(150, 170, f"{airframe.director_altitude:.0f}")

        canvas.set_right_aligned(True)
        canvas.text(32, 170, f"{airframe.director_airspeed:.1f}")
        canvas.text(100, 13, f"{int(airframe.director_heading):3d}")
        canvas.set_right_aligned(False)
        canvas.text(75, 13, "FD")