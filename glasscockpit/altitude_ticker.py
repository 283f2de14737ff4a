"""Rolling-digit altitude readout shown beside the altitude tape."""

from __future__ import annotations

from dataclasses import dataclass

from .component import GaugeComponent
from .drawing import Airframe, Canvas, Primitive

BIG_FONT_HEIGHT = 8.0
LITTLE_FONT_HEIGHT = 6.5

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)
_GREEN = (0, 179, 0)

_CROSS_HATCH = [
    (5.0, 7.6666), (6.0, 5.0),
    (5.0, 10.3333), (7.0, 5.0),
    (5.0, 13.0), (8.0, 5.0),
    (6.0, 13.0), (8.0, 7.6666),
    (7.0, 13.0), (8.0, 10.3333),
]


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    """Remainder that takes the sign of the dividend."""
    return a - b * _trunc_div(a, b)


@dataclass(frozen=True)
class TensDigits:
    """The rolling tens column: five digits and how far the column is shifted.

    ``shift`` is measured in small-font heights; positive moves the column up.
    """

    top2: int
    top: int
    middle: int
    bottom: int
    bottom2: int
    shift: float

    @property
    def column(self) -> tuple[int, int, int, int, int]:
        """The digits from top to bottom."""
        return (self.top2, self.top, self.middle, self.bottom, self.bottom2)


@dataclass(frozen=True)
class _Split:
    ten_thousands: int | None
    thousands: int
    hundreds: int
    rest: int
    rest_feet: float


def _split(altitude: float) -> _Split:
    alt_f = float(altitude)
    alt = int(alt_f)

    ten_thousands = None
    if alt >= 10000:
        ten_thousands = _trunc_div(alt, 10000)
        alt_f -= 10000 * ten_thousands
        alt -= 10000 * ten_thousands

    thousands = _trunc_div(alt, 1000)
    alt_f -= 1000 * thousands
    alt -= 1000 * thousands

    hundreds = _trunc_div(alt, 100)
    alt_f -= 100 * hundreds
    alt -= 100 * hundreds

    return _Split(ten_thousands, thousands, hundreds, alt, alt_f)


def _tens(rest: int, rest_feet: float) -> TensDigits:
    middle = _trunc_div(rest, 10)
    round_up_nine = False
    if middle in (1, 3, 5, 7):
        middle += 1
    elif middle == 9:
        middle = 0
        round_up_nine = True

    if middle != 0:
        shift = (middle * 10 - rest_feet) / 20
    elif round_up_nine:
        shift = (100 - rest_feet) / 20
    else:
        shift = (0 - rest_feet) / 20

    return TensDigits(
        top2=_trunc_mod(middle + 4, 10),
        top=_trunc_mod(middle + 2, 10),
        middle=middle,
        bottom=_trunc_mod(middle - 2 + 10, 10),
        bottom2=_trunc_mod(middle - 4 + 10, 10),
        shift=shift,
    )


def tens_digits(altitude: float) -> TensDigits:
    """The tens column shown for an altitude in feet; tens step in twenties."""
    parts = _split(altitude)
    return _tens(parts.rest, parts.rest_feet)


class AltitudeTicker(GaugeComponent):
    """Boxed altitude readout whose tens and units roll with the altitude."""

    def __init__(self, position: tuple[float, float] = (0.0, 0.0), *, parent=None) -> None:
        super().__init__(position, (28.0, 18.0), parent=parent)

    def render(self, canvas: Canvas, airframe: Airframe) -> None:
        super().render(canvas, airframe)

        canvas.color(*_BLACK)
        canvas.draw(Primitive.QUADS, [(3.5, 0.0), (28.0, 0.0), (28.0, 18.0), (3.5, 18.0)])
        canvas.draw(Primitive.TRIANGLES, [(0.0, 9.0), (3.5, 6.0), (3.5, 12.0)])

        canvas.color(*_WHITE)
        canvas.line_width(2)
        canvas.draw(
            Primitive.LINE_STRIP,
            [(3.5, 18.0), (28.0, 18.0), (28.0, 0.0), (3.5, 0.0)],
        )
        canvas.line_width(1.5)
        canvas.draw(
            Primitive.LINE_STRIP,
            [(3.5, 0.0), (3.5, 6.0), (0.0, 9.0), (3.5, 12.0), (3.5, 18.0)],
        )

        height = self.physical_size[1]
        text_y = height / 2 - BIG_FONT_HEIGHT / 2
        canvas.set_font_size(6.0, BIG_FONT_HEIGHT)

        parts = _split(airframe.altitude_msl_feet)

        canvas.color(*_WHITE)
        if parts.ten_thousands is not None:
            canvas.text(5.0, text_y, str(parts.ten_thousands))
        else:
            canvas.color(*_GREEN)
            canvas.line_width(2.0)
            canvas.draw(Primitive.LINES, _CROSS_HATCH)
            canvas.color(*_WHITE)

        canvas.text(9.5, text_y, str(parts.thousands))

        canvas.set_font_size(5.0, LITTLE_FONT_HEIGHT)
        text_y = height / 2 - LITTLE_FONT_HEIGHT / 2
        canvas.text(15.0, text_y, str(parts.hundreds))

        tens = _tens(parts.rest, parts.rest_feet)
        canvas.translate(0, tens.shift * LITTLE_FONT_HEIGHT)

        step = LITTLE_FONT_HEIGHT + LITTLE_FONT_HEIGHT / 10
        for rows_up, digit in zip((2, 1, 0, -1, -2), tens.column):
            y = text_y + rows_up * step
            canvas.text(19.0, y, str(digit))
            canvas.text(23.0, y, "0")