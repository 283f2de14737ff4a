"""Vertical bar graph with yellow and red warning thresholds."""

from __future__ import annotations

from collections.abc import Callable

from .component import GaugeComponent
from .drawing import Airframe, Canvas, Primitive

BOX_Y = 25.0
BOX_X = 6.0
STRIPE_X = 3.0
BOX_OFFSET_X = 2.0
GAP_Y = 1.5

_BLUE_GREY = (51, 51, 76)
_YELLOW = (247, 231, 8)
_FILL_RED = (255, 20, 20)
_RED = (255, 0, 0)
_WHITE = (255, 255, 255)

DataSource = Callable[[Airframe], float]


def _attribute_reader(name: str) -> DataSource:
    def read(airframe: Airframe) -> float:
        return getattr(airframe, name)

    return read


def _as_source(source: DataSource | str | None) -> DataSource | None:
    if isinstance(source, str):
        return _attribute_reader(source)
    return source


class GenericBargraph(GaugeComponent):
    """Bar that fills with a value; its colour changes as it drops below thresholds.

    ``data_source`` is a callable taking an :class:`Airframe`, or the name of
    one of its attributes.
    """

    def __init__(
        self,
        position: tuple[float, float] = (0.0, 0.0),
        *,
        data_source: DataSource | str | None = None,
        minimum: float = 0.0,
        maximum: float = 0.0,
        max_yellow: float = 0.0,
        max_red: float = 0.0,
        parent=None,
    ) -> None:
        super().__init__(position, (16.0, 37.0), parent=parent)
        self.data_source = _as_source(data_source)
        self.minimum = minimum
        self.maximum = maximum
        self.max_yellow = max_yellow
        self.max_red = max_red

    def _value(self, airframe: Airframe) -> float:
        if self.data_source is None:
            raise RuntimeError("bar graph has no data source")
        if self.maximum == 0 or self.maximum <= self.minimum:
            raise ValueError("bar graph needs a non-zero maximum above its minimum")
        value = float(self.data_source(airframe))
        return min(max(value, self.minimum), self.maximum)

    def _fraction_height(self, value: float) -> float:
        return (value - self.minimum) / self.maximum * BOX_Y

    def render(self, canvas: Canvas, airframe: Airframe) -> None:
        super().render(canvas, airframe)
        value = self._value(airframe)

        canvas.push()
        canvas.translate(BOX_OFFSET_X, 0.0)

        if value > self.max_yellow:
            canvas.color(*_BLUE_GREY)
        elif value > self.max_red:
            canvas.color(*_YELLOW)
        else:
            canvas.color(*_FILL_RED)

        fill_y = self._fraction_height(value)
        right = BOX_X + STRIPE_X
        canvas.draw(
            Primitive.POLYGON,
            [(STRIPE_X, 0.0), (right, 0.0), (right, fill_y), (STRIPE_X, fill_y)],
        )

        yellow_y = self._fraction_height(self.max_yellow)
        canvas.color(*_YELLOW)
        canvas.line_width(2.0)
        canvas.draw(Primitive.LINES, [(0.0, yellow_y), (STRIPE_X, yellow_y)])

        red_y = self._fraction_height(self.max_red)
        canvas.color(*_RED)
        canvas.draw(Primitive.LINES, [(0.0, red_y), (STRIPE_X, red_y)])

        canvas.color(*_WHITE)
        canvas.draw(Primitive.LINES, [(STRIPE_X, fill_y), (right, fill_y)])
        canvas.draw(
            Primitive.LINE_STRIP,
            [(right, BOX_Y), (right, 0.0), (STRIPE_X, 0.0), (STRIPE_X, BOX_Y)],
        )

        canvas.translate(-BOX_OFFSET_X, GAP_Y)

        canvas.color(*_WHITE)
        canvas.line_width(1.0)
        canvas.draw(
            Primitive.LINE_LOOP,
            [(0.0, BOX_Y), (0.0, BOX_Y + 8.5), (16.0, BOX_Y + 8.5), (16.0, BOX_Y)],
        )

        canvas.set_font_size(4, 4)
        canvas.color(*_WHITE)
        canvas.text(1.9, BOX_Y + 2.1, f"{value:.1f}")

        canvas.pop()