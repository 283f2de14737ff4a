"""Round dials: a marked dial with labelled ticks and a filled pie dial."""

from __future__ import annotations

import math
from collections.abc import Callable

from .circle import CircleEvaluator
from .component import GaugeComponent
from .drawing import Airframe, Canvas, Primitive

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


def _polar(radius: float, degrees: float) -> tuple[float, float]:
    """Point at an angle measured clockwise from straight up."""
    rad = math.radians(degrees)
    return (radius * math.sin(rad), radius * math.cos(rad))


class MarkedDial(GaugeComponent):
    """Dial with a filled sector, a needle and labelled tick marks.

    ``data_source`` is a callable taking an :class:`Airframe`, or the name of
    one of its attributes.
    """

    _SIZE = (30.0, 30.0)
    RADIUS = 11.0
    MIN_DEGREES = 220.0
    MAX_DEGREES = 100.0

    def __init__(
        self,
        position: tuple[float, float] = (0.0, 0.0),
        *,
        data_source: DataSource | str | None = None,
        minimum: float = 0.0,
        maximum: float = 0.0,
        tick_spacing: float = 1.0,
        tick_divisor: float = 1.0,
        parent=None,
    ) -> None:
        super().__init__(position, self._SIZE, parent=parent)
        self.data_source = _as_source(data_source)
        self.minimum = minimum
        self.maximum = maximum
        self.tick_spacing = tick_spacing
        self.tick_divisor = tick_divisor
        self._circle = CircleEvaluator()

    def _value(self, airframe: Airframe) -> float:
        if self.data_source is None:
            raise RuntimeError("dial has no data source")
        if self.maximum == 0 or self.maximum <= self.minimum:
            raise ValueError("dial needs a non-zero maximum above its minimum")
        value = float(self.data_source(airframe))
        return min(max(value, self.minimum), self.maximum)

    def _label(self, mark: float) -> str:
        if 0.01 < abs(mark) < 1.0:
            return f"{mark:0.1f}"
        return f"{mark / self.tick_divisor:.0f}"

    def render(self, canvas: Canvas, airframe: Airframe) -> None:
        super().render(canvas, airframe)
        if self.tick_spacing <= 0:
            raise ValueError("tick spacing must be positive")
        value = self._value(airframe)

        radius = self.RADIUS
        min_deg = self.MIN_DEGREES
        max_deg = self.MAX_DEGREES
        max_deg_360 = max_deg + 360 if max_deg < min_deg else max_deg
        span = max_deg_360 - min_deg
        negative_offset = -self.minimum if self.minimum < 0 else 0.0
        value_range = self.maximum - self.minimum

        canvas.line_width(2.0)
        canvas.translate(18, 18)

        canvas.color(*_BLUE_GREY)
        circle = self._circle
        circle.set_degrees_per_point(10.0)
        circle.set_radius(radius)
        circle.set_origin(0.0, 0.0)
        circle.set_arc(min_deg, value / self.maximum * span + min_deg)
        circle.reset_vertices()
        circle.add_vertex(0, 0)
        circle.evaluate()
        circle.render(canvas, Primitive.TRIANGLE_FAN)

        needle = min_deg + span * (value / value_range)
        canvas.color(*_WHITE)
        canvas.draw(Primitive.LINE_STRIP, [(0, 0), _polar(radius, needle)])

        canvas.color(*_WHITE)
        circle.set_arc(min_deg, max_deg)
        circle.reset_vertices()
        circle.evaluate()
        circle.render(canvas, Primitive.LINE_STRIP)

        canvas.set_font_size(4.0, 3.5)
        mark = self.minimum
        while mark <= self.maximum:
            degrees = min_deg + span * ((mark + negative_offset) / value_range)
            canvas.color(*_WHITE)
            canvas.draw(
                Primitive.LINE_STRIP,
                [_polar(radius, degrees), _polar(radius - 2, degrees)],
            )
            canvas.translate(-1.5, -2)
            canvas.text(*_polar(radius - 4.5, degrees), self._label(mark))
            canvas.translate(1.5, 2)
            mark += self.tick_spacing


class PieDial(MarkedDial):
    """Dial filled up to its needle, coloured by yellow and red thresholds."""

    _SIZE = (42.0, 34.0)
    RADIUS = 16.0
    MIN_DEGREES = 90.0
    MAX_DEGREES = 300.0

    def __init__(
        self,
        position: tuple[float, float] = (0.0, 0.0),
        *,
        data_source: DataSource | str | None = None,
        minimum: float = 0.0,
        maximum: float = 0.0,
        min_yellow: float = 0.0,
        min_red: float = 0.0,
        parent=None,
    ) -> None:
        super().__init__(
            position,
            data_source=data_source,
            minimum=minimum,
            maximum=maximum,
            parent=parent,
        )
        self.min_yellow = min_yellow
        self.min_red = min_red

    def _degrees_for(self, value: float) -> float:
        span = self.MAX_DEGREES - self.MIN_DEGREES
        return self.MIN_DEGREES + span * (value / (self.maximum - self.minimum))

    def render(self, canvas: Canvas, airframe: Airframe) -> None:
        GaugeComponent.render(self, canvas, airframe)
        value = self._value(airframe)
        radius = self.RADIUS
        min_deg, max_deg = self.MIN_DEGREES, self.MAX_DEGREES

        canvas.push()
        canvas.translate(20, 20)

        if value < self.min_yellow:
            canvas.color(*_BLUE_GREY)
        elif value < self.min_red:
            canvas.color(*_YELLOW)
        else:
            canvas.color(*_FILL_RED)

        circle = self._circle
        circle.set_degrees_per_point(10.0)
        circle.set_radius(radius)
        circle.set_origin(0.0, 0.0)
        circle.set_arc(min_deg, value / self.maximum * (max_deg - min_deg) + min_deg)
        circle.reset_vertices()
        circle.add_vertex(0, 0)
        circle.evaluate()
        circle.render(canvas, Primitive.TRIANGLE_FAN)

        canvas.color(*_WHITE)
        canvas.line_width(2.0)
        canvas.draw(Primitive.LINE_STRIP, [(0, 0), _polar(radius, self._degrees_for(value))])

        self.render_ticks(canvas, circle)
        self.render_arc(canvas, circle)
        canvas.translate(-20, -20)

        canvas.color(*_WHITE)
        canvas.line_width(1.0)
        canvas.draw(Primitive.LINE_STRIP, [(42, 20), (20, 20), (20, 30), (42, 30)])

        canvas.set_font_size(5, 5)
        canvas.color(*_WHITE)
        canvas.text(21.9, 22.7, f"{value:.0f}")

        canvas.pop()

    def render_ticks(self, canvas: Canvas, circle: CircleEvaluator) -> None:
        """Draw the yellow and red threshold ticks outside the dial."""
        radius = self.RADIUS

        canvas.color(*_YELLOW)
        rad = math.radians(self._degrees_for(self.min_yellow))
        canvas.draw(
            Primitive.LINE_STRIP,
            [
                (radius * math.sin(rad), radius * math.cos(rad)),
                ((radius + 4) * math.sin(rad), (radius + 4) * math.cos(rad)),
            ],
        )

        canvas.color(*_RED)
        rad = math.radians(self._degrees_for(self.min_red))
        canvas.draw(
            Primitive.LINE_STRIP,
            [
                (radius * math.sin(rad), radius * math.cos(rad)),
                ((radius + 4) * math.sin(rad), (radius + 5) * math.cos(rad)),
            ],
        )

    def render_arc(self, canvas: Canvas, circle: CircleEvaluator) -> None:
        """Draw the white outline arc of the dial with the given circle."""
        canvas.color(*_WHITE)
        circle.set_arc(self.MIN_DEGREES, self.MAX_DEGREES)
        canvas.line_width(3.0)
        circle.reset_vertices()
        circle.evaluate()
        circle.render(canvas, Primitive.LINE_STRIP)