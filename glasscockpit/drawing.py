"""Recording canvas, drawing primitives and the flight data read by gauges."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Primitive(Enum):
    """How a list of vertices is assembled into shapes."""

    POINTS = "points"
    LINES = "lines"
    LINE_STRIP = "line_strip"
    LINE_LOOP = "line_loop"
    TRIANGLES = "triangles"
    TRIANGLE_FAN = "triangle_fan"
    TRIANGLE_STRIP = "triangle_strip"
    QUADS = "quads"
    POLYGON = "polygon"


@dataclass(frozen=True)
class _Affine:
    """2D affine transform: x' = a*x + c*y + e, y' = b*x + d*y + f."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def __matmul__(self, other: _Affine) -> _Affine:
        return _Affine(
            a=self.a * other.a + self.c * other.b,
            b=self.b * other.a + self.d * other.b,
            c=self.a * other.c + self.c * other.d,
            d=self.b * other.c + self.d * other.d,
            e=self.a * other.e + self.c * other.f + self.e,
            f=self.b * other.e + self.d * other.f + self.f,
        )

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)


_IDENTITY = _Affine()


@dataclass
class Airframe:
    """Snapshot of the aircraft state that gauges display."""

    roll: float = 0.0
    pitch: float = 0.0
    altitude_msl_feet: float = 0.0
    airspeed_kt: float = 0.0
    true_heading: float = 0.0
    ground_speed_ms: float = 0.0
    latitude: float = 0.0
    longitude: float = 0.0
    wind_speed: float = 0.0
    wind_direction: float = 0.0
    director_active: bool = False
    director_pitch: float = 0.0
    director_roll: float = 0.0
    director_altitude: float = 0.0
    director_airspeed: float = 0.0
    director_heading: float = 0.0
    engine_rpm: float = 0.0
    engine_egt: float = 0.0
    engine_cht: float = 0.0
    engine_mixture: float = 0.0


Color = tuple[int, int, int, int]
Point = tuple[float, float]


@dataclass(frozen=True)
class DrawCall:
    """One recorded primitive: model-space vertices and their transformed points."""

    primitive: Primitive
    vertices: tuple[Point, ...]
    points: tuple[Point, ...]
    color: Color
    line_width: float


@dataclass(frozen=True)
class TextItem:
    """One recorded string with its transformed anchor position."""

    text: str
    x: float
    y: float
    size: tuple[float, float]
    right_aligned: bool
    color: Color


class Canvas:
    """Records everything drawn on it, keeping a modelview matrix stack."""

    def __init__(self) -> None:
        self.calls: list[DrawCall] = []
        self.text_items: list[TextItem] = []
        self.current_color: Color = (255, 255, 255, 255)
        self.current_line_width = 1.0
        self.viewport_rect: tuple[int, int, int, int] | None = None
        self.projection: tuple[float, float, float, float] | None = None
        self.font_size: tuple[float, float] = (1.0, 1.0)
        self.right_aligned = False
        self._matrix = _IDENTITY
        self._stack: list[_Affine] = []

    def color(self, r: int, g: int, b: int, a: int = 255) -> None:
        """Set the colour used by later drawing, components 0..255."""
        components = (r, g, b, a)
        if any(not 0 <= value <= 255 for value in components):
            raise ValueError(f"colour components must be within 0..255: {components}")
        self.current_color = (int(r), int(g), int(b), int(a))

    def line_width(self, width: float) -> None:
        if width <= 0:
            raise ValueError("line width must be positive")
        self.current_line_width = float(width)

    def push(self) -> None:
        self._stack.append(self._matrix)

    def pop(self) -> None:
        if not self._stack:
            raise IndexError("matrix stack is empty")
        self._matrix = self._stack.pop()

    def load_identity(self) -> None:
        self._matrix = _IDENTITY

    def translate(self, x: float, y: float) -> None:
        self._matrix = self._matrix @ _Affine(e=x, f=y)

    def rotate(self, degrees: float) -> None:
        """Rotate counter-clockwise by the given angle."""
        rad = math.radians(degrees)
        cos, sin = math.cos(rad), math.sin(rad)
        self._matrix = self._matrix @ _Affine(a=cos, b=sin, c=-sin, d=cos)

    def scale(self, x: float, y: float) -> None:
        self._matrix = self._matrix @ _Affine(a=x, d=y)

    def transform_point(self, x: float, y: float) -> Point:
        return self._matrix.apply(x, y)

    def viewport(self, x: int, y: int, width: int, height: int) -> None:
        self.viewport_rect = (x, y, width, height)

    def ortho(self, left: float, right: float, bottom: float, top: float) -> None:
        self.projection = (left, right, bottom, top)

    def draw(self, primitive: Primitive, vertices) -> DrawCall:
        """Record a primitive built from an iterable of (x, y) pairs."""
        model = tuple((float(x), float(y)) for x, y in vertices)
        call = DrawCall(
            primitive=Primitive(primitive),
            vertices=model,
            points=tuple(self._matrix.apply(x, y) for x, y in model),
            color=self.current_color,
            line_width=self.current_line_width,
        )
        self.calls.append(call)
        return call

    def set_font_size(self, width: float, height: float) -> None:
        self.font_size = (float(width), float(height))

    def set_right_aligned(self, right_aligned: bool) -> None:
        self.right_aligned = bool(right_aligned)

    def text(self, x: float, y: float, text: str) -> TextItem:
        tx, ty = self._matrix.apply(x, y)
        item = TextItem(
            text=text,
            x=tx,
            y=ty,
            size=self.font_size,
            right_aligned=self.right_aligned,
            color=self.current_color,
        )
        self.text_items.append(item)
        return item

    def texts(self) -> list[str]:
        """The strings drawn so far, in order."""
        return [item.text for item in self.text_items]