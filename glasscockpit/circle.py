"""Points along a circular arc, with 0 degrees up and angles clockwise."""

from __future__ import annotations

import math

from .drawing import Canvas, DrawCall, Primitive

MAX_VERTICES = 1024
_PI = 3.14159265


class CircleEvaluator:
    """Builds a vertex list along an arc and draws it on a canvas."""

    def __init__(self) -> None:
        self.x_origin = 0.0
        self.y_origin = 0.0
        self.start_arc_degrees = 0.0
        self.end_arc_degrees = 0.0
        self.degrees_per_point = 10.0
        self.radius = 1.0
        self._vertices: list[tuple[float, float]] = []

    @property
    def vertices(self) -> tuple[tuple[float, float], ...]:
        return tuple(self._vertices)

    def set_radius(self, radius: float) -> None:
        """Set the radius; non-positive values fall back to 1."""
        self.radius = radius if radius > 0 else 1.0

    def set_degrees_per_point(self, degrees_per_point: float) -> None:
        self.degrees_per_point = degrees_per_point

    def set_arc(self, start: float, end: float) -> None:
        self.start_arc_degrees = start
        self.end_arc_degrees = end

    def set_origin(self, x: float, y: float) -> None:
        self.x_origin = x
        self.y_origin = y

    def add_vertex(self, x: float, y: float) -> None:
        if len(self._vertices) >= MAX_VERTICES:
            raise OverflowError(f"vertex cache holds at most {MAX_VERTICES} vertices")
        self._vertices.append((float(x), float(y)))

    def _point_at(self, rad: float) -> tuple[float, float]:
        return (
            self.radius * math.sin(rad) + self.x_origin,
            self.radius * math.cos(rad) + self.y_origin,
        )

    def evaluate(self) -> None:
        """Append points along the arc, always including both ends."""
        start_rad = self.start_arc_degrees / 180 * _PI
        end_rad = self.end_arc_degrees / 180 * _PI
        rad_per_point = self.degrees_per_point / 180 * _PI
        if rad_per_point <= 0:
            raise ValueError("degrees per point must be positive")
        if start_rad > end_rad:
            end_rad += 2 * _PI

        current = start_rad
        while True:
            self.add_vertex(*self._point_at(current))
            current += rad_per_point
            if current >= end_rad:
                break
        self.add_vertex(*self._point_at(end_rad))

    def render(self, canvas: Canvas, primitive: Primitive) -> DrawCall:
        return canvas.draw(primitive, self._vertices)

    def reset_vertices(self) -> None:
        self._vertices.clear()