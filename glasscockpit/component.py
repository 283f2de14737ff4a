"""Base class for the drawable pieces that make up a gauge."""

from __future__ import annotations

from .drawing import Airframe, Canvas


class GaugeComponent:
    """A self-positioning drawing element placed inside a parent gauge.

    Positions and sizes are physical units; pixel placement follows from
    ``units_per_pixel`` and ``scale``.
    """

    def __init__(
        self,
        position: tuple[float, float] = (0.0, 0.0),
        size: tuple[float, float] = (0.0, 0.0),
        *,
        opaque: bool = True,
        parent=None,
    ) -> None:
        self.physical_position = position
        self.physical_size = size
        self.scale = (1.0, 1.0)
        self.units_per_pixel = 1.0
        self.pixel_position = (0, 0)
        self.pixel_size = (0, 0)
        self.opaque = opaque
        self.parent = parent
        self.last_click: tuple[int, int, float, float] | None = None

    def click_test(self, button: int, state: int, x: int, y: int) -> bool:
        """True when the pixel (x, y) lies inside the component."""
        px, py = self.pixel_position
        width, height = self.pixel_size
        return px <= x <= px + width and py <= y <= py + height

    def handle_mouse_button(self, button: int, state: int, x: int, y: int) -> bool:
        """Pass a click inside the component on in physical coordinates."""
        if not self.click_test(button, state, x, y):
            return False
        physical_x = (x - self.pixel_position[0]) * self.units_per_pixel / self.scale[0]
        physical_y = (y - self.pixel_position[1]) * self.units_per_pixel / self.scale[1]
        self.on_mouse_button(button, state, physical_x, physical_y)
        return True

    def on_mouse_button(self, button: int, state: int, physical_x: float, physical_y: float) -> None:
        """Record the click; subclasses override to react to it."""
        self.last_click = (button, state, physical_x, physical_y)

    def set_scale(self, x_scale: float, y_scale: float) -> None:
        self.scale = (x_scale, y_scale)

    def render(self, canvas: Canvas, airframe: Airframe) -> None:
        """Place the viewport and projection; subclasses draw afterwards."""
        if self.parent is None:
            raise RuntimeError("gauge component has no parent to be placed in")
        parent_x, parent_y = self.parent.physical_position
        sx, sy = self.scale
        upp = self.units_per_pixel

        self.pixel_position = (
            int((self.physical_position[0] * sx + parent_x) / upp),
            int((self.physical_position[1] * sy + parent_y) / upp),
        )
        self.pixel_size = (
            int(self.physical_size[0] / upp * sx),
            int(self.physical_size[1] / upp * sy),
        )

        canvas.viewport(*self.pixel_position, *self.pixel_size)
        canvas.ortho(0, sx * self.physical_size[0], 0, sy * self.physical_size[1])
        canvas.load_identity()
        canvas.scale(sx, sy)