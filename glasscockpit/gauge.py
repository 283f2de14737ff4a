"""A gauge: a rendering region that owns and lays out gauge components."""

from __future__ import annotations

import re
from collections.abc import Mapping
from xml.etree.ElementTree import Element

from .component import GaugeComponent
from .drawing import Airframe, Canvas, Primitive

_TRUE_WORDS = {"true", "yes", "on", "1"}
_FALSE_WORDS = {"false", "no", "off", "0"}
_STANDARD_TAGS = {"UnitsPerPixel", "Position", "Scale", "Outline"}


def _text_as_float(element: Element) -> float:
    return float((element.text or "").strip())


def _text_as_coord(element: Element) -> tuple[float, float]:
    parts = [p for p in re.split(r"[,\s]+", (element.text or "").strip()) if p]
    if len(parts) != 2:
        raise ValueError(f"<{element.tag}> needs two coordinates, got {element.text!r}")
    return float(parts[0]), float(parts[1])


def _text_as_bool(element: Element) -> bool:
    word = (element.text or "").strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"<{element.tag}> is not a boolean: {element.text!r}")


class Gauge:
    """Defines a viewport with an orthographic projection in physical units."""

    def __init__(
        self,
        position: tuple[float, float] = (0.0, 0.0),
        size: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        self.physical_position = position
        self.physical_size = size
        self.scale = (1.0, 1.0)
        self.units_per_pixel = 1.0
        self.pixel_position = (0, 0)
        self.pixel_size = (0, 0)
        self.components: list[GaugeComponent] = []
        self.outline = False
        self.options: dict[str, str] = {}

    def recalc_window_placement(self) -> None:
        upp = self.units_per_pixel
        self.pixel_position = (
            int(self.physical_position[0] / upp),
            int(self.physical_position[1] / upp),
        )
        self.pixel_size = (
            int(self.physical_size[0] / upp * self.scale[0]),
            int(self.physical_size[1] / upp * self.scale[1]),
        )

    def reset_coordinate_system(self, canvas: Canvas) -> None:
        self.recalc_window_placement()
        canvas.viewport(*self.pixel_position, *self.pixel_size)
        canvas.ortho(0, self.physical_size[0], 0, self.physical_size[1])
        canvas.load_identity()

    def init_from_xml(self, element: Element, preferences: Mapping[str, float]) -> None:
        """Configure from a <Gauge> element and the application preferences."""
        if element.tag != "Gauge":
            raise ValueError(f"expected a <Gauge> element, got <{element.tag}>")

        scale = float(preferences["DefaultGaugeScale"])
        zoom = float(preferences["Zoom"])

        node = element.find("UnitsPerPixel")
        if node is not None:
            self.set_units_per_pixel(_text_as_float(node))
        else:
            self.set_units_per_pixel(float(preferences["UnitsPerPixel"]))

        node = element.find("Position")
        if node is not None:
            x, y = _text_as_coord(node)
            self.physical_position = (x * zoom, y * zoom)
        else:
            self.physical_position = (0.0, 0.0)

        node = element.find("Scale")
        if node is not None:
            x, y = _text_as_coord(node)
            self.set_scale(x * zoom * scale, y * zoom * scale)
        else:
            self.set_scale(zoom * scale, zoom * scale)

        node = element.find("Outline")
        if node is not None:
            self.outline = _text_as_bool(node)

        self.custom_xml_init(element)

    def custom_xml_init(self, element: Element) -> None:
        """Keep the text of non-standard child elements as gauge options.

        Subclasses override this to read gauge-specific options.
        """
        self.options = {
            child.tag: (child.text or "").strip()
            for child in element
            if child.tag not in _STANDARD_TAGS
        }

    def add_component(self, component: GaugeComponent) -> None:
        component.parent = self
        self.components.append(component)

    def set_units_per_pixel(self, units_per_pixel: float) -> None:
        self.units_per_pixel = units_per_pixel
        for component in self.components:
            component.units_per_pixel = units_per_pixel

    def set_scale(self, x_scale: float, y_scale: float) -> None:
        """Set the scale of the gauge and its components; ignored unless both are positive."""
        if x_scale > 0 and y_scale > 0:
            self.scale = (x_scale, y_scale)
            for component in self.components:
                component.set_scale(x_scale, y_scale)

    def click_test(self, button: int, state: int, x: int, y: int) -> bool:
        """True if the click is inside the gauge; components are then offered it."""
        px, py = self.pixel_position
        width, height = self.pixel_size
        if px <= x <= px + width and py <= y <= py + height:
            for component in self.components:
                component.handle_mouse_button(button, state, x, y)
            return True
        return False

    def render(self, canvas: Canvas, airframe: Airframe) -> None:
        self.reset_coordinate_system(canvas)
        for component in self.components:
            component.render(canvas, airframe)
        self.reset_coordinate_system(canvas)
        if self.outline:
            self.draw_outline(canvas)

    def draw_outline(self, canvas: Canvas) -> None:
        width, height = self.physical_size
        canvas.line_width(2.0)
        canvas.color(0, 190, 190)
        canvas.draw(
            Primitive.LINE_LOOP,
            [(0.0, 0.0), (0.0, height), (width, height), (width, 0.0)],
        )