from types import SimpleNamespace

import pytest

from glasscockpit.component import GaugeComponent
from glasscockpit.drawing import Airframe, Canvas


def placed_component(position=(5.0, 6.0), size=(28.0, 18.0), parent_pos=(10.0, 20.0)):
    parent = SimpleNamespace(physical_position=parent_pos)
    return GaugeComponent(position, size, parent=parent)


def test_render_places_component_relative_to_parent():
    position, parent_pos = (5.0, 6.0), (10.0, 20.0)
    component = placed_component(position, parent_pos=parent_pos)
    component.render(Canvas(), Airframe())
    assert component.pixel_position == (
        int(position[0] + parent_pos[0]),
        int(position[1] + parent_pos[1]),
    )


def test_render_sets_viewport_and_projection():
    size = (28.0, 18.0)
    component = placed_component(size=size)
    component.set_scale(2.0, 2.0)
    canvas = Canvas()
    component.render(canvas, Airframe())
    assert canvas.viewport_rect == (*component.pixel_position, *component.pixel_size)
    assert canvas.projection == (0, 2.0 * size[0], 0, 2.0 * size[1])
    assert canvas.transform_point(1.0, 1.0) == pytest.approx((2.0, 2.0))


def test_units_per_pixel_shrinks_pixel_size():
    component = placed_component(size=(40.0, 20.0))
    component.units_per_pixel = 0.5
    component.render(Canvas(), Airframe())
    assert component.pixel_size == (int(40.0 / 0.5), int(20.0 / 0.5))


def test_render_without_parent_raises():
    with pytest.raises(RuntimeError):
        GaugeComponent((0, 0), (10, 10)).render(Canvas(), Airframe())


def test_click_test_bounds_are_inclusive():
    component = placed_component()
    component.render(Canvas(), Airframe())
    (px, py), (w, h) = component.pixel_position, component.pixel_size
    assert component.click_test(0, 0, px, py)
    assert component.click_test(0, 0, px + w, py + h)
    assert not component.click_test(0, 0, px - 1, py)
    assert not component.click_test(0, 0, px, py + h + 1)


class _Clicker(GaugeComponent):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.clicks = []

    def on_mouse_button(self, button, state, physical_x, physical_y):
        self.clicks.append((button, state, physical_x, physical_y))


def test_handle_mouse_button_reports_physical_coordinates():
    parent = SimpleNamespace(physical_position=(0.0, 0.0))
    component = _Clicker((10.0, 10.0), (20.0, 20.0), parent=parent)
    component.render(Canvas(), Airframe())
    px, py = component.pixel_position
    assert component.handle_mouse_button(1, 0, px + 3, py + 4)
    assert component.clicks == [(1, 0, 3.0, 4.0)]
    assert not component.handle_mouse_button(1, 0, px - 5, py)
    assert len(component.clicks) == 1


def test_component_defaults_to_opaque():
    assert GaugeComponent().opaque
    assert not GaugeComponent(opaque=False).opaque