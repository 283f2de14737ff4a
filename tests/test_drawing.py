import pytest

from glasscockpit.drawing import Airframe, Canvas, Primitive


def test_translate_round_trip_restores_point():
    canvas = Canvas()
    canvas.translate(3.0, 4.0)
    canvas.translate(-3.0, -4.0)
    assert canvas.transform_point(1.5, 2.5) == pytest.approx((1.5, 2.5))


def test_translate_moves_point_by_offset():
    canvas = Canvas()
    dx, dy = 7.0, -2.0
    canvas.translate(dx, dy)
    assert canvas.transform_point(1.0, 1.0) == pytest.approx((1.0 + dx, 1.0 + dy))


def test_rotate_quarter_turn_is_counter_clockwise():
    canvas = Canvas()
    canvas.rotate(90)
    x, y = 2.0, 5.0
    assert canvas.transform_point(x, y) == pytest.approx((-y, x))


def test_four_quarter_turns_are_identity():
    canvas = Canvas()
    for _ in range(4):
        canvas.rotate(90)
    assert canvas.transform_point(3.0, -1.0) == pytest.approx((3.0, -1.0))


def test_scale_multiplies_coordinates():
    canvas = Canvas()
    canvas.scale(2.0, 0.5)
    assert canvas.transform_point(3.0, 4.0) == pytest.approx((3.0 * 2.0, 4.0 * 0.5))


def test_push_pop_restores_matrix():
    canvas = Canvas()
    canvas.translate(1.0, 1.0)
    canvas.push()
    canvas.rotate(45)
    canvas.translate(10.0, 0.0)
    canvas.pop()
    assert canvas.transform_point(0.0, 0.0) == pytest.approx((1.0, 1.0))


def test_pop_on_empty_stack_raises():
    with pytest.raises(IndexError):
        Canvas().pop()


def test_load_identity_clears_transform():
    canvas = Canvas()
    canvas.translate(5.0, 5.0)
    canvas.load_identity()
    assert canvas.transform_point(2.0, 3.0) == (2.0, 3.0)


def test_draw_records_vertices_points_and_state():
    canvas = Canvas()
    canvas.color(0, 190, 190)
    canvas.line_width(2.0)
    canvas.translate(10.0, 0.0)
    call = canvas.draw(Primitive.LINES, [(0, 0), (1, 1)])
    assert canvas.calls == [call]
    assert call.vertices == ((0.0, 0.0), (1.0, 1.0))
    assert call.points == ((10.0, 0.0), (11.0, 1.0))
    assert call.color == (0, 190, 190, 255)
    assert call.line_width == 2.0


def test_color_out_of_range_raises():
    with pytest.raises(ValueError):
        Canvas().color(256, 0, 0)


def test_text_records_alignment_and_size():
    canvas = Canvas()
    canvas.set_font_size(4.0, 4.0)
    canvas.set_right_aligned(True)
    canvas.text(1.0, 2.0, "GPS")
    canvas.set_right_aligned(False)
    canvas.text(3.0, 4.0, "FD")
    assert canvas.texts() == ["GPS", "FD"]
    first, second = canvas.text_items
    assert first.right_aligned and not second.right_aligned
    assert first.size == (4.0, 4.0)
    assert (second.x, second.y) == (3.0, 4.0)


def test_viewport_and_ortho_are_recorded():
    canvas = Canvas()
    canvas.viewport(1, 2, 30, 40)
    canvas.ortho(0, 30, 0, 40)
    assert canvas.viewport_rect == (1, 2, 30, 40)
    assert canvas.projection == (0, 30, 0, 40)


def test_airframe_defaults_to_level_flight():
    frame = Airframe()
    assert (frame.roll, frame.pitch, frame.director_active) == (0.0, 0.0, False)