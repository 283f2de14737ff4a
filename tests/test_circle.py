import math

import pytest

from glasscockpit.circle import MAX_VERTICES, CircleEvaluator
from glasscockpit.drawing import Canvas, Primitive


def make_circle(radius=5.0, origin=(2.0, 3.0), arc=(0.0, 90.0), step=15.0):
    circle = CircleEvaluator()
    circle.set_radius(radius)
    circle.set_origin(*origin)
    circle.set_arc(*arc)
    circle.set_degrees_per_point(step)
    return circle


def test_points_lie_on_circle():
    radius, origin = 5.0, (2.0, 3.0)
    circle = make_circle(radius, origin)
    circle.evaluate()
    for x, y in circle.vertices:
        assert math.hypot(x - origin[0], y - origin[1]) == pytest.approx(radius)


def test_zero_degrees_is_straight_up():
    radius, origin = 4.0, (1.0, 1.0)
    circle = make_circle(radius, origin)
    circle.evaluate()
    assert circle.vertices[0] == pytest.approx((origin[0], origin[1] + radius))


def test_last_point_is_arc_end():
    radius = 3.0
    circle = make_circle(radius, (0.0, 0.0), arc=(10.0, 80.0), step=7.0)
    circle.evaluate()
    end = math.radians(80.0)
    assert circle.vertices[-1] == pytest.approx(
        (radius * math.sin(end), radius * math.cos(end)), rel=1e-6
    )


def test_arc_wraps_through_north_when_start_exceeds_end():
    radius = 70.0
    circle = make_circle(radius, (0.0, 0.0), arc=(300.0, 60.0), step=2.5)
    circle.evaluate()
    xs = [x for x, _ in circle.vertices]
    assert xs[0] < 0 < xs[-1]
    assert all(y > 0 for _, y in circle.vertices)
    assert xs == sorted(xs)


def test_full_circle_has_point_every_step():
    step = 5.0
    circle = make_circle(arc=(0.0, 360.0), step=step)
    circle.evaluate()
    assert len(circle.vertices) >= 360 / step


def test_non_positive_radius_falls_back_to_one():
    circle = CircleEvaluator()
    circle.set_radius(0)
    assert circle.radius == 1.0
    circle.set_radius(-3)
    assert circle.radius == 1.0


def test_added_vertices_precede_arc_and_reset_clears():
    circle = make_circle()
    circle.add_vertex(-1.0, -1.0)
    circle.evaluate()
    assert circle.vertices[0] == (-1.0, -1.0)
    assert len(circle.vertices) > 2
    circle.reset_vertices()
    assert circle.vertices == ()


def test_render_draws_cached_vertices():
    circle = make_circle()
    circle.add_vertex(0.0, 0.0)
    circle.evaluate()
    canvas = Canvas()
    call = circle.render(canvas, Primitive.TRIANGLE_FAN)
    assert call.primitive is Primitive.TRIANGLE_FAN
    assert call.vertices == circle.vertices
    assert canvas.calls == [call]


def test_vertex_cache_limit():
    circle = CircleEvaluator()
    for i in range(MAX_VERTICES):
        circle.add_vertex(i, i)
    with pytest.raises(OverflowError):
        circle.add_vertex(0.0, 0.0)


def test_non_positive_step_is_rejected():
    circle = make_circle(step=0.0)
    with pytest.raises(ValueError):
        circle.evaluate()