import pytest

from glasscockpit.altitude_ticker import (
    LITTLE_FONT_HEIGHT,
    AltitudeTicker,
    TensDigits,
    tens_digits,
)
from glasscockpit.drawing import Airframe, Canvas, Primitive
from glasscockpit.gauge import Gauge


def _render(altitude):
    gauge = Gauge(size=(200.0, 190.0))
    ticker = AltitudeTicker()
    gauge.add_component(ticker)
    canvas = Canvas()
    ticker.render(canvas, Airframe(altitude_msl_feet=altitude))
    return canvas


@pytest.mark.parametrize("altitude", [0, 5, 12, 29, 35, 47, 58, 63, 79, 88, 95, 99.9, 1234.5, 37777])
def test_shift_stays_within_half_a_digit(altitude):
    assert abs(tens_digits(altitude).shift) <= 0.5


@pytest.mark.parametrize("altitude", [0, 17, 33, 55, 71, 94, 2468, 13579])
def test_column_digits_step_by_two(altitude):
    tens = tens_digits(altitude)
    assert tens.middle % 2 == 0
    assert tens.top == (tens.middle + 2) % 10
    assert tens.top2 == (tens.middle + 4) % 10
    assert tens.bottom == (tens.middle - 2) % 10
    assert tens.bottom2 == (tens.middle - 4) % 10


def test_column_order_matches_fields():
    tens = tens_digits(1234.5)
    assert tens.column == (tens.top2, tens.top, tens.middle, tens.bottom, tens.bottom2)
    assert isinstance(tens, TensDigits)


def test_exact_twenty_has_no_shift():
    assert tens_digits(1240).shift == 0.0
    assert tens_digits(1240).middle == 4


def test_ninety_rolls_over_to_zero():
    tens = tens_digits(195)
    assert tens.middle == 0
    assert tens.shift > 0


def test_tens_only_depend_on_last_hundred():
    assert tens_digits(1234.5) == tens_digits(34.5)
    assert tens_digits(21234.5) == tens_digits(34.5)


def test_render_prints_high_digits_of_altitude():
    canvas = _render(12345)
    texts = canvas.texts()
    assert texts[:3] == ["1", "2", "3"]
    assert texts.count("0") >= 5


def test_render_below_ten_thousand_draws_crosshatch():
    canvas = _render(4321)
    green = [c for c in canvas.calls if c.color == (0, 179, 0, 255)]
    assert len(green) == 1
    assert green[0].primitive is Primitive.LINES
    assert len(green[0].vertices) == 10
    assert canvas.texts()[:2] == ["4", "3"]


def test_render_above_ten_thousand_has_no_crosshatch():
    above = _render(12345)
    below = _render(2345)
    green = [c for c in above.calls if c.color == (0, 179, 0, 255)]
    assert len(green) == 0
    assert len(above.calls) == len(below.calls) - 1
    assert above.texts()[0] == "1"


def test_font_sizes_for_big_and_little_digits():
    canvas = _render(12345)
    items = canvas.text_items
    assert items[0].size == (6.0, 8.0)
    assert items[1].size == (6.0, 8.0)
    assert items[2].size == (5.0, LITTLE_FONT_HEIGHT)


def test_column_rows_are_evenly_spaced():
    canvas = _render(1250)
    zeros = [item.y for item in canvas.text_items if item.x == pytest.approx(23.0)]
    assert len(zeros) == 5
    gaps = [a - b for a, b in zip(zeros, zeros[1:])]
    assert all(gap == pytest.approx(gaps[0]) for gap in gaps)
    assert gaps[0] > 0


def test_column_moves_by_shift():
    still = _render(1240)
    rolled = _render(1250)
    y_still = [i.y for i in still.text_items if i.x == pytest.approx(23.0)]
    y_rolled = [i.y for i in rolled.text_items if i.x == pytest.approx(23.0)]
    expected = tens_digits(1250).shift * LITTLE_FONT_HEIGHT
    for a, b in zip(y_still, y_rolled):
        assert b - a == pytest.approx(expected)


def test_render_without_parent_fails():
    ticker = AltitudeTicker()
    with pytest.raises(RuntimeError):
        ticker.render(Canvas(), Airframe())