import pytest

from py_fields import deg, poly_rounded_div, zeros


def test_deg(f59):
    assert deg([f59(1), f59(0), f59(0)]) == 0
    assert deg([f59(0), f59(5), f59(0)]) == 1
    assert deg([f59(0), f59(5), f59(1)]) == 2
    assert deg(zeros(4, f59)) == 0
    assert deg([f59(0)]) == 0


def test_zeros(f59, f59_2):
    assert zeros(3, f59) == [0, 0, 0]
    assert zeros(2, f59_2) == [f59_2.zero(), f59_2.zero()]
    assert zeros(0, f59) == []


def test_exact_division(f59):
    # (x + 1)(x + 2) / (x + 1)
    a = [f59(2), f59(3), f59(1)]
    b = [f59(1), f59(1)]
    assert poly_rounded_div(a, b) == [2, 1]


def test_remainder_is_dropped(f59):
    # x^2 + 3x + 5 = (x + 1)(x + 2) + 3
    a = [f59(5), f59(3), f59(1), f59(0)]
    b = [f59(1), f59(1), f59(0)]
    assert poly_rounded_div(a, b) == [2, 1]


def test_non_monic_divisor(f59):
    # (2x^2 + 4) / 2x = x, remainder 4
    a = [f59(4), f59(0), f59(2)]
    b = [f59(0), f59(2)]
    assert poly_rounded_div(a, b) == [0, 1]
    # (x^2 + 1) / 3 = 20 x^2 + 20
    assert poly_rounded_div([f59(1), f59(0), f59(1)], [f59(3)]) == [20, 0, 20]


def test_divisor_of_higher_degree(f59):
    a = [f59(1), f59(1), f59(0)]
    b = [f59(1), f59(1), f59(1)]
    assert poly_rounded_div(a, b) == [0]


def test_division_by_zero_polynomial(f59):
    with pytest.raises(ZeroDivisionError):
        poly_rounded_div([f59(1), f59(2)], [f59(0), f59(0)])


def test_extension_coefficients(f59_2):
    # (u x + 1)(x + u) over FQ2, divided by (x + u)
    u = f59_2([0, 1])
    one = f59_2.one()
    a = [u, u * u + one, u]
    b = [u, one, f59_2.zero()]
    assert poly_rounded_div(a, b) == [one, u]
