import math

import pytest

from strukture.bezout import bezout, bezout_many, format_combination, main


@pytest.mark.parametrize(
    "a,b", [(150, -105), (240, 46), (-12, 8), (7, 0), (0, 9), (-30, -18), (17, 5)]
)
def test_bezout_identity(a, b):
    g, ka, kb = bezout(a, b)
    assert g == math.gcd(a, b)
    assert ka * a + kb * b == g


def test_bezout_zero_second():
    assert bezout(7, 0) == (7, 1, 0)


def test_bezout_negative_first_flips_sign():
    g, ka, kb = bezout(-7, 0)
    assert (g, ka, kb) == (7, -1, 0)


@pytest.mark.parametrize(
    "numbers", [[150, -105, -12, 8], [6, 10, 15], [4, 8, 12, 16], [9, 28]]
)
def test_bezout_many_identity(numbers):
    g, coefficients = bezout_many(numbers)
    assert len(coefficients) == len(numbers)
    assert g == math.gcd(*numbers)
    assert sum(k * n for k, n in zip(coefficients, numbers)) == g


def test_bezout_many_needs_two_numbers():
    with pytest.raises(ValueError):
        bezout_many([5])


def test_format_combination():
    assert format_combination(1, [2, -3], [5, 3]) == "1 = (2) * 5 + (-3) * 3"


def test_main_default_numbers(capsys):
    assert main([]) == 0
    line = capsys.readouterr().out.strip()
    g, coefficients = bezout_many([150, -105, -12, 8])
    assert line == format_combination(g, coefficients, [150, -105, -12, 8])


def test_main_given_numbers(capsys):
    assert main(["12", "-18"]) == 0
    line = capsys.readouterr().out.strip()
    assert line.startswith("6 = ")
    assert line.endswith(" * -18")


def test_main_single_number_fails():
    with pytest.raises(SystemExit):
        main(["5"])