import pytest

from spherecast.colour import Colour
from spherecast.vector import Vector


def test_default_is_black():
    assert Colour().rgb() == (0, 0, 0)


def test_channels_are_clamped_above():
    assert Colour(304, 0, 210).rgb() == (255, 0, 210)


def test_channels_are_clamped_below():
    assert Colour(-10, 20, -0.5).rgb() == (0, 20, 0)


def test_rgb_truncates():
    assert Colour(10.9, 20.2, 30.999).rgb() == (10, 20, 30)


def test_vector_round_trip():
    c = Colour(12, 34, 56)
    assert Colour.from_vector(c.as_vector()) == c


def test_from_vector_clamps():
    assert Colour.from_vector(Vector(1000, -5, 7)).rgb() == (255, 0, 7)


def test_addition_saturates():
    c = Colour(200, 200, 200) + Colour(100, 10, 0)
    assert c.r == 255
    assert c.g == 210
    assert c.b == 200


def test_addition_is_commutative():
    a = Colour(10, 20, 30)
    b = Colour(5, 250, 0)
    assert a + b == b + a


def test_subtraction_does_not_go_negative():
    c = Colour(10, 20, 30) - Colour(20, 10, 30)
    assert c == Colour(0, 10, 0)


def test_negation_gives_black():
    assert (-Colour(10, 20, 30)).rgb() == (0, 0, 0)


def test_scalar_multiplication_both_sides():
    c = Colour(10, 20, 30)
    assert c * 0.5 == 0.5 * c
    assert (c * 0.5) * 2 == c


def test_scalar_multiplication_saturates():
    assert (Colour(100, 0, 200) * 10).rgb() == (255, 0, 255)


def test_modulate_identity_and_zero():
    c = Colour(17, 99, 201)
    assert c.modulate(Colour(1, 1, 1)) == c
    assert c.modulate(Colour()) == Colour()


def test_mod_operator_matches_modulate():
    a = Colour(2, 3, 4)
    b = Colour(5, 6, 7)
    assert a % b == a.modulate(b)
    assert a % b == b % a


def test_modulate_saturates():
    assert (Colour(255, 255, 255) % Colour(255, 255, 255)).rgb() == (255, 255, 255)


def test_multiplying_by_non_number_fails():
    with pytest.raises(TypeError):
        Colour(1, 2, 3) * "x"


def test_immutable():
    c = Colour(1, 2, 3)
    with pytest.raises(AttributeError):
        c.r = 5
    assert c.rgb() == (1, 2, 3)