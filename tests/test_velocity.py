import math

import pytest

from orbitsim.velocity import Velocity


def test_default_is_at_rest():
    v = Velocity()
    assert v.dx == 0.0
    assert v.dy == 0.0
    assert v.speed() == 0.0


def test_speed_is_hypotenuse():
    assert Velocity(3.0, 4.0).speed() == pytest.approx(5.0)


def test_set_polar_pointing_up():
    v = Velocity(1000.0, 500.0)
    v.set_polar(0.0, 9000.0)
    assert v.dx == pytest.approx(0.0)
    assert v.dy == pytest.approx(9000.0)


def test_set_polar_pointing_right():
    v = Velocity()
    v.set_polar(math.pi / 2, 1000.0)
    assert v.dx == pytest.approx(1000.0)
    assert v.dy == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("radians", [0.0, 0.3, 1.7, math.pi, -2.2])
def test_set_polar_keeps_magnitude(radians):
    v = Velocity()
    v.set_polar(radians, 3100.0)
    assert v.speed() == pytest.approx(3100.0)


def test_accelerate_zero_time_unchanged():
    v = Velocity(500.0, -300.0)
    v.accelerate(12.0, -7.0, 0.0)
    assert v == Velocity(500.0, -300.0)


def test_accelerate_matches_repeated_small_steps():
    once = Velocity(100.0, 200.0)
    once.accelerate(-2.0, 3.0, 48.0)
    stepped = Velocity(100.0, 200.0)
    for _ in range(48):
        stepped.accelerate(-2.0, 3.0, 1.0)
    assert once.dx == pytest.approx(stepped.dx)
    assert once.dy == pytest.approx(stepped.dy)


def test_add_velocity():
    v = Velocity(1000.0, 500.0)
    other = Velocity(9000.0, 0.0)
    v.add_velocity(other)
    assert v.dx == pytest.approx(10000.0)
    assert v.dy == pytest.approx(500.0)
    assert other == Velocity(9000.0, 0.0)


def test_reverse_twice_round_trips():
    v = Velocity(5.0, -10.0)
    v.reverse()
    assert v == Velocity(-5.0, 10.0)
    v.reverse()
    assert v == Velocity(5.0, -10.0)


def test_reverse_cancels_when_added():
    v = Velocity(-3880.0, 42.0)
    opposite = Velocity(v.dx, v.dy)
    opposite.reverse()
    v.add_velocity(opposite)
    assert v.speed() == 0.0