from unittest import mock

import pytest

from roguekit.rng import RandomNumberGenerator


def test_known_first_value_for_seed_one():
    rng = RandomNumberGenerator(1)
    assert rng.roll_dice(1, 32768) == 42


def test_initial_seed_is_kept():
    assert RandomNumberGenerator(1234).initial_seed == 1234


def test_same_seed_same_sequence():
    a = RandomNumberGenerator(99)
    b = RandomNumberGenerator(99)
    assert [a.roll_dice(3, 6) for _ in range(20)] == [b.roll_dice(3, 6) for _ in range(20)]


def test_string_seed_is_deterministic():
    a = RandomNumberGenerator("dungeon")
    b = RandomNumberGenerator("dungeon")
    assert a.initial_seed == b.initial_seed
    assert [a.roll_dice(1, 20) for _ in range(10)] == [b.roll_dice(1, 20) for _ in range(10)]


def test_different_string_seeds_differ():
    assert RandomNumberGenerator("alpha").initial_seed != RandomNumberGenerator("beta").initial_seed


def test_clock_seed():
    with mock.patch("roguekit.rng.time.time", return_value=1234.5):
        rng = RandomNumberGenerator()
    assert rng.initial_seed == 1234


@pytest.mark.parametrize("n,d", [(1, 6), (3, 6), (10, 4), (2, 100)])
def test_rolls_within_bounds(n, d):
    rng = RandomNumberGenerator(7)
    for _ in range(200):
        total = rng.roll_dice(n, d)
        assert n <= total <= n * d


def test_zero_dice_roll_zero():
    assert RandomNumberGenerator(5).roll_dice(0, 6) == 0


@pytest.mark.parametrize("d", [0, -3])
def test_sideless_dice_rejected(d):
    with pytest.raises(ValueError):
        RandomNumberGenerator(5).roll_dice(1, d)