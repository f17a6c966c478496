import numpy as np
import pytest

from terrainkit.rng import Random, make_generator


def test_uniform_int_stays_in_range():
    rand = Random(123)
    rand.set_uniform_int(0, 10)
    draws = [rand.randi() for _ in range(10)]
    assert all(0 <= value <= 10 for value in draws)


def test_uniform_int_is_reproducible():
    first = Random(123)
    first.set_uniform_int(0, 10)
    second = Random(123)
    second.set_uniform_int(0, 10)
    assert [first.randi() for _ in range(10)] == [second.randi() for _ in range(10)]


def test_uniform_int_covers_both_ends():
    rand = Random(7)
    rand.set_uniform_int(0, 10)
    draws = {rand.randi() for _ in range(2000)}
    assert 0 in draws and 10 in draws


def test_shuffle_is_permutation():
    rand = Random(123)
    rand.seed(5)
    indices = [0, 1, 2, 3]
    rand.shuffle(indices)
    assert sorted(indices) == [0, 1, 2, 3]


def test_shuffle_is_reproducible_after_reseed():
    rand = Random(123)
    rand.seed(5)
    first = list(range(20))
    rand.shuffle(first)
    rand.seed(5)
    second = list(range(20))
    rand.shuffle(second)
    assert first == second


def test_normal_draws_are_floats_near_mean():
    rand = Random(123)
    rand.set_normal(0.5, 0.2)
    draws = [rand.randf() for _ in range(5000)]
    assert all(isinstance(value, float) for value in draws)
    assert np.mean(draws) == pytest.approx(0.5, abs=0.02)
    assert np.std(draws) == pytest.approx(0.2, abs=0.02)


def test_uniform_real_in_range():
    rand = Random(9)
    rand.set_uniform_real(-1.0, 1.0)
    draws = [rand.randf() for _ in range(500)]
    assert all(-1.0 <= value < 1.0 for value in draws)


def test_next_without_distribution_raises():
    with pytest.raises(ValueError):
        Random(1).next()


def test_empty_int_range_raises():
    with pytest.raises(ValueError):
        Random(1).set_uniform_int(5, 1)


def test_non_positive_stdev_raises():
    with pytest.raises(ValueError):
        Random(1).set_normal(0.0, 0.0)


def test_make_generator_positive_seed_reproducible():
    first = make_generator(1337).uniform(size=8)
    second = make_generator(1337).uniform(size=8)
    assert np.array_equal(first, second)


def test_make_generator_different_seeds_differ():
    first = make_generator(1).uniform(size=8)
    second = make_generator(2).uniform(size=8)
    assert not np.array_equal(first, second)