import math

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from spikesync import vanrossum as test_module
from spikesync.validation import InvalidInputError

F = np.arange(1.0, 11.0)
TAUS = [0.1, 0.5, 1.0, 3.7, 10.0]
FUNCS = [test_module.van_rossum_distance, test_module.van_rossum_distance_fast]


def _random_train(rng, size, integer=False):
    if integer:
        # integer times, so that coincident spikes are likely
        return np.unique(rng.integers(0, 3 * size, size)).astype(float)
    return np.cumsum(rng.uniform(0.01, 5.0, size))


@pytest.mark.parametrize("tau", TAUS)
def test_van_rossum_distance_identity(tau):
    result = test_module.van_rossum_distance(F, F.copy(), tau)
    assert result == 0.0


@pytest.mark.parametrize("tau", TAUS)
def test_van_rossum_distance_fast_identity(tau):
    result = test_module.van_rossum_distance_fast(F, F.copy(), tau)
    assert result == pytest.approx(0.0, abs=1e-6)


@pytest.mark.parametrize("func", FUNCS)
@pytest.mark.parametrize("size", [1, 2, 10, 50])
@pytest.mark.parametrize("tau", TAUS)
def test_extra_spike_has_unit_distance(func, size, tau):
    f = np.arange(1.0, size + 1)
    g = np.append(f, size + 1)

    assert func(f, g, tau) == pytest.approx(1.0)
    assert func(g, f, tau) == pytest.approx(1.0)


@pytest.mark.parametrize("func", FUNCS)
@pytest.mark.parametrize("dt", [0.25, 0.5])
@pytest.mark.parametrize("tau", TAUS)
def test_shifted_spike(func, dt, tau):
    g = F.copy()
    g[-1] += dt

    result = func(F, g, tau)

    assert result**2 / 2 == pytest.approx(1.0 - math.exp(-dt / tau))


@pytest.mark.parametrize("integer", [False, True])
@pytest.mark.parametrize("seed", range(10))
def test_fast_and_direct_are_equivalent(seed, integer):
    rng = np.random.default_rng(seed)
    u = _random_train(rng, rng.integers(1, 60), integer=integer)
    v = _random_train(rng, rng.integers(1, 60), integer=integer)
    tau = rng.uniform(0.1, 10.0)

    expected = test_module.van_rossum_distance(u, v, tau)
    result = test_module.van_rossum_distance_fast(u, v, tau)

    assert result == pytest.approx(expected, rel=1e-7, abs=1e-6)


def test_fast_with_coincident_spikes():
    u = [1.0, 2.0, 4.0]
    v = [2.0, 3.0, 4.0]

    expected = test_module.van_rossum_distance(u, v, 1.5)
    result = test_module.van_rossum_distance_fast(u, v, 1.5)

    assert result == pytest.approx(expected)


@pytest.mark.parametrize("func", FUNCS)
def test_empty_trains(func):
    assert func([], [], 1.0) == 0.0
    # the squared distance is the sum of the kernel over all the pairs of v
    expected = math.sqrt(2 + 2 * math.exp(-1.0 / 2.0))
    assert func([], [1.0, 2.0], 2.0) == pytest.approx(expected)
    assert func([1.0, 2.0], [], 2.0) == pytest.approx(expected)


def test_van_rossum_distance_with_unsorted_trains():
    u = [3.0, 1.0, 2.0]
    v = [2.0, 3.0, 1.0]

    assert test_module.van_rossum_distance(u, v, 1.0) == pytest.approx(0.0, abs=1e-6)
    assert test_module.van_rossum_distance(u, [1.0, 2.0, 3.0, 4.0], 1.0) == pytest.approx(1.0)


def test_van_rossum_distance_with_integer_times():
    result = test_module.van_rossum_distance([1, 2, 3], [1, 2, 3, 4], 2)
    assert isinstance(result, float)
    assert result == pytest.approx(1.0)


@pytest.mark.parametrize(
    "u, v",
    [
        ([1.0, 3.0, 2.0], [1.0, 2.0]),
        ([1.0, 2.0], [2.0, 1.0]),
        ([1.0, 1.0, 2.0], [1.0, 2.0]),
    ],
)
def test_van_rossum_distance_fast_with_unsorted_trains(u, v):
    with pytest.raises(InvalidInputError, match="must be strictly increasing"):
        test_module.van_rossum_distance_fast(u, v, 1.0)


@pytest.mark.parametrize("func", FUNCS)
@pytest.mark.parametrize("tau", [0, -1.0, math.inf, math.nan, "invalid", None])
def test_invalid_timescale(func, tau):
    with pytest.raises(InvalidInputError, match="timescale"):
        func(F, F, tau)


@pytest.mark.parametrize("func", FUNCS)
@pytest.mark.parametrize("u", [[[1.0, 2.0]], 1.0, [1.0, math.nan], ["a"]])
def test_invalid_train(func, u):
    with pytest.raises(InvalidInputError, match="spike train u"):
        func(u, F, 1.0)


def test_inputs_are_not_modified():
    u = np.array([1.0, 2.0, 3.0])
    v = [1.5, 2.5]

    test_module.van_rossum_distance_fast(u, v, 1.0)
    test_module.van_rossum_distance(u, v, 1.0)

    assert_array_equal(u, [1.0, 2.0, 3.0])
    assert v == [1.5, 2.5]


def test_markage_vector():
    result = test_module.markage_vector([0.0, 1.0, 3.0], 1.0)

    expected = [0.0, math.exp(-1), (math.exp(-1) + 1) * math.exp(-2)]
    assert_allclose(result, expected)


def test_markage_vector_empty():
    result = test_module.markage_vector([], 1.0)
    assert len(result) == 0


def test_cross_term():
    u = [1.0, 3.0]
    v = [0.0, 2.0]
    mv = test_module.markage_vector(v, 1.0)

    result = test_module.cross_term(u, v, mv, 1.0)

    # sum over the pairs with u_i > v_j: (1, 0), (3, 0), (3, 2)
    expected = math.exp(-1) + math.exp(-3) + math.exp(-1)
    assert result == pytest.approx(expected)


def test_cross_term_ignores_coincident_and_later_spikes():
    u = [1.0, 2.0]
    v = [1.0, 5.0]
    mv = test_module.markage_vector(v, 1.0)

    result = test_module.cross_term(u, v, mv, 1.0)

    assert result == pytest.approx(math.exp(-1))
