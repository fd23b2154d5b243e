"""
Tests for the dynasor factories: constant fills and seeded random draws.
"""
import numpy as np
import pytest

import dynasor
from dynasor import Tensor
from dynasor.config import config

ALL_DTYPES = list(dynasor.dtype)
INT_DTYPES = [d for d in dynasor.dtype if d.is_integral]
FLOAT_DTYPES = [d for d in dynasor.dtype if d.is_floating_point]


@pytest.mark.parametrize('dt', ALL_DTYPES)
def test_zeros_and_ones(dt):
    z = dynasor.zeros([2, 3], dtype=dt)
    o = dynasor.ones([2, 3], dtype=dt)
    assert z.dtype is dt
    assert len(z.data()) == 6
    assert np.all(z.data() == 0)
    assert np.all(o.data() == 1)
    assert Tensor.zeros([2, 3], dt) == z
    assert Tensor.ones([2, 3], dt) == o


def test_full_and_like():
    f = dynasor.full([3], 2.5, dtype=dynasor.float64)
    assert f.data().tolist() == [2.5, 2.5, 2.5]
    z = dynasor.zeros_like(f)
    assert z.shape == (3,) and z.dtype is dynasor.float64
    o = dynasor.ones_like(f, dtype=dynasor.uint8)
    assert o.data().tolist() == [1, 1, 1]


def test_constant_fill_ignores_policy():
    with config.override(parallel_threshold=0, num_threads=4):
        par = dynasor.full([1001], 3, dtype=dynasor.int32, policy=dynasor.par)
        seq = dynasor.full([1001], 3, dtype=dynasor.int32, policy=dynasor.seq)
    assert par == seq
    assert np.all(par.data() == 3)


# ── uniform_random ──

def test_uniform_random_int_scenario():
    a = dynasor.uniform_random([3, 2], 4373, -2, 1, dtype=dynasor.int32)
    b = dynasor.uniform_random([3, 2], 4373, -2, 1, dtype=dynasor.int32)
    assert a.shape == (3, 2)
    assert len(a.data()) == 6
    assert set(a.data().tolist()) <= {-2, -1, 0, 1}
    assert a.data().tobytes() == b.data().tobytes()


def test_uniform_random_matches_mersenne_twister_stream():
    t = dynasor.uniform_random([3, 2], 4373, -2, 1, dtype=dynasor.int32)
    rng = np.random.Generator(np.random.MT19937(4373))
    expected = rng.integers(-2, 1, size=6, dtype=np.int32, endpoint=True)
    np.testing.assert_array_equal(t.data(), expected)


@pytest.mark.parametrize('dt', INT_DTYPES)
def test_uniform_random_int_closed_interval(dt):
    t = dynasor.uniform_random([1000], 7, 0, 3, dtype=dt)
    assert t.dtype is dt
    assert set(t.data().tolist()) == {0, 1, 2, 3}


@pytest.mark.parametrize('dt', FLOAT_DTYPES)
def test_uniform_random_float_half_open(dt):
    t = dynasor.uniform_random([5000], 3, -1.0, 2.0, dtype=dt)
    d = t.data()
    assert t.dtype is dt
    assert d.min() >= -1.0
    assert d.max() < 2.0


def test_uniform_random_degenerate_interval():
    f = dynasor.uniform_random([4], 1, 2.5, 2.5, dtype=dynasor.float64)
    assert f.data().tolist() == [2.5] * 4
    i = dynasor.uniform_random([4], 1, -3, -3, dtype=dynasor.int8)
    assert i.data().tolist() == [-3] * 4


def test_uniform_random_wide_finite_interval():
    t = dynasor.uniform_random([1000], 1, -8e307, 8e307, dtype=dynasor.float64)
    d = t.data()
    assert np.all(np.isfinite(d))
    assert d.min() < 0.0 < d.max()
    assert len(set(d.tolist())) > 1


def test_uniform_random_depends_on_seed():
    a = dynasor.uniform_random([100], 1, 0.0, 1.0, dtype=dynasor.float64)
    b = dynasor.uniform_random([100], 2, 0.0, 1.0, dtype=dynasor.float64)
    assert a != b


def test_uniform_random_ignores_policy():
    a = dynasor.uniform_random([64], 9, -5, 5, dtype=dynasor.int64, policy='seq')
    b = dynasor.uniform_random([64], 9, -5, 5, dtype=dynasor.int64, policy='par')
    assert a == b


@pytest.mark.parametrize('args', [
    (2, 1, dynasor.int32),
    (1.0, 0.0, dynasor.float32),
    (float('nan'), 1.0, dynasor.float64),
    (0.0, float('inf'), dynasor.float64),
    (-1, 3, dynasor.uint8),
    (0, 200, dynasor.int8),
    (0.5, 3, dynasor.int32),
    (-1e308, 1e308, dynasor.float64),
    (-3e38, 3e38, dynasor.float32),
    (0.0, 1e5, dynasor.float16),
])
def test_uniform_random_invalid_parameters(args):
    a, b, dt = args
    with pytest.raises(dynasor.InvalidDistributionParametersError):
        dynasor.uniform_random([4], 1, a, b, dtype=dt)


@pytest.mark.parametrize('seed', [-1, 1.5, '7', True])
def test_invalid_seed(seed):
    with pytest.raises(dynasor.InvalidDistributionParametersError):
        dynasor.uniform_random([4], seed, 0, 1, dtype=dynasor.int32)


# ── normal_random ──

def test_normal_random_scenario():
    a = dynasor.normal_random([4], 1, 0.0, 1.0, dtype=dynasor.float64)
    b = dynasor.normal_random([4], 1, 0.0, 1.0, dtype=dynasor.float64)
    assert len(a.data()) == 4
    assert a.data().tobytes() == b.data().tobytes()
    with pytest.raises(dynasor.InvalidDistributionParametersError):
        dynasor.normal_random([4], 1, 0.0, -1.0, dtype=dynasor.float64)


def test_gaussian_random_is_normal_random():
    n = dynasor.normal_random([16], 5, 1.0, 0.5, dtype=dynasor.float32)
    g = dynasor.gaussian_random([16], 5, 1.0, 0.5, dtype=dynasor.float32)
    assert n == g
    assert Tensor.gaussian_random([16], 5, 1.0, 0.5, dynasor.float32) == n


def test_normal_random_statistics():
    t = dynasor.normal_random([20000], 42, 5.0, 2.0, dtype=dynasor.float64)
    d = t.data()
    assert abs(d.mean() - 5.0) < 0.1
    assert abs(d.std() - 2.0) < 0.1


@pytest.mark.parametrize('dt', FLOAT_DTYPES)
def test_normal_random_dtypes(dt):
    t = dynasor.normal_random([8], 3, dtype=dt)
    assert t.dtype is dt
    assert np.all(np.isfinite(t.data()))


def test_normal_random_requires_floating_dtype():
    with pytest.raises(TypeError):
        dynasor.normal_random([4], 1, 0.0, 1.0, dtype=dynasor.int32)


@pytest.mark.parametrize('mean,std', [
    (0.0, 0.0),
    (0.0, float('nan')),
    (0.0, float('inf')),
    (float('nan'), 1.0),
])
def test_normal_random_invalid_parameters(mean, std):
    with pytest.raises(dynasor.InvalidDistributionParametersError):
        dynasor.normal_random([4], 1, mean, std, dtype=dynasor.float64)


# ── bit generator selection ──

def test_pcg64_bit_generator_is_reproducible():
    with config.override(bit_generator='pcg64'):
        a = dynasor.uniform_random([100], 11, 0.0, 1.0, dtype=dynasor.float64)
        b = dynasor.uniform_random([100], 11, 0.0, 1.0, dtype=dynasor.float64)
    mt = dynasor.uniform_random([100], 11, 0.0, 1.0, dtype=dynasor.float64)
    assert a == b
    assert a != mt
