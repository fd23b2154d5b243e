"""
Tests for dynasor configuration, dtypes and execution-policy helpers.
"""
import numpy as np
import pytest

import dynasor
from dynasor.config import config
from dynasor.dtype import resolve_dtype
from dynasor.execution import ExecutionPolicy, fill, resolve_policy


@pytest.fixture
def env(monkeypatch):
    yield monkeypatch
    monkeypatch.undo()
    config.reset()


# ── config ──

def test_override_restores_settings():
    before = (config.num_threads, config.check_bounds, config.default_policy)
    with config.override(num_threads=3, check_bounds=False, default_policy='par'):
        assert config.num_threads == 3
        assert config.check_bounds is False
        assert config.default_policy is ExecutionPolicy.parallel
    assert (config.num_threads, config.check_bounds, config.default_policy) == before


def test_override_restores_on_error():
    before = config.parallel_threshold
    with pytest.raises(RuntimeError):
        with config.override(parallel_threshold=5):
            raise RuntimeError("boom")
    assert config.parallel_threshold == before


def test_override_rejects_unknown_setting():
    with pytest.raises(AttributeError):
        with config.override(bogus=1):
            pass


@pytest.mark.parametrize('name,value', [
    ('num_threads', 0),
    ('parallel_threshold', -1),
    ('bit_generator', 'xorshift'),
    ('default_policy', 'gpu'),
    ('default_policy', None),
])
def test_invalid_settings_rejected(name, value):
    before = getattr(config, name)
    with pytest.raises(ValueError):
        setattr(config, name, value)
    assert getattr(config, name) == before


def test_environment_overrides(env):
    env.setenv('DYNASOR_NUM_THREADS', '3')
    env.setenv('DYNASOR_CHECK_BOUNDS', '0')
    env.setenv('DYNASOR_POLICY', 'par')
    env.setenv('DYNASOR_BIT_GENERATOR', 'PCG64')
    env.setenv('DYNASOR_PARALLEL_THRESHOLD', '128')
    config.reset()
    assert config.num_threads == 3
    assert config.check_bounds is False
    assert config.default_policy is dynasor.par
    assert config.bit_generator == 'pcg64'
    assert config.parallel_threshold == 128


def test_bad_environment_values_fall_back(env, caplog):
    env.setenv('DYNASOR_NUM_THREADS', 'many')
    env.setenv('DYNASOR_BIT_GENERATOR', 'xorshift')
    env.setenv('DYNASOR_CHECK_BOUNDS', 'maybe')
    config.reset()
    assert config.num_threads >= 1
    assert config.bit_generator == 'mt19937'
    assert config.check_bounds is True
    assert "DYNASOR_NUM_THREADS" in caplog.text


def test_bad_environment_value_keeps_other_settings(env, caplog):
    env.setenv('DYNASOR_NUM_THREADS', '0')
    env.setenv('DYNASOR_PARALLEL_THRESHOLD', '128')
    config.reset()
    assert config.num_threads >= 1
    assert config.parallel_threshold == 128
    assert "num_threads must be >= 1" in caplog.text


def test_config_repr_lists_settings():
    text = repr(config)
    for name in ('default_policy', 'num_threads', 'parallel_threshold',
                 'check_bounds', 'bit_generator'):
        assert name in text


# ── dtype ──

def test_resolve_dtype():
    assert resolve_dtype(None) is dynasor.float32
    assert resolve_dtype(dynasor.int8) is dynasor.int8
    assert resolve_dtype('double') is dynasor.float64
    assert resolve_dtype('float') is dynasor.float32
    assert resolve_dtype('int') is dynasor.int32
    assert resolve_dtype('uint16') is dynasor.uint16
    assert resolve_dtype(np.int16) is dynasor.int16
    assert resolve_dtype(np.dtype('float64')) is dynasor.float64


@pytest.mark.parametrize('bad', [bool, np.bool_, np.complex64, 'U8', object])
def test_resolve_dtype_rejects_non_arithmetic(bad):
    with pytest.raises(TypeError):
        resolve_dtype(bad)


def test_dtype_properties():
    assert dynasor.int32.is_integral and not dynasor.int32.is_floating_point
    assert dynasor.float16.is_floating_point and not dynasor.float16.is_integral
    assert not dynasor.uint8.is_signed
    assert dynasor.int64.itemsize == 8
    assert dynasor.float32.zero == 0 and dynasor.float32.one == 1
    assert dynasor.long is dynasor.int64
    assert repr(dynasor.float64) == "dynasor.float64"
    assert dynasor.dtype.from_numpy(np.uint32) is dynasor.uint32


# ── execution policy ──

def test_resolve_policy():
    assert resolve_policy('seq') is ExecutionPolicy.sequential
    assert resolve_policy('Parallel') is ExecutionPolicy.parallel
    assert resolve_policy(dynasor.par) is dynasor.par
    assert resolve_policy(None) is config.default_policy
    with pytest.raises(ValueError):
        resolve_policy('gpu')
    with pytest.raises(ValueError):
        resolve_policy(3)


def test_parallel_fill_matches_sequential():
    a = np.empty(10007, dtype=np.float64)
    b = np.empty(10007, dtype=np.float64)
    with config.override(parallel_threshold=0, num_threads=4):
        fill(a, 1.5, ExecutionPolicy.parallel)
    fill(b, 1.5, ExecutionPolicy.sequential)
    np.testing.assert_array_equal(a, b)


def test_parallel_fill_of_tiny_buffer():
    a = np.zeros(1, dtype=np.int32)
    with config.override(parallel_threshold=0, num_threads=8):
        fill(a, 7, 'par')
    assert a.tolist() == [7]
