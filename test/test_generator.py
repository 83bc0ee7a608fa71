import numpy as np
import pytest

from rnd.distributions import DistributionType, NumberType, ParameterError
from rnd.generator import SampleRequest, generate, make_rng


def request(number_type, distribution_type, count, *bounds):
    return SampleRequest.from_parameters(number_type, distribution_type, count, *bounds)


def test_same_seed_same_samples(seed):
    req = request(NumberType.FLOAT, DistributionType.NORMAL, 50, 2.0, 10.0)
    first = generate(req, seed=seed)
    second = generate(req, seed=seed)
    assert len(first) == 50
    np.testing.assert_array_equal(first, second)


def test_different_seeds_differ():
    req = request(NumberType.FLOAT, DistributionType.UNIFORM, 20)
    assert not np.array_equal(generate(req, seed=1), generate(req, seed=2))


def test_zero_count_is_empty(seed):
    samples = generate(request(NumberType.FLOAT, DistributionType.UNIFORM, 0), seed=seed)
    assert samples.shape == (0,)


def test_negative_count_rejected():
    with pytest.raises(ParameterError, match="Number not specified properly"):
        request(NumberType.FLOAT, DistributionType.UNIFORM, -1)


def test_default_uniform_in_unit_interval(seed):
    samples = generate(request(NumberType.FLOAT, DistributionType.UNIFORM, 5000), seed=seed)
    assert samples.dtype == np.float64
    assert samples.min() >= 0.0
    assert samples.max() < 1.0


def test_uniform_floats_within_bounds(seed):
    samples = generate(request(NumberType.FLOAT, DistributionType.UNIFORM, 10000, -3.5, 7.25), seed=seed)
    assert samples.min() >= -3.5
    assert samples.max() < 7.25


@pytest.mark.parametrize("low, high", [(0, 10), (-3, 0), (-5, 5), (7, 8)])
def test_uniform_ints_within_bounds(seed, low, high):
    samples = generate(request(NumberType.INT, DistributionType.UNIFORM, 5000, low, high), seed=seed)
    assert samples.dtype == np.int64
    assert samples.min() >= low
    assert samples.max() < high


def test_uniform_ints_cover_whole_range(seed):
    samples = generate(request(NumberType.INT, DistributionType.UNIFORM, 5000, 0, 5), seed=seed)
    assert set(samples.tolist()) == {0, 1, 2, 3, 4}


def test_int_samples_truncate_float_samples(seed):
    floats = generate(request(NumberType.FLOAT, DistributionType.NORMAL, 200, 5.0, 0.0), seed=seed)
    ints = generate(request(NumberType.INT, DistributionType.NORMAL, 200, 5, 0), seed=seed)
    np.testing.assert_array_equal(ints, np.trunc(floats).astype(np.int64))


def test_normal_moments(seed):
    samples = generate(request(NumberType.FLOAT, DistributionType.NORMAL, 20000, 2.0, 10.0), seed=seed)
    assert abs(samples.mean() - 10.0) < 0.1
    assert abs(samples.std() - 2.0) < 0.1


def test_exponential_scaled_and_shifted(seed):
    samples = generate(request(NumberType.FLOAT, DistributionType.EXPONENTIAL, 20000, 3.0, 5.0), seed=seed)
    assert samples.min() >= 5.0
    assert abs(samples.mean() - 8.0) < 0.15


def test_explicit_rng_takes_precedence(seed):
    req = request(NumberType.FLOAT, DistributionType.UNIFORM, 10)
    from_rng = generate(req, seed=999, rng=make_rng(seed))
    np.testing.assert_array_equal(from_rng, generate(req, seed=seed))


def test_make_rng_rejects_negative_seed():
    with pytest.raises(ParameterError):
        make_rng(-1)


def test_to_dict():
    req = request(NumberType.INT, DistributionType.UNIFORM, 3, 0, 10)
    assert req.to_dict() == {"type": "int", "distribution": "U(0,10)", "count": 3}
