import math

import pytest

from distribution import Distribution, NormalDistribution, N, phi, std_norm_dist


@pytest.mark.parametrize("x, expected", [
    (0.0, 0.3989422804014327),
    (0.1, 0.3969525474770118),
    (0.5, 0.3520653267642995),
    (1.0, 0.24197072451914337),
    (-1.0, 0.24197072451914337),
    (3.0, 0.0044318484119380075),
    (-5.0, 1.4867195147342979e-06),
])
def test_pdf(x, expected):
    assert std_norm_dist().pdf(x) == pytest.approx(expected, rel=1e-12)


@pytest.mark.parametrize("x, expected", [
    (0.1, 0.539827837277029),
    (0.5, 0.6914624612740131),
    (1.0, 0.8413447460685429),
    (-1.0, 0.15865525393145707),
    (3.0, 0.9986501019683699),
    (-5.0, 2.866515718791939e-07),
])
def test_cdf(x, expected):
    assert std_norm_dist().cdf(x) == pytest.approx(expected, rel=1e-9)


def test_cdf_at_mean_is_half():
    assert std_norm_dist().cdf(0.0) == 0.5
    assert NormalDistribution(mean=2.0, std_dev=3.0).cdf(2.0) == 0.5


@pytest.mark.parametrize("x", [0.0, 0.25, 1.0, 1.96, 3.5, 7.0])
def test_cdf_symmetry(x):
    dist = std_norm_dist()
    assert dist.cdf(-x) == pytest.approx(1.0 - dist.cdf(x), abs=1e-14)


def test_cdf_limits():
    dist = std_norm_dist()
    assert dist.cdf(math.inf) == 1.0
    assert dist.cdf(-math.inf) == 0.0
    assert dist.pdf(math.inf) == 0.0
    assert math.isnan(dist.cdf(math.nan))
    assert math.isnan(dist.pdf(math.nan))


def test_non_standard_parameters():
    dist = NormalDistribution(mean=1.0, std_dev=2.0)
    # a shifted/scaled normal is the standard one evaluated at z
    assert dist.pdf(3.0) == pytest.approx(phi(1.0) / 2.0)
    assert dist.cdf(3.0) == pytest.approx(N(1.0))


def test_module_helpers_match_standard_instance():
    dist = std_norm_dist()
    for x in (-2.0, 0.3, 1.7):
        assert phi(x) == dist.pdf(x)
        assert N(x) == dist.cdf(x)


def test_distribution_is_abstract_and_immutable():
    with pytest.raises(TypeError):
        Distribution()
    dist = std_norm_dist()
    assert isinstance(dist, Distribution)
    with pytest.raises(AttributeError):
        dist.mean = 1.0
