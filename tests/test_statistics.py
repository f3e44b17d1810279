"""
Statistical properties of generated samples.

Every test draws from a seeded source, so the outcomes are reproducible;
tolerances are several standard errors wide.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import stats

from pysatl_generator import (
    NumpyUniformSource,
    configure,
    exponential,
    gamma,
    gaussian,
    logistic,
    sample,
    set_weight,
    supplied,
    uniform,
    vector_compose,
    weighted_alternative,
)

N = 20_000
P_THRESHOLD = 1e-4


def draw_many(node, n: int = N, seed: int = 2025) -> np.ndarray:
    source = NumpyUniformSource(seed)
    return np.array([sample(node, source) for _ in range(n)], dtype=np.float64)


def test_uniform_bounds_and_chi_square() -> None:
    arr = draw_many(uniform(-2, 3))
    assert ((arr >= -2.0) & (arr < 3.0)).all()

    observed, _ = np.histogram(arr, bins=10, range=(-2.0, 3.0))
    assert stats.chisquare(observed).pvalue > P_THRESHOLD


def test_exponential_positive_with_mean_one_over_rate() -> None:
    rate = 2.0
    arr = draw_many(exponential(rate))
    assert (arr > 0).all()
    assert arr.mean() == pytest.approx(1 / rate, abs=5 / (rate * math.sqrt(N)))
    assert stats.kstest(arr, stats.expon(scale=1 / rate).cdf).pvalue > P_THRESHOLD


def test_gaussian_effective_deviation_is_three_stddev() -> None:
    mean, stddev = 2.0, 0.5
    arr = draw_many(gaussian(mean, stddev))
    assert arr.mean() == pytest.approx(mean, abs=5 * 3 * stddev / math.sqrt(N))
    assert arr.std() == pytest.approx(3 * stddev, rel=0.03)
    assert stats.kstest(arr, stats.norm(loc=mean, scale=3 * stddev).cdf).pvalue > P_THRESHOLD


def test_default_gaussian_two_thirds_within_one() -> None:
    arr = draw_many(gaussian())
    assert np.mean(np.abs(arr) < 1.0) == pytest.approx(0.6827, abs=0.02)


def test_logistic_matches_standard_logistic() -> None:
    arr = draw_many(logistic(), n=5_000)
    assert stats.kstest(arr, stats.logistic.cdf).pvalue > P_THRESHOLD


@pytest.mark.parametrize("order, scale", [(1, 2.0), (3, 2.0), (15, 0.5), (40, 1.0)])
def test_integer_gamma_mean_and_shape(order: int, scale: float) -> None:
    arr = draw_many(gamma(order, scale), n=5_000)
    sd = math.sqrt(order) * scale
    assert arr.mean() == pytest.approx(order * scale, abs=5 * sd / math.sqrt(5_000))
    assert stats.kstest(arr, stats.gamma(a=order, scale=scale).cdf).pvalue > P_THRESHOLD


def test_gamma_order_one_is_exponential() -> None:
    scale = 2.0
    arr = draw_many(gamma(1, scale), n=5_000)
    assert stats.kstest(arr, stats.expon(scale=scale).cdf).pvalue > P_THRESHOLD


@pytest.mark.parametrize("order", [0.3, 0.5, 0.9])
def test_fractional_gamma(order: float) -> None:
    arr = draw_many(gamma(order), n=5_000)
    assert (arr > 0).all()
    assert stats.kstest(arr, stats.gamma(a=order).cdf).pvalue > P_THRESHOLD


@pytest.mark.parametrize("order", [1.5, 2.5, 13.25])
def test_mixed_gamma_with_remainder(order: float) -> None:
    arr = draw_many(gamma(order, 1.5), n=5_000)
    assert stats.kstest(arr, stats.gamma(a=order, scale=1.5).cdf).pvalue > P_THRESHOLD


def test_mixed_gamma_legacy_mode_differs() -> None:
    with pytest.warns(UserWarning):
        configure(gamma_fraction_mode="legacy")
    arr = draw_many(gamma(2.5), n=5_000)
    assert np.isfinite(arr).all()
    assert stats.kstest(arr, stats.gamma(a=2.5).cdf).pvalue < P_THRESHOLD


def test_vector_marginals_follow_components() -> None:
    node = vector_compose(vector_compose(uniform(0, 1), exponential(1)), gaussian(5, 1 / 3))
    source = NumpyUniformSource(7)
    rows = np.array([sample(node, source) for _ in range(5_000)], dtype=np.float64)

    assert rows.shape == (5_000, 3)
    assert stats.kstest(rows[:, 0], stats.uniform.cdf).pvalue > P_THRESHOLD
    assert stats.kstest(rows[:, 1], stats.expon.cdf).pvalue > P_THRESHOLD
    assert stats.kstest(rows[:, 2], stats.norm(loc=5).cdf).pvalue > P_THRESHOLD
    assert abs(np.corrcoef(rows[:, 0], rows[:, 1])[0, 1]) < 0.05


def test_alternative_frequencies_follow_weights() -> None:
    a, b = supplied(0.0), supplied(1.0)
    node = weighted_alternative(a, b, weight=3.0)
    arr = draw_many(node)
    assert arr.mean() == pytest.approx(0.75, abs=0.02)

    set_weight(node, b, 1.0)
    arr = draw_many(node, seed=99)
    assert arr.mean() == pytest.approx(0.5, abs=0.02)
