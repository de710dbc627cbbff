"""
Expectations under a normal distribution by normalized Gauss-Hermite quadrature.

For X ~ N(mean, std^2) and a k-point rule (z_i, w_i),

    E[f(X)] ~= sum_i w_i * f(mean + std * z_i)

which is exact when f is a polynomial of degree <= 2k - 1. The caller picks k;
accuracy degrades as f departs from low-order polynomial behaviour over the
range covered by the points.
"""

from collections.abc import Callable

import numpy as np
from numpy.typing import NDArray

from ghnorm.config import QuadratureConfig, validate_location_scale
from ghnorm.quadrature.provider import ghnorm
from ghnorm.quadrature.rule import QuadratureRule, ScaledQuadrature


def _scaled_points(
    rule: QuadratureRule, mean: float, std: float
) -> NDArray[np.float64]:
    validate_location_scale(mean, std)
    return mean + std * rule.abscissae


def expected_value(
    rule: QuadratureRule,
    f: Callable[..., object],
    mean: float = 0.0,
    std: float = 1.0,
    vectorized: bool = False,
) -> float:
    """
    Approximate E[f(X)] for X ~ N(mean, std^2).

    Args:
        rule: Normalized Gauss-Hermite rule.
        f: Integrand. Called once per point with a float, or once with the
            array of all points when vectorized is True.
        mean: Mean of X.
        std: Standard deviation of X.
        vectorized: Whether f accepts and returns numpy arrays.

    Returns:
        The quadrature approximation to the expectation.

    Raises:
        InvalidArgumentError: If mean is not finite or std is negative.
    """
    points = _scaled_points(rule, mean, std)

    if vectorized:
        values = np.asarray(f(points), dtype=np.float64)
        if values.shape != points.shape:
            raise ValueError(
                f"Vectorized integrand returned shape {values.shape}, "
                f"expected {points.shape}"
            )
    else:
        values = np.fromiter(
            (f(x) for x in points.tolist()),
            dtype=np.float64,
            count=len(points),
        )

    return float(np.dot(rule.weights, values))


def get_quadrature(config: QuadratureConfig) -> ScaledQuadrature:
    """
    Generate quadrature points and weights for N(mean, std^2).

    The points are the cached normalized abscissae shifted and scaled:
        theta = mean + std * z
    and the weights are the normalized weights unchanged.

    Args:
        config: Quadrature configuration specifying number of points,
            mean, and standard deviation.

    Returns:
        ScaledQuadrature with points and weights.
    """
    rule = ghnorm(config.n_points)
    return ScaledQuadrature(
        points=_scaled_points(rule, config.mean, config.std),
        weights=rule.weights.copy(),
    )
