"""
Adaptive Gauss-Hermite deviance for a single scalar random-effects term.

When a generalized linear mixed model has one scalar random-effects term
with q levels, the conditional density of the spherical random effects U
given the data factors into q scalar densities. On the deviance scale the
contribution of level i at u_i is

    D_i(u_i) = u_i^2 + sum of squared deviance residuals in level i

Around the conditional mode u0_i with conditional standard deviation s_i, the
integrand for the normalized Gauss-Hermite rule is the kernel ratio

    exp((z^2 - (D_i(u0_i + s_i z) - D_i(u0_i))) / 2)

which is constant at 1 when D_i is exactly quadratic. The fitting routine
that supplies the modes, scales and per-level deviance lives outside this
package.
"""

from collections.abc import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ghnorm.config import AdaptiveConfig
from ghnorm.errors import InvalidArgumentError
from ghnorm.quadrature.provider import ghnorm
from ghnorm.quadrature.rule import QuadratureRule

DevianceFunction = Callable[[NDArray[np.float64]], ArrayLike]


def kernel_ratio(
    z: float | NDArray[np.float64],
    devc: ArrayLike,
    devc0: ArrayLike,
) -> NDArray[np.float64]:
    """Ratio of the conditional density to the standard normal at z."""
    z = np.asarray(z, dtype=np.float64)
    shifted = np.asarray(devc, dtype=np.float64) - np.asarray(
        devc0, dtype=np.float64
    )
    result: NDArray[np.float64] = np.exp((z**2 - shifted) / 2.0)
    return result


def _evaluate(
    deviance_at: DevianceFunction, u: NDArray[np.float64], n_levels: int
) -> NDArray[np.float64]:
    devc = np.asarray(deviance_at(u), dtype=np.float64)
    if devc.shape != (n_levels,):
        raise InvalidArgumentError(
            f"deviance_at returned shape {devc.shape}, expected ({n_levels},)"
        )
    return devc


def adaptive_deviance(
    rule: QuadratureRule,
    modes: ArrayLike,
    scales: ArrayLike,
    deviance_at: DevianceFunction,
) -> float:
    """
    Evaluate the adaptive Gauss-Hermite approximation to the deviance.

    Args:
        rule: Normalized Gauss-Hermite rule. A 1-point rule gives the
            Laplace approximation.
        modes: Conditional modes of the random effects, shape (q,).
        scales: Conditional standard deviations, shape (q,), all > 0.
        deviance_at: Maps a random-effects vector of shape (q,) to the
            per-level deviance contributions, shape (q,).

    Returns:
        sum(devc0) - 2 * (sum(log(mult)) + sum(log(scales))), where devc0 is
        the deviance at the modes and mult the per-level quadrature sums of
        the kernel ratio.

    Raises:
        InvalidArgumentError: On shape mismatches or non-positive scales.
    """
    u0 = np.asarray(modes, dtype=np.float64)
    sd = np.asarray(scales, dtype=np.float64)
    if u0.ndim != 1 or u0.shape != sd.shape:
        raise InvalidArgumentError(
            f"modes and scales must be 1D with equal shape, got "
            f"{u0.shape} and {sd.shape}"
        )
    if not np.all(np.isfinite(sd)) or np.any(sd <= 0):
        raise InvalidArgumentError("scales must be finite and positive")

    n_levels = len(u0)
    devc0 = _evaluate(deviance_at, u0, n_levels)
    mult = np.zeros(n_levels, dtype=np.float64)

    for z, w in rule:
        if z == 0.0:
            mult += w
        else:
            devc = _evaluate(deviance_at, u0 + z * sd, n_levels)
            mult += w * kernel_ratio(z, devc, devc0)

    return float(np.sum(devc0) - 2.0 * (np.sum(np.log(mult)) + np.sum(np.log(sd))))


def adaptive_deviance_from_config(
    config: AdaptiveConfig,
    modes: ArrayLike,
    scales: ArrayLike,
    deviance_at: DevianceFunction,
) -> float:
    """Adaptive deviance using the shared rule of order config.n_agq."""
    return adaptive_deviance(ghnorm(config.n_agq), modes, scales, deviance_at)
