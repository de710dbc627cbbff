"""
Configuration dataclasses for Gauss-Hermite quadrature.

This module defines the configuration parameters for:
- Quadrature settings (order and the normal distribution integrated over)
- Adaptive Gauss-Hermite deviance evaluation
"""

import math
from dataclasses import dataclass

from ghnorm.errors import InvalidArgumentError, validate_order

# Default quadrature settings
DEFAULT_QUADRATURE_POINTS = 9
DEFAULT_MEAN = 0.0
DEFAULT_STD = 1.0

# A single point gives the Laplace approximation
DEFAULT_AGQ_POINTS = 1


def validate_location_scale(mean: float, std: float) -> None:
    if not math.isfinite(mean):
        raise InvalidArgumentError(f"mean must be finite, got {mean}")
    if not math.isfinite(std) or std < 0:
        raise InvalidArgumentError(
            f"std must be finite and non-negative, got {std}"
        )


@dataclass(frozen=True)
class QuadratureConfig:
    """
    Configuration for normalized Gauss-Hermite quadrature.

    Attributes:
        n_points: Number of quadrature points. A k-point rule is exact for
            polynomials of degree up to 2k - 1.
        mean: Mean of the normal distribution integrated over.
        std: Standard deviation of the normal distribution integrated over.
    """

    n_points: int = DEFAULT_QUADRATURE_POINTS
    mean: float = DEFAULT_MEAN
    std: float = DEFAULT_STD

    def __post_init__(self) -> None:
        validate_order(self.n_points)
        validate_location_scale(self.mean, self.std)


@dataclass(frozen=True)
class AdaptiveConfig:
    """
    Configuration for adaptive Gauss-Hermite deviance evaluation.

    Attributes:
        n_agq: Number of adaptive quadrature points per random-effect level.
            1 reduces to the Laplace approximation.
    """

    n_agq: int = DEFAULT_AGQ_POINTS

    def __post_init__(self) -> None:
        validate_order(self.n_agq)
