"""
Data types for normalized Gauss-Hermite quadrature rules.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict


def _readonly(values: NDArray[np.float64]) -> NDArray[np.float64]:
    values = np.array(values, dtype=np.float64)
    values.flags.writeable = False
    return values


@dataclass(frozen=True)
class QuadratureRule:
    """
    Abscissae and weights of a k-point normalized Gauss-Hermite rule.

    The weight function is the standard normal density, so the weights
    sum to 1 and E[f(Z)] for Z ~ N(0, 1) is approximated by
    sum(weights * f(abscissae)).

    Attributes:
        abscissae: Evaluation points, sorted ascending and symmetric about
            zero, shape (order,).
        weights: Non-negative weights aligned with abscissae, shape (order,).
    """

    abscissae: NDArray[np.float64]
    weights: NDArray[np.float64]

    def __post_init__(self) -> None:
        abscissae = _readonly(self.abscissae)
        weights = _readonly(self.weights)
        if abscissae.ndim != 1 or weights.ndim != 1:
            raise ValueError("abscissae and weights must be 1D arrays")
        if abscissae.shape != weights.shape:
            raise ValueError("abscissae and weights must have the same shape")
        if abscissae.size == 0:
            raise ValueError("a quadrature rule needs at least one point")
        object.__setattr__(self, "abscissae", abscissae)
        object.__setattr__(self, "weights", weights)

    @property
    def order(self) -> int:
        """Number of quadrature points."""
        return len(self.abscissae)

    def __len__(self) -> int:
        return self.order

    def __iter__(self) -> Iterator[tuple[float, float]]:
        """Iterate over (abscissa, weight) pairs."""
        return zip(self.abscissae.tolist(), self.weights.tolist())

    def expected_value(
        self,
        f: Callable[..., object],
        mean: float = 0.0,
        std: float = 1.0,
        vectorized: bool = False,
    ) -> float:
        """Approximate E[f(X)] for X ~ N(mean, std^2)."""
        from ghnorm.quadrature.expectation import expected_value

        return expected_value(self, f, mean=mean, std=std, vectorized=vectorized)


@dataclass(frozen=True)
class ScaledQuadrature:
    """
    Quadrature points and weights for integrating over N(mean, std^2).

    Attributes:
        points: Shifted and scaled abscissae, shape (n_points,).
        weights: Quadrature weights (probabilities), shape (n_points,).
            Weights sum to 1.
    """

    points: NDArray[np.float64]
    weights: NDArray[np.float64]

    @property
    def n_points(self) -> int:
        """Number of quadrature points."""
        return len(self.points)


class QuadratureRuleRecord(BaseModel):
    """
    Serializable form of a quadrature rule.

    Attributes:
        order: Number of quadrature points.
        abscissae: Evaluation points.
        weights: Weights aligned with abscissae.
    """

    model_config = ConfigDict(frozen=True)

    order: int
    abscissae: tuple[float, ...]
    weights: tuple[float, ...]

    @classmethod
    def from_rule(cls, rule: QuadratureRule) -> "QuadratureRuleRecord":
        return cls(
            order=rule.order,
            abscissae=tuple(rule.abscissae.tolist()),
            weights=tuple(rule.weights.tolist()),
        )

    def to_rule(self) -> QuadratureRule:
        if len(self.abscissae) != self.order:
            raise ValueError(
                f"Expected {self.order} abscissae, got {len(self.abscissae)}"
            )
        return QuadratureRule(
            abscissae=np.array(self.abscissae, dtype=np.float64),
            weights=np.array(self.weights, dtype=np.float64),
        )
