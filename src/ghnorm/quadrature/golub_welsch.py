"""
Golub-Welsch computation of normalized Gauss-Hermite rules.

The abscissae of the k-point rule for the standard normal weight function
are the eigenvalues of the symmetric tridiagonal Jacobi matrix with zero
diagonal and off-diagonal entries sqrt(1), ..., sqrt(k - 1). The weights are
the squared first components of the corresponding unit eigenvectors, so they
already sum to 1 and need no rescaling by sqrt(pi).
"""

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import eigh_tridiagonal

from ghnorm.errors import validate_order
from ghnorm.quadrature.rule import QuadratureRule


def jacobi_off_diagonal(order: int) -> NDArray[np.float64]:
    """Off-diagonal of the probabilists' Hermite Jacobi matrix."""
    return np.sqrt(np.arange(1, order, dtype=np.float64))


def symmetrize(
    abscissae: NDArray[np.float64], weights: NDArray[np.float64]
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Force exact symmetry on raw eigensolver output.

    Points are sorted ascending; each mirrored pair (i, k-1-i) is replaced by
    the average magnitude with opposite signs and both weights by their mean.
    For odd k the middle point is set to exactly 0.

    Args:
        abscissae: Raw abscissae, shape (k,).
        weights: Raw weights aligned with abscissae, shape (k,).

    Returns:
        Tuple of (abscissae, weights), new arrays.
    """
    perm = np.argsort(abscissae, kind="stable")
    z = np.array(abscissae, dtype=np.float64)[perm]
    w = np.array(weights, dtype=np.float64)[perm]

    k = len(z)
    for i in range(k // 2):
        j = k - 1 - i
        half = (z[j] - z[i]) / 2.0
        z[i] = -half
        z[j] = half
        w_avg = (w[i] + w[j]) / 2.0
        w[i] = w_avg
        w[j] = w_avg
    if k % 2 == 1:
        z[k // 2] = 0.0

    return z, w


def compute_rule(order: int) -> QuadratureRule:
    """
    Compute the k-point normalized Gauss-Hermite rule without caching.

    Args:
        order: Number of quadrature points, k >= 1.

    Returns:
        QuadratureRule with exactly symmetric abscissae and weights.

    Raises:
        InvalidArgumentError: If order is not a positive integer.
        LinAlgError: If the eigensolver fails to converge.
    """
    order = validate_order(order)
    if order == 1:
        return QuadratureRule(
            abscissae=np.zeros(1, dtype=np.float64),
            weights=np.ones(1, dtype=np.float64),
        )

    diagonal = np.zeros(order, dtype=np.float64)
    eigenvalues, eigenvectors = eigh_tridiagonal(
        diagonal, jacobi_off_diagonal(order)
    )
    raw_weights = eigenvectors[0, :] ** 2

    abscissae, weights = symmetrize(eigenvalues, raw_weights)
    return QuadratureRule(abscissae=abscissae, weights=weights)
