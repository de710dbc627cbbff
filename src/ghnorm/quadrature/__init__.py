"""
Normalized Gauss-Hermite quadrature.

Key components:
- QuadratureRule: Abscissae and weights of a k-point rule
- QuadratureRuleProvider: Cached, thread-safe rule computation
- ghnorm: Rule lookup through the shared provider
- expected_value: Expectations under N(mean, std^2)
- adaptive_deviance: Adaptive Gauss-Hermite deviance for scalar random effects
"""

from ghnorm.quadrature.adaptive import (
    adaptive_deviance,
    adaptive_deviance_from_config,
    kernel_ratio,
)
from ghnorm.quadrature.expectation import expected_value, get_quadrature
from ghnorm.quadrature.golub_welsch import compute_rule
from ghnorm.quadrature.provider import (
    QuadratureRuleProvider,
    default_provider,
    ghnorm,
)
from ghnorm.quadrature.rule import (
    QuadratureRule,
    QuadratureRuleRecord,
    ScaledQuadrature,
)

__all__ = [
    "QuadratureRule",
    "QuadratureRuleProvider",
    "QuadratureRuleRecord",
    "ScaledQuadrature",
    "adaptive_deviance",
    "adaptive_deviance_from_config",
    "compute_rule",
    "default_provider",
    "expected_value",
    "get_quadrature",
    "ghnorm",
    "kernel_ratio",
]
