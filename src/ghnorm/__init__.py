import logging

from ghnorm.errors import GHNormError, InvalidArgumentError
from ghnorm.quadrature import (
    QuadratureRule,
    QuadratureRuleProvider,
    ScaledQuadrature,
    default_provider,
    expected_value,
    get_quadrature,
    ghnorm,
)

# Records propagate to whatever handlers the application puts on the root logger.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "GHNormError",
    "InvalidArgumentError",
    "QuadratureRule",
    "QuadratureRuleProvider",
    "ScaledQuadrature",
    "default_provider",
    "expected_value",
    "get_quadrature",
    "ghnorm",
]
