"""
Cached access to normalized Gauss-Hermite rules.

A QuadratureRuleProvider computes each order at most once and hands out the
same immutable QuadratureRule on every later request. The cache is an
injectable mapping so tests and applications can control its lifetime;
default_provider() returns the shared process-wide instance.
"""

import logging
import threading
from collections.abc import Callable, MutableMapping
from functools import lru_cache

from ghnorm.errors import validate_order
from ghnorm.quadrature.golub_welsch import compute_rule
from ghnorm.quadrature.rule import QuadratureRule

logger = logging.getLogger(__name__)


class QuadratureRuleProvider:
    """
    Read-through cache of normalized Gauss-Hermite rules keyed by order.

    Concurrent first requests for the same order are serialized on a
    per-order lock so the rule is computed once; requests for different
    orders do not block each other. Cached rules are read without locking.
    """

    def __init__(
        self,
        cache: MutableMapping[int, QuadratureRule] | None = None,
        compute: Callable[[int], QuadratureRule] = compute_rule,
    ) -> None:
        self._cache: MutableMapping[int, QuadratureRule] = (
            {} if cache is None else cache
        )
        self._compute = compute
        self._locks: dict[int, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, order: int) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(order)
            if lock is None:
                lock = threading.Lock()
                self._locks[order] = lock
            return lock

    def get_rule(self, order: int) -> QuadratureRule:
        """
        Return the k-point normalized Gauss-Hermite rule.

        Args:
            order: Number of quadrature points, k >= 1.

        Returns:
            The cached QuadratureRule for this order, computing it on the
            first request.

        Raises:
            InvalidArgumentError: If order is not a positive integer.
        """
        order = validate_order(order)

        rule = self._cache.get(order)
        if rule is not None:
            return rule

        with self._lock_for(order):
            rule = self._cache.get(order)
            if rule is None:
                logger.debug(f"Computing Gauss-Hermite rule of order {order}")
                rule = self._compute(order)
                self._cache[order] = rule
        return rule

    def __contains__(self, order: object) -> bool:
        return order in self._cache

    @property
    def cached_orders(self) -> tuple[int, ...]:
        """Orders currently held in the cache, ascending."""
        return tuple(sorted(self._cache))

    def clear(self) -> None:
        """Drop all cached rules; per-order locks are kept for in-flight requests."""
        with self._locks_guard:
            logger.debug(f"Clearing {len(self._cache)} cached rules")
            self._cache.clear()


@lru_cache(maxsize=1)
def default_provider() -> QuadratureRuleProvider:
    """Shared provider with process lifetime."""
    return QuadratureRuleProvider()


def ghnorm(order: int) -> QuadratureRule:
    """Return the k-point normalized Gauss-Hermite rule from the shared provider."""
    return default_provider().get_rule(order)
