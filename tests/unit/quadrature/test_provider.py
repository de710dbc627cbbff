"""
Tests for the cached rule provider.
"""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from ghnorm.errors import InvalidArgumentError
from ghnorm.quadrature.golub_welsch import compute_rule
from ghnorm.quadrature.provider import (
    QuadratureRuleProvider,
    default_provider,
    ghnorm,
)
from ghnorm.quadrature.rule import QuadratureRule


class CountingCompute:
    def __init__(self, delay: float = 0.0) -> None:
        self.delay = delay
        self.calls: list[int] = []
        self._lock = threading.Lock()

    def __call__(self, order: int) -> QuadratureRule:
        with self._lock:
            self.calls.append(order)
        time.sleep(self.delay)
        return compute_rule(order)


class TestQuadratureRuleProvider:
    def test_same_object_on_repeat(self) -> None:
        """Two requests for the same order return the identical rule."""
        provider = QuadratureRuleProvider()

        assert provider.get_rule(7) is provider.get_rule(7)

    def test_computes_once_per_order(self) -> None:
        """Cached orders should never be recomputed."""
        compute = CountingCompute()
        provider = QuadratureRuleProvider(compute=compute)

        for _ in range(3):
            provider.get_rule(4)
            provider.get_rule(9)

        assert sorted(compute.calls) == [4, 9]
        assert provider.cached_orders == (4, 9)
        assert 4 in provider
        assert 5 not in provider

    def test_injected_cache_is_used(self) -> None:
        """Rules should be stored in and read from the injected mapping."""
        cache: dict[int, QuadratureRule] = {}
        provider = QuadratureRuleProvider(cache=cache)

        rule = provider.get_rule(3)

        assert cache[3] is rule

        preset = compute_rule(2)
        cache[2] = preset
        assert provider.get_rule(2) is preset

    def test_fresh_providers_are_isolated(self) -> None:
        """Separate providers should not share cache entries."""
        first = QuadratureRuleProvider()
        second = QuadratureRuleProvider()

        first.get_rule(5)

        assert 5 in first
        assert 5 not in second

    def test_clear(self) -> None:
        """Clearing should force recomputation on next request."""
        compute = CountingCompute()
        provider = QuadratureRuleProvider(compute=compute)

        provider.get_rule(3)
        provider.clear()
        provider.get_rule(3)

        assert compute.calls == [3, 3]

    def test_clear_during_computation_computes_once(self) -> None:
        """A request arriving after clear() waits for the running computation."""
        started = threading.Event()

        class SlowCompute(CountingCompute):
            def __call__(self, order: int) -> QuadratureRule:
                started.set()
                return super().__call__(order)

        compute = SlowCompute(delay=0.2)
        provider = QuadratureRuleProvider(compute=compute)

        with ThreadPoolExecutor(max_workers=2) as pool:
            first = pool.submit(provider.get_rule, 5)
            assert started.wait(timeout=5.0)
            provider.clear()
            second = pool.submit(provider.get_rule, 5)
            rules = [first.result(), second.result()]

        assert compute.calls == [5]
        assert rules[0] is rules[1]
        assert provider.get_rule(5) is rules[0]

    def test_cache_miss_logged_at_debug(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Computing a new order emits a debug record the application can see."""
        provider = QuadratureRuleProvider()

        with caplog.at_level(logging.DEBUG):
            provider.get_rule(4)
            provider.get_rule(4)

        messages = [
            r.getMessage()
            for r in caplog.records
            if r.name == "ghnorm.quadrature.provider"
        ]
        assert messages == ["Computing Gauss-Hermite rule of order 4"]

    def test_numpy_integer_order(self) -> None:
        """numpy integer orders share the cache entry with plain ints."""
        provider = QuadratureRuleProvider()

        assert provider.get_rule(np.int64(6)) is provider.get_rule(6)

    @pytest.mark.parametrize("bad", [0, -1, 1.0, 2.5, True])
    def test_invalid_order(self, bad: object) -> None:
        """Invalid orders raise and leave the cache empty."""
        provider = QuadratureRuleProvider()

        with pytest.raises(InvalidArgumentError):
            provider.get_rule(bad)  # type: ignore[arg-type]
        assert provider.cached_orders == ()

    def test_invalid_order_is_value_error(self) -> None:
        """InvalidArgumentError can be caught as ValueError."""
        provider = QuadratureRuleProvider()

        with pytest.raises(ValueError, match="must be >= 1"):
            provider.get_rule(0)

    def test_concurrent_first_requests_compute_once(self) -> None:
        """Concurrent first requests for one order share a single computation."""
        compute = CountingCompute(delay=0.05)
        provider = QuadratureRuleProvider(compute=compute)

        with ThreadPoolExecutor(max_workers=8) as pool:
            rules = list(pool.map(provider.get_rule, [11] * 16))

        assert compute.calls == [11]
        assert all(rule is rules[0] for rule in rules)

    def test_concurrent_different_orders(self) -> None:
        """Each order is computed exactly once under concurrency."""
        compute = CountingCompute(delay=0.01)
        provider = QuadratureRuleProvider(compute=compute)
        orders = [1, 2, 3, 4] * 5

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(provider.get_rule, orders))

        assert sorted(compute.calls) == [1, 2, 3, 4]


class TestCachedRuleImmutability:
    def test_arrays_are_read_only(self) -> None:
        """Callers cannot modify a cached rule in place."""
        rule = QuadratureRuleProvider().get_rule(4)

        with pytest.raises(ValueError):
            rule.abscissae[0] = 1.0
        with pytest.raises(ValueError):
            rule.weights[0] = 1.0


class TestDefaultProvider:
    def test_shared_instance(self) -> None:
        """default_provider should always return the same provider."""
        assert default_provider() is default_provider()

    def test_ghnorm_uses_shared_cache(self) -> None:
        """ghnorm lookups go through the shared provider."""
        rule = ghnorm(8)

        assert rule is default_provider().get_rule(8)
        assert 8 in default_provider()
