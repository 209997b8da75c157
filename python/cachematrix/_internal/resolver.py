from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np

from . import config
from . import observability as _observability
from . import solvers
from .cached_matrix import CachedMatrix

logger = logging.getLogger(__name__)

Inverter = Callable[[Any], Any]


@dataclass
class ResolverStats:
    hits: int = 0
    misses: int = 0
    computations: int = 0
    failures: int = 0


class InverseResolver:
    """Get-or-compute access to the inverse held by a :class:`CachedMatrix`.

    ``inverter`` is any callable mapping a matrix to its inverse. Without one,
    ``method`` names a registered primitive; with neither, the configured
    default method is looked up on every miss.
    """

    def __init__(
        self,
        inverter: Inverter | None = None,
        *,
        method: str | None = None,
        observability: _observability.CacheObservability | None = None,
    ) -> None:
        if inverter is not None and method is not None:
            raise TypeError("pass either inverter or method, not both")
        if method is not None:
            solvers.get_inverter(method)
        self._inverter = inverter
        self._method = method
        self._observability = observability or _observability.default_instance()
        self.stats = ResolverStats()

    def _select(self) -> tuple[Inverter, str]:
        if self._inverter is not None:
            return self._inverter, getattr(self._inverter, "__name__", "custom")
        method = self._method or config.get_inverse_method()
        return solvers.get_inverter(method), method

    def resolve(self, m: CachedMatrix) -> np.ndarray:
        inverse = m.get_inverse()
        if inverse is not None:
            logger.info("getting cached data")
            self.stats.hits += 1
            self._observability.record("resolve", m, outcome="hit")
            return inverse

        self.stats.misses += 1
        method: str | None = None
        try:
            inverter, method = self._select()
            data = m.get()
            logger.debug("computing inverse of %dx%d matrix with %s", *data.shape, method)
            self.stats.computations += 1
            m.set_inverse(inverter(data))
        except Exception:
            self.stats.failures += 1
            self._observability.record("resolve", m, outcome="failed", method=method)
            raise
        self._observability.record("resolve", m, outcome="miss", method=method)
        return m.get_inverse()

    def reset_stats(self) -> None:
        self.stats = ResolverStats()


def reset(m: CachedMatrix) -> None:
    """Store the current matrix again, which clears its cached inverse."""

    logger.info("cleaning")
    m.set(m.get())
    _observability.default_instance().record("reset", m, outcome="cleared")


clean_cache = reset

_default_resolver = InverseResolver()


def default_resolver() -> InverseResolver:
    return _default_resolver


def cache_solve(m: CachedMatrix) -> np.ndarray:
    """Return the inverse of ``m``, computing and caching it on first use."""

    return _default_resolver.resolve(m)
