"""Memoized matrix inversion: a matrix holder with a single cached-inverse slot."""
from __future__ import annotations

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"

import logging
from typing import Any

from ._internal import config as _config
from ._internal import formatting as _formatting
from ._internal import observability as _observability
from ._internal.cached_matrix import CachedMatrix, CacheState
from ._internal.errors import InvalidArgument
from ._internal.resolver import (
    InverseResolver,
    ResolverStats,
    cache_solve,
    clean_cache,
    default_resolver,
    reset,
)
from ._internal.solvers import available_methods, invert_matrix
from ._internal.warnings import CacheMatrixShapeWarning, CacheMatrixWarning

logging.getLogger(__name__).addHandler(logging.NullHandler())

get_inverse_method = _config.get_inverse_method
set_inverse_method = _config.set_inverse_method
temporary_inverse_method = _config.temporary_inverse_method


def make_cache_matrix(initial: Any = None) -> CachedMatrix:
    """Build a :class:`CachedMatrix`; ``None`` or a 0x0 matrix raises InvalidArgument."""
    return CachedMatrix(initial)


def last_cache_trace(op: str | None = None) -> dict[str, Any] | None:
    """Return the latest cache trace (optionally for one op such as "resolve" or "reset")."""
    return _observability.default_instance().last(op)


def clear_cache_traces() -> None:
    _observability.default_instance().clear()


def set_print_edge_items(edge_items: int) -> None:
    """Number of leading/trailing rows and columns shown by ``str(CachedMatrix)``."""
    _formatting.configure(edge_items=edge_items)


__all__ = [
    "CacheMatrixShapeWarning",
    "CacheMatrixWarning",
    "CacheState",
    "CachedMatrix",
    "InvalidArgument",
    "InverseResolver",
    "ResolverStats",
    "available_methods",
    "cache_solve",
    "clean_cache",
    "clear_cache_traces",
    "default_resolver",
    "get_inverse_method",
    "invert_matrix",
    "last_cache_trace",
    "make_cache_matrix",
    "reset",
    "set_inverse_method",
    "set_print_edge_items",
    "temporary_inverse_method",
]
