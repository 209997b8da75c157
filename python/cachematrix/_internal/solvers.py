"""Matrix inversion primitives.

Every routine here raises on singular or non-square input; none of them falls
back to a pseudo-inverse. The resolver relies on that to keep failed
computations out of the cache.
"""
from __future__ import annotations

import warnings
from typing import Any, Callable

import numpy as np

__all__ = [
    "available_methods",
    "get_inverter",
    "invert_inv",
    "invert_lu",
    "invert_matrix",
    "invert_qr",
    "invert_solve",
]


def _require_square(a: np.ndarray) -> None:
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise np.linalg.LinAlgError(
            f"Last 2 dimensions of the array must be square, got shape {a.shape}"
        )


def invert_inv(a: Any) -> np.ndarray:
    """Invert matrix using numpy.linalg.inv."""
    return np.linalg.inv(np.asarray(a))


def invert_solve(a: Any) -> np.ndarray:
    """Invert matrix by solving ``a @ x = I``."""
    a = np.asarray(a)
    _require_square(a)
    return np.linalg.solve(a, np.identity(a.shape[0], dtype=np.result_type(a, float)))


def invert_lu(a: Any) -> np.ndarray:
    """Invert matrix using LU decomposition."""
    from scipy.linalg import LinAlgWarning, lu_factor, lu_solve

    a = np.asarray(a)
    _require_square(a)
    # lu_factor only warns on an exactly singular factor; promote that to an error.
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", LinAlgWarning)
        lu, piv = lu_factor(a)
    if np.any(np.diag(lu) == 0):
        raise np.linalg.LinAlgError("Singular matrix")
    for record in caught:
        warnings.warn(record.message, record.category, stacklevel=2)
    return lu_solve((lu, piv), np.identity(a.shape[0]))


def invert_qr(a: Any) -> np.ndarray:
    """Invert matrix using QR decomposition."""
    a = np.asarray(a)
    _require_square(a)
    q, r = np.linalg.qr(a)
    if np.any(np.diag(r) == 0):
        raise np.linalg.LinAlgError("Singular matrix")
    return np.linalg.inv(r) @ q.conj().T


_INVERTERS: dict[str, Callable[[Any], np.ndarray]] = {
    "inv": invert_inv,
    "solve": invert_solve,
    "lu": invert_lu,
    "qr": invert_qr,
}


def available_methods() -> tuple[str, ...]:
    return tuple(_INVERTERS)


def get_inverter(method: str) -> Callable[[Any], np.ndarray]:
    try:
        return _INVERTERS[method]
    except KeyError:
        raise ValueError(
            f"Unknown inversion method: {method!r} (expected one of {', '.join(_INVERTERS)})"
        ) from None


def invert_matrix(a: Any, method: str | None = None) -> np.ndarray:
    """
    Invert a square matrix using the specified method.

    Parameters:
        a (array-like): Square matrix to invert.
        method (str | None): 'inv', 'solve', 'lu', 'qr'. ``None`` uses the
            configured default (see ``set_inverse_method``).

    Returns:
        ndarray: Inverse of ``a``.

    Raises:
        numpy.linalg.LinAlgError: ``a`` is singular or not square.
        ValueError: ``method`` is not a known inversion method.
    """
    if method is None:
        from . import config

        method = config.get_inverse_method()
    return get_inverter(method)(a)
