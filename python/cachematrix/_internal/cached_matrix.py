from __future__ import annotations

import enum
import warnings
from typing import Any

import numpy as np

from . import config
from .coercion import coerce_matrix, freeze_value, is_square
from .formatting import matrix_str
from .warnings import CacheMatrixShapeWarning


class CacheState(enum.Enum):
    EMPTY = "empty"
    POPULATED = "populated"


class CachedMatrix:
    """A matrix paired with a single cached-inverse slot.

    The stored matrix and its cached inverse are private read-only copies.
    Replacing the matrix through :meth:`set` always clears the cached inverse,
    so a populated slot is only ever valid for the matrix currently stored.

    The matrix is assumed to be square and invertible. Only emptiness is
    enforced here; a non-square or singular matrix fails later, when the
    inverse is actually computed.
    """

    __slots__ = ("_value", "_cached_inverse", "_epoch")

    def __init__(self, initial: Any = None) -> None:
        self._value = self._accept(initial)
        self._cached_inverse: Any = None
        self._epoch = 0

    @staticmethod
    def _accept(candidate: Any) -> np.ndarray:
        value = coerce_matrix(candidate)
        if not is_square(value) and config.warn_non_square():
            warnings.warn(
                f"CachedMatrix stores a non-square {value.shape[0]}x{value.shape[1]} matrix; "
                "it has no inverse.",
                CacheMatrixShapeWarning,
                stacklevel=3,
            )
        return value

    def get(self) -> np.ndarray:
        return self._value

    def set(self, new_value: Any) -> None:
        """Replace the stored matrix and drop the cached inverse.

        No equality check is made: storing the same matrix again still
        invalidates the cache.
        """
        value = self._accept(new_value)
        self._value = value
        self._cached_inverse = None
        self._epoch += 1

    def get_inverse(self) -> Any:
        return self._cached_inverse

    def set_inverse(self, inverse: Any) -> None:
        # Trusted writer: the resolver only stores inverses of the current value.
        # No shape or dtype checks; array-like input is stored as a read-only copy.
        self._cached_inverse = freeze_value(inverse)

    @property
    def state(self) -> CacheState:
        if self._cached_inverse is None:
            return CacheState.EMPTY
        return CacheState.POPULATED

    @property
    def epoch(self) -> int:
        """Number of times the stored matrix has been replaced."""
        return self._epoch

    @property
    def shape(self) -> tuple[int, int]:
        return (int(self._value.shape[0]), int(self._value.shape[1]))

    def __str__(self) -> str:
        info = [f"shape={self.shape}", f"state={self.state.value}"]
        if self._epoch:
            info.append(f"epoch={self._epoch}")
        return matrix_str(self.__class__.__name__, self._value, info)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} shape={self.shape} state={self.state.value}>"
