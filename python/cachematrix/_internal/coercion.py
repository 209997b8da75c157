from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np

from .errors import InvalidArgument

_NUMERIC_KINDS = "biufc"


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def is_empty_matrix(array: np.ndarray) -> bool:
    # A bare [] has zero rows and therefore no columns either.
    if array.ndim == 1:
        return array.shape[0] == 0
    return array.ndim == 2 and array.shape == (0, 0)


def is_square(array: np.ndarray) -> bool:
    return array.ndim == 2 and array.shape[0] == array.shape[1]


def freeze_matrix(candidate: Any) -> np.ndarray:
    """Return a private read-only 2D copy of ``candidate``.

    No emptiness or squareness checks happen here; only the layout and dtype
    are validated so that the stored object is always a numeric 2D array.
    """

    if not isinstance(candidate, np.ndarray) and not is_sequence_like(candidate):
        raise TypeError(
            "Matrix data must be provided as a nested sequence or a NumPy array."
        )
    try:
        array = np.array(candidate, copy=True)
    except ValueError as exc:
        raise TypeError("Each matrix row must have the same number of entries.") from exc
    if array.ndim != 2:
        raise TypeError(f"Matrix input must be 2D, got {array.ndim}D data.")
    if array.dtype.kind not in _NUMERIC_KINDS:
        raise TypeError(f"Matrix entries must be numeric, got dtype {array.dtype}.")
    array.setflags(write=False)
    return array


def coerce_matrix(candidate: Any) -> np.ndarray:
    """Validate and freeze a matrix supplied to a CachedMatrix.

    ``None`` and 0x0 input both raise InvalidArgument.
    """

    if candidate is None:
        raise InvalidArgument("empty matrix")
    if isinstance(candidate, np.ndarray) or is_sequence_like(candidate):
        try:
            probe = np.asarray(candidate)
        except ValueError:
            probe = None
        if probe is not None and is_empty_matrix(probe):
            raise InvalidArgument("empty matrix")
    return freeze_matrix(candidate)


def freeze_value(candidate: Any) -> Any:
    """Read-only copy of array-like input; any other object is kept as given."""

    if isinstance(candidate, np.ndarray) or is_sequence_like(candidate):
        array = np.array(candidate, copy=True)
        array.setflags(write=False)
        return array
    return candidate
