from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

from . import solvers

METHOD_ENV_VAR = "CACHEMATRIX_INVERSE_METHOD"
WARN_NON_SQUARE_ENV_VAR = "CACHEMATRIX_WARN_NON_SQUARE"
DEFAULT_METHOD = "inv"

_method_override: str | None = None


def _validated(method: str) -> str:
    method = str(method).strip().lower()
    solvers.get_inverter(method)
    return method


def get_inverse_method() -> str:
    """Default inversion method: explicit override, then env var, then ``"inv"``."""

    if _method_override is not None:
        return _method_override
    env = os.environ.get(METHOD_ENV_VAR)
    if env:
        return _validated(env)
    return DEFAULT_METHOD


def set_inverse_method(method: str | None) -> str:
    """Set the process-wide default method; ``None`` falls back to the environment.

    Clearing the override does not validate the environment variable; a bad
    value there is reported when the default is next looked up.
    """

    global _method_override
    if method is None:
        _method_override = None
        env = os.environ.get(METHOD_ENV_VAR, "").strip().lower()
        return env or DEFAULT_METHOD
    _method_override = _validated(method)
    return _method_override


@contextmanager
def temporary_inverse_method(method: str | None) -> Iterator[None]:
    """Temporarily override the default inversion method.

    Note: the default is process-global; this helper does not provide thread
    isolation.
    """

    if method is None:
        yield
        return

    global _method_override
    prev = _method_override
    _method_override = _validated(method)
    try:
        yield
    finally:
        _method_override = prev


def warn_non_square() -> bool:
    return os.environ.get(WARN_NON_SQUARE_ENV_VAR, "1").strip() not in ("0", "false", "no", "off")
