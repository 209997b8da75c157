from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Any, Tuple


@dataclass
class CacheRecord:
    op: str
    outcome: str
    trace_tag: str
    shape: Tuple[int, int] | None
    epoch: int | None
    method: str | None
    timestamp: float


def _shape(obj: Any) -> Tuple[int, int] | None:
    try:
        shape_attr = getattr(obj, "shape", None)
        if isinstance(shape_attr, tuple) and len(shape_attr) == 2:
            return int(shape_attr[0]), int(shape_attr[1])
    except (TypeError, ValueError):
        pass
    return None


class CacheObservability:
    """Keeps the most recent cache record overall and per operation."""

    def __init__(self) -> None:
        self._counter = 0
        self._last: dict[str, dict[str, Any]] = {}

    def clear(self) -> None:
        self._last.clear()

    def _record(self, record: CacheRecord) -> dict[str, Any]:
        payload = asdict(record)
        self._last["__latest__"] = payload
        self._last[record.op] = payload
        return payload

    def record(
        self,
        op: str,
        matrix: Any,
        *,
        outcome: str,
        method: str | None = None,
    ) -> dict[str, Any]:
        self._counter += 1
        return self._record(
            CacheRecord(
                op=op,
                outcome=outcome,
                trace_tag=f"{op}:{self._counter}",
                shape=_shape(matrix),
                epoch=getattr(matrix, "epoch", None),
                method=method,
                timestamp=time.time(),
            )
        )

    def last(self, op: str | None = None) -> dict[str, Any] | None:
        key = op or "__latest__"
        payload = self._last.get(key)
        if payload is None:
            return None
        return dict(payload)


_default_observability = CacheObservability()


def default_instance() -> CacheObservability:
    return _default_observability
