"""Structured diagnostic events.

Decision code never prints. Functions that make interesting decisions take an
optional ``trace`` sink and report through :func:`emit`; passing ``None`` turns
tracing off without touching control flow.
"""

from __future__ import annotations

import json
import os
import time
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Protocol


@dataclass(frozen=True)
class TraceEvent:
    kind: str
    data: Mapping[str, Any] = field(default_factory=dict)
    ts: float = 0.0


class TraceSink(Protocol):
    def emit(self, kind: str, **data: Any) -> None:
        ...


def emit(sink: TraceSink | None, kind: str, **data: Any) -> None:
    if sink is not None:
        sink.emit(kind, **data)


def _jsonable(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return _jsonable(asdict(value))
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (set, frozenset)):
        return sorted(_jsonable(v) for v in value)
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, Mapping):
        return {str(k): _jsonable(v) for k, v in value.items()}
    return value


class MemoryTrace:
    """Keeps events in memory, optionally only the kinds listed in ``kinds``."""

    def __init__(self, kinds: set[str] | None = None):
        self.kinds = kinds
        self.events: list[TraceEvent] = []

    def emit(self, kind: str, **data: Any) -> None:
        if self.kinds is not None and kind not in self.kinds:
            return
        self.events.append(TraceEvent(kind=kind, data=_jsonable(data), ts=time.time()))

    def of_kind(self, kind: str) -> list[TraceEvent]:
        return [e for e in self.events if e.kind == kind]

    def clear(self) -> None:
        self.events.clear()


class JsonlTraceWriter:
    """Appends one JSON object per event to ``path``.

    Every event reopens, flushes and fsyncs the file, so this writer suits low-rate
    events (goal and search summaries). Filter high-rate kinds such as
    ``resolve.object`` through a ``MemoryTrace`` instead.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, kind: str, **data: Any) -> None:
        record = TraceEvent(kind=kind, data=_jsonable(data), ts=time.time())
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(asdict(record), ensure_ascii=False) + "\n")
            f.flush()
            os.fsync(f.fileno())

    def read(self) -> list[TraceEvent]:
        if not self.path.exists():
            return []
        out: list[TraceEvent] = []
        for line in self.path.read_text(encoding="utf-8").splitlines():
            if not line.strip():
                continue
            obj = json.loads(line)
            out.append(TraceEvent(kind=str(obj["kind"]), data=dict(obj.get("data", {})), ts=float(obj.get("ts", 0.0))))
        return out
