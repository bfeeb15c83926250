"""Lightweight structured logging for finder and CLI events."""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional, Protocol


class Logger(Protocol):
    """Protocol for minimal logger implementations."""

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO``-level event."""
        ...

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG``-level event."""
        ...

    def bind(self, **fields: Any) -> "Logger":
        """Return a logger that adds ``fields`` to every event."""
        ...


class NoopLogger:
    """Logger that discards all events."""

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def bind(self, **fields: Any) -> "NoopLogger":
        return self


class StdLogger:
    """Writes ``level event k=v`` lines, or JSON lines when ``json_fmt`` is set.

    Fields passed to :meth:`bind` are emitted ahead of per-event fields; an
    event field with the same name wins.
    """

    _levels: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: Any | None = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr
        self.context: Dict[str, Any] = dict(context or {})

    def _enabled(self, level: str) -> bool:
        return self._levels[level] >= self._levels.get(self.level, 20)

    def bind(self, **fields: Any) -> "StdLogger":
        merged = dict(self.context)
        merged.update(fields)
        return StdLogger(self.level, self.json_fmt, self.stream, merged)

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit ``event`` at ``level`` with the bound context and ``fields``."""
        if not self._enabled(level):
            return
        data = dict(self.context)
        data.update(fields)
        if self.json_fmt:
            obj: Dict[str, Any] = {"level": level, "event": event}
            obj.update(data)
            self.stream.write(json.dumps(obj) + "\n")
        else:
            kv = " ".join(f"{k}={v}" for k, v in data.items())
            self.stream.write(f"{level} {event} {kv}".rstrip() + "\n")

    def info(self, event: str, **fields: Any) -> None:
        self.log("info", event, **fields)

    def debug(self, event: str, **fields: Any) -> None:
        self.log("debug", event, **fields)


__all__ = ["Logger", "NoopLogger", "StdLogger"]
