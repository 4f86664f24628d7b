# src/logging/context.py — v1
"""Contextual logging support: attach the running detector and seed to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Set for the duration of one detect() call.
_detector: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "detector", default=None
)
_seed: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "seed", default=None
)

ContextTokens = tuple[contextvars.Token, contextvars.Token]


@dataclass
class LogContext:
    """Snapshot of the current logging context."""

    detector: str | None = None
    seed: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    return LogContext(detector=_detector.get(), seed=_seed.get())


def set_detection_context(detector: str, seed: str) -> ContextTokens:
    """Set the detector name and seed key of the running detection.

    Returns the tokens that restore the previous values via reset_context().
    """
    return _detector.set(detector), _seed.set(seed)


def reset_context(tokens: ContextTokens) -> None:
    """Restore the context that was current before set_detection_context()."""
    detector_token, seed_token = tokens
    _detector.reset(detector_token)
    _seed.reset(seed_token)


def clear_context() -> None:
    _detector.set(None)
    _seed.set(None)
