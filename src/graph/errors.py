# src/graph/errors.py — v1
"""Error taxonomy for graph, community and detector operations.

All errors are caller or precondition errors. They are raised immediately
and never retried.
"""

from __future__ import annotations


class LocalCommunityError(Exception):
    """Base class for every error raised by localcommunity."""


class VertexNotInGraphError(LocalCommunityError, KeyError):
    """Raised when a vertex key does not resolve in the graph."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Vertex {self.key!r} does not exist in the graph"


class InvalidCommunityError(LocalCommunityError, ValueError):
    """Raised when a community-wide statistic is requested on an invalid community."""


class UnsupportedMeasureError(LocalCommunityError, ValueError):
    """Raised for an unrecognized bridging measure kind."""


class UninitializedCommunityError(LocalCommunityError, RuntimeError):
    """Raised when a community is used without a bound graph."""


class UnsupportedDetectorError(LocalCommunityError, ValueError):
    """Raised when a detector name has no registered implementation."""
