# src/graph/models.py — v1
"""Graph data models: Vertex, Edge, BridgingMeasure, CommunitySummary."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class BridgingMeasure(str, Enum):
    """Edge-level bridging measures."""

    ELB = "elb"
    ELB2 = "elb2"


class Vertex(BaseModel):
    """Graph vertex. Equality and hashing are by key alone."""

    model_config = ConfigDict(frozen=True)

    key: str

    def __str__(self) -> str:
        return self.key


class Edge(BaseModel):
    """Undirected edge payload.

    ``measure_cache`` is ``None`` for edges that do not support memoized
    bridging scores; such edges are recomputed on every lookup.
    """

    u: str
    v: str
    weight: int = 1
    measure_cache: dict[BridgingMeasure, float] | None = None

    @property
    def supports_cache(self) -> bool:
        return self.measure_cache is not None

    def cached_measure(self, measure: BridgingMeasure) -> float | None:
        """Return the memoized value for ``measure`` or None."""
        if self.measure_cache is None:
            return None
        return self.measure_cache.get(measure)

    def store_measure(self, measure: BridgingMeasure, value: float) -> None:
        """Memoize ``value``. No-op on edges without a cache."""
        if self.measure_cache is not None:
            self.measure_cache[measure] = value

    def other(self, key: str) -> str:
        """Return the endpoint opposite to ``key``."""
        if key == self.u:
            return self.v
        if key == self.v:
            return self.u
        raise ValueError(f"{key!r} is not an endpoint of edge ({self.u!r}, {self.v!r})")


class CommunitySummary(BaseModel):
    """Serializable view of a community for reporting collaborators."""

    community_id: int
    name: str | None = None
    members: list[str] = Field(default_factory=list)
    size: int = 0
    connected: bool = False
