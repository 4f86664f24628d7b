# src/detection/models.py — v1
"""Per-detector configuration models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from localcommunity.graph.models import BridgingMeasure


class NeighborhoodConfig(BaseModel):
    """n-hop neighborhood around the seed."""

    model_config = ConfigDict(frozen=True)

    hops: int = Field(default=1, ge=0)


class BridgeBoundingConfig(BaseModel):
    """Edges whose bridging score is at or below ``threshold`` are traversable."""

    model_config = ConfigDict(frozen=True)

    measure: BridgingMeasure = BridgingMeasure.ELB2
    threshold: float = 0.5


class BagrowConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_size: int = Field(default=500, ge=1)


class ClausetConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    target_size: int = Field(default=100, ge=1)
