# src/detection/neighborhood.py — v1
"""n-hop neighborhood around the seed, treated as its local community."""

from __future__ import annotations

from typing import TYPE_CHECKING

from localcommunity.detection.base_detector import RESULT_COMMUNITY_ID, BaseLocalCommunityDetector
from localcommunity.detection.models import NeighborhoodConfig
from localcommunity.graph.community import Community
from localcommunity.graph.network import Graph

if TYPE_CHECKING:
    from localcommunity.config.settings import Settings


class NeighborhoodDetector(BaseLocalCommunityDetector):
    """Every vertex reachable from the seed within ``hops`` steps."""

    def __init__(self, config: NeighborhoodConfig | None = None) -> None:
        self.config = config or NeighborhoodConfig()

    @classmethod
    def from_settings(cls, settings: Settings) -> NeighborhoodDetector:
        return cls(NeighborhoodConfig(hops=settings.neighborhood_hops))

    @property
    def name(self) -> str:
        return "neighborhood"

    def _detect(self, graph: Graph, seed: str) -> Community:
        reached = graph.within_hops(seed, self.config.hops)
        return Community(RESULT_COMMUNITY_ID, graph, reached, name=seed)
