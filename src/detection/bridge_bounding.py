# src/detection/bridge_bounding.py — v1
"""Bridge Bounding: flood fill from the seed that stops at bridging edges.

An edge whose bridging score exceeds the threshold is treated as part of the
community boundary and never crossed. The fill is depth-first over an
explicit stack and admits each vertex once, without re-evaluation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from localcommunity.detection.base_detector import RESULT_COMMUNITY_ID, BaseLocalCommunityDetector
from localcommunity.detection.bridging import EdgeBridgingCalculator
from localcommunity.detection.models import BridgeBoundingConfig
from localcommunity.graph.community import Community
from localcommunity.graph.network import Graph

if TYPE_CHECKING:
    from localcommunity.config.settings import Settings

logger = logging.getLogger(__name__)


class BridgeBoundingDetector(BaseLocalCommunityDetector):
    """Local community bounded by edges with a high bridging score."""

    def __init__(self, config: BridgeBoundingConfig | None = None) -> None:
        self.config = config or BridgeBoundingConfig()

    @classmethod
    def from_settings(cls, settings: Settings) -> BridgeBoundingDetector:
        return cls(
            BridgeBoundingConfig(
                measure=settings.bridge_bounding_measure,
                threshold=settings.bridge_bounding_threshold,
            )
        )

    @property
    def name(self) -> str:
        return "bridge_bounding"

    def _detect(self, graph: Graph, seed: str) -> Community:
        calculator = EdgeBridgingCalculator(graph, self.config.measure)
        community = Community(RESULT_COMMUNITY_ID, graph)

        frontier = [seed]
        bounded = 0
        while frontier:
            current = frontier.pop()
            if community.contains(current):
                continue
            community.add_member_by_key(current)

            for edge in graph.incident_edges(current):
                candidate = edge.other(current)
                if community.contains(candidate):
                    continue
                if calculator.calculate(edge) > self.config.threshold:
                    bounded += 1
                    continue
                frontier.append(candidate)

        logger.debug(
            "Flood fill admitted %d vertices, %d bridging edges bounded it",
            community.size(), bounded,
        )
        return community
