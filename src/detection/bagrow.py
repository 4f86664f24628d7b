# src/detection/bagrow.py — v1
"""Bagrow's outwardness-driven local community search.

Bagrow, "Evaluating local community methods in networks", J. Stat. Mech. (2008).

The community grows one vertex at a time, always absorbing the candidate with
the lowest outwardness (share of its edges pointing outside the community,
rescaled to [-1, 1]). Growth stops at the second reversal ("cusp") of the
trend of the community's external edge count, which signals that a local
minimum of that curve has been passed. The admission that produced the
second cusp is undone.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from localcommunity.detection.base_detector import RESULT_COMMUNITY_ID, BaseLocalCommunityDetector
from localcommunity.detection.models import BagrowConfig
from localcommunity.graph.community import Community
from localcommunity.graph.network import Graph

if TYPE_CHECKING:
    from localcommunity.config.settings import Settings

logger = logging.getLogger(__name__)

# Outwardness below this means every neighbor is already a member.
FULLY_INTERNAL = -0.999999
MAX_CUSPS = 2


class BagrowDetector(BaseLocalCommunityDetector):
    """Greedy minimum-outwardness growth with a cusp-based stopping rule."""

    def __init__(self, config: BagrowConfig | None = None) -> None:
        self.config = config or BagrowConfig()

    @classmethod
    def from_settings(cls, settings: Settings) -> BagrowDetector:
        return cls(BagrowConfig(max_size=settings.bagrow_max_size))

    @property
    def name(self) -> str:
        return "bagrow"

    def _detect(self, graph: Graph, seed: str) -> Community:
        community = Community(RESULT_COMMUNITY_ID, graph, [seed])
        candidates = set(graph.neighbor_keys(seed))

        previous_external = 0
        cusps = 0
        trending_up = True
        while community.size() < self.config.max_size and cusps < MAX_CUSPS:
            selected = _select_candidate(graph, community, candidates)
            if selected is None:
                break

            community.add_member_by_key(selected)
            candidates.discard(selected)
            for neighbor in graph.neighbor_keys(selected):
                if not community.contains(neighbor):
                    candidates.add(neighbor)

            external = external_edge_count(graph, community)
            rising = external > previous_external
            if rising != trending_up:
                cusps += 1
                trending_up = rising
                logger.debug("Cusp %d at size %d (external=%d)", cusps, community.size(), external)
            previous_external = external

            if cusps >= MAX_CUSPS:
                community.remove_member_by_key(selected)
                break

        return community


def outwardness(graph: Graph, community: Community, candidate: str) -> float:
    """1 - 2 * kin / degree, where kin counts neighbors already in the community."""
    neighbors = graph.neighbor_keys(candidate)
    kin = sum(1 for n in neighbors if community.contains(n))
    return 1.0 - (2.0 * kin) / len(neighbors)


def external_edge_count(graph: Graph, community: Community) -> int:
    """Number of edges with exactly one endpoint in the community."""
    return sum(
        1
        for member in community.members()
        for neighbor in graph.neighbor_keys(member)
        if not community.contains(neighbor)
    )


def _select_candidate(graph: Graph, community: Community, candidates: set[str]) -> str | None:
    """Lowest-outwardness candidate; ties go to the lowest key."""
    best_value = 1.0
    selected: str | None = None
    for candidate in sorted(candidates):
        value = outwardness(graph, community, candidate)
        if value < FULLY_INTERNAL:
            return candidate
        if value < best_value:
            best_value = value
            selected = candidate
    return selected
