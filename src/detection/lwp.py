# src/detection/lwp.py — v1
"""Luo, Wang and Promislow local community search.

Luo, Wang, Promislow, "Exploring local community structures in large
networks", WI 2006.

Alternates an addition phase and a deletion phase, each keeping only moves
that strictly increase the LWP modularity (internal edges / external edges).
Deletions must also keep the community connected. The search stops when a
round leaves no accepted addition. A final community that does not contain
the seed, or whose modularity is not positive, is reported by returning an
empty community.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from localcommunity.detection.base_detector import RESULT_COMMUNITY_ID, BaseLocalCommunityDetector
from localcommunity.graph.community import Community
from localcommunity.graph.errors import InvalidCommunityError
from localcommunity.graph.network import Graph

if TYPE_CHECKING:
    from localcommunity.config.settings import Settings

logger = logging.getLogger(__name__)

# Returned for a community with internal edges and no external edge.
MAX_MODULARITY = math.inf


def lwp_modularity(community: Community) -> float:
    """Internal edge count divided by external edge count.

    Returns MAX_MODULARITY when there are internal edges but no external
    ones, and 0.0 when there are neither (isolated vertex or empty community).

    Raises:
        InvalidCommunityError: If a member no longer resolves in the graph.
    """
    if not community.is_valid():
        raise InvalidCommunityError(
            "Modularity requires a community whose members all resolve in the graph"
        )
    graph = community.reference_graph

    internal_degree = 0
    external = 0
    for member in community.members():
        neighbors = graph.neighbor_keys(member)
        inside = sum(1 for n in neighbors if community.contains(n))
        internal_degree += inside
        external += len(neighbors) - inside
    # Every internal edge was seen from both endpoints.
    internal = internal_degree // 2

    if external == 0:
        return MAX_MODULARITY if internal > 0 else 0.0
    return internal / external


class LWPDetector(BaseLocalCommunityDetector):
    """Add/delete hill climbing on the LWP modularity."""

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> LWPDetector:
        """LWP has no tunable parameters."""
        return cls()

    @property
    def name(self) -> str:
        return "lwp"

    @staticmethod
    def modularity(community: Community) -> float:
        return lwp_modularity(community)

    def _detect(self, graph: Graph, seed: str) -> Community:
        community = Community(RESULT_COMMUNITY_ID, graph, [seed])
        candidates = set(graph.neighbor_keys(seed))

        rounds = 0
        while True:
            rounds += 1
            best = lwp_modularity(community)
            accepted, best = _addition_phase(community, candidates, best)
            candidates -= accepted
            removed, best = _deletion_phase(community, best)
            accepted -= removed

            for key in sorted(accepted):
                for neighbor in graph.neighbor_keys(key):
                    if not community.contains(neighbor):
                        candidates.add(neighbor)

            logger.debug(
                "Round %d: +%d -%d, modularity=%s, size=%d",
                rounds, len(accepted), len(removed), best, community.size(),
            )
            if not accepted:
                break

        if lwp_modularity(community) > 0.0 and community.contains(seed):
            return community

        logger.warning(
            "Empty community returned for seed %s: the best community found "
            "has no positive modularity or excludes the seed",
            seed,
        )
        return Community(RESULT_COMMUNITY_ID, graph)


def _addition_phase(
    community: Community, candidates: set[str], best: float
) -> tuple[set[str], float]:
    accepted: set[str] = set()
    for key in sorted(candidates):
        community.add_member_by_key(key)
        value = lwp_modularity(community)
        if value > best:
            best = value
            accepted.add(key)
        else:
            community.remove_member_by_key(key)
    return accepted, best


def _deletion_phase(community: Community, best: float) -> tuple[set[str], float]:
    """Remove members while that strictly helps, until a full scan removes none."""
    removed: set[str] = set()
    while True:
        removed_this_scan = 0
        for key in community.members():
            community.remove_member_by_key(key)
            value = lwp_modularity(community)
            if value > best and community.is_connected():
                best = value
                removed.add(key)
                removed_this_scan += 1
            else:
                community.add_member_by_key(key)
        if removed_this_scan == 0:
            return removed, best
