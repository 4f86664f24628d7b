# src/detection/clauset.py — v1
"""Clauset's local modularity maximization.

Clauset, "Finding local community structure in networks", Phys. Rev. E 72,
026132 (2005).

State:
    C   community members
    B   boundary: members still adjacent to at least one candidate
    U   candidates: non-members adjacent to the community
    T   edges with at least one endpoint in B
    I   those edges of T whose endpoints both lie in C
    R   I / T, the local modularity

Each iteration admits the candidate with the largest strictly positive
increase of R. The increments of I and T are derived locally from the
candidate and the boundary members it would push out of B, and are applied
to the running totals without recounting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from localcommunity.detection.base_detector import RESULT_COMMUNITY_ID, BaseLocalCommunityDetector
from localcommunity.detection.models import ClausetConfig
from localcommunity.graph.community import Community
from localcommunity.graph.network import Graph

if TYPE_CHECKING:
    from localcommunity.config.settings import Settings

logger = logging.getLogger(__name__)

MAX_STALLED_ITERATIONS = 10


@dataclass
class _Move:
    """Effect of admitting one candidate."""

    candidate: str
    delta_i: int
    delta_t: int
    delta_r: float


@dataclass
class _SearchState:
    community: Community
    boundary: set[str]
    candidates: set[str]
    internal: int
    total: int
    ratio: float = 0.0


class ClausetDetector(BaseLocalCommunityDetector):
    """Greedy local modularity (R) maximization up to a target size."""

    def __init__(self, config: ClausetConfig | None = None) -> None:
        self.config = config or ClausetConfig()

    @classmethod
    def from_settings(cls, settings: Settings) -> ClausetDetector:
        return cls(ClausetConfig(target_size=settings.clauset_target_size))

    @property
    def name(self) -> str:
        return "clauset"

    def _detect(self, graph: Graph, seed: str) -> Community:
        state = _SearchState(
            community=Community(RESULT_COMMUNITY_ID, graph, [seed]),
            boundary={seed},
            candidates=set(graph.neighbor_keys(seed)),
            internal=0,
            total=graph.degree(seed),
        )

        stalled = 0
        while state.community.size() < self.config.target_size and stalled < MAX_STALLED_ITERATIONS:
            best: _Move | None = None
            for candidate in sorted(state.candidates):
                move = _evaluate(graph, state, candidate)
                if move.delta_r > (best.delta_r if best else 0.0):
                    best = move
            if best is None:
                stalled += 1
                continue
            stalled = 0
            _apply(graph, state, best)
            logger.debug(
                "Admitted %s: R=%.4f (I=%d, T=%d)",
                best.candidate, state.ratio, state.internal, state.total,
            )

        return state.community


def _evaluate(graph: Graph, state: _SearchState, candidate: str) -> _Move:
    community = state.community
    boundary = state.boundary
    candidates = state.candidates

    neighbors = graph.neighbor_keys(candidate)
    # Non-members that would newly join U.
    extended_frontier = {
        n for n in neighbors if not community.contains(n) and n not in candidates
    }

    def in_next_candidates(key: str) -> bool:
        return key != candidate and (key in candidates or key in extended_frontier)

    candidate_stays = any(in_next_candidates(n) for n in neighbors)
    leaving = {
        member
        for member in boundary
        if not any(in_next_candidates(n) for n in graph.neighbor_keys(member))
    }

    def in_next_boundary(key: str) -> bool:
        if key == candidate:
            return candidate_stays
        return key in boundary and key not in leaving

    def in_next_community(key: str) -> bool:
        return key == candidate or community.contains(key)

    # Only edges touching the candidate or a leaving member change status.
    affected = leaving | {candidate}
    delta_i = 0
    delta_t = 0
    for x in affected:
        for y in graph.neighbor_keys(x):
            if y in affected and y < x:
                continue
            was_t = x in boundary or y in boundary
            was_i = was_t and community.contains(x) and community.contains(y)
            now_t = in_next_boundary(x) or in_next_boundary(y)
            now_i = now_t and in_next_community(x) and in_next_community(y)
            delta_t += int(now_t) - int(was_t)
            delta_i += int(now_i) - int(was_i)

    next_total = state.total + delta_t
    # An empty boundary means the community encloses its whole component.
    next_ratio = (state.internal + delta_i) / next_total if next_total > 0 else 1.0
    return _Move(candidate, delta_i, delta_t, next_ratio - state.ratio)


def _apply(graph: Graph, state: _SearchState, move: _Move) -> None:
    added = move.candidate
    state.candidates.discard(added)
    state.community.add_member_by_key(added)
    for neighbor in graph.neighbor_keys(added):
        if not state.community.contains(neighbor):
            state.candidates.add(neighbor)

    state.boundary.add(added)
    state.boundary = {
        member
        for member in state.boundary
        if any(n in state.candidates for n in graph.neighbor_keys(member))
    }

    state.ratio += move.delta_r
    state.total += move.delta_t
    state.internal += move.delta_i
