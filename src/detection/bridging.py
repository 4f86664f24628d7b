# src/detection/bridging.py — v1
"""Edge bridging measures: how likely an edge links two distinct dense clusters.

ELB (edge local bridging) is one minus the fraction of possible common
neighbors that the endpoints actually share. ELB2 blends an edge's ELB with
the mean ELB of the edges around it.

Both measures are memoized on edges that carry a measure cache.
"""

from __future__ import annotations

import logging

from localcommunity.graph.errors import UnsupportedMeasureError
from localcommunity.graph.models import BridgingMeasure, Edge
from localcommunity.graph.network import Graph

logger = logging.getLogger(__name__)

ELB2_ALPHA = 0.5


class EdgeBridgingCalculator:
    """Computes one bridging measure over the edges of a graph."""

    def __init__(self, graph: Graph, measure: BridgingMeasure | str) -> None:
        self.graph = graph
        self.measure = _resolve_measure(measure)
        self.alpha = ELB2_ALPHA

    def calculate(self, edge: Edge) -> float:
        """Bridging score of ``edge`` under the configured measure."""
        if self.measure is BridgingMeasure.ELB:
            return self.elb(edge)
        if self.measure is BridgingMeasure.ELB2:
            return self.elb2(edge)
        raise UnsupportedMeasureError(f"Unsupported network measure: {self.measure!r}")

    def elb(self, edge: Edge) -> float:
        cached = edge.cached_measure(BridgingMeasure.ELB)
        if cached is not None:
            return cached

        deg1 = self.graph.degree(edge.u)
        deg2 = self.graph.degree(edge.v)
        denominator = min(deg1 - 1, deg2 - 1)
        # Sentinel, not memoized.
        if denominator == 1:
            return 1.0
        # Pendant edge: no neighbor can be shared.
        if denominator == 0:
            return 1.0

        neighborhood1 = set(self.graph.neighbor_keys(edge.u))
        common = sum(1 for n in self.graph.neighbor_keys(edge.v) if n in neighborhood1)
        value = 1.0 - common / denominator
        edge.store_measure(BridgingMeasure.ELB, value)
        return value

    def elb2(self, edge: Edge) -> float:
        cached = edge.cached_measure(BridgingMeasure.ELB2)
        if cached is not None:
            return cached

        this_elb = self.elb(edge)
        # Both incident lists contain ``edge`` itself; it is counted twice.
        surrounding = self.graph.incident_edges(edge.u) + self.graph.incident_edges(edge.v)
        mean = sum(self.elb(e) for e in surrounding) / len(surrounding)
        value = self.alpha * this_elb + (1.0 - self.alpha) * mean
        edge.store_measure(BridgingMeasure.ELB2, value)
        return value


def _resolve_measure(measure: BridgingMeasure | str) -> BridgingMeasure:
    try:
        return BridgingMeasure(measure)
    except ValueError as exc:
        raise UnsupportedMeasureError(f"Unsupported network measure: {measure!r}") from exc
