# tests/unit/detection/test_neighborhood.py — v1
"""Tests for detection/neighborhood.py — n-hop neighborhood detector."""

from __future__ import annotations

import pytest

from localcommunity.config.settings import Settings
from localcommunity.detection.models import NeighborhoodConfig
from localcommunity.detection.neighborhood import NeighborhoodDetector
from localcommunity.graph.errors import VertexNotInGraphError
from localcommunity.graph.models import Vertex


class TestNeighborhoodDetector:
    def test_name(self):
        assert NeighborhoodDetector().name == "neighborhood"

    def test_one_hop(self, path_graph):
        community = NeighborhoodDetector().detect(path_graph, "C")
        assert community.members() == ["B", "C", "D"]

    def test_named_after_seed(self, path_graph):
        community = NeighborhoodDetector().detect(path_graph, Vertex(key="C"))
        assert community.name == "C"

    def test_zero_hops(self, path_graph):
        detector = NeighborhoodDetector(NeighborhoodConfig(hops=0))
        assert detector.detect(path_graph, "C").members() == ["C"]

    def test_two_hops(self, path_graph):
        detector = NeighborhoodDetector(NeighborhoodConfig(hops=2))
        assert detector.detect(path_graph, "A").members() == ["A", "B", "C"]

    def test_hops_beyond_component(self, graph_with_isolated):
        detector = NeighborhoodDetector(NeighborhoodConfig(hops=10))
        community = detector.detect(graph_with_isolated, "a1")
        assert community.size() == 10
        assert not community.contains("lonely")

    def test_across_bridge(self, two_cliques):
        community = NeighborhoodDetector().detect(two_cliques, "a5")
        assert community.members() == ["a1", "a2", "a3", "a4", "a5", "b1"]

    def test_missing_seed(self, path_graph):
        with pytest.raises(VertexNotInGraphError):
            NeighborhoodDetector().detect(path_graph, "Z")

    def test_negative_hops_rejected(self):
        with pytest.raises(ValueError):
            NeighborhoodConfig(hops=-1)

    def test_from_settings(self):
        detector = NeighborhoodDetector.from_settings(Settings(_env_file=None, neighborhood_hops=3))
        assert detector.config.hops == 3

    def test_repeated_runs_agree(self, two_cliques):
        detector = NeighborhoodDetector(NeighborhoodConfig(hops=2))
        first = detector.detect(two_cliques, "a1").members()
        second = detector.detect(two_cliques, "a1").members()
        assert first == second
