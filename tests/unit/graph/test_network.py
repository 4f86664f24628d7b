# tests/unit/graph/test_network.py — v1
"""Tests for graph/network.py — keyed undirected graph."""

from __future__ import annotations

import networkx as nx
import pytest

from localcommunity.graph.errors import VertexNotInGraphError
from localcommunity.graph.models import Vertex
from localcommunity.graph.network import Graph, vertex_key


class TestVertexKey:
    def test_from_vertex(self):
        assert vertex_key(Vertex(key="A")) == "A"

    def test_from_string(self):
        assert vertex_key("A") == "A"


class TestGraphMutation:
    def test_add_vertex(self):
        g = Graph()
        assert g.add_vertex("A") is True
        assert g.contains_vertex("A")
        assert g.vertex_count() == 1

    def test_add_existing_vertex_is_rejected(self):
        g = Graph()
        original = Vertex(key="A")
        g.add_vertex(original)
        assert g.add_vertex("A") is False
        assert g.vertex_by_key("A") is original
        assert g.vertex_count() == 1

    def test_add_edge_requires_vertices(self):
        g = Graph()
        g.add_vertex("A")
        with pytest.raises(VertexNotInGraphError):
            g.add_edge("A", "B")

    def test_add_edge_twice_returns_existing(self):
        g = Graph.from_edges([("A", "B")])
        first = g.find_edge("A", "B")
        assert g.add_edge("B", "A", weight=7) is first
        assert g.edge_count() == 1

    def test_self_loop_rejected(self):
        g = Graph()
        g.add_vertex("A")
        with pytest.raises(ValueError, match="Self-loops"):
            g.add_edge("A", "A")

    def test_edge_payload_endpoints_must_match(self):
        g = Graph.from_edges([("A", "B")])
        g.add_vertex("C")
        payload = g.find_edge("A", "B")
        with pytest.raises(ValueError, match="does not match"):
            g.add_edge("A", "C", edge=payload)

    def test_remove_vertex_drops_incident_edges(self, path_graph):
        assert path_graph.remove_vertex("C") is True
        assert not path_graph.contains_vertex("C")
        assert path_graph.get_vertex("C") is None
        assert path_graph.edge_count() == 2
        assert sorted(path_graph.neighbor_keys("B")) == ["A"]

    def test_remove_missing_vertex(self, path_graph):
        assert path_graph.remove_vertex("Z") is False
        assert path_graph.vertex_count() == 5


class TestGraphQueries:
    def test_neighbors(self, path_graph):
        assert sorted(v.key for v in path_graph.neighbors("C")) == ["B", "D"]

    def test_degree(self, path_graph):
        assert path_graph.degree("A") == 1
        assert path_graph.degree("C") == 2

    def test_find_edge_is_undirected(self, path_graph):
        edge = path_graph.find_edge("B", "C")
        assert edge is not None
        assert path_graph.find_edge("C", "B") is edge

    def test_find_edge_not_adjacent(self, path_graph):
        assert path_graph.find_edge("A", "E") is None

    def test_find_edge_missing_vertex(self, path_graph):
        with pytest.raises(VertexNotInGraphError, match="Z"):
            path_graph.find_edge("A", "Z")

    def test_neighbors_missing_vertex(self, path_graph):
        with pytest.raises(VertexNotInGraphError):
            path_graph.neighbors("Z")

    def test_vertex_by_key_missing(self, path_graph):
        with pytest.raises(VertexNotInGraphError):
            path_graph.vertex_by_key("Z")

    def test_vertex_not_in_graph_is_key_error(self, path_graph):
        with pytest.raises(KeyError):
            path_graph.degree("Z")

    def test_incident_edges(self, path_graph):
        edges = path_graph.incident_edges("C")
        assert len(edges) == 2
        assert all("C" in (e.u, e.v) for e in edges)

    def test_endpoints(self, path_graph):
        first, second = path_graph.endpoints(path_graph.find_edge("A", "B"))
        assert {first.key, second.key} == {"A", "B"}

    def test_counts(self, two_cliques):
        assert two_cliques.vertex_count() == 10
        assert two_cliques.edge_count() == 21
        assert len(list(two_cliques.edges())) == 21

    def test_contains_operator(self, path_graph):
        assert "A" in path_graph
        assert Vertex(key="E") in path_graph
        assert "Z" not in path_graph
        assert 3 not in path_graph


class TestWithinHops:
    def test_zero_hops(self, path_graph):
        assert path_graph.within_hops("C", 0) == ["C"]

    def test_one_hop(self, path_graph):
        assert sorted(path_graph.within_hops("C", 1)) == ["B", "C", "D"]

    def test_stops_at_component(self, graph_with_isolated):
        reached = graph_with_isolated.within_hops("a1", 50)
        assert len(reached) == 10
        assert "lonely" not in reached

    def test_negative_hops(self, path_graph):
        with pytest.raises(ValueError, match="hops"):
            path_graph.within_hops("C", -1)

    def test_missing_vertex(self, path_graph):
        with pytest.raises(VertexNotInGraphError):
            path_graph.within_hops("Z", 1)


class TestEdgeCache:
    def test_cacheable_by_default(self, path_graph):
        assert path_graph.find_edge("A", "B").supports_cache

    def test_non_cacheable(self):
        g = Graph.from_edges([("A", "B")], cacheable=False)
        edge = g.find_edge("A", "B")
        assert not edge.supports_cache
        assert edge.measure_cache is None


class TestNetworkxConversion:
    def test_from_networkx(self):
        source = nx.karate_club_graph()
        g = Graph.from_networkx(source)
        assert g.vertex_count() == source.number_of_nodes()
        assert g.edge_count() == source.number_of_edges()
        assert g.contains_vertex("0")

    def test_from_networkx_keeps_integer_weight(self):
        source = nx.Graph()
        source.add_edge("x", "y", weight=3)
        g = Graph.from_networkx(source)
        assert g.find_edge("x", "y").weight == 3

    def test_from_networkx_skips_self_loops(self):
        source = nx.Graph()
        source.add_edge("x", "x")
        source.add_edge("x", "y")
        g = Graph.from_networkx(source)
        assert g.edge_count() == 1

    def test_to_networkx(self, two_cliques):
        exported = two_cliques.to_networkx()
        assert exported.number_of_nodes() == 10
        assert exported.has_edge("a5", "b1")
        assert exported["a5"]["b1"]["weight"] == 1
