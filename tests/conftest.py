# tests/conftest.py — v1
"""Shared test fixtures for all unit tests.

Provides small hand-built graphs with a known community structure.
"""

from __future__ import annotations

import itertools

import pytest

from localcommunity.graph.network import Graph


def _clique_edges(keys: list[str]) -> list[tuple[str, str]]:
    return list(itertools.combinations(keys, 2))


# === FIXTURES: Graphs ===


@pytest.fixture
def path_graph() -> Graph:
    """A - B - C - D - E."""
    return Graph.from_edges([("A", "B"), ("B", "C"), ("C", "D"), ("D", "E")])


@pytest.fixture
def dense_core_with_pendant() -> Graph:
    """K4 on {A, B, C, X} plus pendant D attached only to A."""
    edges = _clique_edges(["A", "B", "C", "X"]) + [("A", "D")]
    return Graph.from_edges(edges)


@pytest.fixture
def two_cliques() -> Graph:
    """Two 5-cliques {a1..a5} and {b1..b5} joined by the bridge a5 - b1."""
    left = [f"a{i}" for i in range(1, 6)]
    right = [f"b{i}" for i in range(1, 6)]
    edges = _clique_edges(left) + _clique_edges(right) + [("a5", "b1")]
    return Graph.from_edges(edges)


@pytest.fixture
def complete_six() -> Graph:
    """Complete graph on v0..v5."""
    return Graph.from_edges(_clique_edges([f"v{i}" for i in range(6)]))


@pytest.fixture
def graph_with_isolated(two_cliques: Graph) -> Graph:
    """two_cliques plus a vertex with no edges."""
    two_cliques.add_vertex("lonely")
    return two_cliques


@pytest.fixture
def shared_neighbors_graph() -> Graph:
    """A and B share neighbors C and D; A also has E and B has F.

    deg(A) = deg(B) = 4, so ELB(A, B) = 1 - 2/3.
    """
    return Graph.from_edges([
        ("A", "B"), ("A", "C"), ("A", "D"), ("A", "E"),
        ("B", "C"), ("B", "D"), ("B", "F"),
    ])
