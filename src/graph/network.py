# src/graph/network.py — v1
"""Undirected graph with O(1) vertex lookup by string key.

The adjacency structure is a private NetworkX graph whose node labels are
vertex keys. Every NetworkX edge stores its ``Edge`` payload under the
``payload`` attribute. The key index and the NetworkX node set never diverge:
both are only changed together by ``add_vertex`` and ``remove_vertex``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

import networkx as nx

from localcommunity.graph.errors import VertexNotInGraphError
from localcommunity.graph.models import Edge, Vertex

logger = logging.getLogger(__name__)

_PAYLOAD = "payload"


def vertex_key(vertex: Vertex | str) -> str:
    """Return the key of a vertex given either the vertex or its key."""
    if isinstance(vertex, Vertex):
        return vertex.key
    return vertex


class Graph:
    """Undirected graph indexed by vertex key."""

    def __init__(self) -> None:
        self._graph = nx.Graph()
        self._index: dict[str, Vertex] = {}

    # --- Construction ---

    @classmethod
    def from_edges(
        cls,
        pairs: Iterable[tuple[Vertex | str, Vertex | str]],
        cacheable: bool = True,
    ) -> Graph:
        """Build a graph from endpoint pairs, adding vertices as needed."""
        graph = cls()
        for first, second in pairs:
            graph.add_vertex(first)
            graph.add_vertex(second)
            graph.add_edge(first, second, cacheable=cacheable)
        return graph

    @classmethod
    def from_networkx(cls, source: nx.Graph, cacheable: bool = True) -> Graph:
        """Convert a NetworkX graph. Node labels become keys via ``str()``.

        Integer ``weight`` edge attributes are carried over; self-loops are
        skipped.
        """
        graph = cls()
        for node in source.nodes:
            graph.add_vertex(str(node))
        for u, v, data in source.edges(data=True):
            if u == v:
                logger.debug("Skipping self-loop on %s", u)
                continue
            weight = data.get("weight", 1)
            graph.add_edge(
                str(u), str(v),
                weight=weight if isinstance(weight, int) else 1,
                cacheable=cacheable,
            )
        return graph

    def to_networkx(self) -> nx.Graph:
        """Return a NetworkX copy with ``weight`` edge attributes."""
        copy = nx.Graph()
        copy.add_nodes_from(self._graph.nodes)
        for u, v, data in self._graph.edges(data=True):
            copy.add_edge(u, v, weight=data[_PAYLOAD].weight)
        return copy

    # --- Mutation ---

    def add_vertex(self, vertex: Vertex | str) -> bool:
        """Add a vertex. Returns False if the key is already present."""
        key = vertex_key(vertex)
        if key in self._index:
            return False
        self._index[key] = vertex if isinstance(vertex, Vertex) else Vertex(key=key)
        self._graph.add_node(key)
        return True

    def add_edge(
        self,
        first: Vertex | str,
        second: Vertex | str,
        weight: int = 1,
        cacheable: bool = True,
        edge: Edge | None = None,
    ) -> Edge:
        """Connect two existing vertices and return the edge payload.

        If the vertices are already connected, the existing payload is
        returned unchanged. A prebuilt ``edge`` payload may be supplied; it
        is attached as-is.

        Raises:
            VertexNotInGraphError: If either endpoint is absent.
            ValueError: On a self-loop.
        """
        u = self._require(first)
        v = self._require(second)
        if u == v:
            raise ValueError(f"Self-loops are not supported: {u!r}")
        existing = self.find_edge(u, v)
        if existing is not None:
            return existing
        if edge is None:
            edge = Edge(u=u, v=v, weight=weight, measure_cache={} if cacheable else None)
        elif {edge.u, edge.v} != {u, v}:
            raise ValueError(
                f"Edge payload ({edge.u!r}, {edge.v!r}) does not match endpoints ({u!r}, {v!r})"
            )
        self._graph.add_edge(u, v, **{_PAYLOAD: edge})
        return edge

    def remove_vertex(self, vertex: Vertex | str) -> bool:
        """Remove a vertex, its incident edges and its index entry."""
        key = vertex_key(vertex)
        if key not in self._index:
            return False
        self._graph.remove_node(key)
        del self._index[key]
        return True

    # --- Queries ---

    def contains_vertex(self, vertex: Vertex | str) -> bool:
        return vertex_key(vertex) in self._index

    def get_vertex(self, key: str) -> Vertex | None:
        """Return the vertex for ``key`` or None when absent."""
        return self._index.get(key)

    def vertex_by_key(self, key: str) -> Vertex:
        """Return the vertex for ``key``.

        Raises:
            VertexNotInGraphError: If the key is not indexed.
        """
        found = self._index.get(key)
        if found is None:
            raise VertexNotInGraphError(key)
        return found

    def neighbors(self, vertex: Vertex | str) -> list[Vertex]:
        """Adjacent vertices, in no particular order."""
        return [self._index[k] for k in self._graph.adj[self._require(vertex)]]

    def neighbor_keys(self, vertex: Vertex | str) -> list[str]:
        """Keys of adjacent vertices, in no particular order."""
        return list(self._graph.adj[self._require(vertex)])

    def within_hops(self, vertex: Vertex | str, hops: int) -> list[str]:
        """Keys of every vertex at most ``hops`` edges away, the vertex included."""
        if hops < 0:
            raise ValueError(f"hops must be >= 0, got {hops}")
        distances = nx.single_source_shortest_path_length(
            self._graph, self._require(vertex), cutoff=hops
        )
        return list(distances)

    def degree(self, vertex: Vertex | str) -> int:
        return len(self._graph.adj[self._require(vertex)])

    def find_edge(self, first: Vertex | str, second: Vertex | str) -> Edge | None:
        """Return the edge payload between two vertices, or None if not adjacent.

        Raises:
            VertexNotInGraphError: If either vertex is absent.
        """
        u = self._require(first)
        v = self._require(second)
        data = self._graph.adj[u].get(v)
        if data is None:
            return None
        return data[_PAYLOAD]

    def incident_edges(self, vertex: Vertex | str) -> list[Edge]:
        key = self._require(vertex)
        return [data[_PAYLOAD] for data in self._graph.adj[key].values()]

    def endpoints(self, edge: Edge) -> tuple[Vertex, Vertex]:
        return self.vertex_by_key(edge.u), self.vertex_by_key(edge.v)

    def vertices(self) -> list[Vertex]:
        return list(self._index.values())

    def vertex_keys(self) -> list[str]:
        return list(self._index)

    def edges(self) -> Iterator[Edge]:
        for _, _, data in self._graph.edges(data=True):
            yield data[_PAYLOAD]

    def vertex_count(self) -> int:
        return len(self._index)

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def _require(self, vertex: Vertex | str) -> str:
        key = vertex_key(vertex)
        if key not in self._index:
            raise VertexNotInGraphError(key)
        return key

    def __contains__(self, vertex: object) -> bool:
        if isinstance(vertex, (Vertex, str)):
            return self.contains_vertex(vertex)
        return False

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"Graph(V={self.vertex_count()}, E={self.edge_count()})"
