# src/graph/community.py — v1
"""Graph-bound community: a mutable set of member keys.

A community references its backing graph but never owns or mutates it.
Members must resolve in the graph at insertion time; afterwards the caller
must not mutate the graph, otherwise ``is_valid()`` turns false.
"""

from __future__ import annotations

from collections.abc import Iterable

from localcommunity.graph.errors import UninitializedCommunityError, VertexNotInGraphError
from localcommunity.graph.models import CommunitySummary, Vertex
from localcommunity.graph.network import Graph, vertex_key


class Community:
    """Vertex subset of a graph, identified by a non-negative integer id."""

    def __init__(
        self,
        community_id: int,
        graph: Graph | None,
        members: Iterable[Vertex | str] | None = None,
        name: str | None = None,
    ) -> None:
        if community_id < 0:
            raise ValueError("Community id should be a non-negative integer")
        self._id = community_id
        self._graph = graph
        self._members: set[str] = set()
        self.name = name
        for member in members or ():
            self.add_member(member)

    @property
    def community_id(self) -> int:
        return self._id

    @property
    def reference_graph(self) -> Graph:
        return self._bound_graph()

    # --- Membership ---

    def add_member(self, vertex: Vertex | str) -> None:
        """Insert a member. Re-inserting an existing member is a no-op.

        Raises:
            VertexNotInGraphError: If the vertex is absent from the graph.
            UninitializedCommunityError: If no graph is bound.
        """
        self.add_member_by_key(vertex_key(vertex))

    def add_member_by_key(self, key: str) -> None:
        graph = self._bound_graph()
        if not graph.contains_vertex(key):
            raise VertexNotInGraphError(key)
        self._members.add(key)

    def remove_member(self, vertex: Vertex | str) -> None:
        self._members.discard(vertex_key(vertex))

    def remove_member_by_key(self, key: str) -> None:
        self._members.discard(key)

    def members(self) -> list[str]:
        """Member keys, sorted."""
        return sorted(self._members)

    def contains(self, vertex: Vertex | str) -> bool:
        return vertex_key(vertex) in self._members

    def size(self) -> int:
        return len(self._members)

    def is_empty(self) -> bool:
        return not self._members

    # --- Structure checks ---

    def is_valid(self) -> bool:
        """True iff every member key still resolves in the backing graph."""
        graph = self._bound_graph()
        return all(graph.contains_vertex(key) for key in self._members)

    def is_connected(self) -> bool:
        """True iff the members form a single component of the induced subgraph.

        An empty community is not connected.
        """
        if not self._members:
            return False
        graph = self._bound_graph()
        start = next(iter(self._members))
        visited = {start}
        frontier = [start]
        while frontier:
            current = frontier.pop()
            for neighbor in graph.neighbor_keys(current):
                if neighbor in self._members and neighbor not in visited:
                    visited.add(neighbor)
                    frontier.append(neighbor)
        return len(visited) == len(self._members)

    def get_community_copy(self) -> Graph:
        """Materialize the induced subgraph as a fresh Graph.

        Relatively expensive: O(sum of member degrees) on every call. Each
        copied edge gets a fresh payload with an empty measure cache.
        """
        graph = self._bound_graph()
        copy = Graph()
        for key in self._members:
            copy.add_vertex(graph.vertex_by_key(key))
        for key in self._members:
            for edge in graph.incident_edges(key):
                other = edge.other(key)
                if other in self._members and copy.find_edge(key, other) is None:
                    copy.add_edge(
                        key, other, weight=edge.weight, cacheable=edge.supports_cache
                    )
        return copy

    def to_summary(self) -> CommunitySummary:
        return CommunitySummary(
            community_id=self._id,
            name=self.name,
            members=self.members(),
            size=self.size(),
            connected=self.is_connected(),
        )

    def _bound_graph(self) -> Graph:
        if self._graph is None:
            raise UninitializedCommunityError(
                "The community object has not been bound to a graph"
            )
        return self._graph

    def __contains__(self, vertex: object) -> bool:
        if isinstance(vertex, (Vertex, str)):
            return self.contains(vertex)
        return False

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self):
        return iter(self.members())

    def __repr__(self) -> str:
        return f"Community(id={self._id}, name={self.name!r}, size={self.size()})"
