# src/graph/partition.py — v1
"""Graph partition: a reference graph paired with an ordered list of communities.

Produced by synthetic generators and consumed by reporting or plotting code.
"""

from __future__ import annotations

from localcommunity.graph.community import Community
from localcommunity.graph.models import Vertex
from localcommunity.graph.network import Graph


class GraphPartition:
    """Result of grouping the vertices of a graph into communities."""

    def __init__(
        self,
        reference_graph: Graph | None = None,
        communities: list[Community] | None = None,
    ) -> None:
        self.reference_graph = reference_graph
        self.communities: list[Community] = list(communities or [])

    @property
    def number_of_communities(self) -> int:
        return len(self.communities)

    def community(self, index: int) -> Community:
        if index < 0 or index >= len(self.communities):
            raise IndexError(f"Community {index} does not exist in this partition")
        return self.communities[index]

    def add_community(self, community: Community) -> None:
        self.communities.append(community)

    def vertex_community_index(self, vertex: Vertex | str) -> int:
        """Index of the first community containing ``vertex``, or -1."""
        for i, community in enumerate(self.communities):
            if community.contains(vertex):
                return i
        return -1
