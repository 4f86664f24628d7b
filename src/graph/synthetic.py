# src/graph/synthetic.py — v1
"""Synthetic graphs with a planted community structure.

Used to exercise detectors against a known reference partition. Each
community is an Erdos-Renyi style random graph; a fraction of every member's
links is then rewired to vertices of other communities.
"""

from __future__ import annotations

import logging
import random

from pydantic import BaseModel, model_validator

from localcommunity.graph.community import Community
from localcommunity.graph.models import Vertex
from localcommunity.graph.network import Graph
from localcommunity.graph.partition import GraphPartition

logger = logging.getLogger(__name__)


class SyntheticCommunityParameters(BaseModel):
    """Parameters of a synthetic community mixture."""

    nodes: int
    communities: int
    size_variation: float = 1.0
    min_total_degree: int = 0
    max_total_degree: int = 0
    min_p_out: float = 0.0
    max_p_out: float = 0.0

    @model_validator(mode="after")
    def validate_ranges(self) -> SyntheticCommunityParameters:
        if self.communities < 1:
            raise ValueError("At least one community is required")
        if self.min_total_degree < 0 or self.max_total_degree > self.nodes - 1:
            raise ValueError("Total degree should lie in [0, nodes - 1]")
        if self.min_total_degree > self.max_total_degree:
            raise ValueError("Min total degree should not exceed the max one")
        for p in (self.min_p_out, self.max_p_out):
            if p < 0.0 or p > 1.0:
                raise ValueError("Community out-density should lie in [0.0, 1.0]")
        if self.min_p_out > self.max_p_out:
            raise ValueError("Min out-density should not exceed the max one")
        return self

    @classmethod
    def uniform(
        cls,
        nodes: int,
        communities: int,
        size_variation: float,
        total_degree: int,
        p_out: float,
    ) -> SyntheticCommunityParameters:
        """Parameters where every community shares one degree and out-density."""
        return cls(
            nodes=nodes,
            communities=communities,
            size_variation=size_variation,
            min_total_degree=total_degree,
            max_total_degree=total_degree,
            min_p_out=p_out,
            max_p_out=p_out,
        )

    @classmethod
    def default(cls) -> SyntheticCommunityParameters:
        return cls.uniform(100, 4, 1.0, 15, 0.05)


class SyntheticGraphFactory:
    """Generates synthetic graphs. Vertex keys are unique per factory instance."""

    def __init__(self, seed: int | None = None) -> None:
        self._counter = 0
        self._rng = random.Random(seed)

    def create_vertex(self) -> Vertex:
        vertex = Vertex(key=str(self._counter))
        self._counter += 1
        return vertex

    def generate_graph(self, nodes: int, density: float) -> Graph:
        """Random graph where each vertex pair is linked with probability ``density``."""
        if density < 0.0 or density > 1.0:
            raise ValueError("Community density should lie in [0.0, 1.0]")
        graph = Graph()
        vertices = [self.create_vertex() for _ in range(max(nodes, 0))]
        for vertex in vertices:
            graph.add_vertex(vertex)
        threshold = 1.0 - density
        for i in range(len(vertices) - 1):
            for j in range(i + 1, len(vertices)):
                if self._rng.random() >= threshold:
                    graph.add_edge(vertices[i], vertices[j])
        return graph

    def generate_community_mixture(
        self, params: SyntheticCommunityParameters | None = None
    ) -> GraphPartition:
        """Build a graph with planted communities and return it as a partition."""
        params = params or SyntheticCommunityParameters.default()
        avg_size = params.nodes // params.communities
        min_nodes = round(2 * avg_size / (1.0 + params.size_variation))
        max_nodes = round(2 * avg_size * params.size_variation / (1.0 + params.size_variation))

        full_graph = Graph()
        communities: list[Community] = []
        out_degrees: list[int] = []
        out_probabilities: list[float] = []
        nodes_so_far = 0

        for i in range(params.communities):
            community_nodes = min_nodes + round(self._rng.random() * (max_nodes - min_nodes))
            total_degree = self._rng.randint(params.min_total_degree, params.max_total_degree)
            p_out = self._rng.uniform(params.min_p_out, params.max_p_out)
            out_degrees.append(round(p_out * total_degree))
            out_probabilities.append(p_out)

            if i == params.communities - 1:
                community_nodes = params.nodes - nodes_so_far
            if community_nodes < 1:
                logger.warning("Community %d was forced to have 1 node", i)
                community_nodes = 1

            in_density = (total_degree - out_degrees[i]) / community_nodes
            if in_density > 1.0:
                logger.warning("Impossible community mixture specification, clamping density")
                in_density = 1.0

            sub_graph = self.generate_graph(community_nodes, in_density)
            nodes_so_far += community_nodes
            for vertex in sub_graph.vertices():
                full_graph.add_vertex(vertex)
            for edge in sub_graph.edges():
                full_graph.add_edge(edge.u, edge.v, edge=edge)
            communities.append(Community(i, full_graph, sub_graph.vertex_keys()))

        for i, community in enumerate(communities):
            if out_degrees[i] <= 0:
                continue
            threshold = 1.0 - out_probabilities[i]
            for key in community.members():
                out_links = 0
                for other in full_graph.vertex_keys():
                    if community.contains(other) or full_graph.find_edge(key, other) is not None:
                        continue
                    if self._rng.random() > threshold:
                        full_graph.add_edge(key, other)
                        out_links += 1
                        if out_links >= out_degrees[i]:
                            break

        logger.debug(
            "Generated mixture of %d communities: %r", len(communities), full_graph
        )
        return GraphPartition(full_graph, communities)
