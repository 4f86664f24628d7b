# src/detection/base_detector.py — v1
"""Abstract local community detector interface.

A detector produces a single community around one seed vertex. Detectors
hold only their immutable configuration; every ``detect`` call owns a
private Community and reads the graph without mutating it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from localcommunity.graph.community import Community
from localcommunity.graph.errors import VertexNotInGraphError
from localcommunity.graph.models import Vertex
from localcommunity.graph.network import Graph, vertex_key
from localcommunity.logging.context import reset_context, set_detection_context

logger = logging.getLogger(__name__)

RESULT_COMMUNITY_ID = 1


class BaseLocalCommunityDetector(ABC):
    """Unified interface for local community detection methods."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Detector identifier (e.g., 'bagrow', 'clauset')."""

    @abstractmethod
    def _detect(self, graph: Graph, seed: str) -> Community:
        """Run the search from a seed known to be in ``graph``."""

    def detect(self, graph: Graph, seed: Vertex | str) -> Community:
        """Find the community containing ``seed``.

        Raises:
            VertexNotInGraphError: If the seed is absent from the graph.
        """
        seed_key = vertex_key(seed)
        if not graph.contains_vertex(seed_key):
            raise VertexNotInGraphError(seed_key)

        tokens = set_detection_context(self.name, seed_key)
        try:
            community = self._detect(graph, seed_key)
            logger.info(
                "%s detection around %s found %d members",
                self.name, seed_key, community.size(),
            )
        finally:
            reset_context(tokens)
        return community
