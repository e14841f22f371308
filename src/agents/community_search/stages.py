"""
Analytic stage contracts.

The search delegates the actual community algorithms to two injected
strategies: a ``Maintainer`` that prepares the graph in place (e.g. k-d
truss maintenance) and an ``Extractor`` that returns the community
subgraph (e.g. greedy weighted expansion). Deployments plug their own
implementations in through ``CommunitySearchSettings``; the baselines
below keep the service usable without them.
"""

import importlib
import logging
from abc import ABC, abstractmethod
from collections import deque

from src.shared.exceptions import StageLoadError
from src.shared.models.graph import Graph, Vertex

logger = logging.getLogger("community_search.stages")


class Maintainer(ABC):
    """Prepares the full graph for extraction."""

    @abstractmethod
    def maintain(self, graph: Graph, query_vertex: Vertex, k: int, d: int) -> None:
        """Mutate or annotate ``graph`` in place."""


class Extractor(ABC):
    """Extracts the community around the query vertex."""

    @abstractmethod
    def extract(
        self,
        graph: Graph,
        working_graph: Graph,
        k: int,
        d: int,
        query_vertex: Vertex,
    ) -> Graph:
        """Return the community subgraph.

        Implementations must not change the identities of ``graph``'s
        vertices or edges.
        """


class NoOpMaintainer(Maintainer):
    """Leaves the graph as ingested."""

    def maintain(self, graph: Graph, query_vertex: Vertex, k: int, d: int) -> None:
        logger.debug("No-op maintenance for vertex %s (k=%s, d=%s)", query_vertex.id, k, d)


class HopNeighborhoodExtractor(Extractor):
    """Induced subgraph of every vertex within ``d`` undirected hops.

    ``k`` is ignored. A non-positive ``d`` yields the query vertex alone.
    """

    def extract(
        self,
        graph: Graph,
        working_graph: Graph,
        k: int,
        d: int,
        query_vertex: Vertex,
    ) -> Graph:
        start = working_graph.get_vertex_by_id(query_vertex.id)
        if start is None:
            return Graph()

        depth = {start.id: 0}
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            if depth[vertex.id] >= d:
                continue
            for neighbor in vertex.neighbors:
                if neighbor.id not in depth:
                    depth[neighbor.id] = depth[vertex.id] + 1
                    queue.append(neighbor)

        return working_graph.subgraph(depth)


def load_stage(path: str) -> object:
    """Instantiate a stage from a ``"package.module:ClassName"`` path.

    Raises:
        StageLoadError: If the path is malformed or cannot be resolved.
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise StageLoadError(f"Invalid stage path {path!r}, expected 'module:ClassName'")
    try:
        module = importlib.import_module(module_name)
        factory = getattr(module, attr)
    except (ImportError, AttributeError) as exc:
        raise StageLoadError(f"Cannot load stage {path!r}: {exc}") from exc
    return factory()
