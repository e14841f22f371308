"""
Community Search Service

Public entry point of the search: loads the full graph from Neo4j,
resolves the query vertex, runs the maintenance stage and then the
extraction stage, and scores the returned community.

Nothing is cached between calls; every search reloads the graph.
"""

import logging
import time

from src.agents.community_search.assembler import ResultAssembler
from src.agents.community_search.config import CommunitySearchSettings
from src.agents.community_search.ingestion import GraphLoader
from src.agents.community_search.stages import Extractor, Maintainer, load_stage
from src.shared.database import Neo4jHandler
from src.shared.exceptions import NodeNotFoundError
from src.shared.logging import generate_correlation_id
from src.shared.models.community import CommunityResult
from src.shared.models.graph import Graph

logger = logging.getLogger("community_search.service")


class CommunitySearchService:
    """Orchestrates ingestion, the two analytic stages and result assembly."""

    def __init__(
        self,
        handler: Neo4jHandler,
        maintainer: Maintainer,
        extractor: Extractor,
        settings: CommunitySearchSettings | None = None,
        assembler: ResultAssembler | None = None,
    ):
        self._settings = settings or CommunitySearchSettings()
        self._handler = handler
        self._loader = GraphLoader(handler, self._settings)
        self._maintainer = maintainer
        self._extractor = extractor
        self._assembler = assembler or ResultAssembler()

    @classmethod
    async def create(
        cls,
        settings: CommunitySearchSettings | None = None,
    ) -> "CommunitySearchService":
        """Connect to Neo4j and load the configured stages.

        Args:
            settings: Optional settings override.  Falls back to env vars.
        """
        settings = settings or CommunitySearchSettings()
        handler = await Neo4jHandler.from_settings(settings).connect()
        maintainer = load_stage(settings.maintainer)
        extractor = load_stage(settings.extractor)
        logger.info(
            "CommunitySearchService ready (maintainer=%s, extractor=%s)",
            type(maintainer).__name__, type(extractor).__name__,
        )
        return cls(handler, maintainer, extractor, settings)

    async def verify_store(self) -> bool:
        """Return True if the Neo4j store is reachable."""
        return await self._handler.verify()

    async def close(self) -> None:
        """Release the shared Neo4j driver."""
        await self._handler.close()

    async def build_graph(self) -> Graph:
        """Load the complete graph currently held by the store."""
        return await self._loader.load()

    async def search_community(self, k: int, d: int, node_id: int) -> CommunityResult:
        """Find and score the k-d community around ``node_id``.

        ``k`` and ``d`` are passed to the analytic stages unchanged.

        Raises:
            NodeNotFoundError: If ``node_id`` is not a vertex of the graph.
            Exception: Store and stage failures, propagated unchanged.
        """
        cid = generate_correlation_id()
        start = time.monotonic()
        logger.info("[%s] search_community k=%s d=%s node=%s", cid, k, d, node_id)

        graph = await self.build_graph()
        query_vertex = graph.get_vertex_by_id(node_id)
        if query_vertex is None:
            logger.info("[%s] node %s not found in graph", cid, node_id)
            raise NodeNotFoundError(node_id)

        try:
            self._maintainer.maintain(graph, query_vertex, k, d)
            community = self._extractor.extract(graph, graph, k, d, query_vertex)
        except Exception:
            logger.exception("[%s] analytic stage failed", cid)
            raise

        elapsed_ms = int((time.monotonic() - start) * 1000)
        result = self._assembler.assemble(community, query_vertex, elapsed_ms)
        logger.info(
            "[%s] community of %d vertices, %d edges in %d ms",
            cid, result.community_size, len(result.edges), elapsed_ms,
        )
        return result
