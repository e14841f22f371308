"""
Community Search — MCP Server

Exposes the k-d community search as MCP tools over the stdio transport.
The Neo4j driver and the analytic stages are created once, on the first
tool call, and shared by every later call.

Run as:  python -m src.agents.community_search.server        (stdio transport)
"""

import asyncio
import json
import logging

from mcp.server.fastmcp import FastMCP

from src.agents.community_search.config import CommunitySearchSettings
from src.agents.community_search.service import CommunitySearchService
from src.shared.exceptions import NodeNotFoundError
from src.shared.logging import setup_logging

logger = setup_logging("community_search", level="INFO")

mcp = FastMCP("CommunitySearch")

# ─── Shared resources (lazy init) ─────────────────────────

_settings: CommunitySearchSettings | None = None
_service: CommunitySearchService | None = None
_service_lock = asyncio.Lock()


def _get_settings() -> CommunitySearchSettings:
    """Lazy-initialise settings from environment variables."""
    global _settings
    if _settings is None:
        _settings = CommunitySearchSettings()
        logging.getLogger().setLevel(_settings.log_level.upper())
    return _settings


async def _get_service() -> CommunitySearchService:
    """Lazy-initialise the search service on first tool call."""
    global _service
    async with _service_lock:
        if _service is None:
            _service = await CommunitySearchService.create(_get_settings())
    return _service


# ─── Tools ────────────────────────────────────────────────


@mcp.tool()
async def search_community(k: int, d: int, node_id: int) -> str:
    """Find and characterise the k-d community around a node.

    Reloads the whole graph from Neo4j, runs the configured maintenance
    and extraction stages, and returns the scored community: size,
    response time, structural tightness, mean Jaccard / cosine attribute
    similarity to the query node, the query node's degree centrality,
    and the member nodes and edges.

    Args:
        k: Structural parameter forwarded to the analytic stages.
        d: Distance parameter forwarded to the analytic stages.
        node_id: Native Neo4j identifier of the query node.
    """
    service = await _get_service()
    try:
        result = await service.search_community(k, d, node_id)
    except NodeNotFoundError as exc:
        return json.dumps({"error": str(exc), "node_id": exc.node_id})
    return json.dumps(result.to_payload(), default=str)


@mcp.tool()
async def check_store() -> str:
    """Report whether the Neo4j store backing the search is reachable."""
    service = await _get_service()
    reachable = await service.verify_store()
    return json.dumps({"status": "healthy" if reachable else "unhealthy"})


# ─── Entry point ──────────────────────────────────────────

if __name__ == "__main__":
    logger.info("Starting Community Search MCP server (stdio transport)")
    mcp.run()
