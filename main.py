"""
Entry point — runs one community search directly against Neo4j.

This bypasses the MCP server and runs the search as a standalone async
operation.  Useful for checking a deployment's graph and stages.

Usage:
    python main.py <k> <d> <node_id>

For MCP server mode (stdio transport):
    python -m src.agents.community_search.server
"""

import asyncio
import json
import sys

from src.agents.community_search.config import CommunitySearchSettings
from src.agents.community_search.service import CommunitySearchService
from src.shared.exceptions import NodeNotFoundError
from src.shared.logging import setup_logging


async def main(k: int, d: int, node_id: int) -> int:
    settings = CommunitySearchSettings()
    setup_logging("community_search", level=settings.log_level)
    service = await CommunitySearchService.create(settings)
    try:
        result = await service.search_community(k, d, node_id)
    except NodeNotFoundError as exc:
        print("Search failed:", exc)
        return 1
    finally:
        await service.close()

    print(json.dumps(result.to_payload(), indent=2))
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 4:
        print(__doc__)
        sys.exit(2)
    sys.exit(asyncio.run(main(*(int(arg) for arg in sys.argv[1:]))))
