"""Community Search — k-d community search over a Neo4j property graph."""

from src.agents.community_search.assembler import ResultAssembler
from src.agents.community_search.ingestion import GraphLoader
from src.agents.community_search.service import CommunitySearchService
from src.agents.community_search.stages import Extractor, Maintainer

__all__ = [
    "CommunitySearchService",
    "GraphLoader",
    "ResultAssembler",
    "Maintainer",
    "Extractor",
]
