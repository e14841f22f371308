"""Community Search configuration."""

from src.shared.config import BaseServiceSettings


class CommunitySearchSettings(BaseServiceSettings):
    """Settings specific to the community search service."""

    service_name: str = "community_search"

    # Ingestion
    weight_property: str = "weight"
    default_edge_weight: float = 1.0

    # Analytic stages, as "package.module:ClassName" import paths
    maintainer: str = "src.agents.community_search.stages:NoOpMaintainer"
    extractor: str = "src.agents.community_search.stages:HopNeighborhoodExtractor"

    class Config(BaseServiceSettings.Config):
        env_prefix = "COMMUNITY_SEARCH_"
