"""
Base configuration for the community search service.

Uses Pydantic Settings for environment-based configuration.
Each component extends BaseServiceSettings with its own prefix.
"""

from pydantic_settings import BaseSettings


class BaseServiceSettings(BaseSettings):
    """Base settings shared by every component that talks to the store."""

    service_name: str = "base"

    # Neo4j connection; empty values fall back to the NEO4J_* env vars
    neo4j_uri: str = ""
    neo4j_username: str = ""
    neo4j_password: str = ""
    neo4j_database: str = ""

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
