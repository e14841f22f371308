"""
Neo4j Connection Handler

Centralised Neo4j driver management.
Reads credentials from environment variables and exposes an async driver
(a process-wide connection pool) that is created once and shared by every
search. Each read acquires its own scoped session from the pool.
"""

import os
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from dotenv import load_dotenv
from neo4j import AsyncGraphDatabase, AsyncDriver, AsyncSession

from src.shared.config import BaseServiceSettings

load_dotenv()

logger = logging.getLogger("community_search.neo4j_handler")


class Neo4jHandler:
    """
    Manages a single async Neo4j driver backed by .env configuration.

    Usage
    -----
    handler = Neo4jHandler()          # reads from .env
    await handler.connect()
    async with handler.session() as session:
        result = await session.run("MATCH (n)-[r]->(m) RETURN n, r, m")
    await handler.close()
    """

    def __init__(
        self,
        uri: str | None = None,
        username: str | None = None,
        password: str | None = None,
        database: str | None = None,
    ):
        self._uri = uri or os.getenv("NEO4J_URI")
        self._username = username or os.getenv("NEO4J_USERNAME")
        self._password = password or os.getenv("NEO4J_PASSWORD")
        self._database = database or os.getenv("NEO4J_DATABASE", "neo4j")
        self._driver: AsyncDriver | None = None

        if not self._uri:
            raise ValueError("NEO4J_URI is not set (env or argument)")
        if not self._username:
            raise ValueError("NEO4J_USERNAME is not set (env or argument)")
        if not self._password:
            raise ValueError("NEO4J_PASSWORD is not set (env or argument)")

    @classmethod
    def from_settings(cls, settings: BaseServiceSettings) -> "Neo4jHandler":
        """Build a handler from a settings object, falling back to env vars."""
        return cls(
            uri=settings.neo4j_uri or None,
            username=settings.neo4j_username or None,
            password=settings.neo4j_password or None,
            database=settings.neo4j_database or None,
        )

    # ─── Lifecycle ──────────────────────────────────────────

    async def connect(self) -> "Neo4jHandler":
        """Create the async driver and verify connectivity.

        Returns:
            Self for method chaining.

        Raises:
            Exception: If Neo4j connection cannot be established or verified.
        """
        if self._driver is not None:
            return self

        self._driver = AsyncGraphDatabase.driver(
            self._uri, auth=(self._username, self._password)
        )
        try:
            await self._driver.verify_connectivity()
            logger.info("Connected to Neo4j at %s (db=%s)", self._uri, self._database)
        except Exception:
            logger.error("Failed to connect to Neo4j at %s", self._uri)
            raise
        return self

    async def close(self) -> None:
        """Close the underlying driver."""
        if self._driver:
            await self._driver.close()
            self._driver = None
            logger.info("Neo4j connection closed")

    # ─── Properties ─────────────────────────────────────────

    @property
    def driver(self) -> AsyncDriver:
        """Return the raw async driver (for code that needs direct access).

        Returns:
            Neo4j AsyncDriver instance.

        Raises:
            RuntimeError: If handler is not connected (call connect() first).
        """
        if self._driver is None:
            raise RuntimeError("Neo4jHandler is not connected, call connect() first")
        return self._driver

    @property
    def database(self) -> str:
        """Return the configured database name."""
        return self._database

    @property
    def uri(self) -> str:
        """Return the configured Neo4j URI."""
        return self._uri

    @property
    def username(self) -> str:
        """Return the configured Neo4j username."""
        return self._username

    # ─── Sessions ───────────────────────────────────────────

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Acquire a scoped session from the shared driver.

        The session is closed when the ``async with`` block exits, whether
        normally or through an exception.

        Raises:
            RuntimeError: If handler is not connected (call connect() first).
        """
        async with self.driver.session(database=self._database) as session:
            yield session

    async def verify(self) -> bool:
        """Quick health-check: returns True if the database is reachable."""
        if self._driver is None:
            return False
        try:
            await self._driver.verify_connectivity()
            return True
        except Exception as exc:
            logger.warning("Neo4j connectivity check failed: %s", exc)
            return False
