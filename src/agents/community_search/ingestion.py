"""
Graph Ingestion

Materialises the whole property graph held in Neo4j as an in-memory
``Graph``. One traversal returns every directed relationship together with
both endpoint nodes; each row inserts its two nodes before the relationship
that connects them.
"""

import logging
import math
from typing import Any

from neo4j.graph import Node, Relationship

from src.agents.community_search.config import CommunitySearchSettings
from src.shared.database import Neo4jHandler
from src.shared.models.graph import Edge, Graph, Vertex

logger = logging.getLogger("community_search.ingestion")

FULL_GRAPH_QUERY = "MATCH (n)-[r]->(m) RETURN n, r, m"

# Checked in insertion order; the first label present wins.
VERTEX_LABEL_TYPES: dict[str, int] = {
    "User": 1,
    "Post": 2,
}

EDGE_TYPE_CODES: dict[str, int] = {
    "FOLLOWS": 1,
    "LIKES": 2,
}


def _is_number(value: Any) -> bool:
    """True for ints and finite floats; booleans, NaN and infinities are skipped."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def native_id(entity: Node | Relationship) -> int:
    """Integer identity of a node or relationship.

    Neo4j 4 element ids are the plain numeric id; Neo4j 5 element ids look
    like ``"4:<database-uuid>:<id>"``. Both end with the numeric id.
    """
    return int(str(entity.element_id).rsplit(":", 1)[-1])


def vertex_type(labels: Any) -> int:
    for label, code in VERTEX_LABEL_TYPES.items():
        if label in labels:
            return code
    return 0


def edge_type(rel_type: str) -> int:
    return EDGE_TYPE_CODES.get(rel_type, 0)


def numeric_attributes(properties: Any) -> list[int]:
    """Keep numeric property values, truncated to ints, in encounter order."""
    return [int(value) for _, value in properties if _is_number(value)]


class GraphLoader:
    """Builds a fresh Graph from the current content of the store."""

    def __init__(
        self,
        handler: Neo4jHandler,
        settings: CommunitySearchSettings | None = None,
    ):
        self._handler = handler
        self._settings = settings or CommunitySearchSettings()

    async def load(self, graph: Graph | None = None) -> Graph:
        """Run the full-graph traversal and populate ``graph``.

        The store session is held only for the duration of the traversal.

        Raises:
            GraphInvariantError: If a relationship is seen before its endpoints.
            neo4j.exceptions.Neo4jError / ServiceUnavailable: Store failures,
                propagated unchanged.
        """
        graph = graph if graph is not None else Graph()
        rows = 0
        async with self._handler.session() as session:
            result = await session.run(FULL_GRAPH_QUERY)
            async for record in result:
                self.process_record(record, graph)
                rows += 1

        logger.info(
            "Ingested %d rows -> %d vertices, %d edges",
            rows, len(graph.vertex_map), len(graph.edges()),
        )
        return graph

    def process_record(self, record: Any, graph: Graph) -> None:
        """Insert both endpoint nodes of one row, then its relationship."""
        self.process_node(record["n"], graph)
        self.process_node(record["m"], graph)
        self.process_relationship(record["r"], graph)

    def process_node(self, node: Node, graph: Graph) -> Vertex:
        vertex = Vertex(
            id=native_id(node),
            type=vertex_type(node.labels),
            attributes=numeric_attributes(node.items()),
        )
        return graph.add_vertex(vertex)

    def process_relationship(self, rel: Relationship, graph: Graph) -> Edge:
        weight = rel.get(self._settings.weight_property)
        edge = Edge(
            id=native_id(rel),
            type=edge_type(rel.type),
            weight=float(weight) if _is_number(weight) else self._settings.default_edge_weight,
        )
        # Endpoints come from the relationship's own node ids, not the row's nodes.
        return graph.add_edge(edge, native_id(rel.start_node), native_id(rel.end_node))
