"""
Result Assembler

Scores a community subgraph against the query vertex and packages it as a
``CommunityResult``.

Metrics:
  - structural tightness: total internal edge weight, not normalised
    against the full graph
  - Jaccard / cosine similarity: mean over every member with attributes,
    the query vertex included (it contributes 1.0)
  - centrality: degree of the query vertex inside the community over
    (size - 1)
"""

import logging

from src.agents.community_search.similarity import cosine, degree_centrality, jaccard
from src.shared.models.community import CommunityResult, EdgeDescriptor, NodeDescriptor
from src.shared.models.graph import Graph, Vertex

logger = logging.getLogger("community_search.assembler")


class ResultAssembler:
    """Builds the response record for one search."""

    def assemble(
        self,
        community: Graph,
        query_vertex: Vertex,
        response_time_ms: int,
    ) -> CommunityResult:
        members = community.vertices()
        size = len(members)
        jaccard_score, cosine_score = self._similarities(members, query_vertex)

        return CommunityResult(
            community_size=size,
            response_time_ms=response_time_ms,
            query_node_id=query_vertex.id,
            structural_tightness=community.total_weight(),
            jaccard_similarity=jaccard_score,
            cosine_similarity=cosine_score,
            centrality=self._centrality(community, query_vertex, size),
            nodes=self.node_descriptors(community, query_vertex.id),
            edges=self.edge_descriptors(community),
        )

    @staticmethod
    def _similarities(
        members: list[Vertex], query_vertex: Vertex,
    ) -> tuple[float | None, float | None]:
        query_attrs = query_vertex.attributes
        if not query_attrs:
            return None, None

        scored = [v for v in members if v.attributes]
        if not scored:
            return None, None

        jaccard_sum = sum(jaccard(query_attrs, v.attributes) for v in scored)
        cosine_sum = sum(cosine(query_attrs, v.attributes) for v in scored)
        return jaccard_sum / len(scored), cosine_sum / len(scored)

    @staticmethod
    def _centrality(community: Graph, query_vertex: Vertex, size: int) -> float | None:
        member = community.get_vertex_by_id(query_vertex.id)
        if member is None:
            logger.warning(
                "Query vertex %s is not part of the returned community", query_vertex.id
            )
            return None
        degree = sum(1 for n in member.neighbors if n.id in community)
        return degree_centrality(degree, size)

    @staticmethod
    def node_descriptors(community: Graph, query_node_id: int) -> list[NodeDescriptor]:
        return [
            NodeDescriptor(
                id=v.id,
                type=v.type,
                attributes=list(v.attributes),
                is_query_node=v.id == query_node_id,
            )
            for v in community.vertices()
        ]

    @staticmethod
    def edge_descriptors(community: Graph) -> list[EdgeDescriptor]:
        return [
            EdgeDescriptor(
                id=e.id,
                source=e.source.id,
                target=e.target.id,
                type=e.type,
                weight=e.weight,
            )
            for e in community.edges()
        ]
