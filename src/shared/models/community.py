from pydantic import BaseModel, ConfigDict, Field

from src.shared.models.graph import Edge, Graph, Vertex


class NodeDescriptor(BaseModel):
    """Presentation record for one community member."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(description="Store-native node identifier")
    type: int = Field(description="Vertex type code (0 = unknown)")
    attributes: list[int] = Field(
        default_factory=list, description="Numeric node properties"
    )
    is_query_node: bool = Field(
        alias="isQueryNode", description="True for the vertex the search started from"
    )


class EdgeDescriptor(BaseModel):
    """Presentation record for one community edge."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(description="Store-native relationship identifier")
    source: int = Field(description="Identifier of the source vertex")
    target: int = Field(description="Identifier of the target vertex")
    type: int = Field(description="Edge type code (0 = untagged)")
    weight: float = Field(description="Edge weight")


class CommunityResult(BaseModel):
    """Scored, presentation-ready answer to one community search."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    community_size: int = Field(alias="communitySize")
    response_time_ms: int = Field(alias="responseTimeMs")
    query_node_id: int = Field(alias="queryNodeId")
    structural_tightness: float = Field(
        alias="structuralTightness",
        description="Total internal edge weight of the community (unnormalized)",
    )
    jaccard_similarity: float | None = Field(
        None,
        alias="jaccardSimilarity",
        description="Mean Jaccard similarity to the query node's attributes",
    )
    cosine_similarity: float | None = Field(
        None,
        alias="cosineSimilarity",
        description="Mean binary cosine similarity to the query node's attributes",
    )
    centrality: float | None = Field(
        None, description="Degree centrality of the query node inside the community"
    )
    nodes: list[NodeDescriptor] = Field(default_factory=list)
    edges: list[EdgeDescriptor] = Field(default_factory=list)

    def to_payload(self) -> dict:
        """Serialise with the camelCase field names of the response payload."""
        return self.model_dump(by_alias=True)

    def to_graph(self) -> Graph:
        """Rebuild a Graph carrying the same vertex and edge identities."""
        graph = Graph()
        for node in self.nodes:
            graph.add_vertex(Vertex(node.id, node.type, list(node.attributes)))
        for edge in self.edges:
            graph.add_edge(Edge(edge.id, edge.type, edge.weight), edge.source, edge.target)
        return graph
