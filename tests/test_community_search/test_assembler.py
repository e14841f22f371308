"""
Unit tests for ResultAssembler and the CommunityResult record.
"""

import pydantic
import pytest

from src.agents.community_search.assembler import ResultAssembler
from src.shared.models.community import CommunityResult
from src.shared.models.graph import Edge, Graph, Vertex


def build_graph(vertices, edges) -> Graph:
    graph = Graph()
    for vid, vtype, attrs in vertices:
        graph.add_vertex(Vertex(vid, vtype, list(attrs)))
    for eid, src, tgt, etype, weight in edges:
        graph.add_edge(Edge(eid, etype, weight), src, tgt)
    return graph


@pytest.fixture
def full_graph() -> Graph:
    return build_graph(
        [(1, 1, [5, 7]), (2, 1, [5, 8]), (3, 2, [])],
        [(10, 1, 2, 1, 1.0)],
    )


@pytest.fixture
def assembler() -> ResultAssembler:
    return ResultAssembler()


class TestScoring:

    def test_two_member_community(self, full_graph, assembler):
        community = full_graph.subgraph([1, 2])
        result = assembler.assemble(community, full_graph.get_vertex_by_id(1), 12)

        assert result.community_size == 2
        assert result.response_time_ms == 12
        assert result.query_node_id == 1
        assert result.structural_tightness == 1.0
        assert result.jaccard_similarity == pytest.approx((1.0 + 1 / 3) / 2)
        assert result.cosine_similarity == pytest.approx((1.0 + 0.5) / 2)
        assert result.centrality == 1.0

    def test_members_without_attributes_are_skipped(self, assembler):
        graph = build_graph(
            [(1, 1, [5, 7]), (2, 1, [5, 8]), (3, 2, [])],
            [(10, 1, 2, 1, 1.0), (11, 1, 3, 2, 2.0)],
        )
        result = assembler.assemble(graph, graph.get_vertex_by_id(1), 0)

        assert result.community_size == 3
        assert result.structural_tightness == 3.0
        assert result.jaccard_similarity == pytest.approx(2 / 3)
        assert result.centrality == 1.0

    def test_no_query_attributes_omits_similarity(self, assembler):
        graph = build_graph([(1, 1, []), (2, 1, [5])], [(10, 1, 2, 1, 1.0)])
        result = assembler.assemble(graph, graph.get_vertex_by_id(1), 0)

        assert result.jaccard_similarity is None
        assert result.cosine_similarity is None
        assert len(result.nodes) == 2
        assert len(result.edges) == 1

    def test_singleton_omits_centrality(self, full_graph, assembler):
        community = full_graph.subgraph([1])
        result = assembler.assemble(community, full_graph.get_vertex_by_id(1), 0)

        assert result.community_size == 1
        assert result.centrality is None
        assert result.structural_tightness == 0.0
        assert result.jaccard_similarity == 1.0

    def test_centrality_counts_only_community_neighbors(self, assembler):
        graph = build_graph(
            [(1, 1, []), (2, 1, []), (3, 1, []), (4, 1, [])],
            [(10, 1, 2, 1, 1.0), (11, 3, 4, 1, 1.0)],
        )
        result = assembler.assemble(graph, graph.get_vertex_by_id(1), 0)
        assert result.centrality == pytest.approx(1 / 3)

    def test_query_vertex_missing_from_community(self, full_graph, assembler):
        community = full_graph.subgraph([2, 3])
        result = assembler.assemble(community, full_graph.get_vertex_by_id(1), 0)

        assert result.centrality is None
        assert not any(n.is_query_node for n in result.nodes)


class TestDescriptors:

    def test_node_and_edge_descriptors(self, full_graph, assembler):
        result = assembler.assemble(full_graph.subgraph([1, 2]), full_graph.get_vertex_by_id(1), 0)

        nodes = {n.id: n for n in result.nodes}
        assert nodes[1].is_query_node is True
        assert nodes[2].is_query_node is False
        assert nodes[2].attributes == [5, 8]
        assert nodes[1].type == 1

        edge = result.edges[0]
        assert (edge.id, edge.source, edge.target, edge.type, edge.weight) == (10, 1, 2, 1, 1.0)

    def test_payload_uses_camel_case(self, full_graph, assembler):
        payload = assembler.assemble(
            full_graph.subgraph([1, 2]), full_graph.get_vertex_by_id(1), 3,
        ).to_payload()

        assert set(payload) == {
            "communitySize", "responseTimeMs", "queryNodeId", "structuralTightness",
            "jaccardSimilarity", "cosineSimilarity", "centrality", "nodes", "edges",
        }
        assert set(payload["nodes"][0]) == {"id", "type", "attributes", "isQueryNode"}
        assert set(payload["edges"][0]) == {"id", "source", "target", "type", "weight"}

    def test_result_is_immutable(self, full_graph, assembler):
        result = assembler.assemble(full_graph, full_graph.get_vertex_by_id(1), 0)
        with pytest.raises(pydantic.ValidationError):
            result.community_size = 99

    def test_round_trip_through_payload(self, assembler):
        graph = build_graph(
            [(1, 1, [5, 7]), (2, 1, [8, 5]), (3, 2, [])],
            [(10, 1, 2, 1, 1.0), (11, 3, 1, 2, 0.5), (12, 2, 3, 0, 1.0)],
        )
        result = assembler.assemble(graph, graph.get_vertex_by_id(1), 0)

        rebuilt = CommunityResult.model_validate(result.to_payload()).to_graph()

        assert set(rebuilt.vertex_map) == set(graph.vertex_map)
        assert {e.id for e in rebuilt.edges()} == {e.id for e in graph.edges()}
        assert {
            (e.id, e.source.id, e.target.id) for e in rebuilt.edges()
        } == {(e.id, e.source.id, e.target.id) for e in graph.edges()}
