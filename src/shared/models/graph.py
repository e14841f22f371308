"""
Attributed Graph Model

In-memory directed graph of typed vertices and weighted edges, built fresh
for every community search and discarded afterwards. The neighbor relation
of a vertex is derived: it is only ever updated by ``Graph.add_edge``.
"""

from dataclasses import dataclass, field
from typing import Iterable

from src.shared.exceptions import GraphInvariantError


@dataclass(eq=False)
class Vertex:
    """A node of the attributed graph, identified by its store-native id."""

    id: int
    type: int = 0
    attributes: list[int] = field(default_factory=list)
    _neighbors: set["Vertex"] = field(default_factory=set, init=False, repr=False)

    @property
    def neighbors(self) -> frozenset["Vertex"]:
        """Vertices reachable by one outgoing or incoming edge."""
        return frozenset(self._neighbors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(eq=False)
class Edge:
    """A directed, typed, weighted relationship between two vertices."""

    id: int
    type: int = 0
    weight: float = 1.0
    source: Vertex | None = None
    target: Vertex | None = None


class Graph:
    """
    Owns a vertex map and an ordered edge collection.

    Vertices are inserted or refreshed by identity; edges may only connect
    vertices that are already present. There are no removal operations.
    """

    def __init__(self) -> None:
        self._vertex_map: dict[int, Vertex] = {}
        self._edges: list[Edge] = []

    # ─── Mutation ───────────────────────────────────────────

    def add_vertex(self, vertex: Vertex) -> Vertex:
        """Insert a vertex, or refresh the stored vertex with the same id.

        Refreshing keeps the stored object so that edges and neighbor sets
        already pointing at it stay valid.
        """
        existing = self._vertex_map.get(vertex.id)
        if existing is None:
            self._vertex_map[vertex.id] = vertex
            return vertex
        if existing is not vertex:
            existing.type = vertex.type
            existing.attributes = list(vertex.attributes)
        return existing

    def add_edge(self, edge: Edge, source: Vertex | int, target: Vertex | int) -> Edge:
        """Bind ``edge`` to two vertices of this graph and link their neighbors.

        Raises:
            GraphInvariantError: If either endpoint is not in the graph.
        """
        src = self._require(source, edge)
        tgt = self._require(target, edge)
        edge.source = src
        edge.target = tgt
        self._edges.append(edge)
        if src is not tgt:
            src._neighbors.add(tgt)
            tgt._neighbors.add(src)
        return edge

    def _require(self, endpoint: Vertex | int | None, edge: Edge) -> Vertex:
        vertex_id = endpoint.id if isinstance(endpoint, Vertex) else endpoint
        vertex = self._vertex_map.get(vertex_id) if vertex_id is not None else None
        if vertex is None:
            raise GraphInvariantError(
                f"Edge {edge.id} references vertex {vertex_id} which is not in the graph"
            )
        return vertex

    # ─── Read accessors ─────────────────────────────────────

    def get_vertex_by_id(self, vertex_id: int) -> Vertex | None:
        return self._vertex_map.get(vertex_id)

    @property
    def vertex_map(self) -> dict[int, Vertex]:
        return self._vertex_map

    def vertices(self) -> list[Vertex]:
        return list(self._vertex_map.values())

    def edges(self) -> list[Edge]:
        return list(self._edges)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertex_map

    def __len__(self) -> int:
        return len(self._vertex_map)

    # ─── Derived views ──────────────────────────────────────

    def total_weight(self) -> float:
        """Sum of all edge weights in this graph."""
        return sum(edge.weight for edge in self._edges)

    def subgraph(self, vertex_ids: Iterable[int]) -> "Graph":
        """Return the restriction of this graph to ``vertex_ids``.

        The result holds copies of the selected vertices (same ids, types and
        attributes) and copies of every edge whose endpoints are both kept,
        so building it never touches this graph's neighbor sets.
        Unknown ids are ignored.
        """
        keep = {vid for vid in vertex_ids if vid in self._vertex_map}
        sub = Graph()
        for vid, vertex in self._vertex_map.items():
            if vid in keep:
                sub.add_vertex(Vertex(vertex.id, vertex.type, list(vertex.attributes)))
        for edge in self._edges:
            if edge.source.id in keep and edge.target.id in keep:
                sub.add_edge(
                    Edge(edge.id, edge.type, edge.weight),
                    edge.source.id,
                    edge.target.id,
                )
        return sub

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertex_map)}, edges={len(self._edges)})"
