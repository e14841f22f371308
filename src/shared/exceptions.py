"""
Custom exception hierarchy for the community search service.

All domain errors inherit from CommunitySearchError so they can be caught
uniformly at the tool or entry-point level. Neo4j driver errors and
failures raised by the analytic stages are not wrapped: they reach the
caller unchanged.
"""


class CommunitySearchError(Exception):
    """Base exception for all community search errors."""

    def __init__(self, message: str, component: str = "unknown"):
        self.component = component
        super().__init__(f"[{component}] {message}")


class NodeNotFoundError(CommunitySearchError):
    """The query node does not exist in the freshly ingested graph."""

    def __init__(self, node_id: int):
        self.node_id = node_id
        super().__init__(f"Node with ID {node_id} not found", component="search")


class GraphInvariantError(CommunitySearchError, LookupError):
    """An edge references an endpoint that is not present in the graph."""

    def __init__(self, message: str):
        super().__init__(message, component="graph")


class StageLoadError(CommunitySearchError):
    """A configured analytic stage could not be imported or instantiated."""

    def __init__(self, message: str):
        super().__init__(message, component="stages")
