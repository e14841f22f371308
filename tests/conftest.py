"""
Shared fixtures for the community search tests.

The Neo4j driver is never contacted: nodes, relationships, sessions and
results are replaced by small fakes exposing the same attributes the
ingestion code reads (``element_id``, ``labels``, ``items()``, ``type``,
``start_node``, ``end_node``, ``get()``).
"""

from contextlib import asynccontextmanager
from types import SimpleNamespace
from typing import Any

import pytest


class FakeNode:
    def __init__(self, node_id: int, labels=(), element_prefix: str = "4:db:", **props):
        self.element_id = f"{element_prefix}{node_id}"
        self.labels = frozenset(labels)
        self._props = dict(props)

    def items(self):
        return self._props.items()


class FakeRelationship:
    def __init__(self, rel_id: int, rel_type: str, start: FakeNode, end: FakeNode, **props):
        self.element_id = f"5:db:{rel_id}"
        self.type = rel_type
        self.start_node = start
        self.end_node = end
        self._props = dict(props)

    def get(self, key: str, default: Any = None) -> Any:
        return self._props.get(key, default)


class FakeResult:
    def __init__(self, records: list[dict], fail_after: int | None = None):
        self._records = records
        self._fail_after = fail_after

    async def __aiter__(self):
        for i, record in enumerate(self._records):
            if self._fail_after is not None and i >= self._fail_after:
                raise ConnectionError("connection lost mid-stream")
            yield record


class FakeSession:
    def __init__(self, result: FakeResult):
        self._result = result
        self.queries: list[str] = []

    async def run(self, query: str, params: dict | None = None) -> FakeResult:
        self.queries.append(query)
        return self._result


class FakeHandler:
    """Stands in for Neo4jHandler; counts opened and closed sessions."""

    def __init__(self, records: list[dict], fail_after: int | None = None):
        self.session_obj = FakeSession(FakeResult(records, fail_after))
        self.opened = 0
        self.closed = 0

    @asynccontextmanager
    async def session(self):
        self.opened += 1
        try:
            yield self.session_obj
        finally:
            self.closed += 1

    async def verify(self) -> bool:
        return True

    async def close(self) -> None:
        pass


def row(n: FakeNode, r: FakeRelationship, m: FakeNode) -> dict:
    return {"n": n, "r": r, "m": m}


@pytest.fixture
def scenario_records() -> list[dict]:
    """Users 1 and 2 (1 follows 2) plus post 3, liked by user 1."""
    user1 = FakeNode(1, ["User"], a=5, b=7)
    user2 = FakeNode(2, ["User"], a=5, b=8)
    post3 = FakeNode(3, ["Post"], title="hello")
    return [
        row(user1, FakeRelationship(10, "FOLLOWS", user1, user2, weight=1.0), user2),
        row(user1, FakeRelationship(11, "LIKES", user1, post3), post3),
    ]


@pytest.fixture
def make_handler():
    def _make(records: list[dict], fail_after: int | None = None) -> FakeHandler:
        return FakeHandler(records, fail_after)
    return _make


@pytest.fixture
def fakes():
    """Access to the fake driver types from inside test modules."""
    return SimpleNamespace(Node=FakeNode, Relationship=FakeRelationship, row=row)
