from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import pytest
from opensearchpy import Connection, OpenSearch

# Make package importable when running tests from the repo root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from opensearch_type import Client, ConnectionConfig  # noqa: E402


class DummyTransport:
    """Records every request; replies from a queue (dicts or exceptions)."""

    def __init__(self):
        self.calls = []
        self.replies = []

    def reply(self, *items):
        self.replies.extend(items)
        return self

    def perform_request(self, **kwargs):
        self.calls.append(kwargs)
        if not self.replies:
            return {}
        item = self.replies.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class RecordingConnection(Connection):
    """An opensearch-py connection that keeps what would go over HTTP.

    Requests reach it after the client has serialized them, so ``requests``
    holds the real wire form: ``(method, url, params, body_text)``.
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.requests = []
        self.replies = []

    def perform_request(self, method, url, params=None, body=None, timeout=None, ignore=(), headers=None):
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        self.requests.append((method, url, dict(params or {}), body))
        if url.endswith("_bulk"):
            reply = self._bulk_reply(body)
        elif self.replies:
            reply = self.replies.pop(0)
        else:
            reply = {}
        return 200, {"content-type": "application/json"}, json.dumps(reply)

    @staticmethod
    def _bulk_reply(body):
        items = []
        for line in body.splitlines():
            entry = json.loads(line) if line else None
            if not entry or len(entry) != 1:
                continue
            (op_type, meta), = entry.items()
            if op_type in ("index", "create", "delete"):
                items.append({op_type: {"_id": meta.get("_id", "generated"), "status": 200}})
        return {"took": 1, "errors": False, "items": items}

    def lines(self, index=-1):
        """Decode the NDJSON body of a recorded request."""
        body = self.requests[index][3]
        return [json.loads(line) for line in body.splitlines() if line]


class DummyIndices:
    def __init__(self):
        self.calls = []

    def exists(self, **kwargs):
        self.calls.append(("exists", kwargs))
        return True

    def create(self, **kwargs):
        self.calls.append(("create", kwargs))
        return {"acknowledged": True, **kwargs}

    def delete(self, **kwargs):
        self.calls.append(("delete", kwargs))
        return kwargs

    def refresh(self, **kwargs):
        self.calls.append(("refresh", kwargs))
        return kwargs


class DummyConnection:
    def __init__(self):
        self.transport = DummyTransport()
        self.indices = DummyIndices()


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: tests that require a running OpenSearch/Elasticsearch cluster",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if os.getenv("OPENSEARCH_RUN_INTEGRATION") == "1":
        return

    skip_integration = pytest.mark.skip(
        reason="Set OPENSEARCH_RUN_INTEGRATION=1 to run integration tests"
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def connection() -> DummyConnection:
    return DummyConnection()


@pytest.fixture
def transport(connection: DummyConnection) -> DummyTransport:
    return connection.transport


@pytest.fixture
def client(connection: DummyConnection) -> Client:
    return Client(config=ConnectionConfig(bulk_chunk=50), connection=connection)


@pytest.fixture
def index(client: Client):
    return client.get_index("idx")


@pytest.fixture
def tweets(index):
    return index.get_type("tweet")


@pytest.fixture
def wire_client() -> Client:
    connection = OpenSearch(
        hosts=[{"host": "localhost", "port": 9200}],
        connection_class=RecordingConnection,
    )
    return Client(config=ConnectionConfig(use_ssl=False, bulk_chunk=50), connection=connection)


@pytest.fixture
def wire(wire_client: Client) -> RecordingConnection:
    return wire_client.connection.transport.get_connection()


@pytest.fixture
def wire_tweets(wire_client: Client):
    return wire_client.get_index("idx").get_type("tweet")
