"""Shared fixtures: an in-memory DocumentStore and a dispatcher over it."""
import copy

import pytest

from core.dispatcher import ToolDispatcher
from core.errors import StoreError


class FakeStore:
    """In-memory DocumentStore.

    Documents are keyed by (container, partition key value, id).  The
    partition key path is "/id" unless a container is registered with
    another one.  Queries: "SELECT * FROM c" returns every document in the
    container; any other query text returns ``canned_queries[text]`` or [].
    """

    def __init__(self):
        self.documents: dict[tuple[str, str, str], dict] = {}
        self.partition_paths: dict[str, str] = {}
        self.canned_queries: dict[str, list] = {}
        self.calls: list[tuple] = []
        self.fail_with: StoreError | None = None
        self.fail_on: set[str] = set()

    def _maybe_fail(self, operation):
        self.calls.append((operation,))
        if self.fail_with is not None and (not self.fail_on or operation in self.fail_on):
            raise self.fail_with

    def _pk_of(self, container, document):
        field = self.partition_paths.get(container, "/id").lstrip("/")
        return str(document.get(field))

    def point_read(self, container, item_id, partition_key):
        self._maybe_fail("point_read")
        stored = self.documents.get((container, partition_key, item_id))
        return copy.deepcopy(stored) if stored is not None else None

    def upsert(self, container, document):
        self._maybe_fail("upsert")
        stored = copy.deepcopy(document)
        stored["_etag"] = f"etag-{len(self.calls)}"
        self.documents[(container, self._pk_of(container, stored), stored["id"])] = stored
        return copy.deepcopy(stored)

    def replace(self, container, item_id, partition_key, document):
        self._maybe_fail("replace")
        key = (container, partition_key, item_id)
        if key not in self.documents:
            raise StoreError(404, "Entity with the specified id does not exist in the system.")
        self.documents[key] = copy.deepcopy(document)
        return copy.deepcopy(document)

    def query_all(self, container, query, parameters=None):
        self._maybe_fail("query_all")
        self.last_query = (container, query, parameters)
        if query.strip().upper() == "SELECT * FROM C":
            rows = [doc for (c, _, _), doc in self.documents.items() if c == container]
            return copy.deepcopy(rows)
        return copy.deepcopy(self.canned_queries.get(query, []))

    def writes(self):
        return [c for c in self.calls if c[0] in ("upsert", "replace")]


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def dispatcher(store):
    return ToolDispatcher(store)
