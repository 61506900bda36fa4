# =============================================================================
# core/store.py  —  The document store, as seen by the dispatcher
# =============================================================================
#
# The dispatcher never imports a database SDK.  It talks to anything that
# provides these four calls.  adapters/cosmos_store.py is the real one; the
# tests use an in-memory fake.
#
# Failure contract for implementations:
#   - point_read returns None when the document does not exist
#   - every other store-side failure raises core.errors.StoreError
# =============================================================================

from typing import Any, Protocol, runtime_checkable

from core.models import Document


@runtime_checkable
class DocumentStore(Protocol):
    """Backend-agnostic point read / upsert / replace / query interface."""

    def point_read(self, container: str, item_id: str, partition_key: str) -> Document | None:
        """Read one document by id + partition key, or None if absent."""
        ...

    def upsert(self, container: str, document: Document) -> Document:
        """Insert or replace a document; return the stored version."""
        ...

    def replace(
        self,
        container: str,
        item_id: str,
        partition_key: str,
        document: Document,
    ) -> Document:
        """Fully replace an existing document; return the stored version.

        ``item_id`` and ``partition_key`` name the document being replaced.
        Stores that route writes by the partition key field inside
        ``document`` (Cosmos DB does) may ignore ``partition_key``.
        """
        ...

    def query_all(
        self,
        container: str,
        query: str,
        parameters: list[dict[str, Any]] | None = None,
    ) -> list[Document]:
        """Run a query and return every result row, in store order."""
        ...
