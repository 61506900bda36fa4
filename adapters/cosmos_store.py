# =============================================================================
# adapters/cosmos_store.py  —  Azure Cosmos DB implementation of DocumentStore
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Wraps the synchronous azure-cosmos SDK behind the four calls the
#   dispatcher needs (core/store.py), and translates SDK exceptions:
#
#     CosmosResourceNotFoundError on point read  ->  None
#     any other AzureError                       ->  core.errors.StoreError
#
# LIFETIME:
#   One CosmosStore per process.  It owns the CosmosClient (and, for
#   keyless auth, the DefaultAzureCredential) and releases both in close(),
#   which also runs when used as a context manager:
#
#       with CosmosStore.from_settings(settings) as store:
#           ...
#
#   The client does its own connection pooling and retries; nothing here
#   retries or sets timeouts.
# =============================================================================

import contextlib
import logging
from typing import Any, Iterator

from azure.core.exceptions import AzureError
from azure.cosmos import CosmosClient
from azure.cosmos.exceptions import CosmosResourceNotFoundError

from core.config import CosmosSettings
from core.errors import StoreError
from core.models import Document

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def _store_call(operation: str) -> Iterator[None]:
    """Translate SDK failures raised inside the block into StoreError."""
    try:
        yield
    except AzureError as exc:
        status_code = getattr(exc, "status_code", None)
        # Cosmos errors prefix .message with the status; keep the bare text.
        message = getattr(exc, "http_error_message", None) or getattr(exc, "message", None) or str(exc)
        logger.warning(
            "Cosmos DB error in %s: statusCode=%s, message=%s", operation, status_code, message
        )
        raise StoreError(status_code, message) from exc


class CosmosStore:
    """DocumentStore backed by one Cosmos DB database."""

    def __init__(self, client: CosmosClient, database_id: str, credential: Any = None):
        self._client = client
        self._database = client.get_database_client(database_id)
        self._resources = contextlib.ExitStack()
        self._resources.enter_context(client)
        if credential is not None and hasattr(credential, "close"):
            self._resources.callback(credential.close)
        self.database_id = database_id

    @classmethod
    def from_settings(cls, settings: CosmosSettings) -> "CosmosStore":
        """Create the client for ``settings``: key auth if a key is set,
        DefaultAzureCredential otherwise."""
        if settings.uses_key_auth:
            logger.info("Using key-based Cosmos DB authentication.")
            credential = settings.key
            owned_credential = None
        else:
            from azure.identity import DefaultAzureCredential

            logger.info("Using DefaultAzureCredential for Cosmos DB authentication.")
            credential = DefaultAzureCredential()
            owned_credential = credential

        client = CosmosClient(
            settings.endpoint,
            credential=credential,
            consistency_level="Eventual",
        )
        return cls(client, settings.database_id, credential=owned_credential)

    def _container(self, name: str):
        return self._database.get_container_client(name)

    # -------------------------------------------------------------------------
    # DocumentStore
    # -------------------------------------------------------------------------

    def point_read(self, container: str, item_id: str, partition_key: str) -> Document | None:
        with _store_call("point_read"):
            try:
                return self._container(container).read_item(item=item_id, partition_key=partition_key)
            except CosmosResourceNotFoundError:
                return None

    def upsert(self, container: str, document: Document) -> Document:
        with _store_call("upsert"):
            return self._container(container).upsert_item(body=document)

    def replace(self, container: str, item_id: str, partition_key: str, document: Document) -> Document:
        # The SDK routes a replace by the partition key found in the body.
        with _store_call("replace"):
            return self._container(container).replace_item(item=item_id, body=document)

    def query_all(
        self,
        container: str,
        query: str,
        parameters: list[dict[str, Any]] | None = None,
    ) -> list[Document]:
        with _store_call("query_all"):
            pages = self._container(container).query_items(
                query=query,
                parameters=parameters,
                enable_cross_partition_query=True,
            )
            return list(pages)

    # -------------------------------------------------------------------------
    # Container metadata
    # -------------------------------------------------------------------------

    def partition_key_path(self, container: str) -> str | None:
        """First partition key path of ``container`` (e.g. "/id"), if any."""
        with _store_call("read_container"):
            properties = self._container(container).read()
        paths = (properties.get("partitionKey") or {}).get("paths") or []
        return paths[0] if paths else None

    # -------------------------------------------------------------------------
    # Lifetime
    # -------------------------------------------------------------------------

    def close(self) -> None:
        logger.info("Shutting down Cosmos client...")
        self._resources.close()

    def __enter__(self) -> "CosmosStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
