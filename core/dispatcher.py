# =============================================================================
# core/dispatcher.py  —  Tool Dispatcher (the four data-access operations)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Implements get_item, put_item, update_item and query_container on top of
#   any DocumentStore, and routes a tool call by name.
#
# HOW A CALL FLOWS:
#
#   dispatch("update_item", args)
#       │
#       ▼
#   run_tool(...)                      ← failure boundary (core/results.py)
#       │
#       ├─ validate every argument     ← core/validation.py
#       ├─ store.point_read(...)       ← None means "Item not found"
#       ├─ merge(current, updates)     ← core/merge.py
#       ├─ store.replace(...)
#       ▼
#   ToolResult(text=<json>, is_error=False)
#
#   Any exception on the way (bad argument, missing document, store fault,
#   unencodable payload) ends up as ToolResult(is_error=True).
#
# PARTITION KEYS:
#   get_item and update_item accept an optional partitionKey.  When omitted,
#   the item id is used, which matches containers partitioned on /id.
# =============================================================================

import logging
import uuid
from typing import Any, Callable, Mapping

from core.errors import NotFound, ValidationError
from core.merge import merge
from core.models import Document, ToolResult
from core.results import run_tool
from core.store import DocumentStore
from core.validation import (
    optional_parameters,
    optional_string,
    require_object,
    require_string,
)

logger = logging.getLogger(__name__)


class ToolDispatcher:
    """Validates, executes and normalizes tool calls against one store.

    The store handle is injected and shared by every call; the dispatcher
    itself keeps no per-call state.
    """

    def __init__(self, store: DocumentStore):
        self.store = store
        self._operations: dict[str, Callable[[Mapping[str, Any]], ToolResult]] = {
            "get_item": self.get_item,
            "put_item": self.put_item,
            "update_item": self.update_item,
            "query_container": self.query_container,
        }

    @property
    def tool_names(self) -> list[str]:
        return list(self._operations)

    def dispatch(self, name: str, args: Mapping[str, Any] | None = None) -> ToolResult:
        """Route a tool call by name.  Unknown names are an error result."""
        operation = self._operations.get(name)
        if operation is None:
            logger.warning("Unknown tool requested: %s", name)
            return ToolResult.error(f"Error: Unknown tool: {name}")
        if args is None:
            args = {}
        elif not isinstance(args, Mapping):
            return ToolResult.error("Error: arguments must be an object")
        return operation(args)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def get_item(self, args: Mapping[str, Any]) -> ToolResult:
        def call() -> Document:
            container = require_string(args, "containerName")
            item_id = require_string(args, "id")
            partition_key = optional_string(args, "partitionKey", default=item_id)

            document = self.store.point_read(container, item_id, partition_key)
            if document is None:
                logger.warning("Item not found: container=%s, id=%s", container, item_id)
                raise NotFound()
            return document

        return run_tool("get_item", call)

    def put_item(self, args: Mapping[str, Any]) -> ToolResult:
        def call() -> Document:
            container = require_string(args, "containerName")
            item = require_object(args, "item")

            item_id = item.get("id")
            if item_id is None:
                item["id"] = str(uuid.uuid4())
            elif not isinstance(item_id, str) or not item_id.strip():
                raise ValidationError("item.id", "item.id must be a non-blank string")

            return self.store.upsert(container, item)

        return run_tool("put_item", call)

    def update_item(self, args: Mapping[str, Any]) -> ToolResult:
        def call() -> Document:
            container = require_string(args, "containerName")
            item_id = require_string(args, "id")
            updates = require_object(args, "updates")
            partition_key = optional_string(args, "partitionKey", default=item_id)

            current = self.store.point_read(container, item_id, partition_key)
            if current is None:
                logger.warning("Item not found for update: container=%s, id=%s", container, item_id)
                raise NotFound()

            # Unconditional replace: a concurrent writer between the read and
            # this write is overwritten (last write wins).
            updated = merge(current, updates)
            self.store.replace(container, item_id, partition_key, updated)
            return updated

        return run_tool("update_item", call)

    def query_container(self, args: Mapping[str, Any]) -> ToolResult:
        def call() -> list[Document]:
            container = require_string(args, "containerName")
            query = require_string(args, "query")
            parameters = optional_parameters(args)

            rows = self.store.query_all(
                container,
                query,
                [p.to_store() for p in parameters] or None,
            )
            return list(rows)

        return run_tool(
            "query_container",
            call,
            serialization_message="Failed to serialize query results",
        )
