# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server for Azure Cosmos DB
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the four data-access tools over MCP (stdio transport):
#
#     get_item          point read by id (+ optional partition key)
#     put_item          insert-or-replace, generating an id when missing
#     update_item       read, deep-merge the updates, full replace
#     query_container   run a SQL query and return every row
#
#   Each tool is a thin wrapper: it logs the request, hands the arguments to
#   core.dispatcher.ToolDispatcher, and converts the ToolResult into what
#   FastMCP sends back.  Error results are raised as ToolError, which the
#   protocol reports as {"isError": true, "content": [{"text": ...}]}.
#
# RUNNING THIS SERVER:
#     python -m tools.mcp_server        (or the cosmos-mcp-server script)
#
#   Startup order:
#     1. load .env into the environment
#     2. resolve settings         (missing endpoint/database -> exit 1)
#     3. open the Cosmos client   (one per process)
#     4. serve until stdin closes or the process is signalled
#     5. close the client         (always, via the with-block)
# =============================================================================

import json
import logging
import signal
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import BaseModel, Field

from core.config import load_settings
from core.dispatcher import ToolDispatcher
from core.errors import ConfigError
from core.models import ToolResult

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SERVER_NAME = "cosmosdb-mcp-server"

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: STDOUT is the MCP transport and must carry only
# protocol messages.
#
# Colors:
#   - CYAN for incoming requests (tool name + parameters)
#   - GREEN for response payloads
#   - YELLOW for status messages (errors included)
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

_MAX_LOGGED_PAYLOAD = 2000


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, payload: str) -> str:
    """Log the response payload in GREEN, then return it."""
    shown = payload if len(payload) <= _MAX_LOGGED_PAYLOAD else payload[:_MAX_LOGGED_PAYLOAD] + "…"
    logging.info(f"{_GREEN}  ← {tool_name} response: {shown}{_RESET}")
    return payload


def _respond(tool_name: str, result: ToolResult) -> str:
    if result.is_error:
        _log_status(f"{tool_name} failed: {result.text}")
        raise ToolError(result.text)
    return _log_response(tool_name, result.text)


# -----------------------------------------------------------------------------
# QueryParameterArg — one entry of query_container's "parameters" array
# -----------------------------------------------------------------------------
# Declared as a model so the advertised input schema spells out name/value.
# -----------------------------------------------------------------------------
class QueryParameterArg(BaseModel):
    name: str = Field(description='Parameter name as used in the query, e.g. "@status"')
    value: Any = Field(description="Parameter value")


# =============================================================================
# Server factory
# =============================================================================
# The dispatcher (and through it the store client) is passed in, so the
# same server can run against Cosmos DB or against a test double.
#
# Tool parameter names are camelCase because they ARE the wire schema the
# agent sees.
# =============================================================================
def create_server(dispatcher: ToolDispatcher) -> FastMCP:
    """Build the FastMCP server with the four Cosmos DB tools registered."""
    mcp = FastMCP(SERVER_NAME)

    @mcp.tool()
    def get_item(containerName: str, id: str, partitionKey: str | None = None) -> str:  # noqa: N803
        """Retrieve an item from an Azure Cosmos DB container by its ID.

        Args:
            containerName: Name of the container.
            id: ID of the item to retrieve.
            partitionKey: Partition key value of the item.  Defaults to the id,
                which is right for containers partitioned on /id.

        Returns:
            The stored item as JSON, or the error "Error: Item not found".
        """
        _log_request("get_item", containerName=containerName, id=id, partitionKey=partitionKey)
        result = dispatcher.dispatch(
            "get_item",
            {"containerName": containerName, "id": id, "partitionKey": partitionKey},
        )
        return _respond("get_item", result)

    @mcp.tool()
    def put_item(containerName: str, item: dict) -> str:  # noqa: N803
        """Insert or replace an item in an Azure Cosmos DB container.

        If the item has no "id" field, a random one is generated.

        Args:
            containerName: Name of the container.
            item: Item to insert into the container.

        Returns:
            The stored item as JSON (including its id).
        """
        _log_request("put_item", containerName=containerName, item=item)
        result = dispatcher.dispatch("put_item", {"containerName": containerName, "item": item})
        return _respond("put_item", result)

    @mcp.tool()
    def update_item(
        containerName: str,  # noqa: N803
        id: str,
        updates: dict,
        partitionKey: str | None = None,  # noqa: N803
    ) -> str:
        """Update specific attributes of an existing item.

        Nested objects in `updates` are merged into the stored item field by
        field; every other value (strings, numbers, arrays, null) replaces the
        stored value.  Fields cannot be removed.

        Args:
            containerName: Name of the container.
            id: ID of the item to update.
            updates: The updated attributes of the item.
            partitionKey: Partition key value of the item.  Defaults to the id.

        Returns:
            The full updated item as JSON, or "Error: Item not found".
        """
        _log_request(
            "update_item", containerName=containerName, id=id, updates=updates, partitionKey=partitionKey
        )
        result = dispatcher.dispatch(
            "update_item",
            {"containerName": containerName, "id": id, "updates": updates, "partitionKey": partitionKey},
        )
        return _respond("update_item", result)

    @mcp.tool()
    def query_container(
        containerName: str,  # noqa: N803
        query: str,
        parameters: list[QueryParameterArg] | None = None,
    ) -> str:
        """Query an Azure Cosmos DB container using SQL-like syntax.

        Example:
            query="SELECT * FROM c WHERE c.status = @status"
            parameters=[{"name": "@status", "value": "active"}]

        Args:
            containerName: Name of the container.
            query: SQL query string.
            parameters: Query parameters, each {"name": "@x", "value": ...}.

        Returns:
            A JSON array with every matching row ("[]" when nothing matches).
        """
        _log_request("query_container", containerName=containerName, query=query, parameters=parameters)
        result = dispatcher.dispatch(
            "query_container",
            {
                "containerName": containerName,
                "query": query,
                "parameters": None if parameters is None else [p.model_dump() for p in parameters],
            },
        )
        return _respond("query_container", result)

    return mcp


# =============================================================================
# Entry point
# =============================================================================
def _load_env() -> None:
    """Load .env from the working directory, then from the project root."""
    load_dotenv()
    load_dotenv(PROJECT_ROOT / ".env")


def _exit_on_sigterm(signum, _frame):
    raise SystemExit(0)


def _apply_log_level(name: str) -> None:
    """Set the root log level by name; unknown names fall back to INFO."""
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        logging.warning("Unknown LOG_LEVEL %r, using INFO", name)
        level = logging.INFO
    logging.getLogger().setLevel(level)


def main() -> None:
    _load_env()

    try:
        settings = load_settings()
    except ConfigError as exc:
        logging.error("%s", exc)
        print(
            f"{exc}.\nSet them in the environment or in a .env file:\n"
            "COSMOSDB_URI=\nCOSMOSDB_KEY= (optional, DefaultAzureCredential is used when empty)\n"
            "COSMOS_DATABASE_ID=",
            file=sys.stderr,
        )
        sys.exit(1)

    _apply_log_level(settings.log_level)

    # Imported here so the module can be imported without azure-cosmos.
    from adapters.cosmos_store import CosmosStore

    signal.signal(signal.SIGTERM, _exit_on_sigterm)

    logging.info("Connecting to Cosmos DB database %s", settings.database_id)
    with CosmosStore.from_settings(settings) as store:
        dispatcher = ToolDispatcher(store)
        server = create_server(dispatcher)
        logging.info("Azure Cosmos DB MCP server running on stdio")
        logging.info("Tools: %s", json.dumps(dispatcher.tool_names))
        server.run()


if __name__ == "__main__":
    main()
