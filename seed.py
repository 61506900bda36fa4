# =============================================================================
# seed.py  —  Load sample documents into a Cosmos DB container
# =============================================================================
#
# HOW TO RUN:
#   uv run python seed.py            (or the cosmos-seed script)
#
# WHAT HAPPENS:
#   1. Reads COSMOSDB_URI / COSMOSDB_KEY / COSMOS_DATABASE_ID and
#      COSMOS_CONTAINER_ID from the environment (.env supported)
#   2. Looks up the container's partition key path
#   3. Upserts five sample items, filling in the partition key field when
#      a sample does not have it
#   4. Queries the first five items back and prints them as JSON
#
# Handy for trying the MCP tools against a fresh container.
# =============================================================================

import copy
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from core.config import load_settings

PROJECT_ROOT = Path(__file__).resolve().parent

SAMPLE_ITEMS = [
    {
        "id": "item-001",
        "type": "document",
        "status": "active",
        "category": "test",
        "priority": "high",
        "value": 100,
        "created": "2025-08-15T00:00:00Z",
        "tags": ["sample", "document", "test"],
    },
    {
        "id": "item-002",
        "type": "record",
        "status": "pending",
        "category": "production",
        "priority": "medium",
        "value": 250,
        "created": "2025-08-15T01:00:00Z",
        "tags": ["record", "processing", "queue"],
    },
    {
        "id": "item-003",
        "type": "configuration",
        "status": "active",
        "category": "system",
        "priority": "low",
        "value": 75,
        "created": "2025-08-15T02:00:00Z",
        "tags": ["config", "settings", "system"],
    },
    {
        "id": "item-004",
        "type": "log",
        "status": "archived",
        "category": "audit",
        "priority": "high",
        "value": 150,
        "created": "2025-08-15T03:00:00Z",
        "tags": ["log", "audit", "security"],
    },
    {
        "id": "item-005",
        "type": "report",
        "status": "active",
        "category": "analytics",
        "priority": "medium",
        "value": 320,
        "created": "2025-08-15T04:00:00Z",
        "tags": ["report", "analytics", "business"],
    },
]

VERIFY_QUERY = (
    "SELECT TOP 5 c.id, c['type'] AS type, c['status'] AS status, "
    "c['category'] AS category, c['priority'] AS priority, c['value'] AS val, "
    "c['created'] AS created, c['tags'] AS tags FROM c ORDER BY c.id"
)


def prepare_items(items: list[dict], partition_key_path: str | None) -> list[dict]:
    """Copy ``items``, adding the partition key field where it is missing.

    Only top-level paths are filled in ("/tenant", not "/a/b").  The value
    is the item id for "/id" and "seed" for anything else.
    """
    prepared = []
    for raw in items:
        item = copy.deepcopy(raw)
        if partition_key_path:
            field = partition_key_path.lstrip("/")
            if field and "/" not in field and field not in item:
                item[field] = item["id"] if field == "id" else "seed"
        prepared.append(item)
    return prepared


def seed(store, container: str) -> dict:
    """Upsert the samples into ``container`` and read them back."""
    items = prepare_items(SAMPLE_ITEMS, store.partition_key_path(container))

    seeded = []
    for item in items:
        stored = store.upsert(container, item)
        seeded.append((stored or {}).get("id", item["id"]))

    return {"seeded": seeded, "items": store.query_all(container, VERIFY_QUERY)}


def main() -> None:
    load_dotenv()
    load_dotenv(PROJECT_ROOT / ".env")

    try:
        settings = load_settings()
        if not settings.default_container:
            raise RuntimeError("Missing required env var: COSMOS_CONTAINER_ID")

        from adapters.cosmos_store import CosmosStore

        with CosmosStore.from_settings(settings) as store:
            report = seed(store, settings.default_container)
    except Exception as exc:  # noqa: BLE001 - report any failure and exit non-zero
        print(f"Seed failed: {getattr(exc, 'message', None) or exc}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()
