"""Tests for the seed command's sample preparation and flow."""
from seed import SAMPLE_ITEMS, VERIFY_QUERY, prepare_items, seed


def test_prepare_items_for_id_partitioned_container():
    items = prepare_items(SAMPLE_ITEMS, "/id")
    assert items == SAMPLE_ITEMS
    assert items[0] is not SAMPLE_ITEMS[0]


def test_prepare_items_fills_missing_partition_field():
    items = prepare_items(SAMPLE_ITEMS, "/tenant")
    assert {item["tenant"] for item in items} == {"seed"}
    assert "tenant" not in SAMPLE_ITEMS[0]


def test_prepare_items_keeps_existing_partition_field():
    items = prepare_items(SAMPLE_ITEMS, "/category")
    assert [item["category"] for item in items] == [s["category"] for s in SAMPLE_ITEMS]


def test_prepare_items_without_partition_path():
    assert prepare_items(SAMPLE_ITEMS, None) == SAMPLE_ITEMS


def test_seed_upserts_and_queries_back(store):
    store.partition_paths["items"] = "/tenant"
    store.partition_key_path = lambda container: store.partition_paths.get(container)
    store.canned_queries[VERIFY_QUERY] = [{"id": "item-001"}]

    report = seed(store, "items")

    assert report["seeded"] == [item["id"] for item in SAMPLE_ITEMS]
    assert report["items"] == [{"id": "item-001"}]
    assert ("items", "seed", "item-003") in store.documents
