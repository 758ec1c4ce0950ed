"""Unit tests for the PurchaseRecorder class."""

import asyncio
import sqlite3

import pytest

from storefront_service.errors import StorageError, ValidationError
from storefront_service.purchases import PurchaseRecorder
from storefront_service.store import TABLE_NAME


@pytest.fixture
def recorder(store):
    """Recorder writing into the temporary store."""
    return PurchaseRecorder(store)


def test_record_purchase_round_trip(recorder, store):
    """The stored items decode back to the submitted list."""
    items = [{"id": 1}, {"id": "2", "nome": "Açaí", "preco": "12.00"}]

    purchase_id = asyncio.run(recorder.record_purchase("Ana", items))

    record = store.get_purchase(purchase_id)
    assert record.customer == "Ana"
    assert record.items == items


def test_record_purchase_accepts_empty_list(recorder, store):
    """An empty product list is present, so it is accepted."""
    purchase_id = asyncio.run(recorder.record_purchase("Ana", []))

    assert store.get_purchase(purchase_id).items == []


@pytest.mark.parametrize("items", [{}, "x", 1, True], ids=["empty-object", "string", "number", "true"])
def test_record_purchase_accepts_present_scalars(recorder, store, items):
    """Non-empty scalars and empty objects are stored as given."""
    purchase_id = asyncio.run(recorder.record_purchase("Ana", items))

    assert store.get_purchase(purchase_id).items == items


@pytest.mark.parametrize(
    "customer,items",
    [
        (None, [{"id": 1}]),
        ("", [{"id": 1}]),
        ("Ana", None),
        ("Ana", ""),
        ("Ana", 0),
        ("Ana", 0.0),
        ("Ana", False),
        (None, None),
    ],
    ids=[
        "no-customer",
        "empty-customer",
        "no-items",
        "empty-string-items",
        "zero-items",
        "zero-float-items",
        "false-items",
        "nothing",
    ],
)
def test_record_purchase_validation(recorder, store, customer, items):
    """Missing fields are rejected before anything reaches the store."""
    with pytest.raises(ValidationError):
        asyncio.run(recorder.record_purchase(customer, items))

    assert store.count_purchases() == 0


def test_record_purchase_storage_failure(recorder, store):
    """Insert failures surface as StorageError."""
    with sqlite3.connect(store.db_path) as conn:
        conn.execute(f"DROP TABLE {TABLE_NAME}")

    with pytest.raises(StorageError):
        asyncio.run(recorder.record_purchase("Ana", [{"id": 1}]))


def test_record_purchase_unserializable_items(recorder, store):
    """Items that cannot become JSON are reported as a storage failure."""
    with pytest.raises(StorageError):
        asyncio.run(recorder.record_purchase("Ana", [object()]))

    assert store.count_purchases() == 0
