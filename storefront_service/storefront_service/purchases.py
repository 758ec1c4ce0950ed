"""Validation and persistence of purchase submissions."""

import asyncio
import json
from typing import Any, Optional

from .errors import StorageError, ValidationError
from .logger import get_logger
from .store import PurchaseStore

logger = get_logger("purchases")


class PurchaseRecorder:
    """Records purchases into a ``PurchaseStore``."""

    def __init__(self, store: PurchaseStore):
        self.store = store

    async def record_purchase(self, customer: Optional[str], items: Any) -> int:
        """Validate a purchase and persist it with a single insert.

        Args:
            customer (str | None): Customer name, must be non-empty.
            items (Any): Submitted product list, stored as JSON text. Null,
                false, zero and the empty string count as missing. Empty lists
                and objects are accepted.

        Returns:
            int: Identifier of the new purchase.

        Raises:
            ValidationError: If ``customer`` is missing or empty, or ``items`` is missing.
            StorageError: If the items cannot be serialized or the insert fails.
        """
        if not customer:
            raise ValidationError("Purchase rejected: missing customer")
        if _is_missing(items):
            raise ValidationError(f"Purchase rejected for {customer!r}: missing items")

        try:
            serialized = json.dumps(items, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Cannot serialize items for {customer!r}: {e}") from e

        purchase_id = await asyncio.to_thread(self.store.insert_purchase, customer, serialized)
        logger.info(f"Purchase {purchase_id} recorded for customer {customer!r}")
        return purchase_id


def _is_missing(value: Any) -> bool:
    """Return True for the scalar values treated as an absent field.

    Empty lists and objects count as present.
    """
    if value is None or value is False or value == "":
        return True
    return isinstance(value, (int, float)) and not value
