"""SQLite-backed store of purchase records."""

import json
import sqlite3
from contextlib import contextmanager
from typing import Iterator, Optional

from .errors import StorageError
from .logger import get_logger
from .schemas import PurchaseRecord

logger = get_logger("store")

TABLE_NAME = "compras"

SCHEMA_SQL = f"""
CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    customer TEXT NOT NULL,
    items TEXT NOT NULL
)
"""


class PurchaseStore:
    """Append-only purchase table in a SQLite file.

    A fresh connection is opened for every operation; concurrent writers are
    serialized by SQLite's own locking. Every ``sqlite3.Error`` leaves this
    class as a ``StorageError``.

    Attributes:
        db_path: Path of the SQLite database file.
    """

    def __init__(self, db_path: str):
        """Initialize the store.

        Args:
            db_path (str): Path of the SQLite database file, created on first use.
        """
        self.db_path = db_path

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection, translating any SQLite failure into ``StorageError``."""
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StorageError(f"Cannot open database {self.db_path}: {e}") from e
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        except sqlite3.Error as e:
            raise StorageError(f"Database operation failed on {self.db_path}: {e}") from e
        finally:
            conn.close()

    def ensure_schema(self) -> None:
        """Create the purchases table if it does not exist yet."""
        with self.connect() as conn:
            conn.execute(SCHEMA_SQL)
            conn.commit()
        logger.info(f"Table '{TABLE_NAME}' ensured in {self.db_path}")

    def insert_purchase(self, customer: str, items: str) -> int:
        """Insert one purchase row.

        Args:
            customer (str): Customer name.
            items (str): Serialized product list.

        Returns:
            int: Identifier assigned to the new row.

        Raises:
            StorageError: If the insert fails (I/O error, missing table, ...).
        """
        with self.connect() as conn:
            cursor = conn.execute(
                f"INSERT INTO {TABLE_NAME} (customer, items) VALUES (?, ?)",
                (customer, items),
            )
            conn.commit()
            return cursor.lastrowid

    def get_purchase(self, purchase_id: int) -> Optional[PurchaseRecord]:
        """Read a purchase back, decoding its items from JSON.

        Returns:
            PurchaseRecord | None: The stored purchase, or None if no row has that id.
        """
        with self.connect() as conn:
            row = conn.execute(
                f"SELECT id, customer, items FROM {TABLE_NAME} WHERE id = ?",
                (purchase_id,),
            ).fetchone()
        if row is None:
            return None
        return PurchaseRecord(id=row["id"], customer=row["customer"], items=json.loads(row["items"]))

    def count_purchases(self) -> int:
        """Return the number of stored purchases."""
        with self.connect() as conn:
            return conn.execute(f"SELECT COUNT(*) FROM {TABLE_NAME}").fetchone()[0]
