"""
SQLite backed key-value storage.

Each entity kind (developer profiles, social groups, messages) lives
in its own table keyed by an integer id, with the record itself stored
as JSON.  Ids come from per-kind counters kept in the ``id_counters``
table, so both records and counters survive a restart.

``StorageContext`` owns the connection, the three ``RecordStore``
instances and the three ``IdAllocator`` instances.  Services receive a
context at construction instead of reaching for module globals, which
lets tests build a fresh in-memory context per test.

FastAPI runs synchronous handlers on a thread pool.  All access goes
through ``StorageContext.transaction``, which serialises callers on a
re-entrant lock and wraps the outermost block in one SQLite
transaction, so multi-step operations either apply fully or not at all.
"""

from __future__ import annotations

import logging
import os
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Generic, Iterator, List, Tuple, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel

from .config import settings
from .errors import NotFoundError
from .ids import MAX_ID, is_valid_id
from ..schemas.developer import DeveloperProfile
from ..schemas.group import SocialGroup
from ..schemas.message import Message

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

# Counter names; one row each in ``id_counters``.
DEVELOPER = "developer"
GROUP = "group"
MESSAGE = "message"

SCHEMA = """
CREATE TABLE IF NOT EXISTS developer_profiles (
    id INTEGER PRIMARY KEY,
    data TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS social_groups (
    id INTEGER PRIMARY KEY,
    data TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS messages (
    id INTEGER PRIMARY KEY,
    data TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS id_counters (
    name TEXT PRIMARY KEY,
    value INTEGER NOT NULL DEFAULT 0
);

INSERT OR IGNORE INTO id_counters (name, value) VALUES ('developer', 0);
INSERT OR IGNORE INTO id_counters (name, value) VALUES ('group', 0);
INSERT OR IGNORE INTO id_counters (name, value) VALUES ('message', 0);
"""

RecordT = TypeVar("RecordT", bound=BaseModel)


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and ``:memory:`` are used as given; relative paths
    are resolved against the project root.
    """
    db_url = settings.database_url
    if db_url == MEMORY_DATABASE or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


class IdAllocator:
    """Monotonic id counter for one entity kind, starting at 0."""

    def __init__(self, storage: "StorageContext", name: str) -> None:
        self._storage = storage
        self.name = name

    def next(self) -> int:
        """Return the current counter value and advance it by one."""
        with self._storage.transaction() as conn:
            row = conn.execute(
                "SELECT value FROM id_counters WHERE name = ?", (self.name,)
            ).fetchone()
            current = row["value"]
            conn.execute(
                "UPDATE id_counters SET value = ? WHERE name = ?",
                (current + 1, self.name),
            )
            return current

    def peek(self) -> int:
        """Return the id the next call to ``next`` would hand out."""
        with self._storage.transaction() as conn:
            row = conn.execute(
                "SELECT value FROM id_counters WHERE name = ?", (self.name,)
            ).fetchone()
            return row["value"]


class RecordStore(Generic[RecordT]):
    """Mapping from integer id to a pydantic record, persisted as JSON."""

    def __init__(
        self,
        storage: "StorageContext",
        table: str,
        kind: str,
        model: Type[RecordT],
    ) -> None:
        self._storage = storage
        self.table = table
        self.kind = kind
        self.model = model

    def insert(self, record_id: int, record: RecordT) -> None:
        """Store ``record`` under ``record_id``, replacing any existing one."""
        if not is_valid_id(record_id):
            raise ValueError(f"{self.kind} id {record_id} is outside 0..{MAX_ID}")
        with self._storage.transaction() as conn:
            conn.execute(
                f"INSERT OR REPLACE INTO {self.table} (id, data) VALUES (?, ?)",
                (record_id, record.model_dump_json()),
            )

    def get(self, record_id: int) -> RecordT:
        """Return the record stored under ``record_id``.

        Raises ``NotFoundError`` when there is none.
        """
        if not is_valid_id(record_id):
            raise NotFoundError(self.kind, record_id)
        with self._storage.transaction() as conn:
            row = conn.execute(
                f"SELECT data FROM {self.table} WHERE id = ?", (record_id,)
            ).fetchone()
        if row is None:
            raise NotFoundError(self.kind, record_id)
        return self.model.model_validate_json(row["data"])

    def items(self) -> List[Tuple[int, RecordT]]:
        """Return all ``(id, record)`` pairs in ascending id order."""
        with self._storage.transaction() as conn:
            rows = conn.execute(f"SELECT id, data FROM {self.table} ORDER BY id").fetchall()
        return [(row["id"], self.model.model_validate_json(row["data"])) for row in rows]

    def list(self) -> List[RecordT]:
        """Return all records in ascending id order."""
        return [record for _, record in self.items()]

    def count(self) -> int:
        with self._storage.transaction() as conn:
            row = conn.execute(f"SELECT COUNT(*) AS total FROM {self.table}").fetchone()
        return row["total"]


class StorageContext:
    """Connection, stores and id counters shared by all services."""

    def __init__(self, path: str = MEMORY_DATABASE) -> None:
        self.path = path
        # Transactions are issued explicitly, see ``transaction``.
        self._conn = sqlite3.connect(path, check_same_thread=False, isolation_level=None)
        self._conn.row_factory = sqlite3.Row
        self._lock = threading.RLock()
        self._depth = 0

        self.developer_ids = IdAllocator(self, DEVELOPER)
        self.group_ids = IdAllocator(self, GROUP)
        self.message_ids = IdAllocator(self, MESSAGE)

        self.developers: RecordStore[DeveloperProfile] = RecordStore(
            self, "developer_profiles", DEVELOPER, DeveloperProfile
        )
        self.groups: RecordStore[SocialGroup] = RecordStore(self, "social_groups", GROUP, SocialGroup)
        self.messages: RecordStore[Message] = RecordStore(self, "messages", MESSAGE, Message)

        self.init_db()

    def init_db(self) -> None:
        """Create tables and counter rows if they do not exist yet."""
        with self._lock:
            self._conn.executescript(SCHEMA)
        logger.info("Storage ready at %s", self.path)

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Run a block atomically.

        Nested calls join the enclosing transaction; only the outermost
        block commits, and an exception anywhere rolls everything back.
        """
        with self._lock:
            if self._depth:
                self._depth += 1
                try:
                    yield self._conn
                finally:
                    self._depth -= 1
                return

            self._conn.execute("BEGIN IMMEDIATE")
            self._depth = 1
            try:
                yield self._conn
            except BaseException:
                self._conn.execute("ROLLBACK")
                raise
            else:
                self._conn.execute("COMMIT")
            finally:
                self._depth = 0

    def close(self) -> None:
        with self._lock:
            self._conn.close()


def open_storage(path: str | None = None) -> StorageContext:
    """Open the configured database, or the given path."""
    return StorageContext(path or get_database_path())


def get_storage(request: Request) -> StorageContext:
    """FastAPI dependency returning the application's storage context."""
    return request.app.state.storage
