from __future__ import annotations

import logging
import sqlite3
import threading
from pathlib import Path
from typing import Dict, Optional

from .contracts import User, UserStorePort
from .errors import StoreError

log = logging.getLogger("authservice.store")


class InMemoryUserStore(UserStorePort):
    """Thread-safe in-memory user store with a coarse-grained lock.

    With single_user=True the insert itself refuses a second account, so two
    callers racing past the service's count check cannot both succeed.
    """

    def __init__(self, *, single_user: bool = True) -> None:
        self._users: Dict[str, User] = {}
        self._lock = threading.RLock()
        self._single_user = single_user

    def count_users(self) -> int:
        with self._lock:
            return len(self._users)

    def find_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            return self._users.get(username)

    def insert_user(self, user: User) -> None:
        with self._lock:
            if user.username in self._users:
                raise StoreError(f"user already exists: {user.username}")
            if self._single_user and self._users:
                raise StoreError("user table already holds an account")
            self._users[user.username] = user


# ----------------------------
# SQLite
# ----------------------------

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY CHECK (id = 1),
    username TEXT NOT NULL UNIQUE,
    password TEXT NOT NULL,
    created_at TEXT NOT NULL DEFAULT (datetime('now'))
)
"""


class SQLiteUserStore(UserStorePort):
    """
    SQLite-backed user store.

    The users table pins its primary key to 1, so the database rejects a
    second row no matter how many callers pass the service-level check.
    """

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path
        if db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.RLock()
        self._conn = sqlite3.connect(db_path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        with self._conn:
            self._conn.execute(_SCHEMA)

    def close(self) -> None:
        self._conn.close()

    def count_users(self) -> int:
        try:
            with self._lock:
                row = self._conn.execute("SELECT COUNT(*) AS n FROM users").fetchone()
            return int(row["n"])
        except sqlite3.Error as ex:
            log.exception("count_users.failed db=%s", self.db_path)
            raise StoreError(f"failed to count users: {ex}") from ex

    def find_by_username(self, username: str) -> Optional[User]:
        try:
            with self._lock:
                row = self._conn.execute(
                    "SELECT username, password FROM users WHERE username = ?",
                    (username,),
                ).fetchone()
        except sqlite3.Error as ex:
            log.exception("find_by_username.failed db=%s", self.db_path)
            raise StoreError(f"failed to look up user: {ex}") from ex
        if row is None:
            return None
        return User(username=row["username"], password=row["password"])

    def insert_user(self, user: User) -> None:
        try:
            with self._lock, self._conn:
                self._conn.execute(
                    "INSERT INTO users (id, username, password) VALUES (1, ?, ?)",
                    (user.username, user.password),
                )
        except sqlite3.Error as ex:
            log.warning("insert_user.failed db=%s username=%s err=%s", self.db_path, user.username, ex)
            raise StoreError(f"failed to insert user: {ex}") from ex
