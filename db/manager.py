"""SQLite access for the category store."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from config import Config, get_migrations_dir

# Seconds a writer waits for another request's write lock before failing.
BUSY_TIMEOUT = 5.0


class DatabaseManager:
    """Hands out short-lived SQLite connections to the budget database.

    Flask serves each request on its own worker thread and sqlite3
    connections must stay on the thread that opened them, so nothing here is
    cached: every `connect()` opens a fresh connection and closes it on exit.

    Args:
        config: Application configuration; only `db_path` is used.
    """

    def __init__(self, config: Config):
        self.config = config

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection with foreign keys enforced.

        `categories.parent_id` references `categories.id`, and SQLite only
        checks that when the pragma is set on the connection.
        """
        db_path = self.get_db_path()
        db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(db_path, timeout=BUSY_TIMEOUT)
        try:
            conn.execute("PRAGMA foreign_keys = ON")
            yield conn
        finally:
            conn.close()

    def get_db_path(self) -> Path:
        return self.config.db_path

    def get_migrations_dir(self) -> Path:
        return get_migrations_dir()
