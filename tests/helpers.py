"""Helper utilities for tests."""

from pathlib import Path
import sqlite3

from llm.providers.base import CategorySuggester


def run_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> None:
    """Run all SQL migrations in order.

    Args:
        conn: SQLite connection to run migrations against.
        migrations_dir: Path to directory containing .sql migration files.
    """
    for migration_file in sorted(migrations_dir.glob("*.sql")):
        with open(migration_file, "r") as f:
            conn.executescript(f.read())

    conn.commit()


class StubSuggester(CategorySuggester):
    """Suggester that records its inputs and returns or raises on demand.

    Args:
        label: Label returned when no error is set.
        error: Exception raised instead of returning, if set.
    """

    def __init__(self, label="Dining", error=None):
        self.label = label
        self.error = error
        self.calls = []

    def suggest_category(self, description: str) -> str:
        self.calls.append(description)
        if self.error is not None:
            raise self.error
        return self.label
