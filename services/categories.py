"""Category service for database operations."""

from typing import List, Optional
from models.category import Category
from logger import get_logger

logger = get_logger()

_COLUMNS = "id, name, description, parent_id"


def _row_to_category(row) -> Category:
    return Category(id=row[0], name=row[1], description=row[2], parent_id=row[3])


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db_manager):
        """Initialize the category service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_all(self) -> List[Category]:
        """Get all categories from the database.

        Returns:
            List of Category objects, in insertion order.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(f"SELECT {_COLUMNS} FROM categories ORDER BY id")
            return [_row_to_category(row) for row in cursor.fetchall()]

    def find(self, category_id: int) -> Optional[Category]:
        """Get a single category by ID.

        Args:
            category_id: The category ID to find.

        Returns:
            Category object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_COLUMNS} FROM categories WHERE id = ?",
                (category_id,),
            )
            row = cursor.fetchone()
            return _row_to_category(row) if row else None

    def find_by_name(self, name: str) -> Optional[Category]:
        """Get a single category by name (case-sensitive).

        Args:
            name: The category name to find.

        Returns:
            Category object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_COLUMNS} FROM categories WHERE name = ?",
                (name,),
            )
            row = cursor.fetchone()
            return _row_to_category(row) if row else None

    def create(
        self,
        name: str,
        description: Optional[str] = None,
        parent_id: Optional[int] = None,
    ) -> Category:
        """Create a new category.

        Args:
            name: Category name (must be unique).
            description: Optional description of the category.
            parent_id: Optional parent category ID for hierarchical categories.

        Returns:
            The created Category object with id populated.

        Raises:
            sqlite3.IntegrityError: If the name already exists or the parent
                does not.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "INSERT INTO categories (name, description, parent_id) VALUES (?, ?, ?)",
                (name, description, parent_id),
            )
            conn.commit()
            category_id = cursor.lastrowid

        logger.debug(f"Created category '{name}' with ID {category_id}")

        return Category(
            id=category_id,
            name=name,
            description=description,
            parent_id=parent_id,
        )
