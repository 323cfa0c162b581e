"""Category model for transaction categorization."""

from dataclasses import dataclass, asdict
from typing import Optional


@dataclass
class Category:
    """Represents a user-defined transaction category.

    Attributes:
        id: Unique identifier (assigned by the store).
        name: Category name (unique).
        description: Optional description of what belongs in this category.
        parent_id: Optional parent category ID for hierarchical categories.
    """

    id: int
    name: str
    description: Optional[str] = None
    parent_id: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert category to a JSON-serializable dictionary."""
        return asdict(self)
