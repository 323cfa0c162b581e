"""Request handling for the category endpoints.

Sits between the HTTP layer and the collaborators that do the real work:
the category store and the category suggester. Both are supplied by the
caller, so the handler holds no state of its own and can serve concurrent
requests without locking.
"""

from typing import List, Optional
from models.category import Category
from models.suggestion import SuggestionResult
from logger import get_logger

logger = get_logger()

FAILURE_PREFIX = "Failed to suggest category: "


class CategoryValidationError(ValueError):
    """Raised when a category cannot be created from the given fields."""


class CategoryRequestHandler:
    """Handles category listing, creation and suggestion requests.

    Args:
        category_service: Store with find_all(), find() and create().
        suggester: Object with suggest_category(description) -> str.
    """

    def __init__(self, category_service, suggester):
        self.category_service = category_service
        self.suggester = suggester

    def get_all_categories(self) -> List[Category]:
        return self.category_service.find_all()

    def create_category(
        self,
        name,
        description: Optional[str] = None,
        parent_id: Optional[int] = None,
    ) -> Category:
        """Validate and create a category.

        Raises:
            CategoryValidationError: If the name is blank, the description is not
                text, or the parent is unknown.
            sqlite3.IntegrityError: If a category with this name already exists.
        """
        if not isinstance(name, str) or not name.strip():
            raise CategoryValidationError("Category name cannot be empty")

        if description is not None and not isinstance(description, str):
            raise CategoryValidationError("Category description must be a string")

        if parent_id is not None:
            if isinstance(parent_id, bool) or not isinstance(parent_id, int):
                raise CategoryValidationError("Parent category ID must be a number")
            if self.category_service.find(parent_id) is None:
                raise CategoryValidationError(
                    f"Parent category with ID {parent_id} not found"
                )

        category = self.category_service.create(name.strip(), description, parent_id)
        logger.info(f"Created category '{category.name}' (ID: {category.id})")
        return category

    def suggest(self, description: str) -> SuggestionResult:
        """Suggest a category for a transaction description.

        Never raises: any error from the suggester becomes a failure result.
        The label is returned exactly as the suggester produced it.
        """
        logger.info(f"Received suggestion request for description: {description!r}")

        try:
            label = self.suggester.suggest_category(description)
        except Exception as e:
            logger.error(f"Error suggesting category: {e}", exc_info=True)
            return SuggestionResult.failure(f"{FAILURE_PREFIX}{e}")

        logger.info(f"Suggested category: {label!r}")
        return SuggestionResult.success(label)
