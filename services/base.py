"""Base services container for dependency injection."""

from config import Config
from db.manager import DatabaseManager


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject mock services for testing.

    Args:
        config: Application configuration object.
        db_manager: Optional database manager for testing. If provided, config is ignored
            for database access.
        suggester: Optional category suggester for testing. If None, one is built
            from config, falling back to keyword rules when LLM suggestions are off.
    """

    def __init__(self, config: Config, db_manager=None, suggester=None):
        self.config = config
        self.db_manager = db_manager or DatabaseManager(config)

        # Lazy import to avoid circular dependencies
        from services.categories import CategoryService
        from llm import get_llm_provider, RuleBasedSuggester

        self.categories = CategoryService(self.db_manager)

        if suggester is None:
            suggester = get_llm_provider(config, category_source=self.categories)
        self.suggester = suggester or RuleBasedSuggester()
