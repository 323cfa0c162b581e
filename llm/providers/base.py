"""Base interface for category suggestion providers."""

from abc import ABC, abstractmethod


class CategorySuggester(ABC):
    """Abstract base class for category suggesters.

    Each provider can produce a suggestion in its own way: a remote LLM
    completion, a local keyword table, etc.
    """

    @abstractmethod
    def suggest_category(self, description: str) -> str:
        """Suggest a category label for a transaction description.

        Args:
            description: Free-text transaction description. May be empty.

        Returns:
            The suggested category label.

        Raises:
            Exception: If the provider fails (network, timeout, bad response).
        """
        pass
