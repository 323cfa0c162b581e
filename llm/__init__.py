"""Category suggestion providers, LLM-backed and local."""

from llm.factory import get_llm_provider
from llm.providers.base import CategorySuggester
from llm.providers.rules import RuleBasedSuggester

__all__ = ["get_llm_provider", "CategorySuggester", "RuleBasedSuggester"]
