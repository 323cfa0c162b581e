"""Factory for creating category suggestion providers."""

from typing import Optional
from config import Config
from llm.providers.base import CategorySuggester
from llm.providers.openai import OpenAIProvider
from logger import get_logger

logger = get_logger()


def get_llm_provider(
    config: Config, category_source=None
) -> Optional[CategorySuggester]:
    """Create an LLM-backed suggester based on configuration.

    Args:
        config: Application configuration.
        category_source: Optional object with find_all(), passed to providers
            that can use the known categories in their prompt.

    Returns:
        CategorySuggester instance, or None if LLM suggestions are disabled.

    Raises:
        ValueError: If a provider is configured but its settings are invalid.
    """
    if not config.llm_enabled:
        logger.info("LLM category suggestions are disabled")
        return None

    provider_name = config.llm_provider

    if provider_name == "openai":
        if not config.llm_openai_api_key:
            raise ValueError(
                "OpenAI provider selected but llm_openai_api_key not configured"
            )

        model = config.llm_openai_model
        logger.info(f"Initializing OpenAI provider (model: {model or 'default'})")

        return OpenAIProvider(
            api_key=config.llm_openai_api_key,
            model=model,
            timeout=config.llm_timeout,
            category_source=category_source,
        )

    elif provider_name is None:
        logger.info("No LLM provider configured")
        return None

    else:
        raise ValueError(f"Unknown LLM provider: {provider_name}")
