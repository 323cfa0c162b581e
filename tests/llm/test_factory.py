import pytest

from llm import get_llm_provider
from llm.providers.openai import OpenAIProvider
from llm.providers.rules import RuleBasedSuggester
from services.base import Services


class TestGetLLMProvider:
    """Tests for get_llm_provider."""

    def test_disabled_returns_none(self, test_config):
        test_config.llm_enabled = False

        assert get_llm_provider(test_config) is None

    def test_no_provider_returns_none(self, test_config):
        test_config.llm_enabled = True
        test_config.llm_provider = None

        assert get_llm_provider(test_config) is None

    def test_openai_provider(self, test_config):
        test_config.llm_enabled = True
        test_config.llm_openai_api_key = "sk-test"
        test_config.llm_openai_model = "gpt-4o"

        provider = get_llm_provider(test_config, category_source="source")

        assert isinstance(provider, OpenAIProvider)
        assert provider.model == "gpt-4o"
        assert provider.category_source == "source"

    def test_openai_without_key_raises(self, test_config):
        test_config.llm_enabled = True
        test_config.llm_openai_api_key = ""

        with pytest.raises(ValueError, match="llm_openai_api_key not configured"):
            get_llm_provider(test_config)

    def test_unknown_provider_raises(self, test_config):
        test_config.llm_enabled = True
        test_config.llm_provider = "ollama"

        with pytest.raises(ValueError, match="Unknown LLM provider: ollama"):
            get_llm_provider(test_config)


class TestServicesSuggester:
    """Tests for the suggester chosen by the Services container."""

    def test_falls_back_to_rules_when_disabled(self, test_config, db_manager_with_schema):
        services = Services(test_config, db_manager=db_manager_with_schema)

        assert isinstance(services.suggester, RuleBasedSuggester)

    def test_uses_openai_when_enabled(self, test_config, db_manager_with_schema):
        test_config.llm_enabled = True
        test_config.llm_openai_api_key = "sk-test"

        services = Services(test_config, db_manager=db_manager_with_schema)

        assert isinstance(services.suggester, OpenAIProvider)
        assert services.suggester.category_source is services.categories

    def test_injected_suggester_wins(self, test_config, db_manager_with_schema):
        injected = RuleBasedSuggester(rules=[], default="Other")

        services = Services(
            test_config, db_manager=db_manager_with_schema, suggester=injected
        )

        assert services.suggester is injected
