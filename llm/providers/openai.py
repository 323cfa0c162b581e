"""OpenAI provider implementation using structured outputs."""

from typing import Optional
from pydantic import BaseModel
from openai import OpenAI
from llm.providers.base import CategorySuggester
from llm.prompts.loader import PromptManager
from logger import get_logger

logger = get_logger()


# Pydantic model for structured output
class CategorySuggestionResponse(BaseModel):
    """Suggested category for a single transaction description."""

    category: str
    reasoning: Optional[str] = None


class OpenAIProvider(CategorySuggester):
    """OpenAI implementation using structured outputs for reliable JSON parsing."""

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        category_source=None,
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key.
            model: Model to use (e.g., "gpt-4o-mini"). If None, uses prompt default.
            timeout: Request timeout in seconds. If None, uses the client default.
            category_source: Optional object with a find_all() method returning
                the known categories, offered to the model as preferred labels.
        """
        if timeout is None:
            self.client = OpenAI(api_key=api_key)
        else:
            self.client = OpenAI(api_key=api_key, timeout=timeout)
        self.model = model
        self.category_source = category_source
        self.prompt_manager = PromptManager()

    def suggest_category(self, description: str) -> str:
        """Suggest a category using OpenAI with structured outputs.

        Args:
            description: Transaction description to categorize.

        Returns:
            The suggested category label.

        Raises:
            RuntimeError: If OpenAI returns no parsed response.
            Exception: If the OpenAI API call fails.
        """
        rendered_prompt = self.prompt_manager.render_prompt(
            "category_suggestion",
            {
                "categories": self._format_categories(),
                "description": description,
            },
        )

        model = self.model or rendered_prompt["parameters"].get("model", "gpt-4o-mini")
        temperature = rendered_prompt["parameters"].get("temperature", 0.0)
        max_tokens = rendered_prompt["parameters"].get("max_tokens", 200)

        logger.info(
            f"Calling OpenAI for a category suggestion "
            f"(model: {model}, prompt version: {rendered_prompt['version']})"
        )

        try:
            response = self.client.chat.completions.parse(
                model=model,
                messages=[
                    {"role": "system", "content": rendered_prompt["system_prompt"]},
                    {"role": "user", "content": rendered_prompt["user_prompt"]},
                ],
                temperature=temperature,
                max_tokens=max_tokens,
                response_format=CategorySuggestionResponse,
            )
        except Exception as e:
            logger.error(f"OpenAI API error: {e}")
            raise

        result = response.choices[0].message.parsed

        if result is None:
            logger.warning("OpenAI returned null parsed response")
            raise RuntimeError("OpenAI returned no category")

        if result.reasoning:
            logger.debug(f"OpenAI reasoning: {result.reasoning}")

        return result.category.strip()

    def _format_categories(self) -> str:
        """Format known categories for the prompt."""
        if self.category_source is None:
            return "No categories defined yet."

        categories = self.category_source.find_all()
        if not categories:
            return "No categories defined yet."

        lines = []
        for cat in categories:
            desc = f" - {cat.description}" if cat.description else ""
            lines.append(f"- {cat.name}{desc}")

        return "\n".join(lines)
