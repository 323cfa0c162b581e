"""Keyword-based category suggester used when LLM suggestions are off."""

import re
from typing import List, Optional, Sequence, Tuple
from llm.providers.base import CategorySuggester

# (keywords, label) pairs; earlier entries win.
DEFAULT_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("salary", "payroll", "refund", "interest"), "Income"),
    (("tesco", "sainsbury", "lidl", "aldi", "asda", "walmart", "grocery", "supermarket"), "Groceries"),
    (("starbucks", "costa coffee", "pret", "coffee", "cafe", "restaurant", "pizza", "mcdonald's", "mcdonalds"), "Dining"),
    (("uber", "lyft", "tfl", "trainline", "metro", "shell", "fuel", "parking", "taxi"), "Transport"),
    (("netflix", "spotify", "cinema", "steam", "theatre"), "Entertainment"),
    (("electric", "water", "internet", "broadband", "phone bill", "gas bill"), "Utilities"),
    (("pharmacy", "boots", "doctor", "dentist", "gym"), "Health"),
    (("amazon", "ebay", "ikea", "target"), "Shopping"),
)


class RuleBasedSuggester(CategorySuggester):
    """Suggests a category by case-insensitive whole-word keyword match."""

    def __init__(
        self,
        rules: Optional[Sequence[Tuple[Sequence[str], str]]] = None,
        default: str = "Uncategorized",
    ):
        self.rules = DEFAULT_RULES if rules is None else rules
        self.default = default
        # "pret" must not match "interpreter", nor "shell" match "seashells"
        self._patterns: List[Tuple[re.Pattern, str]] = [
            (
                re.compile(
                    r"\b(?:" + "|".join(re.escape(k) for k in keywords) + r")\b",
                    re.IGNORECASE,
                ),
                label,
            )
            for keywords, label in self.rules
            if keywords
        ]

    def suggest_category(self, description: str) -> str:
        for pattern, label in self._patterns:
            if pattern.search(description):
                return label

        return self.default
