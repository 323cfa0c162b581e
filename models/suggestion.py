"""Outcome of a category suggestion request."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SuggestionResult:
    """Either a suggested category label or a failure message.

    Exactly one of label and error is set.
    """

    label: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, label: str) -> "SuggestionResult":
        return cls(label=label)

    @classmethod
    def failure(cls, message: str) -> "SuggestionResult":
        return cls(error=message)
