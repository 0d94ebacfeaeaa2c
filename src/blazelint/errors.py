"""
Error hierarchy for blazelint.
"""

from __future__ import annotations

from typing import Dict, List, Mapping


class BlazeLintError(Exception):
    """Base error for blazelint failures."""


class ConfigurationError(BlazeLintError):
    """Raised when configuration values are invalid."""


class ParseError(BlazeLintError):
    """
    Aggregated plan parsing error storing location-to-messages mapping.
    """

    def __init__(self, errors: Mapping[str, List[str]]) -> None:
        self.errors: Dict[str, List[str]] = {
            key: list(messages) for key, messages in errors.items()
        }
        message = self._format_message()
        super().__init__(message)

    @classmethod
    def single(cls, location: str, message: str) -> "ParseError":
        return cls({location: [message]})

    def _format_message(self) -> str:
        segments = []
        for location, messages in self.errors.items():
            combined = "; ".join(messages)
            segments.append(f"{location}: {combined}")
        return "; ".join(segments)

    def lines(self) -> List[str]:
        return [
            f"{location}: {message}"
            for location, messages in self.errors.items()
            for message in messages
        ]
