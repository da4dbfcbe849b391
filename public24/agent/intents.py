"""Intents the webhook knows how to fulfil."""

from __future__ import annotations

from enum import Enum

from public24.errors import UnsupportedIntentError

__all__ = ["Intent"]


class Intent(str, Enum):
    CURRENT_EXCHANGE_RATE = "current-exchange-rate"
    EXCHANGE_RATE_HISTORY = "exchange-rate-history"
    INFRASTRUCTURE_LOCATION = "infrastructure-location"

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_name(cls, name: str | None) -> "Intent":
        """Resolve a free-text intent name; raise when nothing matches."""

        if name:
            key = name.strip().lower().replace("_", "-").replace(" ", "-")
            for intent in cls:
                if key == intent.value:
                    return intent
        raise UnsupportedIntentError(name)
