"""Webhook request parameters and null-safe typed accessors."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping

from public24.errors import BadRequestError

__all__ = ["RequestParam", "RequestParameters", "WebhookRequest"]


class RequestParam(str, Enum):
    """Parameter names used by the conversational agent."""

    DATE = "date"
    CURRENCY = "ccy"
    EXCHANGE_RATE_TYPE = "exchange-rate-type"
    INFRASTRUCTURE_TYPE = "infrastructure-type"
    CITY = "city"
    ADDRESS = "address"
    LIMIT = "limit"


def _key(name: RequestParam | str) -> str:
    return name.value if isinstance(name, RequestParam) else name


@dataclass(frozen=True)
class RequestParameters:
    """Read-only bag of parameters resolved by the agent for one request.

    Absent values (missing keys, ``None`` and blank strings) yield the
    caller's default. Present values of the wrong shape raise
    :class:`BadRequestError`.
    """

    values: Mapping[str, Any] = field(default_factory=dict)

    def _raw(self, name: RequestParam | str) -> Any:
        value = self.values.get(_key(name))
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def get_string(self, name: RequestParam | str, default: str | None = None) -> str | None:
        value = self._raw(name)
        if value is None:
            return default
        return str(value)

    def get_date(self, name: RequestParam | str, default: datetime | date | None = None):
        value = self._raw(name)
        if value is None:
            return default
        if isinstance(value, (datetime, date)):
            return value
        text = str(value).strip()
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError as exc:
            raise BadRequestError(f"Parameter '{_key(name)}' is not a valid date: {text!r}") from exc

    def get_int(self, name: RequestParam | str, default: int | None = None) -> int | None:
        value = self._raw(name)
        if value is None:
            return default
        try:
            if isinstance(value, bool):
                raise ValueError(value)
            if isinstance(value, (int, float, Decimal)):
                return int(value)
            return int(str(value).strip())
        except ValueError as exc:
            raise BadRequestError(
                f"Parameter '{_key(name)}' is not a valid integer: {value!r}"
            ) from exc

    def get_string_if_present(self, name: RequestParam | str) -> str | None:
        return self.get_string(name, None)


@dataclass(frozen=True)
class WebhookRequest:
    """Intent name plus parameters extracted from an inbound webhook call."""

    intent_name: str
    parameters: RequestParameters

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "WebhookRequest":
        """Parse an API.AI style body: ``result.metadata.intentName`` and ``result.parameters``."""

        if not isinstance(payload, Mapping):
            raise BadRequestError("Webhook payload must be a JSON object")
        result = payload.get("result")
        if not isinstance(result, Mapping):
            raise BadRequestError("Webhook payload has no 'result' object")
        metadata = result.get("metadata") or {}
        intent_name = metadata.get("intentName") if isinstance(metadata, Mapping) else None
        if not intent_name:
            raise BadRequestError("Webhook payload has no intent name")
        parameters = result.get("parameters") or {}
        if not isinstance(parameters, Mapping):
            raise BadRequestError("Webhook 'parameters' must be a JSON object")
        return cls(intent_name=str(intent_name), parameters=RequestParameters(dict(parameters)))
