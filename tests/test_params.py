from __future__ import annotations

from datetime import date, datetime

import pytest

from public24.agent.intents import Intent
from public24.agent.params import RequestParam, RequestParameters, WebhookRequest
from public24.errors import BadRequestError, UnsupportedIntentError


def test_request_param_names() -> None:
    assert [param.value for param in RequestParam] == [
        "date",
        "ccy",
        "exchange-rate-type",
        "infrastructure-type",
        "city",
        "address",
        "limit",
    ]


def test_get_string_treats_blank_as_absent() -> None:
    params = RequestParameters({"ccy": "  ", "city": "Kyiv"})

    assert params.get_string(RequestParam.CURRENCY, "USD") == "USD"
    assert params.get_string_if_present(RequestParam.CURRENCY) is None
    assert params.get_string(RequestParam.CITY) == "Kyiv"
    assert params.get_string("missing") is None


def test_get_date_parses_iso_strings() -> None:
    params = RequestParameters({"date": "2024-01-05", "when": "2024-01-05T10:00:00Z"})

    assert params.get_date(RequestParam.DATE) == datetime(2024, 1, 5)
    assert params.get_date("when").tzinfo is not None
    assert params.get_date("missing", date(2020, 1, 1)) == date(2020, 1, 1)


def test_get_date_rejects_garbage() -> None:
    with pytest.raises(BadRequestError, match="not a valid date"):
        RequestParameters({"date": "yesterday-ish"}).get_date(RequestParam.DATE)


@pytest.mark.parametrize("raw, expected", [(5, 5), ("7", 7), (" 3 ", 3), (2.0, 2), ("", 20)])
def test_get_int(raw, expected) -> None:
    assert RequestParameters({"limit": raw}).get_int(RequestParam.LIMIT, 20) == expected


@pytest.mark.parametrize("raw", ["many", True])
def test_get_int_rejects_non_numbers(raw) -> None:
    with pytest.raises(BadRequestError):
        RequestParameters({"limit": raw}).get_int(RequestParam.LIMIT, 20)


@pytest.mark.parametrize(
    "name, intent",
    [
        ("current-exchange-rate", Intent.CURRENT_EXCHANGE_RATE),
        ("EXCHANGE_RATE_HISTORY", Intent.EXCHANGE_RATE_HISTORY),
        ("Infrastructure Location", Intent.INFRASTRUCTURE_LOCATION),
    ],
)
def test_intent_lookup(name, intent) -> None:
    assert Intent.from_name(name) is intent


@pytest.mark.parametrize("name", ["", None, "small-talk"])
def test_intent_lookup_fails_hard(name) -> None:
    with pytest.raises(UnsupportedIntentError):
        Intent.from_name(name)


def test_webhook_request_from_payload() -> None:
    request = WebhookRequest.from_payload(
        {
            "id": "abc",
            "result": {
                "metadata": {"intentName": "exchange-rate-history"},
                "parameters": {"date": "2024-01-05", "ccy": "USD"},
            },
        }
    )

    assert request.intent_name == "exchange-rate-history"
    assert request.parameters.get_string(RequestParam.CURRENCY) == "USD"


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"result": "nope"},
        {"result": {"metadata": {}}},
        {"result": {"metadata": {"intentName": "x"}, "parameters": ["ccy"]}},
        [],
    ],
)
def test_webhook_request_rejects_malformed_payloads(payload) -> None:
    with pytest.raises(BadRequestError):
        WebhookRequest.from_payload(payload)
