from __future__ import annotations

from public24.agent.messages import (
    FULFILLMENT_SOURCE,
    MessageListWithLinks,
    SimpleMessageList,
    from_message_list_with_links,
    from_simple_message_list,
    to_fulfillment,
)


def test_simple_list_speech_joins_header_and_lines() -> None:
    payload = from_simple_message_list(
        SimpleMessageList("Header", ["USD: purchase = 1 sale = 2"], "nothing")
    )

    assert payload["speech"] == "Header\nUSD: purchase = 1 sale = 2"
    assert payload["displayText"] == payload["speech"]
    assert payload["messages"] == [{"type": 0, "speech": "USD: purchase = 1 sale = 2"}]
    assert payload["source"] == FULFILLMENT_SOURCE


def test_empty_simple_list_uses_fallback() -> None:
    message_list = SimpleMessageList("Header", [], "No exchange rate found for current date.")

    payload = to_fulfillment(message_list)

    assert message_list.is_empty
    assert payload["speech"] == "No exchange rate found for current date."
    assert payload["messages"] == []


def test_link_list_keeps_label_order() -> None:
    message_list = MessageListWithLinks(
        "ATM locations in Kyiv",
        {"1: first": "https://maps/1", "2: second": "https://maps/2"},
        "No infrastructure found for location: Kyiv",
    )

    payload = from_message_list_with_links(message_list)

    assert payload["speech"] == "ATM locations in Kyiv\n1: first\n2: second"
    assert [message["url"] for message in payload["messages"]] == ["https://maps/1", "https://maps/2"]
    assert payload["messages"][0]["destinationName"] == "1: first"
    assert to_fulfillment(message_list) == payload


def test_empty_link_list_uses_fallback() -> None:
    payload = to_fulfillment(MessageListWithLinks("ATM locations in Kyiv", {}, "none here"))

    assert payload["speech"] == "none here"
