"""Chat-facing message lists and their webhook fulfillment payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "FULFILLMENT_SOURCE",
    "MessageListWithLinks",
    "SimpleMessageList",
    "from_message_list_with_links",
    "from_simple_message_list",
    "to_fulfillment",
]

FULFILLMENT_SOURCE = "public24"


@dataclass(frozen=True, slots=True)
class SimpleMessageList:
    """Header plus plain text lines; ``fallback`` is shown when there are none."""

    header: str
    messages: list[str] = field(default_factory=list)
    fallback: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.messages


@dataclass(frozen=True, slots=True)
class MessageListWithLinks:
    """Header plus ``label -> link`` pairs kept in insertion order."""

    header: str
    messages_with_links: dict[str, str] = field(default_factory=dict)
    fallback: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.messages_with_links


def _speech(header: str, lines: list[str], fallback: str) -> str:
    if not lines:
        return fallback
    return "\n".join([header, *lines])


def from_simple_message_list(message_list: SimpleMessageList) -> dict[str, Any]:
    speech = _speech(message_list.header, message_list.messages, message_list.fallback)
    return {
        "speech": speech,
        "displayText": speech,
        "messages": [{"type": 0, "speech": line} for line in message_list.messages],
        "source": FULFILLMENT_SOURCE,
    }


def from_message_list_with_links(message_list: MessageListWithLinks) -> dict[str, Any]:
    labels = list(message_list.messages_with_links)
    speech = _speech(message_list.header, labels, message_list.fallback)
    return {
        "speech": speech,
        "displayText": speech,
        "messages": [
            {"type": "link_out_chip", "destinationName": label, "url": link}
            for label, link in message_list.messages_with_links.items()
        ],
        "source": FULFILLMENT_SOURCE,
    }


def to_fulfillment(message_list: SimpleMessageList | MessageListWithLinks) -> dict[str, Any]:
    if isinstance(message_list, MessageListWithLinks):
        return from_message_list_with_links(message_list)
    return from_simple_message_list(message_list)
