"""Webhook side of public24: intents, request parameters and message lists."""

from __future__ import annotations

from public24.agent.intents import Intent
from public24.agent.messages import MessageListWithLinks, SimpleMessageList, to_fulfillment
from public24.agent.params import RequestParam, RequestParameters, WebhookRequest
from public24.agent.webhook import DEFAULT_MESSAGE_LIMIT, AgentWebhookService

__all__ = [
    "DEFAULT_MESSAGE_LIMIT",
    "AgentWebhookService",
    "Intent",
    "MessageListWithLinks",
    "RequestParam",
    "RequestParameters",
    "SimpleMessageList",
    "WebhookRequest",
    "to_fulfillment",
]
