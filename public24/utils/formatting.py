"""Text helpers for rendering rates and addresses in chat messages."""

from __future__ import annotations

import re
from decimal import Decimal

__all__ = ["format_currency", "normalise_address"]

_COMMA_WITHOUT_SPACE = re.compile(r",(?! )")
_REPEATED_SPACES = re.compile(r" {2,}")


def format_currency(value: Decimal | float | None) -> str:
    """Render ``value`` as a plain decimal without exponent or trailing zeros."""

    if value is None:
        return "n/a"
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return format(value.normalize(), "f")


def normalise_address(address: str) -> str:
    """Make every comma followed by exactly one space and collapse repeated spaces."""

    spaced = _COMMA_WITHOUT_SPACE.sub(", ", address.strip())
    return _REPEATED_SPACES.sub(" ", spaced)
