"""Infrastructure (ATM / terminal) search against the Privat24 API."""

from __future__ import annotations

import re

from public24.errors import UpstreamError
from public24.p24.http import Privat24Session
from public24.p24.models import DeviceType, Infrastructure

__all__ = ["InfrastructureLocator", "normalise_query_text"]

_SPACES_PATTERN = re.compile(" +")


def normalise_query_text(value: str | None) -> str:
    """Trim ``value`` and collapse runs of spaces into one."""

    if not value:
        return ""
    return _SPACES_PATTERN.sub(" ", value.strip())


class InfrastructureLocator:
    """Look up bank devices by type, city and optional street address."""

    def __init__(self, http: Privat24Session) -> None:
        self.http = http

    def get_locations(
        self,
        device_type: DeviceType,
        city: str,
        address: str = "",
    ) -> Infrastructure:
        """Return every matching device in API order; callers apply any limit."""

        payload = self.http.get_json(
            "/infrastructure",
            flags=(device_type.query_flag,),
            params=[
                ("city", normalise_query_text(city)),
                ("address", normalise_query_text(address)),
            ],
        )
        if not isinstance(payload, dict):
            raise UpstreamError(f"Unexpected infrastructure payload for {device_type}")
        return Infrastructure.from_json(payload)
