"""Google Maps links for device coordinates."""

from __future__ import annotations

from decimal import Decimal
from urllib.parse import urlencode

from public24.config import DEFAULT_MAPS_URL

__all__ = ["GoogleMaps"]


class GoogleMaps:
    """Build search links that drop a pin on a latitude/longitude pair."""

    def __init__(self, base_url: str = DEFAULT_MAPS_URL) -> None:
        self.base_url = base_url

    def coordinates_query(
        self,
        latitude: Decimal | float | str | None,
        longitude: Decimal | float | str | None,
    ) -> str:
        query = f"{_coordinate(latitude)},{_coordinate(longitude)}"
        return f"{self.base_url}?{urlencode({'api': 1, 'query': query}, safe=',')}"


def _coordinate(value: Decimal | float | str | None) -> str:
    if value is None:
        return ""
    return str(value).strip()
