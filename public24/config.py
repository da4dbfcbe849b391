"""Runtime settings for the Privat24 API client."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

__all__ = ["DEFAULT_API_URL", "DEFAULT_MAPS_URL", "DEFAULT_TIMEOUT", "Privat24Settings"]

DEFAULT_API_URL = "https://api.privatbank.ua/p24api"
DEFAULT_MAPS_URL = "https://www.google.com/maps/search/"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True, slots=True)
class Privat24Settings:
    """Where the Privat24 API lives and how requests to it are shaped."""

    url: str = DEFAULT_API_URL
    format: str = "json"
    date_format: str = "%d.%m.%Y"
    timeout: float = DEFAULT_TIMEOUT
    maps_url: str = DEFAULT_MAPS_URL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Privat24Settings":
        """Build settings from ``PUBLIC24_*`` environment variables.

        Unset variables keep their defaults. ``PUBLIC24_TIMEOUT`` must be a
        positive number of seconds.
        """

        env = os.environ if environ is None else environ
        timeout_raw = env.get("PUBLIC24_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if timeout_raw:
            try:
                timeout = float(timeout_raw)
            except ValueError as exc:
                raise ValueError(f"PUBLIC24_TIMEOUT must be a number, got {timeout_raw!r}") from exc
            if timeout <= 0:
                raise ValueError("PUBLIC24_TIMEOUT must be positive")
        return cls(
            url=env.get("PUBLIC24_API_URL") or DEFAULT_API_URL,
            format=env.get("PUBLIC24_API_FORMAT") or "json",
            date_format=env.get("PUBLIC24_DATE_FORMAT") or "%d.%m.%Y",
            timeout=timeout,
            maps_url=env.get("PUBLIC24_MAPS_URL") or DEFAULT_MAPS_URL,
        )
