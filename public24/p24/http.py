"""``requests`` transport shared by every Privat24 API consumer."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Sequence
from urllib.parse import urlencode

import requests

from public24.config import Privat24Settings
from public24.errors import UpstreamError
from public24.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["Privat24Session"]


class Privat24Session:
    """Issue GET requests under the configured base URL and decode JSON bodies.

    The Privat24 API mixes bare flags (``?json&exchange``) with ordinary
    key/value pairs, so URLs are assembled here rather than through
    ``requests``' ``params`` argument which cannot express valueless keys.
    """

    def __init__(
        self,
        settings: Privat24Settings | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings or Privat24Settings()
        self.session = session or requests.Session()
        self.session.headers.setdefault("Accept", "application/json")

    def build_url(
        self,
        path: str,
        *,
        flags: Sequence[str] = (),
        params: Iterable[tuple[str, Any]] = (),
    ) -> str:
        parts = [self.settings.format, *flags]
        encoded = urlencode([(key, "" if value is None else str(value)) for key, value in params])
        if encoded:
            parts.append(encoded)
        return f"{self.settings.url.rstrip('/')}/{path.lstrip('/')}?{'&'.join(parts)}"

    def get_json(
        self,
        path: str,
        *,
        flags: Sequence[str] = (),
        params: Iterable[tuple[str, Any]] = (),
    ) -> Any:
        """GET ``path`` and return the decoded body; numbers decode as ``Decimal``."""

        url = self.build_url(path, flags=flags, params=params)
        LOGGER.debug("GET Request to p24 api: %s", url)
        try:
            response = self.session.get(url, timeout=self.settings.timeout)
        except requests.RequestException as exc:
            LOGGER.warning("Privat24 API request failed for %s: %s", url, exc)
            raise UpstreamError(f"Privat24 API request failed: {url}", url=url) from exc
        self._raise_with_context(response, url)
        try:
            return response.json(parse_float=Decimal)
        except ValueError as exc:
            LOGGER.warning("Privat24 API returned a non-JSON body for %s", url)
            raise UpstreamError(
                f"Privat24 API returned an unreadable body for {url}",
                url=url,
                status_code=response.status_code,
            ) from exc

    @staticmethod
    def _raise_with_context(response: requests.Response, url: str) -> None:
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = response.status_code
            LOGGER.warning("Privat24 API responded with HTTP %s for %s", status, url)
            raise UpstreamError(
                f"Privat24 API responded with HTTP {status} for {url}",
                url=url,
                status_code=status,
            ) from exc

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "Privat24Session":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
