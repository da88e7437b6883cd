"""
TonAPI client: fetch one raw account record.

No retries, no rate limiting, no caching. Non-2xx responses raise TransportError
with the HTTP status embedded in the message and in `status_code`.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from ton_inspector.config import Settings, get_settings
from ton_inspector.core.exceptions import TransportError
from ton_inspector.inspector_logging import get_logger

logger = get_logger(__name__)

USER_AGENT = "ton-inspector/0.1"


class TonApiClient:
    """
    Synchronous TonAPI client. Usable as a context manager; owns its httpx.Client
    unless one is passed in (tests pass a client built on httpx.MockTransport).
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.base_url = (base_url or settings.tonapi_base_url).rstrip("/")
        headers = {"Accept": "application/json", "User-Agent": USER_AGENT}
        key = api_key if api_key is not None else settings.tonapi_api_key
        if key:
            headers["Authorization"] = f"Bearer {key}"
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=timeout if timeout is not None else settings.request_timeout_sec,
            headers=headers,
        )
        if http_client is not None:
            self._client.headers.update(headers)

    def __enter__(self) -> TonApiClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def account_url(self, address: str) -> str:
        return f"{self.base_url}/accounts/{quote(address, safe=':')}"

    def fetch_account(self, address: str) -> dict[str, Any]:
        """GET /accounts/{address}; returns the decoded JSON object."""
        url = self.account_url(address)
        try:
            resp = self._client.get(url)
        except httpx.HTTPError as e:
            logger.warning("tonapi_request_error", address=address, error=str(e))
            raise TransportError(str(e) or e.__class__.__name__) from e

        if not resp.is_success:
            logger.warning("tonapi_bad_status", address=address, status_code=resp.status_code)
            raise TransportError(f"API returned status {resp.status_code}", status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            logger.warning("tonapi_invalid_json", address=address, status_code=resp.status_code)
            raise TransportError("API returned invalid JSON", status_code=resp.status_code) from e
        if not isinstance(data, dict):
            raise TransportError("API returned an unexpected payload", status_code=resp.status_code)

        logger.info("tonapi_account_fetched", address=address, status_code=resp.status_code)
        return data
