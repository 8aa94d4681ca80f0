"""curl_cffi based HTTP transport"""

import logging
from typing import Any

from curl_cffi.requests import AsyncSession, Response

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_IMPERSONATE = "chrome"


class CurlTransport:
    """Async transport on curl_cffi. Each request uses its own session."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        impersonate: str | None = DEFAULT_IMPERSONATE,
    ):
        self.timeout = timeout
        self.impersonate = impersonate

    async def get(self, url: str, headers: dict[str, str]) -> Response:
        return await self._request("GET", url, headers)

    async def post(self, url: str, headers: dict[str, str], json: Any) -> Response:
        return await self._request("POST", url, headers, json=json)

    async def _request(
        self, method: str, url: str, headers: dict[str, str], json: Any = None
    ) -> Response:
        logger.debug(f"[HTTP] {method} {url}")
        # Cookies are passed explicitly in headers, the session jar is not shared
        async with AsyncSession() as session:
            resp = await session.request(
                method,
                url,
                headers=headers,
                json=json,
                timeout=self.timeout,
                impersonate=self.impersonate,
            )
        logger.debug(f"[HTTP] {method} {url} -> {resp.status_code}")
        return resp


def default_transport() -> CurlTransport:
    """Transport used when the caller does not pass one"""
    return CurlTransport()
