"""Auth cookie issued by VRChat and a client that sends it"""

import re
from dataclasses import dataclass
from typing import Any

from ..client.base import HttpResponse, HttpTransport
from ..client.curl import default_transport

AUTH_COOKIE_NAME = "auth"
AUTH_COOKIE_REGEX = re.compile(
    r"^authcookie_[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"
)


@dataclass(frozen=True, repr=False)
class AuthCookie:
    """
    Validated value of the "auth" cookie.

    Use AuthCookie.create() for untrusted input; calling the constructor with a
    malformed value raises ValueError.
    """

    value: str

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise ValueError("Invalid format of auth cookie")

    @staticmethod
    def is_valid(value: Any) -> bool:
        return isinstance(value, str) and AUTH_COOKIE_REGEX.fullmatch(value) is not None

    @classmethod
    def create(cls, value: Any) -> "AuthCookie | None":
        """Returns AuthCookie if value matches the expected format, otherwise None"""
        if not cls.is_valid(value):
            return None
        return cls(value)

    def get_value(self) -> str:
        return self.value

    def create_client(self, transport: HttpTransport | None = None) -> "AuthenticatedClient":
        """Client that attaches this cookie to every request"""
        return AuthenticatedClient(self, transport or default_transport())

    def __repr__(self) -> str:
        # Keep the live token out of logs and tracebacks
        return f"AuthCookie(value='{self.value[:19]}...')"


class AuthenticatedClient:
    """Sends requests with the auth cookie attached"""

    def __init__(self, auth_cookie: AuthCookie, transport: HttpTransport):
        self._auth_cookie = auth_cookie
        self._transport = transport

    @property
    def auth_cookie(self) -> AuthCookie:
        return self._auth_cookie

    def _headers(self, extra: dict[str, str] | None) -> dict[str, str]:
        return {"Cookie": f"{AUTH_COOKIE_NAME}={self._auth_cookie.value}", **(extra or {})}

    async def get(self, url: str, headers: dict[str, str] | None = None) -> HttpResponse:
        return await self._transport.get(url, headers=self._headers(headers))

    async def post(
        self, url: str, data: Any, headers: dict[str, str] | None = None
    ) -> HttpResponse:
        merged = self._headers({"Content-Type": "application/json", **(headers or {})})
        return await self._transport.post(url, headers=merged, json=data)
