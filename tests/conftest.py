import uuid
from typing import Any

import pytest

from vrclogin import AuthCookie, ClientUserAgent, CredentialData


class FakeResponse:
    def __init__(
        self,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
        body: Any = None,
        json_error: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.headers = {k.lower(): v for k, v in (headers or {}).items()}
        self._body = body if body is not None else {}
        self._json_error = json_error

    def json(self) -> Any:
        if self._json_error is not None:
            raise self._json_error
        return self._body


class FakeTransport:
    """Replays queued responses (or raises queued exceptions) and records requests"""

    def __init__(self, *responses: FakeResponse | Exception) -> None:
        self._responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    def _next(self) -> FakeResponse:
        if not self._responses:
            raise AssertionError("unexpected request")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    async def get(self, url: str, headers: dict[str, str]) -> FakeResponse:
        self.calls.append({"method": "GET", "url": url, "headers": headers})
        return self._next()

    async def post(self, url: str, headers: dict[str, str], json: Any) -> FakeResponse:
        self.calls.append({"method": "POST", "url": url, "headers": headers, "json": json})
        return self._next()


def make_cookie_value() -> str:
    return f"authcookie_{uuid.uuid4()}"


def login_response(
    cookie_value: str | None,
    body: Any = None,
    status_code: int = 200,
) -> FakeResponse:
    headers = {}
    if cookie_value is not None:
        headers["Set-Cookie"] = (
            f"auth={cookie_value}; Max-Age=604800; Path=/; Expires=Wed, 21 Oct 2026 07:28:00 GMT; "
            "HttpOnly, apiKey=JlE5Jldo5Jibnk5O5hTx6XVqsJu4WJ26; Path=/"
        )
    return FakeResponse(status_code=status_code, headers=headers, body=body)


@pytest.fixture
def cookie_value() -> str:
    return make_cookie_value()


@pytest.fixture
def auth_cookie(cookie_value: str) -> AuthCookie:
    cookie = AuthCookie.create(cookie_value)
    assert cookie is not None
    return cookie


@pytest.fixture
def credential_data() -> CredentialData:
    return CredentialData("testuser", "password")


@pytest.fixture
def user_agent() -> ClientUserAgent:
    return ClientUserAgent("TEST_APP", "1.0.0")
