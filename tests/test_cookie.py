import uuid

import pytest

from vrclogin import AuthCookie, AuthenticatedClient
from vrclogin.client.curl import CurlTransport

from .conftest import FakeResponse, FakeTransport, make_cookie_value


class TestAuthCookieCreate:
    @pytest.mark.parametrize("attempt", range(5))
    def test_valid_values(self, attempt: int) -> None:
        value = make_cookie_value()
        cookie = AuthCookie.create(value)
        assert cookie is not None
        assert cookie.value == value
        assert cookie.get_value() == value

    @pytest.mark.parametrize(
        "value",
        [
            "",
            str(uuid.uuid4()),
            f"authcookie{uuid.uuid4()}",
            f"authcookies_{uuid.uuid4()}",
            f"AUTHCOOKIE_{uuid.uuid4()}",
            f"authcookie_{str(uuid.uuid4()).upper()}",
            f"authcookie_{uuid.uuid4().hex}",
            "authcookie_1234567-1234-1234-1234-123456789012",
            "authcookie_12345678-1234-1234-1234-1234567890123",
            "authcookie_12345678-1234-1234-12341-23456789012",
            "authcookie_1234567g-1234-1234-1234-123456789012",
            f" authcookie_{uuid.uuid4()}",
            f"authcookie_{uuid.uuid4()}\n",
            None,
        ],
    )
    def test_invalid_values(self, value: object) -> None:
        assert AuthCookie.create(value) is None

    def test_constructor_rejects_invalid_value(self) -> None:
        with pytest.raises(ValueError):
            AuthCookie("authcookie_nope")

    def test_repr_masks_value(self, auth_cookie: AuthCookie) -> None:
        assert auth_cookie.value not in repr(auth_cookie)

    def test_equal_by_value(self, cookie_value: str) -> None:
        assert AuthCookie.create(cookie_value) == AuthCookie.create(cookie_value)


class TestAuthenticatedClient:
    @pytest.mark.asyncio
    async def test_get_attaches_cookie(self, auth_cookie: AuthCookie) -> None:
        transport = FakeTransport(FakeResponse())
        client = auth_cookie.create_client(transport)

        await client.get("https://example.com/x", headers={"User-Agent": "A/1"})

        call = transport.calls[0]
        assert call["method"] == "GET"
        assert call["headers"]["Cookie"] == f"auth={auth_cookie.value}"
        assert call["headers"]["User-Agent"] == "A/1"

    @pytest.mark.asyncio
    async def test_post_sends_json(self, auth_cookie: AuthCookie) -> None:
        transport = FakeTransport(FakeResponse())
        client = AuthenticatedClient(auth_cookie, transport)

        await client.post("https://example.com/x", {"code": "123456"})

        call = transport.calls[0]
        assert call["method"] == "POST"
        assert call["json"] == {"code": "123456"}
        assert call["headers"]["Content-Type"] == "application/json"
        assert call["headers"]["Cookie"] == f"auth={auth_cookie.value}"

    def test_client_keeps_cookie(self, auth_cookie: AuthCookie) -> None:
        client = auth_cookie.create_client(FakeTransport())
        assert client.auth_cookie is auth_cookie


def test_client_defaults_to_curl_transport(auth_cookie: AuthCookie) -> None:
    client = auth_cookie.create_client()
    assert isinstance(client._transport, CurlTransport)
