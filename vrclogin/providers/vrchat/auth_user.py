"""VRChat login request (GET /auth/user)"""

import logging

from ...auth.cookie import AUTH_COOKIE_NAME, AuthCookie
from ...client.base import HttpResponse, HttpTransport
from ...client.curl import default_transport
from ...core.types import AuthUserResult, ClientUserAgent, CredentialData, TwoFactorType

logger = logging.getLogger(__name__)

VRCHAT_API_URL = "https://api.vrchat.cloud/api/1"


def extract_auth_cookie_value(set_cookie_header: str) -> str | None:
    """
    Find the "auth" value in a Set-Cookie header.

    Repeated Set-Cookie entries arrive joined by ", "; only the name=value pair
    before the first ";" of each entry is considered.
    """
    for entry in set_cookie_header.split(", "):
        pair = entry.split(";", 1)[0]
        name, sep, value = pair.partition("=")
        if sep and name.strip() == AUTH_COOKIE_NAME:
            return value.strip()
    return None


def _is_falsy_flag(value) -> bool:
    """Only false, null, 0 and "" mean "not required"; empty containers still do"""
    if value is None or value is False:
        return True
    return isinstance(value, (int, float, str)) and not value


def _parse_two_factor_types(raw: list) -> list[TwoFactorType]:
    types: list[TwoFactorType] = []
    for value in raw:
        two_factor_type = TwoFactorType.parse(value)
        if two_factor_type is TwoFactorType.INVALID:
            logger.debug(f"[VRChat login] Ignoring unknown two factor type: {value!r}")
            continue
        if two_factor_type not in types:
            types.append(two_factor_type)
    return types


def _interpret_response(resp: HttpResponse) -> AuthUserResult:
    status = resp.status_code
    if not 200 <= status < 300:
        logger.warning(f"[VRChat login] Failed with status {status}")
        return AuthUserResult.failed(f"Error status code: {status}", status_code=status)

    auth_value = extract_auth_cookie_value(resp.headers.get("set-cookie") or "")
    if auth_value is None:
        logger.error("[VRChat login] auth cookie missing from response")
        return AuthUserResult.failed('"auth" field not found in cookies.')

    auth_cookie = AuthCookie.create(auth_value)
    if auth_cookie is None:
        logger.error("[VRChat login] auth cookie has unexpected format")
        return AuthUserResult.failed("Invalid format of auth cookie.")

    data = resp.json()
    if not isinstance(data, dict):
        logger.error(f"[VRChat login] Response body is not an object: {type(data).__name__}")
        return AuthUserResult.failed("Invalid response body.")

    requires = data.get("requiresTwoFactorAuth")
    if _is_falsy_flag(requires):
        logger.info("[VRChat login] Logged in without two factor auth")
        return AuthUserResult.success(auth_cookie)

    if not isinstance(requires, list):
        logger.error(f"[VRChat login] requiresTwoFactorAuth is not a list: {requires!r}")
        return AuthUserResult.failed("Two factor types missing.")

    two_factor_types = _parse_two_factor_types(requires)
    logger.info(
        "[VRChat login] Two factor auth required: "
        f"{[t.value for t in two_factor_types]}"
    )
    return AuthUserResult.requires_two_factor(auth_cookie, two_factor_types)


async def send_auth_user_request(
    credential_data: CredentialData,
    user_agent: ClientUserAgent,
    *,
    transport: HttpTransport | None = None,
    base_url: str = VRCHAT_API_URL,
) -> AuthUserResult:
    """
    Send the login request. Never raises; request errors become a failed result.
    """
    transport = transport or default_transport()
    headers = {
        "Authorization": f"Basic {credential_data.to_base64()}",
        "User-Agent": user_agent.to_header_string(),
    }

    try:
        resp = await transport.get(f"{base_url}/auth/user", headers=headers)
        return _interpret_response(resp)
    except Exception as e:
        logger.error(f"[VRChat login] Request failed: {e}")
        return AuthUserResult.failed(str(e) or "Request failed.")
