"""Login with two factor auth, TOTP by default"""

import hashlib
import inspect
import logging
from typing import Awaitable, Callable

import pyotp

from ...auth.base import CodeGenerator
from ...auth.cookie import AuthCookie
from ...client.base import HttpTransport
from ...core.types import (
    AuthUserResultType,
    ClientUserAgent,
    CredentialData,
    TwoFactorType,
)
from .auth_user import VRCHAT_API_URL, send_auth_user_request
from .two_factor import send_two_factor_request

logger = logging.getLogger(__name__)

TOTP_DIGITS = 6
TOTP_INTERVAL = 30  # seconds

CodeSource = Callable[[], "str | Awaitable[str]"]


class TotpCodeGenerator:
    """RFC 6238 code generator (6 digits, 30 second step, SHA-1)"""

    def __init__(self, digits: int = TOTP_DIGITS, interval: int = TOTP_INTERVAL):
        self.digits = digits
        self.interval = interval

    def generate(self, secret: str) -> str:
        """Current code for a base32 secret"""
        totp = pyotp.TOTP(
            secret, digits=self.digits, interval=self.interval, digest=hashlib.sha1
        )
        return totp.now()


async def _verify_second_factor(
    two_factor_type: TwoFactorType,
    code_source: CodeSource,
    auth_cookie: AuthCookie,
    user_agent: ClientUserAgent,
    transport: HttpTransport | None,
    base_url: str,
) -> bool:
    try:
        code = code_source()
        if inspect.isawaitable(code):
            code = await code
    except Exception as e:
        logger.error(f"[VRChat 2FA] Could not get {two_factor_type.value} code: {e}")
        return False

    return await send_two_factor_request(
        code,
        two_factor_type,
        auth_cookie,
        user_agent,
        transport=transport,
        base_url=base_url,
    )


async def login_with_code(
    credential_data: CredentialData,
    user_agent: ClientUserAgent,
    two_factor_type: TwoFactorType,
    code_source: CodeSource,
    *,
    secret_hint: str = "code",
    transport: HttpTransport | None = None,
    base_url: str = VRCHAT_API_URL,
) -> AuthCookie | str:
    """
    Login, answering a two factor challenge with the given method if asked.

    Args:
        credential_data: Username and password
        user_agent: User-Agent sent with every request
        two_factor_type: Method used when VRChat requires two factor auth
        code_source: Called only when a code is needed; may return an awaitable
        secret_hint: What to check when the code is rejected, used in the message
        transport: HTTP transport, curl_cffi by default
        base_url: VRChat API root

    Returns:
        AuthCookie on success, otherwise a message explaining the failure
    """
    result = await send_auth_user_request(
        credential_data, user_agent, transport=transport, base_url=base_url
    )

    if result.type is AuthUserResultType.SUCCESS:
        return result.auth_cookie

    if result.type is AuthUserResultType.FAILED:
        return result.error_message or "Invalid username or password"

    if result.type is AuthUserResultType.REQUIRES_TWO_FACTOR_AUTH:
        if two_factor_type not in result.two_factor_types:
            return f"{two_factor_type.label} is not included in the account login method."

        is_success = await _verify_second_factor(
            two_factor_type,
            code_source,
            result.auth_cookie,
            user_agent,
            transport,
            base_url,
        )
        if not is_success:
            return f"{two_factor_type.label} auth failed. check {secret_hint}."

        logger.info(f"[VRChat login] Logged in with {two_factor_type.value}")
        return result.auth_cookie

    raise AssertionError(f"Unhandled login result type: {result.type}")


async def login(
    credential_data: CredentialData,
    user_agent: ClientUserAgent,
    totp_secret: str,
    *,
    transport: HttpTransport | None = None,
    base_url: str = VRCHAT_API_URL,
    code_generator: CodeGenerator | None = None,
) -> AuthCookie | str:
    """
    Login using TOTP for two factor auth.

    Args:
        credential_data: Username and password
        user_agent: User-Agent sent with every request
        totp_secret: Base32 secret shown when TOTP was enabled on the account

    Returns:
        AuthCookie on success, otherwise a message explaining the failure
    """
    generator = code_generator or TotpCodeGenerator()
    return await login_with_code(
        credential_data,
        user_agent,
        TwoFactorType.TOTP,
        lambda: generator.generate(totp_secret),
        secret_hint="totp_secret",
        transport=transport,
        base_url=base_url,
    )
