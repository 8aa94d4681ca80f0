"""VRChat account login with two factor auth"""

from .auth.cookie import AuthCookie, AuthenticatedClient
from .core.exceptions import InvalidTwoFactorType, LoginFailed, VRCLoginError
from .core.types import (
    AuthUserResult,
    AuthUserResultType,
    ClientUserAgent,
    CredentialData,
    TwoFactorType,
    encode_credentials,
)
from .providers.vrchat import (
    TotpCodeGenerator,
    VRChatAuthenticator,
    login,
    login_with_code,
    send_auth_user_request,
    send_two_factor_request,
)

__all__ = [
    "AuthCookie",
    "AuthenticatedClient",
    "AuthUserResult",
    "AuthUserResultType",
    "ClientUserAgent",
    "CredentialData",
    "InvalidTwoFactorType",
    "LoginFailed",
    "TotpCodeGenerator",
    "TwoFactorType",
    "VRChatAuthenticator",
    "VRCLoginError",
    "encode_credentials",
    "login",
    "login_with_code",
    "send_auth_user_request",
    "send_two_factor_request",
]
