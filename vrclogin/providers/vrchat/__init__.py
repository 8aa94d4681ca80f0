"""VRChat login"""

from .auth_user import VRCHAT_API_URL, extract_auth_cookie_value, send_auth_user_request
from .authenticator import VRChatAuthenticator
from .totp import TotpCodeGenerator, login, login_with_code
from .two_factor import send_two_factor_request

__all__ = [
    "VRCHAT_API_URL",
    "TotpCodeGenerator",
    "VRChatAuthenticator",
    "extract_auth_cookie_value",
    "login",
    "login_with_code",
    "send_auth_user_request",
    "send_two_factor_request",
]
