"""VRChat two factor verification (POST /auth/twofactorauth/{type}/verify)"""

import logging

from ...auth.cookie import AuthCookie
from ...client.base import HttpTransport
from ...core.types import ClientUserAgent, TwoFactorType
from .auth_user import VRCHAT_API_URL

logger = logging.getLogger(__name__)


async def send_two_factor_request(
    code: str,
    two_factor_type: TwoFactorType,
    auth_cookie: AuthCookie,
    user_agent: ClientUserAgent,
    *,
    transport: HttpTransport | None = None,
    base_url: str = VRCHAT_API_URL,
) -> bool:
    """Returns True if VRChat accepted the code. Never raises."""
    client = auth_cookie.create_client(transport)

    try:
        url = f"{base_url}/auth/twofactorauth/{two_factor_type.to_wire()}/verify"
        resp = await client.post(
            url,
            {"code": code},
            headers={"User-Agent": user_agent.to_header_string()},
        )
        status = resp.status_code
    except Exception as e:
        logger.error(f"[VRChat 2FA] Request failed: {e}")
        return False

    if not 200 <= status < 300:
        logger.warning(
            f"[VRChat 2FA] {two_factor_type.value} verification failed with status {status}"
        )
        return False
    return True
