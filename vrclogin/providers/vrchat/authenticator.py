"""VRChat authenticator"""

import logging

from ...auth.cookie import AuthCookie
from ...client.base import HttpTransport
from ...core.exceptions import LoginFailed
from ...core.types import ClientUserAgent, CredentialData
from .auth_user import VRCHAT_API_URL
from .totp import login

logger = logging.getLogger(__name__)


class VRChatAuthenticator:
    """VRChat login with TOTP, raising LoginFailed instead of returning a message"""

    def __init__(
        self,
        user_agent: ClientUserAgent,
        totp_secret: str | None = None,
        transport: HttpTransport | None = None,
        base_url: str = VRCHAT_API_URL,
    ):
        self.user_agent = user_agent
        self.totp_secret = totp_secret
        self.transport = transport
        self.base_url = base_url

    async def login(self, credential_data: CredentialData) -> AuthCookie:
        """Login via username + password, answering TOTP when required"""
        result = await login(
            credential_data,
            self.user_agent,
            self.totp_secret or "",
            transport=self.transport,
            base_url=self.base_url,
        )
        if isinstance(result, str):
            logger.warning(f"[VRChat login] Login failed for {credential_data.username}: {result}")
            raise LoginFailed(result)
        return result

    def needs_manual_login(self) -> bool:
        """Without a TOTP secret, two factor codes must come from the user"""
        return not self.totp_secret
