"""Authenticator and code generator protocols"""

from typing import TYPE_CHECKING, Protocol

from ..core.types import CredentialData

if TYPE_CHECKING:
    from .cookie import AuthCookie


class Authenticator(Protocol):
    """Protocol for account authentication"""

    async def login(self, credential_data: CredentialData) -> "AuthCookie":
        """
        Login and return the auth cookie. Raises LoginFailed otherwise.
        """
        ...

    def needs_manual_login(self) -> bool:
        """Whether this auth method requires user interaction"""
        ...


class CodeGenerator(Protocol):
    """Protocol for one-time code generation from a shared secret"""

    def generate(self, secret: str) -> str:
        """Return the code valid for the current time window"""
        ...
