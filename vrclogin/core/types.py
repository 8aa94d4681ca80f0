"""Core data types for VRChat login"""

import base64
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from .exceptions import InvalidTwoFactorType

if TYPE_CHECKING:
    from ..auth.cookie import AuthCookie

# Characters encodeURIComponent leaves alone besides letters, digits and "-_.~"
_URI_COMPONENT_SAFE = "!*'()"


class TwoFactorType(Enum):
    """Two factor methods accepted by the account"""

    INVALID = "invalid"
    EMAIL_OTP = "emailOtp"  # Code sent by email
    TOTP = "totp"  # Authenticator app
    OTP = "otp"  # Recovery code

    @classmethod
    def parse(cls, value: Any) -> "TwoFactorType":
        """Parse a wire string, case-sensitive. Unknown values give INVALID."""
        if not isinstance(value, str) or value == cls.INVALID.value:
            return cls.INVALID
        try:
            return cls(value)
        except ValueError:
            return cls.INVALID

    def to_wire(self) -> str:
        if self is TwoFactorType.INVALID:
            raise InvalidTwoFactorType(self.value)
        return self.value

    @property
    def label(self) -> str:
        """Name used in user facing messages, e.g. "Totp" """
        return self.name.title().replace("_", "")


@dataclass(frozen=True)
class ClientUserAgent:
    """User-Agent identifying the calling application to VRChat"""

    application_name: str
    version: str
    contact_info: str | None = None  # e.g. email or project url

    def __post_init__(self):
        if not self.application_name:
            raise ValueError("application_name is required")
        if not self.version:
            raise ValueError("version is required")

    def to_header_string(self) -> str:
        if self.contact_info:
            return f"{self.application_name}/{self.version} {self.contact_info}"
        return f"{self.application_name}/{self.version}"


def encode_credentials(username: str, password: str) -> str:
    """base64(urlencode(username):urlencode(password)) used for Basic auth"""
    joined = (
        f"{quote(username, safe=_URI_COMPONENT_SAFE)}"
        f":{quote(password, safe=_URI_COMPONENT_SAFE)}"
    )
    return base64.b64encode(joined.encode("ascii")).decode("ascii")


@dataclass(frozen=True)
class CredentialData:
    """Username and password used for login"""

    username: str
    password: str = field(repr=False)

    def to_base64(self) -> str:
        return encode_credentials(self.username, self.password)


class AuthUserResultType(Enum):
    """Outcome of the primary login request"""

    SUCCESS = auto()
    FAILED = auto()
    REQUIRES_TWO_FACTOR_AUTH = auto()


@dataclass(frozen=True)
class AuthUserResult:
    """Result of the primary login request"""

    type: AuthUserResultType
    auth_cookie: "AuthCookie | None" = None
    error_message: str | None = None
    two_factor_types: tuple[TwoFactorType, ...] = ()
    status_code: int | None = None  # Set only when the server rejected the login

    def __post_init__(self):
        if self.type is AuthUserResultType.FAILED:
            if self.auth_cookie is not None:
                raise ValueError("Failed result must not carry an auth cookie")
        elif self.auth_cookie is None:
            raise ValueError(f"{self.type.name} result requires an auth cookie")

    @classmethod
    def success(cls, auth_cookie: "AuthCookie") -> "AuthUserResult":
        return cls(type=AuthUserResultType.SUCCESS, auth_cookie=auth_cookie)

    @classmethod
    def failed(
        cls, error_message: str, status_code: int | None = None
    ) -> "AuthUserResult":
        return cls(
            type=AuthUserResultType.FAILED,
            error_message=error_message,
            status_code=status_code,
        )

    @classmethod
    def requires_two_factor(
        cls, auth_cookie: "AuthCookie", two_factor_types: list[TwoFactorType]
    ) -> "AuthUserResult":
        return cls(
            type=AuthUserResultType.REQUIRES_TWO_FACTOR_AUTH,
            auth_cookie=auth_cookie,
            two_factor_types=tuple(two_factor_types),
        )

    @property
    def is_rejection(self) -> bool:
        """Whether the server answered with an error status (vs. a transport or protocol fault)"""
        return self.status_code is not None
