"""Custom exceptions for VRChat login"""


class VRCLoginError(Exception):
    """Base exception for vrclogin"""

    pass


class LoginFailed(VRCLoginError):
    """Login did not produce an auth cookie"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidTwoFactorType(ValueError, VRCLoginError):
    """Two factor type has no wire form"""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Two factor type has no wire form: {value}")
