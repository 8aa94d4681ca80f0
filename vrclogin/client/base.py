"""HTTP transport protocol"""

from typing import Any, Protocol


class HttpResponse(Protocol):
    """Response fields the login steps rely on"""

    status_code: int

    @property
    def headers(self) -> Any:
        """Mapping-like headers; repeated Set-Cookie values joined by ", " """
        ...

    def json(self) -> Any:
        """Parse body as JSON"""
        ...


class HttpTransport(Protocol):
    """Protocol for the HTTP client used to talk to VRChat"""

    async def get(self, url: str, headers: dict[str, str]) -> HttpResponse:
        """Send a GET request"""
        ...

    async def post(self, url: str, headers: dict[str, str], json: Any) -> HttpResponse:
        """Send a POST request with a JSON body"""
        ...
