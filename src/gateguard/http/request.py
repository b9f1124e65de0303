"""Read-only request view built from an ASGI HTTP scope.

The gateway never reads the body, so only metadata is captured.
"""

from dataclasses import dataclass

from gateguard._internal.asgi import HTTPScope, Scope
from gateguard.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` may be ``None`` when the server supplied a malformed scope;
    the validator classifies such requests as secured.
    """

    method: str
    path: str | None
    headers: Headers
    query_string: bytes = b""
    client: tuple[str, int] | None = None

    @classmethod
    def from_scope(cls, scope: Scope) -> "Request":
        http = HTTPScope.from_scope(scope)
        return cls(
            method=http.method,
            path=http.path,
            headers=Headers(http.headers),
            query_string=http.query_string,
            client=http.client,
        )

    @property
    def url(self) -> str:
        """Path plus query string, for logging."""
        path = self.path or ""
        if self.query_string:
            return f"{path}?{self.query_string.decode('latin-1')}"
        return path
