"""Minimal immutable response used for gateway rejections.

``send_response`` translates it into ASGI ``send()`` calls.
"""

import json
from dataclasses import dataclass, replace
from typing import Any

from gateguard._internal.asgi import Send


@dataclass(frozen=True, slots=True)
class Response:
    """A complete, non-streaming HTTP response."""

    body: bytes = b""
    status: int = 200
    content_type: str = "text/plain; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    @classmethod
    def json(cls, payload: Any, status: int = 200) -> "Response":
        return cls(
            body=json.dumps(payload).encode("utf-8"),
            status=status,
            content_type="application/json",
        )

    def with_header(self, name: str, value: str) -> "Response":
        """Return a copy with an extra header."""
        return replace(self, headers=(*self.headers, (name, value)))


async def send_response(response: Response, send: Send) -> None:
    """Send *response* as a start message followed by a single body message."""
    raw_headers: list[tuple[bytes, bytes]] = [
        (b"content-type", response.content_type.encode("latin-1")),
        (b"content-length", str(len(response.body)).encode("latin-1")),
    ]
    for name, value in response.headers:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": response.body,
        }
    )
