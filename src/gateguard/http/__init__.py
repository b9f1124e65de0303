"""HTTP primitives the gateway needs: a read-only request view and a
minimal response for rejections."""

from gateguard.http.headers import Headers
from gateguard.http.request import Request
from gateguard.http.response import Response, send_response

__all__ = ["Headers", "Request", "Response", "send_response"]
