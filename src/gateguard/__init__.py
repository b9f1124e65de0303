"""Gateguard: open-endpoint classification for API gateways.

Decides whether a request path needs authentication, and gates ASGI
apps on that decision.

Basic usage::

    from gateguard import RouterValidator

    validator = RouterValidator()
    validator.is_secured("/orders/42")    # True
    validator.is_secured("/auth/login")   # False

As ASGI middleware::

    from gateguard import AuthenticationFilter

    app = AuthenticationFilter(backend_app, authenticate)
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "OPEN_ENDPOINTS",
    "AuthenticationFilter",
    "ConfigurationError",
    "GatewayConfig",
    "GateguardError",
    "HTTPError",
    "Request",
    "RouterValidator",
    "Unauthorized",
    "is_secured",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import gateguard`` light for callers that only need the
    validator.
    """
    if name in ("OPEN_ENDPOINTS", "RouterValidator", "is_secured"):
        from gateguard import validator

        return getattr(validator, name)

    if name == "AuthenticationFilter":
        from gateguard.filter import AuthenticationFilter

        return AuthenticationFilter

    if name == "GatewayConfig":
        from gateguard.config import GatewayConfig

        return GatewayConfig

    if name == "Request":
        from gateguard.http.request import Request

        return Request

    if name in ("GateguardError", "ConfigurationError", "HTTPError", "Unauthorized"):
        from gateguard import errors

        return getattr(errors, name)

    msg = f"module 'gateguard' has no attribute {name!r}"
    raise AttributeError(msg)
