"""Open-endpoint path classification.

Decides whether a request path must be authenticated. A path is *open*
when it contains one of the configured open-endpoint fragments and
*secured* otherwise::

    from gateguard.validator import RouterValidator

    validator = RouterValidator()
    validator.is_secured("/orders/42")      # True
    validator.is_secured("/auth/login")     # False
    validator(request)                      # same check, any object with .path

Matching is plain, case-sensitive substring containment: ``/auth`` also
opens ``/orders/auth``. A missing path is treated as secured.
"""

import logging
from collections.abc import Iterable
from typing import Any

logger = logging.getLogger("gateguard.validator")

# Paths reachable without authentication
OPEN_ENDPOINTS: tuple[str, ...] = (
    "/auth",
    "/swagger-ui.html",
    "/v3/api-docs",
)


def _path_of(target: Any) -> str | None:
    if target is None or isinstance(target, str):
        return target
    return getattr(target, "path", None)


class RouterValidator:
    """Immutable classifier over a fixed tuple of open-endpoint fragments.

    Holds no per-request state, so one instance can be shared by every
    request handled by the process.
    """

    __slots__ = ("_open_endpoints",)

    def __init__(self, open_endpoints: Iterable[str] = OPEN_ENDPOINTS) -> None:
        object.__setattr__(self, "_open_endpoints", tuple(open_endpoints))

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    @property
    def open_endpoints(self) -> tuple[str, ...]:
        """The configured fragments, in declaration order."""
        return self._open_endpoints

    def matching_endpoint(self, path: str | None) -> str | None:
        """Return the first open-endpoint fragment contained in *path*."""
        if path is None:
            return None
        for endpoint in self._open_endpoints:
            if endpoint in path:
                return endpoint
        return None

    def is_secured(self, target: Any) -> bool:
        """True if *target* (a path or request) needs authentication."""
        path = _path_of(target)
        if path is None:
            logger.debug("No request path; treating as secured")
            return True
        return self.matching_endpoint(path) is None

    def is_open(self, target: Any) -> bool:
        """True if *target* matches an open endpoint."""
        return not self.is_secured(target)

    __call__ = is_secured

    def __repr__(self) -> str:
        return f"RouterValidator(open_endpoints={self._open_endpoints!r})"


_default = RouterValidator()


def is_secured(target: Any) -> bool:
    """Classify *target* against the default ``OPEN_ENDPOINTS``."""
    return _default.is_secured(target)
