"""ASGI authentication filter.

Wraps a downstream ASGI app and applies the open-endpoint check to every
HTTP request. Open paths go straight through; secured paths must be
accepted by a caller-supplied authenticator first::

    from gateguard import AuthenticationFilter

    async def authenticate(request):
        token = request.headers.get("authorization")
        return await sessions.lookup(token)   # principal or None

    app = AuthenticationFilter(backend_app, authenticate)

The authenticator may be ``def`` or ``async def``. Plain functions run in
a worker thread. It returns a principal (anything truthy) to let the
request through, or a falsy value / raises ``Unauthorized`` to reject it.
Headers carried by ``Unauthorized`` are added to the rejection, replacing
the configured ``WWW-Authenticate`` when they set one. Any other exception
propagates to the server.

The decision is recorded in the scope for downstream apps:

    ``scope["gateguard.secured"]``    -- classification of the path
    ``scope["gateguard.principal"]``  -- authenticator result (secured only)
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias

from gateguard._internal.asgi import ASGIApp, Receive, Scope, Send
from gateguard._internal.invoke import invoke
from gateguard.config import GatewayConfig, validate_config
from gateguard.errors import ConfigurationError, Unauthorized
from gateguard.http.request import Request
from gateguard.http.response import Response, send_response
from gateguard.security.audit import emit_security_event
from gateguard.validator import RouterValidator

logger = logging.getLogger("gateguard.filter")

Authenticator: TypeAlias = Callable[[Request], Any | Awaitable[Any]]

SECURED_KEY = "gateguard.secured"
PRINCIPAL_KEY = "gateguard.principal"


class AuthenticationFilter:
    """ASGI middleware gating secured paths behind an authenticator."""

    __slots__ = ("_app", "_authenticate", "_config", "_validator")

    def __init__(
        self,
        app: ASGIApp,
        authenticate: Authenticator,
        config: GatewayConfig | None = None,
        validator: RouterValidator | None = None,
    ) -> None:
        if not callable(authenticate):
            msg = f"authenticate must be callable, got {type(authenticate).__name__}"
            raise ConfigurationError(msg)
        self._app = app
        self._authenticate = authenticate
        self._config = validate_config(config or GatewayConfig())
        self._validator = validator or RouterValidator(self._config.open_endpoints)

    @property
    def validator(self) -> RouterValidator:
        return self._validator

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self._app(scope, receive, send)
            return

        request = Request.from_scope(scope)
        endpoint = self._validator.matching_endpoint(request.path)
        secured = endpoint is None
        scope[SECURED_KEY] = secured

        if not secured:
            logger.debug("%s %s matches open endpoint %s", request.method, request.url, endpoint)
            emit_security_event(
                "gateway.request.open",
                secured=False,
                request=request,
                endpoint=endpoint,
            )
            await self._app(scope, receive, send)
            return

        try:
            principal = await invoke(self._authenticate, request)
        except Unauthorized as exc:
            await self._reject(request, send, reason="rejected", detail=exc.detail, headers=exc.headers)
            return

        if not principal:
            if request.headers.has_credentials(self._config.token_header):
                reason = "invalid_credentials"
            else:
                reason = "missing_credentials"
            await self._reject(request, send, reason=reason)
            return

        emit_security_event("gateway.auth.success", secured=True, request=request)
        scope[PRINCIPAL_KEY] = principal
        await self._app(scope, receive, send)

    async def _reject(
        self,
        request: Request,
        send: Send,
        *,
        reason: str,
        detail: str | None = None,
        headers: tuple[tuple[str, str], ...] = (),
    ) -> None:
        cfg = self._config
        logger.info("Rejected %s %s (%s)", request.method, request.url, reason)
        emit_security_event(
            "gateway.auth.rejected",
            secured=True,
            request=request,
            reason=reason,
        )
        response = Response.json(
            {"error": detail or cfg.unauthorized_detail},
            status=cfg.unauthorized_status,
        )
        names = {name.lower() for name, _ in headers}
        if cfg.www_authenticate is not None and "www-authenticate" not in names:
            response = response.with_header("WWW-Authenticate", cfg.www_authenticate)
        for name, value in headers:
            response = response.with_header(name, value)
        await send_response(response, send)
