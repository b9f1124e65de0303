"""Gateway configuration.

GatewayConfig is a frozen dataclass: immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass

from gateguard.errors import ConfigurationError
from gateguard.validator import OPEN_ENDPOINTS


@dataclass(frozen=True, slots=True)
class GatewayConfig:
    """Gateway configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = GatewayConfig(open_endpoints=("/auth", "/health"))
    """

    # Classification
    open_endpoints: tuple[str, ...] = OPEN_ENDPOINTS

    # Credentials
    token_header: str = "Authorization"

    # Rejections
    unauthorized_status: int = 401
    unauthorized_detail: str = "Unauthorized"
    www_authenticate: str | None = "Bearer"  # None omits the header


def _check_header_value(field_name: str, value: str) -> None:
    # ASGI header names and values are latin-1 bytes
    try:
        value.encode("latin-1")
    except UnicodeEncodeError:
        msg = f"{field_name} must be latin-1 encodable, got {value!r}"
        raise ConfigurationError(msg) from None


def validate_config(config: GatewayConfig) -> GatewayConfig:
    """Check *config* and return it unchanged.

    Raises:
        ConfigurationError: On an empty or non-string open endpoint, a
            blank or non-latin-1 header setting, or a rejection status
            outside 4xx.
    """
    for endpoint in config.open_endpoints:
        if not isinstance(endpoint, str):
            msg = f"Open endpoint must be a string, got {type(endpoint).__name__}: {endpoint!r}"
            raise ConfigurationError(msg)
        if not endpoint:
            # "" is a substring of every path
            msg = "Open endpoint must not be empty; it would disable authentication for every path."
            raise ConfigurationError(msg)

    if not config.token_header.strip():
        msg = "token_header must not be blank"
        raise ConfigurationError(msg)
    _check_header_value("token_header", config.token_header)
    if config.www_authenticate is not None:
        _check_header_value("www_authenticate", config.www_authenticate)

    if not 400 <= config.unauthorized_status < 500:
        msg = f"unauthorized_status must be a 4xx code, got {config.unauthorized_status}"
        raise ConfigurationError(msg)

    return config
