"""Gateguard exception hierarchy.

Shared by the validator, config and filter so every module raises and
catches the same types.
"""

from dataclasses import dataclass


class GateguardError(Exception):
    """Base for all gateguard-specific errors."""


class ConfigurationError(GateguardError):
    """Raised when gateway configuration is invalid.

    Raised eagerly, when the config or filter is constructed.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(GateguardError):
    """An error that maps directly to an HTTP status code.

    The filter turns these into a JSON rejection response.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class Unauthorized(HTTPError):  # noqa: N818
    """401: the request targets a secured path and was not authenticated."""

    def __init__(
        self,
        detail: str = "Unauthorized",
        headers: tuple[tuple[str, str], ...] = (),
    ) -> None:
        super().__init__(status=401, detail=detail, headers=headers)
