"""Gateway decision events.

Every request the filter handles produces one ``SecurityEvent``: open
pass-through, successful authentication, or rejection. Register a sink to
forward them to logs, metrics, or a SIEM::

    from gateguard.security import set_security_event_sink

    set_security_event_sink(siem.forward)

Delivery never affects the request. A sink that raises is logged on
``gateguard.security`` and the request carries on.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from time import time
from typing import Any, TypeAlias

_log = logging.getLogger("gateguard.security")


@dataclass(frozen=True, slots=True)
class SecurityEvent:
    """One gateway decision.

    Attributes:
        name: ``gateway.request.open``, ``gateway.auth.success`` or
            ``gateway.auth.rejected``.
        secured: Classification of the request path.
        endpoint: Open-endpoint fragment that matched (open requests only).
        reason: Why the request was rejected (rejections only).
    """

    name: str
    secured: bool
    path: str | None = None
    method: str | None = None
    endpoint: str | None = None
    reason: str | None = None
    timestamp: float = field(default_factory=time)


SecurityEventSink: TypeAlias = Callable[[SecurityEvent], None]


_lock = threading.Lock()
_sink: SecurityEventSink | None = None


def set_security_event_sink(sink: SecurityEventSink | None) -> SecurityEventSink | None:
    """Install *sink* process-wide and return the one it replaces.

    ``None`` turns delivery off.
    """
    global _sink
    with _lock:
        previous, _sink = _sink, sink
    return previous


def emit_security_event(
    name: str,
    *,
    secured: bool,
    request: Any | None = None,
    endpoint: str | None = None,
    reason: str | None = None,
) -> SecurityEvent | None:
    """Build a ``SecurityEvent`` and hand it to the sink.

    Returns the delivered event, or ``None`` when no sink is installed or
    the sink raised.
    """
    with _lock:
        sink = _sink
    if sink is None:
        return None

    event = SecurityEvent(
        name=name,
        secured=secured,
        path=getattr(request, "path", None),
        method=getattr(request, "method", None),
        endpoint=endpoint,
        reason=reason,
    )
    try:
        sink(event)
    except Exception:
        _log.exception("Security event sink failed for %s", name)
        return None
    return event
