"""Security audit events emitted by the gateway filter."""

from gateguard.security.audit import SecurityEvent, emit_security_event, set_security_event_sink

__all__ = ["SecurityEvent", "emit_security_event", "set_security_event_sink"]
