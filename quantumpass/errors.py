"""
Exception hierarchy shared by the quantumpass pipeline.
"""

from __future__ import annotations


class QuantumPassError(Exception):
    """Base error for anything that can stop a generation request."""


class InvalidLengthError(QuantumPassError, ValueError):
    """Requested length is not an integer in 0..255."""


class ConfigError(QuantumPassError):
    """Config file missing, unreadable, malformed, or without an API key."""


class QuantumNumbersError(QuantumPassError):
    """Base error for the quantum numbers API client."""


class QuantumNumbersApiError(QuantumNumbersError):
    """API answered with a non-200 status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"API request failed ({status_code}): {body}")
        self.status_code = status_code
        self.body = body


class QuantumNumbersTransportError(QuantumNumbersError):
    """Request never got an HTTP answer (DNS, connect, timeout)."""


class ShortBufferError(QuantumPassError, ValueError):
    """Fewer random bytes than password characters requested."""

    def __init__(self, available: int, required: int) -> None:
        super().__init__(
            f"received {available} random bytes, {required} required"
        )
        self.available = available
        self.required = required


__all__ = [
    "QuantumPassError",
    "InvalidLengthError",
    "ConfigError",
    "QuantumNumbersError",
    "QuantumNumbersApiError",
    "QuantumNumbersTransportError",
    "ShortBufferError",
]
