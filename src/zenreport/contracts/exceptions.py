"""Exception hierarchy for zenreport.

All zenreport exceptions inherit from :class:`ZenReportError`, so callers can
catch any library error with a single ``except`` clause while still handling
specific failure modes.
"""

from __future__ import annotations


class ZenReportError(Exception):
    """Base exception for all zenreport errors."""


class ConfigError(ZenReportError):
    """Configuration loading or validation failure."""


class FetchError(ZenReportError):
    """A request to the ZenHub API did not produce the expected records.

    Attributes:
        operation: Name of the failed operation (e.g. ``"repository lookup"``),
            or *None* when raised outside an operation context.
    """

    def __init__(self, message: str = "", *, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation

    def __str__(self) -> str:
        message = super().__str__()
        if self.operation:
            return f"{self.operation} failed: {message}"
        return message


class AuthenticationError(FetchError):
    """The API rejected the supplied credentials."""


class TransportError(FetchError):
    """Network, timeout, or unexpected HTTP status failure."""


class DecodeError(FetchError):
    """Response body does not match the expected record shape."""
