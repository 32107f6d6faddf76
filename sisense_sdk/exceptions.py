"""Public exceptions for the Sisense SDK."""

from collections.abc import Iterable


class SisenseError(Exception):
    """Base exception for all Sisense SDK errors."""


class SisenseConfigError(SisenseError):
    """Configuration error (missing env vars, invalid config)."""


class MissingCredentialsError(SisenseConfigError):
    """Authentication was requested without a username and password."""


class SisenseValidationError(SisenseError):
    """Validation error for request/response data."""


class UnsupportedVersionError(SisenseError, ValueError):
    """The requested API version is not registered."""

    def __init__(self, version: str) -> None:
        super().__init__(f"Not supported version: {version!r}")
        self.version = version


class UnknownOperationError(SisenseError, ValueError):
    """The logical API name does not exist under the resolved version."""

    def __init__(self, name: str, version: str, available: Iterable[str]) -> None:
        self.name = name
        self.version = version
        self.available = list(available)
        super().__init__(f"Available api : {', '.join(self.available)}")


class TransportError(SisenseError):
    """HTTP call failed (connection, timeout or error status)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResponseDecodeError(SisenseError, ValueError):
    """Response body could not be decoded as JSON."""
