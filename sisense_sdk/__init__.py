"""Sisense SDK for Python.

Client for the Sisense REST API, covering both the legacy v0.9 (`/api`) and
the v1.0 (`/api/v1`) generations.

Public API:
    SisenseClient - Resolves API handlers and sends authenticated requests
    get_client - SisenseClient configured from SISENSE_* environment variables
    exceptions - Error hierarchy rooted at SisenseError
"""

from sisense_sdk._version import __version__
from sisense_sdk.client import SisenseClient, get_client
from sisense_sdk.exceptions import (
    MissingCredentialsError,
    ResponseDecodeError,
    SisenseConfigError,
    SisenseError,
    SisenseValidationError,
    TransportError,
    UnknownOperationError,
    UnsupportedVersionError,
)

__all__ = [
    "__version__",
    "SisenseClient",
    "get_client",
    "SisenseError",
    "SisenseConfigError",
    "SisenseValidationError",
    "MissingCredentialsError",
    "UnsupportedVersionError",
    "UnknownOperationError",
    "TransportError",
    "ResponseDecodeError",
]
