"""Session configuration held by a `SisenseClient`."""

from pydantic import BaseModel

# =============================================================================
# Constants
# =============================================================================

V0_9 = "v0.9"
V1_0 = "v1.0"
DEFAULT_VERSION = V1_0

# =============================================================================
# Session Config
# =============================================================================


class SessionConfig(BaseModel):
    """Mutable per-client session state.

    Fields:
        v: One-call version override, consumed by the next resolution ("" = none)
        access_token: Bearer token attached to outgoing requests ("" = none)
        default_version: Version used when no one-call override is pending
        username: Stored login name for `authenticate()`
        password: Stored password for `authenticate()`

    Unrecognized keys are retained as extra fields.
    """

    v: str = ""
    access_token: str = ""
    default_version: str = DEFAULT_VERSION
    username: str = ""
    password: str = ""

    model_config = {"extra": "allow"}
