"""Pydantic models for Sisense client state and responses."""

from sisense_sdk.models.auth import AuthToken
from sisense_sdk.models.config import DEFAULT_VERSION, V0_9, V1_0, SessionConfig

__all__ = ["AuthToken", "SessionConfig", "DEFAULT_VERSION", "V0_9", "V1_0"]
