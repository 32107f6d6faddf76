"""Authentication response models."""

from pydantic import BaseModel, Field


class AuthToken(BaseModel):
    """Login response returned by `POST /api/v1/authentication/login`.

    Only `access_token` is required; the server also sends fields such as
    `success` and `message`, which are kept as extras.
    """

    access_token: str = Field(min_length=1)

    model_config = {"extra": "allow"}
