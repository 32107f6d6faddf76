from typing import Any

from sisense_sdk.api.base import AbstractApi


class Authorization(AbstractApi):
    """Legacy `/api/auth` endpoints."""

    def is_authenticated(self) -> Any:
        return self.client.get("/api/auth/isauth")

    def get_token(self, username: str, password: str) -> Any:
        """Legacy login; prefer `SisenseClient.authenticate()`."""
        return self.client.post(
            "/api/v1/authentication",
            data={"username": username, "password": password},
        )
