from typing import Any

from sisense_sdk.api.base import AbstractApi


class Authentication(AbstractApi):
    """`/api/v1/authentication` endpoints."""

    def login(self, username: str, password: str) -> Any:
        """Exchange credentials for an access token.

        Returns:
            Decoded response, containing `access_token` on success.
        """
        return self.client.post(
            "/api/v1/authentication/login",
            data={"username": username, "password": password},
        )

    def logout(self) -> Any:
        return self.client.get("/api/v1/authentication/logout")
