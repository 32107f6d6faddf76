from typing import Any

from sisense_sdk.api.base import AbstractApi


class Account(AbstractApi):
    """`/api/v1/account` endpoints (activation and password recovery)."""

    def begin_activate(self, email: str) -> Any:
        """Send an activation email to a newly created user."""
        return self.client.post("/api/v1/account/begin_activate", json={"email": email})

    def activate(self, user_id: str, password: str) -> Any:
        return self.client.post(
            f"/api/v1/account/activate/{user_id}", json={"password": password}
        )

    def forgot_password(self, email: str) -> Any:
        return self.client.post("/api/v1/account/forgot_password", json={"email": email})

    def reset_password(self, user_id: str, password: str) -> Any:
        return self.client.put(
            f"/api/v1/account/password/{user_id}", json={"password": password}
        )
