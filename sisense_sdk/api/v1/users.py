from typing import Any

from sisense_sdk.api.base import AbstractApi


class Users(AbstractApi):
    """`/api/v1/users` endpoints."""

    def all(self, **params: Any) -> Any:
        """List users.

        Args:
            **params: Query filters such as `email`, `groupId`, `limit`, `skip`.
        """
        return self.client.get("/api/v1/users", params=params)

    def get(self, user_id: str, **params: Any) -> Any:
        return self.client.get(f"/api/v1/users/{user_id}", params=params)

    def logged_in(self) -> Any:
        """Return the user the current access token belongs to."""
        return self.client.get("/api/v1/users/loggedin")

    def create(self, data: dict[str, Any]) -> Any:
        return self.client.post("/api/v1/users", json=data)

    def update(self, user_id: str, data: dict[str, Any]) -> Any:
        return self.client.patch(f"/api/v1/users/{user_id}", json=data)

    def delete(self, user_id: str) -> Any:
        return self.client.delete(f"/api/v1/users/{user_id}")

    def bulk_create(self, items: list[dict[str, Any]]) -> Any:
        return self.client.post("/api/v1/users/bulk", json=items)

    def bulk_delete(self, ids: list[str]) -> Any:
        return self.client.delete("/api/v1/users/bulk", params={"ids": ",".join(ids)})
