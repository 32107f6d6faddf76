from typing import Any

from sisense_sdk.api.base import AbstractApi


class Users(AbstractApi):
    """`/api/users` endpoints.

    Unlike v1.0, creation takes a list of users and updates use PUT.
    """

    def all(self, **params: Any) -> Any:
        return self.client.get("/api/users", params=params)

    def get(self, user_id: str) -> Any:
        return self.client.get(f"/api/users/{user_id}")

    def by_username(self, username: str) -> Any:
        return self.client.get("/api/users", params={"search": username})

    def create(self, items: list[dict[str, Any]]) -> Any:
        return self.client.post("/api/users", json=items)

    def update(self, user_id: str, data: dict[str, Any]) -> Any:
        return self.client.put(f"/api/users/{user_id}", json=data)

    def delete(self, user_id: str) -> Any:
        return self.client.delete(f"/api/users/{user_id}")
