from typing import Any

from sisense_sdk.api.base import AbstractApi


class Groups(AbstractApi):
    """`/api/groups` endpoints."""

    def all(self, **params: Any) -> Any:
        return self.client.get("/api/groups", params=params)

    def get(self, group_id: str) -> Any:
        return self.client.get(f"/api/groups/{group_id}")

    def create(self, data: dict[str, Any]) -> Any:
        return self.client.post("/api/groups", json=data)

    def update(self, group_id: str, data: dict[str, Any]) -> Any:
        return self.client.put(f"/api/groups/{group_id}", json=data)

    def delete(self, group_id: str) -> Any:
        return self.client.delete(f"/api/groups/{group_id}")
