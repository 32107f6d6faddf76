from typing import Any

from sisense_sdk.api.base import AbstractApi


class Groups(AbstractApi):
    """`/api/v1/groups` endpoints."""

    def all(self, **params: Any) -> Any:
        return self.client.get("/api/v1/groups", params=params)

    def get(self, group_id: str, **params: Any) -> Any:
        return self.client.get(f"/api/v1/groups/{group_id}", params=params)

    def create(self, data: dict[str, Any]) -> Any:
        return self.client.post("/api/v1/groups", json=data)

    def update(self, group_id: str, data: dict[str, Any]) -> Any:
        return self.client.patch(f"/api/v1/groups/{group_id}", json=data)

    def delete(self, group_id: str) -> Any:
        return self.client.delete(f"/api/v1/groups/{group_id}")

    def bulk_create(self, items: list[dict[str, Any]]) -> Any:
        return self.client.post("/api/v1/groups/bulk", json=items)

    def bulk_delete(self, ids: list[str]) -> Any:
        return self.client.delete("/api/v1/groups/bulk", params={"ids": ",".join(ids)})
