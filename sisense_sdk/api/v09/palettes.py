from typing import Any

from sisense_sdk.api.base import AbstractApi


class Palettes(AbstractApi):
    """`/api/palettes` endpoints."""

    def all(self) -> Any:
        return self.client.get("/api/palettes")

    def get(self, name: str) -> Any:
        return self.client.get(f"/api/palettes/{name}")

    def create(self, data: dict[str, Any]) -> Any:
        return self.client.post("/api/palettes", json=data)

    def update(self, name: str, data: dict[str, Any]) -> Any:
        return self.client.put(f"/api/palettes/{name}", json=data)

    def delete(self, name: str) -> Any:
        return self.client.delete(f"/api/palettes/{name}")
