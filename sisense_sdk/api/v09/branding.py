from typing import Any

from sisense_sdk.api.base import AbstractApi


class Branding(AbstractApi):
    def get(self) -> Any:
        return self.client.get("/api/branding")

    def update(self, data: dict[str, Any]) -> Any:
        return self.client.post("/api/branding", json=data)
