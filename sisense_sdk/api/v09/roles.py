from typing import Any

from sisense_sdk.api.base import AbstractApi


class Roles(AbstractApi):
    def all(self) -> Any:
        return self.client.get("/api/roles")

    def get(self, role_id: str) -> Any:
        return self.client.get(f"/api/roles/{role_id}")
