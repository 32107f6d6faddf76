from typing import Any

from sisense_sdk.api.base import AbstractApi


class Settings(AbstractApi):
    def system(self) -> Any:
        return self.client.get("/api/settings/system")

    def update_system(self, data: dict[str, Any]) -> Any:
        return self.client.post("/api/settings/system", json=data)
