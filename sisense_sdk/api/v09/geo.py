from typing import Any

from sisense_sdk.api.base import AbstractApi


class Geo(AbstractApi):
    """`/api/geo` endpoints for geographic lookups used by map widgets."""

    def all(self) -> Any:
        return self.client.get("/api/geo")

    def query(self, data: dict[str, Any]) -> Any:
        return self.client.post("/api/geo/query", json=data)
