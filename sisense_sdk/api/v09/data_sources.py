from typing import Any

from sisense_sdk.api.base import AbstractApi


class DataSources(AbstractApi):
    def all(self, **params: Any) -> Any:
        return self.client.get("/api/datasources", params=params)
