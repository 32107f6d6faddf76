from typing import Any

from sisense_sdk.api.base import AbstractApi


class Application(AbstractApi):
    """`/api/v1/application` endpoints."""

    def status(self) -> Any:
        return self.client.get("/api/v1/application/status")

    def version(self) -> Any:
        return self.client.get("/api/v1/application/version")
