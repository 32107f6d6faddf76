from typing import Any

from sisense_sdk.api.base import AbstractApi


class Reporting(AbstractApi):
    def export(self, data: dict[str, Any]) -> Any:
        """Send a dashboard report (email/PDF) as described by `data`."""
        return self.client.post("/api/reporting", json=data)
