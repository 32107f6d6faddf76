from typing import Any

from sisense_sdk.api.base import AbstractApi


class Admin(AbstractApi):
    """`/api/v1/admin` endpoints. Require an administrator token."""

    def tenants(self) -> Any:
        return self.client.get("/api/v1/admin/tenants")

    def system_settings(self) -> Any:
        return self.client.get("/api/v1/admin/system_settings")
