from typing import Any

from sisense_sdk.api.base import AbstractApi


class ElastiCubes(AbstractApi):
    """`/api/elasticubes` endpoints."""

    def all(self, **params: Any) -> Any:
        """List ElastiCubes visible to the current user.

        Args:
            **params: Query filters such as `q`, `sort`, `limit`, `skip`.
        """
        return self.client.get("/api/elasticubes/getElasticubes", params=params)

    def servers(self) -> Any:
        return self.client.get("/api/elasticubes/servers")

    def by_server(self, server: str) -> Any:
        return self.client.get(f"/api/elasticubes/servers/{server}")

    def start(self, server: str, title: str) -> Any:
        return self.client.post(f"/api/elasticubes/{server}/{title}/start")

    def stop(self, server: str, title: str) -> Any:
        return self.client.post(f"/api/elasticubes/{server}/{title}/stop")
