"""Base class for API resource handlers."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sisense_sdk.client import SisenseClient


class AbstractApi:
    """Resource handler bound to a `SisenseClient`.

    Handlers never talk to the network directly: every call goes through the
    client's verb helpers so that authentication and error handling stay in
    one place.
    """

    def __init__(self, client: "SisenseClient") -> None:
        self.client = client

    def __repr__(self) -> str:
        return f"<{self.__class__.__module__}.{self.__class__.__name__}>"
