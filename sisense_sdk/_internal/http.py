"""Default transport for `SisenseClient`."""

import httpx

from sisense_sdk._version import __version__

DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_REDIRECTS = 5

USER_AGENT = f"sisense-sdk/{__version__}"


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
) -> httpx.Client:
    """Build the httpx.Client used when the caller does not supply one.

    Redirects are followed, so a proxy sending http→https or a moved
    `/sisense` prefix is transparent to callers. The client has no base URL;
    `SisenseClient.run_request` joins base URL and path itself.

    Args:
        timeout: Request timeout in seconds.
        max_redirects: Redirect hops allowed before httpx gives up.
    """
    return httpx.Client(
        timeout=timeout,
        follow_redirects=True,
        max_redirects=max_redirects,
        headers={"User-Agent": USER_AGENT},
    )
