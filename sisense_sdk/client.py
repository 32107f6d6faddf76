"""Sisense REST API client."""

import os
import sys
import threading
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from sisense_sdk._internal.http import DEFAULT_TIMEOUT, create_http_client
from sisense_sdk._internal.redaction import redact_payload
from sisense_sdk.api import VERSION_TABLE, AbstractApi, HandlerFactory, v09, v1
from sisense_sdk.exceptions import (
    MissingCredentialsError,
    ResponseDecodeError,
    SisenseConfigError,
    SisenseValidationError,
    TransportError,
    UnknownOperationError,
    UnsupportedVersionError,
)
from sisense_sdk.models import V1_0, AuthToken, SessionConfig

DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)


class SisenseClient:
    """Client for the Sisense REST API.

    Resource handlers are obtained by logical name, either with `api(name)`
    or through the matching property (`client.users`, `client.elasticubes`).
    The handler class depends on the API version in effect: a one-call
    override set with `use_version()` if pending, else `default_version`.
    Handlers are built lazily and cached per (version, name).

    Example:
        client = SisenseClient("https://bi.example.com")
        client.authenticate("admin@example.com", "secret")

        users = client.users.all()                        # v1.0
        cubes = client.use_version("v0.9").elasticubes.all()

    The client is synchronous. The one-call override and the handler cache
    are guarded by a lock; use `api(name, version=...)` to select a version
    and resolve atomically when sharing a client between threads.
    """

    versions: Mapping[str, Mapping[str, HandlerFactory]] = VERSION_TABLE

    def __init__(
        self,
        base_url: str,
        config: Mapping[str, Any] | None = None,
        http: httpx.Client | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Server root, e.g. "https://bi.example.com". Request
                paths are appended to it verbatim.
            config: Session options. Recognized keys are `v`, `access_token`,
                `default_version`, `username` and `password`; other keys are
                kept as-is.
            http: Transport to use. A caller-supplied client is never closed
                by this object.
            timeout: Request timeout in seconds for the transport built when
                `http` is not given.
            debug: Enable debug logging to stderr.
        """
        try:
            self._config = SessionConfig(**dict(config or {}))
        except ValidationError as e:
            raise SisenseConfigError(f"Invalid client config: {e}") from e

        self._owns_http = http is None
        self._http = http if http is not None else create_http_client(timeout=timeout)
        self._base_url = base_url
        self._cache: dict[tuple[str, str], AbstractApi] = {}
        self._lock = threading.RLock()
        self._debug = debug

    @classmethod
    def from_env(cls) -> "SisenseClient":
        """Create a client from environment variables.

        Required environment variables:
            SISENSE_BASE_URL: The Sisense server root URL.

        Optional environment variables:
            SISENSE_ACCESS_TOKEN: Bearer token to use for all requests.
            SISENSE_USERNAME: Username stored for `authenticate()`.
            SISENSE_PASSWORD: Password stored for `authenticate()`.
            SISENSE_DEFAULT_VERSION: Default API version (default: "v1.0").
            SISENSE_TIMEOUT_MS: Request timeout in milliseconds.
            SISENSE_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured SisenseClient.

        Raises:
            SisenseConfigError: If SISENSE_BASE_URL is not set.
            ValueError: If SISENSE_TIMEOUT_MS is not a valid integer.
        """
        base_url = os.environ.get("SISENSE_BASE_URL")
        if not base_url:
            raise SisenseConfigError("SISENSE_BASE_URL is not set")

        config: dict[str, Any] = {}
        for key, env_var in (
            ("access_token", "SISENSE_ACCESS_TOKEN"),
            ("username", "SISENSE_USERNAME"),
            ("password", "SISENSE_PASSWORD"),
            ("default_version", "SISENSE_DEFAULT_VERSION"),
        ):
            value = os.environ.get(env_var)
            if value:
                config[key] = value

        debug = os.environ.get("SISENSE_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("SISENSE_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(base_url, config, timeout=timeout_ms / 1000, debug=debug)

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[sisense-sdk] {message}", file=sys.stderr)

    # =========================================================================
    # Resolution
    # =========================================================================

    def api(self, name: str, version: str | None = None) -> AbstractApi:
        """Resolve a logical API name to its handler.

        Args:
            name: Logical name, e.g. "users" or "authentication".
            version: If given, applied as a one-call override and resolved in
                the same locked step.

        Returns:
            The cached handler for (version, name), built on first use.

        Raises:
            UnsupportedVersionError: The version in effect is not registered.
                A pending one-call override is left in place.
            UnknownOperationError: `name` is not available in that version.
                The one-call override is consumed all the same.
        """
        with self._lock:
            if version is not None:
                self.use_version(version)

            resolved = self._config.v or self._config.default_version
            classes = self.versions.get(resolved)
            if classes is None:
                raise UnsupportedVersionError(resolved)

            # The override applies to exactly one resolution, even a failed one
            self._config.v = ""

            if name not in classes:
                raise UnknownOperationError(name, resolved, classes)

            key = (resolved, name)
            handler = self._cache.get(key)
            if handler is None:
                handler = classes[name](self)
                self._cache[key] = handler
                self._log_debug(f"Built {resolved} handler for {name!r}")
            return handler

    def use_version(self, version: str, set_as_default: bool = False) -> "SisenseClient":
        """Select the API version for the next resolution.

        Args:
            version: Version identifier, e.g. "v0.9".
            set_as_default: Also make it the default for later resolutions.

        Returns:
            self, so a resolution can be chained.
        """
        with self._lock:
            self._config.v = version
            if set_as_default:
                self._config.default_version = version
        return self

    def v(self, version: str, set_as_default: bool = False) -> "SisenseClient":
        """Alias for `use_version()`."""
        return self.use_version(version, set_as_default)

    def use_access_token(self, access_token: str) -> "SisenseClient":
        self._config.access_token = access_token
        return self

    def authenticate(self, username: str = "", password: str = "") -> None:
        """Log in and store the returned access token.

        Credentials passed here replace stored ones; empty arguments fall
        back to credentials from the constructor config. The login always
        goes through the v1.0 API regardless of `default_version`.

        Raises:
            MissingCredentialsError: No username or password is available.
                No request is made.
            SisenseValidationError: The response carries no access token.
            TransportError: The login request failed.
        """
        if username:
            self._config.username = username
        if password:
            self._config.password = password

        if not self._config.username or not self._config.password:
            raise MissingCredentialsError("Credentials not found")

        auth = self.api("authentication", version=V1_0)
        response = auth.login(  # type: ignore[attr-defined]
            self._config.username, self._config.password
        )

        try:
            token = AuthToken.model_validate(response)
        except ValidationError as e:
            raise SisenseValidationError(f"Unexpected login response: {e}") from e

        self._log_debug(f"Authenticated as {self._config.username}")
        self.use_access_token(token.access_token)

    # =========================================================================
    # Accessors
    # =========================================================================

    def get_base_url(self) -> str:
        return self._base_url

    def get_http(self) -> httpx.Client:
        return self._http

    def get_access_token(self) -> str:
        return self._config.access_token

    @property
    def config(self) -> SessionConfig:
        """A copy of the current session config."""
        return self._config.model_copy(deep=True)

    # =========================================================================
    # Resource Handlers
    # =========================================================================

    @property
    def authentication(self) -> v1.Authentication:
        return self.api("authentication")  # type: ignore[return-value]

    @property
    def users(self) -> v1.Users | v09.Users:
        return self.api("users")  # type: ignore[return-value]

    @property
    def groups(self) -> v1.Groups | v09.Groups:
        return self.api("groups")  # type: ignore[return-value]

    @property
    def application(self) -> v1.Application:
        return self.api("application")  # type: ignore[return-value]

    @property
    def account(self) -> v1.Account:
        return self.api("account")  # type: ignore[return-value]

    @property
    def admin(self) -> v1.Admin:
        return self.api("admin")  # type: ignore[return-value]

    @property
    def authorization(self) -> v09.Authorization:
        return self.api("authorization")  # type: ignore[return-value]

    @property
    def elasticubes(self) -> v09.ElastiCubes:
        return self.api("elasticubes")  # type: ignore[return-value]

    @property
    def branding(self) -> v09.Branding:
        return self.api("branding")  # type: ignore[return-value]

    @property
    def reporting(self) -> v09.Reporting:
        return self.api("reporting")  # type: ignore[return-value]

    @property
    def palettes(self) -> v09.Palettes:
        return self.api("palettes")  # type: ignore[return-value]

    @property
    def settings(self) -> v09.Settings:
        return self.api("settings")  # type: ignore[return-value]

    @property
    def roles(self) -> v09.Roles:
        return self.api("roles")  # type: ignore[return-value]

    @property
    def data_sources(self) -> v09.DataSources:
        return self.api("data_sources")  # type: ignore[return-value]

    @property
    def geo(self) -> v09.Geo:
        return self.api("geo")  # type: ignore[return-value]

    # =========================================================================
    # HTTP
    # =========================================================================

    def run_request(self, path: str, method: str, **options: Any) -> Any:
        """Send a request to `base_url + path` and decode the JSON response.

        Adds `Authorization: Bearer <access_token>` when a token is set and
        the caller did not pass an Authorization header of their own.

        Args:
            path: Request path, appended to the base URL.
            method: HTTP method.
            **options: Passed to `httpx.Client.request` unchanged (`params`,
                `json`, `data`, `headers`, `timeout`, ...).

        Returns:
            The decoded JSON body, or None for an empty body.

        Raises:
            TransportError: Network failure, timeout or an error status.
            ResponseDecodeError: The body is not valid JSON.
        """
        headers = httpx.Headers(options.pop("headers", None))
        access_token = self._config.access_token
        if access_token and not headers.get("Authorization"):
            headers["Authorization"] = f"Bearer {access_token}"

        url = self._base_url + path
        self._log_debug(f"{method} {url} {redact_payload({'headers': headers, **options})}")

        try:
            response = self._http.request(method, url, headers=headers, **options)
            # Only 4xx/5xx are failures; an unfollowed 3xx is returned as-is
            if response.is_error:
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            self._log_debug(f"{method} {url} failed with status {status_code}")
            raise TransportError(
                f"{method} {url} failed with status {status_code}", status_code=status_code
            ) from e
        except httpx.HTTPError as e:
            self._log_debug(f"{method} {url} error: {e}")
            raise TransportError(f"{method} {url} failed: {e}") from e

        return self._decode(response)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        """Decode a JSON response body; an empty body decodes to None."""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ResponseDecodeError(
                f"Invalid JSON in response from {response.request.url}: {e}"
            ) from e

    def get(self, path: str, **options: Any) -> Any:
        return self.run_request(path, "GET", **options)

    def post(self, path: str, **options: Any) -> Any:
        return self.run_request(path, "POST", **options)

    def put(self, path: str, **options: Any) -> Any:
        return self.run_request(path, "PUT", **options)

    def patch(self, path: str, **options: Any) -> Any:
        return self.run_request(path, "PATCH", **options)

    def delete(self, path: str, **options: Any) -> Any:
        return self.run_request(path, "DELETE", **options)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "SisenseClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def get_client() -> SisenseClient:
    """Get a client configured from environment variables.

    Returns:
        A configured SisenseClient instance.

    Raises:
        SisenseConfigError: If SISENSE_BASE_URL is not set.
    """
    return SisenseClient.from_env()
