"""Tests for SisenseClient resolution, configuration and lifecycle."""

import os
import threading
from unittest.mock import patch

import httpx
import pytest
import respx

from sisense_sdk import SisenseClient, get_client
from sisense_sdk.api import VERSION_TABLE, v1, v09
from sisense_sdk.exceptions import (
    SisenseConfigError,
    UnknownOperationError,
    UnsupportedVersionError,
)

BASE_URL = "http://sisense.test"

VERSION_NAME_PAIRS = [
    (version, name) for version, classes in VERSION_TABLE.items() for name in classes
]


class TestVersionTable:
    """Tests for the static version table."""

    def test_declares_both_generations(self):
        """Should register v0.9 and v1.0."""
        assert set(VERSION_TABLE) == {"v0.9", "v1.0"}

    def test_v1_names(self):
        assert set(VERSION_TABLE["v1.0"]) == {
            "users",
            "groups",
            "application",
            "authentication",
            "account",
            "admin",
        }

    def test_v09_names(self):
        assert set(VERSION_TABLE["v0.9"]) == {
            "authorization",
            "elasticubes",
            "branding",
            "reporting",
            "palettes",
            "users",
            "groups",
            "settings",
            "roles",
            "data_sources",
            "geo",
        }

    def test_is_read_only(self):
        """Should reject runtime registration."""
        with pytest.raises(TypeError):
            VERSION_TABLE["v2.0"] = {}  # type: ignore[index]
        with pytest.raises(TypeError):
            VERSION_TABLE["v1.0"]["extra"] = v1.Users  # type: ignore[index]


class TestResolution:
    """Tests for SisenseClient.api() and the handler properties."""

    @pytest.mark.parametrize(("version", "name"), VERSION_NAME_PAIRS)
    def test_resolves_declared_type(self, client, version, name):
        """Should build the handler class registered for (version, name)."""
        handler = client.use_version(version).api(name)
        assert type(handler) is VERSION_TABLE[version][name]

    @pytest.mark.parametrize(("version", "name"), VERSION_NAME_PAIRS)
    def test_property_matches_api(self, client, version, name):
        """Property access should return the same cached handler as api()."""
        handler = client.use_version(version).api(name)
        assert getattr(client.use_version(version), name) is handler

    def test_handler_holds_client(self, client):
        """Handlers should call back into the client that built them."""
        assert client.users.client is client

    def test_default_version_is_v1(self, client):
        assert isinstance(client.users, v1.Users)
        assert isinstance(client.groups, v1.Groups)

    def test_handler_is_cached(self, client):
        """Should return the identical instance on repeated resolution."""
        assert client.users is client.users
        assert client.api("groups") is client.api("groups")

    def test_cache_is_keyed_by_version(self, client):
        """Switching versions should not collide in the cache."""
        new_users = client.users
        old_users = client.use_version("v0.9").users
        assert isinstance(new_users, v1.Users)
        assert isinstance(old_users, v09.Users)
        assert client.use_version("v0.9").users is old_users
        assert client.users is new_users

    def test_clients_do_not_share_cache(self):
        first = SisenseClient(BASE_URL)
        second = SisenseClient(BASE_URL)
        assert first.users is not second.users

    def test_one_call_override_is_consumed_once(self, client):
        """The override should apply to the next resolution only."""
        assert isinstance(client.use_version("v0.9").users, v09.Users)
        assert isinstance(client.users, v1.Users)

    def test_v_alias(self, client):
        assert isinstance(client.v("v0.9").groups, v09.Groups)
        assert isinstance(client.groups, v1.Groups)

    def test_set_as_default(self, client):
        """Should persist the version for later resolutions."""
        client.use_version("v0.9", set_as_default=True)
        assert isinstance(client.users, v09.Users)
        assert isinstance(client.users, v09.Users)
        assert client.config.default_version == "v0.9"

    def test_override_beats_default(self, client):
        client.use_version("v0.9", set_as_default=True)
        assert isinstance(client.use_version("v1.0").users, v1.Users)
        assert isinstance(client.users, v09.Users)

    def test_version_keyword(self, client):
        """api(name, version=...) should resolve against that version once."""
        assert isinstance(client.api("users", version="v0.9"), v09.Users)
        assert isinstance(client.api("users"), v1.Users)

    def test_use_version_returns_self(self, client):
        assert client.use_version("v0.9") is client

    def test_default_version_from_config(self):
        client = SisenseClient(BASE_URL, {"default_version": "v0.9"})
        assert isinstance(client.elasticubes, v09.ElastiCubes)

    def test_one_call_version_from_config(self):
        """A `v` key in the config should act as a pending override."""
        client = SisenseClient(BASE_URL, {"v": "v0.9"})
        assert isinstance(client.users, v09.Users)
        assert isinstance(client.users, v1.Users)


class TestResolutionErrors:
    """Tests for failed resolution."""

    def test_unsupported_version(self, client):
        with pytest.raises(UnsupportedVersionError) as exc_info:
            client.use_version("bogus").api("users")
        assert exc_info.value.version == "bogus"

    def test_unsupported_version_leaves_override_pending(self, client):
        """The override is only cleared once the version is validated."""
        client.use_version("bogus")
        with pytest.raises(UnsupportedVersionError):
            client.users
        with pytest.raises(UnsupportedVersionError):
            client.users
        assert client.config.v == "bogus"

    def test_unsupported_default_version(self):
        client = SisenseClient(BASE_URL, {"default_version": "v3"})
        with pytest.raises(UnsupportedVersionError):
            client.users

    def test_unknown_operation_lists_names(self, client):
        """Should enumerate the names available in the resolved version."""
        with pytest.raises(UnknownOperationError) as exc_info:
            client.api("doesNotExist")
        message = str(exc_info.value)
        for name in VERSION_TABLE["v1.0"]:
            assert name in message
        assert "elasticubes" not in message
        assert exc_info.value.version == "v1.0"

    def test_unknown_operation_under_override(self, client):
        with pytest.raises(UnknownOperationError) as exc_info:
            client.use_version("v0.9").application
        assert exc_info.value.version == "v0.9"
        assert "elasticubes" in str(exc_info.value)

    def test_unknown_operation_consumes_override(self, client):
        """A failed name lookup still uses up the one-call override."""
        client.use_version("v0.9")
        with pytest.raises(UnknownOperationError):
            client.application
        assert client.config.v == ""
        assert isinstance(client.application, v1.Application)

    def test_property_for_other_generation(self, client):
        """v0.9-only properties should fail under the v1.0 default."""
        with pytest.raises(UnknownOperationError):
            client.elasticubes

    def test_failures_are_not_cached(self, capsys):
        """A failed lookup builds nothing; the next good one builds once."""
        client = SisenseClient(BASE_URL, debug=True)
        with pytest.raises(UnknownOperationError):
            client.api("nope")
        assert "Built" not in capsys.readouterr().err

        users = client.users
        assert isinstance(users, v1.Users)
        assert client.users is users
        assert capsys.readouterr().err.count("Built v1.0 handler for 'users'") == 1


class TestConcurrency:
    """Tests for sharing a client between threads."""

    def test_versioned_resolution_is_atomic(self, client):
        """Overrides from one thread should not leak into another."""
        errors: list[str] = []

        def resolve(version, expected):
            for _ in range(200):
                handler = client.api("users", version=version)
                if not isinstance(handler, expected):
                    errors.append(version)

        threads = [
            threading.Thread(target=resolve, args=("v0.9", v09.Users)),
            threading.Thread(target=resolve, args=("v1.0", v1.Users)),
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert client.config.v == ""


class TestConfig:
    """Tests for session configuration."""

    def test_defaults(self, client):
        config = client.config
        assert config.v == ""
        assert config.access_token == ""
        assert config.default_version == "v1.0"
        assert config.username == ""
        assert config.password == ""

    def test_unknown_keys_are_retained(self):
        client = SisenseClient(BASE_URL, {"tenant": "acme", "username": "u"})
        assert client.config.model_extra == {"tenant": "acme"}
        assert client.config.username == "u"

    def test_config_is_copied(self):
        """Neither the input mapping nor the returned config alias the state."""
        source = {"access_token": "one"}
        client = SisenseClient(BASE_URL, source)
        source["access_token"] = "two"
        client.config.access_token = "three"
        assert client.get_access_token() == "one"

    def test_invalid_config(self):
        with pytest.raises(SisenseConfigError):
            SisenseClient(BASE_URL, {"access_token": None})

    def test_use_access_token(self, client):
        assert client.use_access_token("abc") is client
        assert client.get_access_token() == "abc"

    def test_accessors(self):
        http = httpx.Client()
        client = SisenseClient(BASE_URL, http=http)
        assert client.get_base_url() == BASE_URL
        assert client.get_http() is http
        assert client.get_access_token() == ""


class TestSisenseClientFromEnv:
    """Tests for SisenseClient.from_env()."""

    def test_from_env_with_all_vars(self, capsys):
        env = {
            "SISENSE_BASE_URL": "http://bi.example.com",
            "SISENSE_ACCESS_TOKEN": "env-token",
            "SISENSE_USERNAME": "admin",
            "SISENSE_PASSWORD": "secret",
            "SISENSE_DEFAULT_VERSION": "v0.9",
            "SISENSE_DEBUG": "1",
            "SISENSE_TIMEOUT_MS": "3000",
        }
        with patch.dict(os.environ, env, clear=True):
            client = SisenseClient.from_env()
        assert client.get_base_url() == "http://bi.example.com"
        assert client.get_access_token() == "env-token"
        assert client.config.username == "admin"
        assert client.config.password == "secret"
        assert client.config.default_version == "v0.9"
        assert client.get_http().timeout.read == 3.0
        client.users
        assert "[sisense-sdk] Built v0.9 handler" in capsys.readouterr().err

    def test_from_env_minimal(self, capsys):
        with patch.dict(os.environ, {"SISENSE_BASE_URL": "http://bi"}, clear=True):
            client = SisenseClient.from_env()
        assert client.get_access_token() == ""
        assert client.config.default_version == "v1.0"
        client.users
        assert capsys.readouterr().err == ""

    def test_from_env_missing_base_url(self):
        with patch.dict(os.environ, {}, clear=True), pytest.raises(SisenseConfigError):
            SisenseClient.from_env()

    def test_from_env_malformed_timeout_ms_raises(self):
        """Should raise ValueError when SISENSE_TIMEOUT_MS is not a valid integer."""
        env = {"SISENSE_BASE_URL": "http://bi", "SISENSE_TIMEOUT_MS": "soon"}
        with patch.dict(os.environ, env, clear=True), pytest.raises(ValueError):
            SisenseClient.from_env()

    def test_get_client(self):
        with patch.dict(os.environ, {"SISENSE_BASE_URL": "http://bi"}, clear=True):
            client = get_client()
        assert isinstance(client, SisenseClient)


class TestLifecycle:
    """Tests for transport ownership."""

    def test_owned_transport_is_closed(self):
        with SisenseClient(BASE_URL) as client:
            http = client.get_http()
        assert http.is_closed

    def test_supplied_transport_is_not_closed(self):
        http = httpx.Client()
        with SisenseClient(BASE_URL, http=http):
            pass
        assert not http.is_closed
        http.close()

    def test_default_transport_sets_user_agent(self):
        client = SisenseClient(BASE_URL)
        assert client.get_http().headers["User-Agent"].startswith("sisense-sdk/")

    @respx.mock
    def test_supplied_transport_is_used(self):
        route = respx.get(f"{BASE_URL}/api/v1/users").mock(
            return_value=httpx.Response(200, json=[])
        )
        http = httpx.Client(headers={"X-Custom": "1"})
        client = SisenseClient(BASE_URL, http=http)
        client.get("/api/v1/users")
        assert route.calls.last.request.headers["X-Custom"] == "1"
