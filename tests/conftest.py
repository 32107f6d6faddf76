"""Shared fixtures."""

import pytest

from sisense_sdk import SisenseClient

BASE_URL = "http://sisense.test"


@pytest.fixture
def client():
    """Client with its own transport; respx intercepts its requests."""
    with SisenseClient(BASE_URL) as c:
        yield c


@pytest.fixture
def authed_client():
    with SisenseClient(BASE_URL, {"access_token": "tok"}) as c:
        yield c
