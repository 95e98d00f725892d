"""Pytest configuration and fixtures."""
import os

import pytest

# Set test environment variables
os.environ["HELIUM_ENV"] = "test"
os.environ["HELIUM_LOG_JSON"] = "true"


class RecordingHttpClient:
    """HTTP client stub that records every RequestSpec it receives."""

    def __init__(self, responses=None):
        self.requests = []
        self._responses = list(responses or [])

    def send(self, spec):
        self.requests.append(spec)
        if not self._responses:
            return {"data": []}
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture(autouse=True)
def clean_settings():
    """Drop cached settings so env changes apply per test."""
    from helium_nodes.config import reset_settings

    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def http_client():
    """Recording stub client returning {"data": []} for every request."""
    return RecordingHttpClient()


@pytest.fixture
def make_client():
    """Factory for a stub client with scripted responses (dicts or exceptions)."""
    return RecordingHttpClient


@pytest.fixture
def credential():
    """Credential with an API key against the default base URL."""
    from helium_nodes.models import HeliumCredential

    return HeliumCredential.from_dict({"apiKey": "test-key"})


@pytest.fixture
def anonymous_credential():
    """Credential without an API key."""
    from helium_nodes.models import HeliumCredential

    return HeliumCredential.from_dict({})


def resolver(params, per_item=None):
    """Build a get_parameter(name, item_index, default) function."""
    per_item = per_item or []

    def get_parameter(name, item_index, default=None):
        if item_index < len(per_item) and name in per_item[item_index]:
            return per_item[item_index][name]
        return params.get(name, default)

    return get_parameter


@pytest.fixture
def make_resolver():
    return resolver
