"""
Shared test fixtures for the fieldcheck test suite.
"""
import pytest

from fieldcheck.config import settings


# ==========================================================================
# Settings
# ==========================================================================

@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Pin settings so a local .env cannot change rule behaviour."""
    monkeypatch.setattr(settings, "LENGTH_UNIT", "bytes")
    monkeypatch.setattr(settings, "METRICS_ENABLED", True)


# ==========================================================================
# Request bodies
# ==========================================================================

@pytest.fixture
def valid_body():
    return {
        "username": "User Name",
        "mail": "ochipin@works.net",
        "url": "https://ochipin.net",
        "date": "2019-03-14",
        "min": "0",
        "max": "10",
        "number": "999",
    }


@pytest.fixture
def invalid_body():
    return {
        "username": "",
        "minlen": "minlen",
        "maxlen": "maxlen",
        "mail": "@ochipinworks.net",
        "url": "htt://ochipin.net",
        "date": "2019/99/14",
        "min": "4",
        "max": "10",
        "number": "999s",
    }


@pytest.fixture
def list_body():
    """Body with list-valued fields, as produced by multi-select inputs."""
    return {
        "tags": ["alpha", "beta", "gamma"],
        "scores": [1, 5, 9],
        "mails": ["a@example.com", "broken", "also@broken@x"],
        "empty": [],
    }
