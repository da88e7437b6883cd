"""
Settings resolution from environment variables.
"""

from __future__ import annotations

import pytest

from ton_inspector.config import get_settings
from ton_inspector.config.env import DEFAULT_TIMEOUT_SEC, DEFAULT_TONAPI_BASE_URL

_VARS = (
    "TONAPI_BASE_URL",
    "TONAPI_API_KEY",
    "TONAPI_TIMEOUT_SEC",
    "TON_EXPLORER_URL_TEMPLATE",
    "TON_INSPECTOR_STRICT_BALANCE",
    "API_HOST",
    "API_PORT",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = get_settings()
    assert settings.tonapi_base_url == DEFAULT_TONAPI_BASE_URL
    assert settings.tonapi_api_key is None
    assert settings.request_timeout_sec == DEFAULT_TIMEOUT_SEC
    assert settings.strict_balance is True
    assert settings.api_port == 8000
    assert settings.explorer_url("EQabc") == "https://tonviewer.com/EQabc"


def test_env_overrides(clean_env):
    clean_env.setenv("TONAPI_BASE_URL", "https://testnet.tonapi.io/v2/")
    clean_env.setenv("TONAPI_API_KEY", " key ")
    clean_env.setenv("TONAPI_TIMEOUT_SEC", "3.5")
    clean_env.setenv("TON_EXPLORER_URL_TEMPLATE", "https://testnet.tonviewer.com/{address}")
    clean_env.setenv("TON_INSPECTOR_STRICT_BALANCE", "0")
    clean_env.setenv("API_PORT", "9000")
    settings = get_settings()
    assert settings.tonapi_base_url == "https://testnet.tonapi.io/v2"
    assert settings.tonapi_api_key == "key"
    assert settings.request_timeout_sec == 3.5
    assert settings.explorer_url("EQabc") == "https://testnet.tonviewer.com/EQabc"
    assert settings.strict_balance is False
    assert settings.api_port == 9000


def test_bad_values_fall_back(clean_env):
    clean_env.setenv("TONAPI_TIMEOUT_SEC", "soon")
    clean_env.setenv("TON_EXPLORER_URL_TEMPLATE", "https://example.com/no-placeholder")
    clean_env.setenv("API_PORT", "http")
    settings = get_settings()
    assert settings.request_timeout_sec == DEFAULT_TIMEOUT_SEC
    assert settings.explorer_url("EQabc") == "https://tonviewer.com/EQabc"
    assert settings.api_port == 8000


def test_explorer_template_with_other_braces(clean_env):
    clean_env.setenv("TON_EXPLORER_URL_TEMPLATE", "https://explorer.example/{network}/{address}")
    settings = get_settings()
    assert settings.explorer_url("EQabc") == "https://explorer.example/{network}/EQabc"
