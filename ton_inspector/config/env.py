"""
Environment variable loading for the TON inspector.

- TONAPI_BASE_URL: TonAPI root (default: https://tonapi.io/v2)
- TONAPI_API_KEY: optional bearer token; the public endpoint works without one
- TONAPI_TIMEOUT_SEC: outbound request timeout (default: 15)
- TON_EXPLORER_URL_TEMPLATE: block-explorer link, must contain {address}
- TON_INSPECTOR_STRICT_BALANCE: 1 = malformed balances are errors, 0 = shown as 0 TON
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is ton_inspector/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_TONAPI_BASE_URL = "https://tonapi.io/v2"
DEFAULT_EXPLORER_URL_TEMPLATE = "https://tonviewer.com/{address}"
DEFAULT_TIMEOUT_SEC = 15.0

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def load_inspector_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides real env."""
    load_dotenv(_ENV_PATH, override=False)


def get_tonapi_base_url() -> str:
    load_inspector_env()
    url = (os.getenv("TONAPI_BASE_URL") or "").strip()
    return (url or DEFAULT_TONAPI_BASE_URL).rstrip("/")


def get_tonapi_api_key() -> str | None:
    load_inspector_env()
    return (os.getenv("TONAPI_API_KEY") or "").strip() or None


def get_request_timeout_sec() -> float:
    """Return TONAPI_TIMEOUT_SEC; unparseable or non-positive values fall back to the default."""
    load_inspector_env()
    raw = (os.getenv("TONAPI_TIMEOUT_SEC") or "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_SEC
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT_SEC
    return value if value > 0 else DEFAULT_TIMEOUT_SEC


def get_explorer_url_template() -> str:
    load_inspector_env()
    template = (os.getenv("TON_EXPLORER_URL_TEMPLATE") or "").strip()
    if template and "{address}" in template:
        return template
    return DEFAULT_EXPLORER_URL_TEMPLATE


def use_strict_balance() -> bool:
    """
    Return True when a non-numeric balance must be reported as an error.
    Default: strict. Set TON_INSPECTOR_STRICT_BALANCE=0 to show it as 0 TON instead.
    """
    load_inspector_env()
    raw = (os.getenv("TON_INSPECTOR_STRICT_BALANCE") or "").strip().lower()
    if raw in _FALSE_VALUES:
        return False
    return True
