"""
Application settings.

Typed, immutable view over the environment (see config.env) used by the
TonAPI client, the web app and the CLI.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from ton_inspector.config import env


@dataclass(frozen=True)
class Settings:
    tonapi_base_url: str
    tonapi_api_key: str | None
    request_timeout_sec: float
    explorer_url_template: str
    strict_balance: bool
    api_host: str
    api_port: int
    log_level: str

    def explorer_url(self, address: str) -> str:
        return self.explorer_url_template.replace("{address}", address)


def get_settings() -> Settings:
    """Return the current application settings, read fresh from the environment."""
    env.load_inspector_env()
    try:
        api_port = int((os.getenv("API_PORT") or "8000").strip() or "8000")
    except ValueError:
        api_port = 8000
    return Settings(
        tonapi_base_url=env.get_tonapi_base_url(),
        tonapi_api_key=env.get_tonapi_api_key(),
        request_timeout_sec=env.get_request_timeout_sec(),
        explorer_url_template=env.get_explorer_url_template(),
        strict_balance=env.use_strict_balance(),
        api_host=(os.getenv("API_HOST") or "0.0.0.0").strip(),
        api_port=api_port,
        log_level=(os.getenv("LOG_LEVEL") or "info").strip().lower(),
    )
