"""
FastAPI server — browser lookup page and JSON API.

GET /                          HTML page; ?address=... renders the lookup result or error
GET /api/accounts/{address}    normalized account summary as JSON
GET /health                    liveness probe

Every request is a fresh lookup; nothing is cached.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Any

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from ton_inspector import __version__
from ton_inspector.analytics import format_balance
from ton_inspector.config import Settings, get_settings
from ton_inspector.core.exceptions import EmptyAddressError, MalformedInput, TransportError
from ton_inspector.inspector import AccountPresenter, inspect_address
from ton_inspector.inspector.views import PageView
from ton_inspector.inspector_logging import get_logger
from ton_inspector.tonapi import TonApiClient

logger = get_logger(__name__)

app = FastAPI(title="TON Account Inspector", version=__version__)


# -----------------------------------------------------------------------------
# Dependencies
# -----------------------------------------------------------------------------

def get_app_settings() -> Settings:
    return get_settings()


def get_tonapi_client(settings: Settings = Depends(get_app_settings)) -> Iterator[TonApiClient]:
    """Dependency: one TonAPI client per request, closed afterwards."""
    client = TonApiClient(settings=settings)
    try:
        yield client
    finally:
        client.close()


# -----------------------------------------------------------------------------
# Response models
# -----------------------------------------------------------------------------

class AccountResponse(BaseModel):
    """GET /api/accounts/{address} response."""

    address: str = Field(..., description="Address as queried (whitespace removed)")
    status: str = Field(..., description="active | frozen | uninitialized")
    balance: str = Field(..., description="Resolved balance in nano-TON")
    balance_display: str = Field(..., description="Balance in TON, e.g. '1.23 TON'")
    contract_type: str = Field(..., description="Wallet | SmartContract | Unknown")
    last_activity: str | None = Field(None, description="Last activity (UTC) or null")
    explorer_url: str = Field(..., description="Block explorer link")
    raw: dict[str, Any] = Field(default_factory=dict, description="Record as returned by TonAPI")


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = __version__


def _json_safe(value: Any) -> Any:
    """Replace NaN/Infinity (accepted by the upstream JSON decoder) with None for the response."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_json_safe(item) for item in value]
    return value


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------

@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()


@app.get("/api/accounts/{address}", response_model=AccountResponse)
def get_account(
    address: str,
    client: TonApiClient = Depends(get_tonapi_client),
    settings: Settings = Depends(get_app_settings),
) -> AccountResponse:
    try:
        inspection = inspect_address(address, client=client)
        balance_display = format_balance(inspection.balance, strict=settings.strict_balance)
    except EmptyAddressError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except TransportError as e:
        logger.warning("api_account_transport_error", address=address, status_code=e.status_code, error=str(e))
        raise HTTPException(status_code=502, detail=f"Failed to fetch account: {e}") from e
    except MalformedInput as e:
        logger.warning("api_account_malformed_balance", address=address, error=str(e))
        raise HTTPException(status_code=502, detail=str(e)) from e

    return AccountResponse(
        address=inspection.address,
        status=inspection.status.value,
        balance=inspection.balance,
        balance_display=balance_display,
        contract_type=inspection.contract_type.value,
        last_activity=inspection.last_activity,
        explorer_url=settings.explorer_url(inspection.address),
        raw=_json_safe(inspection.raw),
    )


@app.get("/", response_class=HTMLResponse)
def index(
    address: str | None = None,
    client: TonApiClient = Depends(get_tonapi_client),
    settings: Settings = Depends(get_app_settings),
) -> HTMLResponse:
    view = PageView(address=(address or "").strip())
    if address is not None:
        presenter = AccountPresenter(view, settings=settings, client_factory=lambda: client)
        presenter.inspect(address)
    return HTMLResponse(content=view.render())
