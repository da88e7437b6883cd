"""
Account inspection service.

Fetches the raw record, resolves the effective balance, classifies status and
contract type, and converts last activity to display text. Returns an
AccountInspection; formatting the balance is left to the presentation layer.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from ton_inspector.analytics import AccountRecord, AccountStatus, ContractType, classify, resolve_balance
from ton_inspector.core.exceptions import EmptyAddressError
from ton_inspector.inspector_logging import bind_address
from ton_inspector.tonapi import TonApiClient

LAST_ACTIVITY_FORMAT = "%Y-%m-%d %H:%M:%S UTC"

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass
class AccountInspection:
    address: str
    status: AccountStatus
    balance: str
    contract_type: ContractType
    last_activity: str | None
    raw: dict[str, Any] = field(default_factory=dict)


def normalize_address(text: str | None) -> str:
    """Strip all whitespace from user input. Raises EmptyAddressError if nothing is left."""
    address = _WHITESPACE_RE.sub("", text or "")
    if not address:
        raise EmptyAddressError()
    return address


def format_last_activity(timestamp: int | None) -> str | None:
    """Unix seconds → 'YYYY-MM-DD HH:MM:SS UTC'; None for missing or out-of-range values."""
    if not timestamp:
        return None
    try:
        moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None
    return moment.strftime(LAST_ACTIVITY_FORMAT)


def build_inspection(address: str, raw: dict[str, Any]) -> AccountInspection:
    """Classify an already-fetched record."""
    record = AccountRecord(raw)
    balance = resolve_balance(record)
    status, contract_type = classify(record, balance)
    return AccountInspection(
        address=address,
        status=status,
        balance=balance,
        contract_type=contract_type,
        last_activity=format_last_activity(record.last_activity()),
        raw=raw,
    )


def inspect_address(address_text: str, client: TonApiClient | None = None) -> AccountInspection:
    """
    Run one lookup. Raises EmptyAddressError for blank input and TransportError
    when TonAPI cannot be reached or answers with a non-2xx status.
    """
    address = normalize_address(address_text)
    log = bind_address(address)
    if client is None:
        with TonApiClient() as owned:
            raw = owned.fetch_account(address)
    else:
        raw = client.fetch_account(address)
    inspection = build_inspection(address, raw)
    log.info(
        "account_inspected",
        status=inspection.status.value,
        contract_type=inspection.contract_type.value,
        has_last_activity=inspection.last_activity is not None,
    )
    return inspection
