"""
Named accessors over the raw TonAPI account record.

TonAPI (and the older toncenter-style shapes it sometimes mirrors) reports the
same facts under several keys. Each accessor below tries its candidate keys in a
fixed priority order and returns the first truthy value, so callers never probe
the raw mapping themselves. Any field may be absent, null or oddly shaped.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

# Serialized empty cell some API versions report as `code` for undeployed accounts
EMPTY_CONTRACT_CODE = "te6cckEBAQEAOwAA"

STATE_KEYS = ("state", "status", "account_state", "lifecycle_state")


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _is_non_empty(value: Any) -> bool:
    """True for a non-empty str/bytes/list/tuple payload; other shapes count as empty."""
    return isinstance(value, (str, bytes, list, tuple)) and len(value) > 0


def _is_set_hash(value: Any) -> bool:
    return bool(value) and value != "0"


def _as_amount_text(value: Any) -> str | None:
    """
    Normalize a balance value to text. Integral JSON numbers become digits; any
    other truthy value is stringified so resolution stops there and the parser
    rejects it.
    """
    if isinstance(value, bool) or not value:
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    if isinstance(value, str):
        return value
    return str(value)


class AccountRecord:
    """Read-only view of one raw account record."""

    def __init__(self, raw: Mapping[str, Any] | None) -> None:
        self.raw: Mapping[str, Any] = _mapping(raw)

    @property
    def _account(self) -> Mapping[str, Any]:
        return _mapping(self.raw.get("account"))

    @property
    def _info(self) -> Mapping[str, Any]:
        return _mapping(self.raw.get("info"))

    # -- state -----------------------------------------------------------------

    def state_indicator(self) -> str | None:
        """
        First truthy of: state, status, account_state, lifecycle_state,
        info.state, account.state. Non-string values are stringified.
        """
        candidates = [self.raw.get(key) for key in STATE_KEYS]
        candidates.append(self._info.get("state"))
        candidates.append(self._account.get("state"))
        for value in candidates:
            if value:
                return value if isinstance(value, str) else str(value)
        return None

    # -- code / data -----------------------------------------------------------

    def has_code(self) -> bool:
        return self._has_payload("code", "code_hash")

    def has_data(self) -> bool:
        return self._has_payload("data", "data_hash")

    def _has_payload(self, field: str, hash_field: str) -> bool:
        top = self.raw.get(field)
        if _is_non_empty(top) and top != EMPTY_CONTRACT_CODE:
            return True
        if _is_non_empty(self._account.get(field)):
            return True
        return _is_set_hash(self.raw.get(hash_field))

    # -- balance ---------------------------------------------------------------

    def balance(self) -> str | None:
        return _as_amount_text(self.raw.get("balance"))

    def balance_raw(self) -> str | None:
        return _as_amount_text(self.raw.get("balance_raw"))

    def account_balance(self) -> str | None:
        return _as_amount_text(self._account.get("balance"))

    def first_listed_balance(self) -> str | None:
        balances = self.raw.get("balances")
        if not isinstance(balances, list) or not balances:
            return None
        return _as_amount_text(_mapping(balances[0]).get("value"))

    # -- interfaces / activity -------------------------------------------------

    def interfaces(self) -> list[Any]:
        value = self.raw.get("interfaces")
        return list(value) if isinstance(value, list) else []

    def last_activity(self) -> int | None:
        """Unix timestamp (seconds) of the last transaction, if reported."""
        value = self.raw.get("last_activity")
        if isinstance(value, bool) or not value:
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value) if math.isfinite(value) else None
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return None
        return None


def resolve_balance(record: AccountRecord | Mapping[str, Any] | None) -> str:
    """
    Effective balance in nano-TON, as text.

    Priority: balance, balance_raw, account.balance, balances[0].value; "0" if none.
    The value is not validated here; the classifier and formatter parse it.
    """
    if not isinstance(record, AccountRecord):
        record = AccountRecord(record)
    return (
        record.balance()
        or record.balance_raw()
        or record.account_balance()
        or record.first_listed_balance()
        or "0"
    )
