"""
Account status and contract type classification.

TonAPI is inconsistent across response shapes and versions, so status is
decided from the explicit state string when it is unambiguous, and otherwise
from evidence of funds or deployment (balance, code, data). Classification is
total: malformed records degrade to uninitialized / Unknown and never raise.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from ton_inspector.analytics.account_record import AccountRecord
from ton_inspector.analytics.balance_formatter import parse_nano
from ton_inspector.inspector_logging import get_logger

logger = get_logger(__name__)


class AccountStatus(str, Enum):
    ACTIVE = "active"
    FROZEN = "frozen"
    UNINITIALIZED = "uninitialized"


class ContractType(str, Enum):
    WALLET = "Wallet"
    SMART_CONTRACT = "SmartContract"
    UNKNOWN = "Unknown"

    @property
    def label(self) -> str:
        """Display label: 'Smart Contract' is spaced on screen."""
        if self is ContractType.SMART_CONTRACT:
            return "Smart Contract"
        return self.value


ACTIVE_STATES = frozenset({"active", "AccountActive"})
FROZEN_STATES = frozenset({"frozen", "AccountFrozen"})
UNINIT_STATES = frozenset({"uninit", "uninitialized", "AccountUninit"})

WALLET_INTERFACES = frozenset({
    "wallet_v1r1",
    "wallet_v1r2",
    "wallet_v1r3",
    "wallet_v2r1",
    "wallet_v2r2",
    "wallet_v3r1",
    "wallet_v3r2",
    "wallet_v4r1",
    "wallet_v4r2",
})


def _as_record(record: AccountRecord | Mapping[str, Any] | None) -> AccountRecord:
    return record if isinstance(record, AccountRecord) else AccountRecord(record)


def has_positive_balance(resolved_balance: Any) -> bool:
    """True only when the balance parses as an integer greater than zero."""
    value = parse_nano(resolved_balance)
    return value is not None and value > 0


def classify_status(
    record: AccountRecord | Mapping[str, Any] | None,
    resolved_balance: Any,
) -> AccountStatus:
    """
    Classify the account lifecycle state. Order of checks matters:

    1. explicit active / frozen state wins;
    2. a positive balance means active (a funded account is never uninitialized);
    3. code or data means active;
    4. an explicit uninit state, or no state at all, with no evidence is uninitialized;
    5. any remaining evidence means active, otherwise uninitialized.
    """
    rec = _as_record(record)
    state = rec.state_indicator()
    has_code = rec.has_code()
    has_data = rec.has_data()
    has_balance = has_positive_balance(resolved_balance)
    has_evidence = has_balance or has_code or has_data

    if state in ACTIVE_STATES:
        return AccountStatus.ACTIVE
    if state in FROZEN_STATES:
        return AccountStatus.FROZEN
    if has_balance:
        return AccountStatus.ACTIVE
    if has_code or has_data:
        return AccountStatus.ACTIVE
    if state in UNINIT_STATES and not has_evidence:
        return AccountStatus.UNINITIALIZED
    if state is None and not has_evidence:
        return AccountStatus.UNINITIALIZED
    if has_evidence:
        return AccountStatus.ACTIVE
    # Unrecognized state string and nothing deployed or funded
    return AccountStatus.UNINITIALIZED


def classify_contract_type(record: AccountRecord | Mapping[str, Any] | None) -> ContractType:
    """Wallet if any interface is a known wallet revision; SmartContract if other interfaces; else Unknown."""
    interfaces = _as_record(record).interfaces()
    if not interfaces:
        return ContractType.UNKNOWN
    if any(isinstance(iface, str) and iface in WALLET_INTERFACES for iface in interfaces):
        return ContractType.WALLET
    return ContractType.SMART_CONTRACT


def classify(
    record: AccountRecord | Mapping[str, Any] | None,
    resolved_balance: Any,
) -> tuple[AccountStatus, ContractType]:
    rec = _as_record(record)
    status = classify_status(rec, resolved_balance)
    contract_type = classify_contract_type(rec)
    logger.debug(
        "account_classified",
        state=rec.state_indicator(),
        status=status.value,
        contract_type=contract_type.value,
    )
    return status, contract_type
