"""
Account analytics: the pure core of the inspector.

Modules: account_record (named accessors over the raw TonAPI record),
account_classifier (status and contract type), balance_formatter (nano → TON).
"""

from ton_inspector.analytics.account_classifier import (
    AccountStatus,
    ContractType,
    classify,
    classify_contract_type,
    classify_status,
)
from ton_inspector.analytics.account_record import AccountRecord, resolve_balance
from ton_inspector.analytics.balance_formatter import format_balance, parse_nano

__all__ = [
    "AccountRecord",
    "AccountStatus",
    "ContractType",
    "classify",
    "classify_contract_type",
    "classify_status",
    "format_balance",
    "parse_nano",
    "resolve_balance",
]
