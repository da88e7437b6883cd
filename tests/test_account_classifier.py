"""
Pytest tests for account status and contract type classification.
"""

from __future__ import annotations

import pytest

from ton_inspector.analytics.account_classifier import (
    AccountStatus,
    ContractType,
    WALLET_INTERFACES,
    classify,
    classify_contract_type,
    classify_status,
)
from ton_inspector.analytics.account_record import EMPTY_CONTRACT_CODE


@pytest.mark.parametrize("state", ["active", "AccountActive"])
@pytest.mark.parametrize("balance", ["0", "1000", "garbage", ""])
def test_explicit_active_state_wins(state, balance):
    """Explicit active state short-circuits whatever balance/code/data say."""
    assert classify_status({"state": state}, balance) is AccountStatus.ACTIVE
    assert classify_status({"state": state, "code": EMPTY_CONTRACT_CODE}, balance) is AccountStatus.ACTIVE


@pytest.mark.parametrize("state", ["frozen", "AccountFrozen"])
def test_explicit_frozen_state_wins_over_balance(state):
    assert classify_status({"status": state, "code": "te6ccgEBAQEAAgAAAA=="}, "5000000000") is AccountStatus.FROZEN


@pytest.mark.parametrize("state", [None, "uninit", "uninitialized", "AccountUninit", "nonexist", "weird"])
def test_positive_balance_means_active(state):
    """A funded account cannot be uninitialized, even when the state string says so."""
    record = {"state": state} if state else {}
    assert classify_status(record, "1") is AccountStatus.ACTIVE
    assert classify_status(record, "123456789012345678901234567890") is AccountStatus.ACTIVE


def test_no_state_no_evidence_is_uninitialized():
    assert classify_status({}, "0") is AccountStatus.UNINITIALIZED


@pytest.mark.parametrize("state", ["uninit", "uninitialized", "AccountUninit"])
def test_explicit_uninit_without_evidence(state):
    assert classify_status({"account_state": state}, "0") is AccountStatus.UNINITIALIZED


def test_unknown_state_without_evidence_falls_back_to_uninitialized():
    assert classify_status({"state": "nonexist"}, "0") is AccountStatus.UNINITIALIZED


def test_code_or_data_means_active():
    assert classify_status({"code": "te6ccgEBAQEAAgAAAA=="}, "0") is AccountStatus.ACTIVE
    assert classify_status({"data": "te6ccgEBAQEAAgAAAA=="}, "0") is AccountStatus.ACTIVE
    assert classify_status({"account": {"code": "abc"}}, "0") is AccountStatus.ACTIVE
    assert classify_status({"account": {"data": "abc"}}, "0") is AccountStatus.ACTIVE
    assert classify_status({"state": "uninit", "code_hash": "a1b2"}, "0") is AccountStatus.ACTIVE
    assert classify_status({"data_hash": "ff"}, "0") is AccountStatus.ACTIVE


def test_empty_contract_sentinel_is_not_code():
    record = {"code": EMPTY_CONTRACT_CODE, "data": EMPTY_CONTRACT_CODE}
    assert classify_status(record, "0") is AccountStatus.UNINITIALIZED


def test_zero_or_empty_hashes_are_not_code():
    record = {"state": "uninit", "code_hash": "0", "data_hash": ""}
    assert classify_status(record, "0") is AccountStatus.UNINITIALIZED


def test_nested_state_fields_are_read():
    assert classify_status({"info": {"state": "frozen"}}, "10") is AccountStatus.FROZEN
    assert classify_status({"account": {"state": "AccountFrozen"}}, "10") is AccountStatus.FROZEN


def test_state_key_priority():
    """`state` is read before `status` and the nested fields."""
    record = {"state": "frozen", "status": "active", "info": {"state": "active"}}
    assert classify_status(record, "0") is AccountStatus.FROZEN


@pytest.mark.parametrize("balance", ["abc", "1.5", "-100", "", None, "0x10", 3.5])
def test_unparseable_or_non_positive_balance_is_no_evidence(balance):
    """Parse failures never raise; they count as no balance."""
    assert classify_status({}, balance) is AccountStatus.UNINITIALIZED


@pytest.mark.parametrize("record", [None, [], "active", 42, {"state": {"nested": True}}, {"code": 123}])
def test_malformed_records_never_raise(record):
    status, contract_type = classify(record, "0")
    assert status is AccountStatus.UNINITIALIZED
    assert contract_type is ContractType.UNKNOWN


def test_contract_type_wallet():
    assert classify_contract_type({"interfaces": ["wallet_v4r2"]}) is ContractType.WALLET
    assert classify_contract_type({"interfaces": ["jetton_master", "wallet_v3r2"]}) is ContractType.WALLET


@pytest.mark.parametrize("iface", sorted(WALLET_INTERFACES))
def test_every_wallet_revision_is_wallet(iface):
    assert classify_contract_type({"interfaces": [iface]}) is ContractType.WALLET


def test_contract_type_smart_contract():
    assert classify_contract_type({"interfaces": ["some_other_iface"]}) is ContractType.SMART_CONTRACT
    assert classify_contract_type({"interfaces": ["wallet_v5r1"]}) is ContractType.SMART_CONTRACT
    assert ContractType.SMART_CONTRACT.label == "Smart Contract"


@pytest.mark.parametrize("record", [{}, {"interfaces": []}, {"interfaces": None}, {"interfaces": "wallet_v4r2"}])
def test_contract_type_unknown(record):
    assert classify_contract_type(record) is ContractType.UNKNOWN


def test_interface_order_does_not_matter():
    a = classify_contract_type({"interfaces": ["nft_item", "wallet_v4r2"]})
    b = classify_contract_type({"interfaces": ["wallet_v4r2", "nft_item"]})
    assert a is b is ContractType.WALLET


def test_classify_is_idempotent():
    record = {"status": "uninit", "balance": "42", "interfaces": ["wallet_v4r1"]}
    first = classify(record, "42")
    second = classify(record, "42")
    assert first == second == (AccountStatus.ACTIVE, ContractType.WALLET)
    assert record == {"status": "uninit", "balance": "42", "interfaces": ["wallet_v4r1"]}
