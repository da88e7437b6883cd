"""
Presenter: drives an AccountView through one lookup.

Views never see raw records; they receive an AccountViewModel with every
display decision made (labels, badge palette, formatted balance, explorer URL).
Any error aborts the lookup with a single message and no partial results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from ton_inspector.analytics import AccountStatus, format_balance
from ton_inspector.config import Settings, get_settings
from ton_inspector.core.exceptions import EmptyAddressError, InspectorError
from ton_inspector.inspector.service import AccountInspection, inspect_address, normalize_address
from ton_inspector.inspector_logging import get_logger
from ton_inspector.tonapi import TonApiClient

logger = get_logger(__name__)

NO_ACTIVITY_TEXT = "No activity recorded"
ERROR_PREFIX = "Failed to fetch account information"


@dataclass(frozen=True)
class BadgeStyle:
    background: str
    color: str
    border: str


STATUS_BADGES: dict[AccountStatus, BadgeStyle] = {
    AccountStatus.ACTIVE: BadgeStyle("rgba(16, 185, 129, 0.2)", "#10b981", "1px solid rgba(16, 185, 129, 0.3)"),
    AccountStatus.FROZEN: BadgeStyle("rgba(239, 68, 68, 0.2)", "#ef4444", "1px solid rgba(239, 68, 68, 0.3)"),
    AccountStatus.UNINITIALIZED: BadgeStyle("rgba(245, 158, 11, 0.2)", "#f59e0b", "1px solid rgba(245, 158, 11, 0.3)"),
}


@dataclass(frozen=True)
class AccountViewModel:
    address: str
    status: str
    status_label: str
    badge: BadgeStyle
    balance: str
    contract_type: str
    last_activity: str
    has_activity: bool
    explorer_url: str


class AccountView(Protocol):
    def show_loading(self, show: bool) -> None: ...

    def show_error(self, message: str) -> None: ...

    def hide_error(self) -> None: ...

    def hide_results(self) -> None: ...

    def show_results(self, model: AccountViewModel) -> None: ...


def build_view_model(
    inspection: AccountInspection,
    settings: Settings | None = None,
    strict_balance: bool | None = None,
) -> AccountViewModel:
    """Raises MalformedInput for a non-numeric balance when strict."""
    settings = settings or get_settings()
    strict = settings.strict_balance if strict_balance is None else strict_balance
    return AccountViewModel(
        address=inspection.address,
        status=inspection.status.value,
        status_label=inspection.status.value.upper(),
        badge=STATUS_BADGES[inspection.status],
        balance=format_balance(inspection.balance, strict=strict),
        contract_type=inspection.contract_type.label,
        last_activity=inspection.last_activity or NO_ACTIVITY_TEXT,
        has_activity=inspection.last_activity is not None,
        explorer_url=settings.explorer_url(inspection.address),
    )


class AccountPresenter:
    """
    Wires user input to a view. `client_factory` builds the TonAPI client per
    lookup; tests inject one backed by httpx.MockTransport.
    """

    def __init__(
        self,
        view: AccountView,
        settings: Settings | None = None,
        client_factory: Callable[[], TonApiClient] | None = None,
    ) -> None:
        self.view = view
        self.settings = settings or get_settings()
        self._client_factory = client_factory or (lambda: TonApiClient(settings=self.settings))

    def inspect(self, address_text: str | None) -> AccountViewModel | None:
        """Run one lookup and render it. Returns the view model on success, None otherwise."""
        try:
            address = normalize_address(address_text)
        except EmptyAddressError as e:
            self.view.show_error(str(e))
            return None

        self.view.show_loading(True)
        self.view.hide_error()
        self.view.hide_results()
        try:
            with self._client_factory() as client:
                inspection = inspect_address(address, client=client)
            model = build_view_model(inspection, self.settings)
        except InspectorError as e:
            logger.warning("inspection_failed", address=address, error=str(e))
            self.view.show_error(f"{ERROR_PREFIX}: {e}")
            return None
        finally:
            self.view.show_loading(False)

        self.view.show_results(model)
        return model
