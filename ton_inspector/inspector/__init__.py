"""
Inspection orchestration: one lookup from address text to a rendered view.

service runs fetch → balance resolution → classification; presenter drives an
abstract view (web page, terminal) with loading, error and result states.
"""

from ton_inspector.inspector.presenter import AccountPresenter, AccountView, AccountViewModel, build_view_model
from ton_inspector.inspector.service import AccountInspection, inspect_address, normalize_address

__all__ = [
    "AccountInspection",
    "AccountPresenter",
    "AccountView",
    "AccountViewModel",
    "build_view_model",
    "inspect_address",
    "normalize_address",
]
