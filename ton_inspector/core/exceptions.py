"""
Application-level exceptions.

Only two failure kinds reach callers: transport failures talking to TonAPI and
malformed balances reaching the strict formatter. Irregular account records are
absorbed by the classifier and never raise.
"""

from __future__ import annotations


class InspectorError(Exception):
    """Base class for all TON inspector errors."""


class TransportError(InspectorError):
    """Non-2xx response, network failure, or unreadable body from TonAPI."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedInput(InspectorError, ValueError):
    """A balance string that is not a non-negative integer amount of nano-TON."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Malformed balance: {value!r}")
        self.value = value


class EmptyAddressError(InspectorError, ValueError):
    """Address text was empty after trimming."""

    def __init__(self) -> None:
        super().__init__("Please enter a TON address")
