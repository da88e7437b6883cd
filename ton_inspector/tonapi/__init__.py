"""
TonAPI HTTP client.

Thin wrapper over GET /accounts/{address}; every transport problem surfaces
as TransportError.
"""

from ton_inspector.tonapi.client import TonApiClient

__all__ = ["TonApiClient"]
