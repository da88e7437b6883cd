"""
Command-line lookup.

Usage:
    ton-inspector EQD...address
    ton-inspector EQD...address --json
    python -m ton_inspector.cli EQD...address --base-url https://testnet.tonapi.io/v2
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import Sequence

from ton_inspector.config import get_settings
from ton_inspector.inspector import AccountPresenter
from ton_inspector.inspector.views import ConsoleView
from ton_inspector.tonapi import TonApiClient


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ton-inspector", description="Inspect a TON account address")
    parser.add_argument("address", help="TON address (raw or user-friendly form)")
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")
    parser.add_argument("--base-url", default=None, help="TonAPI base URL (default: TONAPI_BASE_URL or https://tonapi.io/v2)")
    parser.add_argument(
        "--lenient-balance",
        action="store_true",
        help="Show a malformed balance as 0 TON instead of failing",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    if args.base_url:
        settings = replace(settings, tonapi_base_url=args.base_url.rstrip("/"))
    if args.lenient_balance:
        settings = replace(settings, strict_balance=False)

    view = ConsoleView(as_json=args.json)
    presenter = AccountPresenter(view, settings=settings, client_factory=lambda: TonApiClient(settings=settings))
    model = presenter.inspect(args.address)
    return 0 if model is not None else 1


if __name__ == "__main__":
    sys.exit(main())
