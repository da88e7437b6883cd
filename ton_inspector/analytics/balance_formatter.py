"""
Nano-TON → TON display strings.

Balances are arbitrary-precision integers; all arithmetic is integer or exact
Decimal so amounts beyond 2^53 nano keep every digit.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Any

from ton_inspector.core.exceptions import MalformedInput

NANO_PER_TON = 1_000_000_000
UNIT_LABEL = "TON"
ZERO_BALANCE = f"0 {UNIT_LABEL}"
DISPLAY_DECIMALS = Decimal("0.01")

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_nano(value: Any) -> int | None:
    """
    Parse an integer nano amount. Returns None when the value is not an integer
    (text with surrounding whitespace is accepted; floats, bools and fractions are not).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


def format_balance(amount: str | int | None, strict: bool = True) -> str:
    """
    Render a nano-TON amount in TON.

    "5000000000" -> "5 TON", "1234567890" -> "1.23 TON" (two decimals, half-even).
    Empty, whitespace-only, None and "0" -> "0 TON". A non-numeric or negative amount raises
    MalformedInput when strict, otherwise renders as "0 TON".
    """
    if amount is None or (isinstance(amount, str) and amount.strip() in ("", "0")):
        return ZERO_BALANCE

    nano = parse_nano(amount)
    if nano is None or nano < 0:
        if strict:
            raise MalformedInput(amount)
        return ZERO_BALANCE

    tons, remainder = divmod(nano, NANO_PER_TON)
    if remainder == 0:
        return f"{tons} {UNIT_LABEL}"

    with localcontext() as ctx:
        ctx.prec = len(str(nano)) + 4
        value = (Decimal(nano) / NANO_PER_TON).quantize(DISPLAY_DECIMALS, rounding=ROUND_HALF_EVEN)
    return f"{value} {UNIT_LABEL}"
