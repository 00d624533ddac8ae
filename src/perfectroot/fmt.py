# src/perfectroot/fmt.py
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from colorama import Fore, Style

# Single source of truth for ANSI stripping
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(s: str | None) -> str:
    """Return s with ANSI escape sequences removed."""
    return "" if s is None else ANSI_RE.sub("", s)


def format_decimal(value: Decimal, places: int) -> str:
    """Fixed-point string with exactly `places` decimals (half-even, like printf)."""
    q = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return f"{value.quantize(q, rounding=ROUND_HALF_EVEN):f}"


def format_divisor_sum(divisors: Iterable[int]) -> str:
    """[1, 2, 3] -> '1 + 2 + 3'."""
    return " + ".join(str(d) for d in divisors)


def format_factorization(fac: Mapping[int, int]) -> str:
    """
    Turn {p: e, ...} into a tidy string like: 2^3 × 3 × 5^2
    """
    parts: list[str] = []
    for p, e in sorted(fac.items()):
        parts.append(f"{p}^{e}" if e > 1 else f"{p}")
    return " × ".join(parts) if parts else "1"


def label(text: str, *, color: bool = False, tint: str = Fore.CYAN) -> str:
    """Optionally wrap a line label in a bright colour."""
    if not color:
        return text
    return f"{tint}{Style.BRIGHT}{text}{Style.RESET_ALL}"
