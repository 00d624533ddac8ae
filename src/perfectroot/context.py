from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import NamedTuple

LOWER_BOUND = 1        # smallest number to test
UPPER_BOUND = 10_000   # largest number to test
PRECISION = 15         # decimal digits for convergence and display


@dataclass(frozen=True)
class Profile:
    """Values read from a TOML profile; [PROFILE] name/description are display-only."""
    name: str = "default"
    description: str = "(no description)"
    lower_bound: int = LOWER_BOUND
    upper_bound: int = UPPER_BOUND
    precision: int = PRECISION
    debug: bool = False
    source: Path | None = None


@dataclass(frozen=True)
class ScanConfig:
    lower_bound: int = LOWER_BOUND
    upper_bound: int = UPPER_BOUND
    precision: int = PRECISION

    @property
    def is_empty(self) -> bool:
        """Non-positive bounds or an inverted range scan nothing."""
        return self.lower_bound < 1 or self.upper_bound < 1 or self.lower_bound > self.upper_bound

    def candidates(self) -> range:
        if self.is_empty:
            return range(0)
        return range(self.lower_bound, self.upper_bound + 1)


class SqrtResult(NamedTuple):
    value: Decimal
    iterations: int


@dataclass(frozen=True)
class PerfectReport:
    n: int
    divisors: tuple[int, ...]
    expected: Decimal           # reference Decimal.sqrt()
    computed: SqrtResult        # Babylonian value + iteration count
    precision: int = PRECISION
