# src/perfectroot/scan.py
from __future__ import annotations

import sys
from collections.abc import Iterator
from time import perf_counter

from perfectroot.context import ScanConfig
from perfectroot.display import print_report
from perfectroot.divisors import is_perfect
from perfectroot.output_manager import OutputManager
from perfectroot.progress import ScanProgress
from perfectroot.runtime import current as _rt_current


def iter_perfect(config: ScanConfig) -> Iterator[int]:
    """Yield the perfect numbers in [lower_bound, upper_bound], ascending."""
    for n in config.candidates():
        if is_perfect(n):
            yield n


def run_scan(config: ScanConfig, om: OutputManager | None = None, *,
             progress: bool = False, color: bool = False) -> list[int]:
    """
    Scan the configured range and write one report block per perfect number.
    Returns the numbers found. An empty range writes nothing.
    """
    om = om or OutputManager()
    debug = _rt_current().debug
    candidates = config.candidates()
    bar = ScanProgress(candidates, enabled=progress)

    if debug:
        print(
            f"[debug] scanning [{config.lower_bound}, {config.upper_bound}] "
            f"({len(candidates)} candidate(s)), precision {config.precision}",
            file=sys.stderr,
        )

    found: list[int] = []
    t0 = perf_counter()
    for i, n in enumerate(candidates, 1):
        if is_perfect(n):
            bar.clear()
            print_report(n, config.precision, om, color=color)
            found.append(n)
        bar.tick(i, n, len(found))
    bar.clear()

    if debug:
        dt_ms = (perf_counter() - t0) * 1000.0
        print(f"[debug] found {len(found)} perfect number(s) in {dt_ms:.2f} ms", file=sys.stderr)
    return found
