# src/perfectroot/display.py
"""
Report rendering for perfect numbers.

One block per number:

    Perfect number: 28 = 1 + 2 + 4 + 7 + 14;
    Expected sqrt() of 28 = 5.291502622129181;
    Computed square root of 28 = 5.291502622129181;
    	reached in 7 iterations.

The reporter only formats; all numbers come from divisors.py and
babylonian.py.
"""

from __future__ import annotations

import sys
from time import perf_counter

from colorama import Fore, Style

from perfectroot.babylonian import expected_sqrt, sqrt_babylonian
from perfectroot.context import PRECISION, PerfectReport
from perfectroot.divisors import factorization, proper_divisors, sigma_from_factorization
from perfectroot.fmt import format_decimal, format_divisor_sum, format_factorization, label
from perfectroot.output_manager import OutputManager
from perfectroot.runtime import current as _rt_current


def build_report(n: int, precision: int = PRECISION) -> PerfectReport:
    return PerfectReport(
        n=n,
        divisors=tuple(proper_divisors(n)),
        expected=expected_sqrt(n, precision),
        computed=sqrt_babylonian(n, precision),
        precision=precision,
    )


def render_report(report: PerfectReport, *, color: bool = False) -> list[str]:
    n, places = report.n, report.precision
    expected = format_decimal(report.expected, places)
    computed = format_decimal(report.computed.value, places)
    return [
        f"{label('Perfect number:', color=color)} {n} = {format_divisor_sum(report.divisors)};",
        f"{label('Expected sqrt() of', color=color)} {n} = {expected};",
        f"{label('Computed square root of', color=color)} {n} = {computed};",
        f"\treached in {report.computed.iterations} iterations.",
        "",
    ]


def _print_debug_crosscheck(report: PerfectReport, dt_ms: float) -> None:
    """σ(n) from the prime factorization must be 2n for a perfect n (to STDERR)."""
    n = report.n
    fac = factorization(n)
    sigma = sigma_from_factorization(fac)
    if sigma == 2 * n:
        stat = f"{Fore.GREEN}{Style.BRIGHT}OK  {Style.RESET_ALL}"
    else:
        stat = f"{Fore.RED}{Style.BRIGHT}FAIL{Style.RESET_ALL}"
    print(
        f"[debug] {stat} n = {format_factorization(fac)};  σ(n) = {sigma} (2n = {2 * n})  "
        f"{len(report.divisors)} divisor(s)  {dt_ms:6.2f} ms",
        file=sys.stderr,
    )


def print_report(n: int, precision: int = PRECISION, om: OutputManager | None = None,
                 *, color: bool = False) -> PerfectReport:
    """
    Build and write the report block for n.
    om: if None, prints to screen.
    """
    t0 = perf_counter()
    report = build_report(n, precision)
    dt_ms = (perf_counter() - t0) * 1000.0

    om = om or OutputManager()
    for line in render_report(report, color=color):
        om.write(line)

    if _rt_current().debug:
        _print_debug_crosscheck(report, dt_ms)
    return report
