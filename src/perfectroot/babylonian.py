# -----------------------------------------------------------------------------
#  babylonian.py
#  Square roots by the Babylonian method
# -----------------------------------------------------------------------------
"""
Babylonian (Heron's) square root:

    x[k+1] = (x[k] + S / x[k]) / 2

starting from a rough power-of-ten estimate, refined until two consecutive
guesses differ by at most 10^-precision.

All arithmetic is Decimal inside a local context sized to the radicand and
the requested precision. Binary doubles cannot resolve the 15th decimal of
numbers like √8128 ≈ 90.155 (one ulp there is ~1.4e-14), so a float loop with
a 1e-15 tolerance may settle into a two-value cycle and never terminate.
"""

from __future__ import annotations

from decimal import ROUND_CEILING, Decimal, localcontext

from perfectroot.context import PRECISION, SqrtResult
from perfectroot.utility import InvalidInput

GUARD_DIGITS = 10        # extra working digits beyond the requested decimals
MAX_ITERATIONS = 1_000   # quadratic convergence needs far fewer


class ConvergenceError(ArithmeticError):
    pass


def _as_radicand(radicand) -> Decimal:
    if isinstance(radicand, bool) or not isinstance(radicand, (int, float, Decimal)):
        raise InvalidInput(f"radicand must be a real number, got {type(radicand).__name__}")
    value = Decimal(radicand)  # floats convert exactly
    if not value.is_finite():
        raise InvalidInput(f"radicand must be finite, got {radicand!r}")
    if value <= 0:
        raise InvalidInput(f"radicand must be positive, got {radicand!r}")
    return value


def _check_precision(precision) -> int:
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise InvalidInput(f"precision must be a non-negative integer, got {precision!r}")
    return precision


def _working_precision(value: Decimal, precision: int) -> int:
    int_digits = max(1, value.adjusted() + 1)
    return int_digits + precision + GUARD_DIGITS


def initial_guess(radicand, precision: int = PRECISION) -> Decimal:
    """
    Rough estimate of √radicand from its digit count.

    For S = a × 10^(2n) with 1 ≤ a < 100, √S ≈ 10^n. Using
    digits = ⌈log10 S⌉ the estimate is 10^(digits / 2). The usual factor 2
    is dropped; it only costs iterations for the radicands we scan.
    """
    value = _as_radicand(radicand)
    precision = _check_precision(precision)
    with localcontext() as ctx:
        ctx.prec = _working_precision(value, precision)
        digits = value.log10().to_integral_value(rounding=ROUND_CEILING)
        return Decimal(10) ** (digits / 2)


def sqrt_babylonian(radicand, precision: int = PRECISION) -> SqrtResult:
    """
    Return SqrtResult(value, iterations) for √radicand.

    iterations starts at 1 for the initial guess and counts every refinement
    step. The loop always refines at least once, even if the initial guess is
    already exact.

    Raises InvalidInput for a non-positive or non-finite radicand (log10 of
    the initial guess is undefined there) and for a negative precision.
    """
    value = _as_radicand(radicand)
    precision = _check_precision(precision)

    with localcontext() as ctx:
        ctx.prec = _working_precision(value, precision)
        limit = Decimal(1).scaleb(-precision)
        guess = initial_guess(value, precision)
        iterations = 1

        while True:
            previous = guess
            guess = (guess + value / guess) / 2
            iterations += 1
            if abs(previous - guess) <= limit:
                break
            if iterations > MAX_ITERATIONS:
                raise ConvergenceError(
                    f"no convergence for √{radicand} after {MAX_ITERATIONS} iterations"
                )

        return SqrtResult(+guess, iterations)


def expected_sqrt(radicand, precision: int = PRECISION) -> Decimal:
    """Reference √radicand from Decimal.sqrt() (correctly rounded) at the same working precision."""
    value = _as_radicand(radicand)
    precision = _check_precision(precision)
    with localcontext() as ctx:
        ctx.prec = _working_precision(value, precision)
        return value.sqrt()
