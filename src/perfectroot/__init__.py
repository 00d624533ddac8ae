from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("perfectroot")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .babylonian import expected_sqrt, initial_guess, sqrt_babylonian
from .context import PRECISION, PerfectReport, Profile, ScanConfig, SqrtResult
from .divisors import is_perfect, proper_divisors
from .runtime import APPLY
from .scan import iter_perfect, run_scan
from .utility import InvalidInput, UserInputError

__all__ = [
    "APPLY",
    "PRECISION",
    "InvalidInput",
    "PerfectReport",
    "Profile",
    "ScanConfig",
    "SqrtResult",
    "UserInputError",
    "__version__",
    "expected_sqrt",
    "initial_guess",
    "is_perfect",
    "iter_perfect",
    "proper_divisors",
    "run_scan",
    "sqrt_babylonian",
]
