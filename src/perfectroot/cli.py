# src/perfectroot/cli.py

"""
Perfect Numbers & Babylonian Square Roots

Description:
    Finds the perfect numbers in a range, shows each one with its proper
    divisors, and compares the reference square root from Decimal.sqrt()
    with the square root computed by the Babylonian method, including the
    number of iterations needed to converge.

usage: see perfectroot -h
"""

from __future__ import annotations

import argparse
import faulthandler
import sys
import textwrap
import traceback

from colorama import Fore, Style, just_fix_windows_console

from perfectroot import __version__ as _ver
from perfectroot import config as CONFIG
from perfectroot.output_manager import OutputManager
from perfectroot.context import Profile
from perfectroot.runtime import APPLY
from perfectroot.runtime import current as _rt_current
from perfectroot.scan import run_scan
from perfectroot.utility import UserInputError, validate_output_setting


def _install_loud_error_handlers(debug: bool) -> None:
    if not debug:
        return
    # Always show full Python tracebacks
    faulthandler.enable(file=sys.__stderr__)

    def _excepthook(exc_type, exc, tb):
        sys.stderr.write("\n[UNCAUGHT EXCEPTION]\n")
        traceback.print_exception(exc_type, exc, tb, file=sys.stderr)
        sys.stderr.flush()
    sys.excepthook = _excepthook


def _print_user_error(msg: str) -> None:
    """Uniform, one-line friendly error."""
    prefix = f"{Fore.RED}Error:{Style.RESET_ALL}"
    if not msg.startswith("Error:"):
        msg = f"{prefix} {msg}"
    print(msg, file=sys.stderr)


# ---- argparse ----
def _build_parser() -> argparse.ArgumentParser:

    epilog = textwrap.dedent("""\
    profiles:
      A TOML profile may set [SCAN] LOWER_BOUND / UPPER_BOUND,
      [SQRT] PRECISION and [BEHAVIOUR] DEBUG. Command-line flags win
      over the profile, the profile wins over the built-in defaults
      (1, 10000, 15).

    exit status:
      0 scan completed, 2 invalid input or profile, 130 interrupted
    """)

    p = argparse.ArgumentParser(
        prog="perfectroot",
        description="Perfect numbers with Babylonian square roots",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    p.add_argument("--lower", type=int, default=None, metavar="N", help="First candidate tested (default 1)")
    p.add_argument("--upper", type=int, default=None, metavar="N", help="Last candidate tested (default 10000)")
    p.add_argument("--precision", type=int, default=None, metavar="P",
                   help="Decimal digits for convergence and display (default 15)")
    p.add_argument("--profile", default=None, metavar="FILE", help="Load settings from a TOML profile")
    p.add_argument("--output", default=None, help="Append results to a file (also prints unless --quiet)")
    p.add_argument("--quiet", action="store_true", help="Suppress screen output")
    p.add_argument("--progress", action="store_true", help="Show a progress bar on stderr")
    p.add_argument("--debug", action="store_true", help="Show timings, cross-checks and full tracebacks")
    p.add_argument("--version", action="version", version=f"%(prog)s {_ver}")
    return p


def main(argv=None) -> int:
    """Thin wrapper: catch friendly errors, hide tracebacks unless debug."""
    try:
        return _main_impl(argv)
    except UserInputError as e:
        _print_user_error(str(e))
        return 2
    except KeyboardInterrupt:
        print("Aborted by user.", file=sys.stderr)
        return 130
    except Exception as e:
        debug = "--debug" in (sys.argv if argv is None else argv) or _rt_current().debug
        if debug:
            raise
        print(f"Unexpected error: {e.__class__.__name__}: {e}", file=sys.stderr)
        print("Run with --debug for a full traceback.", file=sys.stderr)
        return 1


def _print_debug_profile(profile: Profile) -> None:
    print(f"[debug] active profile: {profile.name} ({profile.description})", file=sys.stderr)
    if profile.source:
        print(f"[debug] profile file: {profile.source}", file=sys.stderr)
    for key in ("lower_bound", "upper_bound", "precision", "debug"):
        print(f"        {key:.<24} {getattr(profile, key)!r}", file=sys.stderr)


# ---- main ----
def _main_impl(argv=None) -> int:

    just_fix_windows_console()

    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load & apply profile: explicit --profile, else the packaged default
    profile = CONFIG.load_profile(args.profile)
    APPLY(profile)
    rt = _rt_current()
    if args.debug:
        rt.debug = True
    _install_loud_error_handlers(rt.debug)

    if rt.debug:
        _print_debug_profile(profile)

    cfg = CONFIG.scan_config(args.lower, args.upper, args.precision)

    # --- output routing ---
    try:
        target = validate_output_setting(args.output)
    except ValueError as e:
        raise UserInputError(f"--output: {e}") from None

    om = OutputManager(output_file=target, quiet=args.quiet)
    color = not args.quiet and sys.stdout.isatty()
    try:
        run_scan(cfg, om, progress=args.progress, color=color)
    finally:
        om.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
