# src/perfectroot/config.py
"""
TOML profiles.

    [PROFILE]    name, description   (optional, shown with --debug)
    [SCAN]       LOWER_BOUND, UPPER_BOUND
    [SQRT]       PRECISION
    [BEHAVIOUR]  DEBUG

Missing keys keep the built-in defaults; unknown sections are ignored.
"""

from __future__ import annotations

import tomllib
from dataclasses import replace
from importlib.resources import as_file
from importlib.resources import files as pkg_files
from pathlib import Path

from perfectroot.context import Profile, ScanConfig
from perfectroot.runtime import current as _rt_current
from perfectroot.utility import UserInputError

# (section, key) -> (Profile field, expected type)
_SCHEMA: dict[tuple[str, str], tuple[str, type]] = {
    ("SCAN", "LOWER_BOUND"): ("lower_bound", int),
    ("SCAN", "UPPER_BOUND"): ("upper_bound", int),
    ("SQRT", "PRECISION"): ("precision", int),
    ("BEHAVIOUR", "DEBUG"): ("debug", bool),
}


def default_profile_path() -> Path:
    ref = pkg_files("perfectroot") / "profiles" / "default.toml"
    with as_file(ref) as real:
        return Path(real)


def _read(path: Path) -> dict:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        raise UserInputError(f"profile not found: {path}") from None
    except tomllib.TOMLDecodeError as e:
        raise UserInputError(f"{path.name} is not valid TOML: {e}") from None
    except OSError as e:
        raise UserInputError(f"cannot read {path}: {e.strerror or e}") from None


def _typed(value, expected: type, where: str):
    # bool is an int subclass; keep them apart in both directions
    if isinstance(value, bool) != (expected is bool) or not isinstance(value, expected):
        kind = "true or false" if expected is bool else "an integer"
        raise UserInputError(f"{where} must be {kind}, got {value!r}.")
    return value


def load_profile(path: str | Path | None = None) -> Profile:
    """Read a profile file (the packaged default when path is None) into a Profile."""
    path = Path(path).expanduser() if path else default_profile_path()
    raw = _read(path)

    values: dict[str, object] = {}
    for (section, key), (attr, expected) in _SCHEMA.items():
        table = raw.get(section, {})
        if not isinstance(table, dict):
            raise UserInputError(f"{path.name}: [{section}] must be a table.")
        if key in table:
            values[attr] = _typed(table[key], expected, f"{path.name}: [{section}] {key}")

    if values.get("precision", 0) < 0:
        raise UserInputError(f"{path.name}: [SQRT] PRECISION must be >= 0, got {values['precision']}.")

    meta = raw.get("PROFILE", {})
    meta = meta if isinstance(meta, dict) else {}
    description = " ".join(str(meta.get("description", "")).split())
    return Profile(
        name=str(meta.get("name") or path.stem),
        description=description or "(no description)",
        source=path,
        **values,
    )


def scan_config(lower: int | None = None, upper: int | None = None,
                precision: int | None = None, *, profile: Profile | None = None) -> ScanConfig:
    """
    Effective ScanConfig: explicit arguments win over the profile, which
    already carries the built-in defaults for anything it leaves out.
    The active runtime profile is used when none is given.
    """
    profile = profile or _rt_current().profile
    overrides = {k: v for k, v in (("lower_bound", lower), ("upper_bound", upper),
                                   ("precision", precision)) if v is not None}
    merged = replace(profile, **overrides)
    if merged.precision < 0:
        raise UserInputError(f"precision must be >= 0, got {merged.precision}.")
    return ScanConfig(merged.lower_bound, merged.upper_bound, merged.precision)
