# -----------------------------------------------------------------------------
#  Errors and small helpers shared by the CLI and the solver
# -----------------------------------------------------------------------------

from __future__ import annotations

import os


class UserInputError(Exception):
    pass


class InvalidInput(UserInputError, ValueError):
    """Raised for values outside a function's documented domain (e.g. sqrt of 0)."""


# report files must not clobber the project's own sources or configs
_PROTECTED_SUFFIXES = (".py", ".md", ".toml")


def validate_output_setting(output_file: str | None) -> str | None:
    """
    Check an --output target: None/"" means screen only, anything else must
    name a plain file (not a directory, not a source/profile/doc file).
    Returns output_file unchanged or raises ValueError.
    """
    if not output_file:
        return output_file
    if output_file.endswith(("/", "\\")) or os.path.isdir(output_file):
        raise ValueError(f"expected a file, got a directory: {output_file}")
    suffix = os.path.splitext(output_file)[1].lower()
    if suffix in _PROTECTED_SUFFIXES:
        raise ValueError(f"refusing to write reports to a {suffix} file: {output_file}")
    return output_file
