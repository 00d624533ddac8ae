# output_manager.py

from __future__ import annotations

import os
import sys

from perfectroot.fmt import strip_ansi


def resolve_output_path(path: str) -> str:
    """
    Resolve user-provided output path.

    Rules:
    - '~' expanded to user home
    - Absolute paths unchanged
    - Relative paths are relative to the current directory
    """
    if not path:
        raise ValueError("Output path is empty")
    return os.path.abspath(os.path.expanduser(path))


class OutputManager:
    """
    Handles all report printing, to screen and/or a file.

    Usage:
        om = OutputManager(output_file="results/scan.txt")
        om.write("Perfect number: 6 = 1 + 2 + 3;")  # prints and appends (ANSI stripped)
        om.close()
    """

    def __init__(self, output_file: str | None = None, quiet: bool = False, capture: bool = False):
        """
        Parameters:
            output_file:
                None or ""       => screen only
                path/to/file.txt => append all runs to this file
            quiet: if True, no output to screen (only to file)
            capture: if True, keep everything written for getvalue()
        """
        self.quiet = quiet
        self.output_file = output_file or ""
        self.capture = capture
        self._buffer: list[str] = []
        self._written = False
        self._path: str | None = None

        if self.output_file:
            path = resolve_output_path(self.output_file)
            parent = os.path.dirname(path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            self._path = path

    def write(self, *args, sep: str = " ", end: str = "\n") -> None:
        """Write to screen and file (if configured)."""
        text = sep.join(str(a) for a in args) + end
        self._written = True
        if self.capture:
            self._buffer.append(text)

        if not self.quiet:
            print(text, end="", flush=True)

        if self._path:
            # Append per call; a failing file must not eat the screen copy
            try:
                with open(self._path, "a", encoding="utf-8") as fh:
                    fh.write(strip_ansi(text))
            except OSError as e:
                self._path = None
                print(f"[WARNING] Could not write output file: {self.output_file} ({type(e).__name__}: {e})",
                      file=sys.stderr)

    def getvalue(self) -> str:
        """Everything written so far (with color codes); empty unless capture=True."""
        return "".join(self._buffer)

    def close(self) -> None:
        """Add a separator line between runs in the output file."""
        if self._path and self._written:
            try:
                with open(self._path, "a", encoding="utf-8") as fh:
                    fh.write("\n")
            except OSError:
                pass
