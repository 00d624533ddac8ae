# src/perfectroot/progress.py
from __future__ import annotations

import sys


class ScanProgress:
    """
    One-line scan status on STDERR: percent of the range done, current
    candidate and hits so far. Redrawn roughly once per percent of the range.
    """

    WIDTH = 24

    def __init__(self, candidates: range, *, enabled: bool = True, stream=None):
        self.candidates = candidates
        self.enabled = enabled and len(candidates) > 0
        self.stream = stream or sys.stderr
        self._step = max(1, len(candidates) // 100)
        self._drawn = False

    def tick(self, index: int, n: int, found: int) -> None:
        """index is 1-based position of n within the range."""
        if not self.enabled or (index % self._step and index != len(self.candidates)):
            return
        frac = index / len(self.candidates)
        fill = int(frac * self.WIDTH)
        bar = "#" * fill + "-" * (self.WIDTH - fill)
        self.stream.write(f"\r[{bar}] {int(frac * 100):3d}%  n = {n}  found {found}")
        self.stream.flush()
        self._drawn = True

    def clear(self) -> None:
        if self._drawn:
            self.stream.write("\r\x1b[2K")
            self.stream.flush()
            self._drawn = False
