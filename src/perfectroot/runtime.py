# runtime.py
from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field

from perfectroot.context import Profile


@dataclass
class Runtime:
    profile: Profile = field(default_factory=Profile)
    debug: bool = False  # [debug] lines on stderr, tracebacks

    def use(self, profile: Profile) -> None:
        self.profile = profile
        self.debug = profile.debug


_current_runtime: ContextVar[Runtime | None] = ContextVar("perfectroot_runtime", default=None)


def current() -> Runtime:
    rt = _current_runtime.get()
    if rt is None:
        rt = Runtime()
        _current_runtime.set(rt)
    return rt


def reset() -> Runtime:
    """Install a fresh Runtime (built-in defaults, debug off) and return it."""
    rt = Runtime()
    _current_runtime.set(rt)
    return rt


def APPLY(profile: Profile) -> None:
    current().use(profile)
