from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Iterator, Mapping

METHOD_ENV_VAR = "MATCACHE_INVERSE_METHOD"
QUIET_ENV_VAR = "MATCACHE_QUIET"

INVERSE_METHODS: tuple[str, ...] = ("lapack", "gauss")
DEFAULT_METHOD = "lapack"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def normalize_method(method: Any) -> str:
    if not isinstance(method, str):
        raise TypeError(f"inverse method must be a string, got {type(method).__name__}")
    key = method.strip().lower()
    if key not in INVERSE_METHODS:
        raise ValueError(
            f"Unknown inverse method: {method!r} (expected one of {', '.join(INVERSE_METHODS)})"
        )
    return key


class Settings:
    """Process-wide knobs for the solver.

    Not thread-safe; like the cache itself, settings assume a single writer.
    """

    __slots__ = ("_method", "_emit_diagnostics")

    def __init__(self, *, method: str = DEFAULT_METHOD, emit_diagnostics: bool = True) -> None:
        self._method = normalize_method(method)
        self._emit_diagnostics = bool(emit_diagnostics)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        method = env.get(METHOD_ENV_VAR) or DEFAULT_METHOD
        quiet = env.get(QUIET_ENV_VAR, "").strip().lower() in _TRUTHY
        return cls(method=method, emit_diagnostics=not quiet)

    @property
    def method(self) -> str:
        return self._method

    @method.setter
    def method(self, value: str) -> None:
        self._method = normalize_method(value)

    @property
    def emit_diagnostics(self) -> bool:
        return self._emit_diagnostics

    @emit_diagnostics.setter
    def emit_diagnostics(self, value: bool) -> None:
        self._emit_diagnostics = bool(value)

    def as_dict(self) -> dict[str, Any]:
        return {"method": self._method, "emit_diagnostics": self._emit_diagnostics}

    def __repr__(self) -> str:
        return f"Settings(method={self._method!r}, emit_diagnostics={self._emit_diagnostics})"


settings = Settings.from_env()


@contextmanager
def override_settings(**changes: Any) -> Iterator[Settings]:
    """Temporarily override fields of the global ``settings`` object.

    Unknown field names raise ``TypeError`` before anything is changed.
    """

    unknown = sorted(set(changes) - set(settings.as_dict()))
    if unknown:
        raise TypeError(f"Unknown setting(s): {', '.join(unknown)}")

    previous = settings.as_dict()
    try:
        for name, value in changes.items():
            setattr(settings, name, value)
        yield settings
    finally:
        for name, value in previous.items():
            setattr(settings, name, value)
