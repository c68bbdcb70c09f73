"""Memoized matrix inversion.

A :class:`CacheMatrix` holds a matrix and remembers its inverse;
:func:`cache_solve` computes the inverse on first request and serves the
cached value afterwards, including cached "not invertible" outcomes.
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _dist_version

try:
    __version__ = _dist_version("matcache")
except PackageNotFoundError:  # pragma: no cover - running from an uninstalled checkout
    __version__ = "unknown"

from ._internal.cell import (
    NOT_INVERTIBLE,
    CacheMatrix,
    CacheState,
    FailureReason,
    NotInvertible,
    make_cache_matrix,
)
from ._internal.inversion import InversionError, invert, invert_gauss_jordan, invert_lapack
from ._internal.settings import Settings, override_settings, settings
from ._internal.solver import INVALID_INPUT_MESSAGE, cache_solve
from ._internal.warnings import (
    MatCacheInvalidInputWarning,
    MatCacheNotInvertibleWarning,
    MatCacheWarning,
)

__all__ = [
    "CacheMatrix",
    "CacheState",
    "FailureReason",
    "INVALID_INPUT_MESSAGE",
    "InversionError",
    "MatCacheInvalidInputWarning",
    "MatCacheNotInvertibleWarning",
    "MatCacheWarning",
    "NOT_INVERTIBLE",
    "NotInvertible",
    "Settings",
    "cache_solve",
    "invert",
    "invert_gauss_jordan",
    "invert_lapack",
    "make_cache_matrix",
    "override_settings",
    "settings",
]
