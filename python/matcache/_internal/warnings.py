"""matcache warning categories.

Diagnostics from ``cache_solve`` are delivered as warnings so callers can
filter or suppress them without catching all UserWarning.

Keep this module lightweight and dependency-free to avoid import cycles.
"""

from __future__ import annotations

import warnings as _warnings


class MatCacheWarning(UserWarning):
    """Base warning category for all matcache user-facing diagnostics."""


class MatCacheInvalidInputWarning(MatCacheWarning):
    """The argument handed to the solver is not a cache matrix."""


class MatCacheNotInvertibleWarning(MatCacheWarning):
    """The held matrix has no inverse (non-square or zero determinant)."""


# Diagnostics repeat on every call; filters installed later by callers still win.
_warnings.filterwarnings("always", category=MatCacheWarning)


def emit(message: str, category: type[MatCacheWarning], *, stacklevel: int = 3) -> None:
    _warnings.warn(message, category, stacklevel=stacklevel)
