from __future__ import annotations

from typing import Any

import numpy as np

from . import warnings as _diag
from .cell import NOT_INVERTIBLE, CacheMatrix, FailureReason, Inverse
from .inversion import invert
from .settings import settings

INVALID_INPUT_MESSAGE = "Invalid input."


def _emit(message: str, category: type[_diag.MatCacheWarning]) -> None:
    if settings.emit_diagnostics:
        # user -> cache_solve -> _emit -> emit
        _diag.emit(message, category, stacklevel=4)


def _compute_inverse(matrix: np.ndarray, method: str) -> np.ndarray:
    return invert(matrix, method)


def _validate(matrix: np.ndarray) -> FailureReason | None:
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        return FailureReason.NON_SQUARE
    if np.linalg.det(matrix) == 0:
        return FailureReason.SINGULAR
    return None


def cache_solve(cell: Any) -> Inverse | None:
    """Return the inverse of the matrix held in ``cell``, computing it once.

    Returns the cached inverse on a hit. On a miss the matrix is checked for
    squareness and a non-zero determinant; a failure is cached as
    ``NOT_INVERTIBLE`` with its message and reported through a
    ``MatCacheNotInvertibleWarning``. Cached failures replay the same
    warning on every call.

    Returns ``None`` (after an "Invalid input." warning) when ``cell`` is not
    a :class:`CacheMatrix`.

    Raises:
        InversionError: the matrix passed validation but the inversion
            routine failed numerically. The cache is left untouched.
    """
    if not isinstance(cell, CacheMatrix):
        _emit(INVALID_INPUT_MESSAGE, _diag.MatCacheInvalidInputWarning)
        return None

    cached = cell.get_inverse()
    if cached is not None:
        if cached is NOT_INVERTIBLE:
            _emit(cell.get_message(), _diag.MatCacheNotInvertibleWarning)
        return cached

    matrix = cell.get_matrix()
    reason = _validate(matrix)
    if reason is not None:
        cell.set_message(reason.value)
        result: Inverse = NOT_INVERTIBLE
    else:
        result = _compute_inverse(matrix, settings.method)

    cell.set_inverse(result)
    if reason is not None:
        _emit(reason.value, _diag.MatCacheNotInvertibleWarning)
    # Stored copy is read-only; hand that one back so repeat calls match.
    return cell.get_inverse()
