"""Dense inversion routines used on a cache miss.

Every numerical failure is reported as :class:`InversionError`, which callers
of the solver see as the single hard-failure path.
"""

from __future__ import annotations

import numpy as np

from .settings import normalize_method

__all__ = [
    "InversionError",
    "invert",
    "invert_lapack",
    "invert_gauss_jordan",
]


class InversionError(ArithmeticError):
    """Numerical failure inside an inversion routine after validation passed."""


def _check_finite(result: np.ndarray) -> np.ndarray:
    if not np.all(np.isfinite(result)):
        raise InversionError("Inversion produced non-finite values (overflow or NaN input).")
    return result


def invert_lapack(a: np.ndarray) -> np.ndarray:
    """Invert using LAPACK's LU-based solver (``numpy.linalg.inv``)."""
    try:
        result = np.linalg.inv(a)
    except np.linalg.LinAlgError as exc:
        raise InversionError(f"LAPACK inversion failed: {exc}") from exc
    return _check_finite(result)


def invert_gauss_jordan(a: np.ndarray) -> np.ndarray:
    """Invert using Gauss-Jordan elimination with partial pivoting."""
    A = np.array(a, dtype=np.float64)
    n = A.shape[0]
    AI = np.hstack([A, np.identity(n)])

    for col in range(n):
        pivot = col + int(np.argmax(np.abs(AI[col:, col])))
        if AI[pivot, col] == 0.0:
            raise InversionError(f"Zero pivot in column {col}; matrix is singular to working precision.")
        if pivot != col:
            AI[[col, pivot]] = AI[[pivot, col]]

        AI[col] /= AI[col, col]
        # rank-1 update clears column `col` everywhere but the pivot row
        factors = AI[:, col].copy()
        factors[col] = 0.0
        AI -= np.outer(factors, AI[col])

    return _check_finite(AI[:, n:])


def invert(a: np.ndarray, method: str = "lapack") -> np.ndarray:
    """Invert a square matrix with the named routine ('lapack' or 'gauss')."""
    method = normalize_method(method)
    if method == "gauss":
        return invert_gauss_jordan(a)
    return invert_lapack(a)
