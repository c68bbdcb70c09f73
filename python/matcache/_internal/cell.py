from __future__ import annotations

import enum
from typing import Any, Union

import numpy as np

from . import formatting as _formatting
from .coercion import coerce_matrix, freeze


class NotInvertible(enum.Enum):
    """Sentinel type for a cached "no inverse exists" outcome."""

    NOT_INVERTIBLE = "not-invertible"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_INVERTIBLE"


NOT_INVERTIBLE = NotInvertible.NOT_INVERTIBLE


class FailureReason(str, enum.Enum):
    # SINGULAR keeps the historical "Non-singular" wording (zero determinant).
    NON_SQUARE = "Non-square matrix."
    SINGULAR = "Non-singular matrix."


class CacheState(str, enum.Enum):
    UNCOMPUTED = "uncomputed"
    COMPUTED = "computed"
    FAILED = "failed"


Inverse = Union[np.ndarray, NotInvertible]


class CacheMatrix:
    """A matrix together with its memoized inverse.

    The cell owns a private read-only copy of the matrix. Replacing the matrix
    with :meth:`reset` drops the cached inverse and message together, so a
    stale inverse can never outlive the matrix it was computed from.

    The cell does no validation of its own; :func:`matcache.cache_solve`
    decides whether the matrix is invertible and fills the cache.

    Only dense numeric arrays are supported. The mutators are total over
    NumPy-coercible numeric input; anything else (text, ragged rows, objects)
    makes the constructor, :meth:`reset` and :meth:`set_inverse` raise
    ``TypeError`` or ``ValueError`` before any state changes.
    Not safe for concurrent use.
    """

    __slots__ = ("_matrix", "_inverse", "_message")

    def __init__(self, initial: Any = None) -> None:
        self._matrix: np.ndarray = coerce_matrix(initial)
        self._inverse: Inverse | None = None
        self._message: str = ""

    def reset(self, y: Any) -> None:
        matrix = coerce_matrix(y)
        self._matrix = matrix
        self._inverse = None
        self._message = ""

    set = reset

    def get_matrix(self) -> np.ndarray:
        return self._matrix

    get = get_matrix

    def set_inverse(self, value: Inverse | None) -> None:
        """Overwrite the cached inverse.

        Storing a real matrix (or ``None``) clears the message, which only
        accompanies the ``NOT_INVERTIBLE`` sentinel.
        """
        if value is None or value is NOT_INVERTIBLE:
            self._inverse = value
            if value is None:
                self._message = ""
            return
        array = np.asarray(value, dtype=np.float64)
        if array.flags.writeable:
            if array is value:
                array = array.copy()
            freeze(array)
        self._inverse = array
        self._message = ""

    def get_inverse(self) -> Inverse | None:
        return self._inverse

    def set_message(self, msg: str) -> None:
        self._message = str(msg)

    def get_message(self) -> str:
        return self._message

    @property
    def state(self) -> CacheState:
        if self._inverse is None:
            return CacheState.UNCOMPUTED
        if self._inverse is NOT_INVERTIBLE:
            return CacheState.FAILED
        return CacheState.COMPUTED

    @property
    def is_cached(self) -> bool:
        return self._inverse is not None

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self._matrix.shape)

    def failure_reason(self) -> FailureReason | None:
        if self._inverse is not NOT_INVERTIBLE:
            return None
        try:
            return FailureReason(self._message)
        except ValueError:
            return None

    def __str__(self) -> str:
        return _formatting.cache_matrix_str(self)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} shape={self.shape} state={self.state.value}>"


def make_cache_matrix(initial: Any = None) -> CacheMatrix:
    """Create a cache matrix holding ``initial`` with an empty cache.

    ``initial`` defaults to an empty ``0 x 0`` matrix; callers should pass
    the matrix they intend to invert.
    """
    return CacheMatrix(initial)
