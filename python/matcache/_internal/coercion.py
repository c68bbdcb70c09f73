from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def empty_matrix() -> np.ndarray:
    return freeze(np.empty((0, 0), dtype=np.float64))


def freeze(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


def coerce_matrix(candidate: Any) -> np.ndarray:
    """Return a private, read-only float64 copy of ``candidate``.

    Dimensionality is not checked here; a 1-D or 3-D input is stored as-is
    and rejected later by the solver's shape check.
    """
    if candidate is None:
        return empty_matrix()
    if isinstance(candidate, (str, bytes, bytearray)):
        raise TypeError("Matrix data must be numeric, not text.")

    try:
        array = np.array(candidate, dtype=np.float64, copy=True)
    except TypeError as exc:
        raise TypeError(
            "Matrix data must be provided as a nested numeric sequence or a NumPy array."
        ) from exc
    except ValueError as exc:
        if is_sequence_like(candidate):
            raise ValueError("Matrix data must be rectangular (rows of equal length).") from exc
        raise ValueError("Matrix data must be numeric.") from exc

    return freeze(array)
