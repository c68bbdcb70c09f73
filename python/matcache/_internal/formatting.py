from __future__ import annotations

from typing import Any

import numpy as np

_EDGE_ITEMS: int = 4


def _edge_indices(length: int) -> tuple[list[int], list[int], bool]:
    if length <= _EDGE_ITEMS * 2:
        return list(range(length)), [], False
    head = list(range(_EDGE_ITEMS))
    tail = list(range(length - _EDGE_ITEMS, length))
    return head, tail, True


def _format_value(value: Any) -> str:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _format_matrix_row(
    matrix: np.ndarray,
    row_index: int,
    col_head: list[int],
    col_tail: list[int],
    truncated: bool,
) -> str:
    entries = [_format_value(matrix[row_index, col]) for col in col_head]
    if truncated:
        entries.append("...")
    entries.extend(_format_value(matrix[row_index, col]) for col in col_tail)
    return " ".join(entries)


def matrix_lines(matrix: np.ndarray) -> list[str]:
    if matrix.ndim != 2:
        # Not a matrix yet (the solver will report it); fall back to NumPy.
        return np.array2string(matrix, edgeitems=_EDGE_ITEMS).splitlines()

    rows, cols = matrix.shape
    if rows == 0 or cols == 0:
        return ["[]"]

    row_head, row_tail, rows_truncated = _edge_indices(rows)
    col_head, col_tail, cols_truncated = _edge_indices(cols)

    lines = ["["]
    for row_index in row_head:
        lines.append(f" [{_format_matrix_row(matrix, row_index, col_head, col_tail, cols_truncated)}]")
    if rows_truncated:
        lines.append(" ...")
    for row_index in row_tail:
        lines.append(f" [{_format_matrix_row(matrix, row_index, col_head, col_tail, cols_truncated)}]")
    lines.append("]")
    return lines


def cache_matrix_str(cell: Any) -> str:
    matrix = cell.get_matrix()
    info = [f"shape={tuple(matrix.shape)}", f"state={cell.state.value}"]
    message = cell.get_message()
    if message:
        info.append(f"message={message!r}")
    header = f"{cell.__class__.__name__}({', '.join(info)})"
    return "\n".join([header, *matrix_lines(matrix)])
