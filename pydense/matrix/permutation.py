"""
Row and column exchange.

Rows are views, so two rows can be exchanged either by relabelling the
views ('alias', O(1)) or by exchanging their values ('copy', O(cols)).
Columns are strided across the buffer and are always exchanged by value.
"""

from __future__ import annotations

from pydense.core.exceptions import ValidationError
from pydense.core.types import Matrix, SwapMode

VALID_MODES = ('alias', 'copy')


def swap_rows(A: Matrix, i: int, j: int, mode: SwapMode) -> None:
    """
    Swap rows i and j of A in place.

    Both modes leave the same values at every (row, col) position. They
    differ in layout:

    - 'alias' exchanges the two row views. No data moves, but afterwards
      the rows no longer tile the backing buffer in order (is_contiguous
      returns False) and whoever else holds the old views now sees them
      at their new positions.
    - 'copy' exchanges the values element by element. The layout, and
      any outstanding views, stay where they were.

    Args:
        A: Matrix to permute
        i: First row index
        j: Second row index
        mode: 'alias' or 'copy'

    Raises:
        ValidationError: If mode is not one of VALID_MODES
        IndexError: If i or j is out of range
    """
    if mode == 'alias':
        A[i], A[j] = A[j], A[i]
    elif mode == 'copy':
        row_i = A[i]
        row_j = A[j]
        for k in range(len(A[0])):
            row_i[k], row_j[k] = row_j[k], row_i[k]
    else:
        raise ValidationError(
            f"mode: must be one of {VALID_MODES}, got {mode!r}"
        )


def swap_cols(A: Matrix, i: int, j: int) -> None:
    """Swap columns i and j of A in place."""
    for row in A:
        row[i], row[j] = row[j], row[i]
