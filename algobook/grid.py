"""Square grid problems: Sudoku validity, rotation and zero propagation."""

from collections.abc import Iterable, Iterator, Sequence

_SIZE = 9
_BOX = 3
_EMPTY = "."


def _units(board: Sequence[Sequence[str]]) -> Iterator[list[str]]:
    yield from (list(row) for row in board)
    yield from (list(column) for column in zip(*board))
    for top in range(0, _SIZE, _BOX):
        for left in range(0, _SIZE, _BOX):
            yield [
                cell
                for row in board[top:top + _BOX]
                for cell in row[left:left + _BOX]
            ]


def _distinct(unit: Iterable[str]) -> bool:
    filled = [cell for cell in unit if cell != _EMPTY]
    return len(filled) == len(set(filled))


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Tell whether no row, column or 3x3 box of ``board`` repeats a digit.

    Empty cells are written as ``"."``.
    """
    if len(board) != _SIZE or any(len(row) != _SIZE for row in board):
        raise ValueError("a Sudoku board must be 9 by 9")
    return all(_distinct(unit) for unit in _units(board))


def rotate_image(matrix: list[list[int]]) -> None:
    """Rotate the square ``matrix`` a quarter turn clockwise, in place."""
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("matrix must be square")
    matrix[:] = [list(row) for row in zip(*reversed(matrix))]


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column of ``matrix`` that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0