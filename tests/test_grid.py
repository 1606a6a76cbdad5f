import copy

import pytest

from algobook.grid import is_valid_sudoku, rotate_image, set_zeroes

VALID_BOARD = [
    "53..7....",
    "6..195...",
    ".98....6.",
    "8...6...3",
    "4..8.3..1",
    "7...2...6",
    ".6....28.",
    "...419..5",
    "....8..79",
]


def _with_cell(board, row, col, value):
    grid = [list(line) for line in board]
    grid[row][col] = value
    return grid


def test_valid_board():
    assert is_valid_sudoku(VALID_BOARD) is True


def test_empty_board_is_valid():
    assert is_valid_sudoku(["." * 9] * 9) is True


def test_duplicate_in_row():
    assert is_valid_sudoku(_with_cell(VALID_BOARD, 0, 2, "5")) is False


def test_duplicate_in_column():
    assert is_valid_sudoku(_with_cell(VALID_BOARD, 8, 0, "5")) is False


def test_duplicate_in_box_only():
    # "9" at (1, 1) clashes with the "9" at (2, 2) in the top-left box only.
    board = _with_cell(VALID_BOARD, 1, 1, "9")
    assert is_valid_sudoku(board) is False


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        is_valid_sudoku(["." * 9] * 8)


def test_rotate_two_by_two():
    matrix = [[1, 2], [3, 4]]
    rotate_image(matrix)
    assert matrix == [[3, 1], [4, 2]]


def test_rotate_maps_cells_clockwise():
    original = [[r * 4 + c for c in range(4)] for r in range(4)]
    matrix = copy.deepcopy(original)
    rotate_image(matrix)
    n = len(original)
    for r in range(n):
        for c in range(n):
            assert matrix[c][n - 1 - r] == original[r][c]


def test_four_rotations_are_identity():
    original = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    matrix = copy.deepcopy(original)
    outer = matrix
    for _ in range(4):
        rotate_image(matrix)
    assert matrix == original
    assert matrix is outer


def test_rotate_rejects_non_square():
    with pytest.raises(ValueError):
        rotate_image([[1, 2, 3], [4, 5, 6]])


def test_set_zeroes_known_case():
    matrix = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
    set_zeroes(matrix)
    assert matrix == [[1, 0, 1], [0, 0, 0], [1, 0, 1]]


def test_set_zeroes_invariant():
    original = [[0, 1, 2, 0], [3, 4, 5, 2], [1, 3, 1, 5], [7, 0, 8, 9]]
    matrix = copy.deepcopy(original)
    set_zeroes(matrix)
    zero_rows = {i for i, row in enumerate(original) if 0 in row}
    zero_cols = {j for row in original for j, v in enumerate(row) if v == 0}
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if i in zero_rows or j in zero_cols:
                assert value == 0
            else:
                assert value == original[i][j]


def test_set_zeroes_without_zeros_leaves_matrix():
    original = [[1, 2], [3, 4]]
    matrix = copy.deepcopy(original)
    set_zeroes(matrix)
    assert matrix == original