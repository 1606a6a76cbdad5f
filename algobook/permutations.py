"""Lexicographic permutations: stepping to the next one and picking the k-th one."""

from math import factorial
from typing import MutableSequence

_MAX_DIGITS = 9


def next_permutation(nums: MutableSequence[int]) -> bool:
    """Rearrange ``nums`` in place into its next lexicographic permutation.

    Returns True when a greater permutation existed. Otherwise ``nums`` is
    the last permutation: it is reset to ascending order and False is returned.
    """
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]),
        None,
    )
    if pivot is None:
        nums.reverse()
        return False
    successor = next(j for j in range(len(nums) - 1, pivot, -1) if nums[j] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1:] = reversed(nums[pivot + 1:])
    return True


def permutation_sequence(n: int, k: int) -> str:
    """Return the ``k``-th (1-based) lexicographic permutation of the digits 1..``n``."""
    if not 0 <= n <= _MAX_DIGITS:
        raise ValueError(f"n must be between 0 and {_MAX_DIGITS}, got {n}")
    total = factorial(n)
    if not 1 <= k <= total:
        raise ValueError(f"k must be between 1 and {total}, got {k}")
    digits = list(range(1, n + 1))
    rank = k - 1
    out = []
    for remaining in range(n - 1, -1, -1):
        position, rank = divmod(rank, factorial(remaining))
        out.append(str(digits.pop(position)))
    return "".join(out)