"""Problems about sums of values and runs of consecutive integers."""

from collections.abc import Iterable, Iterator, Sequence


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers among ``nums``."""
    values = set(nums)
    best = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start + 1
        while end in values:
            end += 1
        best = max(best, end - start)
    return best


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return 1-based positions ``(i, j)`` with ``i < j`` whose values add up to ``target``.

    Returns None when no such pair exists.
    """
    last_index = {value: index for index, value in enumerate(nums)}
    for index, value in enumerate(nums):
        other = last_index.get(target - value)
        if other is not None and other > index:
            return index + 1, other + 1
    return None


def _pairs(values: list[int], start: int, target: int) -> Iterator[tuple[int, ...]]:
    lo, hi = start, len(values) - 1
    while lo < hi:
        total = values[lo] + values[hi]
        if total < target:
            lo += 1
        elif total > target:
            hi -= 1
        else:
            yield values[lo], values[hi]
            lo += 1
            while lo < hi and values[lo] == values[lo - 1]:
                lo += 1
            hi -= 1
            while lo < hi and values[hi] == values[hi + 1]:
                hi -= 1


def _k_sum(values: list[int], start: int, k: int, target: int) -> Iterator[tuple[int, ...]]:
    if k == 2:
        yield from _pairs(values, start, target)
        return
    for i in range(start, len(values) - k + 1):
        if i > start and values[i] == values[i - 1]:
            continue
        head = values[i]
        for rest in _k_sum(values, i + 1, k - 1, target - head):
            yield (head, *rest)


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct ascending triple of values from ``nums`` that sums to zero."""
    return [list(triple) for triple in _k_sum(sorted(nums), 0, 3, 0)]


def three_sum_closest(nums: Iterable[int], target: int) -> int:
    """Return the sum of three values from ``nums`` that lies closest to ``target``."""
    values = sorted(nums)
    if len(values) < 3:
        raise ValueError("need at least three values")
    best: int | None = None
    for i in range(len(values) - 2):
        lo, hi = i + 1, len(values) - 1
        while lo < hi:
            delta = target - (values[i] + values[lo] + values[hi])
            if best is None or abs(delta) < abs(best):
                best = delta
            if delta > 0:
                lo += 1
            elif delta < 0:
                hi -= 1
            else:
                return target
    return target - best


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return every distinct ascending quadruple of values from ``nums`` that sums to ``target``."""
    return [list(quad) for quad in _k_sum(sorted(nums), 0, 4, target)]