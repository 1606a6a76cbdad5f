"""In-place compaction of lists: dropping repeated or unwanted values."""

from itertools import groupby, islice


def _compact(nums: list[int], kept: list[int]) -> int:
    nums[:] = kept
    return len(nums)


def remove_duplicates(nums: list[int]) -> int:
    """Keep one of each run of equal values in ``nums``.

    The list is shortened in place and its new length is returned.
    """
    return _compact(nums, [value for value, _ in groupby(nums)])


def remove_duplicates_keep_two(nums: list[int]) -> int:
    """Keep at most two of each value in the sorted list ``nums``.

    The list is shortened in place and its new length is returned.
    """
    kept = [item for _, run in groupby(nums) for item in islice(run, 2)]
    return _compact(nums, kept)


def remove_element(nums: list[int], val: int) -> int:
    """Drop every occurrence of ``val`` from ``nums``, keeping the order of the rest.

    The list is shortened in place and its new length is returned.
    """
    return _compact(nums, [item for item in nums if item != val])