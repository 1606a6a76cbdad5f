"""Searching rotated sorted lists and selecting from two sorted lists."""

from collections.abc import Sequence


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted list of distinct values, or -1."""
    first, last = 0, len(nums)
    while first != last:
        mid = (first + last) // 2
        if nums[mid] == target:
            return mid
        if nums[first] < nums[mid]:
            if nums[first] <= target < nums[mid]:
                last = mid
            else:
                first = mid + 1
        elif nums[mid] < target <= nums[last - 1]:
            first = mid + 1
        else:
            last = mid
    return -1


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` occurs in a rotated sorted list that may repeat values."""
    first, last = 0, len(nums)
    while first != last:
        mid = (first + last) // 2
        if nums[mid] == target:
            return True
        if nums[first] < nums[mid]:
            if nums[first] <= target < nums[mid]:
                last = mid
            else:
                first = mid + 1
        elif nums[first] == nums[mid]:
            first += 1
        elif nums[mid] < target <= nums[last - 1]:
            first = mid + 1
        else:
            last = mid
    return False


def nth_of_sorted(a: Sequence[int], b: Sequence[int], n: int) -> int:
    """Return the ``n``-th (0-based) smallest value of two sorted sequences taken together."""
    if not 0 <= n < len(a) + len(b):
        raise IndexError(f"position {n} is outside the combined length {len(a) + len(b)}")
    (xs, i), (ys, j) = (a, 0), (b, 0)
    while True:
        if len(xs) - i > len(ys) - j:
            (xs, i), (ys, j) = (ys, j), (xs, i)
        if i == len(xs):
            return ys[j + n]
        if n == 0:
            return min(xs[i], ys[j])
        half = min((n + 1) // 2, len(xs) - i) - 1
        half2 = n - half - 1
        x, y = xs[i + half], ys[j + half2]
        if x == y:
            return x
        if x < y:
            i += half + 1
            n = half2
        else:
            j += half2 + 1
            n = half


def median_of_sorted(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of two sorted sequences taken together."""
    total = len(nums1) + len(nums2)
    if total == 0:
        raise ValueError("median of no values")
    middle = total // 2
    if total % 2:
        return float(nth_of_sorted(nums1, nums2, middle))
    return (nth_of_sorted(nums1, nums2, middle) + nth_of_sorted(nums1, nums2, middle - 1)) / 2