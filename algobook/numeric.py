"""Assorted problems over lists of integers."""

from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import accumulate, pairwise
from operator import xor


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the bars of ``height`` hold."""
    if not height:
        return 0
    left = accumulate(height, max)
    right = reversed(list(accumulate(reversed(height), max)))
    return sum(min(lo, hi) - h for lo, hi, h in zip(left, right, height))


def plus_one(digits: Sequence[int]) -> list[int]:
    """Return the decimal digits of the number ``digits`` plus one."""
    out = []
    carry = 1
    for digit in reversed(digits):
        carry, digit = divmod(digit + carry, 10)
        out.append(digit)
    if carry:
        out.append(carry)
    return out[::-1]


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking one or two at a time."""
    if n < 0:
        raise ValueError("number of steps must not be negative")
    ways, following = 1, 1
    for _ in range(n):
        ways, following = following, ways + following
    return ways


def gray_code(n: int) -> list[int]:
    """Return the ``n``-bit reflected Gray code sequence."""
    if n < 0:
        raise ValueError("bit count must not be negative")
    return [i ^ (i >> 1) for i in range(1 << n)]


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Return the station from which a full circuit is possible, or -1."""
    if len(gas) != len(cost):
        raise ValueError("gas and cost must have the same length")
    total = tank = start = 0
    for index, (fuel, spend) in enumerate(zip(gas, cost)):
        tank += fuel - spend
        total += fuel - spend
        if tank < 0:
            tank = 0
            start = index + 1
    return start if total >= 0 else -1


def _rising_runs(ratings: Iterable[int]) -> list[int]:
    runs = [1]
    for before, current in pairwise(ratings):
        runs.append(runs[-1] + 1 if current > before else 1)
    return runs


def candy(ratings: Sequence[int]) -> int:
    """Return the fewest candies for children in a row, where each gets at least one
    and any child rated above a neighbour gets more than that neighbour."""
    if not ratings:
        return 0
    from_left = _rising_runs(ratings)
    from_right = _rising_runs(reversed(ratings))[::-1]
    return sum(max(lo, hi) for lo, hi in zip(from_left, from_right))


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other appears twice."""
    return reduce(xor, nums, 0)


def single_number_ii(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other appears three times."""
    ones = twos = 0
    for x in nums:
        twos |= ones & x
        ones ^= x
        threes = ones & twos
        ones &= ~threes
        twos &= ~threes
    return ones