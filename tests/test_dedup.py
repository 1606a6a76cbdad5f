from collections import Counter

import pytest

from algobook.dedup import remove_duplicates, remove_duplicates_keep_two, remove_element

SORTED_INPUTS = [
    [],
    [7],
    [1, 1, 2],
    [0, 0, 1, 1, 1, 2, 2, 3, 3, 4],
    [1, 1, 1, 2, 2, 3],
    [5, 5, 5, 5, 5],
    [-3, -3, -1, 0, 0, 0, 9],
]


@pytest.mark.parametrize("values", SORTED_INPUTS)
def test_remove_duplicates_keeps_each_value_once(values):
    nums = list(values)
    length = remove_duplicates(nums)
    assert length == len(nums)
    assert nums == sorted(set(values))


@pytest.mark.parametrize("values", SORTED_INPUTS)
def test_remove_duplicates_keep_two_caps_counts(values):
    nums = list(values)
    length = remove_duplicates_keep_two(nums)
    assert length == len(nums)
    assert nums == sorted(nums)
    original = Counter(values)
    assert Counter(nums) == Counter({k: min(c, 2) for k, c in original.items()})


def test_remove_duplicates_keep_two_short_list_untouched():
    nums = [4, 4]
    assert remove_duplicates_keep_two(nums) == 2
    assert nums == [4, 4]


@pytest.mark.parametrize(
    "values, val",
    [
        ([3, 2, 2, 3], 3),
        ([0, 1, 2, 2, 3, 0, 4, 2], 2),
        ([], 1),
        ([1, 1, 1], 1),
        ([5, 6, 7], 9),
    ],
)
def test_remove_element(values, val):
    nums = list(values)
    length = remove_element(nums, val)
    assert length == len(nums)
    assert val not in nums
    expected = Counter(values)
    del expected[val]
    assert Counter(nums) == expected


def test_remove_element_preserves_order():
    nums = [9, 1, 8, 1, 7]
    remove_element(nums, 1)
    assert nums == [9, 8, 7]