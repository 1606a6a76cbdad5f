import pytest

from algobook.strings import add_binary, is_palindrome, longest_palindrome, str_str


@pytest.mark.parametrize(
    "text, expected",
    [
        ("A man, a plan, a canal: Panama", True),
        ("race a car", False),
        ("", True),
        (".,", True),
        ("0P", False),
    ],
)
def test_is_palindrome(text, expected):
    assert is_palindrome(text) is expected


@pytest.mark.parametrize(
    "haystack, needle",
    [("hello", "ll"), ("aaaaa", "bba"), ("", ""), ("abc", ""), ("ab", "abc"), ("mississippi", "issip")],
)
def test_str_str_agrees_with_find(haystack, needle):
    assert str_str(haystack, needle) == haystack.find(needle)


def test_str_str_empty_needle_is_zero():
    assert str_str("abc", "") == 0


@pytest.mark.parametrize("a, b", [("11", "1"), ("1010", "1011"), ("0", "0"), ("1", "111111")])
def test_add_binary_value(a, b):
    assert int(add_binary(a, b), 2) == int(a, 2) + int(b, 2)


def test_add_binary_known_case():
    assert add_binary("11", "1") == "100"


def test_add_binary_is_commutative():
    assert add_binary("1101", "111") == add_binary("111", "1101")


def test_add_binary_rejects_non_binary():
    with pytest.raises(ValueError):
        add_binary("12", "1")


def _is_palindrome_text(text):
    return text == text[::-1]


@pytest.mark.parametrize("text", ["babad", "cbbd", "a", "forgeeksskeegfor", "abacdfgdcaba"])
def test_longest_palindrome_is_maximal(text):
    result = longest_palindrome(text)
    assert result in text
    assert _is_palindrome_text(result)
    longer = [
        text[i:j]
        for i in range(len(text))
        for j in range(i + len(result) + 1, len(text) + 1)
    ]
    assert not any(_is_palindrome_text(candidate) for candidate in longer)


def test_longest_palindrome_earliest_on_tie():
    assert longest_palindrome("babad") == "bab"
    assert longest_palindrome("cbbd") == "bb"


def test_longest_palindrome_empty():
    assert longest_palindrome("") == ""