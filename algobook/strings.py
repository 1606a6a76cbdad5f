"""String problems: palindromes, substring search and binary addition."""

from itertools import zip_longest

_BITS = frozenset("01")


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways, looking only at ASCII letters
    and digits and ignoring case."""
    kept = [c.lower() for c in s if c.isascii() and c.isalnum()]
    return kept == kept[::-1]


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def add_binary(a: str, b: str) -> str:
    """Return the sum of two binary numerals as a binary numeral."""
    if not _BITS.issuperset(a) or not _BITS.issuperset(b):
        raise ValueError("binary numerals may hold only 0 and 1")
    out = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, bit = divmod(int(x) + int(y) + carry, 2)
        out.append(str(bit))
    if carry:
        out.append("1")
    return "".join(reversed(out))


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring of ``s``; the earliest on ties."""
    if not s:
        return ""
    best_start, best_len = 0, 1
    for center in range(2 * len(s) - 1):
        lo = center // 2
        hi = lo + center % 2
        while lo >= 0 and hi < len(s) and s[lo] == s[hi]:
            lo -= 1
            hi += 1
        length = hi - lo - 1
        if length > best_len:
            best_start, best_len = lo + 1, length
    return s[best_start:best_start + best_len]