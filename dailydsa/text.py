"""String algorithms: anagrams, pattern search, parsing and binary addition."""

from __future__ import annotations

from collections import Counter

__all__ = [
    "are_anagrams",
    "prefix_function",
    "kmp_search",
    "first_non_repeating",
    "atoi",
    "add_binary",
]

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)

NO_UNIQUE_CHARACTER = "$"


def are_anagrams(s1: str, s2: str) -> bool:
    """Return True when both strings hold the same characters with the same counts."""
    if len(s1) != len(s2):
        return False
    return Counter(s1) == Counter(s2)


def prefix_function(pattern: str) -> list[int]:
    """Return the longest-proper-prefix-that-is-also-suffix length for every prefix."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(pattern: str, text: str) -> list[int]:
    """Return the 0-based start index of every occurrence of ``pattern`` in ``text``.

    Overlapping occurrences are all reported.
    """
    if not pattern:
        raise ValueError("kmp_search() requires a non-empty pattern")
    lps = prefix_function(pattern)
    matches: list[int] = []
    i = j = 0
    while i < len(text):
        if text[i] == pattern[j]:
            i += 1
            j += 1
            if j == len(pattern):
                matches.append(i - j)
                j = lps[j - 1]
        elif j:
            j = lps[j - 1]
        else:
            i += 1
    return matches


def first_non_repeating(s: str) -> str:
    """Return the first character occurring exactly once, or ``"$"`` if there is none."""
    counts = Counter(s)
    return next((char for char in s if counts[char] == 1), NO_UNIQUE_CHARACTER)


def atoi(s: str) -> int:
    """Parse a leading signed decimal integer, clamped to the 32-bit signed range.

    Leading spaces are skipped, one optional sign is read, then digits up to the
    first non-digit. A string without digits yields 0.
    """
    stripped = s.lstrip(" ")
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]

    value = 0
    for char in stripped:
        if not "0" <= char <= "9":
            break
        digit = ord(char) - ord("0")
        if value > INT32_MAX // 10 or (value == INT32_MAX // 10 and digit > 7):
            return INT32_MAX if sign == 1 else INT32_MIN
        value = value * 10 + digit
    return sign * value


def add_binary(a: str, b: str) -> str:
    """Return the sum of two binary strings without leading zeros.

    Leading zeros in the inputs are ignored; when both inputs are zero the
    result is the empty string.
    """
    for operand in (a, b):
        if not set(operand) <= {"0", "1"}:
            raise ValueError(f"not a binary string: {operand!r}")
    total = int(a or "0", 2) + int(b or "0", 2)
    return format(total, "b") if total else ""