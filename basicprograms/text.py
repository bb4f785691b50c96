"""String exercises: letter classes, reversal and palindromes."""

from __future__ import annotations

_VOWELS = frozenset("aeiou")


def count_vowels_consonants(s: str) -> tuple[int, int]:
    """Count ASCII vowels and consonants in ``s``; other characters are ignored."""
    vowels = consonants = 0
    for ch in s.lower():
        if ch.isascii() and ch.isalpha():
            if ch in _VOWELS:
                vowels += 1
            else:
                consonants += 1
    return vowels, consonants


def reverse(s: str) -> str:
    """Return ``s`` reversed."""
    return s[::-1]


def is_palindrome(word: str) -> bool:
    """True when ``word`` reads the same backwards."""
    return word == word[::-1]