import pytest

from basicprograms import text


def test_count_hello_world():
    assert text.count_vowels_consonants("Hello World") == (3, 7)


def test_count_ignores_non_letters():
    assert text.count_vowels_consonants("123 !?, \t") == (0, 0)
    assert text.count_vowels_consonants("") == (0, 0)


def test_count_is_case_insensitive():
    s = "The Quick Brown Fox"
    assert text.count_vowels_consonants(s) == text.count_vowels_consonants(s.upper())


def test_count_totals_letters():
    s = "Pack my box with five dozen liquor jugs."
    v, c = text.count_vowels_consonants(s)
    assert v + c == sum(ch.isalpha() for ch in s)


def test_only_vowels():
    assert text.count_vowels_consonants("AEIOUaeiou") == (10, 0)


@pytest.mark.parametrize("s", ["", "a", "Hello World", "abc def", "racecar"])
def test_reverse_round_trip(s):
    assert text.reverse(text.reverse(s)) == s
    assert len(text.reverse(s)) == len(s)


def test_reverse_value():
    assert text.reverse("abc") == "cba"


@pytest.mark.parametrize("s", ["", "x", "ab", "hello"])
def test_mirrored_strings_are_palindromes(s):
    assert text.is_palindrome(s + text.reverse(s)) is True
    assert text.is_palindrome(s + "z" + text.reverse(s)) is True


def test_not_palindrome():
    assert text.is_palindrome("hello") is False
    assert text.is_palindrome("ab") is False