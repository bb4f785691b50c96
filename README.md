# basicprograms

A small collection of classic beginner exercises, written as plain Python
functions that return values, plus a command that prints their results.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Number helpers

`basicprograms.numbers` provides:

- `gcd_brute(a, b)` counts down from the smaller number to the first common
  divisor; it returns 0 when the smaller number is not positive.
- `gcd_euclid(a, b)` uses Euclid's remainder algorithm.
- `lcm_brute(a, b)` counts up from the larger number to the first common
  multiple; `lcm(a, b)` computes `(a * b) // gcd_euclid(a, b)`.
- `is_even(n)` checks parity.
- `is_prime(n)` does trial division by every number from 2 up to, but not
  including, `n / 2`. Because of that bound, 4 is reported as prime; 0 and 1
  are not.
- `is_leap_year(year)` applies the Gregorian leap-year rule.
- `count_digits(n)` counts decimal digits (0 has none), `digit_sum(n)` sums
  the digits of `abs(n)`, and `is_armstrong(n)` checks whether the digits
  raised to the digit count add up to `n`.
- `fibonacci(n)` returns a list of the first `n` terms, starting 0, 1.
- `factorial(n)` returns `n!` and raises `ValueError` for negative `n`.

```python
from basicprograms.numbers import gcd_euclid, lcm, is_armstrong, fibonacci

gcd_euclid(12, 18)   # 6
lcm(4, 6)            # 12
is_armstrong(153)    # True
fibonacci(6)         # [0, 1, 1, 2, 3, 5]
```

## Text helpers

`basicprograms.text` provides:

- `count_vowels_consonants(s)` returns a `(vowels, consonants)` tuple. Only
  ASCII letters are counted, regardless of case. Everything else is ignored.
- `reverse(s)` returns the string reversed.
- `is_palindrome(word)` checks whether the word reads the same backwards. The
  comparison is exact and case-sensitive.

## Patterns

`basicprograms.patterns` builds text patterns. Each function takes the size
`n` and returns the rows as a list of strings without newlines:

- `square`, `right_triangle`, `number_triangle`, `repeated_number_triangle`
- `inverted_right_triangle`, `pyramid`, `inverted_pyramid`, `diamond`
  (a pyramid followed by an inverted pyramid, so the widest row appears twice)
- `half_kite_naive`, `half_kite`, `binary_triangle`, `mirror_numbers`,
  `floyd_triangle`
- `alphabet_triangle`, `alphabet_inverted_triangle`,
  `alphabet_repeated_triangle`, `alphabet_pyramid`, `reverse_alphabet_triangle`
- `hollow_diamond`, `butterfly`, `hollow_square`

`all_patterns(n)` returns one string holding every pattern in the order above.
Each row ends with a newline and a blank line separates the patterns.

```python
from basicprograms.patterns import pyramid

pyramid(3)   # ['  *', ' ***', '*****']
print("\n".join(pyramid(3)))
#   *
#  ***
# *****
```

## Command line

The `basicprograms` command runs one exercise. You choose it with a
subcommand and give its inputs as arguments:

```
basicprograms gcd 12 18          # math.gcd, gcd_brute and gcd_euclid, one per line
basicprograms lcm 4 6            # lcm_brute, then lcm
basicprograms even-odd [N]       # "even" or "Odd"; N defaults to 5
basicprograms factorial [N]      # N defaults to 5
basicprograms prime N            # "Is Prime" or "Is Not Prime"
basicprograms leap YEAR          # "Leap" or "Not Leap"
basicprograms armstrong N        # "Armstrong" or "Not Armstrong"
basicprograms fibonacci N        # the first N terms, separated by spaces
basicprograms digit-sum N
basicprograms patterns N         # every pattern of size N
basicprograms vowels "Hello World"   # vowel and consonant counts
basicprograms reverse "some text"
basicprograms palindrome WORD    # "Palindrome" or "Not Palindrome"
basicprograms record [--num NUM] [--name NAME]
```

The `record` subcommand builds a `basicprograms.cli.Record`, a dataclass with
`num` (default 25) and `name` (default `"Harsh"`). It prints both fields, one
per line.

The same entry point is available from Python as
`basicprograms.cli.main(argv)`, which returns 0.

## Limitations

The command does not read from standard input and has no interactive prompt.
Every input is given as a command-line argument, and you must choose a
subcommand.