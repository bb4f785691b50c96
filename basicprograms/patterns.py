"""Text patterns built from stars, digits and letters.

Each pattern function returns its rows as a list of strings without newlines.
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import count

_A = ord("A")


def _letters(start: int, length: int) -> str:
    return "".join(chr(_A + start + k) for k in range(length))


def square(n: int) -> list[str]:
    """An ``n`` by ``n`` block of stars."""
    return ["*" * n for _ in range(n)]


def right_triangle(n: int) -> list[str]:
    """Rows of 1 to ``n`` stars."""
    return ["*" * (i + 1) for i in range(n)]


def number_triangle(n: int) -> list[str]:
    """Row ``i`` counts from 1 up to ``i``."""
    return ["".join(str(j) for j in range(1, i + 1)) for i in range(1, n + 1)]


def repeated_number_triangle(n: int) -> list[str]:
    """Row ``i`` repeats the number ``i`` ``i`` times."""
    return [str(i) * i for i in range(1, n + 1)]


def inverted_right_triangle(n: int) -> list[str]:
    """Rows of ``n`` down to 1 stars."""
    return ["*" * (n - i) for i in range(n)]


def pyramid(n: int) -> list[str]:
    """A centred pyramid of odd star counts."""
    return [" " * (n - i - 1) + "*" * (2 * i + 1) for i in range(n)]


def inverted_pyramid(n: int) -> list[str]:
    """An upside-down centred pyramid."""
    return [" " * i + "*" * (2 * n - (2 * i + 1)) for i in range(n)]


def diamond(n: int) -> list[str]:
    """A pyramid followed by its inversion; the widest row appears twice."""
    return pyramid(n) + inverted_pyramid(n)


def half_kite_naive(n: int) -> list[str]:
    """Half kite assembled from two triangles and a middle row."""
    return right_triangle(n - 1) + ["*" * n] + inverted_right_triangle(n - 1)


def half_kite(n: int) -> list[str]:
    """Half kite built in a single pass over ``2n - 1`` rows."""
    return ["*" * (i if i <= n else 2 * n - i) for i in range(1, 2 * n)]


def binary_triangle(n: int) -> list[str]:
    """Alternating 1s and 0s, each row starting with 1 on even rows."""
    rows = []
    for i in range(n):
        first = 1 if i % 2 == 0 else 0
        rows.append("".join(str(first ^ (j % 2)) for j in range(i + 1)))
    return rows


def mirror_numbers(n: int) -> list[str]:
    """Numbers rising on the left and falling on the right, spaces between."""
    return [
        "".join(str(j) for j in range(1, i + 1))
        + " " * (2 * n - 2 * i)
        + "".join(str(j) for j in range(i, 0, -1))
        for i in range(1, n + 1)
    ]


def floyd_triangle(n: int) -> list[str]:
    """Consecutive integers filling a right triangle."""
    values = count(1)
    return ["".join(str(next(values)) for _ in range(i)) for i in range(1, n + 1)]


def alphabet_triangle(n: int) -> list[str]:
    """Row ``i`` spells A up to the ``i``-th letter."""
    return [_letters(0, i + 1) for i in range(n)]


def alphabet_inverted_triangle(n: int) -> list[str]:
    """Rows spelling from A, getting shorter."""
    return [_letters(0, n - i) for i in range(n)]


def alphabet_repeated_triangle(n: int) -> list[str]:
    """Row ``i`` repeats the ``i``-th letter ``i + 1`` times."""
    return [chr(_A + i) * (i + 1) for i in range(n)]


def alphabet_pyramid(n: int) -> list[str]:
    """Centred letters rising to the middle and falling back to A."""
    return [
        " " * (n - i - 1) + _letters(0, i + 1) + _letters(0, i)[::-1]
        for i in range(n)
    ]


def reverse_alphabet_triangle(n: int) -> list[str]:
    """Row ``i`` spells ``i + 1`` letters ending at letter ``n``."""
    return [_letters(n - i, i + 1) for i in range(n)]


def _hollow_upper(n: int, i: int) -> str:
    return "*" * (n - i) + " " * (2 * i) + "*" * (n - i)


def _hollow_lower(n: int, i: int) -> str:
    return "*" * (i + 1) + " " * max(0, 2 * n - 2 * i - 2) + "*" * (i + 1)


def hollow_diamond(n: int) -> list[str]:
    """Stars with a diamond-shaped hole in the middle."""
    return [_hollow_upper(n, i) for i in range(n)] + [
        _hollow_lower(n, i) for i in range(n)
    ]


def butterfly(n: int) -> list[str]:
    """Two star triangles meeting at a full middle row."""
    return [_hollow_lower(n, i) for i in range(n)] + [
        _hollow_upper(n, i) for i in range(1, n)
    ]


def hollow_square(n: int) -> list[str]:
    """Square outline of stars."""
    return [
        "*" * n if i in (0, n - 1) else "*" + " " * (n - 2) + "*"
        for i in range(n)
    ]


_ALL: tuple[Callable[[int], list[str]], ...] = (
    square,
    right_triangle,
    number_triangle,
    repeated_number_triangle,
    inverted_right_triangle,
    pyramid,
    inverted_pyramid,
    diamond,
    half_kite_naive,
    half_kite,
    binary_triangle,
    mirror_numbers,
    floyd_triangle,
    alphabet_triangle,
    alphabet_inverted_triangle,
    alphabet_repeated_triangle,
    alphabet_pyramid,
    reverse_alphabet_triangle,
    hollow_diamond,
    butterfly,
    hollow_square,
)


def all_patterns(n: int) -> str:
    """Every pattern for ``n``, one after another, separated by a blank line."""
    blocks = ["".join(row + "\n" for row in pattern(n)) for pattern in _ALL]
    return "\n".join(blocks)