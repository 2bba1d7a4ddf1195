"""Text patterns built from stars, digits and letters, one string per row."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import count

_FIRST_LETTER = ord("A")


def _letter(offset: int) -> str:
    return chr(_FIRST_LETTER + offset)


def _cells(items: Iterable[object]) -> str:
    """Print each item followed by a single space."""
    return "".join(f"{item} " for item in items)


def render(lines: Iterable[str]) -> str:
    """Join rows into text, ending every row with a newline."""
    return "".join(f"{line}\n" for line in lines)


def butterfly(n: int) -> list[str]:
    """Two mirrored star wings that meet in the middle rows."""
    top = [
        "*" * (i + 1) + " " * max(0, n + 2 * (1 - i)) + "*" * (i + 1)
        for i in range(n)
    ]
    bottom = [
        "*" * (n - i) + " " * (2 * i) + "*" * (n - i)
        for i in range(n)
    ]
    return top + bottom


def char_triangle(n: int) -> list[str]:
    """Row ``i`` repeats the ``i``-th letter ``i + 1`` times."""
    return [_cells(_letter(i) for _ in range(i + 1)) for i in range(n)]


def continuous_char_triangle(n: int) -> list[str]:
    """A triangle of consecutive letters that carries on from row to row."""
    letters = (_letter(k) for k in count())
    return [_cells(next(letters) for _ in range(i + 1)) for i in range(n)]


def continuous_number_triangle(n: int) -> list[str]:
    """A triangle of consecutive numbers that carries on from row to row."""
    numbers = count(1)
    return [_cells(next(numbers) for _ in range(i + 1)) for i in range(n)]


def hollow_diamond(n: int) -> list[str]:
    """The outline of a diamond whose widest row is ``2n - 1`` wide."""
    lines = []
    for i in range(n):
        line = " " * (n - i - 1) + "*"
        if i != 0:
            line += " " * (2 * i - 1) + "*"
        lines.append(line)
    for i in range(n - 1):
        line = " " * (i + 1) + "*"
        if i != n - 2:
            line += " " * max(0, 2 * (n - i) - 5) + "*"
        lines.append(line)
    return lines


def inverted_number_triangle(n: int) -> list[str]:
    """A right-aligned, shrinking triangle where row ``i`` repeats ``i + 1``."""
    return [" " * i + str(i + 1) * (n - i) for i in range(n)]


def inverted_char_triangle(n: int) -> list[str]:
    """A right-aligned, shrinking triangle where row ``i`` repeats a letter."""
    return [" " * i + _letter(i) * (n - i) for i in range(n)]


def number_triangle(n: int) -> list[str]:
    """Row ``i`` repeats the number ``i + 1`` exactly ``i + 1`` times."""
    return [_cells(i + 1 for _ in range(i + 1)) for i in range(n)]


def char_square(n: int) -> list[str]:
    """Every row holds the first ``n`` letters."""
    return [_cells(_letter(j) for j in range(n)) for _ in range(n)]


def continuous_char_square(n: int) -> list[str]:
    """An ``n`` by ``n`` square of consecutive letters."""
    letters = (_letter(k) for k in count())
    return [_cells(next(letters) for _ in range(n)) for _ in range(n)]


def number_square(n: int) -> list[str]:
    """Every row holds the numbers 1 to ``n``."""
    return [_cells(range(1, n + 1)) for _ in range(n)]


def continuous_number_square(n: int) -> list[str]:
    """An ``n`` by ``n`` square of consecutive numbers starting at 1."""
    numbers = count(1)
    return [_cells(next(numbers) for _ in range(n)) for _ in range(n)]


def star_square(n: int) -> list[str]:
    """An ``n`` by ``n`` square of stars."""
    return [_cells("*" for _ in range(n)) for _ in range(n)]


def number_pyramid(n: int) -> list[str]:
    """A centred pyramid whose rows count up to ``i + 1`` and back down."""
    lines = []
    for i in range(n):
        rising = "".join(str(j) for j in range(1, i + 2))
        falling = "".join(str(j) for j in range(i, 0, -1))
        lines.append(" " * (n - i - 1) + rising + falling)
    return lines


def reverse_char_triangle(n: int) -> list[str]:
    """Row ``i`` lists letters from the ``i``-th back down to A."""
    return [_cells(_letter(j) for j in range(i, -1, -1)) for i in range(n)]


def reverse_number_triangle(n: int) -> list[str]:
    """Row ``i`` counts down from ``i + 1`` to 1."""
    return [_cells(range(i + 1, 0, -1)) for i in range(n)]


def star_triangle(n: int) -> list[str]:
    """Row ``i`` holds ``i + 1`` stars."""
    return [_cells("*" for _ in range(i + 1)) for i in range(n)]