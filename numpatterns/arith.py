"""Small integer routines: base conversion, primes, factorials and digit sums."""

from __future__ import annotations

from math import prod


def bin_to_decimal(binary: int) -> int:
    """Read the decimal digits of ``binary`` as base-2 digits.

    Digits are weighted by powers of two without validation, so a digit
    other than 0 or 1 still contributes ``digit * 2**position``.
    A value of zero or below yields 0.
    """
    result = 0
    weight = 1
    while binary > 0:
        binary, digit = divmod(binary, 10)
        result += digit * weight
        weight *= 2
    return result


def decimal_to_binary(number: int) -> int:
    """Return an integer whose decimal digits spell ``number`` in base 2.

    A value of zero or below yields 0.
    """
    result = 0
    weight = 1
    while number > 0:
        number, bit = divmod(number, 2)
        result += bit * weight
        weight *= 10
    return result


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers, starting from 0."""
    terms: list[int] = []
    first, second = 0, 1
    for _ in range(n):
        terms.append(first)
        first, second = second, first + second
    return terms


def factorial(n: int) -> int:
    """Return ``n!``; any ``n`` below 1 gives 1."""
    return prod(range(1, n + 1))


def is_prime(n: int) -> bool:
    """Trial-division primality test.

    Values below 2 have no divisor in ``2..n-1`` and so report True.
    """
    return not any(n % divisor == 0 for divisor in range(2, n))


def primes_up_to(limit: int) -> list[int]:
    """Return every prime from 2 to ``limit`` inclusive."""
    return [candidate for candidate in range(2, limit + 1) if is_prime(candidate)]


def n_choose_r(n: int, r: int) -> int:
    """Return ``n! / (r! * (n - r)!)`` computed from factorials."""
    return factorial(n) // (factorial(r) * factorial(n - r))


def add(a: int, b: int) -> int:
    """Return the sum of two numbers."""
    return a + b


def minimum(x: int, y: int) -> int:
    """Return the smaller of two numbers, preferring ``y`` on a tie."""
    return x if x < y else y


def shifted_sum(a: int, b: int) -> int:
    """Add ten to each argument and return their sum."""
    return (a + 10) + (b + 10)


def is_power_of_two(n: int) -> bool:
    """Test for a power of two by repeated halving."""
    if n <= 0:
        return False
    while n % 2 == 0:
        n //= 2
    return n == 1


def is_power_of_two_bitwise(n: int) -> bool:
    """Test for a power of two with the ``n & (n - 1)`` trick."""
    if n <= 0:
        return False
    return n & (n - 1) == 0


def reverse_digits(n: int) -> int:
    """Reverse the decimal digits of ``n``; values of zero or below give 0."""
    reversed_number = 0
    while n > 0:
        n, digit = divmod(n, 10)
        reversed_number = reversed_number * 10 + digit
    return reversed_number


def sum_to(n: int) -> int:
    """Return ``0 + 1 + ... + n``."""
    return sum(range(n + 1))


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``; zero or below gives 0."""
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit
    return total


def odd_sum(n: int) -> int:
    """Sum the first ``n`` odd numbers by stepping through them."""
    return sum(range(1, 2 * n, 2)) if n > 0 else 0


def odd_sum_by_scan(n: int) -> int:
    """Sum the first ``n`` odd numbers by scanning all integers from 1."""
    total = 0
    found = 0
    candidate = 1
    while found < n:
        if candidate % 2 != 0:
            total += candidate
            found += 1
        candidate += 1
    return total


def multiples_of_three(n: int) -> list[int]:
    """Return the multiples of three from 1 to ``n`` inclusive."""
    return [value for value in range(1, n + 1) if value % 3 == 0]