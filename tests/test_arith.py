import math

import pytest

from numpatterns.arith import (
    add,
    bin_to_decimal,
    decimal_to_binary,
    digit_sum,
    factorial,
    fibonacci,
    is_power_of_two,
    is_power_of_two_bitwise,
    is_prime,
    minimum,
    multiples_of_three,
    n_choose_r,
    odd_sum,
    odd_sum_by_scan,
    primes_up_to,
    reverse_digits,
    shifted_sum,
    sum_to,
)


@pytest.mark.parametrize("n", range(0, 300))
def test_binary_round_trip(n):
    assert bin_to_decimal(decimal_to_binary(n)) == n


@pytest.mark.parametrize("n", [1, 2, 5, 13, 64, 255, 1000])
def test_decimal_to_binary_matches_format(n):
    assert decimal_to_binary(n) == int(format(n, "b"))


@pytest.mark.parametrize("digits", ["1", "10", "1011", "111111", "100000001"])
def test_bin_to_decimal_matches_int_base_two(digits):
    assert bin_to_decimal(int(digits)) == int(digits, 2)


def test_conversions_of_non_positive_are_zero():
    assert bin_to_decimal(-101) == 0
    assert decimal_to_binary(-7) == 0
    assert decimal_to_binary(0) == 0


def test_fibonacci_recurrence():
    terms = fibonacci(20)
    assert len(terms) == 20
    assert terms[:2] == [0, 1]
    for a, b, c in zip(terms, terms[1:], terms[2:]):
        assert a + b == c


def test_fibonacci_empty_for_non_positive():
    assert fibonacci(0) == []
    assert fibonacci(-3) == []


@pytest.mark.parametrize("n", range(0, 15))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_of_negative_is_one():
    assert factorial(-4) == 1


@pytest.mark.parametrize("a", range(2, 12))
@pytest.mark.parametrize("b", range(2, 12))
def test_products_are_not_prime(a, b):
    assert is_prime(a * b) is False


def test_primes_up_to_ten():
    assert primes_up_to(10) == [2, 3, 5, 7]


def test_primes_up_to_agrees_with_is_prime():
    found = primes_up_to(200)
    assert all(is_prime(p) for p in found)
    assert [n for n in range(2, 201) if is_prime(n)] == found


def test_values_below_two_report_prime():
    assert is_prime(1) is True
    assert is_prime(0) is True


def test_n_choose_r_source_example():
    assert n_choose_r(6, 3) == 20


@pytest.mark.parametrize("n", range(0, 12))
def test_n_choose_r_matches_comb(n):
    for r in range(n + 1):
        assert n_choose_r(n, r) == math.comb(n, r)


def test_add_and_minimum():
    assert add(10, 15) - 15 == 10
    assert minimum(7, 6) == 6
    assert minimum(3, 9) == 3
    assert minimum(4, 4) == 4


def test_shifted_sum_adds_twenty():
    for a, b in [(5, 4), (0, 0), (-10, 3)]:
        assert shifted_sum(a, b) - add(a, b) == 20


@pytest.mark.parametrize("k", range(0, 25))
def test_powers_of_two_detected(k):
    assert is_power_of_two(2**k) is True
    assert is_power_of_two_bitwise(2**k) is True


def test_power_of_two_methods_agree():
    for n in range(-5, 1025):
        assert is_power_of_two(n) == is_power_of_two_bitwise(n)


def test_non_positive_is_not_power_of_two():
    assert is_power_of_two(0) is False
    assert is_power_of_two_bitwise(-8) is False


@pytest.mark.parametrize("n", [1, 12, 123, 98765, 4021])
def test_reverse_digits_twice_restores(n):
    assert reverse_digits(reverse_digits(n)) == n
    assert reverse_digits(n) == int(str(n)[::-1])


def test_reverse_digits_drops_trailing_zeros_and_negatives():
    assert reverse_digits(1200) == reverse_digits(12)
    assert reverse_digits(-45) == 0


@pytest.mark.parametrize("n", range(0, 50))
def test_sum_to_closed_form(n):
    assert sum_to(n) == n * (n + 1) // 2


def test_digit_sum_source_example():
    assert digit_sum(143) == 8


@pytest.mark.parametrize("n", [0, 7, 99, 12345, 908070])
def test_digit_sum_matches_string_digits(n):
    assert digit_sum(n) == sum(int(ch) for ch in str(n))


@pytest.mark.parametrize("n", range(0, 40))
def test_odd_sums_are_squares_and_agree(n):
    assert odd_sum(n) == n * n
    assert odd_sum_by_scan(n) == odd_sum(n)


def test_multiples_of_three():
    for n in range(0, 40):
        result = multiples_of_three(n)
        assert len(result) == n // 3
        assert all(value % 3 == 0 and 1 <= value <= n for value in result)
        assert result == sorted(result)