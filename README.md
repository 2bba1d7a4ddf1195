# numpatterns

A small collection of classic integer exercises and text patterns. You can
use it as a library or from the command line.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Arithmetic helpers

The `numpatterns.arith` module holds the number exercises. They all work on
plain Python integers.

- `bin_to_decimal(binary)` reads the decimal digits of an integer as binary
  digits. `decimal_to_binary(number)` does the reverse and returns an integer
  whose decimal digits spell the number in base 2. Both return 0 for inputs
  of zero or below. `bin_to_decimal` does not check its digits: a digit such
  as 2 still counts with its power-of-two weight.
- `fibonacci(n)` returns a list of the first `n` Fibonacci terms, starting
  at 0.
- `factorial(n)` returns 1 for any `n` below 1. `n_choose_r(n, r)` is
  computed from three factorials.
- `is_prime(n)` tests by trial division from 2 to `n - 1`, so values below 2
  report `True`. `primes_up_to(limit)` lists the primes from 2 to `limit`.
- `is_power_of_two(n)` uses repeated halving. `is_power_of_two_bitwise(n)`
  uses the `n & (n - 1)` trick. Both are `False` for `n <= 0`.
- `reverse_digits(n)` and `digit_sum(n)` work on decimal digits and return 0
  for inputs of zero or below. `sum_to(n)` returns `0 + 1 + ... + n`.
- `odd_sum(n)` and `odd_sum_by_scan(n)` both give the sum of the first `n` odd
  numbers. The first steps through the odd numbers; the second scans every
  integer.
- `multiples_of_three(n)` lists the multiples of 3 from 1 to `n`.
- `add(a, b)`, `minimum(x, y)` and `shifted_sum(a, b)`. `minimum` returns `y`
  on a tie. `shifted_sum` adds ten to each argument before summing.

```python
from numpatterns.arith import bin_to_decimal, decimal_to_binary, n_choose_r, digit_sum

bin_to_decimal(1010)    # 10
decimal_to_binary(10)   # 1010
n_choose_r(6, 3)        # 20
digit_sum(143)          # 8
```

## Text patterns

The `numpatterns.patterns` module builds each pattern for a size `n` and
returns it as a list of strings, one per row. `render(lines)` joins the rows
into printable text and ends every row with a newline.

Available patterns:

- Stars: `star_square`, `star_triangle`, `hollow_diamond` and `butterfly`.
- Numbers: `number_square`, `continuous_number_square`, `number_triangle`,
  `continuous_number_triangle`, `reverse_number_triangle`,
  `inverted_number_triangle` and `number_pyramid`.
- Letters: `char_square`, `continuous_char_square`, `char_triangle`,
  `continuous_char_triangle`, `reverse_char_triangle` and
  `inverted_char_triangle`.

In the square and triangle patterns, each cell is followed by a single space,
so those rows end with a trailing space. The inverted triangles, the pyramid,
the diamond and the butterfly have no cell spacing.

```python
from numpatterns.patterns import number_pyramid, render

print(render(number_pyramid(4)), end="")
```

```
   1
  121
 12321
1234321
```

## Command line

The `numpatterns` command runs one subcommand and prints its result:

| Subcommand  | Output                                                     |
|-------------|------------------------------------------------------------|
| `bin2dec`   | the decimal value of a number written in binary digits     |
| `dec2bin`   | a decimal number written in binary digits                  |
| `fib`       | `Fibonacci Series:` followed by the first N terms          |
| `prime`     | `N is a prime.` or `N is not a prime.`                     |
| `primes`    | every prime up to N                                        |
| `pow2`      | `1` if the number is a power of two, otherwise `0`         |
| `reverse`   | the number with its decimal digits reversed                |
| `butterfly` | a butterfly of stars, `size` rows per half (default 4)     |

Each number subcommand takes one integer argument. If you leave the argument
out, the command prompts for the number on standard input.

```
numpatterns dec2bin 10
numpatterns primes 20
numpatterns butterfly 5
numpatterns --help
```

The other patterns and arithmetic helpers are available from Python only.
They have no subcommands.