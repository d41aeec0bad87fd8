# eulertools

A small library of number-theory tools, together with solutions to a set of
classic recreational mathematics problems built on top of them. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

- `eulertools.primes`: `is_prime` (tests the absolute value), `fast_is_square`,
  the endless `primes` generator (optionally sieving up to a bound first), the
  `Factorized` class holding a number as a prime-to-exponent mapping (with
  `num_divisors`, `is_square`, `square_free`, `power_of`, ordering and hashing),
  and `factorizations`, which yields every way of writing a number as a
  non-decreasing product of factors of at least 2.
- `eulertools.combinatorics`: `n_choose_r`, `catalan` and `factorial`.
- `eulertools.digits`: `iter_digits`, `get_digits`, `concat`, `concat_big`,
  `base_10`, `concat_num`, `log_10`, `sum_digits`, `is_pandigital`,
  `is_palindrome` and `is_perm`.
- `eulertools.roman`: `to_number` and `to_numeral` for Roman numerals.
- `eulertools.graph`: the `Node` dataclass and `shortest_path`, which returns
  the least total node weight from one node to another (both end points
  included) and raises `ValueError` when there is no path.
- `eulertools.number_theory`: `gcd`, `ExtendedEuclidean`, `inverse_mod_p`,
  the `Frac` fraction type, `get_coprime`, `RadicalRational`, `ContinuedFrac`
  (with `from_sqrt` and `convergent`), sieved `Mobius`, `Totient` and
  `DivisorSum` tables, `slow_mobius`, `slow_totient`,
  `generalized_pentagonals` and `partition`.
- `eulertools.problems_a`, `eulertools.problems_b`, `eulertools.problems_c`:
  `solve_<n>` functions for individual problems, each taking its parameters
  explicitly with the problem's values as defaults.
- `eulertools.poker`: `Card` and `Hand` parsing and ranking, `player_one_wins`
  for a single ten-card deal, and `count_player_one_wins` for many deals.

## Examples

```python
from eulertools.primes import is_prime, Factorized
from eulertools.combinatorics import n_choose_r
from eulertools.roman import to_numeral, to_number
from eulertools.number_theory import Frac

is_prime(997)                  # True
n_choose_r(40, 20)             # 137846528820
Factorized(360).num_divisors() # 24
to_numeral(1994)               # 'MCMXCIV'
to_number("MCMXCIV")           # 1994
str(Frac(1, 2) * Frac(2, 3))   # '1 / 3'
```

Small instances of the problems can be checked quickly:

```python
from eulertools.problems_a import solve_10

solve_10(10)  # sum of primes below 10 -> 17
```

Comparing poker hands:

```python
from eulertools.poker import Hand, player_one_wins

Hand.parse("2C 3S 8S 8D TD") > Hand.parse("5H 5C 6S 7S KD")  # True
player_one_wins("5H 5C 6S 7S KD 2C 3S 8S 8D TD")            # False
```

## What it does not do

The package is a library only: it installs no command-line program. The poker
module ranks and compares hands, but the package does not ship a list of deals
to score; pass your own lines to `count_player_one_wins`.