# katabox

A box of small, self-contained puzzle solutions written as plain Python
functions and classes. It covers ciphers, string games, number conversions,
prime hunting, array tricks and a few little grid simulations.

The package has no runtime dependencies and needs Python 3.10 or later.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | Highlights |
| --- | --- |
| `katabox.bitset_cipher` | `encrypt`, `decrypt` over the 64 symbols `A-Z a-z 0-9`, space and `.` |
| `katabox.caesar` | `caesar_encode`, `caesar_decode`, `moving_shift`, `demoving_shift`, `rot13` |
| `katabox.morse` | `decode_morse` |
| `katabox.transpositions` | `alternate_encrypt`, `alternate_decrypt`, `rotation_encode`, `rotation_decode`, `bwt_encode`, `bwt_decode`, `rev_rot` |
| `katabox.case_conversion` | `to_camel_case`, `change_case` |
| `katabox.strings` | `likes`, `wave`, `increment_string`, `count_smileys`, `duplicate_encode`, `Looper` and more |
| `katabox.phone_directory` | `phone` |
| `katabox.number_words` | `parse_int`, `int_to_words`, `sort_by_name` |
| `katabox.numerals` | `to_roman`, `dec_to_fact_string`, `fact_string_to_dec`, `big_factorial`, `last_digit` |
| `katabox.versions_ip` | `compare_versions`, `ips_between`, `uint32_to_ip` |
| `katabox.equations` | `solve_linear`, `determinant`, `solve_system` |
| `katabox.primes` | `even_primes`, `prime_factors`, `prime_gap`, `sum_of_divided`, `first_primes` |
| `katabox.sequences` | `next_palindrome`, `product_fib`, `sum_dig_pow`, `list_squared`, `smallest_sum`, `create_spiral` |
| `katabox.arrays` | `median_sorted_arrays`, `sort_odds`, `sum_intervals`, `missing_array_length` |
| `katabox.bundesliga` | `Bundesliga` league table builder (`add_result`, `table`) |
| `katabox.sea_course` | `SeaMapGame`, `check_course` |
| `katabox.mutations` | `mutations` word game |
| `katabox.peaks` | `pick_peaks`, `peak_height` |
| `katabox.routes` | `find_routes`, `tour` |
| `katabox.counter_map` | `TagCounter` |
| `katabox.randomized` | `mega_sena_game`, `observed_pins`, `permutations`, `path_finder` |

Invalid input is reported with `ValueError` (or `IndexError` for an
out-of-range row in `bwt_decode`).

## A quick taste

```python
from katabox.caesar import rot13
from katabox.strings import likes
from katabox.number_words import parse_int
from katabox.numerals import to_roman
from katabox.sequences import create_spiral
from katabox.transpositions import bwt_encode, bwt_decode

rot13("EBG13 rknzcyr.")                      # 'ROT13 example.'
likes(["Gui", "SSL", "Mark", "Max", "Toney", "GG"])
# 'Gui, SSL and 4 others like this'
parse_int("three hundred seventy seven")     # 377
to_roman(1990)                               # 'MCMXC'
create_spiral(3)                             # [[1, 2, 3], [8, 9, 4], [7, 6, 5]]

encoded, index = bwt_encode("bananabar")
bwt_decode(encoded, index)                   # 'bananabar'
```

A reusable cycling reader:

```python
from katabox.strings import Looper

loop = Looper("hello")
loop(), loop(), loop()                       # ('h', 'e', 'l')
```

The functions in `katabox.randomized` that draw random numbers accept an
optional `random.Random` instance, so results can be made repeatable:

```python
import random
from katabox.randomized import mega_sena_game

mega_sena_game(6, random.Random(1))          # seven distinct numbers from 1 to 60
```

## Command line

Installing the package provides the `katabox-random` command, which runs the
helpers from `katabox.randomized`. It takes one sub-command:

```
katabox-random mega-sena 6          # draw size + 1 numbers (size from 6 to 15)
katabox-random pins 369             # every PIN a keypad observation could mean
katabox-random permutations abc     # all distinct orderings, sorted
katabox-random path "..W\n...\nW.."  # fewest steps found by random maze walks
```

For `path`, a literal `\n` in the argument separates maze rows. Invalid input
prints an error and the command exits with status 1.

## What it does not do

Only the helpers in `katabox.randomized` have a command. Everything else is
a library of functions and classes to import; there is no interactive
program, no file input or output and no timing or benchmarking of the
puzzles.