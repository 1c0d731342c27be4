# cfsolve

Small solvers for classic short programming exercises. Each exercise is a
plain Python function that takes ordinary values and returns its answer, so
the solvers can be used from code, from a notebook or, for a handful of
them, from the command line.

The package has no dependencies beyond the standard library and supports
Python 3.10 and later.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Modules

- `cfsolve.arithmetic`: number puzzles. Among them are `digit_sum`,
  `moves_to_divisible`, `domino_count`, `kth_not_divisible`,
  `next_beautiful_year`, `square_year`, `kefir_liters`,
  `damaged_dragons`, `toasts_per_friend`, `banana_debt`,
  `max_fibonacciness`, `fizzbuzz_remixed`, `restore_numbers` and
  `smallest_digit`.
- `cfsolve.words`: string puzzles. Among them are `abbreviate`, `fix_case`,
  `capitalize_word`, `sort_letters`, `rearrange_summands`, `is_dangerous`,
  `say_hello`, `compare_ignoring_case`, `is_lucky`, `is_yes`,
  `difficult_order`, `zeroes_to_erase`, `bit_plus_plus` and `read_column`.
- `cfsolve.sequences`: checks over lists, grids and generated lines. Among
  them are `beautiful_matrix_moves`, `can_be_strictly_increasing`,
  `can_win_tournament`, `advancing_count`, `horseshoes_to_buy`,
  `team_problem_count`, `is_colored`, `can_pass_alarm`, `lever_iterations`,
  `pyramid`, `hulk_feelings` and `equal_subsequence_string`.
- `cfsolve.cli`: the `cfsolve` command.

## Using the library

```python
from cfsolve.arithmetic import digit_sum, domino_count, kth_not_divisible, square_year
from cfsolve.words import abbreviate, rearrange_summands, sort_letters
from cfsolve.sequences import can_be_strictly_increasing, pyramid

digit_sum(77)                       # 14
domino_count(2, 4)                  # 4
kth_not_divisible(3, 7)             # 10
square_year("2025")                 # (20, 25)

abbreviate("localization")          # "l10n"
abbreviate("word")                  # "word"
rearrange_summands("3+2+1")         # "1+2+3"
sort_letters("codeforces")          # "ccdeefoors"

can_be_strictly_increasing([1, 3, 2])   # True
pyramid(2)                          # ["  * ", "* * * "]
```

Yes/no questions come back as `bool`. A few verdicts that the exercise
prints as text come back as that text, for example `anton_or_danik`,
`boy_or_girl` and `rectangles_square_verdict`. Functions that check their
input, such as `square_year`, `is_lucky`, `restore_numbers`,
`horseshoes_to_buy` and `equal_subsequence_string`, raise `ValueError` when
it is not of the expected shape.

## Command line

Installing the package provides a `cfsolve` command. It takes the name of
an exercise, reads that exercise's input from standard input as
whitespace-separated tokens and prints the answer in the exercise's
expected format:

```
cfsolve --help
```

The available exercises are:

| Command         | Input                                         | Output                              |
|-----------------|-----------------------------------------------|-------------------------------------|
| `ab-again`      | a count, then that many two-digit numbers     | the digit sum of each, one per line |
| `photos`        | rows, columns, then the pixel letters         | `#Color` or `#Black&White`          |
| `square-year`   | a count, then that many four-digit years      | `a b`, or `-1`, one per line        |
| `team`          | a count, then three 0/1 votes per problem     | the number of problems solved       |
| `watermelon`    | nothing (input is ignored)                    | a five-row star pyramid             |
| `long-words`    | a count, then that many words                 | each word, abbreviated if long      |
| `petya`         | two words                                     | `-1`, `0` or `1`                    |
| `word-on-paper` | a count, then eight rows per case             | the lowercase letters of each case  |

For example:

```
printf '2\nword\nlocalization\n' | cfsolve long-words
```

prints `word` and `l10n` on separate lines.

The command exits with status 0 on success. When the input ends too early
or holds a token of the wrong kind, it writes a message beginning with
`cfsolve:` to standard error and exits with status 1.

## What the package does not do

Only the eight exercises listed above can be run from the command line;
every other solver is reached through the Python functions alone. The
command does not read input files by name, and it runs one exercise per
invocation.