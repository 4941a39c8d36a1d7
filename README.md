# drills

A collection of small, self-contained exercises in Python: string
manipulation, number theory, simple data structures and a few songs.
Each exercise lives in its own module under `drills` and exposes plain
functions or small classes.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it provides |
| --- | --- |
| `drills.acronym` | `abbreviate(phrase)` builds an acronym from a phrase |
| `drills.anagram` | `anagrams_for(word, candidates)` returns the set of case-insensitive anagrams of a word, never the word itself |
| `drills.armstrong_numbers` | `is_armstrong_number(number)` |
| `drills.beer_song` | `verse(n)` and `sing(start, end)` |
| `drills.binary_search` | `find(array, key)` returns the index of `key` in a sorted sequence, or `None` |
| `drills.bob` | `reply(message)` answers like a lackadaisical teenager |
| `drills.bottle_song` | `recite(start_bottles, take_down)` for counts from 10 down to 0 |
| `drills.clock` | `Clock(hours, minutes)`, a frozen time of day wrapped into one day, with `add_minutes` |
| `drills.collatz_conjecture` | `collatz(n)` counts steps to reach 1 |
| `drills.difference_of_squares` | `square_of_sum(n)`, `sum_of_squares(n)`, `difference(n)` |
| `drills.eliuds_eggs` | `egg_count(display_value)` counts set bits |
| `drills.etl` | `transform(legacy)` turns a score-to-letters table into a letter-to-score dict |
| `drills.gigasecond` | `after(start)` adds 10^9 seconds to a `datetime`; `GIGASECOND` is that `timedelta` |
| `drills.grains` | `square(number)` and `total()` on a chessboard |
| `drills.hello_world` | `hello()` |
| `drills.high_scores` | `HighScores(scores)` with `scores`, `latest()`, `personal_best()`, `personal_top_three()` |
| `drills.kindergarten_garden` | `plants(diagram, student)` |
| `drills.leap` | `is_leap_year(year)` |
| `drills.matching_brackets` | `brackets_are_balanced(text)` and `is_pair(opening, closing)` |
| `drills.nth_prime` | `nth(n)` returns the n-th prime, counting from zero |
| `drills.palindrome_products` | `palindrome_products(min_factor, max_factor)` returns the smallest and largest `Palindrome` (with `value` and `factors`), or `None` |
| `drills.pangram` | `is_pangram(sentence)` |
| `drills.prime_factors` | `factors(n)` lists prime factors in ascending order |
| `drills.proverb` | `build_proverb(words)` |
| `drills.raindrops` | `raindrops(number)` |
| `drills.reverse_string` | `reverse(text)` reverses by grapheme cluster |
| `drills.rotational_cipher` | `rotate(text, key)` shifts ASCII letters by `key` (0 to 255) |
| `drills.series` | `series(digits, length)` lists contiguous substrings |
| `drills.simple_linked_list` | `SimpleLinkedList` stack with `push`, `pop`, `peek`, `reverse`, `to_list`, `len()` and iteration from the head |
| `drills.sum_of_multiples` | `sum_of_multiples(limit, factors)` |

## Examples

```python
from drills.acronym import abbreviate
from drills.clock import Clock
from drills.simple_linked_list import SimpleLinkedList

abbreviate("Portable Network Graphics")   # "PNG"

str(Clock(23, 59).add_minutes(2))         # "00:01"

stack = SimpleLinkedList([1, 2, 3])
stack.pop()                               # 3
stack.reverse().to_list()                 # [2, 1]
```

## Missing answers and invalid input

Where a question simply has no answer, the function returns `None`:
`find([], 1)`, `HighScores([]).latest()`, `SimpleLinkedList().pop()`,
and `palindrome_products(15, 15)`.

Where the input is invalid outright, a `ValueError` is raised, for example
`collatz(0)`, `square(65)`, `nth(-1)`, `egg_count(-1)`,
`is_armstrong_number(-1)`, `series("123", 0)`, `rotate("a", 300)`,
`recite(11, 1)`, or a garden diagram with an unknown plant letter.

## What it does not do

The package is a library only: it has no command-line interface, and
nothing in it reads or writes files.