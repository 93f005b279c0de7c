# ninetools

ninetools holds three small command-line tools and the library code behind them:

- `btc` values Bitcoin amounts against a table of historical exchange rates;
- `rpn` evaluates integer expressions written in reverse Polish notation;
- `pmergeme` sorts non-negative integers with the Ford-Johnson merge-insertion algorithm.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra:

```
pip install ".[test]"
pytest
```

## btc: value a Bitcoin amount on a date

```
btc input.txt
```

`btc` first reads exchange rates from `data.csv` in the current directory. That file begins with a header line, and each following line has the form `YYYY-MM-DD,rate`. Lines that cannot be read are skipped. If `data.csv` cannot be opened, or if the command is not given exactly one argument, it prints `Error: could not open file.` to standard error and exits with status 1.

The input file also begins with a header line. Each following line has the form `date | value` and yields one line of output:

- `date => value = result` when the line is valid. The result is the value times the rate for the latest date on or before the given date.
- `Error: bad input => <line>` when the line has no `|` or no value after it.
- `Error: bad input.` when the date is malformed or does not exist. Leap years follow the Gregorian rules.
- `Error: invalid value => <value>` when the value is not a number.
- `Error: not a positive number.` when the value is negative.
- `Error: too large a number.` when the value is above 1000.
- `Error: no exchange rate available for date<date>` when no rate exists on or before the date.

From Python, the module `ninetools.exchange` provides:

- `Date`: an ordered, frozen dataclass with the fields `year`, `month` and `day`.
- `parse_date(text)`: returns a `Date`, or raises `ValueError` if the text is malformed or the date is invalid.
- `is_valid_date(date)`, `is_leap_year(year)` and `trim(text)`.
- `BitcoinExchange`:
  - `load_exchange_rates(filename)` raises `OSError` if the file cannot be opened.
  - `get_exchange_rate(date)` raises `LookupError` if no earlier or equal date is known.
  - `process_lines(lines)` yields the output lines.
  - `process_input_file(filename)` prints the output lines.

```python
from ninetools.exchange import BitcoinExchange

exchange = BitcoinExchange()
exchange.load_exchange_rates("data.csv")
for line in exchange.process_lines(["2011-01-03 | 3"]):
    print(line)
```

## rpn: evaluate reverse Polish notation

```
rpn "8 9 * 9 - 9 - 9 - 4 - 1 +"
```

Tokens are separated by whitespace. The operators are `+`, `-`, `*` and `/`. All arithmetic is on integers, and division truncates toward zero. The command prints the result. Errors go to standard error with exit status 1. These include:

- too few operands;
- division by zero;
- a token that is not a number;
- anything other than exactly one value left at the end.

From Python:

```python
from ninetools.rpn import evaluate

evaluate("1 2 + 3 *")  # 9
```

The class `RpnCalculator` offers `calculate(expression)`, `result()`, `perform_operation(op)` and `is_operator(char)`. Failures raise `ninetools.rpn.RpnError`.

## pmergeme: Ford-Johnson merge-insertion sort

```
pmergeme 3 5 9 7 4
```

Every argument must be a string of digits that fits in a signed 32-bit integer. Otherwise the command prints `Error` to standard error and exits with status 1. It prints, in order:

1. the sequence before sorting;
2. the time taken to sort it into a deque and into a list;
3. the sorted sequence.

It warns on standard error if the two sorted results differ.

From Python, `merge_insert_sort(elements)` returns a sorted list. The helpers `jacobsthal_numbers`, `make_pairs` and `insertion_order` expose the steps of the algorithm, and `is_positive_integer` checks an argument. The `PmergeMe` class has these methods:

- `sort_deque` sorts into `sorted_deque` and prints its timing.
- `sort_vector` sorts into `sorted_vector` and prints its timing.
- `display_sorted` prints both sorted sequences.