"""Value bitcoin amounts against a table of historical exchange rates."""

from __future__ import annotations

import bisect
import re
import struct
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

DATA_FILE = "data.csv"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_SPACE = " \t\n\v\f\r"
_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_TOKEN_RE = re.compile(r"[^ \t\n\v\f\r]+")


@dataclass(frozen=True, order=True)
class Date:
    """A calendar date, ordered by year, then month, then day."""

    year: int = 0
    month: int = 0
    day: int = 0

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_valid_date(date: Date) -> bool:
    """Return True if the date exists in the Gregorian calendar."""
    if date.year < 0 or not 1 <= date.month <= 12 or date.day < 1:
        return False
    if date.month == 2:
        days_in_month = 29 if is_leap_year(date.year) else 28
    elif date.month in (4, 6, 9, 11):
        days_in_month = 30
    else:
        days_in_month = 31
    return date.day <= days_in_month


def _skip_space(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _SPACE:
        pos += 1
    return pos


def _read_int(text: str, pos: int) -> tuple[int, int]:
    pos = _skip_space(text, pos)
    match = _INT_RE.match(text, pos)
    if match is None:
        raise ValueError(f"expected an integer in {text!r}")
    value = int(match.group())
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range in {text!r}")
    return value, match.end()


def _read_char(text: str, pos: int) -> tuple[str, int]:
    pos = _skip_space(text, pos)
    if pos >= len(text):
        raise ValueError(f"unexpected end of {text!r}")
    return text[pos], pos + 1


def parse_date(text: str) -> Date:
    """Parse a ``YYYY-MM-DD`` date; raise ValueError if it is malformed or invalid."""
    year, pos = _read_int(text, 0)
    dash1, pos = _read_char(text, pos)
    month, pos = _read_int(text, pos)
    dash2, pos = _read_char(text, pos)
    day, pos = _read_int(text, pos)
    if dash1 != "-" or dash2 != "-":
        raise ValueError(f"bad date separators in {text!r}")
    date = Date(year, month, day)
    if not is_valid_date(date):
        raise ValueError(f"no such date: {text!r}")
    return date


def trim(text: str) -> str:
    """Strip spaces and tabs from both ends."""
    return text.strip(" \t")


def _to_float32(value: float) -> float | None:
    """Round to single precision, or None if the value does not fit."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return None


def _leading_float(text: str) -> float | None:
    match = _FLOAT_RE.match(text, _skip_space(text, 0))
    if match is None:
        return None
    return _to_float32(float(match.group()))


def _whole_float(text: str) -> float | None:
    if _FLOAT_RE.fullmatch(text) is None:
        return None
    return _to_float32(float(text))


class BitcoinExchange:
    """A table of exchange rates keyed by date."""

    def __init__(self) -> None:
        self._dates: list[Date] = []
        self._rates: dict[Date, float] = {}

    def __len__(self) -> int:
        return len(self._dates)

    def _store(self, date: Date, rate: float) -> None:
        if date not in self._rates:
            bisect.insort(self._dates, date)
        self._rates[date] = rate

    def load_exchange_rates(self, filename: str) -> None:
        """Load ``date,rate`` lines after a header line; malformed lines are skipped.

        Raises OSError if the file cannot be opened.
        """
        with open(filename, encoding="utf-8", errors="replace") as handle:
            lines = iter(handle)
            next(lines, None)
            for raw in lines:
                line = raw.rstrip("\n")
                date_text, separator, rest = line.partition(",")
                if not separator:
                    continue
                rate = _leading_float(rest)
                if rate is None:
                    continue
                try:
                    date = parse_date(date_text)
                except ValueError:
                    continue
                self._store(date, rate)

    def get_exchange_rate(self, date: Date) -> float:
        """Return the rate of the latest date not after ``date``.

        Raises LookupError if there is no such date.
        """
        index = bisect.bisect_right(self._dates, date)
        if index == 0:
            raise LookupError(f"no exchange rate available for {date}")
        return self._rates[self._dates[index - 1]]

    def _process_line(self, line: str) -> str:
        date_part, separator, rest = line.partition("|")
        tokens = _TOKEN_RE.findall(rest)
        if not separator or not tokens:
            return f"Error: bad input => {line}"
        date_text = trim(date_part)
        value_text = trim(tokens[0])
        try:
            date = parse_date(date_text)
        except ValueError:
            return "Error: bad input."
        value = _whole_float(value_text)
        if value is None:
            return f"Error: invalid value => {value_text}"
        if value < 0:
            return "Error: not a positive number."
        if value > 1000:
            return "Error: too large a number."
        try:
            rate = self.get_exchange_rate(date)
        except LookupError:
            return f"Error: no exchange rate available for date{date_text}"
        result = _to_float32(value * rate)
        if result is None:
            result = float("inf")
        return f"{date_text} => {value:g} = {result:g}"

    def process_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield one output line for each ``date | value`` input line."""
        for raw in lines:
            yield self._process_line(raw.rstrip("\n"))

    def process_input_file(self, filename: str) -> None:
        """Print the valuation of every line after the header of ``filename``.

        Raises OSError if the file cannot be opened.
        """
        with open(filename, encoding="utf-8", errors="replace") as handle:
            lines = iter(handle)
            next(lines, None)
            for output in self.process_lines(lines):
                print(output)


def main(argv: Sequence[str] | None = None) -> int:
    """Value the input file named on the command line against ``data.csv``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error: could not open file.", file=sys.stderr)
        return 1
    exchange = BitcoinExchange()
    try:
        exchange.load_exchange_rates(DATA_FILE)
    except OSError:
        print("Error: could not open file.", file=sys.stderr)
        return 1
    try:
        exchange.process_input_file(args[0])
    except OSError:
        print("Error: could not open file", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())