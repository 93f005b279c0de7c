"""Evaluate integer expressions written in reverse Polish notation."""

from __future__ import annotations

import operator
import re
import sys
from typing import Callable, Sequence

_TOKEN_RE = re.compile(r"[^ \t\n\v\f\r]+")
_ATOI_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class RpnError(Exception):
    """Raised when an expression cannot be evaluated."""


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def _atoi(token: str) -> int:
    match = _ATOI_RE.match(token)
    return int(match.group(1)) if match else 0


class RpnCalculator:
    """A stack of integers fed by reverse Polish tokens."""

    def __init__(self) -> None:
        self._stack: list[int] = []

    def is_operator(self, char: str) -> bool:
        """Return True for one of ``+ - * /``."""
        return char in _OPERATORS

    def perform_operation(self, op: str) -> None:
        """Replace the two topmost numbers with the result of ``op``."""
        if len(self._stack) < 2:
            raise RpnError("Error: need more numbers.")
        b = self._stack.pop()
        a = self._stack.pop()
        function = _OPERATORS.get(op)
        if function is None:
            raise RpnError("Error: not find your operator")
        if function is _truncating_div and b == 0:
            raise RpnError("Error: by 0 ?? ")
        self._stack.append(function(a, b))

    def calculate(self, expression: str) -> None:
        """Evaluate ``expression``, leaving exactly one number on the stack."""
        for token in _TOKEN_RE.findall(expression):
            if len(token) == 1 and self.is_operator(token):
                self.perform_operation(token)
                continue
            number = _atoi(token)
            if number == 0 and token != "0":
                raise RpnError("Error: invalid format")
            self._stack.append(number)
        if len(self._stack) != 1:
            raise RpnError("Error: expresion invalid")

    def result(self) -> int:
        """Return the number on top of the stack."""
        if not self._stack:
            raise RpnError("Error: I dont have any result to show you... :(")
        return self._stack[-1]


def evaluate(expression: str) -> int:
    """Evaluate a reverse Polish expression and return its value."""
    calculator = RpnCalculator()
    calculator.calculate(expression)
    return calculator.result()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the value of the expression given as the single argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print('Usage: RPN "expression RPN"', file=sys.stderr)
        return 1
    try:
        print(evaluate(args[0]))
    except RpnError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())