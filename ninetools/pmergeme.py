"""Sort positive integers with the Ford-Johnson merge-insertion algorithm."""

from __future__ import annotations

import bisect
import sys
import time
from collections import deque
from typing import Any, Iterable, Sequence

_INT_MAX = 2**31 - 1
_DIGITS = frozenset("0123456789")


def jacobsthal_numbers(n: int) -> list[int]:
    """Return the Jacobsthal numbers J(0) through J(n)."""
    numbers = [0]
    if n == 0:
        return numbers
    numbers.append(1)
    while len(numbers) <= n:
        numbers.append(numbers[-1] + 2 * numbers[-2])
    return numbers


def make_pairs(elements: Sequence[Any], larger_first: bool = True) -> list[tuple[Any, Any]]:
    """Pair up consecutive elements, dropping a trailing unpaired one.

    Each pair holds its larger element first when ``larger_first`` is true,
    its smaller element first otherwise.
    """
    items = list(elements)
    pairs = []
    for first, second in zip(items[0::2], items[1::2]):
        if (second > first) == larger_first and first != second:
            first, second = second, first
        pairs.append((first, second))
    return pairs


def insertion_order(n: int) -> list[int]:
    """Return the 1-based indices 1..n in Jacobsthal insertion order."""
    jacobsthal = jacobsthal_numbers(n)
    order: list[int] = []
    for previous, current in zip(jacobsthal[1:], jacobsthal[2:]):
        if len(order) >= n - 1:
            break
        if current <= n:
            order.extend(range(current, previous, -1))
    seen = set(order)
    order.extend(index for index in range(1, n + 1) if index not in seen)
    return order


def merge_insert_sort(elements: Iterable[Any], larger_first: bool = True) -> list[Any]:
    """Return the elements sorted in ascending order by merge-insertion."""
    items = list(elements)
    if len(items) <= 1:
        return items

    has_stray = len(items) % 2 == 1
    stray = items.pop() if has_stray else None

    pairs = make_pairs(items, larger_first)
    main_chain = merge_insert_sort((first for first, _ in pairs), larger_first)
    pending = [second for _, second in pairs]

    result = list(main_chain)
    if pending:
        bisect.insort_left(result, pending[0])
        for index in insertion_order(len(pending)):
            if 0 < index < len(pending):
                bisect.insort_left(result, pending[index])
        if has_stray:
            bisect.insort_left(result, stray)
    return result


class PmergeMe:
    """Sorts a sequence twice, once into a deque and once into a list, timing each."""

    def __init__(self) -> None:
        self.sorted_deque: deque[Any] = deque()
        self.sorted_vector: list[Any] = []

    @staticmethod
    def _report(count: int, label: str, elapsed: float) -> None:
        micros = elapsed * 1_000_000
        print(f"Time to process a range of {count} elements with {label} :{micros:g} us.")

    def sort_deque(self, values: Iterable[Any]) -> deque[Any]:
        """Sort ``values`` into a deque, print the time taken and return it."""
        items = list(values)
        start = time.process_time()
        self.sorted_deque = deque(merge_insert_sort(items, larger_first=False))
        end = time.process_time()
        self._report(len(self.sorted_deque), "deque ", end - start)
        return self.sorted_deque

    def sort_vector(self, values: Iterable[Any]) -> list[Any]:
        """Sort ``values`` into a list, print the time taken and return it."""
        items = list(values)
        start = time.process_time()
        self.sorted_vector = merge_insert_sort(items, larger_first=True)
        end = time.process_time()
        self._report(len(self.sorted_vector), "vector", end - start)
        return self.sorted_vector

    def display_sorted(self) -> str:
        """Print both sorted sequences and return the printed text."""
        deque_line = "Deque: " + "".join(f"{value} " for value in self.sorted_deque)
        vector_line = "Vector: " + "".join(f"{value} " for value in self.sorted_vector)
        text = f"{deque_line}\n{vector_line}\n"
        sys.stdout.write(text)
        return text


def is_positive_integer(text: str) -> bool:
    """Return True if ``text`` is a non-empty string of ASCII digits."""
    return bool(text) and all(char in _DIGITS for char in text)


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the positive integers given as arguments and report timings."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: PmergeMe [positive integers...]", file=sys.stderr)
        return 1

    numbers = []
    for arg in args:
        if not is_positive_integer(arg):
            print("Error", file=sys.stderr)
            return 1
        number = int(arg)
        if number > _INT_MAX:
            print("Error", file=sys.stderr)
            return 1
        numbers.append(number)

    print("Before: " + "".join(f"{number} " for number in numbers))

    sorter = PmergeMe()
    sorter.sort_deque(numbers)
    sorter.sort_vector(numbers)

    print("After: " + "".join(f"{number} " for number in sorter.sorted_deque))

    if list(sorter.sorted_deque) != sorter.sorted_vector:
        print("Warning: Different results between containers!", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())