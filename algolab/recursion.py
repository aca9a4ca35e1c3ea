"""Small recursive routines: sums, digit sums, Fibonacci, powers and Hanoi."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence


def array_sum(values: Sequence[int]) -> int:
    """Sum a non-empty sequence by recursing on its prefix."""
    if not values:
        raise ValueError("array_sum needs at least one value")

    def prefix_sum(length: int) -> int:
        if length == 1:
            return values[0]
        return prefix_sum(length - 1) + values[length - 1]

    return prefix_sum(len(values))


def digit_sum(n: int) -> int:
    """Repeatedly sum the decimal digits of n until one digit remains."""
    if n < 10:
        return n
    return digit_sum(sum(int(digit) for digit in str(n)))


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number by naive double recursion."""
    if n < 0:
        raise ValueError("fibonacci is undefined for negative n")
    if n < 2:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def hanoi(
    n: int, source: str, target: str, auxiliary: str
) -> Iterator[tuple[int, str, str]]:
    """Yield the moves (disk, from_peg, to_peg) that carry n disks to target."""
    if n <= 0:
        return
    yield from hanoi(n - 1, source, auxiliary, target)
    yield (n, source, target)
    yield from hanoi(n - 1, auxiliary, target, source)


def power(base: float, exponent: int) -> float:
    """Raise base to a non-negative integer exponent by repeated multiplication."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return 1
    if exponent == 1:
        return base
    return base * power(base, exponent - 1)


def sum_to(n: int) -> int:
    """Return 1 + 2 + ... + n for n >= 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return 1
    return sum_to(n - 1) + n


def main(argv: list[str] | None = None) -> int:
    """Print a demonstration of each routine."""
    out = sys.stdout
    print(f"Sum: {array_sum([1, 2, 3, 4])}", file=out)
    print(f"Digit Sum: {digit_sum(9875)}", file=out)
    print(f"Fibonacci: {fibonacci(5)}", file=out)
    for disk, src, dst in hanoi(3, "A", "C", "B"):
        print(f"Move disk {disk} from {src} to {dst}", file=out)
    print(f"Power: {power(3, 4):g}", file=out)
    print(f"Sum: {sum_to(4)}", file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())