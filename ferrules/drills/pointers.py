"""Pointer drills: cons lists, clone-on-write sequences and shared data in threads."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value followed by the rest of the list."""

    value: int
    rest: Cons | Nil


def create_empty_list() -> Nil:
    """A cons list with no items."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding a single zero."""
    return Cons(0, Nil())


@dataclass(eq=False)
class Cow:
    """A sequence that is borrowed until it must be changed, then copied once."""

    data: Sequence[int]
    owned: bool = False

    def to_mut(self) -> list[int]:
        """Return a mutable list, copying the borrowed data the first time."""
        if not self.owned or not isinstance(self.data, list):
            self.data = list(self.data)
            self.owned = True
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)

    def __getitem__(self, index: int) -> int:
        return self.data[index]


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only if needed."""
    for index, value in enumerate(list(cow.data)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum, on one thread per offset, the numbers congruent to that offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")

    def sum_offset(offset: int) -> int:
        return sum(n for n in numbers if n % workers == offset)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))