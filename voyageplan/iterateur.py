"""A resettable iterator over a snapshot of a sequence."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Iterateur(Generic[T]):
    """Iterates over a copy of the given elements and can start over."""

    def __init__(self, elements: Iterable[T]) -> None:
        self._elements = list(elements)
        self._position = 0

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        element = self._elements[self._position]
        self._position += 1
        return element

    def has_next(self) -> bool:
        return self._position < len(self._elements)

    def reset(self) -> None:
        self._position = 0