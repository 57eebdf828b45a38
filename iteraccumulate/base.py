from abc import ABC, abstractmethod
from typing import Callable, Iterator, TypeVar


__all__ = [
    "Combiner",
    "IteratorAdapter",
]


T = TypeVar("T")
A = TypeVar("A")
Combiner = Callable[[A, T], A]


class IteratorAdapter(ABC, Iterator[T]):
    """Adapter pattern interface for lazy iterators wrapping a source."""

    def __iter__(self) -> "IteratorAdapter[T]":
        return self

    @abstractmethod
    def __next__(self) -> T:
        pass

    @abstractmethod
    def __length_hint__(self) -> int:
        """Estimated number of remaining elements. Returns
        ``NotImplemented`` if no estimate is available.
        """
