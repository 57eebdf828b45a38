"""
``iteraccumulate.chain``
========================

Fluent wrapper over any iterable, exposing ``accumulate()`` as a method
so that it can be chained with the other lazy adaptors.
"""
import functools as fn
import itertools as it
import operator as op
import typing as ty

from iteraccumulate import base
from iteraccumulate.adaptor import Accumulate

__all__ = ["Iter"]


T = ty.TypeVar("T")
A = ty.TypeVar("A")
U = ty.TypeVar("U")


class Iter(base.IteratorAdapter[T]):
    """Lazy iterator wrapper, providing adaptor methods which each
    return a new ``Iter`` over the adapted sequence.

    Examples
    --------
    >>> import operator as op
    >>> Iter("abc").accumulate("", op.add).collect()
    ['a', 'ab', 'abc']
    """

    def __init__(self, iterable: ty.Iterable[T]) -> None:
        self._iter = iter(iterable)

    def __next__(self) -> T:
        return next(self._iter)

    def __length_hint__(self) -> int:
        hint = op.length_hint(self._iter, -1)
        if hint < 0:
            return NotImplemented
        return hint

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._iter!r})"

    def accumulate(self, seed: A, func: base.Combiner) -> "Iter[A]":
        """Accumulates the elements using ``func``, starting from
        ``seed``, yielding every intermediate result.
        """
        return Iter(Accumulate(self._iter, seed, func))

    def map(self, func: ty.Callable[[T], U]) -> "Iter[U]":
        return Iter(map(func, self._iter))

    def filter(self, pred: ty.Callable[[T], bool]) -> "Iter[T]":
        return Iter(filter(pred, self._iter))

    def take(self, n: int) -> "Iter[T]":
        """Limits the sequence to at most ``n`` elements."""
        return Iter(it.islice(self._iter, n))

    def fold(self, seed: A, func: base.Combiner) -> A:
        """Eagerly reduces the sequence to a single value. Equal to the
        last element of ``accumulate()`` with the same arguments, or
        ``seed`` if the sequence is empty.
        """
        return fn.reduce(func, self._iter, seed)

    def collect(self) -> ty.List[T]:
        return list(self._iter)
