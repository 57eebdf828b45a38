"""
``iteraccumulate.adaptor``
==========================

Provides ``accumulate()``, an iterator adaptor which accumulates the
elements from a base iterable using the provided combining function.

``accumulate()`` is similar to ``functools.reduce()``, but instead of
returning the final accumulated result, it returns an iterator that
yields the current accumulated value for each iteration. In other
words, the last element yielded by ``accumulate()`` is what would have
been returned by ``reduce()`` if it was used instead.

Unlike ``itertools.accumulate()``, the seed is always given, is never
yielded itself, and the adaptor forwards the cardinality hint of its
source.

Examples
--------
>>> import operator as op
>>> acc = accumulate([1, 2, 3, 4, 5], 1, op.mul)
>>> list(acc)
[1, 2, 6, 24, 120]
>>> next(acc, None) is None
True
"""
import itertools as it
import operator as op
import typing as ty

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from iteraccumulate import base

__all__ = ["Accumulate", "accumulate"]


T = ty.TypeVar("T")
A = ty.TypeVar("A")


class Accumulate(base.IteratorAdapter[A], ty.Generic[A, T]):
    """Iterator adaptor yielding the running accumulation of the
    elements from the base iterable.

    The adaptor is lazy: nothing is pulled from the source until the
    adaptor itself is pulled, and each pull advances the source by
    exactly one element. It is also fused: once the source is
    exhausted, the reference to it is dropped and every subsequent
    pull raises ``StopIteration`` without touching the source again.

    Parameters
    ----------
    iterable : iterable of T
        The source elements. ``iter()`` is called once on construction,
        and the resulting iterator is owned by the adaptor.
    seed : A
        Initial value of the accumulator. Never yielded on its own.
    func : callable (A, T) -> A
        Combining function, called exactly once per consumed element,
        in source order. Exceptions it raises propagate unchanged.
    """

    def __init__(
        self,
        iterable: ty.Iterable[T],
        seed: A,
        func: base.Combiner,
    ) -> None:
        self._iter: ty.Optional[ty.Iterator[T]] = iter(iterable)
        self._acc = seed
        self._func = func
        # exact count carried across copy(), whose tee branches give no hint
        self._remaining: ty.Optional[int] = None

    def __next__(self) -> A:
        if self._iter is None:
            raise StopIteration
        try:
            item = next(self._iter)
        except StopIteration:
            self._iter = None
            raise
        if self._remaining is not None:
            self._remaining = self._remaining - 1
        self._acc = self._func(self._acc, item)
        return self._acc

    def __length_hint__(self) -> int:
        if self._iter is None:
            return 0
        if self._remaining is not None:
            return max(self._remaining, 0)
        hint = op.length_hint(self._iter, -1)
        if hint < 0:
            return NotImplemented
        return hint

    @property
    def exhausted(self) -> bool:
        """Whether the source has reported exhaustion."""
        return self._iter is None

    def count(self) -> int:
        """Consumes the remaining source elements, returning how many
        there were. The combining function is not called.
        """
        if self._iter is None:
            return 0
        num = sum(map(lambda _: 1, self._iter))
        self._iter = None
        return num

    def copy(self) -> "Accumulate[A, T]":
        """Returns an independent copy of the adaptor, continuing from
        the current accumulator.

        Notes
        -----
        The source is split with ``itertools.tee()``. Any cardinality
        hint is read before the split and counted down separately by
        each adaptor. The accumulator is shared by reference until
        either adaptor is pulled.
        """
        if self._iter is None:
            clone = self.__class__((), self._acc, self._func)
            clone._iter = None
            return clone
        remaining = self._remaining
        if remaining is None:
            hint = op.length_hint(self._iter, -1)
            remaining = hint if hint >= 0 else None
        self._iter, source = it.tee(self._iter)
        self._remaining = remaining
        clone = self.__class__(source, self._acc, self._func)
        clone._remaining = remaining
        return clone

    __copy__ = copy

    def __rich__(self) -> Tree:
        name = self.__class__.__name__
        tree = Tree(f"{name}(..)")
        source = "<exhausted>" if self._iter is None else repr(self._iter)
        tree.add(f"[blue]iter [default]= [green]{escape(source)}")
        tree.add(f"[blue]acc [default]= [green]{escape(repr(self._acc))}")
        return tree

    def __repr__(self) -> str:
        console = Console(color_system=None)
        with console.capture() as capture:
            console.print(self)
        return capture.get().rstrip("\n")


def accumulate(
    iterable: ty.Iterable[T], seed: A, func: base.Combiner
) -> Accumulate[A, T]:
    """Creates an iterator adaptor which accumulates the elements from
    ``iterable`` using ``func``, starting from ``seed``.

    Parameters
    ----------
    iterable : iterable of T
        Source elements, consumed lazily.
    seed : A
        Initial accumulator value.
    func : callable (A, T) -> A
        Combining function.

    Returns
    -------
    acc : Accumulate
        Lazy iterator over the running accumulation. Yields as many
        values as ``iterable`` has elements.
    """
    return Accumulate(iterable, seed, func)
