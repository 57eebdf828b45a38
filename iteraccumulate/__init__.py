"""
``iteraccumulate``
==================

Provides a lazy iterator adaptor yielding the running accumulation of
a base iterable, seeded with an initial value: the streaming analogue
of a left fold.
"""
from ._version import __version__
from . import adaptor
from . import chain
from . import combinators
from .adaptor import Accumulate, accumulate
from .chain import Iter


__all__ = [
    "__version__",
    "adaptor",
    "chain",
    "combinators",
    "Accumulate",
    "accumulate",
    "Iter",
]
