import operator as op
import typing as ty

from hypothesis import given, strategies as st

from iteraccumulate import Iter


def test_accumulate_method() -> None:
    """Tests the fluent ``accumulate()`` matches the documented product
    example.
    """
    out = Iter([1, 2, 3, 4, 5]).accumulate(1, op.mul).collect()
    assert out == [1, 2, 6, 24, 120]


def test_chaining() -> None:
    out = (
        Iter(range(10))
        .filter(lambda x: x % 2 == 1)
        .accumulate(0, op.add)
        .map(str)
        .take(3)
        .collect()
    )
    assert out == ["1", "4", "9"]


@given(st.lists(st.integers(), max_size=20))
def test_hint_through_wrapper(data: ty.List[int]) -> None:
    """Tests that an exact cardinality hint survives the wrapper."""
    chained = Iter(data).accumulate(0, op.add)
    assert op.length_hint(chained) == len(data)


def test_fold_empty() -> None:
    assert Iter([]).fold("x", op.add) == "x"


def test_wrapper_is_single_pass() -> None:
    chained = Iter("abc").accumulate("", op.add)
    assert next(chained) == "a"
    assert chained.collect() == ["ab", "abc"]
    assert chained.collect() == []
