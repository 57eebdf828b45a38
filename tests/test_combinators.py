import sys
import textwrap
from pathlib import Path

import pytest

import iteraccumulate as iac
from iteraccumulate.combinators import factory, load


@pytest.mark.parametrize(
    "name, seed, data, expected",
    [
        ("add", 0, [1, 2, 3], [1, 3, 6]),
        ("mul", 1, [2, 3, 4], [2, 6, 24]),
        ("sub", 10, [1, 2, 3], [9, 7, 4]),
        ("max", 0, [3, 1, 5], [3, 3, 5]),
        ("min", 9, [3, 1, 5], [3, 1, 1]),
        ("concat", "", ["a", "b"], ["a", "ab"]),
        ("and", 0b111, [0b110, 0b011], [0b110, 0b010]),
        ("or", 0, [1, 4], [1, 5]),
        ("xor", 0, [3, 1], [3, 2]),
        ("last", None, [4, 5], [4, 5]),
    ],
)
def test_builtin_combiners(name, seed, data, expected) -> None:
    func = factory.create(name)
    assert list(iac.accumulate(data, seed, func)) == expected


def test_unknown_name() -> None:
    with pytest.raises(ValueError, match="Unknown combining function"):
        factory.create("nope")


def test_register_unregister() -> None:
    factory.register("first", lambda acc, item: acc)
    try:
        assert "first" in factory.names()
        assert factory.create("first")(1, 2) == 1
    finally:
        factory.unregister("first")
    assert "first" not in factory.names()
    factory.unregister("first")


def test_load_plugins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests that plugins register their combiners on initialise."""
    plugin = tmp_path / "iac_hypot_plugin.py"
    plugin.write_text(textwrap.dedent(
        """
        import math

        from iteraccumulate.combinators import factory


        def initialise():
            factory.register("hypot", math.hypot)
        """
    ))
    monkeypatch.syspath_prepend(str(tmp_path))
    try:
        assert load.load_plugins(["iac_hypot_plugin"]) == ["hypot"]
        assert factory.create("hypot")(3, 4) == 5
    finally:
        factory.unregister("hypot")
        sys.modules.pop("iac_hypot_plugin", None)


def test_empty_plugin_entry_warns() -> None:
    with pytest.warns(UserWarning):
        load.load_plugins([None])


def test_plugin_without_initialise(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Tests a module lacking ``initialise`` is rejected by name."""
    (tmp_path / "iac_empty_plugin.py").write_text("VALUE = 1\n")
    monkeypatch.syspath_prepend(str(tmp_path))
    try:
        with pytest.raises(ValueError, match="iac_empty_plugin"):
            load.load_plugins(["iac_empty_plugin"])
    finally:
        sys.modules.pop("iac_empty_plugin", None)
