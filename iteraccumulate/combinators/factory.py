import logging
import operator as op
from typing import Any, Dict, List

from iteraccumulate.base import Combiner


_log = logging.getLogger(__name__)
create_funcs: Dict[str, Combiner] = {}


def register(name: str, func: Combiner) -> None:
    """Register a new combining function."""
    _log.debug("registering combining function %r", name)
    create_funcs[name] = func


def unregister(name: str) -> None:
    """Unregister a combining function."""
    create_funcs.pop(name, None)


def names() -> List[str]:
    """Names of the registered combining functions, sorted."""
    return sorted(create_funcs)


def create(name: str) -> Combiner:
    """Look up a combining function by name."""
    try:
        return create_funcs[name]
    except KeyError:
        raise ValueError(
            f"Unknown combining function of name {name}."
        ) from None


def _last(acc: Any, item: Any) -> Any:
    return item


register("add", op.add)
register("mul", op.mul)
register("sub", op.sub)
register("max", max)
register("min", min)
register("concat", op.concat)
register("and", op.and_)
register("or", op.or_)
register("xor", op.xor)
register("last", _last)
