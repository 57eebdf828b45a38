import logging
from typing import Any, Callable, Dict, Iterator, TextIO

import click
import numpy as np
from omegaconf import OmegaConf

from iteraccumulate.adaptor import accumulate
from iteraccumulate.chain import Iter
from iteraccumulate.combinators import factory, load
from iteraccumulate._version import version


_log = logging.getLogger("iteraccumulate")

formatter = logging.Formatter(
    fmt="%(asctime)s %(levelname)s %(module)s:%(lineno)s %(message)s")

# seeds used when none is given
IDENTITIES: Dict[str, Any] = {
    "add": 0,
    "sub": 0,
    "or": 0,
    "xor": 0,
    "mul": 1,
    "and": -1,
    "concat": "",
}
# dtype kinds each builtin op accepts, "U" standing for str; others take any
OP_KINDS: Dict[str, str] = {
    "and": "iu",
    "or": "iu",
    "xor": "iu",
    "concat": "U",
    "mul": "iuf",
    "sub": "iuf",
}
DEFAULTS: Dict[str, Any] = {
    "op": "add",
    "seed": None,
    "dtype": "int64",
    "plugins": [],
}


def setup_logging(verbose: bool) -> None:
    """Attaches a handler for the current stderr to the package logger,
    replacing any handler left by a previous invocation.
    """
    for handler in list(_log.handlers):
        _log.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    _log.addHandler(handler)
    _log.setLevel(logging.DEBUG if verbose else logging.WARNING)


def load_config(path: str) -> Dict[str, Any]:
    """Reads CLI defaults from a YAML file."""
    conf = OmegaConf.to_object(OmegaConf.load(path))
    if not isinstance(conf, dict):
        raise click.BadParameter(
            "config must be a mapping.", param_hint="--config")
    unknown = set(conf) - set(DEFAULTS)
    if unknown:
        raise click.BadParameter(
            f"unknown config keys {sorted(unknown)}.", param_hint="--config")
    return conf


def converter(dtype: str) -> Callable[[str], Any]:
    """Returns a function parsing a token into a value of ``dtype``."""
    if dtype == "str":
        return str
    try:
        np_dtype = np.dtype(dtype)
    except TypeError:
        raise click.BadParameter(
            f"{dtype!r} is not a NumPy dtype.", param_hint="--dtype"
        ) from None
    if np_dtype.kind not in "iuf":
        raise click.BadParameter(
            f"{dtype!r} is not a numeric dtype.", param_hint="--dtype")
    return np_dtype.type


def check_op(op_name: str, dtype: str) -> None:
    """Rejects builtin ops that cannot combine values of ``dtype``."""
    kind = "U" if dtype == "str" else np.dtype(dtype).kind
    allowed = OP_KINDS.get(op_name)
    if allowed is not None and kind not in allowed:
        raise click.BadParameter(
            f"{op_name} cannot combine values of dtype {dtype}.",
            param_hint="--op",
        )


def read_values(
    stream: TextIO, convert: Callable[[str], Any]
) -> Iterator[Any]:
    for line_num, line in enumerate(stream, start=1):
        for token in line.split():
            try:
                yield convert(token)
            except (ValueError, OverflowError):
                raise click.BadParameter(
                    f"cannot parse {token!r} on line {line_num}.",
                    param_hint="INPUT",
                ) from None


@click.command()
@click.argument("input", type=click.File("r"), default="-")
@click.option("--op", "op_name", default=None,
              help="Name of the combining function (default add).")
@click.option("--seed", default=None,
              help="Initial accumulator value, parsed with --dtype.")
@click.option("--dtype", default=None,
              help="NumPy dtype of the values, or 'str' (default int64). "
              "Overflow is an error.")
@click.option("--last", is_flag=True,
              help="Print only the final accumulated value.")
@click.option("--config", "config_path", type=click.Path(exists=True),
              default=None, help="YAML file providing option defaults.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logs.")
@click.version_option(version)
def main(input, op_name, seed, dtype, last, config_path, verbose):
    """Prints the running accumulation of the whitespace separated
    values in INPUT (default stdin), one per line.
    """
    setup_logging(verbose)
    settings = dict(DEFAULTS)
    if config_path is not None:
        settings.update(load_config(config_path))
        _log.debug("loaded config from %s", config_path)
    explicit = {"op": op_name, "seed": seed, "dtype": dtype}
    settings.update({k: v for k, v in explicit.items() if v is not None})
    _log.debug("settings: %s", settings)

    load.load_plugins(list(settings["plugins"] or []))
    try:
        func = factory.create(settings["op"])
    except ValueError as e:
        choices = ", ".join(factory.names())
        raise click.BadParameter(
            f"{e} Choose from: {choices}.", param_hint="--op") from None
    convert = converter(settings["dtype"])
    check_op(settings["op"], settings["dtype"])
    seed_val = settings["seed"]
    if seed_val is None:
        if settings["op"] not in IDENTITIES:
            raise click.UsageError(
                f"--seed is required for the {settings['op']} operation.")
        seed_val = IDENTITIES[settings["op"]]
        if convert is str and settings["op"] == "add":
            seed_val = ""
    try:
        seed_val = convert(str(seed_val))
    except (ValueError, OverflowError):
        raise click.BadParameter(
            f"cannot parse seed {seed_val!r}.", param_hint="--seed"
        ) from None

    values = read_values(input, convert)
    try:
        with np.errstate(over="raise"):
            if last:
                click.echo(Iter(values).fold(seed_val, func))
                return
            for value in accumulate(values, seed_val, func):
                click.echo(value)
    except FloatingPointError as e:
        raise click.ClickException(
            f"{e} with dtype {settings['dtype']}.") from None
