"""A simple plugin loader for extra combining functions.

A plugin is a module with a function called ``initialise``, which
registers its combining functions with ``factory.register()``.
"""

import importlib
import logging
import warnings
from typing import List, Optional

from iteraccumulate.combinators import factory


_log = logging.getLogger(__name__)


def load_plugins(plugins: List[Optional[str]]) -> List[str]:
    """Load the plugins defined in the plugins list, returning the names
    of the combining functions they registered.
    """
    before = set(factory.names())
    for plugin_name in plugins:
        if not plugin_name:
            warnings.warn("Skipping empty plugin entry.", UserWarning)
            continue
        _log.debug("loading plugin %s", plugin_name)
        plugin = importlib.import_module(plugin_name)
        initialise = getattr(plugin, "initialise", None)
        if not callable(initialise):
            raise ValueError(
                f"Plugin {plugin_name} has no initialise function.")
        initialise()
    added = sorted(set(factory.names()) - before)
    if added:
        _log.debug("plugins registered %s", ", ".join(added))
    return added
