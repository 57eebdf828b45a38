from . import factory
from . import load
from .factory import create, register, unregister


__all__ = ["factory", "load", "create", "register", "unregister"]
