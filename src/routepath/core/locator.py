"""Class and method lookup for controller identifiers.

``ClassLocator(classes=None)`` turns ``"package.module.Class"`` (nested
classes allowed: ``"package.module.Outer.Inner"``) into a class object:

- the explicit ``classes`` registry is consulted first (exact key);
- otherwise the longest importable module prefix is imported and the remaining
  segments are resolved with ``getattr``;
- anything that is not a class, or cannot be imported (whatever the module
  raises while importing), yields ``None``.

``find_method(cls, name)`` looks the attribute up in the class dicts along
the MRO (no descriptor binding, no metaclass or ``__getattr__`` lookups) and
returns the underlying function, unwrapping ``staticmethod``/``classmethod``.
Non-callables yield ``None``.

``is_invokable(cls)`` is true when some class in the MRO defines
``__call__``; the metaclass ``__call__`` every class has does not count.
"""

from __future__ import annotations

import importlib
import logging
from typing import Any, Callable, Dict, Mapping, Optional

__all__ = ["ClassLocator", "INVOKE_METHOD", "find_method", "is_invokable"]

INVOKE_METHOD = "__call__"

logger = logging.getLogger("routepath.locator")


def find_method(cls: type, name: str) -> Optional[Callable]:
    if not name:
        return None
    for klass in cls.__mro__:
        if name in vars(klass):
            member = vars(klass)[name]
            break
    else:
        return None
    if isinstance(member, (staticmethod, classmethod)):
        member = member.__func__
    if not callable(member):
        return None
    return member


def is_invokable(cls: type) -> bool:
    return any(INVOKE_METHOD in vars(klass) for klass in cls.__mro__ if klass is not object)


class ClassLocator:
    """Resolve dotted class identifiers to class objects."""

    def __init__(self, classes: Optional[Mapping[str, type]] = None) -> None:
        self._classes: Dict[str, type] = dict(classes or {})

    def register(self, cls: type, identifier: Optional[str] = None) -> type:
        key = identifier or f"{cls.__module__}.{cls.__qualname__}"
        self._classes[key] = cls
        return cls

    def locate(self, identifier: str) -> Optional[type]:
        if not identifier:
            return None
        cls = self._classes.get(identifier)
        if cls is not None:
            return cls
        return self._import(identifier.replace("\\", "."))

    def _import(self, dotted: str) -> Optional[type]:
        parts = [part for part in dotted.split(".") if part]
        for split in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split])
            try:
                node: Any = importlib.import_module(module_name)
            except ImportError:
                continue
            except Exception as exc:
                logger.debug("Importing %s failed: %r", module_name, exc)
                continue
            try:
                for attr in parts[split:]:
                    node = getattr(node, attr)
            except Exception:
                logger.debug("No attribute path %r in module %s", parts[split:], module_name)
                return None
            return node if isinstance(node, type) else None
        return None
