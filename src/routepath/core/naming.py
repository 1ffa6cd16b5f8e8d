"""Default route names (source of truth).

When a declaration has no explicit name, routers derive one from the
controller class and method. This module reproduces that derivation,
including the first-come-first-served disambiguation index that makes every
generated name after the first unique.

``DefaultNameCounter``
----------------------
Monotonic integer owned by one extractor. ``next_index()`` returns the current
value and advances it by one, atomically (``threading.Lock``). It is never
reset; construct a new counter for an independent sequence.

``DefaultRouteNamer(counter=None)``
-----------------------------------
``default_route_name(cls, method_name)`` runs, in order:

1. ``slug = <class identifier> + "_" + method_name`` where the class
   identifier is ``module.QualName`` with ``.`` and ``\\`` turned into ``_``.
2. Unicode lower-casing when the slug encodes as UTF-8, else ASCII-only
   lower-casing (lone surrogates survive untouched).
3. ``index = counter.next_index()``; when ``index > 0`` append ``"_<index>"``.
4. ``(bundle|controller)_`` → ``_``.
5. Method names ending in ``Action``/``_action``: ``action(_\\d+)?$`` → ``\\1``.
6. ``__`` → ``_`` (single left-to-right pass, like ``str.replace``).

The counter advances on every call, including calls whose result is later
discarded because the route name does not match.
"""

from __future__ import annotations

import re
import string
import threading
from typing import Optional

__all__ = ["DefaultNameCounter", "DefaultRouteNamer", "class_identifier"]

_STRIP_SEGMENT = re.compile(r"(bundle|controller)_")
_TRAILING_ACTION = re.compile(r"action(_\d+)?$")
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class DefaultNameCounter:
    """Thread-safe, strictly increasing disambiguation index."""

    __slots__ = ("_value", "_lock")

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError("Counter start must be >= 0")
        self._value = start
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        return self._value

    def next_index(self) -> int:
        with self._lock:
            current = self._value
            self._value += 1
        return current

    def __repr__(self) -> str:
        return f"DefaultNameCounter(value={self._value})"


def class_identifier(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _lower(text: str) -> str:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return text.translate(_ASCII_LOWER)
    return text.lower()


class DefaultRouteNamer:
    """Derive route names for declarations without an explicit name."""

    def __init__(self, counter: Optional[DefaultNameCounter] = None) -> None:
        self.counter = counter if counter is not None else DefaultNameCounter()

    def default_route_name(self, cls: type, method_name: str) -> str:
        identifier = class_identifier(cls).replace("\\", "_").replace(".", "_")
        name = _lower(f"{identifier}_{method_name}")
        index = self.counter.next_index()
        if index > 0:
            name += f"_{index}"

        name = _STRIP_SEGMENT.sub("_", name)

        if method_name.endswith("Action") or method_name.endswith("_action"):
            name = _TRAILING_ACTION.sub(r"\1", name)

        return name.replace("__", "_")
