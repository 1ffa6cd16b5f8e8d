"""Class-level route defaults.

``get_globals(cls, reader)`` reduces the class declaration chosen by
``reader.class_declaration(cls)`` into a fresh :class:`Globals`:

- ``name`` takes the declaration name when it is not ``None``;
- ``path`` takes the declaration path when it is not ``None``;
- ``localized_paths`` is always replaced by the declaration's mapping, even
  when that mapping is empty.

Without a class declaration the neutral defaults are returned.
"""

from __future__ import annotations

from .declarations import Globals
from .reader import DeclarationReader

__all__ = ["get_globals", "reset_globals"]


def reset_globals() -> Globals:
    return Globals()


def get_globals(cls: type, reader: DeclarationReader) -> Globals:
    globals_ = reset_globals()
    declaration = reader.class_declaration(cls)
    if declaration is None:
        return globals_

    if declaration.name is not None:
        globals_.name = declaration.name
    if declaration.path is not None:
        globals_.path = declaration.path
    globals_.localized_paths = dict(declaration.localized_paths or {})
    return globals_
