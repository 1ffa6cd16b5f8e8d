"""Decorator helpers for attaching route declarations (source of truth).

``attach_declaration(target, declaration)``

- Stores ``declaration`` on ``target`` under ``TARGET_ATTR_NAME`` as a list.
  Classes keep their own list in ``vars(cls)`` so subclasses never inherit a
  parent's declarations.
- Decorators apply bottom-up, so the new declaration is inserted at the front:
  the stored list reads in source order.
- ``staticmethod``/``classmethod`` wrappers are unwrapped to reach the function.
- Raises ``TypeError`` when ``declaration`` is not a :class:`Route`.

``route(path=None, *, name=None, localized_paths=None, **extra)``

- Validated with pydantic ``validate_call``: ``path`` must be a string or a
  ``{locale: path}`` mapping, ``name`` a string, ``localized_paths`` a mapping
  of strings. Returns a :class:`Route`, which is itself the decorator.
- ``extra`` keys are forwarded to ``Route`` (``methods``, ``host``,
  ``requirements``, ``defaults``, ``priority``).
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import validate_call

from .declarations import TARGET_ATTR_NAME, Route

__all__ = ["attach_declaration", "declarations_of", "route"]


def _unwrap(target: Any) -> Any:
    if isinstance(target, (staticmethod, classmethod)):
        return target.__func__
    return target


def declarations_of(target: Any) -> list:
    """Return the declarations stored directly on ``target`` (copy)."""
    target = _unwrap(target)
    if isinstance(target, type):
        return list(vars(target).get(TARGET_ATTR_NAME, []))
    return list(getattr(target, TARGET_ATTR_NAME, []))


def attach_declaration(target: Any, declaration: Route) -> Any:
    if not isinstance(declaration, Route):
        raise TypeError(f"Expected a Route declaration, got {type(declaration).__name__}")
    markers = declarations_of(target)
    markers.insert(0, declaration)
    setattr(_unwrap(target), TARGET_ATTR_NAME, markers)
    return target


@validate_call
def route(
    path: Union[str, Dict[str, str], None] = None,
    *,
    name: Optional[str] = None,
    localized_paths: Optional[Dict[str, str]] = None,
    **extra: Any,
) -> Route:
    """Build a route declaration usable as a decorator.

    Args:
        path: Path, or ``{locale: path}`` for a localized route.
        name: Explicit route name (class level: name prefix).
        localized_paths: ``{locale: path}`` overriding ``path``.
    """
    return Route(path=path, name=name, localized_paths=localized_paths or {}, **extra)
