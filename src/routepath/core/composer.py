"""Per-declaration path composition (source of truth).

``get_path(declaration, globals_, cls, method_name, route_name, namer)``
returns the locale → path contribution of one declaration, ``{}`` when the
declaration is valid but its name differs from ``route_name``, or ``None``
when the declaration is inconsistent with the class prefix.

Name
----
``globals_.name + (declaration.name or <default name>)`` where the default
name comes from ``namer.default_route_name(cls, method_name)`` and is only
generated when ``declaration.name is None``. The name is computed before any
comparison, so the namer counter advances even for declarations that end up
filtered out.

Composition
-----------
``path`` is the declaration's ``localized_paths`` when non-empty, else its
``path``; ``prefix`` is ``globals_.prefix``. Unset values concatenate as ``""``.

=================  =================  ==========================================
path               prefix             result (when the name matches)
=================  =================  ==========================================
locale mapping     scalar / unset     ``{locale: prefix + path[locale]}``
locale mapping     locale mapping     ``{locale: prefix[locale] + path[locale]}``;
                                      ``None`` unless both key sets are equal
scalar / unset     locale mapping     ``{locale: prefix[locale] + path}``
scalar / unset     scalar / unset     ``{<next index>: prefix + path or "/"}``
=================  =================  ==========================================

The key-set check in the mapping/mapping case runs whether or not the name
matches.

``merge_paths(into, paths)`` folds one contribution into the accumulated
mapping: string keys overwrite (keeping their original position), integer keys
are appended at the next positional index.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .declarations import Globals, PathValue, ResolvedPaths, is_localized
from .naming import DefaultRouteNamer

__all__ = ["effective_name", "get_path", "merge_paths"]

logger = logging.getLogger("routepath.composer")


def _text(value: PathValue) -> str:
    return "" if value is None else str(value)


def _next_index(paths: ResolvedPaths) -> int:
    return sum(1 for key in paths if isinstance(key, int))


def effective_name(
    declaration: Any, globals_: Globals, cls: type, method_name: str, namer: DefaultRouteNamer
) -> str:
    name = declaration.name
    if name is None:
        name = namer.default_route_name(cls, method_name)
    return globals_.name + name


def get_path(
    declaration: Any,
    globals_: Globals,
    cls: type,
    method_name: str,
    route_name: str,
    namer: DefaultRouteNamer,
) -> Optional[ResolvedPaths]:
    matches = effective_name(declaration, globals_, cls, method_name, namer) == route_name

    path = declaration.localized_paths or declaration.path
    prefix = globals_.prefix
    paths: ResolvedPaths = {}

    if is_localized(path):
        if not is_localized(prefix):
            for locale, locale_path in path.items():
                if matches:
                    paths[locale] = _text(prefix) + locale_path
        elif set(prefix) - set(path):
            logger.debug(
                "Skipping route on %s.%s: prefix locales %s missing from path",
                cls.__qualname__, method_name, sorted(set(prefix) - set(path)),
            )
            return None
        else:
            for locale, locale_path in path.items():
                if locale not in prefix:
                    logger.debug(
                        "Skipping route on %s.%s: no prefix for locale %r",
                        cls.__qualname__, method_name, locale,
                    )
                    return None
                if matches:
                    paths[locale] = prefix[locale] + locale_path
    elif is_localized(prefix):
        for locale, locale_prefix in prefix.items():
            if matches:
                paths[locale] = locale_prefix + _text(path)
    elif matches:
        full = _text(prefix) + _text(path)
        paths[_next_index(paths)] = full or "/"

    return paths


def merge_paths(into: ResolvedPaths, paths: ResolvedPaths) -> ResolvedPaths:
    for key, value in paths.items():
        if isinstance(key, int):
            into[_next_index(into)] = value
        else:
            into[key] = value
    return into
