"""Route path extraction entry point (source of truth).

``PathExtractor`` reconstructs, offline, the path a router would have built
for a named route declared on a controller. It never dispatches requests.

Constructor
-----------
::

    PathExtractor(*, reader=None, counter=None, locator=None, classes=None, **options)

- ``reader``: :class:`DeclarationReader`. When omitted one is built from the
  options: a :class:`DocstringAnnotationReader` (tag ``annotation_tag``) is
  attached as legacy source unless ``legacy_annotations`` is false.
- ``counter``: :class:`DefaultNameCounter` shared by every default name this
  extractor generates. Omitted → a fresh counter starting at 0.
- ``locator``: :class:`ClassLocator`. Omitted → one seeded with ``classes``
  (identifier → class registry consulted before importing).
- ``options`` are merged over ``DEFAULT_OPTIONS`` with ``SmartOptions``:
  ``legacy_annotations`` (True), ``annotation_tag`` ("Route"),
  ``declaration_kind`` (``ROUTE_KIND``), ``default_route_index`` (0).

``extract(class_method, route_name, locale=None)``
--------------------------------------------------
1. ``"pkg.mod.Class::method"`` or ``"pkg.mod.Class"`` (invokable controller,
   also when the method part is empty). Unknown class, missing method or a
   non-invokable class without method → ``None``.
2. Class defaults come from ``get_globals``. Controllers resolved without a
   method part then reset them to neutral defaults: their class declaration
   is the route itself.
3. Declarations are read from the class when the method is ``__call__``
   (also for an explicit ``"Class::__call__"``, which keeps the class
   defaults), otherwise from the method.
4. Each declaration goes through ``get_path``; contributions are folded with
   ``merge_paths``.
5. Selection: ``locale`` key, else ``default_route_index`` key, else the first
   inserted path. Nothing resolved → ``None``.

No exception escapes for unknown targets, inconsistent declarations or
malformed legacy annotations; those are logged on the ``routepath`` loggers.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping, Optional, Tuple

from smartseeds import SmartOptions

from routepath.readers.docstring import DocstringAnnotationReader

from .composer import get_path, merge_paths
from .declarations import ROUTE_KIND, ResolvedPaths
from .globals import get_globals, reset_globals
from .locator import INVOKE_METHOD, ClassLocator, find_method, is_invokable
from .naming import DefaultNameCounter, DefaultRouteNamer
from .reader import DeclarationReader

__all__ = ["DEFAULT_OPTIONS", "PathExtractor"]

logger = logging.getLogger("routepath")

DEFAULT_OPTIONS = {
    "legacy_annotations": True,
    "annotation_tag": "Route",
    "declaration_kind": ROUTE_KIND,
    "default_route_index": 0,
}


class PathExtractor:
    """Resolve the path of a named route declared on a controller."""

    __slots__ = ("reader", "namer", "locator", "default_route_index")

    def __init__(
        self,
        *,
        reader: Optional[DeclarationReader] = None,
        counter: Optional[DefaultNameCounter] = None,
        locator: Optional[ClassLocator] = None,
        classes: Optional[Mapping[str, type]] = None,
        **options: Any,
    ) -> None:
        opts = SmartOptions(options, defaults=DEFAULT_OPTIONS)
        if reader is None:
            legacy = None
            if getattr(opts, "legacy_annotations", True):
                legacy = DocstringAnnotationReader(tag=getattr(opts, "annotation_tag", "Route"))
            reader = DeclarationReader(legacy, kind=getattr(opts, "declaration_kind", ROUTE_KIND))
        self.reader = reader
        self.namer = DefaultRouteNamer(counter)
        self.locator = locator or ClassLocator(classes)
        self.default_route_index = getattr(opts, "default_route_index", 0)

    @property
    def counter(self) -> DefaultNameCounter:
        return self.namer.counter

    def extract(self, class_method: str, route_name: str, locale: Optional[str] = None) -> Optional[str]:
        target = self._resolve_target(class_method)
        if target is None:
            return None
        cls, method_name, func, invokable = target

        globals_ = get_globals(cls, self.reader)
        if invokable:
            globals_ = reset_globals()
        if method_name == INVOKE_METHOD:
            declarations = self.reader.class_declarations(cls)
        else:
            declarations = self.reader.method_declarations(func)

        paths: ResolvedPaths = {}
        for declaration in declarations:
            path = get_path(declaration, globals_, cls, method_name, route_name, self.namer)
            if path:
                merge_paths(paths, path)

        if not paths:
            logger.debug("No route %r declared on %s", route_name, class_method)
            return None
        return self._select(paths, locale)

    def _resolve_target(self, class_method: str) -> Optional[Tuple[type, str, Callable, bool]]:
        class_name, _, method_name = class_method.partition("::")
        method_name = method_name.split("::", 1)[0]

        cls = self.locator.locate(class_name)
        if cls is None:
            logger.debug("Controller class %r not found", class_name)
            return None

        invokable = not method_name
        if invokable:
            if not is_invokable(cls):
                logger.debug("Controller %r is not invokable", class_name)
                return None
            method_name = INVOKE_METHOD

        func = find_method(cls, method_name)
        if func is None:
            logger.debug("Method %r not found on %r", method_name, class_name)
            return None
        return cls, method_name, func, invokable

    def _select(self, paths: ResolvedPaths, locale: Optional[str]) -> str:
        candidates: List[Any] = [locale, self.default_route_index]
        for key in candidates:
            if key is not None and key in paths:
                return paths[key]
        return next(iter(paths.values()))
