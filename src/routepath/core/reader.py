"""Declaration discovery across metadata sources (source of truth).

``DeclarationReader(legacy_reader=None, kind=ROUTE_KIND)`` hands the
extractor the route declarations attached to a class or a method.

Sources and priority
--------------------
1. Decorator markers (``@Route(...)``) stored under ``TARGET_ATTR_NAME``.
2. The optional legacy ``AnnotationReader`` (docstrings by default when built
   by ``PathExtractor``). Skipped entirely when ``legacy_reader`` is ``None``.

Every declaration is filtered with ``safe_is_instance(declaration, kind)`` so
subclasses of the configured kind are accepted and anything else is dropped.

Operations
----------
- ``class_declarations(cls)`` / ``method_declarations(func)``: all markers in
  source order, then all legacy annotations.
- ``class_declaration(cls)``: the single declaration feeding class defaults;
  the first marker wins, the legacy reader is asked only when there is none.

Failures
--------
``AnnotationSyntaxError`` raised by the legacy reader is logged as a warning
and the legacy batch for that target is dropped; markers are still returned.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Optional

from smartseeds.typeutils import safe_is_instance

from routepath.readers._base_reader import AnnotationReader, AnnotationSyntaxError

from .declarations import ROUTE_KIND
from .decorators import declarations_of

__all__ = ["DeclarationReader"]

logger = logging.getLogger("routepath.reader")


class DeclarationReader:
    """Collect route declarations from markers and an optional legacy reader."""

    __slots__ = ("legacy_reader", "kind")

    def __init__(self, legacy_reader: Optional[AnnotationReader] = None, kind: str = ROUTE_KIND) -> None:
        self.legacy_reader = legacy_reader
        self.kind = kind

    def _accept(self, items: Iterable[Any]) -> List[Any]:
        return [item for item in items if safe_is_instance(item, self.kind)]

    def _legacy(self, getter: Callable[[Any], List[Any]], target: Any) -> List[Any]:
        try:
            return self._accept(getter(target))
        except AnnotationSyntaxError as exc:
            logger.warning(
                "Ignoring legacy annotations on %s: %s", getattr(target, "__qualname__", target), exc
            )
            return []

    def class_declarations(self, cls: type) -> List[Any]:
        declarations = self._accept(declarations_of(cls))
        if self.legacy_reader is not None:
            declarations.extend(self._legacy(self.legacy_reader.get_class_annotations, cls))
        return declarations

    def method_declarations(self, func: Callable) -> List[Any]:
        declarations = self._accept(declarations_of(func))
        if self.legacy_reader is not None:
            declarations.extend(self._legacy(self.legacy_reader.get_method_annotations, func))
        return declarations

    def class_declaration(self, cls: type) -> Optional[Any]:
        markers = self._accept(declarations_of(cls))
        if markers:
            return markers[0]
        if self.legacy_reader is None:
            return None
        try:
            return self.legacy_reader.get_class_annotation(cls, self.kind)
        except AnnotationSyntaxError as exc:
            logger.warning("Ignoring legacy class annotation on %s: %s", cls.__qualname__, exc)
            return None
