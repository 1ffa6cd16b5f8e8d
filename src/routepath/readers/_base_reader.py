"""Legacy annotation reader contract (source of truth).

Legacy readers pull route declarations from somewhere other than decorator
markers (docstrings, side tables, ...). The extractor only talks to this
interface; concrete readers live beside it in :mod:`routepath.readers`.

``AnnotationReader``
    Required methods:

    ``get_class_annotations(cls)``
        every annotation found on the class itself (not inherited).

    ``get_method_annotations(func)``
        every annotation found on a function/method.

    Provided:

    ``get_class_annotation(cls, kind)``
        first annotation from ``get_class_annotations`` for which
        ``safe_is_instance(annotation, kind)`` holds, or ``None``.

    Readers may return any objects; filtering by declaration kind is the
    caller's job. Malformed sources must raise :class:`AnnotationSyntaxError`
    so the caller can skip them without masking programming errors.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from smartseeds.typeutils import safe_is_instance

__all__ = ["AnnotationReader", "AnnotationSyntaxError"]


class AnnotationSyntaxError(ValueError):
    """A legacy annotation could not be parsed or validated."""

    def __init__(self, message: str, *, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class AnnotationReader:
    """Base class for legacy annotation sources."""

    def get_class_annotations(self, cls: type) -> List[Any]:  # pragma: no cover - abstract
        raise NotImplementedError

    def get_method_annotations(self, func: Callable) -> List[Any]:  # pragma: no cover - abstract
        raise NotImplementedError

    def get_class_annotation(self, cls: type, kind: str) -> Optional[Any]:
        for annotation in self.get_class_annotations(cls):
            if safe_is_instance(annotation, kind):
                return annotation
        return None
