"""routepath public API surface (source of truth).

Public exports: ``PathExtractor`` (entry point), ``Route`` (declaration and
decorator), the ``route`` helper, ``DefaultNameCounter`` and the legacy
``DocstringAnnotationReader``.

Import must stay lightweight: nothing is instantiated at import time. The
version string lives here as ``__version__``.
"""

__version__ = "0.1.0"

from .core import DeclarationReader, DefaultNameCounter, PathExtractor, Route, route
from .readers import AnnotationSyntaxError, DocstringAnnotationReader

__all__ = [
    "AnnotationSyntaxError",
    "DeclarationReader",
    "DefaultNameCounter",
    "DocstringAnnotationReader",
    "PathExtractor",
    "Route",
    "route",
]
