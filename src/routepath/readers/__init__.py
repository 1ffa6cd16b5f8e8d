"""Legacy annotation readers."""

from ._base_reader import AnnotationReader, AnnotationSyntaxError
from .docstring import DocstringAnnotationReader

__all__ = ["AnnotationReader", "AnnotationSyntaxError", "DocstringAnnotationReader"]
