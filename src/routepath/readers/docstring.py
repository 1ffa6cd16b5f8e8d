"""Docstring annotation reader (source of truth).

Reads legacy route annotations written inside docstrings::

    class BlogController:
        \"\"\"Blog pages.

        @Route("/blog", name="blog_")
        \"\"\"

        def show(self, slug):
            \"\"\"@Route(path={"en": "/{slug}", "fr": "/article/{slug}"}, name="show")\"\"\"

Syntax
------
- An annotation opens with ``@<tag>(`` where ``<tag>`` is the configured tag
  (default ``"Route"``), optionally dotted-qualified (``@routepath.Route(``).
  ``@`` must not follow a word character, so e-mail addresses are ignored.
  Other ``@tags`` are ignored.
- Arguments run to the matching parenthesis and may span lines. Quotes and
  nested brackets are honoured while matching.
- Arguments are Python literals. At most one positional argument (the path);
  keywords are the ``Route`` fields. ``methods`` also accepts a single string
  such as ``"GET|POST"``.

Validation
----------
Arguments go through the pydantic model ``RoutePayload`` (unknown keys are
rejected). Any failure (unbalanced parentheses, non-literal values, invalid
types) raises :class:`AnnotationSyntaxError` carrying the offending text.

Only the object's own docstring is read: class annotations are not inherited.
"""

from __future__ import annotations

import ast
import re
from typing import Any, Callable, Dict, List, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from routepath.core.declarations import Route
from routepath.readers._base_reader import AnnotationReader, AnnotationSyntaxError

__all__ = ["DocstringAnnotationReader", "RoutePayload"]

_OPENER = re.compile(r"(?<![\w.])@(?P<tag>[A-Za-z_][\w.]*)\s*\(")
_CLOSERS = {"(": ")", "[": "]", "{": "}"}


class RoutePayload(BaseModel):
    """Validated arguments of one ``@Route(...)`` annotation."""

    model_config = ConfigDict(extra="forbid")

    path: Union[str, Dict[str, str], None] = None
    name: Optional[str] = None
    localized_paths: Dict[str, str] = Field(default_factory=dict)
    methods: List[str] = Field(default_factory=list)
    host: Optional[str] = None
    requirements: Dict[str, str] = Field(default_factory=dict)
    defaults: Dict[str, Any] = Field(default_factory=dict)
    priority: int = 0

    @field_validator("methods", mode="before")
    @classmethod
    def _split_methods(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [chunk.strip() for chunk in value.split("|") if chunk.strip()]
        return value


def _closing_index(text: str, start: int) -> int:
    """Index of the parenthesis closing the one opened just before ``start``."""
    stack = [")"]
    quote: Optional[str] = None
    pos = start
    while pos < len(text):
        char = text[pos]
        if quote:
            if char == "\\":
                pos += 2
                continue
            if char == quote:
                quote = None
        elif char in ("'", '"'):
            quote = char
        elif char in _CLOSERS:
            stack.append(_CLOSERS[char])
        elif char in (")", "]", "}"):
            if char != stack.pop():
                return -1
            if not stack:
                return pos
        pos += 1
    return -1


class DocstringAnnotationReader(AnnotationReader):
    """Legacy reader parsing ``@Route(...)`` annotations from docstrings."""

    def __init__(self, tag: str = "Route", declaration_class: Type[Route] = Route) -> None:
        self.tag = tag
        self.declaration_class = declaration_class

    def get_class_annotations(self, cls: type) -> List[Route]:
        return self.parse(vars(cls).get("__doc__"))

    def get_method_annotations(self, func: Callable) -> List[Route]:
        return self.parse(getattr(func, "__doc__", None))

    def parse(self, doc: Optional[str]) -> List[Route]:
        if not doc or "@" not in doc:
            return []
        annotations = []
        for match in _OPENER.finditer(doc):
            tag = match.group("tag")
            if tag != self.tag and not tag.endswith(f".{self.tag}"):
                continue
            end = _closing_index(doc, match.end())
            if end < 0:
                raise AnnotationSyntaxError(
                    f"Unbalanced @{tag} annotation", source=doc[match.start():]
                )
            source = doc[match.start():end + 1]
            annotations.append(self._build(doc[match.end():end], source))
        return annotations

    def _build(self, arguments: str, source: str) -> Route:
        try:
            call = ast.parse(f"_({arguments})", mode="eval").body
        except SyntaxError as exc:
            raise AnnotationSyntaxError(f"Invalid annotation syntax: {exc.msg}", source=source) from exc

        if len(call.args) > 1:
            raise AnnotationSyntaxError("Only the path may be given positionally", source=source)
        if any(kw.arg is None for kw in call.keywords):
            raise AnnotationSyntaxError("Keyword unpacking is not supported", source=source)
        try:
            payload: Dict[str, Any] = {kw.arg: ast.literal_eval(kw.value) for kw in call.keywords}
            positional = [ast.literal_eval(arg) for arg in call.args]
        except (ValueError, TypeError, SyntaxError, MemoryError, RecursionError) as exc:
            raise AnnotationSyntaxError(f"Annotation arguments must be literals: {exc}", source=source) from exc
        if positional:
            if "path" in payload:
                raise AnnotationSyntaxError("Path given both positionally and by keyword", source=source)
            payload["path"] = positional[0]

        try:
            validated = RoutePayload(**payload)
        except ValidationError as exc:
            raise AnnotationSyntaxError(
                f"Invalid @{self.tag} annotation: {exc.error_count()} error(s)", source=source
            ) from exc
        return self.declaration_class(**validated.model_dump())
