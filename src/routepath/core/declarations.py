"""Route declarations and class-level defaults (source of truth).

Rebuild this module from the contract below; it holds data only, no
resolution logic.

``Route``
---------
Frozen dataclass describing one routing declaration attached to a class or a
method. Fields:

- ``path`` – scalar path (``str``), locale mapping (``{locale: path}``) or
  ``None`` when the declaration only carries localized paths.
- ``name`` – explicit route name; ``None`` means "generate a default name".
  An empty string is an explicit name and is used as-is.
- ``localized_paths`` – ``{locale: path}``; empty when not localized.
- ``methods``, ``host``, ``requirements``, ``defaults``, ``priority`` –
  informational fields carried by real route declarations. Resolution never
  reads them. ``methods`` also accepts a single ``"GET|POST"`` string.

Instances are decorators: ``@Route("/blog", name="blog_")`` stores the
declaration on the decorated class or function via
:func:`routepath.core.decorators.attach_declaration` and returns the target
unchanged. Stacked decorators keep source order (top first).

``Globals``
-----------
Class-level defaults inherited by method declarations: name prefix (``""``),
path prefix (``None``) and localized path prefixes (empty mapping). Built
fresh for each resolution; never shared between calls.

Invariants
----------
- Declarations are never mutated after construction; mapping fields are
  copied into plain dicts at construction time.
- ``is_localized(value)`` is the single test deciding whether a path or
  prefix is locale-keyed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

__all__ = [
    "Globals",
    "PathValue",
    "ResolvedPaths",
    "Route",
    "ROUTE_KIND",
    "TARGET_ATTR_NAME",
    "is_localized",
]

TARGET_ATTR_NAME = "__routepath_declarations__"
ROUTE_KIND = "routepath.core.declarations.Route"

PathValue = Union[str, Mapping[str, str], None]
ResolvedPaths = Dict[Union[str, int], str]


def is_localized(value: Any) -> bool:
    return isinstance(value, Mapping)


def _copy_path(value: PathValue) -> PathValue:
    if is_localized(value):
        return dict(value)
    return value


@dataclass(frozen=True)
class Route:
    """One routing declaration (class prefix or method route)."""

    path: PathValue = None
    name: Optional[str] = None
    localized_paths: Mapping[str, str] = field(default_factory=dict)
    methods: List[str] = field(default_factory=list)
    host: Optional[str] = None
    requirements: Mapping[str, str] = field(default_factory=dict)
    defaults: Mapping[str, Any] = field(default_factory=dict)
    priority: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", _copy_path(self.path))
        object.__setattr__(self, "localized_paths", dict(self.localized_paths or {}))
        methods = self.methods or []
        if isinstance(methods, str):
            methods = [chunk.strip() for chunk in methods.split("|") if chunk.strip()]
        object.__setattr__(self, "methods", [m.upper() for m in methods])
        object.__setattr__(self, "requirements", dict(self.requirements or {}))
        object.__setattr__(self, "defaults", dict(self.defaults or {}))

    def __call__(self, target: Any) -> Any:
        from .decorators import attach_declaration

        return attach_declaration(target, self)


@dataclass
class Globals:
    """Defaults a class-level declaration hands down to its methods."""

    name: str = ""
    path: PathValue = None
    localized_paths: Dict[str, str] = field(default_factory=dict)

    @property
    def prefix(self) -> PathValue:
        """Localized prefixes when present, else the scalar path prefix."""
        return self.localized_paths or self.path
