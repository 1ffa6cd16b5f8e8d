"""Core runtime aggregator (source of truth).

Purpose: expose the resolution building blocks from a single module. No extra
logic beyond imports/exports.

- ``declarations`` → ``Route`` (decorator + data), ``Globals``
- ``decorators`` → ``route`` helper, ``attach_declaration``
- ``reader`` → ``DeclarationReader``
- ``naming`` → ``DefaultNameCounter``, ``DefaultRouteNamer``
- ``locator`` → ``ClassLocator``
- ``extractor`` → ``PathExtractor``
"""

from .declarations import Globals, Route
from .decorators import attach_declaration, route
from .extractor import PathExtractor
from .locator import ClassLocator
from .naming import DefaultNameCounter, DefaultRouteNamer
from .reader import DeclarationReader

__all__ = [
    "ClassLocator",
    "DeclarationReader",
    "DefaultNameCounter",
    "DefaultRouteNamer",
    "Globals",
    "PathExtractor",
    "Route",
    "attach_declaration",
    "route",
]
