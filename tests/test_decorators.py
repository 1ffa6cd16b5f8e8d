"""Attaching declarations with ``Route`` and ``route()``."""

import pytest
from pydantic import ValidationError

from routepath import Route, route
from routepath.core.decorators import attach_declaration, declarations_of


def test_stacked_decorators_keep_source_order():
    @route("/a", name="a")
    @route("/b", name="b")
    @Route("/c", name="c")
    def handler():
        pass

    assert [d.name for d in declarations_of(handler)] == ["a", "b", "c"]


def test_decorator_returns_target_unchanged():
    def handler():
        return 42

    assert Route("/x")(handler) is handler
    assert handler() == 42


def test_static_and_class_methods():
    class Ctl:
        @Route("/s", name="s")
        @staticmethod
        def static():
            pass

        @Route("/c", name="c")
        @classmethod
        def klass(cls):
            pass

    assert [d.name for d in declarations_of(Ctl.__dict__["static"])] == ["s"]
    assert [d.name for d in declarations_of(Ctl.__dict__["klass"])] == ["c"]


def test_class_markers_are_per_class():
    @Route("/base")
    class Base:
        pass

    @Route("/child")
    class Child(Base):
        pass

    assert [d.path for d in declarations_of(Base)] == ["/base"]
    assert [d.path for d in declarations_of(Child)] == ["/child"]


def test_declarations_are_immutable_copies():
    paths = {"en": "/en"}
    declaration = Route(localized_paths=paths, methods=["get"])
    paths["fr"] = "/fr"
    assert declaration.localized_paths == {"en": "/en"}
    assert declaration.methods == ["GET"]
    with pytest.raises(AttributeError):
        declaration.name = "changed"


def test_route_helper_validates_arguments():
    with pytest.raises(ValidationError):
        route(123)
    with pytest.raises(ValidationError):
        route("/x", localized_paths={"en": 1})


def test_route_helper_forwards_extra_fields():
    declaration = route("/x", name="x", methods=["post"], host="example.org", priority=3)
    assert declaration.methods == ["POST"]
    assert declaration.host == "example.org"
    assert declaration.priority == 3


def test_attach_rejects_non_declarations():
    with pytest.raises(TypeError):
        attach_declaration(lambda: None, {"path": "/x"})


def test_methods_string_is_split_like_legacy_annotations():
    assert Route("/x", methods="get|POST").methods == ["GET", "POST"]
    assert Route("/x", methods="GET").methods == ["GET"]
