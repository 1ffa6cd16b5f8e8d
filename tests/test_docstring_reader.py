"""Parsing of legacy ``@Route(...)`` docstring annotations."""

import pytest

from routepath import AnnotationSyntaxError, DocstringAnnotationReader, Route


@pytest.fixture
def reader():
    return DocstringAnnotationReader()


def test_positional_path_and_name(reader):
    (route,) = reader.parse('@Route("/blog/{slug}", name="blog_show")')
    assert route == Route("/blog/{slug}", name="blog_show")


def test_multiline_annotation_with_mapping(reader):
    doc = """Show the about page.

    @Route(
        path={"en": "/about", "fr": "/a-propos"},
        name="about",
    )
    """
    (route,) = reader.parse(doc)
    assert route.path == {"en": "/about", "fr": "/a-propos"}
    assert route.name == "about"


def test_several_annotations_keep_order(reader):
    doc = '@Route("/a", name="a")\n@Route(localized_paths={"en": "/b"})'
    routes = reader.parse(doc)
    assert [r.path for r in routes] == ["/a", None]
    assert routes[1].localized_paths == {"en": "/b"}


def test_parentheses_inside_strings(reader):
    (route,) = reader.parse('@Route("/x/{id(\\\\d+)}", requirements={"id": "\\\\d+)"})')
    assert route.path == "/x/{id(\\d+)}"
    assert route.requirements == {"id": "\\d+)"}


def test_other_tags_and_emails_are_ignored(reader):
    doc = "Contact admin@Route(x) or see @param foo.\n@deprecated"
    assert reader.parse(doc) == []


def test_qualified_tag(reader):
    (route,) = reader.parse('@routepath.Route("/q")')
    assert route.path == "/q"


def test_custom_tag():
    reader = DocstringAnnotationReader(tag="Path")
    assert [r.path for r in reader.parse('@Route("/a")\n@Path("/b")')] == ["/b"]


def test_methods_string_is_split(reader):
    (route,) = reader.parse('@Route("/a", methods="get|POST")')
    assert route.methods == ["GET", "POST"]


def test_empty_docstring(reader):
    assert reader.parse(None) == []
    assert reader.parse("") == []


@pytest.mark.parametrize(
    "doc",
    [
        '@Route("/a"',
        '@Route("/a" name="x")',
        "@Route(path=compute())",
        '@Route("/a", "/b")',
        '@Route("/a", path="/b")',
        '@Route("/a", unknown=1)',
        "@Route(name=3)",
        "@Route(**opts)",
        '@Route(path={[1]: "/a"}, name="page")',
        "@Route(path={[1], [2]})",
    ],
)
def test_malformed_annotations_raise(reader, doc):
    with pytest.raises(AnnotationSyntaxError):
        reader.parse(doc)


def test_class_annotations_are_not_inherited(reader):
    class Parent:
        """@Route("/parent")"""

    class Child(Parent):
        pass

    assert [r.path for r in reader.get_class_annotations(Parent)] == ["/parent"]
    assert reader.get_class_annotations(Child) == []
    assert reader.get_class_annotation(Parent, "routepath.core.declarations.Route").path == "/parent"
