"""Controller class and method lookup."""

from routepath.core.locator import ClassLocator, find_method, is_invokable

MODULE = __name__


class Outer:
    class Inner:
        def go(self):
            pass

    label = "not callable"

    @staticmethod
    def helper():
        pass


class Callable_:
    def __call__(self):
        pass


class SubCallable(Callable_):
    pass


def test_locate_by_import():
    locator = ClassLocator()
    assert locator.locate(f"{MODULE}.Outer") is Outer
    assert locator.locate(f"{MODULE}.Outer.Inner") is Outer.Inner
    assert locator.locate("collections.OrderedDict").__name__ == "OrderedDict"


def test_locate_rejects_non_classes_and_unknowns():
    locator = ClassLocator()
    assert locator.locate(f"{MODULE}.MODULE") is None
    assert locator.locate(f"{MODULE}.Nope") is None
    assert locator.locate("definitely_missing_pkg.Thing") is None
    assert locator.locate("Outer") is None
    assert locator.locate("") is None


def test_registry_first():
    locator = ClassLocator({"App\\Outer": Outer})
    locator.register(Callable_, "App\\Callable")
    assert locator.locate("App\\Outer") is Outer
    assert locator.locate("App\\Callable") is Callable_
    assert locator.register(SubCallable) is SubCallable
    assert locator.locate(f"{MODULE}.SubCallable") is SubCallable


def test_find_method():
    assert find_method(Outer.Inner, "go") is Outer.Inner.__dict__["go"]
    assert find_method(Outer, "helper") is Outer.__dict__["helper"].__func__
    assert find_method(Outer, "label") is None
    assert find_method(Outer, "missing") is None
    assert find_method(Outer, "") is None


def test_invokable_detection():
    assert is_invokable(Callable_)
    assert is_invokable(SubCallable)
    assert not is_invokable(Outer)
    assert find_method(Outer, "__call__") is None


def test_module_failing_at_import_is_not_found():
    locator = ClassLocator()
    assert locator.locate("broken_controllers.Ctl") is None


def test_module_attribute_hook_failure_is_not_found():
    locator = ClassLocator()
    assert locator.locate("lazy_controllers.Ctl") is None
