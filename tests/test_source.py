from datetime import timedelta

import pytest

from cliconf.source import InputSource

METHODS = {
    "source",
    "int",
    "duration",
    "float",
    "string",
    "string_slice",
    "int_slice",
    "generic",
    "bool",
    "is_set",
}


def _stub(self, *args):
    return None


def _complete_body():
    return {
        "source": lambda self: "fixed",
        "int": lambda self, name: len(name),
        "duration": lambda self, name: timedelta(seconds=len(name)),
        "float": lambda self, name: float(len(name)),
        "string": lambda self, name: name,
        "string_slice": lambda self, name: [name],
        "int_slice": lambda self, name: [len(name)],
        "generic": lambda self, name: None,
        "bool": lambda self, name: bool(name),
        "is_set": lambda self, name: name == "set",
    }


def test_interface_cannot_be_instantiated():
    with pytest.raises(TypeError):
        InputSource()


def test_abstract_methods_are_the_whole_interface():
    with pytest.raises(TypeError) as exc:
        InputSource()
    message = str(exc.value)
    for name in METHODS:
        assert name in message
    assert InputSource.__abstractmethods__ == frozenset(METHODS)


@pytest.mark.parametrize("missing", sorted(METHODS))
def test_subclass_missing_any_method_is_abstract(missing):
    body = {name: _stub for name in METHODS if name != missing}
    partial = type(InputSource)("Partial", (InputSource,), body)
    assert partial.__abstractmethods__ == frozenset({missing})
    with pytest.raises(TypeError) as exc:
        partial()
    assert missing in str(exc.value)

    # A registered virtual subclass is not checked for completeness.
    virtual = type("Virtual", (), body)
    registered = InputSource.register(virtual)
    assert registered is virtual
    assert issubclass(virtual, InputSource)
    assert isinstance(virtual(), InputSource)


def test_complete_subclass_is_an_input_source():
    fixed = type(InputSource)("Fixed", (InputSource,), _complete_body())
    assert fixed.__abstractmethods__ == frozenset()

    # Registering a real subclass is accepted and returns the class itself.
    assert InputSource.register(fixed) is fixed
    assert issubclass(fixed, InputSource)

    src = fixed()
    assert isinstance(src, InputSource)
    assert src.source() == "fixed"
    assert src.is_set("set") is True
    assert src.is_set("other") is False
    assert src.string("abc") == "abc"
    assert src.duration("abcd") == timedelta(seconds=4)
    assert src.int_slice("ab") == [2]


def test_registered_duck_type_is_an_input_source():
    duck = type("Duck", (), _complete_body())
    assert not issubclass(duck, InputSource)

    InputSource.register(duck)
    src = duck()
    assert isinstance(src, InputSource)
    assert src.source() == "fixed"
    assert src.int("abc") == 3
    assert src.float("ab") == 2.0
    assert src.string_slice("x") == ["x"]
    assert src.bool("") is False