import copy
import pickle
import pytest
from relaisdev.options import Options, default_options
from relaisdev.exceptions import (
    FixedOptionsError,
    OptionsError,
    UnknownOptionError,
)


def test_options_get_good():
    opts = Options({"a": 1}, b="two")
    assert opts.a == 1
    assert opts.b == "two"
    assert opts["a"] == 1


def test_options_get_unknown():
    opts = Options(overwrite_data=True)
    with pytest.raises(UnknownOptionError):
        opts.overwrite_date
    with pytest.raises(UnknownOptionError):
        opts["overwrite_date"]


def test_options_unknown_is_attribute_error():
    opts = Options(a=1)
    assert not hasattr(opts, "b")
    assert getattr(opts, "b", "default") == "default"


def test_options_set_existing():
    opts = Options(a=1)
    opts.a = 2
    assert opts.a == 2
    opts["a"] = 3
    assert opts.a == 3


def test_options_setattr_new():
    opts = Options(a=1)
    with pytest.raises(FixedOptionsError):
        opts.b = 2
    with pytest.raises(FixedOptionsError):
        opts["b"] = 2
    assert len(opts) == 1
    assert "b" not in opts


def test_options_cant_add_is_type_error():
    opts = Options(a=1)
    with pytest.raises(TypeError):
        setattr(opts, "b", 2)


def test_options_delete():
    opts = Options(a=1)
    with pytest.raises(FixedOptionsError):
        del opts.a
    with pytest.raises(FixedOptionsError):
        del opts["a"]
    assert opts.a == 1


def test_options_update():
    opts = Options(a=1, b=2, c=3)
    result = opts.update({"a": 10}, c=30)
    assert result is opts
    assert opts.as_dict() == {"a": 10, "b": 2, "c": 30}


def test_options_update_unknown_applies_nothing():
    opts = Options(a=1, b=2)
    with pytest.raises(UnknownOptionError) as excinfo:
        opts.update(a=10, z=26)
    assert "z" in str(excinfo.value)
    assert opts.as_dict() == {"a": 1, "b": 2}


def test_options_update_chaining():
    opts = default_options(width=60, message="foo").update(width=40)
    assert opts == Options(width=40, message="foo")


@pytest.mark.parametrize(
    "left,right,equal",
    [
        (Options(a=1, b=2), Options(a=1, b=2), True),
        (Options(a=1), Options(a=1, b=2), False),
        (Options(a=1), Options(a=2), False),
        (Options(a=1), "not a record", False),
        (Options(a=1), {"a": 1}, False),
    ],
)
def test_options_eq(left, right, equal):
    assert (left == right) is equal
    assert (left != right) is not equal


def test_options_unhashable():
    with pytest.raises(TypeError):
        hash(Options(a=1))


def test_options_repr():
    assert repr(Options(a=1, b="x")) == "Options(a=1, b='x')"


def test_options_iter_and_len():
    opts = Options(b=1, a=2)
    assert list(opts) == ["b", "a"]
    assert len(opts) == 2


def test_options_method_name_collision():
    opts = Options(update=True)
    assert opts["update"] is True
    assert callable(opts.update)


def test_options_bad_names():
    with pytest.raises(TypeError):
        Options({1: "one"})
    with pytest.raises(OptionsError):
        Options(_private=1)


def test_options_copy_is_independent():
    opts = Options(a=1)
    dup = opts.copy()
    dup.a = 2
    assert opts.a == 1
    assert dup == Options(a=2)
    assert copy.copy(opts) == opts


def test_options_pickle():
    opts = Options(a=1, b=[1, 2])
    assert pickle.loads(pickle.dumps(opts)) == opts


def test_options_update_from_options():
    opts = Options(a=1, b=2)
    assert opts.update(Options(a=5)) is opts
    assert opts == Options(a=5, b=2)
    with pytest.raises(UnknownOptionError):
        opts.update(Options(z=1))


def test_options_from_options():
    base = Options(a=1, b=2)
    derived = Options(base, c=3)
    assert derived.as_dict() == {"a": 1, "b": 2, "c": 3}
    assert dict(base) == {"a": 1, "b": 2}
    assert list(base.keys()) == ["a", "b"]
