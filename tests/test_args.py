import pytest

from cliconf.args import Args


def test_get_returns_argument_at_index():
    args = Args(["foo", "bar", "baz"])
    assert args.get(0) == "foo"
    assert args.get(2) == "baz"


@pytest.mark.parametrize("index", [3, 10, -1])
def test_get_out_of_range_is_blank(index):
    assert Args(["foo", "bar", "baz"]).get(index) == ""


def test_first_and_first_of_empty():
    assert Args(["my-arg", "-"]).first() == "my-arg"
    assert Args().first() == ""


def test_tail_drops_first_argument():
    args = Args(["my-arg", "--", "--notARealFlag"])
    assert args.tail() == ["--", "--notARealFlag"]


def test_tail_of_single_or_empty_is_empty_list():
    assert Args(["only"]).tail() == []
    assert Args().tail() == []


def test_tail_returns_independent_copy():
    args = Args(["a", "b", "c"])
    tail = args.tail()
    tail.append("x")
    assert args.tail() == ["b", "c"]


def test_present():
    assert Args(["a"]).present() is True
    assert Args().present() is False


def test_slice_is_copy_of_all_values():
    values = ["abcd", "efgh"]
    args = Args(values)
    copy = args.slice()
    assert copy == values
    copy.clear()
    values.append("later")
    assert args.slice() == ["abcd", "efgh"]


def test_len_and_iteration_agree_with_slice():
    args = Args(["x", "y"])
    assert len(args) == len(args.slice())
    assert list(args) == args.slice()