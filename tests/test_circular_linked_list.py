import pytest

from structlab.circular_linked_list import CircularLinkedList, main


def ring(values):
    result = CircularLinkedList()
    for value in values:
        result.insert_last(value)
    return result


def _insert_both_ends(r):
    r.insert_after("a", "b")
    r.insert_after("c", "d")
    r.insert_last("e")


def _delete_front_then_prepend(r):
    r.delete("a")
    r.insert_first("z")


def _delete_rear_then_append(r):
    r.delete("c")
    r.insert_last("d")


@pytest.mark.parametrize(
    ("values", "edit", "expected"),
    [
        ("", None, ""),
        ("abc", None, "abc"),
        ("bc", lambda r: r.insert_first("a"), "abc"),
        ("ac", _insert_both_ends, "abcde"),
        ("abc", lambda r: r.delete("a"), "bc"),
        ("abc", _delete_front_then_prepend, "zbc"),
        ("abc", _delete_rear_then_append, "abd"),
        ("a", lambda r: r.delete("a"), ""),
        ("ab", lambda r: r.clear(), ""),
    ],
)
def test_ring_contents(values, edit, expected):
    target = ring(values)
    if edit is not None:
        edit(target)
    assert "".join(target) == expected
    assert target.is_empty() is (expected == "")


@pytest.mark.parametrize(
    ("values", "edit", "error"),
    [
        ("", lambda r: r.delete("a"), IndexError),
        ("ab", lambda r: r.delete("c"), ValueError),
        ("ab", lambda r: r.insert_after("x", "y"), ValueError),
        ("", lambda r: r.clear(), IndexError),
    ],
)
def test_failed_edits_raise_and_keep_ring(values, edit, error):
    target = ring(values)
    with pytest.raises(error):
        edit(target)
    assert "".join(target) == values