import pytest

from structlab.doubly_linked_list import DoublyLinkedList, main


def _list(*values):
    items = DoublyLinkedList()
    for value in values:
        items.insert(value)
    return items


def _delete_all(items, *values):
    for value in values:
        items.delete(value)


@pytest.mark.parametrize(
    "start, change, expected",
    [
        ((), lambda items: None, []),
        ((1, 2, 3), lambda items: None, [1, 2, 3]),
        ((2, 4), lambda items: (items.insert_before(2, 1), items.insert_before(4, 3)), [1, 2, 3, 4]),
        ((1, 3), lambda items: (items.insert_after(1, 2), items.insert_after(3, 4)), [1, 2, 3, 4]),
        ((), lambda items: items.insert_before(42, 5), [5]),
        ((1, 2, 3, 4, 5), lambda items: _delete_all(items, 1, 3, 5), [2, 4]),
        ((7,), lambda items: items.delete(7), []),
        ((1, 2), lambda items: items.clear(), []),
    ],
)
def test_contents_in_both_directions(start, change, expected):
    items = _list(*start)
    change(items)
    assert list(items) == expected
    assert list(reversed(items)) == expected[::-1]
    assert items.is_empty() == (not expected)


@pytest.mark.parametrize(
    "start, call, error",
    [
        ((1,), lambda items: items.insert_before(9, 2), ValueError),
        ((1,), lambda items: items.insert_after(9, 2), ValueError),
        ((1,), lambda items: items.delete(2), ValueError),
        ((), lambda items: items.delete(1), IndexError),
    ],
)
def test_errors_leave_list_unchanged(start, call, error):
    items = _list(*start)
    with pytest.raises(error):
        call(items)
    assert list(items) == list(start)


def test_main_insert_before_and_reverse(monkeypatch, capsys):
    answers = iter(["2", "2", "2", "1", "2", "0", "5", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "REAR -> [ 2 ]  [ 1 ] <- FRONT" in out