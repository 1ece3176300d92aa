import io

import pytest

from structlab.bst import BinarySearchTree, main

VALUES = [50, 30, 70, 20, 40, 60, 80]


@pytest.fixture
def tree():
    return BinarySearchTree(VALUES)


def test_new_tree_is_empty():
    assert BinarySearchTree().is_empty() is True


def test_insert_makes_tree_not_empty():
    tree = BinarySearchTree()
    tree.insert(3)
    assert tree.is_empty() is False


def test_in_order_is_sorted(tree):
    assert tree.in_order() == sorted(VALUES)


def test_pre_order_starts_with_root(tree):
    assert tree.pre_order() == [50, 30, 20, 40, 70, 60, 80]


def test_post_order_ends_with_root(tree):
    post = tree.post_order()
    assert post[-1] == VALUES[0]
    assert sorted(post) == sorted(VALUES)


def test_contains(tree):
    assert all(value in tree for value in VALUES)
    assert 55 not in tree


def test_duplicates_are_kept_and_deleted_one_at_a_time():
    tree = BinarySearchTree([5, 5])
    assert tree.in_order() == [5, 5]
    tree.delete(5)
    assert tree.in_order() == [5]


@pytest.mark.parametrize("value", [20, 30, 50, 80])
def test_delete_removes_value(tree, value):
    tree.delete(value)
    assert value not in tree
    expected = sorted(VALUES)
    expected.remove(value)
    assert tree.in_order() == expected


def test_delete_root_with_two_children_uses_successor(tree):
    tree.delete(50)
    assert tree.pre_order()[0] == 60


def test_delete_node_with_one_child():
    tree = BinarySearchTree([10, 5, 3])
    tree.delete(5)
    assert tree.in_order() == [3, 10]
    assert 3 in tree


def test_delete_missing_value_keeps_tree(tree):
    tree.delete(999)
    assert tree.in_order() == sorted(VALUES)


def test_delete_from_empty_tree():
    tree = BinarySearchTree()
    tree.delete(1)
    assert tree.is_empty()


def test_clear(tree):
    tree.clear()
    assert tree.is_empty()
    assert tree.in_order() == []


def test_large_sorted_input_does_not_overflow():
    values = list(range(3000))
    tree = BinarySearchTree(values)
    assert tree.in_order() == values
    assert tree.post_order()[-1] == values[0]


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n10\n2\n5\n5\n7\n5\n7\n42\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert " 5  10 " in out
    assert "Found!" in out
    assert "Not found." in out