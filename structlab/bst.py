"""Binary search tree of integers, plus the menu loop shared by the interactive programs."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Optional

MENU = (
    "\n\nBinary tree MENU\n"
    "\n1 - Is empty?"
    "\n2 - Insert"
    "\n3 - Delete"
    "\n4 - List pre order"
    "\n5 - List in order"
    "\n6 - List post order"
    "\n7 - Search"
    "\n8 - Clear"
    "\n0 - EXIT"
)

_Action = Callable[[], object]


@dataclass
class _Node:
    data: int
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _delete(node: Optional[_Node], value: int) -> Optional[_Node]:
    if node is None:
        return None
    if value < node.data:
        node.left = _delete(node.left, value)
    elif value > node.data:
        node.right = _delete(node.right, value)
    elif node.left is None:
        return node.right
    elif node.right is None:
        return node.left
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.data = successor.data
        node.right = _delete(node.right, successor.data)
    return node


class BinarySearchTree:
    """Unbalanced binary search tree; equal values go to the left subtree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add a value, keeping duplicates."""
        new_node = _Node(value)
        if self._root is None:
            self._root = new_node
            return
        node = self._root
        while True:
            if value <= node.data:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def delete(self, value: int) -> None:
        """Remove one occurrence of a value; a missing value is ignored."""
        self._root = _delete(self._root, value)

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if node.data == value:
                return True
            node = node.left if value <= node.data else node.right  # type: ignore[operator]
        return False

    def is_empty(self) -> bool:
        return self._root is None

    def pre_order(self) -> list[int]:
        result: list[int] = []
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            result.append(node.data)
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)
        return result

    def in_order(self) -> list[int]:
        result: list[int] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.data)
            node = node.right
        return result

    def post_order(self) -> list[int]:
        reversed_result: list[int] = []
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            reversed_result.append(node.data)
            if node.left:
                stack.append(node.left)
            if node.right:
                stack.append(node.right)
        return reversed_result[::-1]

    def clear(self) -> None:
        self._root = None


def _read_int(prompt: str) -> int:
    """Ask until the answer is an integer."""
    while True:
        text = input(prompt)
        try:
            return int(text.strip())
        except ValueError:
            print("\nPlease enter an integer.")


def _read_word(prompt: str) -> str:
    """Ask until the answer holds a word, and return the first word."""
    while True:
        words = input(prompt).split()
        if words:
            return words[0]


def _spaced(values: Iterable[object], template: str = " {} ") -> str:
    return "".join(template.format(value) for value in values)


def _verdict(ok: bool, yes: str, no: str) -> None:
    print(yes if ok else no)


def _run_menu(
    argv: Optional[list[str]],
    description: str,
    menu: str,
    prompt: str,
    actions: Mapping[int, _Action],
    *,
    invalid: str = "\nInvalid option!",
    on_exit: Optional[_Action] = None,
) -> int:
    """Show the menu and run the chosen action until option 0 or end of input."""
    argparse.ArgumentParser(description=description).parse_args(argv)
    try:
        while True:
            print(menu)
            option = _read_int(prompt)
            if option == 0:
                if on_exit is not None:
                    on_exit()
                break
            action = actions.get(option)
            if action is None:
                print(invalid)
            else:
                action()
    except EOFError:
        pass
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive tree menu."""
    tree = BinarySearchTree()

    def insert() -> None:
        tree.insert(_read_int("\nInsert a value for the new node: "))
        print("\nInserted!")

    def delete() -> None:
        tree.delete(_read_int("\nInsert a value for deletion: "))
        print("\nDeleted!")

    def search() -> None:
        found = _read_int("\nInsert a value to search: ") in tree
        _verdict(found, "\nFound!", "\nNot found.")

    def clear() -> None:
        tree.clear()
        print("\nCleared!")

    actions: dict[int, _Action] = {
        1: lambda: _verdict(tree.is_empty(), "\nThe tree is empty!", "\nNot empty."),
        2: insert,
        3: delete,
        4: lambda: print(_spaced(tree.pre_order())),
        5: lambda: print(_spaced(tree.in_order())),
        6: lambda: print(_spaced(tree.post_order())),
        7: search,
        8: clear,
    }
    return _run_menu(argv, "Binary search tree menu", MENU, "\nChoose your option: ", actions)