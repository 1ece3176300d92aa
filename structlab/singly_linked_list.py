"""Singly linked list of RA strings, with an interactive menu."""

from __future__ import annotations

from collections.abc import Callable
from typing import Iterator, Optional, Protocol

from structlab.bst import _read_int, _read_word, _run_menu, _spaced, _verdict
from structlab.linked_queue import _chain, _Node

MENU = (
    "\nSingly linked list MENU\n"
    "\n1 - is empty?"
    "\n2 - insert"
    "\n3 - delete"
    "\n4 - list items"
    "\n5 - clear list"
    "\n0 - EXIT"
)

INSERT_MENU = (
    "\nDo you want to:"
    "\n1 - Insert first"
    "\n2 - Insert last"
    "\n3 - Insert after"
)


class _Listing(Protocol):
    def __iter__(self) -> Iterator[str]: ...
    def is_empty(self) -> bool: ...
    def delete(self, value: str) -> None: ...


class _EditableList(_Listing, Protocol):
    def insert_first(self, value: str) -> None: ...
    def insert_last(self, value: str) -> None: ...
    def insert_after(self, reference: str, value: str) -> None: ...


class SinglyLinkedList:
    """List with front and rear references; inserting into an empty list ignores position."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None

    def _start(self, value: str) -> bool:
        if self._front is not None:
            return False
        self._front = self._rear = _Node(value)
        return True

    def insert_first(self, value: str) -> None:
        if not self._start(value):
            self._front = _Node(value, self._front)

    def insert_last(self, value: str) -> None:
        if not self._start(value):
            assert self._rear is not None
            self._rear.next = _Node(value)
            self._rear = self._rear.next

    def insert_after(self, reference: str, value: str) -> None:
        """Insert after the first node holding reference; raise ValueError if absent."""
        if self._start(value):
            return
        node = self._front
        while node is not None and node.data != reference:
            node = node.next
        if node is None:
            raise ValueError(f"{reference!r} is not in the list")
        node.next = _Node(value, node.next)
        if node is self._rear:
            self._rear = node.next

    def delete(self, value: str) -> None:
        """Remove the first node holding value."""
        if self._front is None:
            raise IndexError("The list is already empty!")
        previous: Optional[_Node] = None
        node: Optional[_Node] = self._front
        while node is not None and node.data != value:
            previous, node = node, node.next
        if node is None:
            raise ValueError(f"{value!r} is not in the list")
        if previous is None:
            self._front = node.next
        else:
            previous.next = node.next
        if node is self._rear:
            self._rear = previous

    def is_empty(self) -> bool:
        return self._front is None

    def clear(self) -> None:
        self._front = self._rear = None

    def __iter__(self) -> Iterator[str]:
        yield from _chain(self._front)


def _display_with(items: _Listing, head: str, tail: str) -> None:
    if items.is_empty():
        print("\nThe list is empty!")
    else:
        print(head + _spaced(items) + tail)


def _display(items: _Listing) -> None:
    _display_with(items, "\nFront -> ", " <- Rear")


def _insert(items: _EditableList, display: Callable[[_Listing], None]) -> bool:
    """Ask for a value and a position, insert it, and tell whether that worked."""
    value = _read_word("\nInsert your RA: ")
    if items.is_empty():
        items.insert_last(value)
        return True
    print(INSERT_MENU)
    option = _read_int("\n\noption: ")
    if option == 1:
        items.insert_first(value)
    elif option == 2:
        items.insert_last(value)
    elif option == 3:
        display(items)
        reference = _read_word("\nInsert the ra you want to insert after: ")
        try:
            items.insert_after(reference, value)
        except ValueError:
            print("\nInvalid option!")
            return False
    else:
        print("\nInvalid option!")
        return False
    return True


def _delete(items: _Listing, display: Callable[[_Listing], None], label: str = "ra") -> bool:
    """Ask for a value, delete it, and tell whether that worked."""
    if items.is_empty():
        print("\nThe list is already empty!")
        return False
    display(items)
    try:
        items.delete(_read_word(f"\nInsert the {label} you want to delete: "))
    except ValueError:
        print("\nInvalid option!")
        return False
    return True


def _list_actions(
    items: _Listing,
    display: Callable[[_Listing], None],
    clear: Callable[[], bool],
    insert: Callable[[], bool],
    label: str = "ra",
) -> dict[int, Callable[[], None]]:
    failed = "\nSomething went wrong!"
    return {
        1: lambda: _verdict(items.is_empty(), "\nTrue!", "\nFalse!"),
        2: lambda: _verdict(insert(), "\nInserted!", failed),
        3: lambda: _verdict(_delete(items, display, label), "\nDeleted!", failed),
        4: lambda: display(items),
        5: lambda: _verdict(clear(), "\nCleared!", failed),
    }


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive list menu."""
    items = SinglyLinkedList()

    def clear() -> bool:
        items.clear()
        return True

    actions = _list_actions(items, _display, clear, lambda: _insert(items, _display))
    return _run_menu(argv, "Singly linked list menu", MENU, "\n\noption: ", actions, on_exit=items.clear)