"""Doubly linked list of integers, with an interactive menu."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from structlab.bst import _read_int, _run_menu, _spaced, _verdict
from structlab.linked_queue import _chain

MENU = (
    "\n\nDoubly linked list MENU\n"
    "\n1 - Is empty?"
    "\n2 - Insert"
    "\n3 - Delete"
    "\n4 - List items in order"
    "\n5 - List items in reverse order"
    "\n6 - Clear items"
    "\n0 - EXIT"
)


@dataclass(eq=False)
class _Node:
    data: int
    previous: Optional["_Node"] = None
    next: Optional["_Node"] = None


class DoublyLinkedList:
    """List walkable in both directions; inserting into an empty list ignores position."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None

    def _start(self, value: int) -> bool:
        if self._front is not None:
            return False
        self._front = self._rear = _Node(value)
        return True

    def _locate(self, value: int) -> _Node:
        node = self._front
        while node is not None:
            if node.data == value:
                return node
            node = node.next
        raise ValueError(f"{value!r} is not in the list")

    def insert(self, value: int) -> None:
        """Append a value at the rear."""
        if not self._start(value):
            assert self._rear is not None
            self._insert_after_node(self._rear, value)

    def _insert_after_node(self, anchor: _Node, value: int) -> None:
        node = _Node(value, anchor, anchor.next)
        if anchor.next is None:
            self._rear = node
        else:
            anchor.next.previous = node
        anchor.next = node

    def insert_before(self, reference: int, value: int) -> None:
        if self._start(value):
            return
        anchor = self._locate(reference)
        node = _Node(value, anchor.previous, anchor)
        if anchor.previous is None:
            self._front = node
        else:
            anchor.previous.next = node
        anchor.previous = node

    def insert_after(self, reference: int, value: int) -> None:
        if self._start(value):
            return
        self._insert_after_node(self._locate(reference), value)

    def delete(self, value: int) -> None:
        """Remove the first node holding value."""
        if self._front is None:
            raise IndexError("The list is empty!")
        node = self._locate(value)
        if node.previous is None:
            self._front = node.next
        else:
            node.previous.next = node.next
        if node.next is None:
            self._rear = node.previous
        else:
            node.next.previous = node.previous

    def is_empty(self) -> bool:
        return self._front is None

    def clear(self) -> None:
        self._front = self._rear = None

    def __iter__(self) -> Iterator[int]:
        yield from _chain(self._front)

    def __reversed__(self) -> Iterator[int]:
        yield from _chain(self._rear, "previous")


def _display(items: DoublyLinkedList, reverse: bool = False) -> None:
    if reverse:
        print("\nREAR ->" + _spaced(reversed(items), " [ {} ] ") + "<- FRONT")
    else:
        print("\nFRONT ->" + _spaced(items, " [ {} ] ") + "<- REAR")


def _insert(items: DoublyLinkedList) -> bool:
    value = _read_int("\nInsert a value: ")
    if items.is_empty():
        items.insert(value)
        return True
    print("\nChoose an element: ")
    _display(items)
    reference = _read_int("")
    if reference not in items:
        print("\nInvalid option!")
        return False
    side = _read_int("\nInsert 0 to insert before or 1 to insert after: ")
    if side == 0:
        items.insert_before(reference, value)
    elif side == 1:
        items.insert_after(reference, value)
    else:
        print("\nInvalid option!")
        return False
    return True


def _delete(items: DoublyLinkedList) -> bool:
    if items.is_empty():
        return False
    try:
        items.delete(_read_int("\nInsert the node you want to delete: "))
    except ValueError:
        print("\nInvalid option!")
        return False
    return True


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive doubly linked list menu."""
    items = DoublyLinkedList()
    failed = "\nSomething went wrong!"

    def clear() -> None:
        items.clear()
        print("\nCleared!")

    actions = {
        1: lambda: _verdict(items.is_empty(), "\nThe list is empty!", "\nThe list is not empty!"),
        2: lambda: _verdict(_insert(items), "\nValue inserted!", failed),
        3: lambda: _verdict(_delete(items), "\nValue deleted!", failed),
        4: lambda: _display(items),
        5: lambda: _display(items, reverse=True),
        6: clear,
    }
    return _run_menu(
        argv, "Doubly linked list menu", MENU, "\nChoose your option: ", actions, on_exit=items.clear
    )