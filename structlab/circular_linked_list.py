"""Circular singly linked list of RA strings, with an interactive menu."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from structlab.bst import _run_menu
from structlab.singly_linked_list import _display_with, _insert, _list_actions, _Listing

MENU = (
    "\nCircular linked list MENU\n"
    "\n1 - is empty?"
    "\n2 - insert"
    "\n3 - delete"
    "\n4 - list items"
    "\n5 - clear list"
    "\n0 - EXIT"
)


@dataclass(eq=False)
class _Node:
    data: str
    next: "_Node" = field(init=False)

    def __post_init__(self) -> None:
        self.next = self


class _Ring:
    """Ring of nodes reached through the rear, whose successor is the front."""

    def __init__(self) -> None:
        self._rear: Optional[_Node] = None

    def _pairs(self) -> Iterator[tuple[_Node, _Node]]:
        """Yield (previous, node) from front to rear."""
        if self._rear is None:
            return
        previous = self._rear
        while True:
            node = previous.next
            yield previous, node
            if node is self._rear:
                return
            previous = node

    def _link_after(self, anchor: Optional[_Node], value: str) -> _Node:
        node = _Node(value)
        if anchor is None:
            self._rear = node
        else:
            node.next = anchor.next
            anchor.next = node
        return node

    def delete(self, value: str) -> None:
        """Remove the first node holding value."""
        if self._rear is None:
            raise IndexError("The list is already empty!")
        found = next(
            ((previous, node) for previous, node in self._pairs() if node.data == value),
            None,
        )
        if found is None:
            raise ValueError(f"{value!r} is not in the list")
        previous, node = found
        if node.next is node:
            self._rear = None
            return
        previous.next = node.next
        if node is self._rear:
            self._rear = previous

    def is_empty(self) -> bool:
        return self._rear is None

    def clear(self) -> None:
        if self._rear is None:
            raise IndexError("The list is already empty!")
        self._rear = None

    def __iter__(self) -> Iterator[str]:
        for _, node in self._pairs():
            yield node.data


class CircularLinkedList(_Ring):
    """Ring of nodes; the rear node links back to the front."""

    def __init__(self) -> None:
        super().__init__()

    def insert_first(self, value: str) -> None:
        self._link_after(self._rear, value)

    def insert_last(self, value: str) -> None:
        self._rear = self._link_after(self._rear, value)

    def insert_after(self, reference: str, value: str) -> None:
        """Insert after the first node holding reference; raise ValueError if absent."""
        if self._rear is None:
            self._link_after(None, value)
            return
        anchor = next((node for _, node in self._pairs() if node.data == reference), None)
        if anchor is None:
            raise ValueError(f"{reference!r} is not in the list")
        node = self._link_after(anchor, value)
        if anchor is self._rear:
            self._rear = node

    def delete(self, value: str) -> None:
        """Remove the first node holding value."""
        super().delete(value)

    def is_empty(self) -> bool:
        return super().is_empty()

    def clear(self) -> None:
        """Empty the list; raise IndexError if it is already empty."""
        super().clear()

    def __iter__(self) -> Iterator[str]:
        return super().__iter__()


def _display(items: _Listing) -> None:
    _display_with(items, "\n FRONT -> ", " <- REAR ")


def _strict_clear(items: _Ring) -> bool:
    """Clear the ring, reporting an already empty one as a failure."""
    try:
        items.clear()
    except IndexError as exc:
        print(f"\n{exc}")
        return False
    return True


def _clear_if_any(items: _Ring) -> None:
    if not items.is_empty():
        items.clear()


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive circular list menu."""
    items = CircularLinkedList()
    actions = _list_actions(
        items, _display, lambda: _strict_clear(items), lambda: _insert(items, _display)
    )
    return _run_menu(
        argv,
        "Circular linked list menu",
        MENU,
        "\n\noption: ",
        actions,
        on_exit=lambda: _clear_if_any(items),
    )