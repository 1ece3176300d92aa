"""Circular linked list of names kept in sorted order, with an interactive menu."""

from __future__ import annotations

from typing import Iterator, Optional

from structlab.bst import _read_word, _run_menu
from structlab.circular_linked_list import _clear_if_any, _display, _Ring, _strict_clear
from structlab.singly_linked_list import _list_actions

MENU = (
    "\nSorted circular linked list MENU\n"
    "\n1 - is empty?"
    "\n2 - insert"
    "\n3 - delete"
    "\n4 - list items"
    "\n5 - clear list"
    "\n0 - EXIT"
)


class SortedCircularList(_Ring):
    """Ring of names in ascending order; a new name goes before any equal one."""

    def __init__(self) -> None:
        super().__init__()

    def insert(self, name: str) -> None:
        """Add a name at its sorted position."""
        anchor = next((previous for previous, node in self._pairs() if name <= node.data), None)
        if anchor is None:
            self._rear = self._link_after(self._rear, name)
        else:
            self._link_after(anchor, name)

    def delete(self, name: str) -> None:
        """Remove the first node holding name."""
        super().delete(name)

    def is_empty(self) -> bool:
        return super().is_empty()

    def clear(self) -> None:
        """Empty the list; raise IndexError if it is already empty."""
        super().clear()

    def __iter__(self) -> Iterator[str]:
        return super().__iter__()


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive sorted list menu."""
    items = SortedCircularList()

    def insert() -> bool:
        items.insert(_read_word("\nInsert your name: "))
        return True

    actions = _list_actions(items, _display, lambda: _strict_clear(items), insert, label="name")
    return _run_menu(
        argv,
        "Sorted circular linked list menu",
        MENU,
        "\n\noption: ",
        actions,
        on_exit=lambda: _clear_if_any(items),
    )