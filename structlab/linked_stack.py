"""Stack of integers built from linked nodes, with an interactive menu."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from structlab.bst import _read_int, _run_menu, _spaced, _verdict

MENU = (
    "\nSTACK Menu\n"
    "\n1 - Is Empty?"
    "\n2 - Push"
    "\n3 - Pop"
    "\n4 - Show Top"
    "\n5 - Display elements"
    "\n6 - Clear stack"
    "\n\n0 - EXIT\n"
)


@dataclass
class _Node:
    data: int
    next: Optional["_Node"] = None


class LinkedStack:
    """Last-in, first-out stack."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, value: int) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._top is None:
            raise IndexError("Stack is already empty!")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def top(self) -> int:
        if self._top is None:
            raise IndexError("Stack is empty!")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None

    def clear(self) -> None:
        self._top = None
        self._size = 0

    def __iter__(self) -> Iterator[int]:
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive stack menu."""
    stack = LinkedStack()

    def push() -> None:
        stack.push(_read_int("\nInsert a integer value to push: "))
        print("\nPushed")

    def pop() -> None:
        try:
            stack.pop()
        except IndexError as exc:
            print(exc)
            print("\nFailed")
        else:
            print("\nPopped")

    def show_top() -> None:
        try:
            print(f"\n top -> [{stack.top()}]")
        except IndexError as exc:
            print(exc)

    def display() -> None:
        if stack.is_empty():
            print("Stack is empty!")
        else:
            print("\n top -> " + _spaced(stack, "[{}]"))

    actions = {
        1: lambda: _verdict(stack.is_empty(), "\nTrue", "\nFalse"),
        2: push,
        3: pop,
        4: show_top,
        5: display,
        6: stack.clear,
    }
    return _run_menu(
        argv,
        "Linked stack menu",
        MENU,
        "option: ",
        actions,
        invalid="\nInvalid value!",
        on_exit=stack.clear,
    )