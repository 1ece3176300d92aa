"""Queue of integers built from linked nodes, with an interactive menu."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from structlab.bst import _read_int, _run_menu, _spaced, _verdict

MENU = (
    "\nQUEUE Menu\n"
    "\n1 - Is Empty?"
    "\n2 - Enqueue"
    "\n3 - Dequeue"
    "\n4 - Show FRONT"
    "\n5 - Show REAR"
    "\n6 - Display elements"
    "\n7 - Clear queue"
    "\n\n0 - EXIT\n"
)


@dataclass(eq=False)
class _Node:
    data: Any
    next: Optional["_Node"] = None


def _chain(node: Any, link: str = "next") -> Iterator[Any]:
    """Yield the data of each node reached by following ``link`` from ``node``."""
    while node is not None:
        yield node.data
        node = getattr(node, link)


def _peek(node: Optional[_Node]) -> int:
    if node is None:
        raise IndexError("The queue is empty!")
    return node.data


class LinkedQueue:
    """First-in, first-out queue."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._size = 0

    def enqueue(self, value: int) -> None:
        node = _Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the front value."""
        if self._front is None:
            raise IndexError("The queue is already empty!")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def front(self) -> int:
        return _peek(self._front)

    def rear(self) -> int:
        return _peek(self._rear)

    def is_empty(self) -> bool:
        return self._front is None

    def clear(self) -> None:
        self._front = self._rear = None
        self._size = 0

    def __iter__(self) -> Iterator[int]:
        yield from _chain(self._front)

    def __len__(self) -> int:
        return self._size


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive queue menu."""
    queue = LinkedQueue()

    def dequeue() -> None:
        try:
            queue.dequeue()
        except IndexError as exc:
            print(f"\n{exc}")
            print("\nFailed")
        else:
            print("\nDequeued")

    def show(getter: Callable[[], int], template: str) -> None:
        try:
            print(template.format(getter()))
        except IndexError as exc:
            print(f"\n{exc}")

    actions = {
        1: lambda: _verdict(queue.is_empty(), "\nTrue", "\nFalse"),
        2: lambda: queue.enqueue(_read_int("Insert the value to be enqueued: ")),
        3: dequeue,
        4: lambda: show(queue.front, "\n front ->[{}]"),
        5: lambda: show(queue.rear, "\n[{}]<- rear "),
        6: lambda: print("\n front ->" + _spaced(queue, " [{}] ") + "<- rear "),
        7: queue.clear,
    }
    return _run_menu(argv, "Linked queue menu", MENU, "option: ", actions, on_exit=queue.clear)