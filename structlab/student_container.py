"""Student records held as a queue that can be turned into a stack and back."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional

MENU = (
    "\nMenu\n"
    "\n1 - Is Empty? "
    "\n2 - Insert "
    "\n3 - Display items "
    "\n4 - Transfer "
    "\n5 - Remove "
    "\n0 - EXIT\n"
)


@dataclass(frozen=True)
class Student:
    """One student record; status is 'A' for active or 'I' for inactive."""

    ra: str
    name: str
    born_at: str
    status: str

    @property
    def active(self) -> bool:
        return self.status == "A"

    def describe(self) -> str:
        return (
            f"\nName: {self.name}\nRA: {self.ra}\n"
            f"Birth Date: {self.born_at}\nActive: {self.status}"
        )


class StudentContainer:
    """Holds students either as a queue or as a stack.

    Inserting and removing follow the current mode. A transfer moves every
    record into the other mode, reversing their order.
    """

    def __init__(self) -> None:
        self._queue: deque[Student] = deque()
        self._stack: list[Student] = []

    def is_stack(self) -> bool:
        return bool(self._stack)

    def is_empty(self) -> bool:
        return not self._queue and not self._stack

    def insert(self, student: Student) -> None:
        """Push onto the stack in stack mode, otherwise append to the queue."""
        if self._stack:
            self._stack.append(student)
        else:
            self._queue.append(student)

    def remove(self) -> Student:
        """Remove from the stack top in stack mode, otherwise from the queue front."""
        if self._stack:
            return self._stack.pop()
        if self._queue:
            return self._queue.popleft()
        raise IndexError("The container is empty!")

    def transfer(self) -> None:
        """Move all records from the queue to the stack, or from the stack to the queue."""
        if self.is_empty():
            raise IndexError("The container is empty!")
        if self._stack:
            while self._stack:
                self._queue.appendleft(self._stack.pop())
        else:
            self._stack.extend(self._queue)
            self._queue.clear()

    def __iter__(self) -> Iterator[Student]:
        """Yield from the stack top downwards, or from the queue front."""
        if self._stack:
            yield from reversed(self._stack)
        else:
            yield from self._queue


def _read_int(prompt: str) -> int:
    while True:
        text = input(prompt)
        try:
            return int(text.strip())
        except ValueError:
            print("\nPlease enter an integer.")


def _read_word(prompt: str) -> str:
    while True:
        words = input(prompt).split()
        if words:
            return words[0]


def _read_student() -> Student:
    ra = _read_word("\nInsert your RA: ")
    name = _read_word("\nInsert your name: ")
    born_at = _read_word("\nInsert your birth date (YYYYmmdd): ")
    status = _read_word("\nInsert your status (A for active, I for inactive): ")[0]
    return Student(ra, name, born_at, status)


def _display(container: StudentContainer) -> None:
    if container.is_empty():
        print("\nThe container is empty!")
        return
    print("\n| TOP |" if container.is_stack() else "\n| FIRST |")
    for student in container:
        print(student.describe())


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive container menu."""
    argparse.ArgumentParser(description="Student queue and stack menu").parse_args(argv)
    container = StudentContainer()
    try:
        while True:
            print(MENU)
            option = _read_int("option: ")
            if option == 0:
                break
            if option == 1:
                print("\nTrue" if container.is_empty() else "\nFalse")
            elif option == 2:
                container.insert(_read_student())
                print("\nInserted")
            elif option == 3:
                _display(container)
            elif option in (4, 5):
                try:
                    if option == 4:
                        container.transfer()
                    else:
                        container.remove()
                except IndexError as exc:
                    print(f"\n{exc}")
                    print("\nSomething went wrong!")
                else:
                    print("\nTransfered" if option == 4 else "\nItem removed")
            else:
                print("\nInvalid value!")
    except EOFError:
        pass
    return 0