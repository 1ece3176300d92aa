"""Accumulating four-function calculator."""

from __future__ import annotations

import argparse
from enum import IntEnum
from typing import Callable, Optional


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(dividend: float, divisor: float) -> float:
    """Divide, raising ZeroDivisionError for a zero divisor."""
    if divisor == 0:
        raise ZeroDivisionError("Cannot divide by 0!")
    return dividend / divisor


class Operation(IntEnum):
    """Operations in menu order."""

    ADD = 1
    SUBTRACT = 2
    MULTIPLY = 3
    DIVIDE = 4

    @property
    def noun(self) -> str:
        return _NOUNS[self]

    def compute(self, a: float, b: float) -> float:
        return _FUNCTIONS[self](a, b)


_NOUNS = {
    Operation.ADD: "sum",
    Operation.SUBTRACT: "subtraction",
    Operation.MULTIPLY: "multiplication",
    Operation.DIVIDE: "division",
}

_FUNCTIONS: dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.DIVIDE: divide,
}


class Calculator:
    """Keeps a running result that each operation adds to."""

    def __init__(self) -> None:
        self.result = 0.0

    def apply(self, operation: Operation | int, a: float, b: float) -> float:
        """Add the outcome of an operation to the result and return it."""
        self.result += Operation(operation).compute(a, b)
        return self.result

    def reset(self) -> None:
        self.result = 0.0


def _read(prompt: str, convert: Callable[[str], float]) -> float:
    while True:
        text = input(prompt)
        try:
            return convert(text.strip())
        except ValueError:
            print("Please enter a number.")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive calculator."""
    argparse.ArgumentParser(description="Accumulating calculator").parse_args(argv)
    calculator = Calculator()
    try:
        while True:
            a = _read("\nInsert the first (float) number: ", float)
            b = _read("Insert the second (float) number: ", float)
            print("\nChoose your operation: \n1 - [ + ]\n2 - [ - ]\n3 - [ * ]\n4 - [ / ]")
            choice = int(_read("", int))
            try:
                operation = Operation(choice)
            except ValueError:
                print("Invalid option! Please choose one between 1 ~ 4!")
            else:
                try:
                    calculator.apply(operation, a, b)
                except ZeroDivisionError as exc:
                    print(exc)
                print(f"The result of your {operation.noun} is: {calculator.result:.2f}")
            if _read("\nDo you want to continue? \n1 - Yes\nAny other number - No\n", int) != 1:
                break
            keep = _read(
                "\n Do you want to keep your result for the next iteration? "
                "\n1 - Yes\nAny other number - No\n",
                int,
            )
            if keep != 1:
                calculator.reset()
    except EOFError:
        pass
    return 0