# structlab

Classic data structures written as small Python classes, each with an
interactive console menu for trying it out by hand, plus an accumulating
calculator and a 4x4 magic square checker.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## What is inside

| Module | Main names | Command |
| --- | --- | --- |
| `structlab.bst` | `BinarySearchTree` | `structlab-bst` |
| `structlab.linked_stack` | `LinkedStack` | `structlab-stack` |
| `structlab.linked_queue` | `LinkedQueue` | `structlab-queue` |
| `structlab.singly_linked_list` | `SinglyLinkedList` | `structlab-singly-list` |
| `structlab.circular_linked_list` | `CircularLinkedList` | `structlab-circular-list` |
| `structlab.doubly_linked_list` | `DoublyLinkedList` | `structlab-doubly-list` |
| `structlab.sorted_circular_list` | `SortedCircularList` | `structlab-sorted-circular-list` |
| `structlab.student_container` | `Student`, `StudentContainer` | `structlab-students` |
| `structlab.calculator` | `Calculator`, `Operation`, `add`, `subtract`, `multiply`, `divide` | `structlab-calculator` |
| `structlab.magic_square` | `validate`, `format_square`, `MagicSquareError` | `structlab-magic-square` |

## Using the classes

The binary search tree keeps duplicates (equal values go to the left) and
returns its traversals as lists:

```python
from structlab.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.insert(60)
print(tree.in_order())   # [20, 30, 40, 50, 60, 70]
print(40 in tree)        # True
tree.delete(30)          # a missing value is ignored
```

Stacks and queues raise `IndexError` when read or emptied past their end:

```python
from structlab.linked_stack import LinkedStack

stack = LinkedStack()
stack.push(1)
stack.push(2)
print(stack.top())   # 2
print(stack.pop())   # 2
print(list(stack))   # [1]
```

The lists raise `ValueError` when a value to delete, or to insert after,
is not there, and `IndexError` when deleting from an empty list:

```python
from structlab.sorted_circular_list import SortedCircularList

names = SortedCircularList()
for name in ["carol", "alice", "bob"]:
    names.insert(name)
print(list(names))   # ['alice', 'bob', 'carol']
```

The student container keeps records in a queue until `transfer()` moves
them onto a stack (in reverse order), and back again:

```python
from structlab.student_container import Student, StudentContainer

box = StudentContainer()
box.insert(Student(ra="1001", name="Ana", born_at="200101", status="A"))
box.transfer()
print(box.is_stack())   # True
```

The calculator adds the outcome of each operation to a running result;
`divide` raises `ZeroDivisionError` for a zero divisor:

```python
from structlab.calculator import Calculator, Operation

calc = Calculator()
calc.apply(Operation.ADD, 2, 3)        # 5.0
calc.apply(Operation.MULTIPLY, 2, 2)   # 9.0
calc.reset()
```

Checking a 4x4 magic square (each row, column and diagonal must sum to 34,
with no repeated numbers):

```python
from structlab.magic_square import validate, format_square

square = [
    [16, 3, 2, 13],
    [5, 10, 11, 8],
    [9, 6, 7, 12],
    [4, 15, 14, 1],
]
validate(square)            # raises MagicSquareError when invalid
print(format_square(square))
```

## Interactive menus

Each command in the table opens a numbered menu on the console, for example:

    structlab-bst
    structlab-stack
    structlab-students

Choose `0`, or end the input, to leave a menu.

`structlab-calculator` asks for two numbers and an operation, then whether
to go on and whether to keep the result.

`structlab-magic-square` asks for the sixteen numbers row by row, prints the
square when it is magic and exits with status 1 otherwise. With
`--method sorted` it looks for repeated numbers by sorting them first instead
of comparing every pair:

    structlab-magic-square --method sorted