[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structlab"
version = "0.1.0"
description = "Classic data structures and small exercises with interactive menus: trees, lists, stacks, queues, a calculator and a magic square checker"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "linked list", "binary search tree", "stack", "queue", "magic square", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structlab-bst = "structlab.bst:main"
structlab-calculator = "structlab.calculator:main"
structlab-stack = "structlab.linked_stack:main"
structlab-magic-square = "structlab.magic_square:main"
structlab-queue = "structlab.linked_queue:main"
structlab-singly-list = "structlab.singly_linked_list:main"
structlab-circular-list = "structlab.circular_linked_list:main"
structlab-doubly-list = "structlab.doubly_linked_list:main"
structlab-sorted-circular-list = "structlab.sorted_circular_list:main"
structlab-students = "structlab.student_container:main"

[tool.hatch.build.targets.wheel]
packages = ["structlab"]

[tool.pytest.ini_options]
addopts = "-ra"
