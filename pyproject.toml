[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strukture"
version = "0.1.0"
description = "Classic data structures and algorithms: queues, deques, linked lists, stacks, heaps, graphs and number theory helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "queue",
    "deque",
    "linked list",
    "stack",
    "binary search",
    "graph",
    "heap",
    "radix sort",
    "bezout",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
strukture-bezout = "strukture.bezout:main"

[tool.hatch.build.targets.wheel]
packages = ["strukture"]

[tool.pytest.ini_options]
addopts = "-ra"
