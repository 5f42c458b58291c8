"""Classic data structures and algorithms: queues, deques, linked lists, stacks, heaps, graphs and gcd helpers."""

__version__ = "0.1.0"