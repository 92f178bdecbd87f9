"""Classic data structures and algorithms: sorting, recursion, linked lists, stacks and binary trees."""

__version__ = "0.1.0"

__all__ = ["linkedlist", "nodes", "recursion", "sorting", "stack", "tree"]