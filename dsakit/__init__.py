"""Bounded stacks and queues, singly, doubly and circular linked lists, and a command line driver."""

__version__ = "0.1.0"
__all__ = ["errors", "stack", "array_queue", "singly", "doubly", "circular", "cli"]