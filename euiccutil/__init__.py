"""Driver descriptors, environment and output helpers, and a circular linked list."""

__version__ = "2.3.0"
__all__ = ["driver", "utils", "linkedlist", "listops"]