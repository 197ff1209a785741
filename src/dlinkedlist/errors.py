"""Exception classes for dlinkedlist."""


class LinkedListError(Exception):
    """Base exception for all dlinkedlist errors."""


class NodeRemovedError(LinkedListError, ValueError):
    """Raised when removing a node that is not linked into any list (already removed or never appended)."""


class ForeignNodeError(LinkedListError, ValueError):
    """Raised when removing a node that belongs to a different or discarded list."""
