"""Node type used as the linkage unit and caller-facing handle."""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from dlinkedlist.linkedlist import LinkedList

V = TypeVar("V")


class Node(Generic[V]):
    """
    A single value-holding node.

    The forward link (``next``) is a strong reference and forms the ownership
    chain. The backward link (``previous``) is a weak reference so that the
    chain never contains a reference cycle. Only ``LinkedList`` rewrites links;
    callers may change ``value`` freely.
    """

    __slots__ = ("value", "_next", "_previous", "_owner", "__weakref__")

    def __init__(self, value: V) -> None:
        self.value = value
        self._next: Node[V] | None = None
        self._previous: weakref.ref[Node[V]] | None = None
        self._owner: weakref.ref[LinkedList[V]] | None = None

    @property
    def next(self) -> Node[V] | None:
        """The following node, or None at the tail."""
        return self._next

    @property
    def previous(self) -> Node[V] | None:
        """The preceding node, or None at the head."""
        if self._previous is None:
            return None
        return self._previous()

    @property
    def owner(self) -> LinkedList[V] | None:
        """The list this node currently belongs to, or None once removed."""
        if self._owner is None:
            return None
        return self._owner()

    def __repr__(self) -> str:
        return f"Node({self.value!r})"
