"""Doubly-linked list with O(1) append and O(1) removal by node handle."""

from __future__ import annotations

import logging
import weakref
from collections.abc import Iterator
from typing import Generic, TypeVar

from dlinkedlist.errors import ForeignNodeError, NodeRemovedError
from dlinkedlist.node import Node

V = TypeVar("V")

logger = logging.getLogger(__name__)


class LinkedList(Generic[V]):
    """
    Ordered container of value-holding nodes.

    The list owns its nodes through the forward chain starting at the head.
    The tail is cached as a weak reference, and every node's back-reference
    is weak, so dropping the list releases the whole chain.
    """

    def __init__(self) -> None:
        self._first: Node[V] | None = None
        self._last: weakref.ref[Node[V]] | None = None
        self._size = 0

    @property
    def first_node(self) -> Node[V] | None:
        """The head node, or None if the list is empty."""
        return self._first

    @property
    def last_node(self) -> Node[V] | None:
        """The tail node, or None if the list is empty."""
        if self._last is None:
            return None
        return self._last()

    @property
    def first(self) -> V | None:
        """The head value, or None if the list is empty."""
        node = self._first
        return node.value if node is not None else None

    @property
    def last(self) -> V | None:
        """The tail value, or None if the list is empty."""
        node = self.last_node
        return node.value if node is not None else None

    def append(self, value: V) -> Node[V]:
        """
        Append a value to the end of the list. O(1).

        Args:
            value: Value to store

        Returns:
            The node holding the value. Keep it to remove the value later.
        """
        node = Node(value)
        node._owner = weakref.ref(self)

        last = self.last_node
        if last is not None:
            node._previous = weakref.ref(last)
            last._next = node
        else:
            self._first = node

        self._last = weakref.ref(node)
        self._size += 1
        return node

    def remove(self, node: Node[V]) -> None:
        """
        Remove a node from the list. O(1).

        Args:
            node: A node returned by append() or nodes() on this list

        Raises:
            NodeRemovedError: If the node was already removed
            ForeignNodeError: If the node belongs to another list
        """
        self._check_owner(node)

        previous = node.previous
        following = node._next

        # Reroute neighbours around the node; absent neighbours are skipped.
        if previous is not None:
            previous._next = following
        if following is not None:
            following._previous = node._previous

        # Identity comparisons
        if self._first is node:
            self._first = following
        if self.last_node is node:
            self._last = weakref.ref(previous) if previous is not None else None

        node._next = None
        node._previous = None
        node._owner = None
        self._size -= 1

    def _check_owner(self, node: Node[V]) -> None:
        """Validate that the node currently belongs to this list."""
        if node._owner is None:
            logger.debug("Rejected removal of unlinked %r", node)
            raise NodeRemovedError(f"{node!r} is not linked into any list")

        if node._owner() is not self:
            logger.debug("Rejected removal of %r owned by another list", node)
            raise ForeignNodeError(f"{node!r} does not belong to this list")

    def nodes(self) -> Iterator[Node[V]]:
        """Iterate over the nodes from head to tail."""
        node = self._first
        while node is not None:
            following = node._next
            yield node
            node = following if node._owner is None else node._next

    def __iter__(self) -> Iterator[V]:
        """Iterate over the values from head to tail."""
        node = self._first
        while node is not None:
            yield node.value
            node = node._next

    def __reversed__(self) -> Iterator[V]:
        """Iterate over the values from tail to head."""
        node = self.last_node
        while node is not None:
            yield node.value
            node = node.previous

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
