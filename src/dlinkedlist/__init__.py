"""dlinkedlist - Doubly-linked list with O(1) append and O(1) removal by node handle."""

from dlinkedlist.errors import ForeignNodeError, LinkedListError, NodeRemovedError
from dlinkedlist.linkedlist import LinkedList
from dlinkedlist.node import Node

__version__ = "0.0.1"

__all__ = [
    "LinkedList",
    "Node",
    "LinkedListError",
    "NodeRemovedError",
    "ForeignNodeError",
]
