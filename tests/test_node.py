"""Tests for the Node handle type."""

import pytest

from dlinkedlist import LinkedList, Node


def test_node_creation() -> None:
    """Test creating a detached node."""
    node = Node("value1")
    assert node.value == "value1"
    assert node.next is None
    assert node.previous is None
    assert node.owner is None


def test_node_value_is_mutable() -> None:
    """Test that callers can change a node's payload."""
    lst = LinkedList[int]()
    node = lst.append(1)
    node.value = 5
    assert list(lst) == [5]
    assert lst.first == 5


def test_node_links_are_read_only() -> None:
    """Test that next and previous cannot be assigned from outside the list."""
    lst = LinkedList[int]()
    node1 = lst.append(1)
    node2 = lst.append(2)

    with pytest.raises(AttributeError):
        node1.next = None  # type: ignore[misc]
    with pytest.raises(AttributeError):
        node2.previous = None  # type: ignore[misc]
    with pytest.raises(AttributeError):
        node1.owner = None  # type: ignore[misc]

    assert node1.next is node2
    assert node2.previous is node1


def test_node_has_no_dict() -> None:
    """Test that nodes reject arbitrary attributes."""
    node = Node(1)
    with pytest.raises(AttributeError):
        node.extra = True  # type: ignore[attr-defined]


def test_node_identity_not_value_equality() -> None:
    """Test that nodes holding equal values are distinct."""
    lst = LinkedList[int]()
    node1 = lst.append(7)
    node2 = lst.append(7)
    assert node1 is not node2
    assert node1 != node2


def test_node_owner() -> None:
    """Test that a node reports the list it belongs to."""
    lst = LinkedList[int]()
    node = lst.append(1)
    assert node.owner is lst

    lst.remove(node)
    assert node.owner is None


def test_node_repr() -> None:
    """Test node repr shows the value."""
    assert repr(Node("a")) == "Node('a')"
