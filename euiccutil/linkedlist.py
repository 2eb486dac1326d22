"""Circular doubly linked list with stable node handles."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional


class ListNode:
    """A value held in a :class:`LinkedList`.

    A node belongs to at most one list at a time. A detached node has no
    neighbours and no owner.
    """

    __slots__ = ("value", "_prev", "_next", "_owner")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self._prev: Optional[ListNode] = None
        self._next: Optional[ListNode] = None
        self._owner: Optional[LinkedList] = None

    @property
    def owner(self) -> Optional[LinkedList]:
        """The list holding this node, or None when detached."""
        return self._owner

    @property
    def linked(self) -> bool:
        """True while the node is part of a list."""
        return self._owner is not None

    def replace(self, new: ListNode) -> None:
        """Put the detached node ``new`` in this node's place and detach this one."""
        if not self.linked:
            raise ValueError("node is not in a list")
        if new.linked:
            raise ValueError("replacement node is already in a list")
        _replace(self, new)

    def swap(self, other: ListNode) -> None:
        """Exchange the positions of this node and ``other``, even across lists."""
        if not self.linked or not other.linked:
            raise ValueError("both nodes must be in a list")
        if self is other:
            return
        other_owner = other._owner
        pos = other._prev
        _unlink(other)
        _replace(self, other)
        if pos is self:
            pos = other
        _insert(self, pos, pos._next, other_owner)

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


def _insert(node: ListNode, prev: ListNode, nxt: ListNode, owner: LinkedList) -> None:
    nxt._prev = node
    node._next = nxt
    node._prev = prev
    prev._next = node
    node._owner = owner


def _unlink(node: ListNode) -> None:
    node._prev._next = node._next
    node._next._prev = node._prev
    node._prev = None
    node._next = None
    node._owner = None


def _replace(old: ListNode, new: ListNode) -> None:
    new._next = old._next
    new._next._prev = new
    new._prev = old._prev
    new._prev._next = new
    new._owner = old._owner
    old._prev = None
    old._next = None
    old._owner = None


class LinkedList:
    """Circular doubly linked list built around a sentinel node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        head = ListNode()
        head._prev = head
        head._next = head
        head._owner = self
        self._head = head
        for value in values:
            self.push_back(value)

    def push_front(self, value: Any) -> ListNode:
        """Insert ``value`` at the front and return its node."""
        node = ListNode(value)
        _insert(node, self._head, self._head._next, self)
        return node

    def push_back(self, value: Any) -> ListNode:
        """Insert ``value`` at the back and return its node."""
        node = ListNode(value)
        _insert(node, self._head._prev, self._head, self)
        return node

    def first(self) -> ListNode:
        """The first node; raises IndexError when empty."""
        if not self:
            raise IndexError("first() on an empty list")
        return self._head._next

    def last(self) -> ListNode:
        """The last node; raises IndexError when empty."""
        if not self:
            raise IndexError("last() on an empty list")
        return self._head._prev

    def first_or_none(self) -> Optional[ListNode]:
        """The first node, or None when empty."""
        return self._head._next if self else None

    def _check_member(self, node: ListNode) -> None:
        if node._owner is not self or node is self._head:
            raise ValueError("node is not in this list")

    def remove(self, node: ListNode) -> Any:
        """Detach ``node`` from this list and return its value."""
        self._check_member(node)
        _unlink(node)
        return node.value

    def _take(self, node: ListNode) -> None:
        if not node.linked:
            raise ValueError("node is not in a list")
        if node._owner is not None and node is node._owner._head:
            raise ValueError("cannot move a list head")
        _unlink(node)

    def move_to_front(self, node: ListNode) -> None:
        """Move ``node`` from whatever list holds it to the front of this one."""
        self._take(node)
        _insert(node, self._head, self._head._next, self)

    def move_to_back(self, node: ListNode) -> None:
        """Move ``node`` from whatever list holds it to the back of this one."""
        self._take(node)
        _insert(node, self._head._prev, self._head, self)

    def is_first(self, node: ListNode) -> bool:
        """True when ``node`` is the first node of this list."""
        return node._prev is self._head

    def is_last(self, node: ListNode) -> bool:
        """True when ``node`` is the last node of this list."""
        return node._next is self._head

    def is_singular(self) -> bool:
        """True when the list holds exactly one node."""
        head = self._head
        return head._next is not head and head._next is head._prev

    def next_circular(self, node: ListNode) -> ListNode:
        """The node after ``node``, wrapping round to the first."""
        self._check_member(node)
        nxt = node._next
        return self._head._next if nxt is self._head else nxt

    def prev_circular(self, node: ListNode) -> ListNode:
        """The node before ``node``, wrapping round to the last."""
        self._check_member(node)
        prev = node._prev
        return self._head._prev if prev is self._head else prev

    def nodes(self) -> Iterator[ListNode]:
        """Iterate over the nodes; the current node may be removed meanwhile."""
        head = self._head
        pos = head._next
        while pos is not head:
            nxt = pos._next
            yield pos
            pos = nxt

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self.nodes())

    def __reversed__(self) -> Iterator[Any]:
        head = self._head
        pos = head._prev
        while pos is not head:
            prev = pos._prev
            yield pos.value
            pos = prev

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __bool__(self) -> bool:
        return self._head._next is not self._head

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"