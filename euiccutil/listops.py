"""Whole-list operations on :class:`~euiccutil.linkedlist.LinkedList`.

These work on runs of nodes rather than single entries: rotating,
cutting a list in two and joining two lists.
"""

from __future__ import annotations

from typing import Optional

from .linkedlist import LinkedList, ListNode, _insert, _unlink


def _require_member(lst: LinkedList, node: ListNode) -> None:
    if node.owner is not lst or node is lst._head:
        raise ValueError("node is not in this list")


def _run(lst: LinkedList, first: ListNode, last: ListNode) -> list[ListNode]:
    """Nodes from ``first`` through ``last`` inclusive, in list order."""
    head = lst._head
    run = []
    pos = first
    while True:
        if pos is head:
            raise ValueError("last does not follow first in this list")
        run.append(pos)
        if pos is last:
            return run
        pos = pos._next


def _append_all(target: LinkedList, nodes: list[ListNode]) -> None:
    for node in nodes:
        _unlink(node)
        _insert(node, target._head._prev, target._head, target)


def _prepend_all(target: LinkedList, nodes: list[ListNode]) -> None:
    anchor = target._head
    for node in nodes:
        _unlink(node)
        _insert(node, anchor, anchor._next, target)
        anchor = node


def bulk_move_to_back(lst: LinkedList, first: ListNode, last: ListNode) -> None:
    """Move the run from ``first`` through ``last`` to the back of ``lst``.

    Both nodes must be in ``lst`` and ``last`` must not come before
    ``first``; ``first`` and ``last`` may be the same node.
    """
    _require_member(lst, first)
    _require_member(lst, last)
    _append_all(lst, _run(lst, first, last))


def rotate_left(lst: LinkedList) -> None:
    """Move the first node to the back; an empty list is left alone."""
    if lst:
        lst.move_to_back(lst.first())


def rotate_to_front(lst: LinkedList, node: ListNode) -> None:
    """Rotate ``lst`` so that ``node`` becomes its first node."""
    _require_member(lst, node)
    head = lst._head
    if head._next is node:
        return
    head._prev._next = head._next
    head._next._prev = head._prev
    prev = node._prev
    prev._next = head
    head._prev = prev
    head._next = node
    node._prev = head


def cut_position(lst: LinkedList, node: Optional[ListNode]) -> LinkedList:
    """Split off the nodes of ``lst`` up to and including ``node``.

    Returns a new list holding them; ``lst`` keeps the rest. With ``node``
    None nothing is cut and the new list is empty.
    """
    result = LinkedList()
    if node is None or not lst:
        if node is not None:
            _require_member(lst, node)
        return result
    _require_member(lst, node)
    _append_all(result, _run(lst, lst.first(), node))
    return result


def cut_before(lst: LinkedList, node: Optional[ListNode]) -> LinkedList:
    """Split off the nodes of ``lst`` before ``node``, excluding it.

    Returns a new list holding them; ``lst`` keeps ``node`` and what
    follows. With ``node`` None every node is moved to the new list.
    """
    result = LinkedList()
    if node is None:
        _append_all(result, list(lst.nodes()))
        return result
    _require_member(lst, node)
    if lst.first() is node:
        return result
    _append_all(result, _run(lst, lst.first(), node._prev))
    return result


def _check_distinct(lst: LinkedList, other: LinkedList) -> None:
    if lst is other:
        raise ValueError("cannot splice a list into itself")


def splice(lst: LinkedList, other: LinkedList) -> None:
    """Move every node of ``other`` to the front of ``lst``, keeping order.

    ``other`` is left empty.
    """
    _check_distinct(lst, other)
    _prepend_all(lst, list(other.nodes()))


def splice_tail(lst: LinkedList, other: LinkedList) -> None:
    """Move every node of ``other`` to the back of ``lst``, keeping order.

    ``other`` is left empty.
    """
    _check_distinct(lst, other)
    _append_all(lst, list(other.nodes()))