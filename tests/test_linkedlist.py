import pytest

from euiccutil.linkedlist import LinkedList, ListNode


def test_construct_and_iterate():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert list(reversed(lst)) == ["c", "b", "a"]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert not lst
    assert len(lst) == 0
    assert lst.first_or_none() is None
    assert lst.is_singular() is False
    with pytest.raises(IndexError):
        lst.first()
    with pytest.raises(IndexError):
        lst.last()


def test_push_front_acts_as_stack():
    lst = LinkedList()
    for value in ["x", "y", "z"]:
        lst.push_front(value)
    assert list(lst) == ["z", "y", "x"]


def test_push_back_returns_node():
    lst = LinkedList()
    node = lst.push_back("v")
    assert node.value == "v"
    assert node.owner is lst
    assert lst.first() is node
    assert lst.last() is node
    assert lst.first_or_none() is node
    assert lst.is_singular()


def test_remove_detaches_node():
    lst = LinkedList()
    a = lst.push_back("a")
    b = lst.push_back("b")
    assert lst.remove(a) == "a"
    assert not a.linked
    assert a.owner is None
    assert list(lst) == ["b"]
    assert lst.first() is b
    with pytest.raises(ValueError):
        lst.remove(a)


def test_remove_foreign_node_rejected():
    one = LinkedList()
    two = LinkedList()
    node = two.push_back("n")
    with pytest.raises(ValueError):
        one.remove(node)
    assert list(two) == ["n"]


def test_move_within_list():
    lst = LinkedList()
    a = lst.push_back("a")
    lst.push_back("b")
    c = lst.push_back("c")
    lst.move_to_front(c)
    assert list(lst) == ["c", "a", "b"]
    lst.move_to_back(a)
    assert list(lst) == ["c", "b", "a"]


def test_move_between_lists():
    src = LinkedList()
    dst = LinkedList(["d"])
    node = src.push_back("s")
    dst.move_to_back(node)
    assert list(src) == []
    assert list(dst) == ["d", "s"]
    assert node.owner is dst


def test_move_detached_node_rejected():
    lst = LinkedList()
    with pytest.raises(ValueError):
        lst.move_to_front(ListNode("free"))


def test_first_last_predicates():
    lst = LinkedList()
    a = lst.push_back("a")
    b = lst.push_back("b")
    c = lst.push_back("c")
    assert lst.is_first(a) and not lst.is_first(b)
    assert lst.is_last(c) and not lst.is_last(b)
    assert not lst.is_singular()


def test_circular_neighbours():
    lst = LinkedList()
    a = lst.push_back("a")
    b = lst.push_back("b")
    c = lst.push_back("c")
    assert lst.next_circular(a) is b
    assert lst.next_circular(c) is a
    assert lst.prev_circular(a) is c
    assert lst.prev_circular(b) is a


def test_circular_single_node_points_to_itself():
    lst = LinkedList()
    only = lst.push_back("only")
    assert lst.next_circular(only) is only
    assert lst.prev_circular(only) is only


def test_nodes_safe_against_removal():
    lst = LinkedList(range(6))
    for node in lst.nodes():
        if node.value % 2:
            lst.remove(node)
    assert list(lst) == [0, 2, 4]


def test_replace_node():
    lst = LinkedList()
    lst.push_back("a")
    b = lst.push_back("b")
    lst.push_back("c")
    new = ListNode("B")
    b.replace(new)
    assert list(lst) == ["a", "B", "c"]
    assert new.owner is lst
    assert not b.linked


def test_replace_requires_detached_new_and_linked_old():
    lst = LinkedList()
    a = lst.push_back("a")
    b = lst.push_back("b")
    with pytest.raises(ValueError):
        a.replace(b)
    with pytest.raises(ValueError):
        ListNode("free").replace(ListNode("other"))
    assert list(lst) == ["a", "b"]


def test_swap_distant_nodes():
    lst = LinkedList()
    lst.push_back("a")
    b = lst.push_back("b")
    lst.push_back("c")
    d = lst.push_back("d")
    b.swap(d)
    assert list(lst) == ["a", "d", "c", "b"]


@pytest.mark.parametrize("forward", [True, False])
def test_swap_adjacent_nodes(forward):
    lst = LinkedList()
    lst.push_back("a")
    b = lst.push_back("b")
    c = lst.push_back("c")
    lst.push_back("d")
    if forward:
        b.swap(c)
    else:
        c.swap(b)
    assert list(lst) == ["a", "c", "b", "d"]
    assert list(reversed(lst)) == ["d", "b", "c", "a"]


def test_swap_is_involution():
    lst = LinkedList()
    nodes = [lst.push_back(v) for v in "pqrst"]
    nodes[1].swap(nodes[3])
    nodes[1].swap(nodes[3])
    assert list(lst) == list("pqrst")


def test_swap_across_lists():
    one = LinkedList()
    two = LinkedList()
    x = one.push_back("x")
    one.push_back("y")
    two.push_back("m")
    n = two.push_back("n")
    x.swap(n)
    assert list(one) == ["n", "y"]
    assert list(two) == ["m", "x"]
    assert n.owner is one
    assert x.owner is two


def test_swap_with_itself_is_noop():
    lst = LinkedList(["a"])
    node = lst.first()
    node.swap(node)
    assert list(lst) == ["a"]
    assert node.owner is lst


def test_swap_detached_rejected():
    lst = LinkedList(["a"])
    with pytest.raises(ValueError):
        lst.first().swap(ListNode("free"))