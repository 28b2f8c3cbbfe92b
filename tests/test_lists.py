import pytest

from ftkit.lists import LinkedList, Node, NodeType


def build(*items):
    lst = LinkedList()
    for item in items:
        lst.push_back(item)
    return lst


def test_node_types_keep_source_order_in_list():
    lst = LinkedList()
    for node_type in NodeType:
        lst.push_back(node_type.name, node_type)
    assert [n.node_type.value for n in lst.nodes()] == [0, 1, 2, 3, 4, 5]
    assert lst.last().node_type is NodeType.CONE
    assert lst.last().content == "CONE"


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []
    assert not lst


def test_push_back_keeps_order():
    lst = build("a", "b", "c")
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_reverses_order():
    lst = LinkedList()
    for item in ("a", "b", "c"):
        lst.push_front(item)
    assert list(lst) == ["c", "b", "a"]
    assert lst.head.content == "c"


def test_push_returns_node_with_type():
    lst = LinkedList()
    node = lst.push_back("sp", NodeType.SPHERE)
    assert isinstance(node, Node)
    assert node.node_type is NodeType.SPHERE
    assert lst.push_front("x").node_type is NodeType.NONE


def test_last_is_tail():
    lst = build(1, 2, 3)
    tail = lst.last()
    assert tail.content == 3
    assert tail.next is None
    added = lst.push_back(4)
    assert lst.last() is added


def test_clear_releases_in_order():
    lst = build(1, 2, 3)
    released = []
    lst.clear(released.append)
    assert released == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_release():
    lst = build(1, 2)
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_all():
    lst = build(1, 2, 3)
    seen = []
    lst.for_each(seen.append)
    assert seen == list(lst)


def test_map_builds_new_list():
    lst = LinkedList()
    lst.push_back(1, NodeType.PLANE)
    lst.push_back(2, NodeType.CONE)
    mapped = lst.map(lambda value: value * 10)
    assert list(mapped) == [10, 20]
    assert [n.node_type for n in mapped.nodes()] == [NodeType.PLANE, NodeType.CONE]
    assert list(lst) == [1, 2]
    assert mapped.head is not lst.head


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_invalid_node_type_rejected():
    with pytest.raises(ValueError):
        LinkedList().push_back("x", 42)