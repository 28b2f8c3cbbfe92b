"""A singly linked list of tagged scene elements."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


class NodeType(enum.IntEnum):
    """Kind of element a node carries."""

    NONE = 0
    SPHERE = 1
    PLANE = 2
    CYLINDER = 3
    DOT_LIGHT = 4
    CONE = 5


@dataclass(eq=False)
class Node:
    """One link of the list: its content, its kind and the next link."""

    content: Any
    node_type: NodeType = NodeType.NONE
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list that keeps a head node and walks it for the rest."""

    def __init__(self) -> None:
        self.head: Node | None = None

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from head to tail."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self.nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def push_front(self, content: Any, node_type: NodeType = NodeType.NONE) -> Node:
        """Insert a new node before the head and return it."""
        node = Node(content, NodeType(node_type), self.head)
        self.head = node
        return node

    def push_back(self, content: Any, node_type: NodeType = NodeType.NONE) -> Node:
        """Append a new node after the tail and return it."""
        node = Node(content, NodeType(node_type))
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """Return the tail node, or None when the list is empty."""
        tail = None
        for tail in self.nodes():
            pass
        return tail

    def clear(self, release: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, handing each content to ``release`` first, in order."""
        node = self.head
        while node is not None:
            if release is not None:
                release(node.content)
            following = node.next
            node.next = None
            node = following
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content from head to tail."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding ``func(content)`` for each node, kinds kept."""
        result = LinkedList()
        tail: Node | None = None
        for node in self.nodes():
            fresh = Node(func(node.content), node.node_type)
            if tail is None:
                result.head = fresh
            else:
                tail.next = fresh
            tail = fresh
        return result