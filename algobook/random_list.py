"""Deep copy of a linked list whose nodes also point at arbitrary nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class RandomListNode:
    """A list node with an extra pointer to any node of the list, or None."""

    label: int
    next: RandomListNode | None = None
    random: RandomListNode | None = None

    def __repr__(self) -> str:
        return f"RandomListNode(label={self.label!r})"


def _nodes(head: RandomListNode | None) -> Iterator[RandomListNode]:
    while head is not None:
        yield head
        head = head.next


def copy_random_list(head: RandomListNode | None) -> RandomListNode | None:
    """Return a deep copy of the list, with both pointers mapped onto the copies."""
    copies = {node: RandomListNode(node.label) for node in _nodes(head)}
    for node, copy in copies.items():
        copy.next = copies.get(node.next)
        copy.random = copies.get(node.random)
    return copies.get(head)