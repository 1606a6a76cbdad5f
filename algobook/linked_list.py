"""Singly linked lists of integers and the usual problems over them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list. Nodes compare by identity."""

    val: int
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        return (node.val for node in _nodes(self))

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"

    def to_list(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        return list(self)


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def _length(head: ListNode | None) -> int:
    return sum(1 for _ in _nodes(head))


def build_list(values: Iterable[int]) -> ListNode | None:
    """Link ``values`` into a list and return its head, or None when empty."""
    dummy = ListNode(0)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as decimal digits, least significant first."""
    digits = []
    carry = 0
    for x, y in zip_longest(l1 or (), l2 or (), fillvalue=0):
        carry, digit = divmod(x + y + carry, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    return build_list(digits)


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    reversed_head = None
    node = head
    while node is not None:
        node.next, reversed_head, node = reversed_head, node, node.next
    return reversed_head


def reverse_between(head: ListNode | None, m: int, n: int) -> ListNode | None:
    """Reverse the nodes at 1-based positions ``m`` to ``n`` in place."""
    if not 1 <= m <= n <= _length(head):
        raise ValueError(f"positions {m}..{n} do not fit a list of {_length(head)} nodes")
    dummy = ListNode(0, head)
    before = dummy
    for _ in range(m - 1):
        before = before.next
    first = before.next
    for _ in range(n - m):
        moved = first.next
        first.next = moved.next
        moved.next = before.next
        before.next = moved
    return dummy.next


def partition(head: ListNode | None, x: int) -> ListNode | None:
    """Put nodes below ``x`` before the others, keeping order within each part."""
    low = ListNode(0)
    high = ListNode(0)
    low_tail, high_tail = low, high
    for node in list(_nodes(head)):
        if node.val < x:
            low_tail.next = node
            low_tail = node
        else:
            high_tail.next = node
            high_tail = node
    high_tail.next = None
    low_tail.next = high.next
    return low.next


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Keep one node of each run of equal values in a sorted list."""
    node = head
    while node is not None and node.next is not None:
        if node.next.val == node.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def delete_all_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop every value that occurs more than once in a sorted list."""
    dummy = ListNode(0)
    tail = dummy
    node = head
    while node is not None:
        run_end = node
        while run_end.next is not None and run_end.next.val == node.val:
            run_end = run_end.next
        following = run_end.next
        if run_end is node:
            tail.next = node
            tail = node
        node = following
    tail.next = None
    return dummy.next


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list ``k`` places to the right."""
    if k < 0:
        raise ValueError("rotation must not be negative")
    if head is None or head.next is None:
        return head
    nodes = list(_nodes(head))
    shift = k % len(nodes)
    if shift == 0:
        return head
    nodes[-1].next = head
    new_tail = nodes[-shift - 1]
    new_head = new_tail.next
    new_tail.next = None
    return new_head


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node counted from the end (1 is the last)."""
    length = _length(head)
    if not 1 <= n <= length:
        raise ValueError(f"position {n} does not fit a list of {length} nodes")
    dummy = ListNode(0, head)
    lead = trail = dummy
    for _ in range(n):
        lead = lead.next
    while lead.next is not None:
        lead = lead.next
        trail = trail.next
    trail.next = trail.next.next
    return dummy.next


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes."""
    return reverse_k_group(head, 2)


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse each full group of ``k`` nodes; a short tail is left as it is."""
    if k < 2:
        return head
    dummy = ListNode(0, head)
    before = dummy
    while True:
        group_tail = before
        for _ in range(k):
            group_tail = group_tail.next
            if group_tail is None:
                return dummy.next
        after = group_tail.next
        first = before.next
        previous, node = after, first
        while node is not after:
            node.next, previous, node = previous, node, node.next
        before.next = group_tail
        before = first


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    return detect_cycle(head) is not None


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where the cycle begins, or None when there is none."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            start = head
            while start is not slow:
                start = start.next
                slow = slow.next
            return start
    return None


def reorder_list(head: ListNode | None) -> None:
    """Reorder L0, L1, ..., Ln in place into L0, Ln, L1, Ln-1, ..."""
    if head is None or head.next is None:
        return
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = reverse_list(slow.next)
    slow.next = None
    first = head
    while second is not None:
        first_next, second_next = first.next, second.next
        first.next = second
        second.next = first_next
        first, second = first_next, second_next