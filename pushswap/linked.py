"""A singly linked list of content-carrying nodes."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class ListNode:
    """One link of a list: its content, the content's size and the next node."""

    content: Any = None
    content_size: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator["ListNode"]:
        """Yield this node and every node after it, in order."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next


def _copy_content(content: Any) -> Any:
    if isinstance(content, (bytearray, memoryview)):
        return bytearray(content)
    if isinstance(content, (list, dict, set)):
        return content.copy()
    return content


def lstnew(content: Any) -> ListNode:
    """Return a new unlinked node holding a copy of content.

    A node made from None holds None with a size of 0.
    """
    if content is None:
        return ListNode()
    try:
        size = len(content)
    except TypeError:
        size = 0
    return ListNode(_copy_content(content), size)


def lstadd(head: Optional[ListNode], node: ListNode) -> ListNode:
    """Put node at the front of the list and return the new head."""
    node.next = head
    return node


def lstpushback(head: Optional[ListNode], node: ListNode) -> ListNode:
    """Attach node after the last node of the list and return the head."""
    if head is None:
        return lstadd(head, node)
    *_, last = head
    last.next = node
    return head


def lstiter(head: Optional[ListNode], f: Callable[[ListNode], Any]) -> None:
    """Call f on every node of the list, front to back."""
    if head is None or f is None:
        return
    for node in list(head):
        f(node)


def lstmap(
    head: Optional[ListNode], f: Callable[[ListNode], Optional[ListNode]]
) -> Optional[ListNode]:
    """Return a new list made of f applied to each node of the list.

    Raises ValueError when f gives no node for one of them.
    """
    if head is None:
        return None
    new_head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for node in head:
        mapped = f(node)
        if mapped is None:
            raise ValueError("mapping function returned no node")
        mapped.next = None
        if tail is None:
            new_head = mapped
        else:
            tail.next = mapped
        tail = mapped
    return new_head


def lstdelone(node: ListNode, delete: Callable[[Any, int], Any]) -> None:
    """Hand the node's content to delete and empty the node."""
    delete(node.content, node.content_size)
    node.content = None
    node.content_size = 0
    node.next = None


def lstdel(head: Optional[ListNode], delete: Callable[[Any, int], Any]) -> None:
    """Hand the content of every node, front to back, to delete and unlink them."""
    if head is None:
        return
    for node in list(head):
        lstdelone(node, delete)