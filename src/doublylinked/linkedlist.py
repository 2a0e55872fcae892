"""Doubly-linked list with value-based deletion, search and in-place reversal."""

import logging
from typing import Generic, Iterable, Iterator

from doublylinked.comparator import Comparator
from doublylinked.errors import NodeNotInListError
from doublylinked.types import CompareFunction, FormatCallback, MatchCallback, T

logger = logging.getLogger(__name__)

# Separator used by DoublyLinkedList.to_string()
_SEPARATOR = ","


class Node(Generic[T]):
    """A node in the doubly-linked list."""

    __slots__ = ("_value", "previous", "next", "_owner")

    def __init__(
        self,
        value: T,
        next: "Node[T] | None" = None,
        previous: "Node[T] | None" = None,
    ) -> None:
        self._value = value
        # List this node is linked into, None while detached
        self._owner: "DoublyLinkedList[T] | None" = None
        self.next = next
        self.previous = previous

    @property
    def value(self) -> T:
        return self._value

    def to_string(self, callback: FormatCallback[T] | None = None) -> str:
        """Render the value with callback if given, else with str()."""
        return callback(self._value) if callback is not None else str(self._value)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Node({self._value!r})"


class DoublyLinkedList(Generic[T]):
    """
    Doubly-linked list with explicit head and tail references.

    Both ends are None exactly when the list is empty. Nodes removed from
    the list are returned to the caller with their links cleared.
    """

    def __init__(self, compare_function: CompareFunction[T] | None = None) -> None:
        """
        Initialize an empty list.

        Args:
            compare_function: Optional three-way comparison used by delete()
                to decide whether a stored value matches. Defaults to ==.
        """
        self.head: Node[T] | None = None
        self.tail: Node[T] | None = None
        self.comparator: Comparator[T] = Comparator(compare_function)
        self._size = 0

    def prepend(self, value: T) -> "DoublyLinkedList[T]":
        """Insert value before the head. O(1)."""
        node = Node(value, next=self.head)
        node._owner = self
        if self.head is not None:
            self.head.previous = node
        self.head = node
        if self.tail is None:
            self.tail = node
        self._size += 1
        return self

    def append(self, value: T) -> "DoublyLinkedList[T]":
        """Insert value after the tail. O(1)."""
        node = Node(value, previous=self.tail)
        node._owner = self
        if self.tail is not None:
            self.tail.next = node
        self.tail = node
        if self.head is None:
            self.head = node
        self._size += 1
        return self

    def delete(self, value: T) -> Node[T] | None:
        """
        Unlink every node whose value equals value. O(n).

        Matching goes through the list's comparator, called once per node.

        Returns:
            The last node unlinked during the scan, or None if the list is
            empty or nothing matched. Earlier matches are unlinked too but
            are not returned.
        """
        deleted: Node[T] | None = None
        removed = 0
        current = self.head
        while current is not None:
            following = current.next
            if self.comparator.equal(current.value, value):
                self._unlink(current)
                deleted = current
                removed += 1
            current = following

        if removed:
            logger.debug("Deleted %d node(s) matching %r", removed, value)
        return deleted

    def delete_head(self) -> Node[T] | None:
        """Remove and return the head node, or None if empty. O(1)."""
        node = self.head
        if node is None:
            return None
        if node is self.tail:
            self.head = None
            self.tail = None
        else:
            self.head = node.next
            self.head.previous = None  # type: ignore[union-attr]
        node.next = None
        node._owner = None
        self._size -= 1
        return node

    def delete_tail(self) -> Node[T] | None:
        """Remove and return the tail node, or None if empty. O(1)."""
        node = self.tail
        if node is None:
            return None
        if node is self.head:
            self.head = None
            self.tail = None
        else:
            self.tail = node.previous
            self.tail.next = None  # type: ignore[union-attr]
        node.previous = None
        node._owner = None
        self._size -= 1
        return node

    def remove_node(self, node: Node[T]) -> Node[T]:
        """
        Unlink a node obtained from this list. O(1).

        Raises:
            NodeNotInListError: If node is not linked into this list
        """
        if not self._is_linked(node):
            logger.warning("Refusing to remove unlinked node %r", node)
            raise NodeNotInListError(f"{node!r} is not linked into this list")
        self._unlink(node)
        return node

    def find(self, value: T, callback: MatchCallback[T] | None = None) -> Node[T] | None:
        """
        Return the first node matching value, or None. O(n).

        A node matches when callback(node.value, value) is truthy, or when
        its value is identical or equal to value. A value of None never
        matches anything.
        """
        if self.head is None or value is None:
            return None
        for node in self:
            if callback is not None and callback(node.value, value):
                return node
            if node.value is value or node.value == value:
                return node
        return None

    def to_array(self) -> list[Node[T]]:
        """Return the nodes from head to tail as a new list. O(n)."""
        return list(self)

    def values(self) -> list[T]:
        """Return the stored values from head to tail. O(n)."""
        return [node.value for node in self]

    @classmethod
    def from_array(
        cls,
        values: Iterable[T],
        compare_function: CompareFunction[T] | None = None,
    ) -> "DoublyLinkedList[T]":
        """Build a new list holding values in order. O(n)."""
        result: DoublyLinkedList[T] = cls(compare_function)
        for value in values:
            result.append(value)
        logger.debug("Built list of %d node(s) from iterable", len(result))
        return result

    def to_string(self, callback: FormatCallback[T] | None = None) -> str:
        """Render every node and join them with a comma."""
        return _SEPARATOR.join(node.to_string(callback) for node in self)

    def reverse(self) -> "DoublyLinkedList[T]":
        """Reverse the list in place. O(n)."""
        former_head = self.head
        current = self.head
        previous: Node[T] | None = None
        while current is not None:
            following = current.next
            current.next = current.previous
            current.previous = following
            previous = current
            current = following

        self.head = previous
        self.tail = former_head
        logger.debug("Reversed list of %d node(s)", self._size)
        return self

    def _is_linked(self, node: Node[T]) -> bool:
        return node._owner is self

    def _unlink(self, node: Node[T]) -> None:
        """Splice node out and clear its links (node must be in the list)."""
        if node.previous is not None:
            node.previous.next = node.next
        else:
            self.head = node.next
        if node.next is not None:
            node.next.previous = node.previous
        else:
            self.tail = node.previous
        node.previous = None
        node.next = None
        node._owner = None
        self._size -= 1

    def __iter__(self) -> Iterator[Node[T]]:
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def __reversed__(self) -> Iterator[Node[T]]:
        current = self.tail
        while current is not None:
            yield current
            current = current.previous

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.values()!r})"
