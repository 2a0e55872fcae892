"""doublylinked - Generic doubly-linked list with O(1) endpoint operations."""

from doublylinked.comparator import Comparator, default_compare
from doublylinked.errors import DoublyLinkedListError, NodeNotInListError
from doublylinked.linkedlist import DoublyLinkedList, Node
from doublylinked.types import CompareFunction, FormatCallback, MatchCallback

__version__ = "0.0.1"

__all__ = [
    "DoublyLinkedList",
    "Node",
    "Comparator",
    "default_compare",
    "DoublyLinkedListError",
    "NodeNotInListError",
    "CompareFunction",
    "FormatCallback",
    "MatchCallback",
]
