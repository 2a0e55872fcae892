"""Exception classes for doublylinked."""


class DoublyLinkedListError(Exception):
    """Base exception for all doublylinked errors."""


class NodeNotInListError(DoublyLinkedListError):
    """Raised when a node passed to remove_node() is not linked into the list."""
