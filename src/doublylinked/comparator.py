"""Pluggable value comparison used by the list for matching."""

from typing import Any, Generic

from doublylinked.types import CompareFunction, T


def default_compare(a: Any, b: Any) -> int:
    """Three-way comparison using the values' own ``==`` and ``<``."""
    if a == b:
        return 0
    return -1 if a < b else 1


class Comparator(Generic[T]):
    """
    Wraps an optional three-way comparison function.

    Without a function, ``equal`` falls back to plain ``==`` so values that
    have no ordering (dicts, arbitrary objects) can still be matched. The
    ordering helpers always go through ``compare``; the list itself only
    calls ``equal``, the rest are provided for callers.
    """

    __slots__ = ("_compare_function",)

    def __init__(self, compare_function: CompareFunction[T] | None = None) -> None:
        self._compare_function = compare_function

    def compare(self, a: T, b: T) -> int:
        if self._compare_function is None:
            return default_compare(a, b)
        return self._compare_function(a, b)

    def equal(self, a: T, b: T) -> bool:
        if self._compare_function is None:
            return bool(a == b)
        return self._compare_function(a, b) == 0

    def less_than(self, a: T, b: T) -> bool:
        return self.compare(a, b) < 0

    def greater_than(self, a: T, b: T) -> bool:
        return self.compare(a, b) > 0

    def less_than_or_equal(self, a: T, b: T) -> bool:
        return self.less_than(a, b) or self.equal(a, b)

    def greater_than_or_equal(self, a: T, b: T) -> bool:
        return self.greater_than(a, b) or self.equal(a, b)

    def reverse(self) -> "Comparator[T]":
        """Return a new comparator with the opposite ordering."""
        compare = self.compare
        return Comparator(lambda a, b: compare(b, a))
