"""Type definitions for doublylinked."""

from typing import Callable, TypeAlias, TypeVar

# Generic type variable for stored values
T = TypeVar("T")

# Three-way comparison: negative, zero or positive
CompareFunction: TypeAlias = Callable[[T, T], int]

# Renders a single value for to_string()
FormatCallback: TypeAlias = Callable[[T], str]

# Custom match predicate for find(), called as (node_value, needle)
MatchCallback: TypeAlias = Callable[[T, T], bool]
