"""Protocols for pluggable clone support.

A clone handler recognizes one kind of value and knows how to build an
independent copy of it. Handlers receive a ``recurse`` callable so that
nested values go back through the full dispatch of the owning cloner.
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


type Recurse = Callable[[Any], Any]


@runtime_checkable
class CloneHandler(Protocol):
    """Protocol for value-kind specific cloning.

    Attributes:
        name: Short identifier used in logs.
    """

    name: str

    def matches(self, value: Any) -> bool:
        """Return True if this handler clones ``value``."""
        ...

    def clone(self, value: Any, recurse: Recurse) -> Any:
        """Return an independent copy of ``value``.

        Args:
            value: Value accepted by ``matches``.
            recurse: Clones a nested value through the owning cloner.
        """
        ...


@runtime_checkable
class SupportsCloneNode(Protocol):
    """Objects with a native deep-clone method, e.g. tree nodes."""

    def clone_node(self, deep: bool = True) -> Any:
        """Return a copy of the node, including children when ``deep``."""
        ...
