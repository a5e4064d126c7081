# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Structural deep clone.

``clone`` walks a value and returns an independent copy: containers and
plain objects are rebuilt, immutable primitives and callables are shared.
Dispatch runs through an ordered list of ``CloneHandler`` objects; the first
handler whose ``matches`` accepts a value clones it.

No visited set is kept. Cloning a self-referential structure recurses until
the interpreter raises ``RecursionError``.

Example:
    >>> source = {"tags": ["a", "b"], "created": datetime(2024, 1, 1)}
    >>> copy = clone(source)
    >>> copy == source, copy["tags"] is source["tags"]
    (True, False)
"""

from collections.abc import Iterable
from typing import Any

from loguru import logger

from primkit.clone.handlers import ObjectHandler, default_handlers
from primkit.clone.protocols import CloneHandler


_FALLBACK_HANDLER = ObjectHandler()


class StructuralCloner:
    """Deep-clones values through an ordered list of handlers.

    Thread-safety: register handlers during startup; cloning itself does not
    mutate the cloner.
    """

    def __init__(self, handlers: Iterable[CloneHandler] | None = None) -> None:
        """Initialize the cloner.

        Args:
            handlers: Handlers in dispatch order. Defaults to the built-in
                handlers from ``default_handlers``.
        """
        self._handlers: list[CloneHandler] = (
            list(handlers) if handlers is not None else default_handlers()
        )

    @property
    def handlers(self) -> tuple[CloneHandler, ...]:
        """Registered handlers in dispatch order."""
        return tuple(self._handlers)

    def register(self, handler: CloneHandler, first: bool = True) -> None:
        """Register an additional handler.

        Args:
            handler: Handler to add.
            first: Insert ahead of every existing handler (so it can override
                the built-ins). When False it is inserted just before the
                final catch-all handler.
        """
        if first:
            self._handlers.insert(0, handler)
        elif self._handlers and isinstance(self._handlers[-1], ObjectHandler):
            self._handlers.insert(len(self._handlers) - 1, handler)
        else:
            self._handlers.append(handler)
        logger.debug("Registered clone handler", handler=handler.name, first=first)

    def clone(self, value: Any) -> Any:
        """Return a deep, independent copy of ``value``.

        Raises:
            RecursionError: If the value graph contains a cycle.
        """
        for handler in self._handlers:
            if handler.matches(value):
                return handler.clone(value, self.clone)
        return _FALLBACK_HANDLER.clone(value, self.clone)


_default_cloner = StructuralCloner()


def get_default_cloner() -> StructuralCloner:
    """Return the cloner used by the module-level ``clone`` function."""
    return _default_cloner


def clone(value: Any) -> Any:
    """Deep-clone ``value`` with the default handlers.

    Args:
        value: Any value.

    Returns:
        A structurally equal copy that shares no mutable state with
        ``value``. Primitives and callables are returned as-is.

    Raises:
        RecursionError: If the value graph contains a cycle.
    """
    return _default_cloner.clone(value)
