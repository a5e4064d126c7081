# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Positional and named ``{placeholder}`` substitution.

Arguments are passed as a tagged union: ``Positional`` values are addressed
by zero-based index (``{0}``, ``{1}``), ``Named`` values by key (``{first}``).

Only the first occurrence of each placeholder is replaced unless
``replace_all`` is set, and placeholders without a matching value stay in
the output as literal text. Inserted values are never scanned again, so a
value that itself looks like a placeholder is left alone.

Example:
    >>> format_template("Hello {1} {0}!", positional("Doe", "John"))
    'Hello John Doe!'
    >>> format_template("Hello {first} {last}!", named(first="John", last="Doe"))
    'Hello John Doe!'
"""

import re
from collections.abc import Mapping, Sequence
from decimal import Decimal
from fractions import Fraction
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict

from primkit.core.exceptions import TemplateArgumentError


PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]*)\}")

_SCALAR_TYPES = (str, int, float, Decimal, Fraction)


class Positional(BaseModel):
    """Ordered template values addressed as ``{0}``, ``{1}``, ..."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    values: tuple[Any, ...] = ()

    def as_mapping(self) -> dict[str, Any]:
        """Return the values keyed by their index as text."""
        return {str(i): v for i, v in enumerate(self.values)}


class Named(BaseModel):
    """Template values addressed by key, e.g. ``{first}``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    mapping: dict[str, Any] = {}

    def as_mapping(self) -> dict[str, Any]:
        """Return the values keyed by placeholder name."""
        return dict(self.mapping)


type TemplateArguments = Positional | Named


def positional(*values: Any) -> Positional:
    """Build positional template arguments."""
    return Positional(values=values)


def named(mapping: Mapping[Any, Any] | None = None, /, **values: Any) -> Named:
    """Build named template arguments.

    Keys are converted with ``str()`` and used verbatim as placeholder names.

    Args:
        mapping: Optional mapping of placeholder names to values.
        **values: Additional placeholder values; these win over ``mapping``.
            Any name is accepted, including ``mapping``.

    Returns:
        Named arguments.
    """
    merged = {str(k): v for k, v in (mapping or {}).items()}
    merged.update(values)
    return Named(mapping=merged)


def arguments_from(*args: Any, **kwargs: Any) -> TemplateArguments | None:
    """Build template arguments from a classic ``format(*args)`` call shape.

    - A scalar first argument (text or number) makes every argument
      positional.
    - Keyword arguments, or a mapping first argument, make the call named;
      arguments after a leading mapping are ignored.
    - A single list or tuple is addressed by index, like positional values.
    - Any other first argument (None, a bool, an object) has no keys, so the
      template is left unchanged.

    Returns:
        The tagged arguments, or None when there is nothing to substitute.

    Raises:
        TemplateArgumentError: If positional and keyword arguments are mixed.
    """
    if args and kwargs:
        raise TemplateArgumentError("Cannot mix positional and named template arguments")
    if kwargs:
        return named(**kwargs)
    if not args:
        return None
    head = args[0]
    if isinstance(head, _SCALAR_TYPES) and not isinstance(head, bool):
        return positional(*args)
    if isinstance(head, Mapping):
        if len(args) > 1:
            logger.trace("Ignoring arguments after a mapping", ignored=len(args) - 1)
        return named(head)
    if len(args) == 1 and isinstance(head, Sequence) and not isinstance(head, (bytes, bytearray)):
        return positional(*head)
    logger.trace("Template argument has no keys", kind=type(head).__name__)
    return None


def placeholders(template: str) -> list[str]:
    """List the distinct placeholder names in ``template``, in order."""
    seen: dict[str, None] = {}
    for match in PLACEHOLDER_PATTERN.finditer(template):
        seen.setdefault(match.group(1), None)
    return list(seen)


def format_template(
    template: str,
    arguments: TemplateArguments | None = None,
    *,
    replace_all: bool = False,
) -> str:
    """Substitute placeholders in ``template``.

    Args:
        template: Text containing ``{key}`` or ``{index}`` placeholders.
        arguments: Positional or named values. None is a no-op.
        replace_all: Replace every occurrence of a placeholder instead of
            only the first one.

    Returns:
        The formatted text.
    """
    if arguments is None:
        return template

    values = arguments.as_mapping()
    if not values:
        logger.trace("No template arguments, returning template unchanged")
        return template

    used: set[str] = set()

    def _substitute(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in values:
            logger.trace("Unmatched placeholder left as text", placeholder=key)
            return match.group(0)
        if key in used and not replace_all:
            return match.group(0)
        used.add(key)
        return str(values[key])

    return PLACEHOLDER_PATTERN.sub(_substitute, template)


class TemplateFormatter:
    """Formats templates with fixed substitution options.

    Attributes:
        replace_all: Replace every occurrence of each placeholder.
    """

    def __init__(self, replace_all: bool = False) -> None:
        self.replace_all = replace_all

    def format(self, template: str, arguments: TemplateArguments | None = None) -> str:
        """Substitute placeholders in ``template``; see ``format_template``."""
        return format_template(template, arguments, replace_all=self.replace_all)

    def placeholders(self, template: str) -> list[str]:
        """List the distinct placeholder names in ``template``, in order."""
        return placeholders(template)
