# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Small string predicates and transforms."""

from collections.abc import Container
from typing import Any


def contains(haystack: str | Container[Any], needle: Any) -> bool:
    """Test whether a string holds a substring, or a container an item.

    Example:
        >>> contains("Quick brown fox", "brown")
        True
        >>> contains(["Blue", "Red", "Green"], "Red")
        True
    """
    return needle in haystack


def ends_with(text: str, suffix: str) -> bool:
    """Test whether text ends with suffix."""
    return text.endswith(suffix)


def capitalize(text: str) -> str:
    """Upper-case the first character and leave the rest untouched.

    Unlike str.capitalize the remaining characters keep their case.

    Example:
        >>> capitalize("hello World!")
        'Hello World!'
    """
    return text[:1].upper() + text[1:]


def reverse(text: str) -> str:
    """Reverse a string."""
    return text[::-1]
