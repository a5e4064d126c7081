# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Sequence slicing helpers and integer ranges."""

from collections.abc import Sequence
from typing import Any, overload


@overload
def first[T](seq: Sequence[T], amount: None = None) -> T | None: ...
@overload
def first[T](seq: Sequence[T], amount: int) -> list[T]: ...
def first[T](seq: Sequence[T], amount: int | None = None) -> T | list[T] | None:
    """Return the first item, or a list of the first amount items.

    Args:
        seq: Sequence to read from.
        amount: Number of items to return. When omitted the first item itself
            is returned (None for an empty sequence). Negative counts return
            an empty list.

    Example:
        >>> first(["Blue", "Red", "Green"])
        'Blue'
        >>> first(["Blue", "Red", "Green"], 2)
        ['Blue', 'Red']
    """
    if amount is None:
        return seq[0] if seq else None
    return list(seq[: max(0, amount)])


take = first


@overload
def last[T](seq: Sequence[T], amount: None = None) -> T | None: ...
@overload
def last[T](seq: Sequence[T], amount: int) -> list[T]: ...
def last[T](seq: Sequence[T], amount: int | None = None) -> T | list[T] | None:
    """Return the last item, or a list of the last amount items.

    Mirrors first: the items keep their original order.
    """
    if amount is None:
        return seq[-1] if seq else None
    if amount <= 0:
        return []
    return list(seq[-amount:])


def clone_sequence(seq: Sequence[Any]) -> list[Any]:
    """Return a shallow list copy of seq."""
    return list(seq)


def int_range(count: int, step: int = 1, start: int = 0) -> list[int]:
    """Generate count integers beginning at start, step apart.

    Example:
        >>> int_range(4, 2, 1)
        [1, 3, 5, 7]
    """
    return [start + i * step for i in range(max(0, count))]
