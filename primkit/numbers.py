# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Numeric checks."""

import math
from typing import Any


def is_nan(value: Any) -> bool:
    """Test whether value is not a number.

    The value is coerced with float() first, so numeric strings count as
    numbers and anything that cannot be coerced counts as NaN. None and
    blank text coerce to zero and are not NaN.

    Example:
        >>> is_nan("asd")
        True
        >>> is_nan("1.5")
        False
        >>> is_nan("")
        False
    """
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return True
    return math.isnan(number)
