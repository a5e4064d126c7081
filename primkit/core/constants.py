# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Shared constants."""

# BOM, NBSP, space, LF, CR
DEFAULT_TRIM_CHARS = "\ufeff\xa0 \n\r"

# Characters escaped with a backslash before use inside a character class.
CHARSET_SPECIAL_CHARS = frozenset("-/\\^$*+?.()|[]{}")
