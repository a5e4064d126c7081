# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Character-class trimming.

Trims an arbitrary set of characters from the start, the end, or both ends
of a string. The set is escaped and compiled into a regular-expression
character class, so characters such as ``-`` or ``^`` are always matched
literally and never read as a range or a negation.

Example:
    >>> trim("#!#!Hey!#!#!", "#!")
    'Hey'
    >>> trim_start("#!#!Hey!#!#!", "#!")
    'Hey!#!#!'
"""

import re
from functools import lru_cache
from typing import NamedTuple

from loguru import logger

from primkit.core.constants import CHARSET_SPECIAL_CHARS, DEFAULT_TRIM_CHARS


class TrimPatterns(NamedTuple):
    """Compiled patterns for one charset."""

    start: re.Pattern[str]
    end: re.Pattern[str]
    both: re.Pattern[str]


def escape_charset(chars: str) -> str:
    """Escape characters so they are literal inside a character class.

    Args:
        chars: Characters to escape.

    Returns:
        The characters with every special one prefixed by a backslash.
    """
    return "".join(f"\\{c}" if c in CHARSET_SPECIAL_CHARS else c for c in chars)


@lru_cache(maxsize=128)
def _compile(chars: str) -> TrimPatterns:
    char_class = f"[{escape_charset(chars)}]+"
    logger.trace("Compiled trim pattern", char_class=char_class)
    return TrimPatterns(
        start=re.compile(rf"^{char_class}"),
        end=re.compile(rf"{char_class}\Z"),
        both=re.compile(rf"^{char_class}|{char_class}\Z"),
    )


def compile_charset(chars: str | None = None) -> TrimPatterns:
    """Return the compiled patterns for a charset.

    Order and duplicates in ``chars`` do not matter; the normalized set is
    the cache key.

    Args:
        chars: Trimmable characters. None or empty means DEFAULT_TRIM_CHARS.

    Returns:
        Patterns anchored at the start, at the end, and at both ends.
    """
    if not chars:
        chars = DEFAULT_TRIM_CHARS
    return _compile("".join(sorted(set(chars))))


class PatternTrimmer:
    """Trims a configurable default charset from strings.

    Attributes:
        default_chars: Charset used when a call passes none.
    """

    def __init__(self, default_chars: str | None = None) -> None:
        """Initialize the trimmer.

        Args:
            default_chars: Charset used when a call passes none. None or empty
                means DEFAULT_TRIM_CHARS.
        """
        self.default_chars = default_chars or DEFAULT_TRIM_CHARS

    def _patterns(self, chars: str | None) -> TrimPatterns:
        if not chars:
            if chars is not None:
                logger.debug("Empty trim charset, using default", default=self.default_chars)
            chars = self.default_chars
        return compile_charset(chars)

    def trim(self, text: str, chars: str | None = None) -> str:
        """Remove charset characters from both ends of ``text``."""
        return self._patterns(chars).both.sub("", text)

    def trim_start(self, text: str, chars: str | None = None) -> str:
        """Remove charset characters from the start of ``text``."""
        return self._patterns(chars).start.sub("", text, count=1)

    def trim_end(self, text: str, chars: str | None = None) -> str:
        """Remove charset characters from the end of ``text``."""
        return self._patterns(chars).end.sub("", text, count=1)


_default_trimmer = PatternTrimmer()


def trim(text: str, chars: str | None = None) -> str:
    """Trim ``chars`` (default: whitespace set) from both ends of ``text``.

    Args:
        text: String to trim.
        chars: Trimmable characters, treated as a set.

    Returns:
        The trimmed string; empty if ``text`` held only trimmable characters.
    """
    return _default_trimmer.trim(text, chars)


def trim_start(text: str, chars: str | None = None) -> str:
    """Trim ``chars`` (default: whitespace set) from the start of ``text``."""
    return _default_trimmer.trim_start(text, chars)


def trim_end(text: str, chars: str | None = None) -> str:
    """Trim ``chars`` (default: whitespace set) from the end of ``text``."""
    return _default_trimmer.trim_end(text, chars)
