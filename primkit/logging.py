# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Logging configuration for the primkit CLI.

Library modules only emit through loguru's ``logger``; nothing is configured
on import. The CLI calls ``configure_logging`` once at startup.
"""

import sys
from typing import TYPE_CHECKING

from loguru import logger


if TYPE_CHECKING:
    from loguru import Record


COLORS = {
    "amber": "#E0A458",  # Warnings
    "green": "#6A994E",  # Success
    "muted": "#8D99AE",  # Secondary text, debug
    "faint": "#5C677D",  # Separators, trace
    "light": "#EDF2F4",  # Primary text
    "red": "#BC4749",  # Errors
    "blue": "#4EA8DE",  # Info
}

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

LEVEL_COLORS = {
    "TRACE": COLORS["faint"],
    "DEBUG": COLORS["muted"],
    "INFO": COLORS["blue"],
    "SUCCESS": COLORS["green"],
    "WARNING": COLORS["amber"],
    "ERROR": COLORS["red"],
    "CRITICAL": COLORS["red"],
}

# Clone and trim extras can carry whole values; keep one line per record
MAX_EXTRA_LENGTH = 80


def _shorten(value: object) -> str:
    """Return the repr of value, cut to MAX_EXTRA_LENGTH characters."""
    text = repr(value)
    if len(text) > MAX_EXTRA_LENGTH:
        text = text[: MAX_EXTRA_LENGTH - 1] + "…"
    return text


def _log_format(record: "Record") -> str:
    """Build the loguru format string for one record.

    Structured extras are appended as ``key=value`` pairs, each value
    shortened to ``MAX_EXTRA_LENGTH`` characters.

    Args:
        record: Loguru record containing log metadata, message, and level.

    Returns:
        Format string with loguru color tags.
    """
    level = record["level"].name

    color = f"<fg {LEVEL_COLORS.get(level, COLORS['light'])}>"
    close = "</>"
    level_close = close
    if level == "CRITICAL":
        color += "<bold>"
        level_close += close

    # Format: timestamp | level | module | message [extra]
    fmt = (
        f"<fg {COLORS['muted']}>{{time:HH:mm:ss}}{close}"
        f" <fg {COLORS['faint']}>│{close} "
        f"{color}{{level: <8}}{level_close}"
        f"<fg {COLORS['faint']}>│{close} "
        f"<fg {COLORS['muted']}>{{name}}{close}"
        f"<fg {COLORS['faint']}>:{close}"
        f"<fg {COLORS['light']}>{{message}}{close}"
    )

    extra = record["extra"]
    if extra:
        extra_str = " ".join(f"{k}={_shorten(v)}" for k, v in extra.items())
        # Escape braces to prevent loguru format string injection
        extra_str = extra_str.replace("{", "{{").replace("}", "}}")
        # Escape tags so reprs like "<class ...>" are not read as colors
        extra_str = extra_str.replace("<", r"\<")
        fmt += f" <fg {COLORS['muted']}>│ {extra_str}{close}"

    fmt += "\n"

    if record["exception"]:
        fmt += "{exception}\n"

    return fmt


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default handler with the primkit stderr handler.

    Args:
        level: Minimum log level to display (e.g., "DEBUG", "INFO", "WARNING").
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=_log_format,
        colorize=True,
    )
