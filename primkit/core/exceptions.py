# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Exceptions raised by primkit."""


class PrimkitError(Exception):
    """Base exception for all primkit errors."""


class ConfigurationError(PrimkitError):
    """Raised when settings cannot be loaded or fail validation.

    Attributes:
        path: Settings file the error relates to, if any.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize ConfigurationError.

        Args:
            message: Human-readable description of the problem.
            path: Settings file the error relates to (optional).
        """
        self.path = path
        if path:
            message = f"{message} ({path})"
        super().__init__(message)


class TemplateArgumentError(PrimkitError, TypeError):
    """Raised when template arguments mix positional and named values."""
