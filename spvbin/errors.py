"""Error types raised by spvbin.

Every failure is fatal for a run; :func:`spvbin.cli.main` turns any
:class:`SpvbinError` into a message on stderr and exit status 1.
"""

from __future__ import annotations


class SpvbinError(Exception):
    """Base class for all spvbin failures."""

    exit_code = 1


class ConfigError(SpvbinError):
    """Missing or invalid command-line configuration (e.g. package name)."""


class NotFoundError(SpvbinError):
    def __init__(self, path: str):
        super().__init__(f"File {path} does not exist")
        self.path = path


class InvalidInputError(SpvbinError):
    """An input path or file content that cannot be embedded."""


class NoInputError(InvalidInputError):
    def __init__(self):
        super().__init__("No input files.")


class IdentifierCollisionError(InvalidInputError):
    def __init__(self, identifier: str, first: str, second: str):
        super().__init__(
            f"Files {first} and {second} both map to identifier '{identifier}'"
        )
        self.identifier = identifier
        self.paths = (first, second)


class FileIOError(SpvbinError):
    """Wraps an ``OSError`` together with the path and the failed action."""

    def __init__(self, action: str, path: str, cause: OSError):
        super().__init__(f"Error {action} {path}: {cause}")
        self.action = action
        self.path = path
        self.cause = cause
