"""Exceptions raised by the directory tree and its supporting types."""

from __future__ import annotations


class TreeError(Exception):
    """Base class for every error reported by a directory tree operation."""

    description = "directory tree error"

    def __init__(self, pathname: str | None = None, message: str | None = None) -> None:
        self.pathname = pathname
        if message is None:
            if pathname is None:
                message = self.description
            else:
                message = f"{self.description}: {pathname!r}"
        super().__init__(message)


class InitializationError(TreeError, RuntimeError):
    """The tree is not in the state the operation requires."""

    description = "tree is not in the required initialization state"


class AlreadyInTreeError(TreeError):
    """The path being inserted is already present."""

    description = "path is already in the tree"


class NoSuchPathError(TreeError, LookupError):
    """The requested path does not exist."""

    description = "no such path"


class ConflictingPathError(TreeError):
    """The path does not lie under the tree's root, or clashes with it."""

    description = "path conflicts with the tree's root"


class BadPathError(TreeError, ValueError):
    """The path string is not well formed."""

    description = "badly formed path"


class NotDirectoryError(TreeError):
    """The path names something that is not a directory."""

    description = "not a directory"


class NotFileError(TreeError):
    """The path names something that is not a file."""

    description = "not a file"