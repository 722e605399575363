"""A hierarchy of directories addressed by absolute '/'-separated paths."""

from __future__ import annotations

from collections.abc import Iterator

from dirtree import checker
from dirtree.errors import (
    AlreadyInTreeError,
    ConflictingPathError,
    InitializationError,
    NoSuchPathError,
    TreeError,
)
from dirtree.node import Node
from dirtree.path import Path


class DirectoryTree:
    """A directory tree with a single root and lexicographically ordered children.

    The tree starts uninitialized. ``init`` makes it usable and empty, and
    ``destroy`` discards its contents and returns it to the uninitialized
    state.
    """

    def __init__(self) -> None:
        self._initialized = False
        self._root: Node | None = None
        self._count = 0

    def _check(self) -> None:
        assert checker.is_valid(self._initialized, self._root, self._count)

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise InitializationError()

    def _traverse(self, path: Path) -> Node | None:
        """Walk from the root towards path as far as the tree allows.

        Returns the furthest node reached, or None if the tree is empty.
        Raises ConflictingPathError if the root is not a prefix of path.
        """
        if self._root is None:
            return None

        if self._root.path.compare(path.prefix(1)) != 0:
            raise ConflictingPathError(path.pathname)

        current = self._root
        for depth in range(2, path.depth + 1):
            found, child_id = current.has_child(path.prefix(depth))
            if not found:
                break
            current = current.child(child_id)
        return current

    def _find(self, pathname: str) -> Node:
        """Return the node with exactly this pathname.

        Raises InitializationError, BadPathError, ConflictingPathError or
        NoSuchPathError.
        """
        self._require_initialized()
        path = Path(pathname)
        found = self._traverse(path)
        if found is None or found.path.compare(path) != 0:
            raise NoSuchPathError(pathname)
        return found

    def init(self) -> None:
        """Put the tree into an initialized, empty state.

        Raises InitializationError if it is already initialized.
        """
        self._check()
        if self._initialized:
            raise InitializationError(
                message="directory tree is already initialized"
            )
        self._initialized = True
        self._root = None
        self._count = 0
        self._check()

    def destroy(self) -> None:
        """Remove all contents and return the tree to the uninitialized state.

        Raises InitializationError if the tree is not initialized.
        """
        self._check()
        self._require_initialized()
        if self._root is not None:
            self._count -= self._root.free()
            self._root = None
        self._initialized = False
        self._check()

    def insert(self, pathname: str) -> None:
        """Insert the directory pathname, creating any missing ancestors.

        Raises InitializationError if the tree is not initialized,
        BadPathError if pathname is malformed, ConflictingPathError if the
        root exists but is not a prefix of pathname, and AlreadyInTreeError
        if pathname is already present.
        """
        self._check()
        self._require_initialized()
        path = Path(pathname)

        current = self._traverse(path)
        if current is None and self._root is not None:
            raise ConflictingPathError(pathname)

        depth = path.depth
        if current is None:
            level = 1
        else:
            level = current.path.depth + 1
            if level == depth + 1 and path.compare(current.path) == 0:
                raise AlreadyInTreeError(pathname)

        first_new: Node | None = None
        new_nodes = 0
        try:
            while level <= depth:
                current = Node(path.prefix(level), current)
                new_nodes += 1
                if first_new is None:
                    first_new = current
                level += 1
        except TreeError:
            if first_new is not None:
                first_new.free()
            self._check()
            raise

        if self._root is None:
            self._root = first_new
        self._count += new_nodes
        self._check()

    def contains(self, pathname: str) -> bool:
        """Return True if the tree holds the directory pathname.

        Any error while looking, including an uninitialized tree or a
        malformed path, yields False.
        """
        try:
            self._find(pathname)
        except TreeError:
            return False
        return True

    def rm(self, pathname: str) -> None:
        """Remove the directory pathname and everything beneath it.

        Raises InitializationError, BadPathError, ConflictingPathError or
        NoSuchPathError.
        """
        self._check()
        node = self._find(pathname)
        self._count -= node.free()
        if self._count == 0:
            self._root = None
        self._check()

    def _preorder(self) -> Iterator[Node]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def to_string(self) -> str:
        """Return every pathname, depth first with siblings in order, one per line.

        Raises InitializationError if the tree is not initialized.
        """
        self._require_initialized()
        return "".join(f"{node.path.pathname}\n" for node in self._preorder())

    def __contains__(self, pathname: object) -> bool:
        if not isinstance(pathname, str):
            return False
        return self.contains(pathname)

    def __len__(self) -> int:
        return self._count

    def __str__(self) -> str:
        return self.to_string()