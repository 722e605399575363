"""Nodes of a directory tree, each holding its children in sorted order."""

from __future__ import annotations

from collections.abc import Iterator

from dirtree.dynarray import DynArray
from dirtree.errors import AlreadyInTreeError, ConflictingPathError, NoSuchPathError
from dirtree.path import Path


def _compare_nodes(first: Node, second: Node) -> int:
    return first.compare(second)


def _compare_node_to_string(node: Node, text: str) -> int:
    return node.path.compare_string(text)


class Node:
    """A directory in a tree, linked to its parent and its sorted children."""

    __slots__ = ("_path", "_parent", "_children")

    def __init__(self, path: Path, parent: Node | None = None) -> None:
        """Create a node for path and link it under parent.

        Raises ConflictingPathError if parent's path is not an ancestor of
        path, NoSuchPathError if path is not exactly one level below parent
        (or, without a parent, is not of depth 1), and AlreadyInTreeError if
        parent already has a child with this path.
        """
        new_path = path.dup()
        index = 0
        if parent is not None:
            parent_depth = parent.path.depth
            if new_path.shared_prefix_depth(parent.path) < parent_depth:
                raise ConflictingPathError(
                    new_path.pathname,
                    f"{parent.path.pathname!r} is not an ancestor of "
                    f"{new_path.pathname!r}",
                )
            if new_path.depth != parent_depth + 1:
                raise NoSuchPathError(
                    new_path.pathname,
                    f"{parent.path.pathname!r} is not the direct parent of "
                    f"{new_path.pathname!r}",
                )
            found, index = parent.has_child(new_path)
            if found:
                raise AlreadyInTreeError(new_path.pathname)
        elif new_path.depth != 1:
            raise NoSuchPathError(
                new_path.pathname,
                f"a node without a parent must have depth 1: "
                f"{new_path.pathname!r}",
            )

        self._path = new_path
        self._parent = parent
        self._children = DynArray(0)
        if parent is not None:
            parent._children.add_at(index, self)

    def free(self) -> int:
        """Remove this node and its whole subtree; return how many nodes went."""
        if self._parent is not None:
            found, index = self._parent._children.bsearch(self, _compare_nodes)
            if found:
                self._parent._children.remove_at(index)
            self._parent = None

        count = 0
        while len(self._children):
            count += self._children[0].free()
        return count + 1

    @property
    def path(self) -> Path:
        """The node's absolute path."""
        return self._path

    @property
    def parent(self) -> Node | None:
        """The parent node, or None for a root."""
        return self._parent

    def has_child(self, path: Path) -> tuple[bool, int]:
        """Look for a child with the given path.

        Returns (True, child_id) when such a child exists, otherwise
        (False, child_id) where child_id is where it would be inserted.
        """
        return self._children.bsearch(path.pathname, _compare_node_to_string)

    @property
    def num_children(self) -> int:
        """The number of children."""
        return len(self._children)

    def child(self, child_id: int) -> Node:
        """Return the child with identifier child_id.

        Raises NoSuchPathError if there is no such child.
        """
        if not 0 <= child_id < len(self._children):
            raise NoSuchPathError(
                self._path.pathname,
                f"{self._path.pathname!r} has no child number {child_id}",
            )
        return self._children[child_id]

    @property
    def children(self) -> tuple[Node, ...]:
        """The children, in lexicographic order of their paths."""
        return tuple(self._children)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._children.to_list())

    def compare(self, other: Node) -> int:
        """Compare by path: negative, zero or positive."""
        return self._path.compare(other._path)

    def __str__(self) -> str:
        return self._path.pathname

    def __repr__(self) -> str:
        return f"Node({self._path.pathname!r})"