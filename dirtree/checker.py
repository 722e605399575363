"""Invariant checks for a directory tree and its nodes."""

from __future__ import annotations

import sys
from typing import Any

from dirtree.errors import NoSuchPathError


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def node_is_valid(node: Any) -> bool:
    """Return True if node is in a valid state; explain on stderr if not."""
    if node is None:
        _report("A node is a NULL pointer")
        return False

    parent = node.parent
    if parent is not None:
        node_path = node.path
        parent_path = parent.path
        if node_path.shared_prefix_depth(parent_path) != node_path.depth - 1:
            _report(
                f"P-C nodes don't have P-C paths: "
                f"({parent_path.pathname}) ({node_path.pathname})"
            )
            return False

    return True


def _tree_is_valid(node: Any) -> bool:
    if node is None:
        return True
    if not node_is_valid(node):
        return False
    for index in range(node.num_children):
        try:
            child = node.child(index)
        except NoSuchPathError:
            _report("getNumChildren claims more children than getChild returns")
            return False
        if not _tree_is_valid(child):
            return False
    return True


def is_valid(is_initialized: bool, root: Any, count: int) -> bool:
    """Return True if the hierarchy rooted at root is in a valid state.

    Explains the first broken invariant on stderr otherwise.
    """
    if not is_initialized and count != 0:
        _report("Not initialized, but count is not 0")
        return False
    return _tree_is_valid(root)