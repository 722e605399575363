"""Absolute paths made of '/'-separated components."""

from __future__ import annotations

import functools

from dirtree.errors import BadPathError, NoSuchPathError

SEPARATOR = "/"


def _cmp(first: str, second: str) -> int:
    return (first > second) - (first < second)


@functools.total_ordering
class Path:
    """An immutable absolute path such as ``root/child/grandchild``."""

    __slots__ = ("_pathname", "_components")

    def __init__(self, pathname: str) -> None:
        components = tuple(pathname.split(SEPARATOR))
        # An empty component means the path was empty, began or ended with
        # the separator, or held two separators in a row.
        if any(not component for component in components):
            raise BadPathError(pathname)
        self._pathname = pathname
        self._components = components

    @classmethod
    def _from_components(cls, components: tuple[str, ...]) -> Path:
        path = cls.__new__(cls)
        path._components = components
        path._pathname = SEPARATOR.join(components)
        return path

    def prefix(self, depth: int) -> Path:
        """Return the ancestor path made of the first depth components.

        Raises NoSuchPathError if depth is 0 or exceeds this path's depth.
        """
        if depth <= 0 or depth > len(self._components):
            raise NoSuchPathError(
                self._pathname,
                f"no prefix of depth {depth} for {self._pathname!r}",
            )
        return Path._from_components(self._components[:depth])

    def dup(self) -> Path:
        """Return a copy of this path."""
        return self.prefix(self.depth)

    @property
    def pathname(self) -> str:
        """The string form of the path."""
        return self._pathname

    @property
    def depth(self) -> int:
        """The number of components in the path."""
        return len(self._components)

    @property
    def components(self) -> tuple[str, ...]:
        """The components of the path, root first."""
        return self._components

    def component(self, level: int) -> str | None:
        """Return the component at level (0 is the root), or None if absent."""
        if not 0 <= level < len(self._components):
            return None
        return self._components[level]

    def shared_prefix_depth(self, other: Path) -> int:
        """Return how many leading components this path shares with other."""
        shared = 0
        for mine, theirs in zip(self._components, other._components):
            if mine != theirs:
                break
            shared += 1
        return shared

    def compare(self, other: Path) -> int:
        """Compare pathnames: negative, zero or positive."""
        return _cmp(self._pathname, other._pathname)

    def compare_string(self, text: str) -> int:
        """Compare this pathname with text: negative, zero or positive."""
        return _cmp(self._pathname, text)

    def __len__(self) -> int:
        return len(self._pathname)

    def __str__(self) -> str:
        return self._pathname

    def __repr__(self) -> str:
        return f"Path({self._pathname!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._pathname == other._pathname

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._pathname < other._pathname

    def __hash__(self) -> int:
        return hash(self._pathname)