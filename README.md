# dirtree

`dirtree` keeps an in-memory hierarchy of directories. Every directory is
named by an absolute path such as `root/child/grandchild`, and the tree has
exactly one root.

## Installing

```
pip install .
```

## Using the tree

```python
from dirtree.tree import DirectoryTree
from dirtree.errors import ConflictingPathError

tree = DirectoryTree()
tree.init()

tree.insert("a/y")          # also creates "a"
tree.insert("a/x")
print(tree.to_string())     # "a\na/x\na/y\n"

"a/x" in tree               # True
tree.contains("a/z")        # False
len(tree)                   # 3

try:
    tree.insert("other")    # a second root is not allowed
except ConflictingPathError:
    pass

tree.rm("a/x")              # removes a/x and everything beneath it
tree.destroy()
```

A `DirectoryTree` starts uninitialized. `init` makes it usable and empty;
`destroy` discards its contents and returns it to the uninitialized state.

- `insert(pathname)` creates the directory and every missing ancestor.
- `rm(pathname)` removes the directory and its whole subtree. Removing the
  root leaves the tree initialized and empty.
- `contains(pathname)` (and the `in` operator) returns `False` on any error,
  including an uninitialized tree or a malformed path.
- `to_string()` (and `str(tree)`) lists the directories depth first, with
  siblings in lexicographic order, one path per line, each followed by a
  newline. An empty tree gives `""`.
- `len(tree)` is the number of directories held.

## Paths

A path is valid when it is not empty, does not begin or end with `/`, and
has no two `/` in a row. Invalid paths raise `BadPathError`.

```python
from dirtree.path import Path

p = Path("Charles/William/George")
p.depth                                      # 3
p.components                                 # ("Charles", "William", "George")
p.component(1)                               # "William"
p.component(5)                               # None
str(p.prefix(2))                             # "Charles/William"
p.shared_prefix_depth(Path("Charles/Harry")) # 1
p.compare(Path("Charles"))                   # positive
len(p)                                       # 22, the length of the pathname
```

`prefix(depth)` raises `NoSuchPathError` when `depth` is 0 or larger than the
path's depth; `dup()` returns a copy. Paths compare, sort and hash by their
pathname string.

## Errors

All errors derive from `dirtree.errors.TreeError`, which keeps the offending
path in its `pathname` attribute:

- `InitializationError`: the tree is used before `init` or after `destroy`,
  or `init` is called twice.
- `BadPathError` (also a `ValueError`): the path is malformed.
- `ConflictingPathError`: the path does not lie under the existing root.
- `AlreadyInTreeError`: the directory already exists.
- `NoSuchPathError` (also a `LookupError`): the directory does not exist.

`NotDirectoryError` and `NotFileError` are defined as well, but nothing in
the package raises them.

## Supporting modules

- `dirtree.dynarray.DynArray`: a growable array with `add`, `add_at`,
  `remove_at`, `to_list`, `map`, `sort`, linear `search` and binary `bsearch`
  driven by a three-way comparison function. `bsearch` returns
  `(found, index)`, where `index` is the insertion point when not found.
- `dirtree.node.Node`: a single directory with its `path`, `parent`, sorted
  `children`, `num_children`, `child(child_id)`, `has_child(path)` and
  `free()`, which unlinks the node and returns how many nodes were removed.
- `dirtree.checker`: `node_is_valid(node)` and
  `is_valid(is_initialized, root, count)` check the tree's invariants and
  print an explanation to stderr when one is broken.

## What it does not do

The package holds directories only, in memory. It has no notion of files,
does not read or write the real file system, does not save the tree
anywhere, and provides no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```