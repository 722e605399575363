"""An in-memory hierarchy of directories addressed by absolute paths."""

__version__ = "0.1.0"
__all__ = ["checker", "dynarray", "errors", "node", "path", "tree"]