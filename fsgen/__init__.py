"""
fsgen — write a directory's structure as a Unicode tree diagram.

This package renders a directory hierarchy the way the Unix ``tree`` command
does, with name-based skip lists for directories and files and an option to
hide files entirely. Listing errors are reported inline in the output rather
than aborting the traversal.

The API accepts ``str`` or ``os.PathLike`` roots, has no third-party
dependencies, and is deterministic: the same tree and filters always produce
the same output.
"""

from __future__ import annotations

from .tree import DirectoryEntry, RenderContext, iter_tree, path_tree, render

__all__ = ["DirectoryEntry", "RenderContext", "iter_tree", "path_tree", "render"]
