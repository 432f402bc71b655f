# fsgen/tree.py

"""
Filesystem tree rendering.

This module renders a directory structure as a human-readable Unicode tree,
similar to the Unix ``tree`` command, one line per visible entry.

Traversal is deterministic (directories first, then case-sensitive name
order) and filtering is name-based: directories listed in ``skip_dirs`` are
pruned with their whole subtree, files listed in ``skip_files`` are hidden,
and ``show_files=False`` hides every file. Symbolic links are never
followed.

A directory that cannot be listed does not abort the traversal; it is
reported inline as an ``Error reading directory`` line in place of its
children.

The main entry point is :func:`render`, which writes the tree to a text
sink. :func:`iter_tree` yields the same lines lazily and :func:`path_tree`
returns them as a single string.
"""


from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


class Writer(Protocol):
    def write(self, s: str, /) -> object: ...


@dataclass(frozen=True)
class DirectoryEntry:
    """A single child of a listed directory."""

    name: str
    is_directory: bool
    path: Path


@dataclass(frozen=True)
class Listing:
    """
    Outcome of listing one directory.

    Exactly one of ``entries`` (success) or ``error`` (failure message) is
    meaningful; check :attr:`ok` before using ``entries``.
    """

    entries: tuple[DirectoryEntry, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class RenderContext:
    """
    Filters and indentation carried down one level of the traversal.

    Parameters
    ----------
    skip_dirs : frozenset[str]
        Directory names to prune, matched against the final path component.
    skip_files : frozenset[str]
        File names to hide, matched against the final path component.
    show_files : bool
        If ``False``, no file entry is rendered at all.
    prefix : str
        Indentation drawn before the connector of every entry at this level.
    """

    skip_dirs: frozenset[str] = frozenset()
    skip_files: frozenset[str] = frozenset()
    show_files: bool = True
    prefix: str = ""

    def descend(self, last: bool) -> RenderContext:
        """Return the context for the children of an entry."""
        return replace(self, prefix=self.prefix + (SPACE if last else PIPE))


def is_dir(p: Path) -> bool:
    """
    Safely determine whether a path refers to a directory.

    This helper wraps ``Path.is_dir()`` to guard against filesystem-related
    errors (e.g. permission issues), returning ``False`` if the directory
    status cannot be determined.

    Parameters
    ----------
    p : pathlib.Path
        Path to test.

    Returns
    -------
    bool
        ``True`` if the path is a directory, ``False`` otherwise.
    """

    try:
        return p.is_dir()
    except OSError:
        return False


def display_name(p: Path) -> str:
    # Undecodable bytes in a name become U+FFFD instead of lone surrogates.
    return os.fsencode(p.name).decode("utf-8", errors="replace")


def sort_key(entry: DirectoryEntry) -> tuple[bool, str]:
    # Directories first, then plain code-point order of the name.
    return (not entry.is_directory, entry.name)


def make_entry(p: Path) -> DirectoryEntry:
    """
    Wrap a listed path as a :class:`DirectoryEntry`.

    Symbolic links are not followed: a link to a directory counts as a file.

    Raises
    ------
    OSError
        If the entry itself cannot be inspected (``Path.is_symlink``).
    """

    return DirectoryEntry(display_name(p), is_dir(p) and not p.is_symlink(), p)


def list_entries(d: Path) -> Listing:
    """
    List the immediate children of a directory in stable tree order.

    A directory that cannot be read yields a failed listing. An individual
    child that cannot be inspected is dropped and the rest are kept.

    Parameters
    ----------
    d : pathlib.Path
        Directory whose children should be listed.

    Returns
    -------
    Listing
        The sorted entries, or the error message if the directory could not
        be read.
    """

    try:
        children = list(d.iterdir())
    except OSError as exc:
        return Listing(error=str(exc))

    entries: list[DirectoryEntry] = []
    for child in children:
        try:
            entries.append(make_entry(child))
        except OSError as exc:
            logger.debug("Skipping unreadable entry %s: %s", child, exc)
    entries.sort(key=sort_key)
    return Listing(entries=tuple(entries))


def is_visible(entry: DirectoryEntry, ctx: RenderContext) -> bool:
    if entry.is_directory:
        return entry.name not in ctx.skip_dirs
    return ctx.show_files and entry.name not in ctx.skip_files


def format_line(prefix: str, name: str, last: bool) -> str:
    return prefix + (LAST_BRANCH if last else BRANCH) + name


def root_label(root: str | os.PathLike[str]) -> str:
    """
    Return the header line for ``root``: its base name, or ``"."``.

    ``Path.name`` semantics apply, so trailing separators and a trailing
    ``"."`` are ignored. Paths with no final component (``"."``, ``"/"``) or
    ending in ``".."`` are labelled ``"."``.
    """

    p = Path(root)
    if p.name in ("", ".."):
        return "."
    return display_name(p)


def iter_tree(
    root: str | os.PathLike[str],
    *,
    skip_dirs: Iterable[str] = (),
    skip_files: Iterable[str] = (),
    show_files: bool = True,
) -> Iterator[str]:
    """
    Yield the lines of the rendered tree rooted at ``root``.

    The first line is :func:`root_label` of ``root``; the root itself is never
    filtered. Every following line is ``{prefix}{connector}{name}``, emitted
    in depth-first order.

    Parameters
    ----------
    root : str | os.PathLike
        Existing directory to render. It is not re-validated here.
    skip_dirs : Iterable[str], optional
        Names of directories to prune, at any depth below ``root``.
    skip_files : Iterable[str], optional
        Names of files to hide, at any depth below ``root``.
    show_files : bool, default=True
        Whether file entries are rendered.

    Yields
    ------
    str
        One rendered line, without a trailing newline.
    """

    ctx = RenderContext(
        skip_dirs=frozenset(skip_dirs),
        skip_files=frozenset(skip_files),
        show_files=show_files,
    )
    yield root_label(root)
    yield from _walk(Path(root), ctx)


def _walk(d: Path, ctx: RenderContext) -> Iterator[str]:
    logger.debug("Listing %s", d)
    listing = list_entries(d)
    if not listing.ok:
        logger.debug("Cannot read directory %s: %s", d, listing.error)
        yield f"{ctx.prefix}{BRANCH}Error reading directory: {listing.error}"
        return

    # Filter before deciding which entry is last so connectors match what is shown.
    visible = [e for e in listing.entries if is_visible(e, ctx)]
    n = len(visible)

    for i, entry in enumerate(visible):
        last = i == n - 1
        yield format_line(ctx.prefix, entry.name, last)
        if entry.is_directory:
            yield from _walk(entry.path, ctx.descend(last))


def render(
    root: str | os.PathLike[str],
    skip_dirs: Iterable[str],
    skip_files: Iterable[str],
    show_files: bool,
    sink: Writer,
) -> None:
    """
    Write the tree rooted at ``root`` to ``sink``, one line at a time.

    Listing failures inside the tree are written as lines and never raised.
    Errors raised by ``sink.write`` propagate unchanged.

    Parameters
    ----------
    root : str | os.PathLike
        Existing directory to render.
    skip_dirs : Iterable[str]
        Names of directories to prune.
    skip_files : Iterable[str]
        Names of files to hide.
    show_files : bool
        Whether file entries are rendered.
    sink : Writer
        Text stream receiving each line followed by ``"\\n"``.
    """

    for line in iter_tree(
        root, skip_dirs=skip_dirs, skip_files=skip_files, show_files=show_files
    ):
        sink.write(line + "\n")


def path_tree(
    root: str | os.PathLike[str],
    *,
    skip_dirs: Iterable[str] = (),
    skip_files: Iterable[str] = (),
    show_files: bool = True,
) -> str:
    """
    Render the tree rooted at ``root`` and return it as a single string.

    Lines are joined with ``"\\n"``; there is no trailing newline.
    """

    return "\n".join(
        iter_tree(
            root, skip_dirs=skip_dirs, skip_files=skip_files, show_files=show_files
        )
    )
