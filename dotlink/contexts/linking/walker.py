"""
Source tree traversal.

Lazily yields every entry below the dotfiles directory, depth-first and in
pre-order. Unreadable directories are yielded with their error attached so the
caller can report them and keep going.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from dotlink.contexts.linking.exceptions import SourceTreeError


@dataclass(frozen=True)
class WalkEntry:
    """
    A single visited entry of the source tree.

    Attributes:
        path: Absolute path of the entry
        is_dir: Whether the entry is a directory (symlinks are never directories here)
        error: Traversal error for this entry, None when it was read normally
    """

    path: Path
    is_dir: bool = False
    error: Optional[OSError] = None

    @property
    def name(self) -> str:
        return self.path.name


def iter_entries(root: Path) -> Iterator[WalkEntry]:
    """
    Walk the tree rooted at root.

    The root is yielded first, then the entries of each directory in lexical
    order, descending into a directory right after yielding it. Symbolic links
    are yielded but never followed.

    Args:
        root: Directory to walk

    Raises:
        SourceTreeError: If root does not exist or is not a directory. Raised
            on the first next() call, before anything is yielded.
    """
    root = Path(root)
    try:
        is_dir = root.is_dir()
    except OSError as e:
        raise SourceTreeError("Unable to walk dotfiles directory", path=root, original_error=e)
    if not is_dir:
        raise SourceTreeError("Unable to walk dotfiles directory: not a directory", path=root)

    yield WalkEntry(root, is_dir=True)
    yield from _walk_dir(root)


def _walk_dir(directory: Path) -> Iterator[WalkEntry]:
    try:
        with os.scandir(directory) as it:
            children = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        yield WalkEntry(directory, is_dir=True, error=e)
        return

    for child in children:
        path = Path(child.path)
        try:
            child_is_dir = child.is_dir(follow_symlinks=False)
        except OSError as e:
            yield WalkEntry(path, error=e)
            continue

        yield WalkEntry(path, is_dir=child_is_dir)
        if child_is_dir:
            yield from _walk_dir(path)
