"""
Linking Context

Responsibilities:
- Walks the dotfiles directory
- Maps marker-suffixed entries to their place under the home directory
- Creates missing parent directories and symbolic links
- Reports conflicting entries without touching them

Owns: Symlink placement, conflict resolution
Never: Writes file contents, deletes or overwrites existing entries
"""

from dotlink.contexts.linking.exceptions import (
    DirectoryCreationError,
    HomeDirectoryError,
    LinkerError,
    PathMappingError,
    SourceTreeError,
)
from dotlink.contexts.linking.linker import MARKER_SUFFIX, LinkReport, Linker, link_dotfiles
from dotlink.contexts.linking.logger import LinkReporter
from dotlink.contexts.linking.walker import WalkEntry, iter_entries

__all__ = [
    "MARKER_SUFFIX",
    "DirectoryCreationError",
    "HomeDirectoryError",
    "LinkReport",
    "LinkReporter",
    "Linker",
    "LinkerError",
    "PathMappingError",
    "SourceTreeError",
    "WalkEntry",
    "iter_entries",
    "link_dotfiles",
]
