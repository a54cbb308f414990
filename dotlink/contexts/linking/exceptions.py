"""Fatal exceptions for the linking context."""

from pathlib import Path
from typing import Optional


class LinkerError(Exception):
    """
    Base exception for configuration-level failures that abort the whole run.

    Per-file problems are never raised; they are logged and the walk continues.

    Attributes:
        message: Error description
        path: Path the failure relates to (if any)
        original_error: The underlying OS error (if any)
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error

        parts = [message]

        if path is not None:
            parts.append(f"Path: {path}")

        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))


class HomeDirectoryError(LinkerError):
    """Raised when the current user's home directory cannot be determined."""

    pass


class SourceTreeError(LinkerError):
    """Raised when the dotfiles directory cannot be walked at all."""

    pass


class PathMappingError(LinkerError):
    """Raised when a source path cannot be mapped relative to the source root."""

    pass


class DirectoryCreationError(LinkerError):
    """Raised when the parent directory of a link cannot be created."""

    pass
