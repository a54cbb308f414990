"""
Shared utilities for dotlink.

- Logger setup with structured fields
- Home directory and dotfiles path resolution
"""

from dotlink.utils.paths import resolve_dotfiles_path, resolve_home_dir

__all__ = ["resolve_dotfiles_path", "resolve_home_dir"]
