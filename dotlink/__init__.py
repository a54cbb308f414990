"""
dotlink - Symlink a dotfiles directory into the home directory

Every entry of the dotfiles directory whose name ends in ".symlink" is linked
into the home directory at the same relative location, with the suffix removed.

Architecture:
- Linking Context: Source tree walk, path mapping, link creation and conflict handling
- Utils: Logger setup, home and dotfiles path resolution
"""

__version__ = "0.1.0"
