"""Home directory and dotfiles path resolution."""

import os
from pathlib import Path
from typing import Union

from dotenv import find_dotenv, load_dotenv

from dotlink.contexts.linking.exceptions import HomeDirectoryError

# .env is looked up from the working directory upwards, not from the install location
load_dotenv(find_dotenv(usecwd=True))
DEFAULT_DOTFILES = os.getenv("DOTLINK_DOTFILES", ".dotfiles")


def resolve_home_dir() -> Path:
    """
    Return the current user's home directory.

    Raises:
        HomeDirectoryError: If the platform cannot determine it
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError, OSError) as e:
        raise HomeDirectoryError("Unable to get users homedir", original_error=e)

    # Path.home() falls back to "~" unexpanded when nothing resolves it
    if not home.is_absolute():
        raise HomeDirectoryError("Unable to get users homedir", path=home)

    return home


def resolve_dotfiles_path(dotfiles: Union[str, Path], home_dir: Path) -> Path:
    """
    Resolve the dotfiles directory.

    Absolute values are used as-is; relative values are taken relative to the
    home directory (not the working directory).

    Examples:
        resolve_dotfiles_path(".dotfiles", Path("/home/me"))   # /home/me/.dotfiles
        resolve_dotfiles_path("/srv/dots", Path("/home/me"))   # /srv/dots
        resolve_dotfiles_path("../dots", Path("/home/me"))     # /home/dots
    """
    dotfiles = Path(os.path.expanduser(str(dotfiles)))

    if dotfiles.is_absolute():
        return dotfiles

    # ".." components are collapsed so link targets carry no "/home/me/../"
    return Path(os.path.normpath(Path(home_dir) / dotfiles))
