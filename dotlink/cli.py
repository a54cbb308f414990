#!/usr/bin/env python3
"""
Dotfiles Linking CLI

Symlinks every ".symlink" entry of the dotfiles directory into the home directory.

Examples:\n

    dotlink                               # Link ~/.dotfiles into ~

    dotlink --dotfiles src/dots           # Link ~/src/dots into ~

    dotlink --dotfiles /srv/dots -v       # Absolute path, debug logging

    dotlink --dry-run -v                  # Show what would be linked
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import find_dotenv, load_dotenv
from loguru import logger
from typing_extensions import Annotated

from dotlink.contexts.linking import LinkerError, link_dotfiles
from dotlink.utils.logger import setup_logger
from dotlink.utils.paths import DEFAULT_DOTFILES, resolve_dotfiles_path, resolve_home_dir

load_dotenv(find_dotenv(usecwd=True))
DEFAULT_LOG_FILE = os.getenv("DOTLINK_LOG_FILE")

app = typer.Typer(
    help="Symlink a dotfiles directory into the home directory",
    add_completion=False,
)


@app.command()
def main(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Turn on verbose logging",
        ),
    ] = False,
    dotfiles: Annotated[
        str,
        typer.Option(
            "--dotfiles",
            "-d",
            help="Path to dotfiles to link. If relative, assumed to be relative to user's home directory.",
        ),
    ] = DEFAULT_DOTFILES,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Report what would be linked without creating directories or links",
        ),
    ] = False,
    log_file: Annotated[
        Optional[Path],
        typer.Option(
            "--log-file",
            help="Also write debug-level logs to this file",
        ),
    ] = Path(DEFAULT_LOG_FILE) if DEFAULT_LOG_FILE else None,
):
    """
    Link dotfiles into the home directory.

    Every entry whose name ends in ".symlink" gets a link at the same relative
    path under the home directory, minus the suffix. Existing files and links
    pointing elsewhere are reported and left untouched.

    Examples:\n

        $ dotlink                         # Link ~/.dotfiles

        $ dotlink -d /srv/dots -v         # Link /srv/dots with debug logging

        $ dotlink --dry-run -v            # Preview without touching anything
    """
    setup_logger(verbose=verbose, log_file=log_file)

    try:
        home_dir = resolve_home_dir()
        dots_path = resolve_dotfiles_path(dotfiles, home_dir)
        logger.debug(f"dotsPath: {dots_path}")
        logger.debug(f"homeDir: {home_dir}")

        link_dotfiles(dots_path, home_dir, dry_run=dry_run)
    except LinkerError as e:
        logger.bind(error=e.original_error or e.path).error(e.message)
        raise typer.Exit(code=1)

    raise typer.Exit(code=0)


if __name__ == "__main__":
    app()
