"""
Dotfile Linking Module

Walks a dotfiles directory and symlinks every entry tagged with the marker
suffix into the home directory, preserving the directory structure.
"""

import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotlink.contexts.linking.exceptions import DirectoryCreationError, PathMappingError
from dotlink.contexts.linking.logger import LinkReporter, log_run_result, log_run_start
from dotlink.contexts.linking.walker import WalkEntry, iter_entries

MARKER_SUFFIX = ".symlink"
DIR_MODE = 0o755


@dataclass
class LinkReport:
    """
    What a run did, mirroring what was logged.

    Attributes:
        linked: Destinations where a link was created (or would be, on dry runs)
        already_linked: Destinations already pointing at their source file
        conflicts: Destinations occupied by a file or by a link pointing elsewhere
        errors: Destinations that failed with a per-file error
        skipped_entries: Source entries the walk could not read
        dry_run: Whether the run was a dry run
    """

    linked: List[Path] = field(default_factory=list)
    already_linked: List[Path] = field(default_factory=list)
    conflicts: List[Path] = field(default_factory=list)
    errors: List[Path] = field(default_factory=list)
    skipped_entries: List[Path] = field(default_factory=list)
    dry_run: bool = False


def _make_parents(directory: Path) -> None:
    """
    Create directory and its missing ancestors, all with DIR_MODE.

    os.makedirs only applies its mode to the leaf, so each level is created here.
    """
    missing = []
    current = directory
    while not os.path.isdir(current) and current.parent != current:
        missing.append(current)
        current = current.parent

    for path in reversed(missing):
        try:
            os.mkdir(path, DIR_MODE)
        except FileExistsError:
            if not os.path.isdir(path):
                raise


def _blocking_ancestor(directory: Path) -> Optional[Path]:
    """Return the nearest existing ancestor of directory (itself included) if it is not a directory."""
    current = directory
    while not os.path.lexists(current) and current.parent != current:
        current = current.parent

    if os.path.isdir(current):
        return None
    return current


class Linker:
    """
    Links marker-suffixed entries of source_root into target_root.

    Fatal configuration problems raise a LinkerError subclass; everything that
    concerns a single file is reported and the walk continues.

    Example:
        linker = Linker(Path("/home/me/.dotfiles"), Path("/home/me"))
        report = linker.run()
    """

    def __init__(
        self,
        source_root: Path,
        target_root: Path,
        marker_suffix: str = MARKER_SUFFIX,
        reporter: Optional[LinkReporter] = None,
        dry_run: bool = False,
    ):
        self.source_root = Path(source_root)
        self.target_root = Path(target_root)
        self.marker_suffix = marker_suffix
        self.reporter = reporter if reporter is not None else LinkReporter()
        self.dry_run = dry_run
        self.report = LinkReport(dry_run=dry_run)

    def map_to_target_path(self, dots_file_path: Path) -> Path:
        """
        Map a source entry to the place its link lives under the target root.

        /d/a/b/c.txt.symlink with source root /d and target root /h maps to
        /h/a/b/c.txt.

        Raises:
            PathMappingError: If the path cannot be expressed relative to the source root
        """
        try:
            relative = os.path.relpath(dots_file_path, self.source_root)
        except ValueError as e:
            # Different drives on Windows
            raise PathMappingError(
                "Unable to get relative dots file path", path=dots_file_path, original_error=e
            )

        if relative == os.pardir or relative.startswith(os.pardir + os.sep):
            raise PathMappingError(
                "Unable to get relative dots file path: outside of dotfiles directory",
                path=dots_file_path,
            )

        if relative.endswith(self.marker_suffix):
            relative = relative[: -len(self.marker_suffix)]

        return self.target_root / relative

    def ensure_dir(self, home_path: Path) -> bool:
        """
        Create the missing parent directories of home_path.

        On dry runs nothing is created; a non-directory sitting where a parent
        directory should go is reported instead, and False tells the caller to
        skip the link.

        Raises:
            DirectoryCreationError: On anything but the directories already existing
        """
        if self.dry_run:
            blocker = _blocking_ancestor(home_path.parent)
            if blocker is not None:
                self.reporter.error(
                    "Would be unable to create target directory for symlink",
                    homePath=home_path,
                    path=blocker,
                )
                self.report.errors.append(home_path)
                return False
            return True

        try:
            _make_parents(home_path.parent)
        except OSError as e:
            raise DirectoryCreationError(
                "Unable to create target directory for symlink",
                path=home_path.parent,
                original_error=e,
            )
        return True

    def symlink_file(self, home_path: Path, dots_file_path: Path) -> None:
        """Create the link at home_path, resolving a conflict if something is already there."""
        if self.dry_run:
            if os.path.lexists(home_path):
                self.handle_existing_file(home_path, dots_file_path)
            else:
                self.reporter.info(
                    "Would symlink source file", dotsPath=dots_file_path, homePath=home_path
                )
                self.report.linked.append(home_path)
            return

        try:
            os.symlink(dots_file_path, home_path)
        except FileExistsError:
            self.handle_existing_file(home_path, dots_file_path)
        except OSError as e:
            self.reporter.error(
                "Unable to create symlink at homePath due to error", homePath=home_path, error=e
            )
            self.report.errors.append(home_path)
        else:
            self.reporter.info("Symlinked source file", dotsPath=dots_file_path, homePath=home_path)
            self.report.linked.append(home_path)

    def handle_existing_file(self, home_path: Path, dots_file_path: Path) -> None:
        """
        Decide what to do about an entry already sitting at home_path.

        - A symlink to dots_file_path: already linked, nothing to do.
        - A symlink elsewhere, or any other file: report it and leave it alone.
        """
        try:
            info = os.lstat(home_path)
        except OSError as e:
            self.reporter.error("Unable to stat existing file", homePath=home_path, error=e)
            self.report.errors.append(home_path)
            return

        if stat.S_ISLNK(info.st_mode):
            try:
                linked_target = os.readlink(home_path)
            except OSError as e:
                self.reporter.error(
                    "Unable to `readlink` on existing symlink", homePath=home_path, error=e
                )
                self.report.errors.append(home_path)
                return

            if linked_target != str(dots_file_path):
                self.reporter.warning(
                    "Existing file points to different target, not symlinking!",
                    homePath=home_path,
                    linkedTarget=linked_target,
                )
                self.report.conflicts.append(home_path)
            else:
                self.report.already_linked.append(home_path)
        else:
            self.reporter.debug("Existing file at path, not symlinking!", path=home_path)
            self.report.conflicts.append(home_path)

    def visit(self, entry: WalkEntry) -> None:
        """Act on a single entry produced by the walk."""
        if entry.error is not None:
            self.reporter.warning("Got an error visiting file", file=entry.path, error=entry.error)
            self.report.skipped_entries.append(entry.path)
            return

        # The root maps onto the target root itself; only its descendants are linked
        if entry.path == self.source_root:
            return

        # Narrower than a plain suffix match: an entry named exactly the suffix
        # would map onto its own parent directory's counterpart, so it is never linked
        if entry.name.endswith(self.marker_suffix) and entry.name != self.marker_suffix:
            home_path = self.map_to_target_path(entry.path)
            if self.ensure_dir(home_path):
                self.symlink_file(home_path, entry.path)

    def run(self) -> LinkReport:
        """
        Walk the source tree and link every marker-suffixed entry.

        Returns:
            LinkReport for this run

        Raises:
            LinkerError: On any fatal condition (unwalkable source tree, mapping
                failure, directory creation failure)
        """
        self.report = LinkReport(dry_run=self.dry_run)
        log_run_start(self.reporter, self.source_root, self.target_root, self.dry_run)

        for entry in iter_entries(self.source_root):
            self.visit(entry)

        log_run_result(self.reporter, self.report)
        return self.report


def link_dotfiles(
    source_root: Path,
    target_root: Path,
    marker_suffix: str = MARKER_SUFFIX,
    reporter: Optional[LinkReporter] = None,
    dry_run: bool = False,
) -> LinkReport:
    """
    Link every marker-suffixed entry of source_root into target_root.

    Convenience wrapper around Linker(...).run().
    """
    linker = Linker(
        source_root,
        target_root,
        marker_suffix=marker_suffix,
        reporter=reporter,
        dry_run=dry_run,
    )
    return linker.run()
