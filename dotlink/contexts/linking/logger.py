"""
Linking context logger.

Provides the reporter the Linker sends per-file outcomes through, with an
automatic [link] prefix. All linking modules should report through a
LinkReporter, not through loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[link]"


class LinkReporter:
    """
    Reports linking events to loguru.

    Keyword fields are bound as structured extras and rendered as key=value
    pairs by the handlers configured in dotlink.utils.logger.

    Example:
        reporter = LinkReporter()
        reporter.warning("Existing file points to different target", homePath=dest)
    """

    def __init__(self, prefix: str = CONTEXT_PREFIX):
        self.prefix = prefix

    def _log(self, level: str, message: str, fields: dict) -> None:
        # depth=2 attributes the record to the Linker call site
        logger.bind(**fields).opt(depth=2).log(level, f"{self.prefix} {message}")

    def info(self, message: str, **fields) -> None:
        self._log("INFO", message, fields)

    def warning(self, message: str, **fields) -> None:
        self._log("WARNING", message, fields)

    def error(self, message: str, **fields) -> None:
        self._log("ERROR", message, fields)

    def debug(self, message: str, **fields) -> None:
        self._log("DEBUG", message, fields)


def log_run_start(reporter: LinkReporter, source_root, target_root, dry_run: bool) -> None:
    """Log start of a linking run."""
    reporter.debug("Linking dotfiles", dotsPath=source_root, homePath=target_root)
    if dry_run:
        reporter.info("Dry run: no directories or links will be created")


def log_run_result(reporter: LinkReporter, report) -> None:
    """
    Log the summary of a completed run.

    Args:
        reporter: Reporter to log through
        report: LinkReport from Linker.run()
    """
    reporter.info(
        "Finished linking dotfiles",
        linked=len(report.linked),
        alreadyLinked=len(report.already_linked),
        conflicts=len(report.conflicts),
        errors=len(report.errors),
    )
