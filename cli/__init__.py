"""CLI package for the daymark calendar tool."""

import logging
import sys
from pathlib import Path

from daymark.config import DaymarkConfig

FILE_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
CONSOLE_LOG_FORMAT = "%(levelname)s: %(message)s"


def _console_level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: DaymarkConfig | None = None
) -> Path | None:
    """Send daymark logs to the log file and stderr.

    The file gets everything from DEBUG up, tagged with the logger name. The
    console shows warnings by default, info with ``verbose`` and only errors
    with ``quiet``. A log directory that cannot be created leaves console
    logging only, since calendar edits must not fail over a log file.

    Args:
        verbose: Show info messages on the console
        quiet: Show only errors on the console
        config: Log directory/filename settings (loaded from env if omitted)

    Returns:
        Path of the log file, or None if file logging is unavailable
    """
    if config is None:
        config = DaymarkConfig.from_env()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT))
    console_handler.setLevel(_console_level(verbose, quiet))
    handlers: list[logging.Handler] = [console_handler]

    log_path: Path | None = config.log_dir / config.log_filename
    file_error: OSError | None = None
    try:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError as e:
        file_error = e
        log_path = None
    else:
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    # Replace handlers from an earlier call
    root_logger.handlers.clear()
    for handler in handlers:
        root_logger.addHandler(handler)

    if file_error is not None:
        logging.getLogger(__name__).warning(
            f"File logging disabled, cannot open {config.log_dir}: {file_error}"
        )
    return log_path


def main() -> None:
    """Main entry point for the CLI."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
