"""
Loguru sinks for the binding layer.

The console shows everything at INFO, and records from the async_ui package
down to DEBUG in debug mode. The optional file sink keeps only async_ui
records, down to TRACE, so listener registration and emitted events can be
followed after the fact without flooding the console.
"""
import os
import sys
from typing import List

from loguru import logger

from .config import GeneralSettings

PACKAGE = "async_ui"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def _console_filter(debug_mode: bool):
    package_level = logger.level("DEBUG" if debug_mode else "INFO").no
    other_level = logger.level("INFO").no

    def accept(record) -> bool:
        if record["name"].startswith(PACKAGE):
            return record["level"].no >= package_level
        return record["level"].no >= other_level
    return accept


def setup_logging(debug_mode: bool = True, log_dir: str = "logs", log_to_file: bool = True,
                  rotation: str = "10 MB", retention: str = "1 week") -> List[int]:
    """
    Replace loguru's default handler with the console and file sinks.

    Returns:
        Handler ids of the added sinks, for teardown_logging().
    """
    logger.remove()
    handler_ids = [
        logger.add(sys.stderr, level="TRACE", format=CONSOLE_FORMAT, filter=_console_filter(debug_mode)),
    ]

    if log_to_file:
        os.makedirs(log_dir, exist_ok=True)
        handler_ids.append(logger.add(
            os.path.join(log_dir, "binding_{time:YYYY-MM-DD}.log"),
            level="TRACE",
            format=FILE_FORMAT,
            filter=PACKAGE,
            rotation=rotation,
            retention=retention,
        ))

    logger.info(f"Logging initialized ({len(handler_ids)} sink(s))")
    return handler_ids


def setup_logging_from(settings: GeneralSettings) -> List[int]:
    """Configure logging from the `general` config section."""
    return setup_logging(
        settings.debug_mode,
        settings.log_dir,
        settings.log_to_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


def teardown_logging(handler_ids: List[int]) -> None:
    """Remove sinks added by setup_logging(), flushing them first."""
    logger.complete()
    for handler_id in handler_ids:
        logger.remove(handler_id)
