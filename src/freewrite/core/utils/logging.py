"""
Logging setup driven by the ``logging`` config section.

Library modules only ``from loguru import logger``; the CLI calls
setup_logging() once per invocation to install the sinks.
"""

import os
import sys

from loguru import logger

from freewrite.core.config import Config

CONSOLE_FORMAT = "<level>[{level.name}]</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}"


def resolve_log_file(config: Config) -> str | None:
    """Return the log file path, or None when file logging is off.

    A bare filename in ``logging.file`` lands in ``paths.log_dir``.
    """
    log_file = config.get("logging.file") or ""
    if not log_file:
        return None
    log_file = os.path.expanduser(str(log_file))
    if not os.path.dirname(log_file):
        log_file = os.path.join(os.path.expanduser(config.get("paths.log_dir", "")), log_file)
    return log_file


def setup_logging(config: Config, verbose: bool = False) -> str | None:
    """
    Replace loguru's sinks with a stderr sink and an optional rotating file.

    ``verbose`` forces DEBUG on the console; the file sink always uses
    ``logging.level``. Returns the log file path, if any.
    """
    level = str(config.get("logging.level", "WARNING")).upper()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else level, format=CONSOLE_FORMAT)

    log_file = resolve_log_file(config)
    if log_file:
        logger.add(
            log_file,
            level=level,
            format=FILE_FORMAT,
            rotation=config.get("logging.rotation", "10 MB"),
            retention=config.get("logging.retention", "7 days"),
            encoding="utf-8",
        )
    return log_file
