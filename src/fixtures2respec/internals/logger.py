"""Logging setup: console output plus log files in the user folder.

Every line carries the session ID so a console transcript, the log file and the
run manifests can be matched up.
"""

import logging
from pathlib import Path

from fixtures2respec.internals.paths import user_log_dir_path
from fixtures2respec.internals.run_context import get_session_id

LOG_FILENAME = "fixtures2respec.log"
TRACE_LOG_FILENAME = "trace_fixtures2respec.log"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler(path: Path, formatter: logging.Formatter) -> logging.FileHandler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(formatter)
    handler.setLevel(logging.DEBUG)
    return handler


def setup_logger(
    name: str = "fixtures2respec",
    level: int = logging.DEBUG,
    enable_trace: bool = False,
) -> logging.Logger:
    """
    Attach console and file handlers to the named logger.

    Calling it again returns the already configured logger unchanged.

    Args:
        name: Logger name; every module logs to "fixtures2respec"
        level: Logger threshold. The console always shows INFO and up.
        enable_trace: Add trace_fixtures2respec.log, which records the file,
            function and line of every message

    Example:
        >>> log = setup_logger()
        >>> log.info("6 of 8 fixtures placed")
        2026-01-09 14:23:45 [INFO] 6 of 8 fixtures placed [run:a1b2c3d4]
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    logger.propagate = False

    session_id = get_session_id()
    formatter = logging.Formatter(
        f"%(asctime)s [%(levelname)s] %(message)s [run:{session_id}]",
        datefmt=DATE_FORMAT,
    )

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    console.setLevel(logging.INFO)
    logger.addHandler(console)

    log_dir = user_log_dir_path()
    log_file = log_dir / LOG_FILENAME
    logger.addHandler(_file_handler(log_file, formatter))

    if enable_trace:
        trace_formatter = logging.Formatter(
            "%(filename)s: %(funcName)s(), Line: %(lineno)d: - [%(levelname)s] "
            f"%(asctime)s - %(message)s -- [run_id={session_id}]",
            datefmt=DATE_FORMAT,
        )
        logger.addHandler(_file_handler(log_dir / TRACE_LOG_FILENAME, trace_formatter))

    logger.info(f"Logger initialized. Writing to {log_file}")
    return logger
