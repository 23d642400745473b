"""Error logger that writes to standard output and an append-only log file."""

import logging
import os
import sys

DEFAULT_LOG_PATH = "htop.log"
LOGGER_NAME = "sysinfobrowser"

_FORMAT = "ERROR: %(asctime)s %(filename)s:%(lineno)d: %(message)s"
_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


class _StdoutHandler(logging.StreamHandler):
    """Stream handler that always writes to whatever ``sys.stdout`` currently is."""

    def __init__(self):
        super().__init__(sys.stdout)

    def emit(self, record):
        self.stream = sys.stdout
        super().emit(record)

    def flush(self):
        self.stream = sys.stdout
        super().flush()


def get_error_logger(log_path=DEFAULT_LOG_PATH):
    """Return the package logger, writing to stdout and appending to ``log_path``.

    Loggers of the package's modules propagate to it. Raises ``OSError`` when
    the log file cannot be opened.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    formatter = logging.Formatter(_FORMAT, _DATE_FORMAT)

    target = os.path.abspath(os.fspath(log_path))
    has_file = any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == target
        for handler in logger.handlers
    )
    if not has_file:
        file_handler = logging.FileHandler(target, mode="a", encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not any(isinstance(handler, _StdoutHandler) for handler in logger.handlers):
        stdout_handler = _StdoutHandler()
        stdout_handler.setFormatter(formatter)
        logger.addHandler(stdout_handler)

    return logger