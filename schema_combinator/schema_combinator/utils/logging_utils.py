import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER_NAME = "schema_combinator"


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    logger_name: Optional[str] = PACKAGE_LOGGER_NAME,
    formatter: Optional[logging.Formatter] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure a logger so that records below *stderr_level* go to stdout
    and the rest go to stderr.

    By default only the package logger is configured and it stops propagating
    to the root logger, so applications embedding the validator keep control
    of their own handlers. Pass ``logger_name=None`` to configure the root
    logger instead.
    """

    target = logging.getLogger(logger_name)
    target.handlers.clear()
    target.setLevel(level)
    if logger_name:
        target.propagate = False

    if formatter is None:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")

    stderr_level = max(stderr_level, logging.DEBUG)

    stdout_handler = logging.StreamHandler(stream=stdout or sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_MaxLevelFilter(stderr_level - 1))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(stream=stderr or sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(formatter)

    target.addHandler(stdout_handler)
    target.addHandler(stderr_handler)
    return target
