"""
Log handler setup for scripts and test runs.  Records below WARNING go to stdout, and the rest go to stderr.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from logging import LogRecord, Logger, Filter, Formatter
from typing import Optional, Union, Collection, Callable

from tzlocal import get_localzone

__all__ = ['init_logging', 'create_filter', 'DatetimeFormatter', 'ENTRY_FMT_DETAILED']
log = logging.getLogger(__name__)

ENTRY_FMT_DETAILED = '%(asctime)s %(levelname)s %(threadName)s %(name)s %(lineno)d %(message)s'
DATE_FMT = '%Y-%m-%d %H:%M:%S %Z'

_NotSet = object()

Verbosity = Union[int, bool, None]
OptStrs = Optional[Collection[str]]


def init_logging(
    verbosity: Verbosity = 0, *, names: OptStrs = _NotSet, entry_fmt: str = None, date_fmt: str = DATE_FMT
) -> list[Logger]:
    """
    Replaces the handlers on the specified loggers with a stdout handler and a stderr handler.

    The verbosity argument affects the log level that is set for stdout:
    - 0: 20 = logging.INFO (default)
    - 1: 19
    - 2: 10 = logging.DEBUG (shows the jamo arithmetic applied to standalone consonants)
    - 3: 9

    :param verbosity: Higher values increase stdout output verbosity.
    :param names: The names of the loggers for which handlers should be configured.  If set to None, then the root
      logger will be configured.  If not specified, then loggers for ``__main__`` and this package are configured.
    :param entry_fmt: The log message format.  Defaults to '%(message)s' when verbosity < 3, otherwise
      :data:`ENTRY_FMT_DETAILED` is used.
    :param date_fmt: The datetime format code to use for timestamps
    :return: The loggers that were configured
    """
    if names is _NotSet:
        names = {__name__.split('.')[0], '__main__'}
    elif names is None or isinstance(names, str):
        names = {names}
    loggers = [logging.getLogger()] if None in names else list(map(logging.getLogger, set(names)))

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(logging.DEBUG + 2 - verbosity if verbosity else logging.INFO)
    stdout_handler.addFilter(create_filter(lambda r: r.levelno < logging.WARNING))
    stdout_handler.name = 'stdout'

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.addFilter(create_filter(lambda r: r.levelno >= logging.WARNING))
    stderr_handler.name = 'stderr'

    entry_fmt = entry_fmt or (ENTRY_FMT_DETAILED if verbosity and verbosity > 2 else '%(message)s')
    formatter = DatetimeFormatter(entry_fmt, date_fmt)
    for logger in loggers:
        logger.setLevel(logging.NOTSET)  # Let handlers deal with log levels
        logger.handlers = []
        for handler in (stdout_handler, stderr_handler):
            handler.setFormatter(formatter)
            logger.addHandler(handler)

    return loggers


def create_filter(filter_fn: Callable[[LogRecord], bool]) -> Filter:
    """
    :param filter_fn: A function that takes 1 parameter (record) and returns True if the record should be logged, or
      False to ignore it
    :return: A custom, initialized subclass of logging.Filter using the given filter function
    """
    class CustomLogFilter(Filter):
        def filter(self, record: LogRecord) -> bool:
            return filter_fn(record)

    return CustomLogFilter()


class DatetimeFormatter(Formatter):
    """Renders timestamps in the local timezone.  Enables use of ``%f`` (micro/milliseconds) in datetime formats."""
    _local_tz = get_localzone()

    def formatTime(self, record: LogRecord, datefmt: str = None) -> str:
        dt = datetime.fromtimestamp(record.created, self._local_tz)
        if datefmt:
            return dt.strftime(datefmt)
        return self.default_msec_format % (dt.strftime(self.default_time_format), record.msecs)
