#!/usr/bin/env python

import logging
import sys
import unittest
from pathlib import Path

sys.path.append(Path(__file__).resolve().parents[1].as_posix())
from hangul_graphemes.logging import init_logging, DatetimeFormatter, ENTRY_FMT_DETAILED

log = logging.getLogger(__name__)


class LoggingInitTest(unittest.TestCase):
    def _cleanup_handlers(self, *names):
        for name in names:
            logger = logging.getLogger(name)
            while logger.handlers:
                logger.handlers[0].close()
                del logger.handlers[0]

    def _handlers(self, name):
        return {h.name: h for h in logging.getLogger(name).handlers}

    def test_stream_levels(self):
        init_logging(1, names='test_verbose')
        self.addCleanup(self._cleanup_handlers, 'test_verbose')
        handlers = self._handlers('test_verbose')
        self.assertEqual({'stdout', 'stderr'}, set(handlers))
        self.assertEqual(19, handlers['stdout'].level)

        warning = logging.LogRecord('test_verbose', logging.WARNING, __file__, 1, 'test', None, None)
        info = logging.LogRecord('test_verbose', logging.INFO, __file__, 1, 'test', None, None)
        self.assertFalse(handlers['stdout'].filter(warning))
        self.assertTrue(handlers['stdout'].filter(info))
        self.assertTrue(handlers['stderr'].filter(warning))
        self.assertFalse(handlers['stderr'].filter(info))

    def test_default_verbosity(self):
        [logger] = init_logging(names='test_default')
        self.addCleanup(self._cleanup_handlers, 'test_default')
        self.assertEqual('test_default', logger.name)
        self.assertEqual(logging.NOTSET, logger.level)
        self.assertEqual(logging.INFO, self._handlers('test_default')['stdout'].level)

    def test_detailed_format_at_high_verbosity(self):
        init_logging(3, names=['test_detailed'])
        self.addCleanup(self._cleanup_handlers, 'test_detailed')
        handler = self._handlers('test_detailed')['stdout']
        self.assertEqual(9, handler.level)
        self.assertEqual(ENTRY_FMT_DETAILED, handler.formatter._fmt)

    def test_handlers_replaced(self):
        init_logging(names='test_replace')
        init_logging(names='test_replace')
        self.addCleanup(self._cleanup_handlers, 'test_replace')
        self.assertEqual(2, len(logging.getLogger('test_replace').handlers))


class DatetimeFormatterTest(unittest.TestCase):
    def test_format_time(self):
        record = logging.LogRecord('test', logging.INFO, __file__, 1, 'test', None, None)
        self.assertRegex(DatetimeFormatter().formatTime(record, '%Y'), r'^\d{4}$')
        self.assertRegex(DatetimeFormatter().formatTime(record), r'^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2},\d{3}$')


if __name__ == '__main__':
    try:
        unittest.main(warnings='ignore', verbosity=2, exit=False)
    except KeyboardInterrupt:
        print()
