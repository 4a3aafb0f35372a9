# coding: utf-8

'''
Unit tests for:
  enumflag/logs/log/log.py
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

import io
import logging


from enumflag.zest.base.unit  import ZestBase
from enumflag.base.exceptions import EnumFlagError, FlagWidthError

from enumflag.logs import log


# -----------------------------------------------------------------------------
# Tests
# -----------------------------------------------------------------------------

class Test_Logging(ZestBase):

    def set_up(self):
        self.capture_logs(True)

    def test_levels(self):
        log.set_level(log.Level.DEBUG)
        log.debug("debug {}", 1)
        log.info("info {}", 2)
        log.warning("warning {}", 3)
        log.error("error {}", 4)
        log.critical("critical {}", 5)

        self.assertEqual(self.logs, [
            (log.Level.DEBUG, "debug 1"),
            (log.Level.INFO, "info 2"),
            (log.Level.WARNING, "warning 3"),
            (log.Level.ERROR, "error 4"),
            (log.Level.CRITICAL, "critical 5"),
        ])

    def test_brace_format_failure(self):
        log.warning("{missing}", 'jeff')
        self.assertEqual(len(self.logs), 1)
        self.assertIn('FORMAT KeyError', self.logs[0][1])

    def test_no_args_no_format(self):
        log.warning("{not-formatted}")
        self.assertEqual(self.logs[0][1], "{not-formatted}")

    def test_set_level(self):
        log.set_level(log.Level.WARNING)
        self.assertEqual(log.get_level(), log.Level.WARNING)

        log.set_level('debug')
        self.assertEqual(log.get_level(), log.Level.DEBUG)

        log.set_level(logging.ERROR)
        self.assertEqual(log.get_level(), log.Level.ERROR)

    def test_set_level_invalid(self):
        log.set_level(log.Level.INFO)
        log.set_level('jeff')
        log.set_level(12345)
        self.assertEqual(log.get_level(), log.Level.INFO)
        self.assertEqual(len(self.logs), 2)
        for level, _ in self.logs:
            self.assertEqual(level, log.Level.ERROR)

    def test_logging_manager(self):
        log.set_level(log.Level.WARNING)
        with log.LoggingManager.full_blast():
            self.assertEqual(log.get_level(), log.Level.DEBUG)
        self.assertEqual(log.get_level(), log.Level.WARNING)

        with log.LoggingManager.on_or_off(False):
            self.assertEqual(log.get_level(), log.Level.WARNING)

        with log.LoggingManager.disabled():
            self.assertEqual(log.get_level(), log.Level.CRITICAL)
        self.assertEqual(log.get_level(), log.Level.WARNING)

    def test_will_output(self):
        log.set_level(log.Level.WARNING)
        self.assertTrue(log.will_output(log.Level.ERROR))
        self.assertTrue(log.will_output(log.Level.WARNING))
        self.assertFalse(log.will_output(log.Level.INFO))


class Test_Exception(ZestBase):

    def set_up(self):
        self.capture_logs(True)

    def test_from_class(self):
        error = log.exception(FlagWidthError,
                              "Flag {} is too far.",
                              'jeff',
                              error_data={'index': 99})
        self.assertIsInstance(error, FlagWidthError)
        self.assertEqual(error.message, "Flag jeff is too far.")
        self.assertEqual(error.index, 99)
        self.assertIn('log', error.data)

        self.assertEqual(self.logs, [(log.Level.ERROR,
                                      "Flag jeff is too far.")])

    def test_from_python_class(self):
        error = log.exception(ValueError, "Bad {}.", 'value')
        self.assertIsInstance(error, ValueError)
        self.assertEqual(str(error), "Bad value.")

    def test_from_instance(self):
        original = EnumFlagError("original")
        error = log.exception(original, "Wrapped.")
        self.assertIs(error, original)
        self.assertEqual(len(self.logs), 1)
        self.assertIn("Wrapped.", self.logs[0][1])
        self.assertIn("EnumFlagError", self.logs[0][1])

    def test_no_message(self):
        log.exception(KeyError('jeff'), None)
        self.assertIn("Exception caught. type: KeyError", self.logs[0][1])

    def test_raise(self):
        with self.assertRaises(FlagWidthError):
            raise log.exception(FlagWidthError, "Too wide.")


class Test_Init(ZestBase):
    '''
    Nothing is output until `log.init()` is called.
    '''

    def set_up(self):
        self.root = log.get_logger(str(log.LogName.ROOT))

    def tear_down(self):
        log.init(handler=logging.NullHandler(), reinitialize=True)
        self.root = None

    def test_silent_on_import(self):
        self.assertTrue(self.root.handlers)
        for each in self.root.handlers:
            self.assertIsInstance(each, logging.NullHandler)

    def test_init(self):
        stream = io.StringIO()
        log.init(level=log.Level.INFO,
                 handler=logging.StreamHandler(stream),
                 reinitialize=True)

        self.assertEqual(len(self.root.handlers), 1)
        self.assertNotIsInstance(self.root.handlers[0], logging.NullHandler)

        log.info("hello {}", 'jeff')
        self.assertEqual(stream.getvalue(), "hello jeff\n")


class Test_Output(ZestBase):
    '''
    Logs not captured by the unit-test hook go out through the handler.
    '''

    def set_up(self):
        self.stream = io.StringIO()
        self.handler = logging.StreamHandler(self.stream)
        self.root = log.get_logger(str(log.LogName.ROOT))
        self.root.addHandler(self.handler)

    def tear_down(self):
        self.root.removeHandler(self.handler)
        self.root = None
        self.handler = None
        self.stream = None

    def test_handler_output(self):
        log.set_level(log.Level.INFO)
        log.info("hello {}", 'jeff')
        log.debug("not output")
        self.assertEqual(self.stream.getvalue(), "hello jeff\n")

    def test_named_logger(self):
        log.set_level(log.Level.INFO)
        named = log.get_logger(str(log.LogName.ROOT), 'zest')
        self.assertEqual(named.name, 'enumflag.zest')
        log.warning("named", enumflag_logger=named)
        self.assertEqual(self.stream.getvalue(), "named\n")

    def test_rooted_name(self):
        self.assertEqual(log.LogName.ROOT.rooted('config', 'jeff'),
                         'enumflag.config.jeff')


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m enumflag.logs.log.zest_log

if __name__ == '__main__':
    import unittest
    unittest.main()
