# coding: utf-8

'''
Base enumflag Class for Tests.
  - Helpful functions.
  - Set-up / Tear-down for global stuff.
    - log level
    - unit-test log capture
    - configuration
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Optional, Type, List, Tuple


import pathlib
import sys
import unittest


from enumflag.logs          import log
from enumflag.config.config import Configuration


# -----------------------------------------------------------------------------
# Base Class
# -----------------------------------------------------------------------------

class ZestBase(unittest.TestCase):
    '''
    Base enumflag Class for Tests.
      - Helpful functions.
      - Set-up / Tear-down for global stuff.

    Internal (probably) helpers/functions/variables - that is ones subclasses
    probably won't need to use directly - are prefixed with '_'. The
    helpers/functions/variables used directly are not prefixed.
    '''

    # -------------------------------------------------------------------------
    # Set-Up
    # -------------------------------------------------------------------------

    def _define_vars(self) -> None:
        '''
        Defines any instance variables with type hinting, docstrs.
        Happens ASAP during unittest.setUp(), before ZestBase.set_up().
        '''

        # ------------------------------
        # Debugging
        # ------------------------------

        self._ut_is_verbose = ('-v' in sys.argv) or ('--verbose' in sys.argv)
        '''
        True if unit tests were run with the 'verbose' flag from
        command line/whatever.
        '''

        self.debugging: bool = False
        '''
        Use as a flag for turning on/off extra debugging stuff.
        Mainly used with log.LoggingManager.on_or_off() context manager.
        '''

        # ------------------------------
        # Logging
        # ------------------------------

        self.logs: List[Tuple[log.Level, str]] = []
        '''
        Logs get captured into this list when self.capture_logs(True) is
        in effect.
        '''

        self._log_level_orig: log.Level = log.get_level()
        '''
        Log level before the test started; restored at tear-down.
        '''

        # ------------------------------
        # Configuration
        # ------------------------------

        self.config_path: Optional[pathlib.Path] = None
        '''
        If not None, a Configuration is loaded from this path during set-up.
        '''

        self.config: Optional[Configuration] = None
        '''
        The Configuration loaded from `config_path`, if any.
        '''

    def pre_set_up(self) -> None:
        '''
        Called in `self.setUp()` after `self._define_vars()` and before
        anything happens.

        Use it to do any prep-work needed (like setting `self.config_path`,
        or setting up special logging needs before actual `set_up()`).
        '''
        ...

    def set_up(self) -> None:
        '''
        Use this!

        Called at the end of self.setUp(), when instance vars are defined and
        base class set-up is done.
        '''
        ...

    def setUp(self) -> None:
        '''
        unittest.TestCase setUp function. Sub-classes should use `set_up()` for
        their test set-up.
        '''
        self._define_vars()
        self.pre_set_up()
        self._set_up_config()
        self.set_up()

    def _set_up_config(self) -> None:
        '''
        Create the Configuration object if the test wants one.
        '''
        if self.config is not None:
            self.fail("A configuration has already been created: "
                      f"{self.config}")

        if self.config_path:
            self.config = Configuration(self.config_path)

    # -------------------------------------------------------------------------
    # Tear-Down
    # -------------------------------------------------------------------------

    def tear_down(self) -> None:
        '''
        Use this!

        Called at the beginning of self.tearDown().
        '''
        ...

    def tearDown(self) -> None:
        '''
        unittest.TestCase tearDown function.

        Sub-classes should use `tear_down()` for their test tear-down. This
        calls tear_down() before any of the base class tear-down happens.
        '''
        try:
            self.tear_down()
        finally:
            self._tear_down_base()

    def _tear_down_base(self) -> None:
        '''
        Do all the base class tear-down.
        '''
        # ---
        # Reset or unset our variables for fastidiousness's sake.
        # ---
        self._ut_is_verbose = False
        self.debugging      = False
        self.logs           = []
        self.config         = None
        self.config_path    = None

        try:
            log.ut_tear_down()
        finally:
            log.set_level(self._log_level_orig)

    # -------------------------------------------------------------------------
    # Log Capture
    # -------------------------------------------------------------------------

    def clear_logs(self) -> None:
        '''
        Drop all captured logs from `self.logs` list.
        '''
        self.logs.clear()

    def capture_logs(self, enabled: bool) -> None:
        '''
        Divert logs from being output to being received by self._receive_log()
        instead.
        '''
        if enabled:
            log.ut_set_up(self._receive_log)
        else:
            log.ut_tear_down()

    def _receive_log(self,
                     level: log.Level,
                     output: str) -> bool:
        '''
        Logs will come to this callback when self.capture_logs(True) is
        in effect.

        They get appended to self.logs as (level, log output str) tuples.
        '''
        self.logs.append((level, output))

        # Eat the logs and don't let them into the output...
        # ...unless verbose tests, then let it go through.
        return not self._ut_is_verbose

    # -------------------------------------------------------------------------
    # Asserts
    # -------------------------------------------------------------------------

    def assertRaisesUnwrapped(self,
                              error_type: Type[Exception],
                              func,
                              *args,
                              **kwargs) -> Exception:
        '''
        Like assertRaises, but also accepts `error_type` as the `__cause__`
        of whatever was raised. Enum class creation wraps member errors in a
        RuntimeError on some Python versions.

        Returns the `error_type` instance.
        '''
        try:
            func(*args, **kwargs)
        except Exception as error:
            found = error
            while found is not None and not isinstance(found, error_type):
                found = found.__cause__
            if found is None:
                raise
            return found

        self.fail(f"{error_type.__name__} not raised by {func}")
