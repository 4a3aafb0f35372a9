# coding: utf-8

'''
Logging utilities for enumflag.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import (Optional, Union, Any, Type, Callable,
                    Mapping, MutableMapping, Dict)


import datetime
import logging
import math

from types import TracebackType


from enumflag.base.null       import Null, Nullable
from enumflag.base.exceptions import EnumFlagError

from . import const


# -----------------------------------------------------------------------------
# Exports
# -----------------------------------------------------------------------------

__all__ = [
    # ------------------------------
    # Functions
    # ------------------------------
    'init',
    'init_logger',

    'get_logger',
    'get_level',
    'set_level',

    'will_output',
    'incr_stack_level',

    'debug',
    'info',
    'warning',
    'error',
    'exception',
    'critical',
    'at_level',

    # ------------------------------
    # 'with' context manager
    # ------------------------------
    'LoggingManager',

    # ------------------------------
    # Unit Testing Support
    # ------------------------------
    'ut_call',
    'ut_set_up',
    'ut_tear_down',
]


# -----------------------------------------------------------------------------
# Variables
# -----------------------------------------------------------------------------

__initialized: bool = False
'''Re-init protection.'''

logger: logging.Logger = None
'''Our main/default logger.'''

_handler: logging.Handler = None
'''Our main/default logger's main/default handler.'''

_unit_test_callback: Callable = Null()
'''Logging callback to consume logs during unit tests.'''


# -----------------------------------------------------------------------------
# Formatter
# -----------------------------------------------------------------------------

class BestTimeFmt(logging.Formatter):
    '''
    Same as the default formatter except it formats the date a bit better.

    ISO-8601 with sep=' ' and milliseconds, basically.
    '''

    def formatTime(self,
                   record:   logging.LogRecord,
                   fmt_date: str = None) -> str:
        converted = datetime.datetime.fromtimestamp(record.created)
        time_str = converted.strftime(fmt_date or const.FMT_DATETIME)
        return "{:s}.{:03d}".format(time_str, math.floor(record.msecs))


# -----------------------------------------------------------------------------
# Initialization
# -----------------------------------------------------------------------------

def init(level:        const.LogLvlConversion      = const.DEFAULT_LEVEL,
         handler:      Optional[logging.Handler]   = None,
         formatter:    Optional[logging.Formatter] = None,
         reinitialize: Optional[bool]              = None) -> None:
    '''
    Initializes our root logger for output. Until this is called, enumflag's
    logs go to a logging.NullHandler.

    If not provided a handler, a logging.StreamHandler is created. If not
    provided a formatter, a BestTimeFmt is created for the handler.
    '''
    # ------------------------------
    # No Re-Init.
    # ------------------------------
    global __initialized
    if __initialized and not reinitialize:
        return
    __initialized = True

    # ------------------------------
    # Initialize the Logger...
    # ------------------------------
    global logger
    logger = init_logger(str(const.LogName.ROOT), level)

    # ------------------------------
    # ...and its Handler & Format.
    # ------------------------------
    global _handler
    if _handler:
        logger.removeHandler(_handler)

    _handler = handler or logging.StreamHandler()
    if formatter or not handler:
        _handler.setFormatter(
            formatter or BestTimeFmt(fmt=const.FMT_LINE_HUMAN,
                                     style=const.STYLE))
    logger.addHandler(_handler)


def init_logger(logger_name: str,
                level:       const.LogLvlConversion = const.DEFAULT_LEVEL
                ) -> logging.Logger:
    '''
    Initializes and returns a logger with the supplied name.
    '''
    # Create our logger at our default output level.
    named = logging.getLogger(logger_name)
    named.setLevel(const.Level.to_logging(level))
    named.debug(f"Logger '{logger_name}' initialized at level {level}")

    # Non-root loggers should/must use the root's handler/formatter.
    return named


# -----------------------------------------------------------------------------
# Logger Helpers
# -----------------------------------------------------------------------------

def get_logger(*names:        str,
               min_log_level: const.LogLvlConversion = None
               ) -> logging.Logger:
    '''
    Get a logger by name. Names should be module name, or module and
    class name.

    Ignores any 'Falsy' values in `names` when building a name from parts.

    If `min_log_level` is an int or Level, this will check the logger's level
    and set it if it doesn't meet the requirement.

    E.g.:
      get_logger(__name__)
      get_logger(__name__, self.__class__.__name__)
    '''
    logger_name = '.'.join([each for each in names if each])

    named_logger = logging.getLogger(logger_name)

    # Do we need to adjust the level?
    if min_log_level:
        current = get_level(named_logger)
        desired = const.Level.to_logging(min_log_level)
        if desired != current:
            set_level(const.Level.most_verbose(current, desired),
                      named_logger)

    return named_logger


def _logger(enumflag_logger: const.LoggerInput = None) -> logging.Logger:
    '''
    Returns `enumflag_logger` if it is Truthy.
    Returns the default enumflag logger if not.
    '''
    return (enumflag_logger
            if enumflag_logger else
            logger)


# -----------------------------------------------------------------------------
# Log Output Levels
# -----------------------------------------------------------------------------

def get_level(enumflag_logger: const.LoggerInput = None) -> const.Level:
    '''Returns current log level of logger, translated into Level enum.'''
    this = _logger(enumflag_logger)
    level = const.Level(this.level)
    return level


def set_level(level:           const.LogLvlConversion = const.DEFAULT_LEVEL,
              enumflag_logger: const.LoggerInput      = None) -> None:
    '''
    Change logger's log level. Accepts a Level, a logging module int, or a
    level name ('debug', 'WARNING', ...).

    Invalid levels are logged and ignored.
    '''
    try:
        lvl = const.Level.to_logging(level)
    except (KeyError, ValueError, TypeError):
        lvl = None

    if lvl is None or not const.Level.valid(lvl):
        error("Invalid log level {}. Ignoring.", level)
        return

    this = _logger(enumflag_logger)
    this.setLevel(lvl)


def will_output(level:           const.LogLvlConversion,
                enumflag_logger: const.LoggerInput = None) -> bool:
    '''
    Returns true if `level` is high enough to output a log.
    '''
    the_logger = _logger(enumflag_logger)
    return const.Level.to_logging(level) >= the_logger.getEffectiveLevel()


# -----------------------------------------------------------------------------
# Log Output Formatting
# -----------------------------------------------------------------------------

def _brace_message(fmt_msg:      str,
                   *args:        Any,
                   **kwargs:     Mapping[str, Any]) -> str:
    '''
    `fmt_msg` is the user's message, which may have brace formatting to act on.
    Can handle case where no formatting needs be done (no args/kwargs
    supplied).

    Otherwise use '.format()' brace formatting on `fmt_msg` string.
    '''
    if not (args or kwargs):
        return fmt_msg

    try:
        return fmt_msg.format(*args, **kwargs)

    # We are trying to log something, so give both log and error info.
    except (IndexError, KeyError) as error:
        return (f"FORMAT {type(error).__name__} FOR: "
                + fmt_msg
                + ".format(): "
                + "args: " + str(args) + ", "
                + "kwargs: " + str(kwargs) + " -> "
                + str(error))


# -----------------------------------------------------------------------------
# Log Keyword Args Helpers
# -----------------------------------------------------------------------------

def incr_stack_level(
        kwargs: Optional[MutableMapping[str, Any]],
        amount: Optional[int] = 1) -> MutableMapping[str, Any]:
    '''
    Adds `amount` to existing 'stacklevel' in kwargs, or sets it to `amount` if
    non-existing.
    '''
    if not kwargs:
        kwargs = {}
    stacklevel = kwargs.pop('stacklevel', 0)
    stacklevel += amount
    kwargs['stacklevel'] = stacklevel
    return kwargs


def pop_log_kwargs(kwargs: MutableMapping[str, Any]) -> Dict[str, Any]:
    '''
    Pops kwargs intended for logger out of `kwargs`. Leaves the rest for the
    message formatter.

    Returns a new dictionary with the popped args in it, if any.
    '''
    log_args = {}
    if kwargs and 'stacklevel' in kwargs:
        log_args['stacklevel'] = kwargs.pop('stacklevel')

    # Return dict of log's kwargs. NOT the input kwargs!!
    return log_args


# -----------------------------------------------------------------------------
# Logger Normal Functions
# -----------------------------------------------------------------------------

def at_level(level:           'const.Level',
             msg:             str,
             *args:           Any,
             enumflag_logger: const.LoggerInput = None,
             **kwargs:        Any) -> None:
    '''
    Log `msg` at `level`. The level functions below all funnel through here.
    '''
    log_kwargs = pop_log_kwargs(kwargs)
    output = _brace_message(msg, *args, **kwargs)
    if not ut_call(level, output):
        # Point past us and our caller (debug(), info(), etc).
        log_kwargs = incr_stack_level(log_kwargs, 3)
        this = _logger(enumflag_logger)
        this.log(const.Level.to_logging(level),
                 output,
                 **log_kwargs)


def debug(msg:             str,
          *args:           Any,
          enumflag_logger: const.LoggerInput = None,
          **kwargs:        Any) -> None:
    at_level(const.Level.DEBUG, msg, *args,
             enumflag_logger=enumflag_logger,
             **kwargs)


def info(msg:             str,
         *args:           Any,
         enumflag_logger: const.LoggerInput = None,
         **kwargs:        Any) -> None:
    at_level(const.Level.INFO, msg, *args,
             enumflag_logger=enumflag_logger,
             **kwargs)


def warning(msg:             str,
            *args:           Any,
            enumflag_logger: const.LoggerInput = None,
            **kwargs:        Any) -> None:
    at_level(const.Level.WARNING, msg, *args,
             enumflag_logger=enumflag_logger,
             **kwargs)


def error(msg:             str,
          *args:           Any,
          enumflag_logger: const.LoggerInput = None,
          **kwargs:        Any) -> None:
    at_level(const.Level.ERROR, msg, *args,
             enumflag_logger=enumflag_logger,
             **kwargs)


def critical(msg:             str,
             *args:           Any,
             enumflag_logger: const.LoggerInput = None,
             **kwargs:        Any) -> None:
    at_level(const.Level.CRITICAL, msg, *args,
             enumflag_logger=enumflag_logger,
             **kwargs)


# -----------------------------------------------------------------------------
# Exceptions
# -----------------------------------------------------------------------------

def _except_msg(message:      Optional[str],
                error_type:   Type[Exception],
                error_string: Optional[str],
                *args:        Any,
                **kwargs:     Any) -> str:
    '''
    Build the log message for `exception()`.

    If no `message`, creates a simple default. Otherwise appends the error's
    type/str to the formatted `message`.

    `error_string` is allowed to have curly brackets and is not passed to
    `_brace_message`.
    '''
    if not message:
        output = f"Exception caught. type: {error_type.__name__}"
        if error_string:
            output += f", str: {error_string}"
        if args:
            output += f", args: {args}"
        if kwargs:
            output += f", kwargs: {kwargs}"
        return output

    output = _brace_message(message, *args, **kwargs)
    if error_string:
        output += (f" (Exception type: {error_type.__name__}, "
                   f"str: {error_string})")
    return output


def exception(err_or_class:    Union[Exception, Type[Exception]],
              msg:             Optional[str],
              *args:           Any,
              enumflag_logger: const.LoggerInput        = None,
              error_data:      Optional[Dict[Any, Any]] = None,
              **kwargs:        Any) -> Exception:
    '''
    Log the exception at ERROR level.

    If `err_or_class` is a type, this will create and return an instance by
    constructing: `err_or_class(log_msg_output_str)`
      - If optional `error_data` is not None and the type is an
        EnumFlagError, it will be supplied to the created error as the `data`
        parameter in the constructor.
      - It is ignored if `err_or_class` is an instance already.

    Finally, this returns the exception instance. This way you can do
    something like:
      except SomeError as error:
          raise log.exception(
              ConfigError,
              "Cannot load config from {}.",
              path,
          ) from error
    '''
    make_instance = not isinstance(err_or_class, Exception)
    if make_instance:
        error_type = err_or_class
        error_string = None
    else:
        error_type = type(err_or_class)
        error_string = str(err_or_class)

    # ------------------------------
    # Create log msg.
    # ------------------------------
    log_kwargs = pop_log_kwargs(kwargs)
    log_message = _except_msg(msg,
                              error_type,
                              error_string,
                              *args,
                              **kwargs)

    # ------------------------------
    # Ensure the Exception instance.
    # ------------------------------
    exception_instance = err_or_class
    if make_instance and issubclass(error_type, EnumFlagError):
        data = dict(error_data) if error_data else {}
        data['log'] = ('Instantiated by log.exception'
                       if error_data else
                       'Auto-created by log.exception')
        exception_instance = error_type(log_message, data=data)

    elif make_instance:
        exception_instance = error_type(log_message)

    # ------------------------------
    # And now - finally - log it and return exception
    # ------------------------------
    if not ut_call(const.Level.ERROR, log_message):
        log_kwargs = incr_stack_level(log_kwargs, 2)
        _logger(enumflag_logger).error(log_message, **log_kwargs)

    return exception_instance


# -----------------------------------------------------------------------------
# Context Manager for Log Levels
# -----------------------------------------------------------------------------
# Usage:
#   with log.LoggingManager.full_blast():
#       something_to_debug()

class LoggingManager:
    def __init__(self, level: const.Level, no_op: bool = False) -> None:
        self._desired = level
        self._original = get_level()
        self._do_nothing = no_op

    def __enter__(self):
        if self._do_nothing:
            return

        self._original = get_level()
        set_level(self._desired)

    def __exit__(self,
                 type:      Optional[Type[BaseException]] = None,
                 value:     Optional[BaseException]       = None,
                 traceback: Optional[TracebackType]       = None) -> bool:
        '''We do the same thing, regardless of an exception or not.'''
        if self._do_nothing:
            return False

        set_level(self._original)
        return False

    # ---
    # Specific Manager Types...
    # ---
    @staticmethod
    def on_or_off(enabled: bool) -> 'LoggingManager':
        '''
        Returns either a full_blast() manager or an ignored() manager,
        depending on `enabled`.
        '''
        if enabled:
            return LoggingManager.full_blast()
        return LoggingManager.ignored()

    @staticmethod
    def full_blast() -> 'LoggingManager':
        '''
        This one sets logging to most verbose level - DEBUG.
        '''
        return LoggingManager(const.Level.DEBUG)

    @staticmethod
    def disabled() -> 'LoggingManager':
        '''
        This one sets logging to least verbose level - CRITICAL.
        '''
        return LoggingManager(const.Level.CRITICAL)

    @staticmethod
    def ignored() -> 'LoggingManager':
        '''
        This one does nothing.
        '''
        return LoggingManager(const.Level.CRITICAL, no_op=True)


# -----------------------------------------------------------------------------
# Unit Testing
# -----------------------------------------------------------------------------

def ut_call(level: 'const.Level',
            output: str) -> bool:
    '''
    Call this; it will figure out if it needs to do any of the unit-test
    callback stuff.

    Returns bool:
      - True if _unit_test_callback wants to eat the log.
      - False if no callback or it doesn't want to eat the log.
    '''
    if not _unit_test_callback or not callable(_unit_test_callback):
        return False

    return bool(_unit_test_callback(level, output))


def ut_set_up(callback: Nullable[Callable[['const.Level', str], bool]]) -> None:
    '''
    Set up for unit testing.

    `callback` will be called for every log output function with log level and
    final output string. It should return a bool: True for when it wants to
    eat the log and not let it be logged out, False otherwise (tee message to
    it and logger).
    '''
    global _unit_test_callback
    _unit_test_callback = callback


def ut_tear_down() -> None:
    '''
    Tear down for unit testing.

    Reset things that were set in ut_set_up().
    '''
    global _unit_test_callback
    _unit_test_callback = Null()


# -----------------------------------------------------------------------------
# Module Setup
# -----------------------------------------------------------------------------

# Silent until init() gives the logs somewhere to go.
logger = init_logger(str(const.LogName.ROOT))
_handler = logging.NullHandler()
logger.addHandler(_handler)
