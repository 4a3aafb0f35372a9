# coding: utf-8

'''
enumflag's Log is layered on top of Python's 'logging' module.

Use the `log.<level>()` functions to log out via the root 'enumflag' logger,
or `log.get_logger(...)` for a named sub-logger.
'''


# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

# ------------------------------
# Types, Enums, Consts
# ------------------------------

from .const import (
    # Constants
    DEFAULT_LEVEL,

    # Types
    LogLvlConversion, LoggerInput,

    # Enums
    Level, LogName,
)


# ------------------------------
# Functions
# ------------------------------

from .log import (
    init,
    init_logger,

    get_logger,
    get_level,
    set_level,

    will_output,
    incr_stack_level,

    debug,
    info,
    warning,
    error,
    exception,
    critical,
    at_level,

    # ------------------------------
    # 'with' context manager
    # ------------------------------
    LoggingManager,

    # ------------------------------
    # Unit Testing Support
    # ------------------------------
    ut_call,
    ut_set_up,
    ut_tear_down,
)


# -----------------------------------------------------------------------------
# Exports
# -----------------------------------------------------------------------------

__all__ = [
    # ------------------------------
    # const.py
    # ------------------------------
    'DEFAULT_LEVEL',
    'LogLvlConversion',
    'LoggerInput',
    'Level',
    'LogName',

    # ------------------------------
    # log.py
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

    'LoggingManager',

    'ut_call',
    'ut_set_up',
    'ut_tear_down',
]
