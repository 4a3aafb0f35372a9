# coding: utf-8

'''
Constants, types, and enums for the enumflag logging layer.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Union, NewType

import logging
import enum


from enumflag.base.null import NullNoneOr, null_or_none


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

LogLvlConversion = NewType('LogLvlConversion',
                           NullNoneOr[Union['Level', int, str]])
'''
These input types can be converted to a log.Level.
'''


LoggerInput = NewType('LoggerInput', NullNoneOr[logging.Logger])
'''
Optional logger can be: Null, None, or a Python logging.Logger.
'''


STYLE = '{'
'''Formatter style for our format strings.'''


# https://docs.python.org/3/library/logging.html#logrecord-attributes
FMT_LINE_HUMAN = (
    '{asctime:s} - {name:s} - {levelname:8s} - '
    '{module:s}.{funcName:s}: {message:s}'
)


FMT_DATETIME = '%Y-%m-%d %H:%M:%S'


# ------------------------------
# Log Levels
# ------------------------------

@enum.unique
class Level(enum.IntEnum):
    '''
    Log level enum. Values are python's logging module log level ints.
    '''

    NOTSET   = logging.NOTSET
    DEBUG    = logging.DEBUG
    INFO     = logging.INFO
    WARNING  = logging.WARNING
    ERROR    = logging.ERROR
    CRITICAL = logging.CRITICAL

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def valid(lvl: Union['Level', int]) -> bool:
        for known in Level:
            if lvl == known:
                return True
        return False

    @staticmethod
    def to_logging(lvl: LogLvlConversion) -> int:
        if null_or_none(lvl):
            lvl = Level.NOTSET
        elif isinstance(lvl, str):
            lvl = Level.from_name(lvl)
        return int(lvl)

    @staticmethod
    def from_name(name: str) -> 'Level':
        '''
        Case-insensitive name lookup: 'debug', 'Warning', 'ERROR'...

        Raises KeyError for unknown names.
        '''
        return Level[name.strip().upper()]

    @staticmethod
    def most_verbose(lvl_a: LogLvlConversion,
                     lvl_b: LogLvlConversion) -> 'Level':
        '''
        Returns whichever of `lvl_a` or `lvl_b` lets more logs through.
        NOTSET is ignored unless both are NOTSET.
        '''
        a = Level.to_logging(lvl_a)
        b = Level.to_logging(lvl_b)
        if a == Level.NOTSET:
            return Level(b)
        if b == Level.NOTSET:
            return Level(a)
        return Level(min(a, b))


DEFAULT_LEVEL = Level.INFO


# ------------------------------
# Logger Names
# ------------------------------

@enum.unique
class LogName(enum.Enum):

    ROOT = 'enumflag'
    '''
    The default/root enumflag logger.
    '''

    def rooted(self, *name: str) -> str:
        '''
        Make a logger name rooted from the LogName enum called from.
        Examples:
          LogName.ROOT.rooted('config')
            -> 'enumflag.config'
        '''
        return '.'.join([str(self), *(each for each in name if each)])

    def __str__(self) -> str:
        '''
        Returns value string of enum.
        '''
        return self.value
