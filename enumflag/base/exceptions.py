# coding: utf-8

'''
All your Exceptions are belong to these classes.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Optional, Union, Any, Type, Dict

import pprint


# -----------------------------------------------------------------------------
# Helper
# -----------------------------------------------------------------------------

def is_enumflag(error_or_type: Union[Exception, Type[Exception]]) -> bool:
    '''
    Given `error_or_type`, this will return True if it is an EnumFlagError or
    sub-class, and False otherwise.

    `error_or_type` can be either an instance or a class type.
    '''
    type_of_error = (type(error_or_type)
                     if isinstance(error_or_type, Exception) else
                     error_or_type)

    return issubclass(type_of_error, EnumFlagError)


# -----------------------------------------------------------------------------
# Exceptions
# -----------------------------------------------------------------------------

class EnumFlagError(Exception):
    def __init__(self,
                 message:    str,
                 cause:      Optional[Exception]      = None,
                 data:       Optional[Dict[Any, Any]] = None) -> None:
        '''Error data included.'''
        super().__init__(message)

        self.message    = message
        '''Human-friendly error message.'''

        self.cause      = cause
        '''
        (Optional) Python/Third-Party exception that caused us to raise this
        exception.
        '''

        self.data       = data or {}
        '''
        A bucket to stuff any extra data about the error.
        '''

    def __str__(self):
        output = f"{self.message}"
        if self.cause:
            output += f" from {self.cause}"
        if self.data:
            output += "\nAdditional Error Data:\n"
            output += pprint.pformat(self.data, indent=2)

        return output


class FlagWidthError(EnumFlagError):
    '''
    A flag's ordinal does not fit in a 32 bit flag set.

    This is a declaration mistake (too many members in a flag enum), not
    something a caller should catch and carry on from.
    '''

    @property
    def index(self) -> Optional[int]:
        return self.data.get('index')


class FlagNameError(EnumFlagError):
    '''
    A flag's name would hide one of EnumFlag's own attributes (`all`,
    `describe`...).
    '''

    @property
    def name(self) -> Optional[str]:
        return self.data.get('name')


class ConfigError(EnumFlagError):
    '''
    Configuration could not be loaded, or loaded but makes no sense.
    '''
    ...
