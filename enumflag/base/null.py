# coding: utf-8

'''
"No flag set here" marker.

The maybe-absent flag functions (`has_flag_or_false()`, `or_no_flags()`...)
take None or Null() as "absent". Zero is not absent; it is the empty set.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Union, TypeVar


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

NType = TypeVar('NType')
Nullable = Union[NType, 'Null']
NullNoneOr = Union[NType, 'Null', None]


# -----------------------------------------------------------------------------
# Null
# -----------------------------------------------------------------------------

class Null:
    '''
    Falsy singleton for an absent value.
    '''
    __slots__ = ()

    _instance: 'Null' = None

    def __new__(klass) -> 'Null':
        if klass._instance is None:
            klass._instance = super().__new__(klass)
        return klass._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'Null( )'

    def __str__(self) -> str:
        return 'Null'


def null_or_none(check: NullNoneOr[NType]) -> bool:
    '''
    Returns True if `check` is absent: Null or None.
    '''
    return check is None or check is Null()
