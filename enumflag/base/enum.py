# coding: utf-8

'''
Base Enum for Bitmask Flags.

Each member of an EnumFlag subclass is one bit: its value is `1 << index`,
where `index` is the member's zero-based position in declaration order.

Example:
  class Jeff(EnumFlag):
      JEFF    = enum.auto()
      JEFFORY = enum.auto()
      GEOFF   = enum.auto()

  Jeff.JEFF.value                      # 1
  Jeff.GEOFF.value                     # 4
  Jeff.JEFF.value | Jeff.GEOFF.value   # 5
  Jeff.GEOFF.binary                    # '00000100'
  Jeff.all()                           # 7
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import List


import enum


from enumflag.logs            import log
from enumflag.base.exceptions import FlagNameError

from . import flags as flagset


# -----------------------------------------------------------------------------
# Code
# -----------------------------------------------------------------------------

class EnumFlag(enum.Enum):
    '''
    Base class for flag enums.

    Declare members however you like (`enum.auto()`, `()`, strings...) - the
    declared value is ignored and replaced with the bit for the member's
    position. More than MAX_FLAGS members raises FlagWidthError when the class
    is created.

    Members may not be named after EnumFlag's own attributes (`all`,
    `describe`, `index`...); that raises FlagNameError.

    Also works with the functional API:
      Permission = EnumFlag('Permission', ['READ', 'WRITE', 'EXEC'])
    '''

    def __new__(klass, *args):
        index = len(klass.__members__)

        member = object.__new__(klass)
        member._value_ = flagset.bit_value(index,
                                           f"{klass.__name__}[{index}]")
        member._index = index
        return member

    def __init__(self, *args):
        # _name_ is set by now; the member is not on the class yet.
        if self._name_ in HELPER_NAMES:
            raise log.exception(
                FlagNameError,
                "Flag '{}.{}' would hide EnumFlag's '{}'; rename it.",
                self.__class__.__name__, self._name_, self._name_,
                error_data={'name': self._name_})

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def index(self) -> int:
        '''Zero-based position in declaration order.'''
        return self._index

    @property
    def label(self) -> str:
        '''Declared name, without the class prefix.'''
        return flagset.label(self)

    @property
    def binary(self) -> str:
        '''e.g. '00000100' for the third member.'''
        return flagset.binary(self)

    # -------------------------------------------------------------------------
    # Whole-Enum Helpers
    # -------------------------------------------------------------------------

    @classmethod
    def all(klass: 'EnumFlag') -> int:
        '''
        Returns the flag set with every member of this enum in it.
        '''
        return flagset.all_flags(klass)

    @classmethod
    def flags_in(klass: 'EnumFlag', flags: int) -> List['EnumFlag']:
        '''
        Returns the members of this enum that are set in `flags`, in
        declaration order.
        '''
        return flagset.get_flags(flags, klass)

    @classmethod
    def describe(klass: 'EnumFlag', flags: int) -> str:
        '''
        Returns e.g. 'JEFF | GEOFF' for `flags`, or 'none'.
        '''
        return flagset.describe_flags(flags, klass)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}.{self.name}: {self.binary}>"


HELPER_NAMES = frozenset(name for name in vars(EnumFlag)
                         if not name.startswith('_'))
'''EnumFlag's own attributes; flags may not use these names.'''
