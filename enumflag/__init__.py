# coding: utf-8

'''
Enum flags: each member of an EnumFlag enum is one bit, and plain ints are sets
of those bits.

  import enum
  from enumflag import EnumFlag, NO_FLAGS, add_flag, describe_flags

  class Permission(EnumFlag):
      READ  = enum.auto()
      WRITE = enum.auto()
      EXEC  = enum.auto()

  perms = add_flag(NO_FLAGS, Permission.READ)       # 1
  describe_flags(perms | 4, Permission)             # 'READ | EXEC'
'''


# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from .base.exceptions import (
    EnumFlagError,
    FlagWidthError,
    FlagNameError,
    ConfigError,
)

from .base.null import Null, null_or_none

from .base.flags import (
    # ------------------------------
    # Constants
    # ------------------------------
    MAX_FLAGS,
    NO_FLAGS,
    DESCRIBE_NONE,
    DESCRIBE_SEPARATOR,

    # ------------------------------
    # Types
    # ------------------------------
    FlagLike,

    # ------------------------------
    # Single Flags
    # ------------------------------
    bit_value,
    flag_value,
    label,
    binary,

    # ------------------------------
    # Aggregates
    # ------------------------------
    combine,
    all_flags,

    # ------------------------------
    # Queries
    # ------------------------------
    has_flag,
    has_any_flag,
    has_all_flags,
    get_flags,
    describe_flags,

    # ------------------------------
    # Changes
    # ------------------------------
    add_flag,
    remove_flag,
    toggle_flag,
    add_flags,
    remove_flags,
    toggle_flags,

    # ------------------------------
    # Maybe-Absent Flag Sets
    # ------------------------------
    has_flag_or_false,
    has_any_flag_or_false,
    has_all_flags_or_false,
    or_no_flags,
)

from .base.enum import EnumFlag


# -----------------------------------------------------------------------------
# Exports
# -----------------------------------------------------------------------------

__all__ = [
    # Exceptions
    'EnumFlagError',
    'FlagWidthError',
    'FlagNameError',
    'ConfigError',

    # Null
    'Null',
    'null_or_none',

    # Constants
    'MAX_FLAGS',
    'NO_FLAGS',
    'DESCRIBE_NONE',
    'DESCRIBE_SEPARATOR',

    # Types
    'FlagLike',
    'EnumFlag',

    # Functions
    'bit_value',
    'flag_value',
    'label',
    'binary',
    'combine',
    'all_flags',
    'has_flag',
    'has_any_flag',
    'has_all_flags',
    'get_flags',
    'describe_flags',
    'add_flag',
    'remove_flag',
    'toggle_flag',
    'add_flags',
    'remove_flags',
    'toggle_flags',
    'has_flag_or_false',
    'has_any_flag_or_false',
    'has_all_flags_or_false',
    'or_no_flags',
]
