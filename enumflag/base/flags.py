# coding: utf-8

'''
Flag Set functions.

A flag set is just an int: bit N is set when the flag with ordinal N is in the
set. Nothing here mutates anything; "changing" a flag set returns a new int.

Flags are anything with an int `index` and a str `name` (see FlagLike) -
usually members of an EnumFlag subclass.

The `*_or_false` functions and `or_no_flags` take a flag set that may be
absent (None or Null) and treat absence as "no information".
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Optional, Iterable, List, Protocol


from functools import reduce


from enumflag.logs            import log
from enumflag.base.null       import NullNoneOr, null_or_none
from enumflag.base.exceptions import FlagWidthError


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

MAX_FLAGS = 32
'''
Flag sets are 32 bits wide, so ordinals must be in the range [0, MAX_FLAGS).
'''

NO_FLAGS = 0
'''The empty flag set.'''

BINARY_WIDTH = 8
'''Minimum width of `binary()` strings; they are zero-padded up to this.'''

DESCRIBE_NONE = 'none'
'''`describe_flags()` of an empty flag set.'''

DESCRIBE_SEPARATOR = ' | '
'''`describe_flags()` joins labels with this.'''


# -----------------------------------------------------------------------------
# Types
# -----------------------------------------------------------------------------

class FlagLike(Protocol):
    '''
    Anything with a stable ordinal and a stable name.
    '''

    @property
    def index(self) -> int:
        ...

    @property
    def name(self) -> str:
        ...


# -----------------------------------------------------------------------------
# Single Flags
# -----------------------------------------------------------------------------

def bit_value(index: int, name: Optional[str] = None) -> int:
    '''
    Returns the bit for ordinal `index`: `1 << index`.

    Raises FlagWidthError if `index` doesn't fit in a 32 bit flag set.
    '''
    if index < 0 or index >= MAX_FLAGS:
        raise log.exception(
            FlagWidthError,
            "Flag '{}' has ordinal {}; flag ordinals must be in [0, {}).",
            name or '(unnamed)', index, MAX_FLAGS,
            error_data={
                'index': index,
                'name': name,
            })

    return 1 << index


def flag_value(flag: FlagLike) -> int:
    '''
    Returns the bit value of `flag`. The ordinal is checked every call.
    '''
    return bit_value(flag.index, flag.name)


def label(flag: FlagLike) -> str:
    '''
    Returns `flag`'s declared name, as-is.
    '''
    return flag.name


def binary(flag: FlagLike) -> str:
    '''
    Returns `flag`'s bit value as binary digits, zero-padded to at least
    BINARY_WIDTH characters. Longer for ordinals past 7; never truncated.
    '''
    return format(flag_value(flag), f'0{BINARY_WIDTH}b')


# -----------------------------------------------------------------------------
# Aggregates
# -----------------------------------------------------------------------------

def combine(flags: Iterable[FlagLike]) -> int:
    '''
    OR together the bit values of all `flags`. Empty is NO_FLAGS.
    '''
    return reduce(lambda total, flag: total | flag_value(flag),
                  flags,
                  NO_FLAGS)


def all_flags(flags: Iterable[FlagLike]) -> int:
    '''
    Combined value of a whole flag enum (or any sequence of its members).

    For an enum with N members, this is `2**N - 1`.
    '''
    return combine(flags)


# -----------------------------------------------------------------------------
# Queries
# -----------------------------------------------------------------------------

def has_flag(flags: int, flag: FlagLike) -> bool:
    '''
    Returns True if `flag`'s bit is set in `flags`.
    '''
    return (flags & flag_value(flag)) != 0


def has_any_flag(flags: int, check: Iterable[FlagLike]) -> bool:
    '''
    Returns True if at least one of `check` is set in `flags`.

    False for an empty `check`.
    '''
    return any(has_flag(flags, each) for each in check)


def has_all_flags(flags: int, check: Iterable[FlagLike]) -> bool:
    '''
    Returns True if every one of `check` is set in `flags`.

    True for an empty `check`.
    '''
    return all(has_flag(flags, each) for each in check)


def get_flags(flags: int, candidates: Iterable[FlagLike]) -> List[FlagLike]:
    '''
    Returns a new list of the `candidates` which are set in `flags`, in
    `candidates` order.

    `candidates` is usually a whole EnumFlag class.
    '''
    return [each for each in candidates if has_flag(flags, each)]


def describe_flags(flags: int, candidates: Iterable[FlagLike]) -> str:
    '''
    Returns the labels of the `candidates` set in `flags`, joined:
      'one | two'

    Returns 'none' if nothing is set.
    '''
    present = get_flags(flags, candidates)
    if not present:
        return DESCRIBE_NONE
    return DESCRIBE_SEPARATOR.join(label(each) for each in present)


# -----------------------------------------------------------------------------
# Changes
# -----------------------------------------------------------------------------

def add_flag(flags: int, flag: FlagLike) -> int:
    '''
    Returns `flags` with `flag` set. Adding a set flag changes nothing.
    '''
    return flags | flag_value(flag)


def remove_flag(flags: int, flag: FlagLike) -> int:
    '''
    Returns `flags` with `flag` cleared. Removing a cleared flag changes
    nothing.
    '''
    return flags & ~flag_value(flag)


def toggle_flag(flags: int, flag: FlagLike) -> int:
    '''
    Returns `flags` with `flag` flipped. Toggling twice is a no-op.
    '''
    return flags ^ flag_value(flag)


def add_flags(flags: int, each: Iterable[FlagLike]) -> int:
    return reduce(add_flag, each, flags)


def remove_flags(flags: int, each: Iterable[FlagLike]) -> int:
    return reduce(remove_flag, each, flags)


def toggle_flags(flags: int, each: Iterable[FlagLike]) -> int:
    '''
    Toggles each of `each` in turn. Duplicates are not collapsed: a flag listed
    twice ends up where it started.
    '''
    return reduce(toggle_flag, each, flags)


# -----------------------------------------------------------------------------
# Maybe-Absent Flag Sets
# -----------------------------------------------------------------------------

def has_flag_or_false(flags: NullNoneOr[int], flag: FlagLike) -> bool:
    '''
    `has_flag()`, or False if `flags` is None/Null.
    '''
    if null_or_none(flags):
        return False
    return has_flag(flags, flag)


def has_any_flag_or_false(flags: NullNoneOr[int],
                          check: Iterable[FlagLike]) -> bool:
    '''
    `has_any_flag()`, or False if `flags` is None/Null.
    '''
    if null_or_none(flags):
        return False
    return has_any_flag(flags, check)


def has_all_flags_or_false(flags: NullNoneOr[int],
                           check: Iterable[FlagLike]) -> bool:
    '''
    `has_all_flags()`, or False if `flags` is None/Null.

    NOTE: Absent is False even for an empty `check`, whereas
    `has_all_flags(NO_FLAGS, [])` is True.
    '''
    if null_or_none(flags):
        return False
    return has_all_flags(flags, check)


def or_no_flags(flags: NullNoneOr[int]) -> int:
    '''
    Returns `flags`, or NO_FLAGS if it is None/Null.
    '''
    if null_or_none(flags):
        return NO_FLAGS
    return flags
