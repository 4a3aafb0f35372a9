# coding: utf-8

'''
Unit tests for:
  enumflag/base/flags.py
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

import collections
import enum
import itertools


from enumflag.zest.base.unit import ZestBase

from .exceptions             import FlagWidthError
from .null                   import Null
from .enum                   import EnumFlag
from .                       import flags
from .flags                  import NO_FLAGS


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

class EnumX(EnumFlag):
    one = enum.auto()
    two = enum.auto()
    three = enum.auto()
    four = enum.auto()


Loose = collections.namedtuple('Loose', 'index name')
'''Not an enum at all; just has an ordinal and a name.'''


ONE, TWO, THREE, FOUR = EnumX.one, EnumX.two, EnumX.three, EnumX.four


# -----------------------------------------------------------------------------
# Single Flags
# -----------------------------------------------------------------------------

class Test_SingleFlag(ZestBase):

    def test_no_flags(self):
        self.assertEqual(NO_FLAGS, 0)
        self.assertEqual(str(NO_FLAGS), '0')
        self.assertFalse(flags.has_flag(NO_FLAGS, ONE))
        self.assertFalse(flags.has_flag(NO_FLAGS, TWO))

    def test_flag_value(self):
        for member in EnumX:
            self.assertEqual(flags.flag_value(member), 1 << member.index)
            self.assertEqual(flags.flag_value(member), member.value)
            self.assertTrue(flags.has_flag(flags.flag_value(member), member))

    def test_label(self):
        self.assertEqual(flags.label(THREE), 'three')
        self.assertEqual(flags.label(Loose(9, 'jeff')), 'jeff')

    def test_binary(self):
        self.assertEqual(flags.binary(ONE), '00000001')
        self.assertEqual(flags.binary(Loose(7, 'x')), '10000000')
        self.assertEqual(flags.binary(Loose(8, 'x')), '100000000')

    def test_loose_flags(self):
        first = Loose(0, 'first')
        last = Loose(31, 'last')
        self.assertEqual(flags.flag_value(first), 1)
        self.assertEqual(flags.flag_value(last), 2**31)
        self.assertTrue(flags.has_flag(2**31 | 1, last))
        self.assertEqual(flags.describe_flags(2**31, [first, last]), 'last')

    def test_ordinal_out_of_range(self):
        self.capture_logs(True)

        with self.assertRaises(FlagWidthError) as context:
            flags.flag_value(Loose(32, 'too-far'))
        self.assertEqual(context.exception.index, 32)

        # Checked at every use, not just when computing a value directly.
        with self.assertRaises(FlagWidthError):
            flags.has_flag(1, Loose(32, 'too-far'))
        with self.assertRaises(FlagWidthError):
            flags.add_flag(0, Loose(-1, 'negative'))

        self.assertEqual(len(self.logs), 3)

    def test_bit_value(self):
        self.assertEqual(flags.bit_value(0), 1)
        self.assertEqual(flags.bit_value(31), 2**31)
        self.capture_logs(True)
        with self.assertRaises(FlagWidthError):
            flags.bit_value(flags.MAX_FLAGS)


# -----------------------------------------------------------------------------
# Aggregates
# -----------------------------------------------------------------------------

class Test_Aggregate(ZestBase):

    def test_combine(self):
        self.assertEqual(flags.combine([ONE]), 1)
        self.assertEqual(flags.combine([TWO]), 2)
        self.assertEqual(flags.combine([ONE, TWO]), 3)
        self.assertEqual(flags.combine([ONE, TWO, THREE]), 7)
        self.assertEqual(flags.combine([ONE, ONE]), 1)

    def test_combine_empty(self):
        self.assertEqual(flags.combine([]), 0)
        self.assertEqual(flags.combine(iter(())), 0)

    def test_all(self):
        self.assertEqual(flags.all_flags(EnumX), 15)
        self.assertEqual(flags.all_flags(EnumX), flags.combine(EnumX))
        self.assertEqual(flags.all_flags(EnumX), EnumX.all())


# -----------------------------------------------------------------------------
# Queries
# -----------------------------------------------------------------------------

class Test_Query(ZestBase):

    def test_has_flag(self):
        self.assertTrue(flags.has_flag(1, ONE))
        self.assertTrue(flags.has_flag(2, TWO))
        self.assertTrue(flags.has_flag(3, ONE))
        self.assertTrue(flags.has_flag(3, TWO))

        self.assertFalse(flags.has_flag(1, TWO))
        self.assertFalse(flags.has_flag(2, ONE))
        self.assertFalse(flags.has_flag(4, ONE))

    def test_has_any_flag(self):
        self.assertTrue(flags.has_any_flag(1, [ONE, TWO]))
        self.assertTrue(flags.has_any_flag(2, [ONE, TWO]))
        self.assertTrue(flags.has_any_flag(3, [ONE, TWO]))

        self.assertFalse(flags.has_any_flag(4, [ONE, TWO]))
        self.assertFalse(flags.has_any_flag(8, [ONE, TWO]))

    def test_has_any_flag_empty(self):
        for value in (0, 3, 15):
            self.assertFalse(flags.has_any_flag(value, []))

    def test_has_all_flags(self):
        self.assertTrue(flags.has_all_flags(3, [ONE, TWO]))
        self.assertTrue(flags.has_all_flags(7, [ONE, TWO, THREE]))

        self.assertFalse(flags.has_all_flags(1, [ONE, TWO]))
        self.assertFalse(flags.has_all_flags(2, [ONE, TWO]))

    def test_has_all_flags_empty(self):
        for value in (0, 3, 15):
            self.assertTrue(flags.has_all_flags(value, []))

    def test_get_flags(self):
        self.assertEqual(flags.get_flags(1, EnumX), [ONE])
        self.assertEqual(flags.get_flags(2, EnumX), [TWO])
        self.assertEqual(flags.get_flags(1 | 2, EnumX), [ONE, TWO])
        self.assertEqual(flags.get_flags(3, EnumX), [ONE, TWO])

    def test_get_flags_empty(self):
        self.assertEqual(flags.get_flags(0, EnumX), [])
        self.assertEqual(flags.get_flags(15, []), [])

    def test_get_flags_keeps_candidate_order(self):
        candidates = [FOUR, ONE, THREE]
        self.assertEqual(flags.get_flags(15, candidates), [FOUR, ONE, THREE])

    def test_get_flags_is_a_snapshot(self):
        candidates = [ONE, TWO]
        found = flags.get_flags(3, candidates)
        self.assertIsInstance(found, list)

        candidates.append(THREE)
        candidates.remove(ONE)
        self.assertEqual(found, [ONE, TWO])

    def test_describe_flags(self):
        self.assertEqual(flags.describe_flags(1, EnumX), 'one')
        self.assertEqual(flags.describe_flags(3, EnumX), 'one | two')
        self.assertEqual(flags.describe_flags(7, EnumX), 'one | two | three')

    def test_describe_flags_none(self):
        self.assertEqual(flags.describe_flags(0, EnumX), 'none')
        self.assertEqual(flags.describe_flags(0, []), 'none')
        # Bits for flags that aren't candidates don't count.
        self.assertEqual(flags.describe_flags(16, EnumX), 'none')


# -----------------------------------------------------------------------------
# Changes
# -----------------------------------------------------------------------------

class Test_Change(ZestBase):

    def test_add_flag(self):
        self.assertEqual(flags.add_flag(NO_FLAGS, ONE), 1)
        self.assertEqual(flags.add_flag(1, TWO), 3)
        self.assertEqual(flags.add_flag(3, THREE), 7)

    def test_add_flag_idempotent(self):
        self.assertEqual(flags.add_flag(1, ONE), 1)
        self.assertEqual(flags.add_flag(3, ONE), 3)
        for value in range(16):
            for member in EnumX:
                once = flags.add_flag(value, member)
                self.assertTrue(flags.has_flag(once, member))
                self.assertEqual(flags.add_flag(once, member), once)

    def test_remove_flag(self):
        self.assertEqual(flags.remove_flag(3, ONE), 2)
        self.assertEqual(flags.remove_flag(3, TWO), 1)
        self.assertEqual(flags.remove_flag(7, THREE), 3)

    def test_remove_flag_idempotent(self):
        self.assertEqual(flags.remove_flag(1, TWO), 1)
        self.assertEqual(flags.remove_flag(2, ONE), 2)
        for value in range(16):
            for member in EnumX:
                once = flags.remove_flag(value, member)
                self.assertFalse(flags.has_flag(once, member))
                self.assertEqual(flags.remove_flag(once, member), once)

    def test_remove_flag_keeps_other_bits(self):
        self.assertEqual(flags.remove_flag(2**31 | 1, ONE), 2**31)

    def test_toggle_flag(self):
        self.assertEqual(flags.toggle_flag(0, ONE), 1)
        self.assertEqual(flags.toggle_flag(1, TWO), 3)
        self.assertEqual(flags.toggle_flag(1, ONE), 0)
        self.assertEqual(flags.toggle_flag(3, TWO), 1)

    def test_toggle_flag_twice(self):
        self.assertEqual(flags.toggle_flag(flags.toggle_flag(0, ONE), ONE), 0)
        self.assertEqual(flags.toggle_flag(flags.toggle_flag(5, TWO), TWO), 5)
        for value in range(16):
            for member in EnumX:
                twice = flags.toggle_flag(flags.toggle_flag(value, member),
                                          member)
                self.assertEqual(twice, value)


class Test_BulkChange(ZestBase):

    def test_add_flags(self):
        self.assertEqual(flags.add_flags(NO_FLAGS, [ONE, TWO]), 3)
        self.assertEqual(flags.add_flags(NO_FLAGS, [ONE, TWO, THREE]), 7)
        self.assertEqual(flags.add_flags(1, [TWO, THREE]), 7)

    def test_add_flags_idempotent(self):
        self.assertEqual(flags.add_flags(3, [ONE, TWO]), 3)
        self.assertEqual(flags.add_flags(0, [ONE, ONE, ONE]), 1)

    def test_add_flags_empty(self):
        self.assertEqual(flags.add_flags(5, []), 5)

    def test_remove_flags(self):
        self.assertEqual(flags.remove_flags(7, [ONE, TWO]), 4)
        self.assertEqual(flags.remove_flags(15, [ONE, THREE]), 10)

    def test_remove_flags_idempotent(self):
        self.assertEqual(flags.remove_flags(1, [TWO, THREE]), 1)

    def test_remove_flags_empty(self):
        self.assertEqual(flags.remove_flags(5, []), 5)

    def test_toggle_flags(self):
        self.assertEqual(flags.toggle_flags(0, [ONE, TWO]), 3)
        self.assertEqual(flags.toggle_flags(1, [ONE, TWO]), 2)
        self.assertEqual(flags.toggle_flags(3, [ONE, TWO]), 0)

    def test_toggle_flags_empty(self):
        self.assertEqual(flags.toggle_flags(5, []), 5)

    def test_toggle_flags_parity(self):
        # Odd count flips, even count doesn't. No de-duplication.
        self.assertEqual(flags.toggle_flags(0, [ONE, ONE]), 0)
        self.assertEqual(flags.toggle_flags(0, [ONE, ONE, ONE]), 1)
        self.assertEqual(flags.toggle_flags(4, [THREE, TWO, THREE]), 6)

    def test_order_independent(self):
        members = [ONE, TWO, FOUR]
        for value in (0, 5, 10, 15):
            added = flags.add_flags(value, members)
            removed = flags.remove_flags(value, members)
            toggled = flags.toggle_flags(value, members)
            for order in itertools.permutations(members):
                self.assertEqual(flags.add_flags(value, order), added)
                self.assertEqual(flags.remove_flags(value, order), removed)
                self.assertEqual(flags.toggle_flags(value, order), toggled)

    def test_bulk_takes_iterables(self):
        self.assertEqual(flags.add_flags(0, iter([ONE, TWO])), 3)
        self.assertEqual(flags.remove_flags(3, (each for each in [ONE])), 2)
        self.assertEqual(flags.toggle_flags(0, EnumX), 15)

    def test_input_unchanged(self):
        value = 5
        flags.add_flag(value, TWO)
        flags.remove_flags(value, [ONE, THREE])
        flags.toggle_flags(value, EnumX)
        self.assertEqual(value, 5)


# -----------------------------------------------------------------------------
# Maybe-Absent Flag Sets
# -----------------------------------------------------------------------------

class Test_OrFalse(ZestBase):

    def test_has_flag_or_false(self):
        self.assertFalse(flags.has_flag_or_false(None, ONE))
        self.assertFalse(flags.has_flag_or_false(Null(), ONE))

        self.assertTrue(flags.has_flag_or_false(3, ONE))
        self.assertFalse(flags.has_flag_or_false(3, THREE))

    def test_has_any_flag_or_false(self):
        self.assertFalse(flags.has_any_flag_or_false(None, [ONE, TWO]))
        self.assertFalse(flags.has_any_flag_or_false(Null(), [ONE, TWO]))

        self.assertTrue(flags.has_any_flag_or_false(1, [ONE, TWO]))
        self.assertFalse(flags.has_any_flag_or_false(1, [THREE, FOUR]))

    def test_has_all_flags_or_false(self):
        self.assertFalse(flags.has_all_flags_or_false(None, [ONE, TWO]))
        self.assertFalse(flags.has_all_flags_or_false(Null(), [ONE, TWO]))

        self.assertTrue(flags.has_all_flags_or_false(3, [ONE, TWO]))
        self.assertFalse(flags.has_all_flags_or_false(3, [ONE, THREE]))

    def test_has_all_flags_or_false_empty(self):
        # Absent is "no information", so False even with nothing to check...
        self.assertFalse(flags.has_all_flags_or_false(None, []))
        self.assertFalse(flags.has_all_flags_or_false(Null(), []))
        # ...but a present empty set still follows has_all_flags().
        self.assertTrue(flags.has_all_flags_or_false(0, []))
        self.assertTrue(flags.has_all_flags(0, []))

    def test_zero_is_present(self):
        self.assertFalse(flags.has_flag_or_false(0, ONE))
        self.assertEqual(flags.or_no_flags(0), 0)

    def test_or_no_flags(self):
        self.assertEqual(flags.or_no_flags(None), NO_FLAGS)
        self.assertEqual(flags.or_no_flags(None), 0)
        self.assertEqual(flags.or_no_flags(Null()), 0)
        self.assertEqual(flags.or_no_flags(5), 5)


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m enumflag.base.zest_flags

if __name__ == '__main__':
    import unittest
    unittest.main()
