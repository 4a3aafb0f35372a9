# coding: utf-8

'''
Unit tests for:
  enumflag/base/enum.py
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

import enum

from enumflag.zest.base.unit  import ZestBase
from enumflag.logs            import log

from .exceptions              import FlagWidthError, FlagNameError
from .enum                    import EnumFlag, HELPER_NAMES
from .flags                   import MAX_FLAGS


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

class EnumX(EnumFlag):
    one = enum.auto()
    two = enum.auto()
    three = enum.auto()
    four = enum.auto()


class Declared(EnumFlag):
    '''Declared values don't matter; position does.'''
    JEFF    = 'jeff'
    JEFFORY = 42
    GEOFF   = ()


def _names(count: int):
    return [f'f{index:02d}' for index in range(count)]


# -----------------------------------------------------------------------------
# Tests
# -----------------------------------------------------------------------------

class Test_EnumFlag(ZestBase):

    def test_value(self):
        self.assertEqual(EnumX.one.value, 1)
        self.assertEqual(EnumX.two.value, 2)
        self.assertEqual(EnumX.three.value, 4)
        self.assertEqual(EnumX.four.value, 8)

    def test_index(self):
        for position, member in enumerate(EnumX):
            self.assertEqual(member.index, position)
            self.assertEqual(member.value, 1 << member.index)

    def test_declared_values_ignored(self):
        self.assertEqual(Declared.JEFF.value, 1)
        self.assertEqual(Declared.JEFFORY.value, 2)
        self.assertEqual(Declared.GEOFF.value, 4)
        self.assertEqual(len(Declared), 3)

    def test_combine_with_or(self):
        self.assertEqual(EnumX.one.value | EnumX.two.value, 3)
        self.assertEqual(EnumX.one.value | EnumX.three.value, 5)

    def test_label(self):
        self.assertEqual(EnumX.one.label, 'one')
        self.assertEqual(EnumX.two.label, 'two')
        self.assertEqual(Declared.JEFFORY.label, 'JEFFORY')

    def test_binary(self):
        self.assertEqual(EnumX.one.binary, '00000001')
        self.assertEqual(EnumX.two.binary, '00000010')
        self.assertEqual(EnumX.three.binary, '00000100')
        self.assertEqual(EnumX.four.binary, '00001000')

    def test_lookup_by_value(self):
        self.assertIs(EnumX(4), EnumX.three)
        self.assertIs(EnumX['four'], EnumX.four)

    def test_all(self):
        self.assertEqual(EnumX.all(), 15)
        self.assertEqual(Declared.all(), 7)

    def test_flags_in(self):
        self.assertEqual(EnumX.flags_in(3), [EnumX.one, EnumX.two])
        self.assertEqual(EnumX.flags_in(0), [])

    def test_describe(self):
        self.assertEqual(EnumX.describe(5), 'one | three')
        self.assertEqual(EnumX.describe(0), 'none')

    def test_repr(self):
        self.assertEqual(repr(EnumX.two), '<EnumX.two: 00000010>')


class Test_EnumFlag_Functional(ZestBase):

    def test_functional_api(self):
        Permission = EnumFlag('Permission', ['READ', 'WRITE', 'EXEC'])
        self.assertEqual([each.value for each in Permission], [1, 2, 4])
        self.assertEqual(Permission.WRITE.index, 1)
        self.assertEqual(Permission.all(), 7)
        self.assertEqual(Permission.describe(6), 'WRITE | EXEC')

    def test_widest(self):
        Wide = EnumFlag('Wide', _names(MAX_FLAGS))
        self.assertEqual(Wide.f31.index, 31)
        self.assertEqual(Wide.f31.value, 2**31)
        self.assertEqual(Wide.f08.binary, '100000000')
        self.assertEqual(Wide.all(), 2**32 - 1)

    def test_too_wide(self):
        self.capture_logs(True)

        error = self.assertRaisesUnwrapped(FlagWidthError,
                                           EnumFlag,
                                           'TooWide',
                                           _names(MAX_FLAGS + 1))
        self.assertEqual(error.index, MAX_FLAGS)

        # Logged on its way out.
        self.assertTrue(self.logs)
        level, output = self.logs[-1]
        self.assertEqual(level, log.Level.ERROR)
        self.assertIn('TooWide[32]', output)

    def test_helper_names(self):
        self.assertLessEqual({'index', 'label', 'binary',
                              'all', 'flags_in', 'describe'},
                             HELPER_NAMES)

    def test_helper_name_rejected(self):
        self.capture_logs(True)

        for name in ('all', 'describe', 'flags_in', 'index'):
            with self.subTest(name=name):
                error = self.assertRaisesUnwrapped(FlagNameError,
                                                   EnumFlag,
                                                   'Perm',
                                                   ['read', name])
                self.assertEqual(error.name, name)

        level, output = self.logs[-1]
        self.assertEqual(level, log.Level.ERROR)
        self.assertIn('Perm.index', output)

    def test_helper_name_rejected_in_class(self):
        self.capture_logs(True)

        def declare():
            class Perm(EnumFlag):
                read = enum.auto()
                all = enum.auto()
            return Perm

        error = self.assertRaisesUnwrapped(FlagNameError, declare)
        self.assertEqual(error.name, 'all')

    def test_helper_name_other_case(self):
        Perm = EnumFlag('Perm', ['READ', 'ALL'])
        self.assertEqual(Perm.ALL.value, 2)
        self.assertEqual(Perm.all(), 3)
        self.assertEqual(Perm.describe(Perm.all()), 'READ | ALL')


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m enumflag.base.zest_enum

if __name__ == '__main__':
    import unittest
    unittest.main()
