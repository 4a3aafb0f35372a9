# coding: utf-8

'''
Unit tests for:
  enumflag/base/null.py
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from enumflag.zest.base.unit import ZestBase

from .null import Null, null_or_none


# -----------------------------------------------------------------------------
# Tests
# -----------------------------------------------------------------------------

class Test_Null(ZestBase):

    def test_singleton(self):
        self.assertIs(Null(), Null())

    def test_falsy(self):
        self.assertFalse(Null())
        self.assertFalse(bool(Null()))

    def test_no_attributes(self):
        with self.assertRaises(AttributeError):
            Null().jeff = 'jeff'

    def test_to_string(self):
        self.assertEqual(repr(Null()), 'Null( )')
        self.assertEqual(str(Null()), 'Null')

    def test_null_or_none(self):
        self.assertTrue(null_or_none(None))
        self.assertTrue(null_or_none(Null()))
        self.assertFalse(null_or_none(0))
        self.assertFalse(null_or_none(False))
        self.assertFalse(null_or_none(''))


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m enumflag.base.zest_null

if __name__ == '__main__':
    import unittest
    unittest.main()
