# coding: utf-8

'''
Unit tests for:
  enumflag/config/config.py
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from enumflag.zest.base.unit  import ZestBase
from enumflag.zest            import zpath
from enumflag.logs            import log
from enumflag.base.exceptions import ConfigError
from enumflag.base.enum       import EnumFlag
from enumflag.base            import flags

from .config import Configuration, default_path


# -----------------------------------------------------------------------------
# Tests
# -----------------------------------------------------------------------------

class Test_Configuration(ZestBase):

    def pre_set_up(self) -> None:
        self.config_path = zpath.config()

    def test_init(self):
        self.assertIsNotNone(self.config)
        self.assertEqual(self.config.path, zpath.config())

    def test_get(self):
        self.assertEqual(self.config.get('doc-type'), 'configuration')
        self.assertEqual(self.config.get('logging', 'level'), 'warning')
        self.assertEqual(self.config.get('flags', 'EnumX'),
                         ['one', 'two', 'three', 'four'])
        self.assertIsNone(self.config.get('flags', 'Jeff'))
        self.assertIsNone(self.config.get('doc-type', 'nope'))

    def test_log_level_applied(self):
        self.assertEqual(self.config.log_level(), log.Level.WARNING)
        self.assertEqual(log.get_level(), log.Level.WARNING)

    def test_enum(self):
        EnumX = self.config.enum('EnumX')
        self.assertTrue(issubclass(EnumX, EnumFlag))
        self.assertEqual([each.value for each in EnumX], [1, 2, 4, 8])
        self.assertEqual(EnumX.one.binary, '00000001')
        self.assertEqual(EnumX.all(), 15)

        # Same class every time.
        self.assertIs(self.config.enum('EnumX'), EnumX)

    def test_enum_with_flags(self):
        EnumX = self.config.enum('EnumX')
        value = flags.add_flags(flags.NO_FLAGS, [EnumX.one, EnumX.two])
        self.assertEqual(value, 3)
        self.assertEqual(flags.get_flags(value, EnumX),
                         [EnumX.one, EnumX.two])
        self.assertEqual(flags.describe_flags(value, EnumX), 'one | two')

    def test_enums(self):
        enums = self.config.enums()
        self.assertEqual(set(enums), {'EnumX', 'Permission'})
        self.assertEqual(enums['Permission'].describe(5), 'READ | EXEC')

    def test_enum_missing(self):
        self.capture_logs(True)
        with self.assertRaises(ConfigError):
            self.config.enum('Jeff')


class Test_Configuration_Data(ZestBase):

    def set_up(self):
        self.capture_logs(True)

    def test_default(self):
        self.assertIsNotNone(default_path())
        config = Configuration(apply_logging=False)
        self.assertEqual(config.path, default_path())
        self.assertEqual(config.log_level(), log.Level.INFO)
        self.assertEqual(config.enums(), {})

    def test_from_data(self):
        config = Configuration(data={
            'doc-type': 'configuration',
            'logging': {'level': 10},
            'flags': {'Jeff': ['JEFF', 'GEOFF']},
        })
        self.assertIsNone(config.path)
        self.assertEqual(config.log_level(), log.Level.DEBUG)
        self.assertEqual(log.get_level(), log.Level.DEBUG)
        self.assertEqual(config.enum('Jeff').GEOFF.value, 2)

    def test_no_logging_section(self):
        config = Configuration(data={'doc-type': 'configuration'},
                               apply_logging=False)
        self.assertEqual(config.log_level(), log.DEFAULT_LEVEL)

    def test_widest(self):
        names = [f'f{index:02d}' for index in range(flags.MAX_FLAGS)]
        config = Configuration(data={
            'doc-type': 'configuration',
            'flags': {'Wide': names},
        }, apply_logging=False)
        self.assertEqual(config.enum('Wide').f31.value, 2**31)


class Test_Configuration_Errors(ZestBase):

    def set_up(self):
        self.capture_logs(True)

    def assertConfigError(self, **kwargs):
        with self.assertRaises(ConfigError):
            Configuration(apply_logging=False, **kwargs)
        self.assertTrue(self.logs)

    def test_missing_file(self):
        self.assertConfigError(config_path=zpath.config('config.jeff.yaml'))

    def test_bad_yaml(self):
        self.assertConfigError(
            config_path=zpath.config('config.bad-yaml.yaml'))

    def test_bad_doc_type(self):
        self.assertConfigError(
            config_path=zpath.config('config.bad-doc-type.yaml'))

    def test_not_a_mapping(self):
        self.assertConfigError(data=['doc-type', 'configuration'])

    def test_bad_log_level(self):
        self.assertConfigError(data={
            'doc-type': 'configuration',
            'logging': {'level': 'loud'},
        })

    def test_flags_not_a_mapping(self):
        self.assertConfigError(data={
            'doc-type': 'configuration',
            'flags': ['one', 'two'],
        })

    def test_members_not_strings(self):
        self.assertConfigError(data={
            'doc-type': 'configuration',
            'flags': {'EnumX': ['one', 2]},
        })

    def test_members_duplicated(self):
        self.assertConfigError(data={
            'doc-type': 'configuration',
            'flags': {'EnumX': ['one', 'one']},
        })

    def test_too_many_members(self):
        names = [f'f{index:02d}' for index in range(flags.MAX_FLAGS + 1)]
        self.assertConfigError(data={
            'doc-type': 'configuration',
            'flags': {'TooWide': names},
        })

    def test_helper_member_name(self):
        self.assertConfigError(data={
            'doc-type': 'configuration',
            'flags': {'Perm': ['read', 'all']},
        })

    def test_bad_member_name(self):
        config = Configuration(data={
            'doc-type': 'configuration',
            'flags': {'EnumX': ['_sunder_']},
        }, apply_logging=False)
        with self.assertRaises(ConfigError):
            config.enum('EnumX')


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m enumflag.config.zest_config

if __name__ == '__main__':
    import unittest
    unittest.main()
