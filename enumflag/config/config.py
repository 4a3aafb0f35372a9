# coding: utf-8

'''
Configuration file reader for enumflag.

A configuration is one YAML document:

  doc-type: configuration
  logging:
    level: info
  flags:
    Permission:
      - READ
      - WRITE

`flags` declares EnumFlag enums by name; each is a list of member names in
declaration (bit) order.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Optional, Any, Mapping, Dict, Type

import logging
import pathlib

import yaml


from enumflag.logs            import log
from enumflag.base.exceptions import ConfigError, EnumFlagError
from enumflag.base            import flags as flagset
from enumflag.base.flags      import MAX_FLAGS
from enumflag.base.enum       import EnumFlag, HELPER_NAMES


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

THIS_DIR = pathlib.Path(__file__).resolve().parent
DEFAULT_NAME = 'config.enumflag.yaml'

DOC_TYPE = 'configuration'
'''Required value of a config document's 'doc-type' key.'''


# -----------------------------------------------------------------------------
# Code
# -----------------------------------------------------------------------------

def default_path() -> Optional[pathlib.Path]:
    '''Returns absolute path to the DEFAULT config file.

    Returns None if file does not exist.

    '''
    path = THIS_DIR / DEFAULT_NAME
    if not path.exists():
        return None
    return path


class Configuration:
    '''Config data for logging and for flag enums declared in YAML.'''

    _DOTTED_NAME = 'enumflag.config.config'

    # -------------------------------------------------------------------------
    # Initialization
    # -------------------------------------------------------------------------

    def _define_vars(self) -> None:
        '''
        Instance variable definitions, type hinting, doc strings, etc.
        '''

        self._path: Optional[pathlib.Path] = None
        '''
        Path to our config file, if we loaded from one.
        '''

        self._config: Dict[Any, Any] = {}
        '''
        Our storage of the config data itself.
        '''

        self._enums: Dict[str, Type[EnumFlag]] = {}
        '''
        EnumFlag classes created from the 'flags' section, by name.
        '''

        self._logger: logging.Logger = log.get_logger(self.dotted())
        '''
        Our named sub-logger of the root enumflag logger.
        '''

    def __init__(self,
                 config_path:   Optional[pathlib.Path]    = None,
                 data:          Optional[Mapping[str, Any]] = None,
                 apply_logging: bool                      = True) -> None:
        '''
        Create a Configuration from `data` if supplied, else by loading the
        YAML file at `config_path` (or `default_path()` if that is None too).

        If `apply_logging`, the root enumflag logger is set to our configured
        log level.

        Raises ConfigError
        '''
        self._define_vars()

        if data is not None:
            log.debug("Creating Configuration from supplied data...",
                      enumflag_logger=self._logger)
            self._config = data
        else:
            self._path = config_path or default_path()
            log.debug("Configuration path (using {}): {}",
                      ('provided' if config_path else 'default'),
                      self._path,
                      enumflag_logger=self._logger)
            self._config = self._load(self._path)

        self._validate()

        if apply_logging:
            log.set_level(self.log_level())

        log.debug("Done initializing Configuration.",
                  enumflag_logger=self._logger)

    # -------------------------------------------------------------------------
    # Properties: Generic
    # -------------------------------------------------------------------------

    @classmethod
    def dotted(klass: 'Configuration') -> str:
        '''
        Dotted name for this class.
        '''
        return klass._DOTTED_NAME

    @property
    def path(self) -> Optional[pathlib.Path]:
        return self._path

    # -------------------------------------------------------------------------
    # Load Config Stuff
    # -------------------------------------------------------------------------

    def _load(self, path: Optional[pathlib.Path]) -> Dict[Any, Any]:
        '''
        Load our configuration data from its file.

        Raises ConfigError
        '''
        if not path:
            raise log.exception(
                ConfigError,
                "No config path supplied and no default config file exists "
                "at: {}",
                THIS_DIR / DEFAULT_NAME,
                enumflag_logger=self._logger)

        try:
            with pathlib.Path(path).open('r') as file_obj:
                loaded = yaml.safe_load(file_obj)

        except (OSError, yaml.YAMLError) as error:
            raise log.exception(
                ConfigError,
                "Could not load config file: {}",
                path,
                enumflag_logger=self._logger) from error

        log.debug("Loaded config file: {}",
                  path,
                  enumflag_logger=self._logger)
        return loaded

    def _validate(self) -> None:
        '''
        Make sure the config looks like a config before anyone asks us for
        anything.

        Raises ConfigError
        '''
        if not isinstance(self._config, Mapping):
            raise log.exception(
                ConfigError,
                "Config must be a mapping; got: {}",
                type(self._config).__name__,
                enumflag_logger=self._logger)

        doc_type = self._config.get('doc-type')
        if doc_type != DOC_TYPE:
            raise log.exception(
                ConfigError,
                "Config 'doc-type' must be '{}'; got: '{}'",
                DOC_TYPE, doc_type,
                enumflag_logger=self._logger)

        # Resolve now so a bad level fails at load, not at use.
        self.log_level()

        declared = self.get('flags')
        if declared is None:
            return
        if not isinstance(declared, Mapping):
            raise log.exception(
                ConfigError,
                "Config 'flags' must be a mapping of enum name to member "
                "names; got: {}",
                type(declared).__name__,
                enumflag_logger=self._logger)

        for name, members in declared.items():
            self._validate_members(name, members)

    def _validate_members(self, name: str, members: Any) -> None:
        '''
        Checks one 'flags' entry: a list of unique member name strings.

        Raises ConfigError
        '''
        if (not isinstance(members, list)
                or not all(isinstance(each, str) for each in members)):
            raise log.exception(
                ConfigError,
                "Config flags '{}' must be a list of member names; got: {}",
                name, members,
                enumflag_logger=self._logger)

        if len(set(members)) != len(members):
            raise log.exception(
                ConfigError,
                "Config flags '{}' has duplicate member names: {}",
                name, members,
                enumflag_logger=self._logger)

        if len(members) > MAX_FLAGS:
            raise log.exception(
                ConfigError,
                "Config flags '{}' has {} members; at most {} fit in a "
                "flag set.",
                name, len(members), MAX_FLAGS,
                enumflag_logger=self._logger)

        hidden = [each for each in members if each in HELPER_NAMES]
        if hidden:
            raise log.exception(
                ConfigError,
                "Config flags '{}' has member names that EnumFlag "
                "reserves: {}",
                name, hidden,
                enumflag_logger=self._logger)

    # -------------------------------------------------------------------------
    # Config Data
    # -------------------------------------------------------------------------

    def get(self, *keys: str) -> Any:
        '''
        Get a value from the config by walking down `keys`:
          config.get('logging', 'level')

        Returns None if any key along the way doesn't exist.
        '''
        data = self._config
        for key in keys:
            if not isinstance(data, Mapping):
                return None
            data = data.get(key)
            if data is None:
                return None
        return data

    def log_level(self) -> log.Level:
        '''
        Returns the configured log level, or the default if not configured.

        Raises ConfigError
        '''
        level = self.get('logging', 'level')
        if level is None:
            return log.DEFAULT_LEVEL

        try:
            if isinstance(level, str):
                return log.Level.from_name(level)
            return log.Level(level)

        except (KeyError, ValueError) as error:
            raise log.exception(
                ConfigError,
                "Unknown log level in config: '{}'",
                level,
                enumflag_logger=self._logger) from error

    # -------------------------------------------------------------------------
    # Flag Enums
    # -------------------------------------------------------------------------

    def enum(self, name: str) -> Type[EnumFlag]:
        '''
        Returns the EnumFlag class declared as `name` in the config's 'flags'.
        The same class is returned every time.

        Raises ConfigError if there is no such declaration.
        '''
        existing = self._enums.get(name)
        if existing is not None:
            return existing

        members = self.get('flags', name)
        if members is None:
            raise log.exception(
                ConfigError,
                "No flags named '{}' in config.",
                name,
                enumflag_logger=self._logger)

        # Python 3.11 wraps errors from member creation in a RuntimeError.
        try:
            created = EnumFlag(name, members)
        except (TypeError, ValueError, RuntimeError, EnumFlagError) as error:
            raise log.exception(
                ConfigError,
                "Cannot create flags '{}' from config members: {}",
                name, members,
                enumflag_logger=self._logger) from error

        log.debug("Created flag enum '{}' from config: {}",
                  name,
                  flagset.describe_flags(flagset.all_flags(created), created),
                  enumflag_logger=self._logger)
        self._enums[name] = created
        return created

    def enums(self) -> Dict[str, Type[EnumFlag]]:
        '''
        Returns all EnumFlag classes declared in the config, by name.
        '''
        declared = self.get('flags') or {}
        return {name: self.enum(name) for name in declared}

    # -------------------------------------------------------------------------
    # To String
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return (f"{self.__class__.__name__}("
                f"path={self._path}, "
                f"level={self.log_level().name}, "
                f"flags={list(self.get('flags') or ())})")
