# coding: utf-8

'''
YAML configuration: log level, and flag enums declared in config files.
'''

from .config import Configuration, default_path


__all__ = [
    'Configuration',
    'default_path',
]
