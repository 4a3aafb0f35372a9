# coding: utf-8

'''
Helper for unit test data.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Union
import pathlib


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

THIS_DIR = pathlib.Path(__file__).resolve().parent
''''enumflag/zest/' directory'''

DATA_DIR = THIS_DIR / "zata"
''''enumflag/zest/zata' directory - parent for all testing data'''

DEFAULT_CONFIG_TEST = pathlib.Path('config.testing.yaml')
'''
Default configuration file for most tests.
'''


# -----------------------------------------------------------------------------
# Paths
# -----------------------------------------------------------------------------

def config(filepath: Union[pathlib.Path, str, None] = None) -> pathlib.Path:
    '''
    Returns pathlib.Path to config test data for `filepath`, or the default
    testing config if `filepath` is None.
    '''
    return DATA_DIR / (filepath or DEFAULT_CONFIG_TEST)
