# coding: utf-8

from ._common import *
from .load import load_from_config, load_from_script

__version__ = '0.1.0'
