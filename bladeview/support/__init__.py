"""
Support Classes
"""

from bladeview.support.config import Repository
from bladeview.support.env_helper import EnvHelper
from bladeview.support.filesystem import Filesystem
from bladeview.support.str import Str

__all__ = [
    'Repository',
    'EnvHelper',
    'Filesystem',
    'Str',
]
