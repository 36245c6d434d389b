"""
Transaction scheduler source code.

Schedules future money transfers and prices them from a table of
configurable fee rules.
"""
from . import config
from . import domain
from . import exceptions
from . import utils

__version__ = "1.0.0"

__all__ = [
    'config',
    'domain',
    'exceptions',
    'utils',
]
